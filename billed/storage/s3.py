from __future__ import annotations

import logging

try:
    import boto3
except ImportError:  # pragma: no cover
    boto3 = None  # type: ignore[assignment]

from billed.storage.base import ProofStorage

logger = logging.getLogger(__name__)


class S3ProofStorage(ProofStorage):
    """Proofs in an S3 bucket.

    The returned URL is presigned, so it stops working after
    ``url_expiry`` seconds; bills keep the URL they were created with.
    """

    def __init__(
        self,
        bucket: str,
        region: str,
        access_key_id: str,
        secret_access_key: str,
        endpoint_url: str = "",
        url_expiry: int = 604800,
        prefix: str = "",
    ) -> None:
        if boto3 is None:
            raise ImportError("boto3 is required for S3 proof storage. Install it with: pip install billed[s3]")
        if not bucket:
            raise ValueError("An S3 bucket is required for S3 proof storage")
        super().__init__(prefix)
        self.bucket = bucket
        self.url_expiry = url_expiry

        client_kwargs: dict = {
            "region_name": region,
            "aws_access_key_id": access_key_id,
            "aws_secret_access_key": secret_access_key,
        }
        if endpoint_url:
            client_kwargs["endpoint_url"] = endpoint_url
        self.client = boto3.client("s3", **client_kwargs)

    def _write(self, key: str, content: bytes, media_type: str) -> str:
        self.client.put_object(Bucket=self.bucket, Key=key, Body=content, ContentType=media_type)
        logger.debug("Uploaded s3://%s/%s, presigning for %ds", self.bucket, key, self.url_expiry)
        return self.client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self.bucket, "Key": key},
            ExpiresIn=self.url_expiry,
        )
