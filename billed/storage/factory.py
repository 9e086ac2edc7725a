import logging

from billed.settings import settings
from billed.storage.base import ProofStorage

logger = logging.getLogger(__name__)


def get_proof_storage() -> ProofStorage:
    """Proof storage for the local stores, chosen by ``BILLED_STORAGE_BACKEND``."""
    backend = settings.storage_backend

    if backend == "local":
        from billed.storage.local import LocalProofStorage

        storage: ProofStorage = LocalProofStorage(settings.storage_local_path, prefix=settings.storage_prefix)
    elif backend == "s3":
        from billed.storage.s3 import S3ProofStorage

        storage = S3ProofStorage(
            bucket=settings.s3_bucket,
            region=settings.s3_region,
            access_key_id=settings.s3_access_key_id,
            secret_access_key=settings.s3_secret_access_key,
            endpoint_url=settings.s3_endpoint_url,
            url_expiry=settings.s3_url_expiry,
            prefix=settings.storage_prefix,
        )
    else:
        raise ValueError(f"Unsupported storage backend: {backend}")

    logger.info("Proofs stored with %s backend under %r", backend, settings.storage_prefix)
    return storage
