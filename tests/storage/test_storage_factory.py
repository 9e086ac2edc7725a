from unittest.mock import patch

import pytest

from billed.storage.local import LocalProofStorage


class TestProofStorageFactory:
    @patch("billed.storage.factory.settings")
    def test_local_storage(self, mock_settings, tmp_path):
        mock_settings.storage_backend = "local"
        mock_settings.storage_local_path = str(tmp_path)
        mock_settings.storage_prefix = "bills"

        from billed.storage.factory import get_proof_storage

        storage = get_proof_storage()
        assert isinstance(storage, LocalProofStorage)
        assert storage.prefix == "bills"

    @patch("billed.storage.factory.settings")
    def test_s3_storage(self, mock_settings):
        mock_settings.storage_backend = "s3"
        mock_settings.storage_prefix = "proofs"
        mock_settings.s3_bucket = "bucket"
        mock_settings.s3_region = "eu-west-3"
        mock_settings.s3_access_key_id = "key"
        mock_settings.s3_secret_access_key = "secret"
        mock_settings.s3_endpoint_url = ""
        mock_settings.s3_url_expiry = 3600

        with patch("billed.storage.s3.boto3"):
            from billed.storage.factory import get_proof_storage
            from billed.storage.s3 import S3ProofStorage

            storage = get_proof_storage()
        assert isinstance(storage, S3ProofStorage)
        assert storage.url_expiry == 3600
        assert storage.prefix == "proofs"

    @patch("billed.storage.factory.settings")
    def test_unsupported_backend(self, mock_settings):
        mock_settings.storage_backend = "ftp"

        from billed.storage.factory import get_proof_storage

        with pytest.raises(ValueError, match="Unsupported storage backend"):
            get_proof_storage()
