from unittest.mock import MagicMock, patch

import pytest

from billed.store.http import HttpStore
from billed.store.memory import InMemoryStore
from billed.store.sqlalchemy import SQLAlchemyStore


class TestStoreFactory:
    @patch("billed.storage.factory.settings")
    @patch("billed.store.factory.settings")
    def test_memory_store(self, mock_settings, mock_storage_settings, tmp_path):
        mock_settings.store_backend = "memory"
        mock_storage_settings.storage_backend = "local"
        mock_storage_settings.storage_local_path = str(tmp_path)
        mock_storage_settings.storage_prefix = "bills"

        from billed.store.factory import get_store

        store = get_store()
        assert isinstance(store, InMemoryStore)
        assert store.storage is not None

    @patch("billed.store.factory.settings")
    def test_sql_store(self, mock_settings):
        mock_settings.store_backend = "sql"

        from billed.store.factory import get_store

        with (
            patch("billed.db.get_connection", return_value=MagicMock()) as mock_conn,
            patch("billed.storage.factory.get_proof_storage", return_value=MagicMock()) as mock_storage,
        ):
            store = get_store()
        assert isinstance(store, SQLAlchemyStore)
        assert store.conn is mock_conn.return_value
        assert store.storage is mock_storage.return_value

    @patch("billed.store.factory.settings")
    def test_http_store(self, mock_settings):
        mock_settings.store_backend = "http"
        mock_settings.api_url = "http://api.test"
        mock_settings.api_token = "tok"
        mock_settings.api_timeout = 5.0

        from billed.store.factory import get_store

        store = get_store()
        assert isinstance(store, HttpStore)
        assert store.token == "tok"
        assert store.client.base_url.host == "api.test"

    @patch("billed.store.factory.settings")
    def test_unsupported_backend(self, mock_settings):
        mock_settings.store_backend = "firebase"

        from billed.store.factory import get_store

        with pytest.raises(ValueError, match="Unsupported store backend"):
            get_store()
