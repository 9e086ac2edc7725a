import logging

from billed.settings import settings
from billed.store.base import Store

logger = logging.getLogger(__name__)


def get_store() -> Store:
    backend = settings.store_backend

    if backend == "memory":
        from billed.storage.factory import get_proof_storage
        from billed.store.memory import InMemoryStore

        logger.info("Using store backend: memory")
        return InMemoryStore(storage=get_proof_storage())

    if backend == "sql":
        from billed.db import get_connection
        from billed.storage.factory import get_proof_storage
        from billed.store.sqlalchemy import SQLAlchemyStore

        logger.info("Using store backend: sql")
        return SQLAlchemyStore(get_connection(), get_proof_storage())

    if backend == "http":
        from billed.store.http import HttpStore

        logger.info("Using store backend: http url=%s", settings.api_url)
        return HttpStore(settings.api_url, token=settings.api_token, timeout=settings.api_timeout)

    raise ValueError(f"Unsupported store backend: {backend}")
