"""Index provisioning."""

from __future__ import annotations

import logging

from pdf_rag.errors import ProvisioningError
from pdf_rag.retrieval.base import VectorStoreBase

logger = logging.getLogger(__name__)


def provision_index(store: VectorStoreBase, *, dimension: int, metric: str) -> bool:
    """Make sure ``store.index_name`` exists.

    Returns ``True`` when the index was created and ``False`` when it was
    already there.  Running it twice is harmless.

    Raises
    ------
    ProvisioningError
        Listing or creating the index failed.  Not retried.
    """
    try:
        existing = store.list_indexes()
    except Exception as exc:
        raise ProvisioningError(f"Could not list indexes: {exc}") from exc
    logger.info("Existing indexes: %s", existing)

    if store.index_name in existing:
        logger.info("Index %r already exists", store.index_name)
        return False

    try:
        store.create_index(dimension=dimension, metric=metric)
    except Exception as exc:
        raise ProvisioningError(f"Could not create index {store.index_name!r}: {exc}") from exc
    logger.info("Created index %r (dim=%d, metric=%s)", store.index_name, dimension, metric)
    return True
