from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

import psycopg

from app.domain.errors import StoreUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """
    Re-raise any psycopg failure (including pool and statement timeouts)
    as StoreUnavailable. The driver message stays in the log only.
    """
    try:
        yield
    except psycopg.Error as e:
        logger.error("database call failed", extra={"action": action}, exc_info=e)
        raise StoreUnavailable() from e
