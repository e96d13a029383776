"""Transactional scopes shared by the reservation use cases."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.errors import StorageError

logger = logging.getLogger(__name__)


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Commit everything written inside the block, or nothing at all.

    Repositories only flush; the commit happens here once the block exits
    cleanly. Any failure rolls the session back. Database errors are logged
    and re-raised as :class:`StorageError`.
    """

    try:
        yield session
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Transaction rolled back after a storage failure")
        raise StorageError("The reservation store is unavailable") from exc
    except BaseException:
        session.rollback()
        raise


@contextmanager
def read_scope(session: Session) -> Iterator[Session]:
    """Run queries that write nothing, reporting database errors as :class:`StorageError`."""

    try:
        yield session
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Read failed against the reservation store")
        raise StorageError("The reservation store is unavailable") from exc


__all__ = ["read_scope", "transaction"]
