"""Use cases for reading and managing a user's own notifications."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from app.config import get_settings
from app.domain.entities import Notification
from app.domain.errors import ForbiddenError, NotificationNotFound, ValidationError
from app.infrastructure.repositories import NotificationRepository
from app.infrastructure.transaction import read_scope, transaction


def _get_owned_notification(
    repository: NotificationRepository, *, notification_id: str, caller_id: str
) -> Notification:
    notification = repository.get(notification_id)
    if notification is None:
        raise NotificationNotFound(notification_id)
    if notification.user_id != caller_id:
        raise ForbiddenError("You cannot modify another user's notification")
    return notification


def list_notifications(
    session: Session, *, user_id: str, limit: int | None = None
) -> Sequence[Notification]:
    """Return the newest notifications addressed to ``user_id``."""

    if limit is None:
        limit = get_settings().notification_list_limit
    if limit < 1:
        raise ValidationError("limit must be a positive integer")
    with read_scope(session):
        return NotificationRepository(session).list_for_user(user_id, limit=limit)


def count_unread_notifications(session: Session, *, user_id: str) -> int:
    with read_scope(session):
        return NotificationRepository(session).count_unread(user_id)


def mark_notification_read(
    session: Session, *, notification_id: str, caller_id: str
) -> Notification:
    """Mark a notification as read after checking the caller owns it."""

    repository = NotificationRepository(session)
    with transaction(session):
        _get_owned_notification(
            repository, notification_id=notification_id, caller_id=caller_id
        )
        return repository.mark_as_read(notification_id)


def mark_all_notifications_read(session: Session, *, user_id: str) -> int:
    """Mark every unread notification of ``user_id`` as read."""

    repository = NotificationRepository(session)
    with transaction(session):
        return repository.mark_all_as_read(user_id)


def delete_notification(
    session: Session, *, notification_id: str, caller_id: str
) -> None:
    """Delete a notification owned by ``caller_id``."""

    repository = NotificationRepository(session)
    with transaction(session):
        _get_owned_notification(
            repository, notification_id=notification_id, caller_id=caller_id
        )
        repository.delete(notification_id)


def delete_read_notifications(session: Session, *, user_id: str) -> int:
    """Remove every already-read notification of ``user_id``."""

    repository = NotificationRepository(session)
    with transaction(session):
        return repository.delete_read_for_user(user_id)


__all__ = [
    "count_unread_notifications",
    "delete_notification",
    "delete_read_notifications",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
