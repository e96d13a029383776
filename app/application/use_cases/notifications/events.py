"""Utility helpers to generate and record reservation notifications."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from sqlalchemy.orm import Session

from app.domain.entities import NOTIFICATION_TYPE_MESSAGE, Notification
from app.domain.policies import PlannedNotification
from app.infrastructure.repositories import NotificationRepository
from app.infrastructure.transaction import transaction
from app.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

_PREVIEW_LENGTH = 100

NotificationsCommitted = Callable[[Sequence[Notification]], None]


def _persist_notification(
    session: Session,
    *,
    user_id: str,
    type: str,
    title: str,
    body: str,
    related_reservation_id: str | None = None,
) -> Notification:
    notification = Notification(
        id=None,
        user_id=user_id,
        type=type,
        title=title,
        body=body,
        related_reservation_id=related_reservation_id,
        is_read=False,
        created_at=now_in_app_timezone(),
    )
    return NotificationRepository(session).create(notification)


def emit_notification_plan(
    session: Session, plan: Sequence[PlannedNotification]
) -> list[Notification]:
    """Write one notification row per planned recipient.

    Must run inside the caller's transaction so the rows commit together with
    the reservation write that produced them.
    """

    return [
        _persist_notification(
            session,
            user_id=planned.user_id,
            type=planned.type,
            title=planned.title,
            body=planned.body,
            related_reservation_id=planned.related_reservation_id,
        )
        for planned in plan
    ]


def log_committed_notifications(notifications: Sequence[Notification]) -> None:
    """Default post-commit hook: record what was emitted."""

    for notification in notifications:
        logger.info(
            "Notification %s '%s' recorded for user %s (reservation %s)",
            notification.id,
            notification.title,
            notification.user_id,
            notification.related_reservation_id,
        )


def run_post_commit(
    notifications: Sequence[Notification],
    on_committed: NotificationsCommitted | None,
) -> None:
    """Hand ``notifications`` to ``on_committed`` once the transaction is durable."""

    if not notifications:
        return
    hook = on_committed or log_committed_notifications
    hook(notifications)


def notify_new_message(
    session: Session,
    *,
    user_id: str,
    sender_name: str,
    message_preview: str,
    on_committed: NotificationsCommitted | None = None,
) -> Notification:
    """Inform ``user_id`` that ``sender_name`` sent them a chat message."""

    preview = message_preview.strip()
    if len(preview) > _PREVIEW_LENGTH:
        preview = preview[: _PREVIEW_LENGTH - 3].rstrip() + "..."

    with transaction(session):
        notification = _persist_notification(
            session,
            user_id=user_id,
            type=NOTIFICATION_TYPE_MESSAGE,
            title="New message",
            body=f"{sender_name}: {preview}",
        )
    run_post_commit([notification], on_committed)
    return notification


__all__ = [
    "NotificationsCommitted",
    "emit_notification_plan",
    "log_committed_notifications",
    "notify_new_message",
    "run_post_commit",
]
