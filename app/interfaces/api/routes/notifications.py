"""Endpoints for reading and managing the caller's notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.application.use_cases.notifications import (
    count_unread_notifications,
    delete_notification as delete_notification_uc,
    delete_read_notifications,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read,
    mark_notification_read,
)
from app.domain.entities import Identity, Notification
from app.domain.errors import ReservationServiceError
from app.infrastructure.database import get_db
from app.interfaces.api.dependencies import get_current_identity
from app.interfaces.api.routes_helpers import to_http_exception
from app.interfaces.api.schemas import (
    BulkActionResult,
    NotificationRead,
    UnreadCountRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or "",
        user_id=notification.user_id,
        type=notification.type,
        title=notification.title,
        body=notification.body,
        related_reservation_id=notification.related_reservation_id,
        is_read=notification.is_read,
        created_at=notification.created_at,
    )


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    limit: int | None = Query(default=None, ge=1, le=200),
    db: Session = Depends(get_db),
    caller: Identity = Depends(get_current_identity),
) -> list[NotificationRead]:
    """Return the most recent notifications for the authenticated user."""

    try:
        notifications = list_notifications_uc(db, user_id=caller.user_id, limit=limit)
    except ReservationServiceError as exc:
        raise to_http_exception(exc) from exc
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/unread-count", response_model=UnreadCountRead)
def unread_count(
    db: Session = Depends(get_db),
    caller: Identity = Depends(get_current_identity),
) -> UnreadCountRead:
    try:
        count = count_unread_notifications(db, user_id=caller.user_id)
    except ReservationServiceError as exc:
        raise to_http_exception(exc) from exc
    return UnreadCountRead(count=count)


@router.put("/mark-all-read", response_model=BulkActionResult)
def mark_all_read(
    db: Session = Depends(get_db),
    caller: Identity = Depends(get_current_identity),
) -> BulkActionResult:
    try:
        count = mark_all_notifications_read(db, user_id=caller.user_id)
    except ReservationServiceError as exc:
        raise to_http_exception(exc) from exc
    return BulkActionResult(count=count)


@router.put("/{notification_id}/read", response_model=NotificationRead)
def mark_read(
    notification_id: str,
    db: Session = Depends(get_db),
    caller: Identity = Depends(get_current_identity),
) -> NotificationRead:
    try:
        notification = mark_notification_read(
            db, notification_id=notification_id, caller_id=caller.user_id
        )
    except ReservationServiceError as exc:
        raise to_http_exception(exc) from exc
    return _notification_to_schema(notification)


@router.delete("/read/all", response_model=BulkActionResult)
def delete_all_read(
    db: Session = Depends(get_db),
    caller: Identity = Depends(get_current_identity),
) -> BulkActionResult:
    """Remove every notification the caller has already read."""

    try:
        count = delete_read_notifications(db, user_id=caller.user_id)
    except ReservationServiceError as exc:
        raise to_http_exception(exc) from exc
    return BulkActionResult(count=count)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notification(
    notification_id: str,
    db: Session = Depends(get_db),
    caller: Identity = Depends(get_current_identity),
) -> None:
    try:
        delete_notification_uc(
            db, notification_id=notification_id, caller_id=caller.user_id
        )
    except ReservationServiceError as exc:
        raise to_http_exception(exc) from exc
