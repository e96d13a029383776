"""Public helpers for emitting and managing notifications."""

from .events import (
    NotificationsCommitted,
    emit_notification_plan,
    log_committed_notifications,
    notify_new_message,
    run_post_commit,
)
from .inbox import (
    count_unread_notifications,
    delete_notification,
    delete_read_notifications,
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)

__all__ = [
    "NotificationsCommitted",
    "emit_notification_plan",
    "log_committed_notifications",
    "notify_new_message",
    "run_post_commit",
    "count_unread_notifications",
    "delete_notification",
    "delete_read_notifications",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
