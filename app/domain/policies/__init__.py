"""Pure decision rules for the reservation lifecycle."""

from .authorization import can_transition, can_view
from .notification_catalog import (
    DEFAULT_NOTIFICATION_CATALOG,
    NotificationCatalog,
    NotificationTemplate,
    PlannedNotification,
)
from .transitions import (
    INITIAL_STATUS,
    allowed_targets,
    is_known_status,
    is_legal_edge,
    is_terminal,
    legal_edges,
    party_may_transition,
    validate_transition,
)

__all__ = [
    "DEFAULT_NOTIFICATION_CATALOG",
    "INITIAL_STATUS",
    "NotificationCatalog",
    "NotificationTemplate",
    "PlannedNotification",
    "allowed_targets",
    "can_transition",
    "can_view",
    "is_known_status",
    "is_legal_edge",
    "is_terminal",
    "legal_edges",
    "party_may_transition",
    "validate_transition",
]
