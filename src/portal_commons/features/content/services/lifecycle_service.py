"""Lifecycle state machine operations shared by every content kind.

Query functions are total: an unknown kind or a status that does not belong
to the kind yields False / an empty tuple rather than an exception. Only
``apply_transition`` and ``apply_action`` signal failure, by raising
``InvalidTransitionError``.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Tuple

from ....core.exceptions import InvalidTransitionError, UnknownActionError
from ..entities.content_item import ContentItem
from ..entities.lifecycle import LIFECYCLES, LifecycleDefinition
from ..entities.status import ContentKind

logger = logging.getLogger(__name__)


def get_lifecycle(kind: Any) -> Optional[LifecycleDefinition]:
    """Lifecycle definition for ``kind``, or None when the kind is unknown."""
    try:
        return LIFECYCLES[ContentKind(kind)]
    except (ValueError, TypeError):
        return None


def parse_status(kind: Any, status: Any) -> Optional[Enum]:
    """Coerce ``status`` into the kind's status enum; None if it does not belong."""
    definition = get_lifecycle(kind)
    if definition is None:
        return None
    if isinstance(status, definition.status_type):
        return status
    if isinstance(status, Enum):
        return None
    try:
        return definition.status_type(status)
    except (ValueError, TypeError):
        return None


def can_transition(kind: Any, from_status: Any, to_status: Any) -> bool:
    """True iff ``to_status`` is declared reachable in one step from ``from_status``."""
    definition = get_lifecycle(kind)
    source = parse_status(kind, from_status)
    target = parse_status(kind, to_status)
    if definition is None or source is None or target is None:
        return False
    return target in definition.table[source].allowed


def get_next_states(kind: Any, status: Any) -> Tuple[Enum, ...]:
    """Statuses reachable in one step."""
    definition = get_lifecycle(kind)
    source = parse_status(kind, status)
    if definition is None or source is None:
        return ()
    return definition.table[source].allowed


def get_available_actions(kind: Any, status: Any) -> Tuple[str, ...]:
    """Named actions available from ``status``."""
    definition = get_lifecycle(kind)
    source = parse_status(kind, status)
    if definition is None or source is None:
        return ()
    return definition.table[source].actions


def get_target_status(kind: Any, status: Any, action: str) -> Optional[Enum]:
    """Status that ``action`` leads to from ``status``, if the action is available."""
    definition = get_lifecycle(kind)
    source = parse_status(kind, status)
    if definition is None or source is None:
        return None
    return definition.table[source].target_for(action)


def get_status_label(kind: Any, status: Any) -> str:
    definition = get_lifecycle(kind)
    parsed = parse_status(kind, status)
    if definition is None or parsed is None:
        return "Unknown"
    return definition.label(parsed)


def is_terminal(kind: Any, status: Any) -> bool:
    definition = get_lifecycle(kind)
    parsed = parse_status(kind, status)
    if definition is None or parsed is None:
        return False
    return parsed in definition.terminal_statuses


def create_content_item(
    kind: Any,
    item_id: str,
    author_id: Optional[str] = None,
    client_id: Optional[str] = None,
    title: Optional[str] = None,
    at: Optional[datetime] = None,
) -> ContentItem:
    """New item of ``kind``, always in the kind's entry status."""
    definition = LIFECYCLES[ContentKind(kind)]
    return ContentItem(
        kind=definition.kind,
        id=item_id,
        status=definition.entry_status,
        author_id=author_id,
        client_id=client_id,
        title=title,
        updated_at=at or datetime.now(timezone.utc),
    )


def apply_transition(
    item: ContentItem,
    to_status: Any,
    *,
    rejection_reason: Optional[str] = None,
    at: Optional[datetime] = None,
) -> ContentItem:
    """Move ``item`` to ``to_status`` and return the updated snapshot.
    
    Lifecycle timestamps are stamped on entry into the review, accepted and
    rejected statuses. ``item`` itself is never modified.
    
    Raises:
        InvalidTransitionError: if the move is not in the kind's transition table
    """
    if not can_transition(item.kind, item.status, to_status):
        logger.info(f"Rejected transition of {item}: -> {getattr(to_status, 'value', to_status)}")
        raise InvalidTransitionError(item.kind, item.status, to_status)
    
    definition = LIFECYCLES[item.kind]
    target = parse_status(item.kind, to_status)
    moment = at or datetime.now(timezone.utc)
    
    changes = {"status": target, "updated_at": moment}
    if target is definition.review_status:
        changes["submitted_at"] = moment
    if target in definition.accepted_statuses:
        changes["approved_at"] = moment
    if target is definition.rejected_status:
        changes["rejected_at"] = moment
        changes["rejection_reason"] = rejection_reason
    
    updated = replace(item, **changes)
    logger.debug(f"Transitioned {item} -> {target.value}")
    return updated


def apply_action(
    item: ContentItem,
    action: str,
    *,
    rejection_reason: Optional[str] = None,
    at: Optional[datetime] = None,
) -> ContentItem:
    """Apply a named lifecycle action such as ``"submit_for_review"``.
    
    Raises:
        UnknownActionError: if the action is not available from the item's status
    """
    target = get_target_status(item.kind, item.status, action)
    if target is None:
        raise UnknownActionError(item.kind, item.status, action)
    return apply_transition(item, target, rejection_reason=rejection_reason, at=at)
