"""Content workflow: lifecycle rules combined with the actor's capabilities.

This is what mutation call sites use. A request first has to be a legal edge
of the kind's transition table and then has to be authorized for the actor;
only then is the updated item returned for the content store to persist.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from ....core.exceptions import UnknownActionError
from ...permissions.services.capabilities import Capabilities
from ..entities.content_item import ContentItem
from ..entities.lifecycle import LIFECYCLES
from ..entities.status import ContentKind
from . import lifecycle_service

logger = logging.getLogger(__name__)


class ActionPolicy(str, Enum):
    """Who may trigger a lifecycle action."""
    
    APPROVER = "approver"      # accountable admin (agency or client)
    REJECTER = "rejecter"
    EDITOR = "editor"          # whoever may still edit the item
    AGENCY = "agency"          # post-approval publishing by agency users
    AUTHOR = "author"          # the item's own author
    SYSTEM = "system"          # delivery events, never triggered by an actor


_CONTENT_ACTION_POLICIES = {
    "approve": ActionPolicy.APPROVER,
    "reject": ActionPolicy.REJECTER,
    "submit_for_review": ActionPolicy.EDITOR,
    "edit_after_rejection": ActionPolicy.EDITOR,
}

_MESSAGE_ACTION_POLICIES = {
    "send": ActionPolicy.AUTHOR,
    "retry": ActionPolicy.AUTHOR,
    "deliver": ActionPolicy.SYSTEM,
    "fail": ActionPolicy.SYSTEM,
    "read": ActionPolicy.SYSTEM,
}


def get_action_policy(kind: ContentKind, action: str) -> ActionPolicy:
    if kind is ContentKind.MESSAGE:
        return _MESSAGE_ACTION_POLICIES.get(action, ActionPolicy.SYSTEM)
    return _CONTENT_ACTION_POLICIES.get(action, ActionPolicy.AGENCY)


@dataclass(frozen=True)
class WorkflowResult:
    """Outcome of a workflow request.
    
    ``item`` is the updated snapshot when allowed, else the untouched input.
    """
    
    allowed: bool
    item: ContentItem
    action: str
    reason: Optional[str] = None
    
    def __bool__(self) -> bool:
        return self.allowed


class ContentWorkflow:
    """Authorizes and applies lifecycle actions on behalf of one actor."""
    
    def __init__(self, capabilities: Capabilities):
        self.capabilities = capabilities
    
    def _is_author(self, item: ContentItem) -> bool:
        actor = self.capabilities.actor
        return actor is not None and bool(item.author_id) and item.author_id == actor.id
    
    def _authorize(self, item: ContentItem, action: str) -> Optional[str]:
        """Return a denial reason, or None when the actor may perform ``action``."""
        caps = self.capabilities
        if not caps.is_authenticated:
            return "not signed in"
        if not caps.can_access_client(item.client_id) and not self._is_author(item):
            return "content belongs to another client"
        
        policy = get_action_policy(item.kind, action)
        if policy is ActionPolicy.APPROVER:
            allowed = caps.can_approve_content()
        elif policy is ActionPolicy.REJECTER:
            allowed = caps.can_reject_content()
        elif policy is ActionPolicy.EDITOR:
            allowed = caps.can_edit_content(item.author_id, item.status)
        elif policy is ActionPolicy.AGENCY:
            allowed = caps.is_agency_user()
        elif policy is ActionPolicy.AUTHOR:
            allowed = self._is_author(item)
        else:
            allowed = False
        
        if not allowed:
            return f"{policy.value} permission required for '{action}'"
        return None
    
    def available_actions(self, item: ContentItem):
        """Actions the actor may perform on ``item`` right now."""
        return tuple(
            action
            for action in lifecycle_service.get_available_actions(item.kind, item.status)
            if self._authorize(item, action) is None
        )
    
    def can_perform(self, item: ContentItem, action: str) -> bool:
        if lifecycle_service.get_target_status(item.kind, item.status, action) is None:
            return False
        return self._authorize(item, action) is None
    
    def perform(
        self,
        item: ContentItem,
        action: str,
        *,
        rejection_reason: Optional[str] = None,
        at: Optional[datetime] = None,
    ) -> WorkflowResult:
        """Authorize and apply ``action``.
        
        Authorization denials come back as a denied result. An action that is
        not available from the item's status raises, since that indicates a
        stale or malformed request rather than a permission question.
        
        Raises:
            UnknownActionError: if ``action`` is not an edge from the current status
        """
        if lifecycle_service.get_target_status(item.kind, item.status, action) is None:
            raise UnknownActionError(item.kind, item.status, action)
        
        reason = self._authorize(item, action)
        if reason is not None:
            logger.debug(f"Workflow denied {action} on {item}: {reason}")
            return WorkflowResult(allowed=False, item=item, action=action, reason=reason)
        
        updated = lifecycle_service.apply_action(
            item, action, rejection_reason=rejection_reason, at=at
        )
        return WorkflowResult(allowed=True, item=updated, action=action)
    
    def approve(self, item: ContentItem, *, at: Optional[datetime] = None) -> WorkflowResult:
        return self.perform(item, LIFECYCLES[item.kind].accept_action, at=at)
    
    def reject(
        self,
        item: ContentItem,
        reason: Optional[str] = None,
        *,
        at: Optional[datetime] = None,
    ) -> WorkflowResult:
        return self.perform(
            item, LIFECYCLES[item.kind].reject_action, rejection_reason=reason, at=at
        )
    
    def can_edit(self, item: ContentItem) -> bool:
        return self.capabilities.can_edit_content(item.author_id, item.status)
    
    def can_delete(self, item: ContentItem) -> bool:
        return self.capabilities.can_delete_content(item.author_id, item.status)
