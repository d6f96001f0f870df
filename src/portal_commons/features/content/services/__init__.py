"""Content services: lifecycle state machine and the authorizing workflow."""

from .lifecycle_service import (
    apply_action,
    apply_transition,
    can_transition,
    create_content_item,
    get_available_actions,
    get_lifecycle,
    get_next_states,
    get_status_label,
    get_target_status,
    is_terminal,
    parse_status,
)
from .workflow_service import ActionPolicy, ContentWorkflow, WorkflowResult, get_action_policy

__all__ = [
    "get_lifecycle",
    "parse_status",
    "can_transition",
    "get_next_states",
    "get_available_actions",
    "get_target_status",
    "get_status_label",
    "is_terminal",
    "create_content_item",
    "apply_transition",
    "apply_action",
    "ContentWorkflow",
    "WorkflowResult",
    "ActionPolicy",
    "get_action_policy",
]
