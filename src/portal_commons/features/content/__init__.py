"""Content feature for portal-commons.

Feature-First architecture for the content approval lifecycle:
- entities/: content kinds, status enums, transition tables, content items
- services/: lifecycle operations and the authorizing content workflow
"""

from .entities import (
    LIFECYCLES,
    BlogPostStatus,
    CampaignStatus,
    ContentItem,
    ContentKind,
    LifecycleDefinition,
    MessageStatus,
    SocialPostStatus,
    Transition,
    TransitionRule,
)
from .services import (
    ActionPolicy,
    ContentWorkflow,
    WorkflowResult,
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

__all__ = [
    # Entities
    "ContentKind",
    "SocialPostStatus",
    "CampaignStatus",
    "BlogPostStatus",
    "MessageStatus",
    "Transition",
    "TransitionRule",
    "LifecycleDefinition",
    "LIFECYCLES",
    "ContentItem",
    
    # Lifecycle operations
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
    
    # Workflow
    "ContentWorkflow",
    "WorkflowResult",
    "ActionPolicy",
]
