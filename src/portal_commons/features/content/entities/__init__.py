"""Content entities package.

Content kinds, their closed status enums, the transition tables and the
immutable content item snapshot.
"""

from .content_item import ContentItem
from .lifecycle import (
    BLOG_POST_LIFECYCLE,
    CAMPAIGN_LIFECYCLE,
    LIFECYCLES,
    MESSAGE_LIFECYCLE,
    SOCIAL_POST_LIFECYCLE,
    LifecycleDefinition,
    Transition,
    TransitionRule,
)
from .status import (
    BlogPostStatus,
    CampaignStatus,
    ContentKind,
    MessageStatus,
    SocialPostStatus,
)

__all__ = [
    "ContentKind",
    "SocialPostStatus",
    "CampaignStatus",
    "BlogPostStatus",
    "MessageStatus",
    "Transition",
    "TransitionRule",
    "LifecycleDefinition",
    "LIFECYCLES",
    "SOCIAL_POST_LIFECYCLE",
    "CAMPAIGN_LIFECYCLE",
    "BLOG_POST_LIFECYCLE",
    "MESSAGE_LIFECYCLE",
    "ContentItem",
]
