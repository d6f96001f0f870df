"""Content kinds and their closed status vocabularies."""

from enum import Enum


class ContentKind(str, Enum):
    """Distinct content categories, each with its own lifecycle."""
    
    SOCIAL_POST = "social_post"
    CAMPAIGN = "campaign"
    BLOG_POST = "blog_post"
    MESSAGE = "message"


class SocialPostStatus(str, Enum):
    DRAFT = "draft"                    # Agency creates post
    PENDING_REVIEW = "pending_review"  # Submitted for client approval
    APPROVED = "approved"              # Ready to publish
    REJECTED = "rejected"              # Needs revision
    PUBLISHED = "published"            # Live on platform


class CampaignStatus(str, Enum):
    DRAFT = "draft"
    REVIEW = "review"
    APPROVED = "approved"
    REJECTED = "rejected"
    SCHEDULED = "scheduled"
    SENT = "sent"
    ACTIVE = "active"        # Tracking metrics
    COMPLETED = "completed"


class BlogPostStatus(str, Enum):
    DRAFT = "draft"
    PENDING_REVIEW = "pending_review"
    APPROVED = "approved"
    REJECTED = "rejected"
    SCHEDULED = "scheduled"
    PUBLISHED = "published"


class MessageStatus(str, Enum):
    COMPOSING = "composing"
    SENT = "sent"
    DELIVERED = "delivered"
    READ = "read"
    FAILED = "failed"
