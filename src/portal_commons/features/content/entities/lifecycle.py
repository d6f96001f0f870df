"""Transition tables for every content kind.

Each lifecycle is a small directed graph: status -> allowed (action, target)
edges. Definitions are checked for structural soundness at import time and are
immutable afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Mapping, NamedTuple, Tuple, Type

from ....core.exceptions import ConfigurationError
from .status import (
    BlogPostStatus,
    CampaignStatus,
    ContentKind,
    MessageStatus,
    SocialPostStatus,
)


class Transition(NamedTuple):
    """One edge of a lifecycle graph."""
    
    action: str
    target: Enum


@dataclass(frozen=True)
class TransitionRule:
    """Outgoing edges of a single status."""
    
    transitions: Tuple[Transition, ...] = ()
    
    @property
    def allowed(self) -> Tuple[Enum, ...]:
        return tuple(transition.target for transition in self.transitions)
    
    @property
    def actions(self) -> Tuple[str, ...]:
        return tuple(transition.action for transition in self.transitions)
    
    def target_for(self, action: str):
        for transition in self.transitions:
            if transition.action == action:
                return transition.target
        return None
    
    def action_for(self, target: Enum):
        for transition in self.transitions:
            if transition.target is target:
                return transition.action
        return None


def _rule(*edges: Tuple[str, Enum]) -> TransitionRule:
    return TransitionRule(tuple(Transition(action, target) for action, target in edges))


@dataclass(frozen=True)
class LifecycleDefinition:
    """Status vocabulary, transition table and landmark states of one content kind.
    
    ``accepted_statuses`` are entered only through ``accept_action``,
    ``rejected_status`` only through ``reject_action``, and
    ``revise_action`` leads from the rejected status back to a workable one.
    """
    
    kind: ContentKind
    status_type: Type[Enum]
    entry_status: Enum
    review_status: Enum
    accepted_statuses: FrozenSet[Enum]
    rejected_status: Enum
    accept_action: str
    reject_action: str
    revise_action: str
    table: Mapping[Enum, TransitionRule]
    labels: Mapping[Enum, str] = field(default_factory=dict)
    
    def __post_init__(self):
        object.__setattr__(self, "table", MappingProxyType(dict(self.table)))
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))
        self._validate()
    
    def _validate(self) -> None:
        statuses = set(self.status_type)
        if set(self.table) != statuses:
            raise ConfigurationError(f"{self.kind.value}: transition table must cover every status")
        
        incoming: Dict[Enum, set] = {status: set() for status in statuses}
        for source, rule in self.table.items():
            for transition in rule.transitions:
                if transition.target not in statuses:
                    raise ConfigurationError(
                        f"{self.kind.value}: {source.value} -> {transition.target} leaves the lifecycle"
                    )
                incoming[transition.target].add(transition.action)
        
        # The revision edge is the only way back into the entry status
        if incoming[self.entry_status] - {self.revise_action}:
            raise ConfigurationError(f"{self.kind.value}: entry status must have no incoming transitions")
        for status in self.accepted_statuses:
            if incoming[status] != {self.accept_action}:
                raise ConfigurationError(
                    f"{self.kind.value}: {status.value} must be reachable only via '{self.accept_action}'"
                )
        if incoming[self.rejected_status] != {self.reject_action}:
            raise ConfigurationError(
                f"{self.kind.value}: {self.rejected_status.value} must be reachable only via '{self.reject_action}'"
            )
        if self.table[self.rejected_status].target_for(self.revise_action) is None:
            raise ConfigurationError(f"{self.kind.value}: rejected status needs a revision path")
    
    @property
    def terminal_statuses(self) -> FrozenSet[Enum]:
        return frozenset(status for status, rule in self.table.items() if not rule.transitions)
    
    def label(self, status: Enum) -> str:
        return self.labels.get(status) or status.value.replace("_", " ").title()


SOCIAL_POST_LIFECYCLE = LifecycleDefinition(
    kind=ContentKind.SOCIAL_POST,
    status_type=SocialPostStatus,
    entry_status=SocialPostStatus.DRAFT,
    review_status=SocialPostStatus.PENDING_REVIEW,
    accepted_statuses=frozenset({SocialPostStatus.APPROVED}),
    rejected_status=SocialPostStatus.REJECTED,
    accept_action="approve",
    reject_action="reject",
    revise_action="edit_after_rejection",
    table={
        SocialPostStatus.DRAFT: _rule(("submit_for_review", SocialPostStatus.PENDING_REVIEW)),
        SocialPostStatus.PENDING_REVIEW: _rule(
            ("approve", SocialPostStatus.APPROVED),
            ("reject", SocialPostStatus.REJECTED),
        ),
        SocialPostStatus.APPROVED: _rule(("publish", SocialPostStatus.PUBLISHED)),
        SocialPostStatus.REJECTED: _rule(("edit_after_rejection", SocialPostStatus.DRAFT)),
        SocialPostStatus.PUBLISHED: _rule(),
    },
    labels={
        SocialPostStatus.DRAFT: "Draft",
        SocialPostStatus.PENDING_REVIEW: "Pending Review",
        SocialPostStatus.APPROVED: "Approved",
        SocialPostStatus.REJECTED: "Rejected",
        SocialPostStatus.PUBLISHED: "Published",
    },
)

CAMPAIGN_LIFECYCLE = LifecycleDefinition(
    kind=ContentKind.CAMPAIGN,
    status_type=CampaignStatus,
    entry_status=CampaignStatus.DRAFT,
    review_status=CampaignStatus.REVIEW,
    accepted_statuses=frozenset({CampaignStatus.APPROVED}),
    rejected_status=CampaignStatus.REJECTED,
    accept_action="approve",
    reject_action="reject",
    revise_action="edit_after_rejection",
    table={
        CampaignStatus.DRAFT: _rule(("submit_for_review", CampaignStatus.REVIEW)),
        CampaignStatus.REVIEW: _rule(
            ("approve", CampaignStatus.APPROVED),
            ("reject", CampaignStatus.REJECTED),
        ),
        CampaignStatus.APPROVED: _rule(
            ("schedule", CampaignStatus.SCHEDULED),
            ("send_immediately", CampaignStatus.SENT),
        ),
        CampaignStatus.REJECTED: _rule(("edit_after_rejection", CampaignStatus.DRAFT)),
        CampaignStatus.SCHEDULED: _rule(("send_scheduled", CampaignStatus.SENT)),
        CampaignStatus.SENT: _rule(("activate", CampaignStatus.ACTIVE)),
        CampaignStatus.ACTIVE: _rule(("complete", CampaignStatus.COMPLETED)),
        CampaignStatus.COMPLETED: _rule(),
    },
    labels={
        CampaignStatus.DRAFT: "Draft",
        CampaignStatus.REVIEW: "Review",
        CampaignStatus.APPROVED: "Approved",
        CampaignStatus.REJECTED: "Rejected",
        CampaignStatus.SCHEDULED: "Scheduled",
        CampaignStatus.SENT: "Sent",
        CampaignStatus.ACTIVE: "Active",
        CampaignStatus.COMPLETED: "Completed",
    },
)

BLOG_POST_LIFECYCLE = LifecycleDefinition(
    kind=ContentKind.BLOG_POST,
    status_type=BlogPostStatus,
    entry_status=BlogPostStatus.DRAFT,
    review_status=BlogPostStatus.PENDING_REVIEW,
    accepted_statuses=frozenset({BlogPostStatus.APPROVED}),
    rejected_status=BlogPostStatus.REJECTED,
    accept_action="approve",
    reject_action="reject",
    revise_action="edit_after_rejection",
    table={
        BlogPostStatus.DRAFT: _rule(("submit_for_review", BlogPostStatus.PENDING_REVIEW)),
        BlogPostStatus.PENDING_REVIEW: _rule(
            ("approve", BlogPostStatus.APPROVED),
            ("reject", BlogPostStatus.REJECTED),
        ),
        BlogPostStatus.APPROVED: _rule(
            ("publish_immediately", BlogPostStatus.PUBLISHED),
            ("schedule_publish", BlogPostStatus.SCHEDULED),
        ),
        BlogPostStatus.REJECTED: _rule(("edit_after_rejection", BlogPostStatus.DRAFT)),
        BlogPostStatus.SCHEDULED: _rule(("publish_scheduled", BlogPostStatus.PUBLISHED)),
        BlogPostStatus.PUBLISHED: _rule(),
    },
    labels={
        BlogPostStatus.DRAFT: "Draft",
        BlogPostStatus.PENDING_REVIEW: "Pending Review",
        BlogPostStatus.APPROVED: "Approved",
        BlogPostStatus.REJECTED: "Rejected",
        BlogPostStatus.SCHEDULED: "Scheduled",
        BlogPostStatus.PUBLISHED: "Published",
    },
)

# Messages have no human approval step: delivery receipt ("read") is the
# accepted end state and a failed delivery is retried.
MESSAGE_LIFECYCLE = LifecycleDefinition(
    kind=ContentKind.MESSAGE,
    status_type=MessageStatus,
    entry_status=MessageStatus.COMPOSING,
    review_status=MessageStatus.SENT,
    accepted_statuses=frozenset({MessageStatus.READ}),
    rejected_status=MessageStatus.FAILED,
    accept_action="read",
    reject_action="fail",
    revise_action="retry",
    table={
        MessageStatus.COMPOSING: _rule(("send", MessageStatus.SENT)),
        MessageStatus.SENT: _rule(
            ("deliver", MessageStatus.DELIVERED),
            ("fail", MessageStatus.FAILED),
        ),
        MessageStatus.DELIVERED: _rule(("read", MessageStatus.READ)),
        MessageStatus.READ: _rule(),
        MessageStatus.FAILED: _rule(("retry", MessageStatus.SENT)),
    },
    labels={
        MessageStatus.COMPOSING: "Composing",
        MessageStatus.SENT: "Sent",
        MessageStatus.DELIVERED: "Delivered",
        MessageStatus.READ: "Read",
        MessageStatus.FAILED: "Failed",
    },
)

LIFECYCLES: Mapping[ContentKind, LifecycleDefinition] = MappingProxyType({
    definition.kind: definition
    for definition in (
        SOCIAL_POST_LIFECYCLE,
        CAMPAIGN_LIFECYCLE,
        BLOG_POST_LIFECYCLE,
        MESSAGE_LIFECYCLE,
    )
})
