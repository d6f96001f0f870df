"""Content item: any artifact subject to the approval lifecycle."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from ....core.exceptions import InvalidStatusError
from .lifecycle import LIFECYCLES
from .status import ContentKind


@dataclass(frozen=True)
class ContentItem:
    """Immutable snapshot of a content item as supplied by the content store.
    
    ``status`` is always a member of the kind's status enum; raw strings are
    coerced on construction and unknown values are rejected. Status changes go
    through ``apply_transition``, which returns a new snapshot.
    """
    
    kind: ContentKind
    id: str
    status: Enum
    author_id: Optional[str] = None
    client_id: Optional[str] = None
    title: Optional[str] = None
    submitted_at: Optional[datetime] = None
    approved_at: Optional[datetime] = None
    rejected_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    updated_at: Optional[datetime] = None
    
    def __post_init__(self):
        try:
            kind = ContentKind(self.kind)
        except ValueError:
            raise InvalidStatusError(self.kind, self.status) from None
        object.__setattr__(self, "kind", kind)
        
        status_type = LIFECYCLES[kind].status_type
        raw_status = getattr(self.status, "value", self.status)
        if isinstance(self.status, Enum) and not isinstance(self.status, status_type):
            raise InvalidStatusError(kind, self.status)
        try:
            object.__setattr__(self, "status", status_type(raw_status))
        except ValueError:
            raise InvalidStatusError(kind, self.status) from None
    
    @property
    def status_label(self) -> str:
        return LIFECYCLES[self.kind].label(self.status)
    
    @property
    def is_terminal(self) -> bool:
        return self.status in LIFECYCLES[self.kind].terminal_statuses
    
    def to_dict(self) -> Dict[str, Any]:
        """Plain representation for the content store."""
        return {
            "kind": self.kind.value,
            "id": self.id,
            "status": self.status.value,
            "author_id": self.author_id,
            "client_id": self.client_id,
            "title": self.title,
            "submitted_at": self.submitted_at.isoformat() if self.submitted_at else None,
            "approved_at": self.approved_at.isoformat() if self.approved_at else None,
            "rejected_at": self.rejected_at.isoformat() if self.rejected_at else None,
            "rejection_reason": self.rejection_reason,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
    
    def __str__(self) -> str:
        return f"ContentItem({self.kind.value}:{self.id}, {self.status.value})"
