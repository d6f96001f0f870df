"""Actor entity: the signed-in user as seen by the authorization core."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from ....core.exceptions import SessionCorruptError
from ...permissions.entities.role import AGENCY_ROLES, CLIENT_ROLES, Role, get_role_display_name


class Actor(BaseModel):
    """Immutable identity of the current user.
    
    Field aliases are camelCase so records written by the portal front end
    (``clientId``, ``hasCompletedOnboarding``) load unchanged.
    """
    
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        extra="ignore",
    )
    
    id: str = Field(min_length=1)
    name: str
    email: str
    role: Role
    client_id: Optional[str] = None
    initials: Optional[str] = None
    has_completed_onboarding: bool = False
    
    @model_validator(mode="after")
    def _client_roles_need_client(self) -> "Actor":
        if self.role in CLIENT_ROLES and not self.client_id:
            raise ValueError(f"{self.role.value} actors must belong to a client")
        return self
    
    @property
    def is_agency_user(self) -> bool:
        return self.role in AGENCY_ROLES
    
    @property
    def is_client_user(self) -> bool:
        return self.role in CLIENT_ROLES
    
    @property
    def role_display_name(self) -> str:
        return get_role_display_name(self.role)
    
    @property
    def display_initials(self) -> str:
        """Explicit initials, else derived from the name."""
        if self.initials:
            return self.initials
        parts = [part for part in self.name.split() if part]
        return "".join(part[0] for part in parts[:2]).upper()
    
    def to_record(self) -> str:
        """Serialize for the session storage collaborator."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
    
    @classmethod
    def from_record(cls, raw: str) -> "Actor":
        """Parse a stored record.
        
        Raises:
            SessionCorruptError: if the record is not a valid actor
        """
        try:
            return cls.model_validate_json(raw)
        except ValidationError as e:
            raise SessionCorruptError(
                "Stored actor record is invalid",
                details={"errors": e.error_count()},
            ) from e
    
    def __str__(self) -> str:
        return f"Actor({self.id}, {self.role.value})"
