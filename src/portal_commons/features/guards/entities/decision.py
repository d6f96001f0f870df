"""Guard decisions.

Guards never render or navigate themselves; they return one of these and the
framework glue acts on it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GuardOutcome(str, Enum):
    """What the caller should do with a guarded branch."""
    
    ALLOW = "allow"          # render the primary branch
    DENY = "deny"            # render the fallback branch
    REDIRECT = "redirect"    # navigate to ``redirect_to``
    LOADING = "loading"      # session still resolving


@dataclass(frozen=True)
class GuardDecision:
    """Tagged result of a guard evaluation."""
    
    outcome: GuardOutcome
    redirect_to: Optional[str] = None
    reason: Optional[str] = None
    
    def __post_init__(self):
        if self.outcome is GuardOutcome.REDIRECT and not self.redirect_to:
            raise ValueError("Redirect decisions need a target path")
    
    @classmethod
    def allow(cls) -> "GuardDecision":
        return _ALLOW
    
    @classmethod
    def deny(cls, reason: Optional[str] = None) -> "GuardDecision":
        return cls(GuardOutcome.DENY, reason=reason)
    
    @classmethod
    def redirect(cls, path: str, reason: Optional[str] = None) -> "GuardDecision":
        return cls(GuardOutcome.REDIRECT, redirect_to=path, reason=reason)
    
    @classmethod
    def loading(cls) -> "GuardDecision":
        return _LOADING
    
    @property
    def is_allowed(self) -> bool:
        return self.outcome is GuardOutcome.ALLOW
    
    @property
    def is_denied(self) -> bool:
        return self.outcome is GuardOutcome.DENY
    
    @property
    def is_redirect(self) -> bool:
        return self.outcome is GuardOutcome.REDIRECT
    
    @property
    def is_loading(self) -> bool:
        return self.outcome is GuardOutcome.LOADING


_ALLOW = GuardDecision(GuardOutcome.ALLOW)
_LOADING = GuardDecision(GuardOutcome.LOADING)


@dataclass(frozen=True)
class LoadingIndicator:
    """Neutral placeholder shown while the session is being restored."""
    
    message: str = "Loading..."


LOADING_INDICATOR = LoadingIndicator()
