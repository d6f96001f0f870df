"""Guard decision types."""

from .decision import LOADING_INDICATOR, GuardDecision, GuardOutcome, LoadingIndicator

__all__ = ["GuardOutcome", "GuardDecision", "LoadingIndicator", "LOADING_INDICATOR"]
