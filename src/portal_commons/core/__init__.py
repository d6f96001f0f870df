"""Core building blocks shared by every portal-commons feature."""
