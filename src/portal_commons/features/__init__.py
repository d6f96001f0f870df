"""Feature packages for portal-commons."""
