"""Feature packages for pathvalue."""
