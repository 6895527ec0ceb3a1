"""User interfaces for pathvalue."""
