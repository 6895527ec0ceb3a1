"""Configuration loading and default file locations for the CLI."""
