"""Platform services (filesystem helpers, logging) shared by every layer."""
