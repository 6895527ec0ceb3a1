"""Shared path utilities for configuration and log locations.

This module centralizes how the command line front end discovers its
config and log files.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/config.toml`` unless
  overridden by ``PATHVALUE_CONFIG``.
- Logs: repository-root ``<repo_root>/logs/pathvalue.log``.
- Outside a source checkout ``<repo_root>`` is the per-user directory
  ``$XDG_CONFIG_HOME/pathvalue`` (``~/.config/pathvalue``), never the
  current working directory.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

_ENV_CONFIG_PATH: Final[str] = "PATHVALUE_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def _user_root(env: Mapping[str, str] | None = None) -> Path:
    """Per-user fallback root: ``$XDG_CONFIG_HOME/pathvalue`` or ``~/.config/pathvalue``."""

    mapping = env if env is not None else os.environ
    base = (mapping.get(_ENV_XDG_CONFIG_HOME) or "").strip()
    return (Path(base) if base else Path.home() / ".config") / "pathvalue"


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the per-user directory from
        :func:`_user_root` when no marker is found (installed package).
    """
    here = (start or Path(__file__).resolve()).parent
    for candidate in [here, *here.parents]:
        if (candidate / "pyproject.toml").exists() or (candidate / ".git").exists():
            return candidate
    return _user_root()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    Portable layout: ``<repo_root>/config/config.toml``.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_PATH,
        default_factory=lambda: _detect_repo_root() / "config" / "config.toml",
    )


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "pathvalue.log").resolve()


__all__ = [
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
