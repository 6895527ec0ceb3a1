"""Configuration management for the pathvalue command line front end."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from pathvalue.config.file_ops import write_text_file
from pathvalue.config.paths import default_config_path
from pathvalue.features.path.domain.flavor import Flavor, flavor_from_name
from pathvalue.platform.logging import logger

_LEVEL_NAMES: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Command line configuration."""

    # Log file path
    log_file: Path | None = _path_field()

    # Console log level name (DEBUG, INFO, WARNING, ERROR)
    console_level: str = "INFO"

    # Separator convention used by `inspect` when --flavor is omitted
    flavor: str = "host"

    _instance: ClassVar[Config | None] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def console_level_value(self) -> int:
        """Return the numeric console level, falling back to INFO for unknown names."""

        level = _LEVEL_NAMES.get(self.console_level.strip().upper())
        if level is None:
            logger.warning("Unknown console level %r; using INFO", self.console_level)
            return logging.INFO
        return level

    def flavor_object(self) -> Flavor:
        """Return the configured :class:`Flavor`."""

        return flavor_from_name(self.flavor)

    def save(self) -> None:
        """Save configuration to file."""

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = ["# pathvalue Configuration File", ""]

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/pathvalue.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level: DEBUG, INFO, WARNING or ERROR")
        lines.append(f"console_level = {self._format_toml_value(config['console_level'])}")
        lines.append("")

        lines.append("# Default flavor for `inspect`: host, posix or windows")
        lines.append(f"flavor = {self._format_toml_value(config['flavor'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> Config:
        """Load configuration from file, creating a default one when absent.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
                instance = cls(**{key: value for key, value in config_dict.items() if key in known})
                logger.debug("Configuration loaded from %s", config_file)
            else:
                instance = cls()
                instance.save()
                logger.info("Created default configuration at %s", config_file)

        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        cls._instance = instance
        cls._loaded_from = config_file
        return instance


__all__ = ["Config"]
