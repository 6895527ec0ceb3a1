"""Rich console handler that renders filesystem events with styled paths.

Where: platform/logging/handlers.py
What: Format ``filesystem_event`` records emitted by adapters into compact, coloured lines.
Why: Keep presentation concerns out of the adapters that emit the records.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathRichHandler(RichHandler):
    """Custom Rich handler that displays paths with highlighted separators."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "filesystem.move": ("📦", "magenta", "Moving "),
        "filesystem.mkdir": ("📁", "green", "Creating "),
        "filesystem.rmdir": ("🗑️", "red", "Removing "),
        "filesystem.chmod": ("🔐", "cyan", "Changing mode of "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = True
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def format_path(self, path: str) -> Text:
        """Render ``path`` keeping its anchor and at most the last few segments.

        Args:
            path: Raw path string as stored by a path value.

        Returns:
            Text: Styled path with an ellipsis replacing elided segments.
        """
        from pathvalue.features.path.domain.flavor import POSIX, WINDOWS
        from pathvalue.features.path.domain.parser import split_anchor, split_segments

        flavor = WINDOWS if "\\" in path else POSIX
        anchor, body = split_anchor(path, flavor)
        segments = split_segments(body, flavor)

        truncated = len(segments) > self._PATH_SEGMENT_LIMIT
        if truncated:
            segments = ["…", *segments[-self._PATH_SEGMENT_LIMIT :]]

        display = anchor + flavor.sep.join(segments)
        if not display:
            display = "."
        return self._style_path_string(display, flavor.separators)

    @staticmethod
    def _style_path_string(path_string: str, separators: str) -> Text:
        """Apply Rich styling to the rendered path string."""

        text = Text()
        for char in path_string:
            if char in separators or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_filesystem_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured filesystem events with dedicated styling."""

        event = getattr(record, "filesystem_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(self.format_path(str(source_path)))

        target_path = getattr(record, "target_path", None)
        if target_path:
            _ = body.append(" → ")
            _ = body.append_text(self.format_path(str(target_path)))

        mode = getattr(record, "mode", None)
        if isinstance(mode, int):
            _ = body.append(f" (mode={mode:o})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for filesystem events."""

        filesystem_text = self._render_filesystem_message(record)
        if filesystem_text is not None:
            return filesystem_text

        return super().render_message(record, message)


__all__ = ["PathRichHandler"]
