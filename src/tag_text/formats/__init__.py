"""Output format handlers for Tag Text."""

from tag_text.formats.base import FormatHandler
from tag_text.formats.txt_handler import PlainHandler
from tag_text.formats.json_handler import JSONHandler
from tag_text.formats.markup_handler import MarkupHandler
from tag_text.formats.ansi_handler import ANSIHandler

__all__ = [
    "FormatHandler",
    "PlainHandler",
    "JSONHandler",
    "MarkupHandler",
    "ANSIHandler",
]

# Map format names to handlers
HANDLER_MAP: dict[str, type[FormatHandler]] = {
    "plain": PlainHandler,
    "json": JSONHandler,
    "markup": MarkupHandler,
    "ansi": ANSIHandler,
}

SUPPORTED_FORMATS = tuple(HANDLER_MAP.keys())


def get_handler(name: str) -> type[FormatHandler]:
    """Get the appropriate handler class for a format name."""
    key = name.lower()
    if key not in HANDLER_MAP:
        raise ValueError(
            f"Unsupported output format: {key}. "
            f"Supported formats: {', '.join(SUPPORTED_FORMATS)}"
        )
    return HANDLER_MAP[key]
