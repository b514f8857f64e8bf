"""Tag Text - overlapping tag markup to styled text."""

__version__ = "0.1.0"

from tag_text.formatting import (
    DiagnosticCollector,
    StyledText,
    StyleTable,
    TagFormatParser,
    parse_text_format,
)

__all__ = [
    "__version__",
    "DiagnosticCollector",
    "StyledText",
    "StyleTable",
    "TagFormatParser",
    "parse_text_format",
]
