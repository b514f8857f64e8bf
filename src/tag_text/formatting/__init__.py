"""Formatting utilities for parsing and representing tagged text."""

from tag_text.formatting.ir import (
    COLORS,
    DECORATIONS,
    Decoration,
    StyledText,
    StyledTextFactory,
    TextColor,
)
from tag_text.formatting.styles import StyleApplier, StyleTable, StyleTransform
from tag_text.formatting.diagnostics import (
    DiagnosticCollector,
    DiagnosticsSink,
    LoggingDiagnostics,
)
from tag_text.formatting.parser import TagFormatParser, TextFactory, parse_text_format

__all__ = [
    "COLORS",
    "DECORATIONS",
    "Decoration",
    "StyledText",
    "StyledTextFactory",
    "TextColor",
    "StyleApplier",
    "StyleTable",
    "StyleTransform",
    "DiagnosticCollector",
    "DiagnosticsSink",
    "LoggingDiagnostics",
    "TagFormatParser",
    "TextFactory",
    "parse_text_format",
]
