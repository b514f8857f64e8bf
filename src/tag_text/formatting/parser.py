"""Tag markup parser for converting tagged strings to a styled text tree.

Markup uses XML-like tags whose names are style names::

    <italic>hello <green>world!</green> it's me!</italic>

Unlike real XML, tags may overlap. Closing a tag removes it from the
active set wherever it sits, so this is valid and meaningful::

    <italic>italic <green>both</italic> green</green>
"""

import re
from typing import Any, Optional, Protocol

from tag_text.formatting.diagnostics import DiagnosticsSink, LoggingDiagnostics
from tag_text.formatting.ir import StyledText, StyledTextFactory
from tag_text.formatting.styles import StyleApplier, StyleTable


class TextFactory(Protocol):
    """Creates and assembles styled text nodes."""

    def empty(self) -> Any:
        ...

    def from_literal(self, text: str) -> Any:
        ...

    def append(self, parent: Any, child: Any) -> Any:
        ...


def describe_value(value: Any) -> str:
    """Format a value the way a JavaScript template literal would show it."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else describe_value(item) for item in value)
    return str(value)


class TagFormatParser:
    """Parse tag markup into a styled text tree.

    The parser holds only its injected collaborators; all scan state is
    local to a single ``parse`` call.
    """

    # The capture group keeps tags in the split result, so literal runs sit
    # at even indices and tags at odd indices.
    TAG_PATTERN = re.compile(r"(</?[A-Za-z]+>)")

    def __init__(
        self,
        styles: Optional[StyleApplier] = None,
        factory: Optional[TextFactory] = None,
    ) -> None:
        """Initialize the parser.

        Args:
            styles: Resolves tag names to style transforms
                (default: the standard color and decoration table)
            factory: Builds the output nodes (default: StyledText nodes)
        """
        self.styles = styles if styles is not None else StyleTable.default()
        self.factory = factory if factory is not None else StyledTextFactory()

    def parse(self, markup: Any, diagnostics: DiagnosticsSink) -> Any:
        """Convert tag markup to a styled text tree.

        Malformed markup never raises; every anomaly is reported to
        ``diagnostics`` and parsing continues.

        Args:
            markup: The markup string
            diagnostics: Sink receiving warning messages

        Returns:
            A root node with one child per non-empty literal run
        """
        root = self.factory.empty()
        if not isinstance(markup, str):
            diagnostics.warn(
                f"parseTextFormat received non-string input: {describe_value(markup)}"
            )
            return root

        # Dict keys give insertion order with removal from any position.
        active: dict[str, None] = {}

        for index, part in enumerate(self.TAG_PATTERN.split(markup)):
            if index % 2:
                if part.startswith("</"):
                    name = part[2:-1]
                    if name not in active:
                        diagnostics.warn(f"Extra closing modifier {name} in {markup}")
                    active.pop(name, None)
                else:
                    name = part[1:-1]
                    if name in active:
                        diagnostics.warn(f"Extra modifier {name} in {markup}")
                    active.setdefault(name)
                continue

            if not part:
                continue
            root = self.factory.append(
                root, self._style_run(part, active, markup, diagnostics)
            )

        for name in active:
            diagnostics.warn(f"Unclosed modifier {name} in {markup}")

        return root

    def _style_run(
        self,
        text: str,
        active: dict[str, None],
        markup: str,
        diagnostics: DiagnosticsSink,
    ) -> Any:
        """Create a leaf for a literal run and apply the active styles in order."""
        node = self.factory.from_literal(text)
        for name in active:
            transform = self.styles.lookup(name)
            if transform is None:
                diagnostics.warn(f"Unknown modifier {name} in {markup}")
                continue
            node = transform(node)
        return node


def parse_text_format(
    markup: Any,
    diagnostics: Optional[DiagnosticsSink] = None,
    styles: Optional[StyleApplier] = None,
) -> StyledText:
    """Parse tag markup with the default factory.

    Diagnostics go to the "tag_text" logger unless a sink is given.

    Example:
        >>> str(parse_text_format("<bold><red>hi</red></bold>"))
        '[bold,red]hi'
    """
    parser = TagFormatParser(styles=styles)
    if diagnostics is None:
        diagnostics = LoggingDiagnostics()
    return parser.parse(markup, diagnostics)
