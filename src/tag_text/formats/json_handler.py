"""JSON text component format handler."""

import json
from typing import Any, Optional

from tag_text.formats.base import FormatHandler
from tag_text.formatting.ir import DECORATIONS, StyledText


class JSONHandler(FormatHandler):
    """Handler for JSON text components.

    The root becomes ``{"text": "", "extra": [...]}`` with one entry per
    child. Each entry carries its text, its color by wire name, and one
    ``true`` key per applied decoration::

        {"text": "", "extra": [{"text": "hi", "color": "red", "bold": true}]}
    """

    def __init__(self, indent: Optional[int] = None) -> None:
        self.indent = indent

    @property
    def name(self) -> str:
        return "json"

    def render(self, node: StyledText) -> str:
        return json.dumps(self.to_component(node), indent=self.indent, ensure_ascii=False)

    def to_component(self, node: StyledText) -> dict[str, Any]:
        """Convert a styled text tree to a JSON-compatible dict."""
        component: dict[str, Any] = {"text": node.text}
        if node.color is not None:
            component["color"] = node.color.wire_name
        for tag, decoration in DECORATIONS.items():
            if node.has(decoration):
                component[tag] = True
        if node.children:
            component["extra"] = [self.to_component(child) for child in node.children]
        return component
