"""Plain text format handler."""

from tag_text.formats.base import FormatHandler
from tag_text.formatting.ir import StyledText


class PlainHandler(FormatHandler):
    """Handler rendering only the text content, all styling dropped."""

    @property
    def name(self) -> str:
        return "plain"

    def render(self, node: StyledText) -> str:
        return node.plain_text
