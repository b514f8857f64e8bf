"""Tag markup format handler."""

from tag_text.formats.base import FormatHandler
from tag_text.formatting.ir import StyledText
from tag_text.formatting.parser import TagFormatParser


class MarkupHandler(FormatHandler):
    """Handler writing canonical, balanced tag markup.

    Every leaf is wrapped in its own styles, opened in application order
    and closed in reverse, so overlapping input comes out nested:
    ``<italic>a<green>b</italic>c</green>`` becomes
    ``<italic>a</italic><italic><green>b</green></italic><green>c</green>``.

    Unstyled leaves that would join into a tag (``<`` then ``b>``) are
    kept apart by an empty ``<br></br>`` pair, which parses to nothing.
    """

    SEPARATOR = "<br></br>"

    @property
    def name(self) -> str:
        return "markup"

    def render(self, node: StyledText) -> str:
        parts: list[str] = []
        # Unstyled text written since the last tag
        bare = ""
        for leaf in node.leaves():
            if leaf.styles:
                opening = "".join(f"<{style}>" for style in leaf.styles)
                closing = "".join(f"</{style}>" for style in reversed(leaf.styles))
                parts.append(f"{opening}{leaf.text}{closing}")
                bare = ""
                continue

            if bare and TagFormatParser.TAG_PATTERN.search(bare + leaf.text):
                parts.append(self.SEPARATOR)
                bare = ""
            parts.append(leaf.text)
            bare += leaf.text
        return "".join(parts)
