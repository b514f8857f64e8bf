"""Terminal (ANSI) format handler."""

from rich.console import Console
from rich.style import Style
from rich.text import Text

from tag_text.formats.base import FormatHandler
from tag_text.formatting.ir import Decoration, StyledText


class ANSIHandler(FormatHandler):
    """Handler rendering styled text for a terminal via rich.

    Obfuscated text has no terminal equivalent and is shown blinking.
    """

    @property
    def name(self) -> str:
        return "ansi"

    def to_rich(self, node: StyledText) -> Text:
        """Convert a styled text tree to a rich Text object."""
        text = Text()
        for leaf in node.leaves():
            text.append(leaf.text, style=self._leaf_style(leaf))
        return text

    def render(self, node: StyledText) -> str:
        console = Console(force_terminal=True, color_system="truecolor", width=10_000)
        with console.capture() as capture:
            console.print(self.to_rich(node), end="", soft_wrap=True)
        return capture.get()

    def _leaf_style(self, leaf: StyledText) -> Style:
        return Style(
            color=leaf.color.hex if leaf.color else None,
            bold=leaf.has(Decoration.BOLD) or None,
            italic=leaf.has(Decoration.ITALIC) or None,
            underline=leaf.has(Decoration.UNDERLINED) or None,
            strike=leaf.has(Decoration.STRIKETHROUGH) or None,
            blink=leaf.has(Decoration.OBFUSCATED) or None,
        )
