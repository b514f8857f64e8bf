"""Intermediate Representation for tag-formatted text.

This module defines the styled text tree produced by the tag parser and
consumed by the format handlers. A tree is a root ``StyledText`` with no
text of its own and one leaf child per literal run of the input.
"""

from dataclasses import dataclass, field
from enum import Flag, auto
from typing import Iterator, Optional


# =============================================================================
# Colors and Decorations
# =============================================================================

@dataclass(frozen=True)
class TextColor:
    """A named text color.

    Attributes:
        name: Tag name used in markup (e.g., "darkBlue")
        wire_name: Name used in JSON text components (e.g., "dark_blue")
        hex: Hex RGB value used for terminal rendering
    """

    name: str
    wire_name: str
    hex: str


COLORS: dict[str, TextColor] = {
    color.name: color
    for color in (
        TextColor("black", "black", "#000000"),
        TextColor("darkBlue", "dark_blue", "#0000AA"),
        TextColor("darkGreen", "dark_green", "#00AA00"),
        TextColor("darkAqua", "dark_aqua", "#00AAAA"),
        TextColor("darkRed", "dark_red", "#AA0000"),
        TextColor("darkPurple", "dark_purple", "#AA00AA"),
        TextColor("gold", "gold", "#FFAA00"),
        TextColor("gray", "gray", "#AAAAAA"),
        TextColor("darkGray", "dark_gray", "#555555"),
        TextColor("blue", "blue", "#5555FF"),
        TextColor("green", "green", "#55FF55"),
        TextColor("aqua", "aqua", "#55FFFF"),
        TextColor("red", "red", "#FF5555"),
        TextColor("lightPurple", "light_purple", "#FF55FF"),
        TextColor("yellow", "yellow", "#FFFF55"),
        TextColor("white", "white", "#FFFFFF"),
    )
}


class Decoration(Flag):
    """Text decoration flags (combinable with |)."""

    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    UNDERLINED = auto()
    STRIKETHROUGH = auto()
    OBFUSCATED = auto()

    @property
    def tag(self) -> str:
        """Markup tag name for a single decoration."""
        return (self.name or "").lower()


DECORATIONS: dict[str, Decoration] = {
    flag.tag: flag
    for flag in (
        Decoration.BOLD,
        Decoration.ITALIC,
        Decoration.UNDERLINED,
        Decoration.STRIKETHROUGH,
        Decoration.OBFUSCATED,
    )
}


# =============================================================================
# Styled Text Tree
# =============================================================================

@dataclass
class StyledText:
    """A piece of text with applied styles and child segments.

    Attributes:
        text: Own text content (empty for the root of a parsed tree)
        styles: Style names in the order they were applied
        color: Effective color (the last color style applied wins)
        decorations: Combined decoration flags
        children: Child segments, in document order
    """

    text: str = ""
    styles: list[str] = field(default_factory=list)
    color: Optional[TextColor] = None
    decorations: Decoration = Decoration.NONE
    children: list["StyledText"] = field(default_factory=list)

    def with_color(self, color: TextColor) -> "StyledText":
        """Apply a color and record it as a style. Returns self."""
        self.styles.append(color.name)
        self.color = color
        return self

    def with_decoration(self, decoration: Decoration) -> "StyledText":
        """Apply a decoration and record it as a style. Returns self."""
        self.styles.append(decoration.tag)
        self.decorations |= decoration
        return self

    def append(self, child: "StyledText") -> "StyledText":
        """Attach a child segment. Returns self for chaining."""
        self.children.append(child)
        return self

    def has(self, decoration: Decoration) -> bool:
        """Check whether a decoration is applied to this node."""
        return decoration in self.decorations

    def leaves(self) -> Iterator["StyledText"]:
        """Yield every node carrying text, depth first."""
        if self.text:
            yield self
        for child in self.children:
            yield from child.leaves()

    @property
    def plain_text(self) -> str:
        """Get the text content of this node and its children without styling."""
        return self.text + "".join(child.plain_text for child in self.children)

    @property
    def is_empty(self) -> bool:
        return not self.text and not self.children

    def __str__(self) -> str:
        # Compact form: "[bold,red]hi+[red] there"
        prefix = f"[{','.join(self.styles)}]" if self.styles else ""
        return prefix + self.text + "+".join(str(child) for child in self.children)


class StyledTextFactory:
    """Default text factory building ``StyledText`` trees."""

    def empty(self) -> StyledText:
        """Create a fresh composite node with no text."""
        return StyledText()

    def from_literal(self, text: str) -> StyledText:
        """Create an unstyled leaf wrapping a literal run."""
        return StyledText(text=text)

    def append(self, parent: StyledText, child: StyledText) -> StyledText:
        """Attach ``child`` to ``parent`` and return the parent."""
        return parent.append(child)
