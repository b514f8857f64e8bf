"""Tests for the styled text IR and style tables."""

from tag_text.formatting.ir import (
    COLORS,
    DECORATIONS,
    Decoration,
    StyledText,
    StyledTextFactory,
)
from tag_text.formatting.styles import StyleTable


class TestStyledText:
    """Tests for the StyledText node."""

    def test_color_last_wins(self):
        """Test that the last applied color is the effective one."""
        node = StyledText("x").with_color(COLORS["red"]).with_color(COLORS["blue"])

        assert node.styles == ["red", "blue"]
        assert node.color == COLORS["blue"]

    def test_decorations_combine(self):
        """Test that decorations accumulate as flags."""
        node = StyledText("x")
        node.with_decoration(Decoration.BOLD).with_decoration(Decoration.UNDERLINED)

        assert node.has(Decoration.BOLD)
        assert node.has(Decoration.UNDERLINED)
        assert not node.has(Decoration.ITALIC)
        assert node.styles == ["bold", "underlined"]

    def test_plain_text_and_leaves(self):
        """Test text collection across children."""
        root = StyledText()
        root.append(StyledText("Hello, ")).append(StyledText("world"))

        assert root.plain_text == "Hello, world"
        assert [leaf.text for leaf in root.leaves()] == ["Hello, ", "world"]

    def test_str_compact_form(self):
        """Test the compact string form used for comparisons."""
        root = StyledText()
        root.append(StyledText("a").with_decoration(Decoration.BOLD))
        root.append(StyledText("b"))

        assert str(root) == "[bold]a+b"

    def test_empty_root(self):
        """Test that a new root has no text and no children."""
        root = StyledTextFactory().empty()

        assert root.is_empty
        assert str(root) == ""


class TestStyleTable:
    """Tests for StyleTable lookups."""

    def test_default_vocabulary(self):
        """Test that the default table knows every color and decoration."""
        table = StyleTable.default()

        assert len(table) == len(COLORS) + len(DECORATIONS) == 21
        for name in ("darkAqua", "lightPurple", "bold", "obfuscated"):
            assert name in table

    def test_lookup_unknown_returns_none(self):
        """Test that unknown names resolve to None."""
        table = StyleTable.default()

        assert table.lookup("sparkly") is None
        assert table.lookup("RED") is None

    def test_lookup_applies_style(self):
        """Test that a looked-up transform styles the node."""
        node = StyleTable.default().lookup("darkGreen")(StyledText("x"))

        assert node.color.wire_name == "dark_green"
        assert node.styles == ["darkGreen"]

    def test_extend(self):
        """Test registering a custom transform."""
        table = StyleTable().extend("loud", lambda node: node.with_decoration(Decoration.BOLD))

        assert list(table) == ["loud"]
        assert table.lookup("loud")(StyledText("x")).has(Decoration.BOLD)
