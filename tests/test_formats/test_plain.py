"""Tests for the plain text handler."""

from pathlib import Path

from tag_text.formats.txt_handler import PlainHandler
from tag_text.formatting.ir import COLORS, StyledText


class TestPlainHandler:
    """Tests for the plain text format handler."""

    def test_name(self):
        assert PlainHandler().name == "plain"

    def test_render_drops_styles(self):
        """Test that only the text of each segment is kept."""
        root = StyledText()
        root.append(StyledText("Hello").with_color(COLORS["red"]))
        root.append(StyledText(", world!"))

        assert PlainHandler().render(root) == "Hello, world!"

    def test_render_empty(self):
        assert PlainHandler().render(StyledText()) == ""

    def test_write_multiline(self, tmp_path: Path):
        """Test that newlines inside runs are preserved."""
        root = StyledText().append(StyledText("Line one.\n\nLine two."))
        output_path = tmp_path / "output.txt"

        PlainHandler().write(root, output_path)

        assert output_path.read_text(encoding="utf-8") == "Line one.\n\nLine two."
