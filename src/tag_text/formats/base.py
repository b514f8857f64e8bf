"""Abstract base class for styled text format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path

from tag_text.formatting.ir import StyledText


class FormatHandler(ABC):
    """Abstract base class for output format handlers.

    Each handler renders a parsed styled text tree to a string and can
    write that rendering to a file.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the format name used on the command line (e.g., 'json')."""
        ...

    @abstractmethod
    def render(self, node: StyledText) -> str:
        """Render a styled text tree.

        Args:
            node: Root of the tree returned by the parser

        Returns:
            The rendered text
        """
        ...

    def write(self, node: StyledText, path: Path) -> None:
        """Write the rendering of a styled text tree to a file.

        Args:
            node: Root of the tree returned by the parser
            path: Path to write the output to
        """
        path.write_text(self.render(node), encoding="utf-8")
