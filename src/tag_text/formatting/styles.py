"""Style lookup tables mapping tag names to style transforms."""

from collections.abc import Mapping
from typing import Callable, Iterator, Optional, Protocol, TypeVar

from tag_text.formatting.ir import COLORS, DECORATIONS, Decoration, StyledText, TextColor

NodeT = TypeVar("NodeT")

StyleTransform = Callable[[NodeT], NodeT]


class StyleApplier(Protocol[NodeT]):
    """Anything that can resolve a tag name to a style transform."""

    def lookup(self, name: str) -> Optional[StyleTransform[NodeT]]:
        ...


class StyleTable(Mapping[str, StyleTransform]):
    """A lookup table of named style transforms.

    Lookup is exact: ``<Bold>`` and ``<bold>`` are different tags.

    Example:
        >>> table = StyleTable.default()
        >>> node = table.lookup("red")(StyledText("hi"))
        >>> node.styles
        ['red']
    """

    def __init__(self, transforms: Optional[Mapping[str, StyleTransform]] = None) -> None:
        self._transforms: dict[str, StyleTransform] = dict(transforms or {})

    @classmethod
    def default(cls) -> "StyleTable":
        """Build a table with the standard colors and decorations."""
        transforms: dict[str, StyleTransform] = {}
        for name, color in COLORS.items():
            transforms[name] = _color_transform(color)
        for name, decoration in DECORATIONS.items():
            transforms[name] = _decoration_transform(decoration)
        return cls(transforms)

    def lookup(self, name: str) -> Optional[StyleTransform]:
        """Get the transform for a tag name, or None if unknown."""
        return self._transforms.get(name)

    def extend(self, name: str, transform: StyleTransform) -> "StyleTable":
        """Register (or replace) a named transform. Returns self."""
        self._transforms[name] = transform
        return self

    def __getitem__(self, name: str) -> StyleTransform:
        return self._transforms[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._transforms)

    def __len__(self) -> int:
        return len(self._transforms)


def _color_transform(color: TextColor) -> Callable[[StyledText], StyledText]:
    return lambda node: node.with_color(color)


def _decoration_transform(decoration: Decoration) -> Callable[[StyledText], StyledText]:
    return lambda node: node.with_decoration(decoration)
