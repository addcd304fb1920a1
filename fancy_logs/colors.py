"""
Color helpers built on Rich styles.

Log lines are composed as plain strings with ANSI escapes embedded, so that
printf-style interpolation can run over the finished line just before it is
written. Rich does the heavy lifting in both directions:

  - `Style.render()` wraps text in the escape codes for a style string such
    as "green", "underline red" or "dim yellow".
  - `Text.from_ansi()` parses those escapes back out, which gives an exact
    cell width for alignment (wide glyphs count double, escapes count zero).

FakeColors has the same interface but returns text untouched. Fake mode uses
it so captured lines are plain and easy to assert against.
"""

from collections.abc import Callable
from functools import partial

from rich.color import ColorSystem
from rich.style import Style
from rich.text import Text


class Colors:
    """Paint strings with ANSI escape codes."""

    def __init__(self, color_system: ColorSystem = ColorSystem.STANDARD):
        self.color_system = color_system

    def paint(self, text: str, style: str) -> str:
        if not text:
            return text
        return Style.parse(style).render(text, color_system=self.color_system)

    def __call__(self, style: str) -> Callable[[str], str]:
        """Return a function that paints its argument with `style`."""
        return partial(self.paint, style=style)


class FakeColors(Colors):
    """Colors stand-in that leaves text unstyled."""

    def paint(self, text: str, style: str) -> str:
        return text


def visual_width(value: str) -> int:
    """Number of terminal cells `value` occupies once escapes are stripped."""
    return Text.from_ansi(value).cell_len
