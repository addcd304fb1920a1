"""
Turns MessageRecords into finished log lines.

A line is assembled from five pieces, each computed by its own method so it
can be tested on its own:

    [prefix ]<icon><label><justify><body>[ suffix]

The justification gap pads every label to the width of the widest one
(biggest_label) plus two spaces, so message bodies line up in one column no
matter which action printed them:

    ✔  success   Compiled assets
    ℹ  info      Watching for changes
    ☒  complete  Build finished

Fake mode drops the icon and uses a single space instead of the computed gap:
with colors stubbed out there is nothing to align against, and captured lines
stay short and predictable for assertions.

Why measure widths instead of using len()?
  Pieces carry ANSI escapes, and badges like "✔" or "☒" can be one or two
  terminal cells depending on the glyph. len() counts both the escape bytes
  and code points, so columns would drift. visual_width() asks Rich for the
  cell length of the decoded text, which is what the terminal actually draws.

Why is biggest_label cached?
  Measuring every registered action on every line would be wasted work: the
  result only changes when the registry does. Logger.register_action() calls
  refresh() after adding an action; code that mutates a shared registry
  directly must call refresh() itself.

Why interpolate last?
  printf-style arguments are substituted into the whole line only at the very
  end, after every piece is composed. A "%s" in a prefix or suffix consumes
  arguments the same way it would in the message, and the widths used for
  alignment are measured before any argument text is known.
"""

from .actions import ActionRegistry
from .colors import Colors, FakeColors, visual_width
from .formatting import format_message
from .messages import MessageRecord
from .sink import Sink

FATAL = "fatal"


def compute_biggest_label(registry: ActionRegistry, colors: Colors) -> int:
    """Widest "badge + two spaces + label" across every registered action."""
    widths = []
    for name, action in registry.items():
        badge = colors.paint(action.badge, action.color)
        label = colors.paint(name, f"underline {action.color}")
        widths.append(visual_width(f"{badge}  {label}"))
    return max(widths, default=0)


class Renderer:
    """Formats records and hands the finished lines to a Sink."""

    def __init__(self, registry: ActionRegistry, sink: Sink, fake: bool = False):
        self.registry = registry
        self.sink = sink
        self.fake = fake
        self.colors = FakeColors() if fake else Colors()
        self.biggest_label = compute_biggest_label(registry, self.colors)

    def refresh(self) -> None:
        """Recompute biggest_label after the registry has changed."""
        self.biggest_label = compute_biggest_label(self.registry, self.colors)

    def whitespace(self, length: int) -> str:
        return " " if self.fake else " " * max(length, 0)

    def prefix(self, record: MessageRecord) -> str:
        if record.prefix:
            return f"{self.colors.paint(record.prefix, 'dim')}{self.whitespace(1)}"
        return ""

    def icon(self, record: MessageRecord) -> str:
        if self.fake:
            return ""

        action = self.registry.get(record.action)
        if not record.icon:
            return self.whitespace(3)

        if not record.color:
            return f"{action.badge}{self.whitespace(2)}"

        return f"{self.colors.paint(action.badge, action.color)}{self.whitespace(2)}"

    def label(self, record: MessageRecord) -> str:
        action = self.registry.get(record.action)

        if record.color and record.underline:
            return self.colors.paint(record.action, f"underline {action.color}")

        if record.color:
            return self.colors.paint(record.action, action.color)

        return record.action

    def body(self, record: MessageRecord) -> str:
        """Message text. Fatal errors show the stack with frame lines dimmed."""
        if record.action != FATAL or not record.stack:
            return record.text

        first, *frames = record.stack.split("\n")
        if not frames:
            return first
        return "\n".join([first, *(self.colors.paint(line, "dim") for line in frames)])

    def suffix(self, record: MessageRecord) -> str:
        if record.suffix:
            return f"{self.whitespace(1)}{self.colors.paint(record.suffix, 'dim yellow')}"
        return ""

    def justify(self, icon: str, label: str) -> str:
        if self.fake:
            return self.whitespace(1)
        return self.whitespace(self.biggest_label - visual_width(f"{icon}{label}") + 2)

    def compose(self, record: MessageRecord) -> str:
        """The full line before argument interpolation."""
        icon = self.icon(record)
        label = self.label(record)
        return (
            f"{self.prefix(record)}{icon}{label}{self.justify(icon, label)}"
            f"{self.body(record)}{self.suffix(record)}"
        )

    def render(self, record: MessageRecord) -> str:
        """Compose, interpolate and write one record. Returns the written line."""
        line = format_message(self.compose(record), *record.args)
        self.sink.write(line, self.registry.get(record.action).severity)
        return line
