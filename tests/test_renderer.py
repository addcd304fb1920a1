"""
Tests for line composition (fancy_logs/renderer.py).

Renderer pieces are tested one at a time against a non-fake renderer so
colors and justification are active. rich's Text.from_ansi strips the escape
codes back out where a plain comparison is easier to read.
"""

from rich.cells import cell_len
from rich.text import Text

from fancy_logs import (
    ActionDefinition,
    ActionRegistry,
    FakeColors,
    FakeSink,
    MessageRecord,
    Renderer,
    compute_biggest_label,
    visual_width,
)


def plain(value: str) -> str:
    return Text.from_ansi(value).plain


def make_renderer(fake: bool = False) -> tuple[Renderer, FakeSink]:
    sink = FakeSink()
    return Renderer(ActionRegistry(), sink, fake=fake), sink


class TestBiggestLabel:
    def test_widest_label_is_complete(self):
        # "☒" + two spaces + "complete"
        assert compute_biggest_label(ActionRegistry(), FakeColors()) == 11

    def test_colors_do_not_change_width(self):
        renderer, _ = make_renderer()
        assert renderer.biggest_label == 11


class TestPieces:
    def test_prefix(self):
        renderer, _ = make_renderer()
        assert renderer.prefix(MessageRecord("info")) == ""
        prefix = renderer.prefix(MessageRecord("info", prefix="[api]"))
        assert prefix == "\x1b[2m[api]\x1b[0m "

    def test_suffix(self):
        renderer, _ = make_renderer()
        assert renderer.suffix(MessageRecord("info")) == ""
        suffix = renderer.suffix(MessageRecord("info", suffix="(2s)"))
        assert suffix.startswith(" \x1b[")
        assert plain(suffix) == " (2s)"

    def test_icon_colored(self):
        renderer, _ = make_renderer()
        icon = renderer.icon(MessageRecord("success"))
        assert icon == "\x1b[32m✔\x1b[0m  "

    def test_icon_without_color(self):
        renderer, _ = make_renderer()
        assert renderer.icon(MessageRecord("success", color=False)) == "✔  "

    def test_icon_disabled_reserves_space(self):
        renderer, _ = make_renderer()
        assert renderer.icon(MessageRecord("success", icon=False)) == "   "

    def test_icon_empty_in_fake_mode(self):
        renderer, _ = make_renderer(fake=True)
        assert renderer.icon(MessageRecord("success")) == ""

    def test_label_variants(self):
        renderer, _ = make_renderer()
        assert renderer.label(MessageRecord("info", color=False)) == "info"
        assert renderer.label(MessageRecord("info", underline=False)) == "\x1b[34minfo\x1b[0m"
        underlined = renderer.label(MessageRecord("info"))
        assert underlined != "\x1b[34minfo\x1b[0m"
        assert plain(underlined) == "info"

    def test_body_plain_text(self):
        renderer, _ = make_renderer()
        assert renderer.body(MessageRecord("error", text="x", stack="ValueError: x\n  at")) == "x"

    def test_body_fatal_dims_stack_frames(self):
        renderer, _ = make_renderer()
        record = MessageRecord("fatal", text="x", stack="ValueError: x\n  File a\n  File b")
        lines = renderer.body(record).split("\n")
        assert lines[0] == "ValueError: x"
        assert lines[1:] == ["\x1b[2m  File a\x1b[0m", "\x1b[2m  File b\x1b[0m"]

    def test_body_fatal_single_line_stack(self):
        renderer, _ = make_renderer()
        assert renderer.body(MessageRecord("fatal", text="x", stack="ValueError: x")) == (
            "ValueError: x"
        )

    def test_justify_fake_mode_is_single_space(self):
        renderer, _ = make_renderer(fake=True)
        assert renderer.justify("", "success") == " "


class TestJustification:
    def test_label_and_gap_have_constant_width(self):
        renderer, _ = make_renderer()
        for name in renderer.registry:
            record = MessageRecord(name)
            icon = renderer.icon(record)
            label = renderer.label(record)
            gap = renderer.justify(icon, label)
            assert visual_width(f"{icon}{label}{gap}") == renderer.biggest_label + 2, name

    def test_bodies_start_in_same_column(self):
        renderer, _ = make_renderer()
        columns = set()
        for name in renderer.registry:
            line = plain(renderer.compose(MessageRecord(name, text="hello")))
            columns.add(cell_len(line[: line.index("hello")]))
        assert columns == {13}

    def test_alignment_holds_without_icons(self):
        renderer, _ = make_renderer()
        line = plain(renderer.compose(MessageRecord("success", text="hello", icon=False)))
        assert line == "   success   hello"


class TestRender:
    def test_render_interpolates_and_writes(self):
        renderer, sink = make_renderer(fake=True)
        line = renderer.render(MessageRecord("pending", text="Notes for %s", args=("1.2.0",)))
        assert line == "pending Notes for 1.2.0"
        assert sink.logs == [line]

    def test_render_leaves_percent_without_args(self):
        renderer, sink = make_renderer(fake=True)
        renderer.render(MessageRecord("info", text="100%% done"))
        assert sink.logs == ["info 100%% done"]

    def test_refresh_after_registry_change(self):
        renderer, _ = make_renderer()
        renderer.registry.register("deployment", ActionDefinition("cyan", "+"))
        assert renderer.biggest_label == 11
        renderer.refresh()
        assert renderer.biggest_label == 13
