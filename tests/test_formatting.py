"""Tests for printf-style interpolation (fancy_logs/formatting.py)."""

from fancy_logs import format_message


class TestFormatMessage:
    def test_string_placeholder(self):
        assert format_message("Write notes for %s", "1.2.0") == "Write notes for 1.2.0"

    def test_no_args_returns_template_untouched(self):
        assert format_message("100% done %s %%") == "100% done %s %%"

    def test_missing_args_leave_placeholder(self):
        assert format_message("%s and %s", "a") == "a and %s"

    def test_extra_args_are_appended(self):
        assert format_message("built", "a", "b") == "built a b"

    def test_percent_escape_with_args(self):
        assert format_message("%d%%", 50) == "50%"

    def test_numbers(self):
        assert format_message("%d", "3") == "3"
        assert format_message("%d", 2.5) == "2.5"
        assert format_message("%d", "abc") == "NaN"
        assert format_message("%d", "42abc") == "NaN"
        assert format_message("%i", "3.7") == "3"
        assert format_message("%i", "42abc") == "42"
        assert format_message("%f", "1") == "1"
        assert format_message("%f", "2.5kg") == "2.5"
        assert format_message("%f", "kg") == "NaN"

    def test_json_and_repr(self):
        assert format_message("%j", {"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'
        assert format_message("%o", "x") == "'x'"

    def test_unknown_directive_is_literal(self):
        assert format_message("%x %s", "a") == "%x a"

    def test_huge_integers_do_not_raise(self):
        assert format_message("%d", 10**400) == str(10**400)
        assert format_message("%i", 10**400) == str(10**400)
        assert format_message("%f", 10**400) == "Infinity"
        assert format_message("%f", -(10**400)) == "-Infinity"
        assert format_message("%d", "1e400") == "Infinity"

    def test_unserializable_json_falls_back_to_str(self):
        value = {(1, 2): "v"}
        assert format_message("%j", value) == str(value)

    def test_circular_json(self):
        value: list = []
        value.append(value)
        assert format_message("%j", value) == "[Circular]"

    def test_non_numeric_types(self):
        assert format_message("%d", None) == "NaN"
        assert format_message("%i", float("inf")) == "NaN"
        assert format_message("%d", True) == "1"
