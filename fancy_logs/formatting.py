"""
printf-style interpolation for log lines.

Why not Python's `%` operator?
  `"%s and %s" % ("a",)` raises TypeError, and a log call should never be the
  thing that crashes a CLI. The rules here are the ones Node's `util.format`
  uses (and that most terminal loggers copied), which are forgiving by design
  of how they consume arguments:

  - `%s` str, `%d` number, `%i` parseInt, `%f` parseFloat, `%j` compact JSON,
    `%o` / `%O` repr, `%%` a literal percent sign
  - placeholders without a matching argument are left as written
  - arguments without a placeholder are appended, separated by spaces
  - with no arguments at all the template is returned unchanged, so text that
    merely contains "%" (coverage numbers, URL escapes, stack traces) is safe

Numbers are printed the JavaScript way: integral values without ".0",
overflow as "Infinity", anything unparseable as "NaN". No converter raises.
"""

import json
import math
import re
from typing import Any

PLACEHOLDER = re.compile(r"%[sdifjoO%]")

# Leading numeric text accepted by parseFloat / parseInt ("42abc" -> 42)
FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def _js_number(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer():
        return str(int(number))
    return repr(number)


def _to_float(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.copysign(math.inf, value)


def _number(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    try:
        return _js_number(float(value))
    except (TypeError, ValueError, OverflowError):
        return "NaN"


def _integer(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if math.isfinite(value) else "NaN"
    match = INT_PREFIX.match(str(value))
    return str(int(match.group(0))) if match else "NaN"


def _float(value: Any) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        return _js_number(_to_float(value))
    if isinstance(value, float):
        return _js_number(value)
    match = FLOAT_PREFIX.match(str(value))
    if not match:
        return "NaN"
    # float() turns out-of-range text like "1e400" into inf rather than raising
    return _js_number(float(match.group(0)))


def _json(value: Any) -> str:
    try:
        return json.dumps(value, separators=(",", ":"), default=str)
    except ValueError:
        return "[Circular]"
    except TypeError:
        # Non-string dict keys such as tuples
        return str(value)


CONVERTERS = {
    "%s": str,
    "%d": _number,
    "%i": _integer,
    "%f": _float,
    "%j": _json,
    "%o": repr,
    "%O": repr,
}


def format_message(template: str, *args: Any) -> str:
    """Substitute `args` into `template` positionally."""
    if not args:
        return template

    remaining = list(args)

    def substitute(match: re.Match) -> str:
        token = match.group(0)
        if token == "%%":
            return "%"
        if not remaining:
            return token
        return CONVERTERS[token](remaining.pop(0))

    result = PLACEHOLDER.sub(substitute, template)
    if remaining:
        result = " ".join([result, *(str(arg) for arg in remaining)])
    return result
