from __future__ import annotations

import json
import math
import re
from typing import Any

# Unicode White_Space; narrower than str.split(), which also splits on \x1c-\x1f
_WHITESPACE_RUN = re.compile(
    "[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(s: str) -> float:
    f = float(s)
    if not math.isfinite(f):
        raise ValueError(f"number out of range: {s}")
    return f


def _loads_strict(chart: str) -> Any:
    # NaN, Infinity and overflowing numbers are not JSON
    return json.loads(chart, parse_constant=_reject_constant, parse_float=_finite_float)


def parse_chart(chart: str) -> Any:
    """
    Chart config as a JSON value when it parses, otherwise the raw text.
    QuickChart accepts both and evaluates JS object literals server-side.
    """
    try:
        return _loads_strict(chart)
    except Exception:
        return chart


def compact_chart(chart: str) -> str:
    """
    Shrink a chart config before it goes into a query string.

    Strict JSON is re-serialised without insignificant whitespace. Anything
    else (unquoted keys, single quotes, functions) is treated as opaque text
    and only has its whitespace runs collapsed to single spaces.
    """
    try:
        value = _loads_strict(chart)
    except Exception:
        return _WHITESPACE_RUN.sub(" ", chart).strip(" ")
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def strip_quotes(value: str) -> str:
    # one layer each of " and ', at most one character per end
    for q in ('"', "'"):
        if value.startswith(q):
            value = value[1:]
        if value.endswith(q):
            value = value[:-1]
    return value
