"""
printf-style message rendering for the feedback catalog.

Placeholders are %<width>.<precision><type> with type one of:
  d   integer, truncated toward zero
  f   fixed point; shortest round-trip decimal when no precision is given
  s   text (numbers render as with %f)

Width is accepted and ignored. Arguments are consumed left to right. None,
missing arguments and non-finite numbers all render as "NaN".
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Optional

_DIGITS = "0123456789"
_TYPES = "dfs"


def _to_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def _shortest(num: float) -> str:
    if num == 0:
        return "0"
    text = repr(num)
    if 1e-6 <= abs(num) < 1e21:
        if "e" in text:
            text = format(Decimal(text), "f")
        if text.endswith(".0"):
            text = text[:-2]
        return text
    mantissa, exponent = text.split("e")
    sign, digits = exponent[0], exponent[1:].lstrip("0")
    return f"{mantissa}e{sign}{digits}"


def _fixed(num: float, decimals: int) -> str:
    if abs(num) >= 1e21:
        return _shortest(num)
    if num == 0:
        num = 0.0   # no "-0.00"
    with localcontext() as ctx:
        ctx.prec = 64 + decimals   # |num| < 1e21, so 22 integer digits at most
        quantum = Decimal(1).scaleb(-decimals)
        return format(Decimal(num).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def _render(kind: str, precision: Optional[int], value: Any) -> str:
    if kind == "s" and isinstance(value, str):
        return value
    num = _to_float(value)
    if num is None or not math.isfinite(num):
        return "NaN"
    if kind == "d":
        return _shortest(float(math.trunc(num)))
    if kind == "f" and precision is not None:
        return _fixed(num, precision)
    return _shortest(num)


def format_message(template: str, *args: Any) -> str:
    out: list[str] = []
    next_arg = 0
    i = 0
    n = len(template)

    while i < n:
        if template[i] != "%":
            out.append(template[i])
            i += 1
            continue

        j = i + 1
        while j < n and template[j] in _DIGITS:
            j += 1
        precision = None
        if j + 1 < n and template[j] == "." and template[j + 1] in _DIGITS:
            k = j + 1
            while k < n and template[k] in _DIGITS:
                k += 1
            precision = int(template[j + 1:k])
            j = k

        if j < n and template[j] in _TYPES:
            value = args[next_arg] if next_arg < len(args) else None
            next_arg += 1
            out.append(_render(template[j], precision, value))
            i = j + 1
        else:
            out.append("%")
            i += 1

    return "".join(out)
