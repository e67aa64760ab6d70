# ABOUTME: Display formatting for numeric book metadata.
# ABOUTME: Renders Calibre series indexes as plain decimal strings.

import math
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

MAX_FRACTION_DIGITS = 16

_QUANTUM = Decimal(1).scaleb(-MAX_FRACTION_DIGITS)


def format_series_index(value: float) -> str:
    """Render a series index as a locale-independent decimal string.

    Never uses scientific notation or grouping separators, keeps at most 16
    fractional digits, and drops trailing fractional zeros:
    2.0 -> "2", 2.5 -> "2.5", 1e20 -> "100000000000000000000".

    Non-finite values render as "NaN".
    """
    if not math.isfinite(value):
        return "NaN"

    # repr gives the shortest string that round-trips, so 2.3 stays "2.3"
    with localcontext() as ctx:
        ctx.prec = 400
        rounded = Decimal(repr(value)).quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)
        if rounded.is_zero():
            return "0"
        return format(rounded.normalize(), "f")
