import math
import struct
from decimal import ROUND_HALF_UP, Context, Decimal

_UNIT = Decimal("1")

# Private context so rounding never depends on the thread's current one.
_CONTEXT = Context(prec=28, rounding=ROUND_HALF_UP)

# Every double at or above this magnitude is already an integer.
_INTEGRAL_THRESHOLD = 2.0**52


def round_half_away_from_zero(value: float) -> float:
    """
    Round to the nearest integer, resolving ties away from zero.

    ``decimal.ROUND_HALF_UP`` rounds ties away from zero for both signs,
    unlike the builtin ``round`` which rounds half to even.

    :param value: Value to round
    :return: Rounded value (NaN and infinities are returned unchanged)
    """
    if not math.isfinite(value) or abs(value) >= _INTEGRAL_THRESHOLD:
        return value

    rounded = Decimal(value).quantize(_UNIT, rounding=ROUND_HALF_UP, context=_CONTEXT)

    return float(rounded)


def to_single_precision(value: float) -> float:
    """
    Narrow a double to IEEE-754 binary32 and widen it back.

    :param value: Value to narrow
    :return: Nearest single-precision value, or a signed infinity on overflow
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def double_bits(value: float) -> int:
    """Return the IEEE-754 bit pattern of a double as a signed 64-bit integer."""
    return struct.unpack("<q", struct.pack("<d", value))[0]
