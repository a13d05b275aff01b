"""Angle conversion, normalization and degree/minute/second formatting."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from numbers import Real
from typing import Literal, Optional, Union

from spherenav.utils.errors import InvalidInputError

DmsFormat = Literal["d", "dm", "dms"]

# Default precision grows with granularity so strings stay a similar length.
DEFAULT_DP: dict[str, int] = {"d": 0, "dm": 2, "dms": 4}

DEGREE = "°"
PRIME = "′"
DOUBLE_PRIME = "″"

_COMPASS_SUFFIX = re.compile(r"[NSEW]$", re.IGNORECASE)
_NEGATIVE = re.compile(r"^-|[WS]$", re.IGNORECASE)
_SEPARATORS = re.compile(r"[^0-9.]+")


def require_finite(value: object, name: str) -> float:
    """Return ``value`` as a float, rejecting non-numbers, NaN and infinities.

    Args:
        value: Candidate numeric argument.
        name: Argument name used in the error message.

    Returns:
        The value converted to float.

    Raises:
        InvalidInputError: If the value is not a finite real number.
    """

    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(f"{name} must be a number, got {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return result


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


def normalize_bearing(degrees: float) -> float:
    """Reduce an angle to the compass range [0, 360)."""

    return ((degrees % 360) + 360) % 360


def wrap_longitude(degrees: float) -> float:
    """Reduce a longitude to the range (-180, 180]."""

    result = (degrees + 540) % 360 - 180
    return 180.0 if result <= -180 else result


def round_significant(value: float, precision: int) -> float:
    """Round to a number of significant digits (not decimal places).

    Args:
        value: Number to round.
        precision: Significant digits to keep, at least 1.

    Returns:
        The rounded value, e.g. ``round_significant(968.8535, 4) == 968.9``.
    """

    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 1:
        raise InvalidInputError(f"precision must be a positive integer, got {precision!r}")
    return float(f"{value:.{precision}g}")


def _resolve_dp(fmt: str, dp: Optional[int]) -> int:
    if fmt not in DEFAULT_DP:
        raise InvalidInputError(f"format must be one of 'd', 'dm', 'dms', got {fmt!r}")
    if dp is None:
        return DEFAULT_DP[fmt]
    if isinstance(dp, bool) or not isinstance(dp, int) or dp < 0:
        raise InvalidInputError(f"dp must be a non-negative integer, got {dp!r}")
    return dp


def _field_width(int_digits: int, dp: int) -> int:
    return int_digits + (dp + 1 if dp else 0)


def _round_half_up(value: float, dp: int) -> Decimal:
    # exact binary value, halves rounded away from zero
    exact = Decimal(value)
    context = Context(prec=max(28, exact.adjusted() + dp + 2))
    return exact.quantize(Decimal(1).scaleb(-dp), rounding=ROUND_HALF_UP, context=context)


def to_dms(deg: float, fmt: DmsFormat = "dms", dp: Optional[int] = None) -> str:
    """Format unsigned degrees as d, d/m or d/m/s.

    Degrees are padded to three integer digits, minutes and seconds to two.
    The total is rounded in its smallest unit before being split, so a
    value such as 0.99999999 degrees becomes ``001°00′00.0000″`` rather
    than carrying a 60 into the seconds field.

    Args:
        deg: Angle in degrees; the sign is discarded.
        fmt: ``"d"``, ``"dm"`` or ``"dms"``.
        dp: Decimal places of the last field. Defaults to 0, 2 and 4.

    Returns:
        Formatted string using the degree, prime and double prime symbols.
    """

    deg = abs(require_finite(deg, "deg"))
    dp = _resolve_dp(fmt, dp)

    if fmt == "d":
        return f"{_round_half_up(deg, dp):0{_field_width(3, dp)}.{dp}f}{DEGREE}"

    if fmt == "dm":
        minutes = float(_round_half_up(deg * 60, dp))
        d = int(minutes // 60)
        m = minutes - d * 60
        return f"{d:03d}{DEGREE}{m:0{_field_width(2, dp)}.{dp}f}{PRIME}"

    seconds = float(_round_half_up(deg * 3600, dp))
    d = int(seconds // 3600)
    m = int(seconds // 60) % 60
    s = seconds - d * 3600 - m * 60
    return (
        f"{d:03d}{DEGREE}{m:02d}{PRIME}"
        f"{s:0{_field_width(2, dp)}.{dp}f}{DOUBLE_PRIME}"
    )


def to_lat(deg: float, fmt: DmsFormat = "dms", dp: Optional[int] = None) -> str:
    """Format a latitude with an N/S suffix, e.g. ``51°30′00.00″N``."""

    text = to_dms(deg, fmt, dp)
    # drop the pad digit; lenient out-of-range latitudes keep all three
    if text.startswith("0"):
        text = text[1:]
    return text + ("S" if deg < 0 else "N")


def to_lon(deg: float, fmt: DmsFormat = "dms", dp: Optional[int] = None) -> str:
    """Format a longitude with an E/W suffix, e.g. ``000°07′48.00″W``."""

    return to_dms(deg, fmt, dp) + ("W" if deg < 0 else "E")


def to_bearing(deg: float, fmt: DmsFormat = "dms", dp: Optional[int] = None) -> str:
    """Format a bearing in [0, 360) as d, d/m or d/m/s."""

    text = to_dms(normalize_bearing(require_finite(deg, "bearing")), fmt, dp)
    # rounding can push 359.99... up to 360
    if text.startswith("360"):
        text = "000" + text[3:]
    return text


def parse_dms(value: Union[str, float]) -> float:
    """Parse degrees/minutes/seconds into signed decimal degrees.

    Accepts plain numbers, and strings with one to three numeric components
    separated by any symbols or whitespace: ``"51°28′40.12″N"``,
    ``"000 00 05 W"``, ``"-3.07"``. A leading minus, ``S`` or ``W`` makes
    the result negative.

    Raises:
        InvalidInputError: If no valid number can be read.
    """

    if isinstance(value, Real) and not isinstance(value, bool):
        return require_finite(value, "dms")
    if not isinstance(value, str):
        raise InvalidInputError(f"cannot parse {value!r} as degrees")

    text = value.strip()
    body = _COMPASS_SUFFIX.sub("", text.lstrip("-")).strip()
    parts = [part for part in _SEPARATORS.split(body) if part]
    if not parts or len(parts) > 3:
        raise InvalidInputError(f"cannot parse {value!r} as degrees")

    try:
        numbers = [float(part) for part in parts]
    except ValueError as exc:
        raise InvalidInputError(f"cannot parse {value!r} as degrees") from exc

    deg = sum(number / 60 ** index for index, number in enumerate(numbers))
    if _NEGATIVE.search(text):
        deg = -deg
    return deg
