from __future__ import annotations

"""
Bench Calculator Station - Unit Scaling and Number Formatting

Shared by every calculator's presentation layer.  All functions are pure.

Exports:
    scale_to_unit     – value → (mantissa, SI prefix)
    format_with_unit  – value + base unit → '4.7 kΩ'
    format_scientific – compact number, exponential outside [0.001, 10000]
    format_fixed      – fixed decimals, used for form write-back ('6.000')
    format_rounded    – rounded, trailing zeros dropped ('5', '0.1235')
    parse_field       – widget text → float, or None when absent
"""

import math

# ---------------------------------------------------------------------------
# Module-level constants
# ---------------------------------------------------------------------------

MICRO = "µ"

# Large-magnitude prefixes, checked from the top down.
_LARGE_PREFIXES: list[tuple[float, str]] = [
    (1e9, "G"),
    (1e6, "M"),
    (1e3, "k"),
]

# Fractional digits shown by format_with_unit / format_scientific.
_MAX_FRACTION_DIGITS = 3

# format_scientific switches to exponential outside this band.
_SCI_LOW  = 0.001
_SCI_HIGH = 10000.0


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _strip_zeros(text: str) -> str:
    """Drop trailing fractional zeros (and a bare '.'); normalise '-0' to '0'."""
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def _group(value: float, digits: int = _MAX_FRACTION_DIGITS) -> str:
    """en-US style: thousands separators, at most *digits* fractional digits."""
    if not math.isfinite(value):
        return str(value)
    return _strip_zeros(format(value, f",.{digits}f"))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def scale_to_unit(value: float) -> tuple[float, str]:
    """Return ``(mantissa, prefix)`` for *value*.

    Picks the largest prefix step (G, M, k) whose threshold the value reaches.
    Positive values below 1 are scaled down to m, µ or n so the mantissa is at
    least 1.  Zero and negative values are returned unscaled.
    """
    for threshold, prefix in _LARGE_PREFIXES:
        if value >= threshold:
            return value / threshold, prefix
    if 0 < value < 1:
        if value < 1e-6:
            return value * 1e9, "n"
        if value < 1e-3:
            return value * 1e6, MICRO
        return value * 1e3, "m"
    return value, ""


def format_with_unit(value: float, unit: str) -> str:
    """Format *value* with an SI prefix, e.g. ``format_with_unit(4700, 'Ω')`` → '4.7 kΩ'."""
    mantissa, prefix = scale_to_unit(value)
    return f"{_group(mantissa)} {prefix}{unit}"


def format_scientific(value: float) -> str:
    """Format *value* compactly without a unit.

    Zero is '0'.  Magnitudes below 0.001 or above 10000 use exponential
    notation with three fractional mantissa digits ('1.235e+4'); everything
    else is grouped with at most three fractional digits.
    """
    if value == 0:
        return "0"
    magnitude = abs(value)
    if magnitude < _SCI_LOW or magnitude > _SCI_HIGH:
        if not math.isfinite(value):
            return str(value)
        mantissa, exponent = f"{value:.3e}".split("e")
        return f"{mantissa}e{int(exponent):+d}"
    return _group(value)


def format_fixed(value: float, decimals: int) -> str:
    """Fixed-point text with exactly *decimals* places ('6.000')."""
    return f"{value:.{decimals}f}"


def format_rounded(value: float, decimals: int) -> str:
    """Round to *decimals* places and drop trailing zeros ('20', '0.1235')."""
    return _strip_zeros(f"{round(value, decimals):.{decimals}f}")


def parse_field(text) -> float | None:
    """Parse one input widget's content.

    Returns ``None`` for "absent": ``None``, blank text, unparseable text,
    NaN or infinity.  A typed ``0`` is a present value and comes back as 0.0.
    """
    if text is None:
        return None
    if isinstance(text, (int, float)):
        value = float(text)
    else:
        text = str(text).strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return value
