from __future__ import annotations

"""
Bench Calculator Station - Color Band Decoding

Decodes a 4- or 5-band resistor color code into a resistance and tolerance.
Band role by position (n = band count):

    0 .. n-3   significant digits   black..white
    n-2        multiplier           black..white, gold, silver
    n-1        tolerance            brown..violet, gold, silver

Decoding is lenient: a color that has no value for its band's role counts as
0 (digit / multiplier) or ±20 % (tolerance).  Restricting the selectable
colors per band is the caller's job; valid_colors_for_band() gives the rule.

Exports:
    band_role             – role name for a band position
    is_valid_color        – role-compatibility check
    valid_colors_for_band – selectable colors for one position
    default_bands         – default selection for a band count
    decode_bands          – colors → ColorCodeResult
    bands_for             – colors → list of band dicts (for drawing)
    format_resistance     – ohms → '4.70 kΩ'
    describe_bands        – colors → 'Brown-Black-Red-Gold (1 kΩ ±5%)'
"""

import logging
from dataclasses import dataclass

import config
from band_constants import (
    COLOR_BANDS,
    COLOR_KEYS,
    DEFAULT_BANDS,
    ROLE_DIGIT,
    ROLE_MULTIPLIER,
    ROLE_TOLERANCE,
    SUPPORTED_BAND_COUNTS,
)
from unit_format import format_rounded

log = logging.getLogger(__name__)


@dataclass
class ColorCodeResult:
    """Decoded resistor: value in ohms and tolerance in percent."""
    resistance: float
    tolerance: float


# ---------------------------------------------------------------------------
# Band roles
# ---------------------------------------------------------------------------

def band_role(position: int, band_count: int) -> str:
    """Return the role ('digit', 'multiplier' or 'tolerance') of *position*."""
    if position == band_count - 1:
        return ROLE_TOLERANCE
    if position == band_count - 2:
        return ROLE_MULTIPLIER
    return ROLE_DIGIT


def is_valid_color(color: str, position: int, band_count: int) -> bool:
    """True if *color* carries a value for the role of band *position*.

    Positions outside the band count are never valid.
    """
    definition = COLOR_BANDS.get(color)
    if definition is None or not 0 <= position < band_count:
        return False
    return band_role(position, band_count) in definition


def valid_colors_for_band(position: int, band_count: int) -> list[str]:
    """Colors selectable for band *position*, in selector order."""
    return [c for c in COLOR_KEYS if is_valid_color(c, position, band_count)]


def default_bands(band_count: int) -> list[str]:
    """Fresh default selection for *band_count* bands.

    Raises:
        ValueError: band_count is not 4 or 5.
    """
    if band_count not in DEFAULT_BANDS:
        raise ValueError(f"Unsupported band count: {band_count!r}. Expected 4 or 5.")
    return list(DEFAULT_BANDS[band_count])


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def _attr(color: str, key: str, default: float) -> float:
    value = COLOR_BANDS.get(color, {}).get(key)
    return default if value is None else value


def decode_bands(colors: list[str], band_count: int | None = None) -> ColorCodeResult:
    """Decode an ordered list of band colors.

    4 bands: R = (d0*10 + d1) * multiplier
    5 bands: R = (d0*100 + d1*10 + d2) * multiplier

    *band_count* defaults to ``len(colors)``; extra colors beyond it are
    ignored.  An unsupported count, or fewer colors than the count, decodes
    to 0 Ω / 0 %.  Never raises.
    """
    if band_count is None:
        band_count = len(colors)
    if band_count not in SUPPORTED_BAND_COUNTS or len(colors) < band_count:
        log.debug("Cannot decode %d colors as %d bands", len(colors), band_count)
        return ColorCodeResult(resistance=0.0, tolerance=0.0)
    colors = colors[:band_count]

    digits = 0
    for color in colors[:band_count - 2]:
        digits = digits * 10 + _attr(color, ROLE_DIGIT, 0)

    multiplier = _attr(colors[-2], ROLE_MULTIPLIER, 0)
    tolerance  = _attr(colors[-1], ROLE_TOLERANCE, config.DEFAULT_TOLERANCE_PCT)

    result = ColorCodeResult(
        resistance=float(digits * multiplier),
        tolerance=float(tolerance),
    )
    log.debug("Decoded %s -> %r", colors, result)
    return result


def bands_for(colors: list[str]) -> list[dict]:
    """Return one dict per band: {'color', 'name', 'rgb', 'role'}.

    Unknown colors get a neutral grey so they can still be drawn.
    """
    band_count = len(colors)
    bands = []
    for position, color in enumerate(colors):
        definition = COLOR_BANDS.get(color, {})
        bands.append({
            "color": color,
            "name":  definition.get("name", color.title()),
            "rgb":   definition.get("rgb", (128, 128, 128)),
            "role":  band_role(position, band_count),
        })
    return bands


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_resistance(ohms: float) -> str:
    """Format *ohms* with GΩ/MΩ/kΩ/Ω and two decimals, dropping a '.00' tail."""
    if ohms >= 1e9:
        scaled, unit = ohms / 1e9, "GΩ"
    elif ohms >= 1e6:
        scaled, unit = ohms / 1e6, "MΩ"
    elif ohms >= 1e3:
        scaled, unit = ohms / 1e3, "kΩ"
    else:
        scaled, unit = ohms, "Ω"

    formatted = f"{scaled:.2f}"
    if formatted.endswith(".00"):
        formatted = formatted[:-3]
    return f"{formatted} {unit}"


def describe_bands(colors: list[str]) -> str:
    """Return e.g. 'Brown-Black-Red-Gold (1 kΩ ±5%)'."""
    name_str = "-".join(b["name"] for b in bands_for(colors))
    result = decode_bands(colors)
    tol_str = format_rounded(result.tolerance, 2)
    return f"{name_str} ({format_resistance(result.resistance)} ±{tol_str}%)"
