"""
Bench Calculator Station - Result Charts

Renders solver outputs onto any pygame.Surface:

  draw_charge_curve  – RC charging samples with a 63.2 % (1τ) reference line
  draw_network_bars  – voltage drop (series) or current (parallel) per resistor
  draw_band_strip    – resistor body with decoded color bands

The pixel mapping lives in pure helpers (curve_points, bar_heights) so it
can be tested without inspecting pixels.

Standalone preview:
    python3 bench-app/charts.py
"""

from __future__ import annotations

import math

import pygame

import config
from color_code import bands_for
from rc_circuit import ChargeSample
from resistor_network import SERIES, NetworkResult
from unit_format import format_with_unit

# ---------------------------------------------------------------------------
# Colour palette  (mirrors the calculator cards)
# ---------------------------------------------------------------------------

BG_COLOR     = (15,  23,  42)
CARD_BG      = (22,  33,  62)
TEXT_COLOR   = (226, 232, 240)
TEXT_MUTED   = (150, 160, 180)
GRID_COLOR   = (30,  41,  59)
CURVE_COLOR  = (6,   182, 212)   # cyan
REF_COLOR    = (251, 191, 36)    # 63.2 % marker
RESISTOR_TAN = (210, 180, 140)
LEAD_COLOR   = (160, 160, 160)

BAR_COLORS = [
    (59,  130, 246),
    (16,  185, 129),
    (245, 158, 11 ),
    (239, 68,  68 ),
    (139, 92,  246),
    (236, 72,  153),
    (99,  102, 241),
]

# Fraction of Vin reached after one time constant
ONE_TAU_FRACTION = 1 - math.exp(-1)

_PAD = 28   # plot margin inside the target rect (room for labels)

# Band geometry as fractions of the resistor body width
_BAND_PCTS = {
    4: [0.18, 0.34, 0.50, 0.82],
    5: [0.15, 0.29, 0.43, 0.57, 0.82],
}


# ---------------------------------------------------------------------------
# Font helpers  (module-level cache, safe to call multiple times)
# ---------------------------------------------------------------------------

_FONT_CACHE: dict[str, pygame.font.Font] | None = None


def _load_font(family: str, size: int, bold: bool = False) -> pygame.font.Font:
    """Load a font by family name with a fallback to the bundled default font."""
    try:
        font = pygame.font.SysFont(family, size, bold=bold)
        if font is None:
            raise RuntimeError("SysFont returned None")
        return font
    except Exception:
        return pygame.font.Font(None, size)


def _fonts() -> dict[str, pygame.font.Font]:
    """Return cached font dict, initialising on first call."""
    global _FONT_CACHE
    if _FONT_CACHE is None:
        if not pygame.font.get_init():
            pygame.font.init()
        _FONT_CACHE = {
            "heading": _load_font("dejavusans", 16, bold=True),
            "small":   _load_font("dejavusans", 12),
        }
    return _FONT_CACHE


def _draw_text(
    surface: pygame.Surface,
    text: str,
    font: pygame.font.Font,
    color: tuple,
    x: int,
    y: int,
    anchor: str = "topleft",
) -> pygame.Rect:
    """Render *text* onto *surface* at the given anchor position."""
    surf = font.render(text, True, color)
    rect = surf.get_rect()
    setattr(rect, anchor, (x, y))
    surface.blit(surf, rect)
    return rect


def _plot_area(rect: pygame.Rect) -> pygame.Rect:
    return rect.inflate(-2 * _PAD, -2 * _PAD)


# ---------------------------------------------------------------------------
# Pure pixel mapping
# ---------------------------------------------------------------------------

def curve_points(
    samples: list[ChargeSample],
    area: pygame.Rect,
    v_max: float,
) -> list[tuple[int, int]]:
    """Map (time, voltage) samples into *area*: time → x, voltage → y (up)."""
    if not samples:
        return []
    t_max = samples[-1].time
    points = []
    for s in samples:
        fx = s.time / t_max if t_max > 0 else 0.0
        fy = s.voltage / v_max if v_max > 0 else 0.0
        fy = max(0.0, min(1.0, fy))
        x = area.left + round(fx * (area.width - 1))
        y = area.bottom - 1 - round(fy * (area.height - 1))
        points.append((x, y))
    return points


def bar_heights(values: list[float], max_height: int) -> list[int]:
    """Scale non-negative *values* so the largest bar is *max_height* pixels."""
    peak = max((v for v in values if v > 0), default=0.0)
    if peak <= 0:
        return [0 for _ in values]
    return [round(max(v, 0.0) / peak * max_height) for v in values]


# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------

def draw_charge_curve(
    surface: pygame.Surface,
    samples: list[ChargeSample],
    v_in: float,
    rect: pygame.Rect | None = None,
) -> list[tuple[int, int]]:
    """Draw the RC charging curve and return the plotted points."""
    rect = rect if rect is not None else surface.get_rect()
    area = _plot_area(rect)
    fnt = _fonts()

    pygame.draw.rect(surface, CARD_BG, rect, border_radius=8)
    pygame.draw.line(surface, GRID_COLOR, area.bottomleft, area.bottomright, 1)
    pygame.draw.line(surface, GRID_COLOR, area.bottomleft, area.topleft, 1)

    points = curve_points(samples, area, v_in)
    if len(points) < 2:
        return points

    ref_y = area.bottom - 1 - round(ONE_TAU_FRACTION * (area.height - 1))
    pygame.draw.line(surface, REF_COLOR, (area.left, ref_y), (area.right - 1, ref_y), 1)
    _draw_text(surface, "63.2%", fnt["small"], REF_COLOR, area.right, ref_y, anchor="midleft")

    pygame.draw.lines(surface, CURVE_COLOR, False, points, 2)

    _draw_text(surface, samples[0].label, fnt["small"], TEXT_MUTED,
               area.left, area.bottom + 4, anchor="midtop")
    _draw_text(surface, samples[-1].label, fnt["small"], TEXT_MUTED,
               area.right, area.bottom + 4, anchor="topright")
    _draw_text(surface, format_with_unit(v_in, "V"), fnt["small"], TEXT_MUTED,
               area.left - 4, area.top, anchor="topright")
    return points


def draw_network_bars(
    surface: pygame.Surface,
    result: NetworkResult,
    mode: str,
    rect: pygame.Rect | None = None,
) -> list[pygame.Rect]:
    """Draw one bar per resistor and return the bar rects.

    Series plots each voltage drop; parallel plots each branch current.
    """
    rect = rect if rect is not None else surface.get_rect()
    area = _plot_area(rect)
    fnt = _fonts()

    pygame.draw.rect(surface, CARD_BG, rect, border_radius=8)
    pygame.draw.line(surface, GRID_COLOR, area.bottomleft, area.bottomright, 1)

    rows = result.calculated_resistors
    if not rows:
        return []

    if mode == SERIES:
        values, unit, title = [r.voltage_drop for r in rows], "V", "Voltage drop"
    else:
        values, unit, title = [r.current_flow for r in rows], "A", "Current"
    _draw_text(surface, title, fnt["heading"], TEXT_COLOR, rect.centerx, rect.top + 4, anchor="midtop")

    slot_w = area.width // len(rows)
    bar_w = max(2, int(slot_w * 0.6))
    bars = []
    for i, height in enumerate(bar_heights(values, area.height)):
        x = area.left + i * slot_w + (slot_w - bar_w) // 2
        bar = pygame.Rect(x, area.bottom - height, bar_w, height)
        bars.append(bar)
        if height > 0:
            pygame.draw.rect(surface, BAR_COLORS[i % len(BAR_COLORS)], bar,
                             border_top_left_radius=4, border_top_right_radius=4)
        _draw_text(surface, f"R{i + 1}", fnt["small"], TEXT_MUTED,
                   bar.centerx, area.bottom + 4, anchor="midtop")
        _draw_text(surface, format_with_unit(values[i], unit), fnt["small"], TEXT_COLOR,
                   bar.centerx, bar.top - 2, anchor="midbottom")
    return bars


def draw_band_strip(
    surface: pygame.Surface,
    colors: list[str],
    rect: pygame.Rect | None = None,
) -> list[pygame.Rect]:
    """Draw a resistor body with *colors* as bands; returns the band rects."""
    rect = rect if rect is not None else surface.get_rect()
    pcts = _BAND_PCTS.get(len(colors))
    if pcts is None:
        raise ValueError(f"Unsupported band count: {len(colors)}. Expected 4 or 5.")

    lead_w = int(rect.width * 0.15)
    body = pygame.Rect(rect.left + lead_w, rect.top, rect.width - 2 * lead_w, rect.height)
    band_w = max(2, int(rect.width * 0.05))
    radius = max(2, rect.height // 3)

    pygame.draw.line(surface, LEAD_COLOR, rect.midleft, body.midleft, 2)
    pygame.draw.line(surface, LEAD_COLOR, body.midright, rect.midright, 2)
    pygame.draw.rect(surface, RESISTOR_TAN, body, border_radius=radius)

    band_rects = []
    for pct, band in zip(pcts, bands_for(colors)):
        cx = int(body.left + pct * body.width)
        band_rect = pygame.Rect(cx - band_w // 2, body.top, band_w, body.height).clip(body)
        pygame.draw.rect(surface, band["rgb"], band_rect)
        band_rects.append(band_rect)

    # Re-draw body outline to crisp up rounded corners over bands
    pygame.draw.rect(surface, RESISTOR_TAN, body, width=2, border_radius=radius)
    return band_rects


# ---------------------------------------------------------------------------
# Standalone preview
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import logging
    import sys

    from rc_circuit import solve_rc_delay
    from resistor_network import ResistorNetwork

    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    log = logging.getLogger("charts")

    pygame.init()
    window = pygame.display.set_mode((config.SCREEN_W, config.SCREEN_H))
    pygame.display.set_caption("Charts - preview")
    clock = pygame.time.Clock()

    delay = solve_rc_delay(5.0, 10e3, 100e-6, v_target=3.16)
    network = ResistorNetwork()
    log.info("Preview: tau=%.3f s, t=%.4f s, Req=%s", delay.tau, delay.time,
             format_with_unit(network.result.total_resistance, "Ω"))

    half_w = config.SCREEN_W // 2
    curve_rect = pygame.Rect(0, 0, half_w, config.SCREEN_H - 60)
    bars_rect  = pygame.Rect(half_w, 0, half_w, config.SCREEN_H - 60)
    strip_rect = pygame.Rect(140, config.SCREEN_H - 50, 200, 38)

    running = True
    while running:
        clock.tick(30)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
        window.fill(BG_COLOR)
        draw_charge_curve(window, delay.samples, 5.0, curve_rect)
        draw_network_bars(window, network.result, network.mode, bars_rect)
        draw_band_strip(window, ["brown", "black", "red", "gold"], strip_rect)
        pygame.display.flip()

    pygame.quit()
    sys.exit()
