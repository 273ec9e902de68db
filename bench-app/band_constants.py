"""
Bench Calculator Station - Color Band Constants

Static resistor color-code lookup used by color_code.py (decoding) and
charts.py (drawing the band strip).
"""

# Selector order: digit colors first, then the multiplier-only colors.
COLOR_KEYS = [
    "black", "brown", "red", "orange", "yellow",
    "green", "blue", "violet", "grey", "white",
    "gold", "silver",
]

# color name -> {digit, multiplier, tolerance (%), name, rgb}
# A missing key means the color has no meaning in that band role.
COLOR_BANDS = {
    "black":  {"name": "Black",  "digit": 0, "multiplier": 1,
               "rgb": (0,   0,   0  )},
    "brown":  {"name": "Brown",  "digit": 1, "multiplier": 10,            "tolerance": 1.0,
               "rgb": (139, 69,  19 )},
    "red":    {"name": "Red",    "digit": 2, "multiplier": 100,           "tolerance": 2.0,
               "rgb": (220, 38,  38 )},
    "orange": {"name": "Orange", "digit": 3, "multiplier": 1_000,
               "rgb": (249, 115, 22 )},
    "yellow": {"name": "Yellow", "digit": 4, "multiplier": 10_000,
               "rgb": (250, 204, 21 )},
    "green":  {"name": "Green",  "digit": 5, "multiplier": 100_000,       "tolerance": 0.5,
               "rgb": (22,  163, 74 )},
    "blue":   {"name": "Blue",   "digit": 6, "multiplier": 1_000_000,     "tolerance": 0.25,
               "rgb": (37,  99,  235)},
    "violet": {"name": "Violet", "digit": 7, "multiplier": 10_000_000,    "tolerance": 0.1,
               "rgb": (124, 58,  237)},
    "grey":   {"name": "Grey",   "digit": 8, "multiplier": 100_000_000,
               "rgb": (100, 116, 139)},
    "white":  {"name": "White",  "digit": 9, "multiplier": 1_000_000_000,
               "rgb": (255, 255, 255)},
    # Multiplier / tolerance only
    "gold":   {"name": "Gold",   "multiplier": 0.1,                       "tolerance": 5.0,
               "rgb": (212, 175, 55 )},
    "silver": {"name": "Silver", "multiplier": 0.01,                      "tolerance": 10.0,
               "rgb": (192, 192, 192)},
}

# Band roles by position
ROLE_DIGIT      = "digit"
ROLE_MULTIPLIER = "multiplier"
ROLE_TOLERANCE  = "tolerance"

SUPPORTED_BAND_COUNTS = (4, 5)

# Default selections when switching band count (1 kΩ ±5 % / 100 Ω ±1 %)
DEFAULT_BANDS = {
    4: ["brown", "black", "red", "gold"],
    5: ["brown", "black", "black", "brown", "brown"],
}
