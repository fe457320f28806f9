import os

PORT = int(os.environ.get("PORT", 8080))

# DEBUG or INFO
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Direction returned when the head is fully enclosed
DEFAULT_MOVE = "down"

# -1: a self-bounded space needs length/2 - food cells, +1: length/2 + food cells
SELF_BOUNDED_FOOD_SIGN = -1 if int(os.environ.get("SPACE_FOOD_SIGN", -1)) < 0 else 1

SNAKE_META = {
    "author": "Spacey",
    "color": "#cc0000",
    "head": "evil",
    "tail": "skinny",
}

PALETTE = [
    ("red", "#cc0000"),
    ("blue", "#0000cc"),
    ("green", "#006600"),
    ("tan", "#996633"),
    ("pink", "#ff66ff"),
    ("yellow", "#ffff00"),
    ("violet", "#cc0099"),
]
