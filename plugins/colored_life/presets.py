"""
Colored Life Presets

Each preset defines a grid size and starting speed. "classic" matches
the original 200x200 board stepping once per second.
"""

PRESETS = {
    "classic": {
        "name": "Classic",
        "description": "200x200 torus, 1 generation per second",
        "size": 200, "speed": 1,
    },
    "small": {
        "name": "Small Torus",
        "description": "Tight 40x40 board where colonies collide early",
        "size": 40, "speed": 5,
    },
    "tiny": {
        "name": "Tiny Torus",
        "description": "12x12 board, colonies overlap almost at once",
        "size": 12, "speed": 10,
    },
    "sprint": {
        "name": "Sprint",
        "description": "200x200 torus at the maximum rate",
        "size": 200, "speed": 20,
    },
}

PRESET_ORDER = ["classic", "small", "tiny", "sprint"]


def get_preset(name):
    """Get a preset by name. Returns None if not found."""
    return PRESETS.get(name)


def list_presets():
    """Return list of (key, name, description) for presets."""
    return [(k, PRESETS[k]["name"], PRESETS[k]["description"])
            for k in PRESET_ORDER if k in PRESETS]
