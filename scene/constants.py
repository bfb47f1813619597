"""Output record constants for lights, doors, and notes."""

LIGHT_COLOR = "#ffc880"      # warm placeholder light
LIGHT_ALPHA = 0.2
LIGHT_DIM_FACTOR = 2.0       # dim radius = factor x scaled bounding radius
LIGHT_BRIGHT_FACTOR = 1.0

DOOR_STATES = ("closed", "open")
DEFAULT_DOOR_STATE = "closed"

UNKNOWN_ROOM_LABEL = "Unknown Room"
DEFAULT_ROOM_SIZE = "standard"
