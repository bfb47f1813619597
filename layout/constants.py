"""Layout parsing and shape tessellation constants.

Lengths are in native layout units (SVG user units) unless noted.
"""

DEFAULT_NATIVE_SIZE = 1000.0     # assumed layout width/height when no viewBox is declared
CURVE_SEGMENT_COUNT = 24         # edges per circle/ellipse
ARC_SUBSEGMENT_COUNT = 8         # linear sub-edges per path arc command
PATH_CLOSE_EPSILON = 0.5         # Z adds a closing edge only beyond this distance

# Element tags in the order shapes are encountered
SHAPE_TAGS = ("rect", "circle", "ellipse", "polygon", "path")
DOOR_TAG = "line"

ROOM_ID_ATTR = "data-room-id"
OUTDOOR_ATTR = "data-outdoor"
