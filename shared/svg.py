"""SVG attribute helpers and the layout → canvas transform factory."""
import re
from typing import Optional

from .types import Transform
from layout.constants import DEFAULT_NATIVE_SIZE

_NUM_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SEP_RE = re.compile(r"[\s,]+")


def local_tag(tag: str) -> str:
    """Strip the XML namespace from an element tag."""
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def parse_number(value: Optional[str]) -> float:
    """Numeric attribute value; missing or malformed values read as 0."""
    if value is None:
        return 0.0
    try:
        return float(value.strip())
    except ValueError:
        return 0.0


def parse_points(value: str) -> list[tuple[float, float]]:
    """Polygon 'points' attribute → (x, y) pairs; a trailing odd number is ignored."""
    nums = [float(n) for n in _NUM_RE.findall(value)]
    return [(nums[i], nums[i+1]) for i in range(0, len(nums) - 1, 2)]


def parse_view_box(value: Optional[str]) -> Optional[tuple[float, float, float, float]]:
    """'min-x min-y width height' → tuple, or None if absent or unusable."""
    if not value or not value.strip():
        return None
    parts = _SEP_RE.split(value.strip())
    if len(parts) != 4:
        return None
    try:
        min_x, min_y, w, h = (float(p) for p in parts)
    except ValueError:
        return None
    if w <= 0 or h <= 0:
        return None
    return (min_x, min_y, w, h)


def make_scene_transform(
    view_box: Optional[tuple[float, float, float, float]],
    width: float, height: float,
    offset: tuple[float, float] = (0.0, 0.0),
    native_size: float = DEFAULT_NATIVE_SIZE,
) -> Transform:
    """Transform mapping the layout's view box onto a width x height canvas.

    The view box origin lands on *offset* (the canvas padding of the host scene).
    """
    if view_box is None:
        view_box = (0.0, 0.0, native_size, native_size)
    min_x, min_y, vw, vh = view_box
    sx = width / vw
    sy = height / vh
    return Transform(sx, sy, offset[0] - min_x * sx, offset[1] - min_y * sy)
