"""Parse a vector layout (SVG text) into an immutable LayoutDocument.

The markup is read once; downstream stages only see the primitive tuples.
"""
import logging
import xml.etree.ElementTree as ET

from shared.types import (
    Rect, Circle, Ellipse, Polygon, PathShape, Line, LayoutDocument,
)
from shared.svg import local_tag, parse_number, parse_points, parse_view_box
from layout.constants import SHAPE_TAGS, DOOR_TAG, ROOM_ID_ATTR, OUTDOOR_ATTR

logger = logging.getLogger(__name__)


class LayoutError(ValueError):
    """Raised when the layout is not a usable SVG document."""


def _room_id(el):
    rid = el.get(ROOM_ID_ATTR)
    return rid if rid else None

def _outdoor(el):
    return el.get(OUTDOOR_ATTR) == "true"


def _rect(el):
    return Rect(parse_number(el.get("x")), parse_number(el.get("y")),
                parse_number(el.get("width")), parse_number(el.get("height")),
                _room_id(el), _outdoor(el))

def _circle(el):
    return Circle(parse_number(el.get("cx")), parse_number(el.get("cy")),
                  parse_number(el.get("r")), _room_id(el), _outdoor(el))

def _ellipse(el):
    return Ellipse(parse_number(el.get("cx")), parse_number(el.get("cy")),
                   parse_number(el.get("rx")), parse_number(el.get("ry")),
                   _room_id(el), _outdoor(el))

def _polygon(el):
    pts = el.get("points")
    if not pts:
        return None
    return Polygon(tuple(parse_points(pts)), _room_id(el), _outdoor(el))

def _path(el):
    d = el.get("d")
    if not d:
        return None
    return PathShape(d, _room_id(el), _outdoor(el))

def _line(el):
    return Line(parse_number(el.get("x1")), parse_number(el.get("y1")),
                parse_number(el.get("x2")), parse_number(el.get("y2")))


_READERS = {
    "rect": _rect, "circle": _circle, "ellipse": _ellipse,
    "polygon": _polygon, "path": _path,
}


def parse_layout(svg_text: str) -> LayoutDocument:
    """Parse SVG text into shapes (grouped by kind, document order) and door lines.

    Raises LayoutError if the text is not XML or the root is not <svg>.
    """
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise LayoutError(f"Layout is not well-formed XML: {e}") from e
    if local_tag(root.tag).lower() != "svg":
        raise LayoutError(f"Layout root is <{local_tag(root.tag)}>, expected <svg>")

    vb_attr = root.get("viewBox")
    view_box = parse_view_box(vb_attr)
    if vb_attr and view_box is None:
        logger.warning("Ignoring unusable viewBox %r; assuming default native size", vb_attr)

    buckets = {tag: [] for tag in SHAPE_TAGS}
    lines = []
    for el in root.iter():
        tag = local_tag(el.tag) if isinstance(el.tag, str) else ""
        if tag == DOOR_TAG:
            lines.append(_line(el))
        elif tag in _READERS:
            prim = _READERS[tag](el)
            if prim is None:
                logger.debug("Skipping <%s> without geometry", tag)
                continue
            buckets[tag].append(prim)

    shapes = tuple(p for tag in SHAPE_TAGS for p in buckets[tag])
    logger.debug("Parsed %d shape(s) and %d line(s)", len(shapes), len(lines))
    return LayoutDocument(shapes, tuple(lines), view_box)
