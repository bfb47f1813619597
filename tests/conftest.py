"""Shared test fixtures for scene compilation tests.

The sample layout is a 100 x 100 view box compiled onto a 1000 x 1000 canvas
(scale 10). Two rooms share the wall x=40 with a door on it, an outdoor
courtyard circle, and an unlabelled triangular path room.
"""
import pytest
from layout.parse import parse_layout
from scene.assemble import compile_scene
from scene.rooms import rooms_from_json

LAYOUT_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <g id="rooms">
    <rect x="10" y="10" width="30" height="20" data-room-id="1"/>
    <rect x="40" y="10" width="30" height="20" data-room-id="2"/>
    <circle cx="50" cy="70" r="10" data-outdoor="true"/>
    <path d="M10,40 L30,40 L30,60 Z"/>
  </g>
  <line x1="40" y1="15" x2="40" y2="25"/>
</svg>"""

ROOMS = {"rooms": [
    {"id": 1, "name": "Hall", "purpose": "entry", "approximateSize": "large",
     "readAloud": "Dust hangs in the air.", "features": ["pillars", "mosaic"]},
    {"id": 2, "name": "Vault", "purpose": "storage", "hazards": ["loose floor"]},
    {"id": 3, "name": "Garden", "purpose": "courtyard"},
    {"id": 4, "name": "Shrine", "purpose": "worship", "interactables": ["altar"]},
]}

CANVAS = 1000.0


@pytest.fixture(scope="session")
def layout_svg():
    return LAYOUT_SVG


@pytest.fixture(scope="session")
def rooms_json():
    """Room outline as it arrives from the layout source."""
    return ROOMS


@pytest.fixture(scope="session")
def rooms(rooms_json):
    return rooms_from_json(rooms_json)


@pytest.fixture(scope="session")
def layout_doc(layout_svg):
    """LayoutDocument for the sample layout."""
    return parse_layout(layout_svg)


@pytest.fixture(scope="session")
def scene(layout_svg, rooms):
    """SceneOutput for the sample layout with default configuration."""
    return compile_scene(layout_svg, rooms, CANVAS, CANVAS)
