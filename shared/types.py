"""Shared record types for the scene geometry compiler."""
import math
from typing import Literal, NamedTuple, Optional

Point = tuple[float, float]

ShapeKind = Literal["rect", "circle", "ellipse", "polygon", "path"]
DoorState = Literal["closed", "open"]


class Edge(NamedTuple):
    """Directed line segment (x1, y1) → (x2, y2)."""
    x1: float; y1: float; x2: float; y2: float

    @property
    def start(self) -> Point:
        return (self.x1, self.y1)

    @property
    def end(self) -> Point:
        return (self.x2, self.y2)

    @property
    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)


# ============================================================
# Layout primitives (tagged union, one tuple per SVG element kind)
# ============================================================
class Rect(NamedTuple):
    x: float; y: float; width: float; height: float
    room_id: Optional[str] = None
    outdoor: bool = False

class Circle(NamedTuple):
    cx: float; cy: float; r: float
    room_id: Optional[str] = None
    outdoor: bool = False

class Ellipse(NamedTuple):
    cx: float; cy: float; rx: float; ry: float
    room_id: Optional[str] = None
    outdoor: bool = False

class Polygon(NamedTuple):
    points: tuple[Point, ...]
    room_id: Optional[str] = None
    outdoor: bool = False

class PathShape(NamedTuple):
    d: str
    room_id: Optional[str] = None
    outdoor: bool = False

class Line(NamedTuple):
    """Door marker as drawn in the layout."""
    x1: float; y1: float; x2: float; y2: float

Primitive = Rect | Circle | Ellipse | Polygon | PathShape


class LayoutDocument(NamedTuple):
    """Parsed layout: immutable primitives plus the declared view box."""
    shapes: tuple[Primitive, ...]
    lines: tuple[Line, ...]
    view_box: Optional[tuple[float, float, float, float]]  # min_x, min_y, width, height


# ============================================================
# Normalized geometry
# ============================================================
class ShapeRecord(NamedTuple):
    id: Optional[str]
    kind: ShapeKind
    edges: tuple[Edge, ...]      # native coordinates
    centroid: Point
    bounding_radius: float
    outdoor: bool

class DoorSegment(NamedTuple):
    edge: Edge


# ============================================================
# Output records
# ============================================================
class WallSegment(NamedTuple):
    edge: Edge
    is_door: bool = False
    door_state: Optional[DoorState] = None

    def as_dict(self) -> dict:
        return {"coordinates": list(self.edge), "isDoor": self.is_door,
                "doorState": self.door_state}

class LightPlacement(NamedTuple):
    x: float; y: float
    dim: float; bright: float
    color: str; alpha: float

    def as_dict(self) -> dict:
        return self._asdict()

class RoomMeta(NamedTuple):
    """Narrative metadata for one room, as supplied by the layout source."""
    id: Optional[str]
    name: str
    purpose: str = ""
    approximate_size: Optional[str] = None
    read_aloud: Optional[str] = None
    atmosphere: Optional[str] = None
    features: tuple[str, ...] = ()
    hazards: tuple[str, ...] = ()
    interactables: tuple[str, ...] = ()

class NotePlacement(NamedTuple):
    x: float; y: float
    linked_entry_id: Optional[str]
    label: str

    def as_dict(self) -> dict:
        return {"x": self.x, "y": self.y,
                "linkedEntryId": self.linked_entry_id, "label": self.label}

class JournalEntry(NamedTuple):
    entry_id: Optional[str]
    name: str
    content: str   # HTML

    def as_dict(self) -> dict:
        return {"entryId": self.entry_id, "name": self.name, "content": self.content}


class Transform(NamedTuple):
    """Native layout space → output canvas space."""
    scale_x: float; scale_y: float
    offset_x: float = 0.0; offset_y: float = 0.0

    def apply(self, x: float, y: float) -> Point:
        return (x * self.scale_x + self.offset_x, y * self.scale_y + self.offset_y)

    def apply_edge(self, e: Edge) -> Edge:
        return Edge(*self.apply(e.x1, e.y1), *self.apply(e.x2, e.y2))

    def scale_length(self, d: float) -> float:
        return d * max(self.scale_x, self.scale_y)


class SceneOutput(NamedTuple):
    walls: tuple[WallSegment, ...]
    lights: tuple[LightPlacement, ...]
    notes: tuple[NotePlacement, ...]
    journals: tuple[JournalEntry, ...]

    def as_dict(self) -> dict:
        return {
            "walls": [w.as_dict() for w in self.walls],
            "lights": [l.as_dict() for l in self.lights],
            "notes": [n.as_dict() for n in self.notes],
            "journals": [j.as_dict() for j in self.journals],
        }
