"""Door extraction: line primitives to door segments."""
from shared.types import Edge, Line, DoorSegment, Transform


def extract_doors(lines: list[Line]) -> list[DoorSegment]:
    """Convert door lines to DoorSegments in native coordinates.

    Zero-length lines are dropped; no deduplication or connectivity checks.
    """
    doors = []
    for ln in lines:
        if ln.x1 == ln.x2 and ln.y1 == ln.y2:
            continue
        doors.append(DoorSegment(Edge(ln.x1, ln.y1, ln.x2, ln.y2)))
    return doors


def transform_doors(doors: list[DoorSegment], transform: Transform) -> list[DoorSegment]:
    """Map door segments into output space."""
    return [DoorSegment(transform.apply_edge(d.edge)) for d in doors]
