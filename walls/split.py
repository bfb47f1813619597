"""Split wall edges around the doors that lie on them.

A door matches a wall when both of its endpoints sit on the wall line (within
a perpendicular tolerance) and project inside the wall. Matched doors become
parametric ranges along the wall; the wall is re-emitted as the solid ranges
between them. Cost is O(walls x doors).

Rooms that share an edge each contribute a copy of it; dedupe_collinear
folds those copies into a single wall.
"""
from typing import Optional

from shared.types import Edge, DoorSegment
from shared.geometry import lerp, perp_distance, point_on_segment, project_param
from walls.constants import (
    DOOR_MATCH_TOLERANCE, MERGE_EPSILON, PROJECTION_MIN, PROJECTION_MAX, MIN_WALL_LENGTH,
    COLLINEAR_TOLERANCE,
)


def door_interval(wall: Edge, door: Edge, tol: float = DOOR_MATCH_TOLERANCE,
                  t_min: float = PROJECTION_MIN, t_max: float = PROJECTION_MAX,
                  ) -> Optional[tuple[float, float]]:
    """(t1, t2) range of *door* along *wall*, clamped to [0, 1], or None if off-wall."""
    a, b = wall.start, wall.end
    for p in (door.start, door.end):
        if not point_on_segment(p, a, b, tol, t_min, t_max, MIN_WALL_LENGTH):
            return None
    t1 = project_param(door.start, a, b)
    t2 = project_param(door.end, a, b)
    if t1 > t2:
        t1, t2 = t2, t1
    t1, t2 = max(0.0, t1), min(1.0, t2)
    if t2 < t1:
        return None   # only touches the wall inside the end allowance
    return (t1, t2)


def merge_intervals(intervals, eps: float = MERGE_EPSILON) -> list[tuple[float, float]]:
    """Sort ranges by start and merge those that overlap or nearly touch."""
    merged: list[tuple[float, float]] = []
    for t1, t2 in sorted(intervals):
        if merged and t1 <= merged[-1][1] + eps:
            merged[-1] = (merged[-1][0], max(merged[-1][1], t2))
        else:
            merged.append((t1, t2))
    return merged


def _solid_ranges(gaps, eps: float = MERGE_EPSILON) -> list[tuple[float, float]]:
    """Solid wall ranges left between sorted, merged gap ranges.

    Pieces shorter than *eps* in parameter space are dropped.
    """
    ranges = []
    cursor = 0.0
    for t_s, t_e in gaps:
        if t_s > cursor + eps:
            ranges.append((cursor, t_s))
        cursor = t_e
    if cursor < 1.0 - eps:
        ranges.append((cursor, 1.0))
    return ranges


def split_wall(wall: Edge, doors: list[DoorSegment],
               tol: float = DOOR_MATCH_TOLERANCE, eps: float = MERGE_EPSILON,
               t_min: float = PROJECTION_MIN, t_max: float = PROJECTION_MAX,
               ) -> list[Edge]:
    """Sub-edges of *wall* with gaps wherever a door lies on it.

    A wall with no matching door is returned unchanged as a single edge.
    """
    gaps = []
    for d in doors:
        iv = door_interval(wall, d.edge, tol, t_min, t_max)
        if iv is not None:
            gaps.append(iv)
    if not gaps:
        return [wall]

    a, b = wall.start, wall.end
    pieces = []
    for t_s, t_e in _solid_ranges(merge_intervals(gaps, eps), eps):
        p = lerp(a, b, t_s)
        q = b if t_e == 1.0 else lerp(a, b, t_e)
        pieces.append(Edge(*p, *q))
    return pieces


def _collinear(piece: Edge, anchor: Edge, tol: float) -> bool:
    a, b = anchor.start, anchor.end
    return (perp_distance(piece.start, a, b) <= tol
            and perp_distance(piece.end, a, b) <= tol)


def _overlap_clusters(spans, eps: float):
    """Group (t1, t2, piece) spans whose ranges overlap by more than *eps*.

    Ranges that merely touch stay in separate clusters.
    """
    clusters = []
    for t1, t2, piece in sorted(spans, key=lambda s: (s[0], s[1])):
        if clusters and t1 < clusters[-1][1] - eps:
            c_1, c_2, members = clusters[-1]
            clusters[-1] = (c_1, max(c_2, t2), members + [piece])
        else:
            clusters.append((t1, t2, [piece]))
    return clusters


def dedupe_collinear(pieces: list[Edge], tol: float = COLLINEAR_TOLERANCE,
                     eps: float = MERGE_EPSILON) -> list[Edge]:
    """Collapse overlapping collinear wall pieces so a shared edge is walled once.

    Pieces are grouped by the supporting line of the first piece seen on it
    (direction ignored, endpoints within *tol* of the line). Overlapping
    ranges along a line become one piece spanning their union; a piece that
    overlaps nothing is returned unchanged. Lines keep first-seen order.
    Pieces shorter than MIN_WALL_LENGTH define no line and pass through.
    """
    groups: list[tuple[Edge, Optional[list]]] = []
    for piece in pieces:
        if piece.length < MIN_WALL_LENGTH:
            groups.append((piece, None))
            continue
        for anchor, spans in groups:
            if spans is not None and _collinear(piece, anchor, tol):
                a, b = anchor.start, anchor.end
                t1 = project_param(piece.start, a, b)
                t2 = project_param(piece.end, a, b)
                spans.append((min(t1, t2), max(t1, t2), piece))
                break
        else:
            groups.append((piece, [(0.0, 1.0, piece)]))

    out = []
    for anchor, spans in groups:
        if spans is None:
            out.append(anchor)
            continue
        a, b = anchor.start, anchor.end
        for t1, t2, members in _overlap_clusters(spans, eps):
            if len(members) == 1:
                out.append(members[0])
            else:
                p = b if t1 == 1.0 else lerp(a, b, t1)
                q = b if t2 == 1.0 else lerp(a, b, t2)
                out.append(Edge(*p, *q))
    return out
