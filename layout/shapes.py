"""Shape normalization: layout primitives → ShapeRecords.

Each primitive kind has one normalizer, looked up by primitive type in
_NORMALIZERS. Degenerate primitives normalize to None.
"""
from typing import Optional

from shared.types import (
    Edge, Rect, Circle, Ellipse, Polygon, PathShape, Primitive, ShapeRecord,
)
from shared.geometry import closed_edges, ellipse_poly, mean_point, max_distance
from shared.config import CompilerConfig
from layout.path import path_edges


def _normalize_rect(p: Rect, cfg: CompilerConfig) -> Optional[ShapeRecord]:
    x, y, w, h = p.x, p.y, p.width, p.height
    if w == 0 or h == 0:
        return None
    edges = (
        Edge(x, y, x+w, y),
        Edge(x+w, y, x+w, y+h),
        Edge(x+w, y+h, x, y+h),
        Edge(x, y+h, x, y),
    )
    return ShapeRecord(p.room_id, "rect", edges, (x + w/2, y + h/2),
                       max(abs(w), abs(h)) / 2, p.outdoor)


def _normalize_ellipse(p: Ellipse, cfg: CompilerConfig, kind="ellipse") -> Optional[ShapeRecord]:
    if p.rx == 0 or p.ry == 0:
        return None
    pts = ellipse_poly(p.cx, p.cy, p.rx, p.ry, cfg.curve_segment_count)
    return ShapeRecord(p.room_id, kind, tuple(closed_edges(pts)), (p.cx, p.cy),
                       max(abs(p.rx), abs(p.ry)), p.outdoor)


def _normalize_circle(p: Circle, cfg: CompilerConfig) -> Optional[ShapeRecord]:
    return _normalize_ellipse(Ellipse(p.cx, p.cy, p.r, p.r, p.room_id, p.outdoor),
                              cfg, kind="circle")


def _normalize_polygon(p: Polygon, cfg: CompilerConfig) -> Optional[ShapeRecord]:
    if len(p.points) < 3:
        return None
    edges = closed_edges(list(p.points))
    c = mean_point(list(p.points))
    return ShapeRecord(p.room_id, "polygon", tuple(edges), c,
                       max_distance(c, edges), p.outdoor)


def _normalize_path(p: PathShape, cfg: CompilerConfig) -> Optional[ShapeRecord]:
    edges = path_edges(p.d, arc_steps=cfg.arc_subsegment_count)
    if not edges:
        return None
    c = mean_point([((e.x1 + e.x2) / 2, (e.y1 + e.y2) / 2) for e in edges])
    return ShapeRecord(p.room_id, "path", tuple(edges), c,
                       max_distance(c, edges), p.outdoor)


_NORMALIZERS = {
    Rect: _normalize_rect,
    Circle: _normalize_circle,
    Ellipse: _normalize_ellipse,
    Polygon: _normalize_polygon,
    PathShape: _normalize_path,
}


def normalize_shape(p: Primitive, cfg: CompilerConfig = CompilerConfig()) -> Optional[ShapeRecord]:
    """Normalize one primitive, or None if it is degenerate."""
    try:
        fn = _NORMALIZERS[type(p)]
    except KeyError:
        raise TypeError(f"Not a shape primitive: {type(p).__name__}") from None
    return fn(p, cfg)


def normalize_shapes(prims, cfg: CompilerConfig = CompilerConfig()) -> list[ShapeRecord]:
    """Normalize primitives in order, dropping degenerate ones."""
    records = []
    for p in prims:
        rec = normalize_shape(p, cfg)
        if rec is not None:
            records.append(rec)
    return records
