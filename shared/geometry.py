"""Pure geometry functions: projections, tessellation, and loop utilities."""
import math

import numpy as np

from .types import Point, Edge

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

# ============================================================
# Vector Utilities
# ============================================================
def lerp(a: Point, b: Point, t: float) -> Point:
    """Linear interpolation between two points."""
    return (a[0] + t * (b[0] - a[0]), a[1] + t * (b[1] - a[1]))

def dist(p1: Point, p2: Point) -> float:
    return math.hypot(p2[0]-p1[0], p2[1]-p1[1])

def perp_distance(p: Point, a: Point, b: Point) -> float:
    """Distance from p to the infinite line through a and b (|cross| / |ab|).

    Raises GeometryError if a == b.
    """
    L = dist(a, b)
    if L == 0:
        raise GeometryError("Zero-length reference line")
    return abs((p[0]-a[0])*(b[1]-a[1]) - (p[1]-a[1])*(b[0]-a[0])) / L

def project_param(p: Point, a: Point, b: Point) -> float:
    """Parameter t of p projected onto a → b (0 at a, 1 at b).

    Returns 0 for a (near) degenerate segment.
    """
    dx = b[0]-a[0]; dy = b[1]-a[1]
    len2 = dx*dx + dy*dy
    if len2 < 0.01:
        return 0.0
    return ((p[0]-a[0])*dx + (p[1]-a[1])*dy) / len2

def point_on_segment(p: Point, a: Point, b: Point, tol: float,
                     t_min: float = -0.01, t_max: float = 1.01,
                     min_len: float = 0.1) -> bool:
    """True if p lies within *tol* of line a-b and projects inside [t_min, t_max]."""
    if dist(a, b) < min_len:
        return False
    if perp_distance(p, a, b) > tol:
        return False
    return t_min <= project_param(p, a, b) <= t_max

# ============================================================
# Loops and Tessellation
# ============================================================
def closed_edges(points: list[Point]) -> list[Edge]:
    """Edges joining consecutive points, closing last → first."""
    n = len(points)
    return [Edge(*points[i], *points[(i+1) % n]) for i in range(n)]

def ellipse_poly(cx: float, cy: float, rx: float, ry: float, n: int = 24) -> list[Point]:
    """n points on an axis-aligned ellipse, starting at angle 0 and sweeping toward +y."""
    if n < 3:
        raise GeometryError(f"Ellipse needs at least 3 segments, got {n}")
    a = np.linspace(0.0, 2*math.pi, n, endpoint=False)
    xs = cx + rx*np.cos(a); ys = cy + ry*np.sin(a)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]

def mean_point(points: list[Point]) -> Point:
    """Arithmetic mean of a non-empty point list."""
    arr = np.asarray(points, dtype=float)
    mx, my = arr.mean(axis=0)
    return (float(mx), float(my))

def max_distance(c: Point, edges: list[Edge]) -> float:
    """Largest distance from c to any edge endpoint (0 for no edges)."""
    if not edges:
        return 0.0
    arr = np.asarray(edges, dtype=float)
    d1 = np.hypot(arr[:, 0]-c[0], arr[:, 1]-c[1])
    d2 = np.hypot(arr[:, 2]-c[0], arr[:, 3]-c[1])
    return float(max(d1.max(), d2.max()))

def loop_length(edges: list[Edge]) -> float:
    """Total length of an edge list."""
    return sum(e.length for e in edges)

def is_closed_loop(edges: list[Edge], eps: float = 1e-9) -> bool:
    """True if every edge ends where the next one starts (wrapping around)."""
    if not edges:
        return False
    n = len(edges)
    return all(dist(edges[i].end, edges[(i+1) % n].start) <= eps for i in range(n))
