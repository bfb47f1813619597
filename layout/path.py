"""Minimal SVG path interpreter: M/L/H/V/A/Z, absolute and relative.

Arcs are flattened to straight sub-edges between their end points; radii,
rotation and sweep flags are read but ignored.
"""
import re

from shared.types import Edge
from shared.geometry import lerp, dist
from layout.constants import ARC_SUBSEGMENT_COUNT, PATH_CLOSE_EPSILON

_TOKEN_RE = re.compile(
    r"([MmLlHhVvAaZzCcSsQqTt])|([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# numbers consumed per repetition of each supported command
_ARITY = {"M": 2, "L": 2, "H": 1, "V": 1, "A": 7, "Z": 0}


def tokenize(d: str) -> list[str | float]:
    """Split path data into command letters and floats."""
    return [cmd if cmd else float(num) for cmd, num in _TOKEN_RE.findall(d)]


def path_edges(d: str, arc_steps: int = ARC_SUBSEGMENT_COUNT,
               close_eps: float = PATH_CLOSE_EPSILON) -> list[Edge]:
    """Interpret path data *d* into straight edges in path coordinates."""
    tokens = tokenize(d)
    edges: list[Edge] = []
    cx = cy = sx = sy = 0.0
    cmd = None
    i = 0
    n_tok = len(tokens)

    while i < n_tok:
        tok = tokens[i]
        if isinstance(tok, str):
            cmd = tok
            i += 1
            if cmd.upper() not in _ARITY:
                cmd = None   # unsupported: its numbers are skipped below
                continue
        elif cmd is None or cmd.upper() == "Z":
            i += 1          # stray number
            continue

        op = cmd.upper()
        rel = cmd.islower()
        k = _ARITY[op]
        args = tokens[i:i+k]
        if any(isinstance(a, str) for a in args):
            cmd = None      # next command arrived early; drop this one
            continue
        if len(args) < k:
            break           # truncated at end of input
        i += k

        if op == "M":
            x, y = args
            if rel:
                x += cx; y += cy
            cx, cy = sx, sy = x, y
            cmd = "l" if rel else "L"   # further pairs are implicit line-tos
        elif op == "L":
            x, y = args
            if rel:
                x += cx; y += cy
            edges.append(Edge(cx, cy, x, y))
            cx, cy = x, y
        elif op == "H":
            x = args[0] + cx if rel else args[0]
            edges.append(Edge(cx, cy, x, cy))
            cx = x
        elif op == "V":
            y = args[0] + cy if rel else args[0]
            edges.append(Edge(cx, cy, cx, y))
            cy = y
        elif op == "A":
            x, y = args[5], args[6]
            if rel:
                x += cx; y += cy
            edges.extend(_arc_chords((cx, cy), (x, y), arc_steps))
            cx, cy = x, y
        else:  # Z
            if dist((cx, cy), (sx, sy)) > close_eps:
                edges.append(Edge(cx, cy, sx, sy))
            cx, cy = sx, sy
            cmd = None

    return edges


def _arc_chords(a, b, steps):
    """*steps* equal straight sub-edges from a to b."""
    pts = [lerp(a, b, s / steps) for s in range(steps)] + [b]
    return [Edge(*pts[s], *pts[s+1]) for s in range(steps)]
