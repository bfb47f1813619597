"""Render compiled scene records as a preview SVG.

Solid walls are drawn dark, doors blue, light radii as faint circles, and
notes as labelled markers. Used to eyeball door alignment on a layout.
"""
from html import escape

from shared.types import SceneOutput

WALL_STROKE = "#333"
DOOR_STROKE = "#4682B4"
NOTE_FILL = "#c9a44a"


def _line(out, edge, color, width, extra=""):
    out.append(f'<line x1="{edge.x1:.1f}" y1="{edge.y1:.1f}" x2="{edge.x2:.1f}" y2="{edge.y2:.1f}"'
               f' stroke="{color}" stroke-width="{width}"{extra}/>')


def render_scene_svg(scene: SceneOutput, width: float, height: float,
                     *, title: str = "Scene Preview") -> str:
    """Return a standalone SVG document for *scene* on a width x height canvas."""
    out = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width:.0f}" height="{height:.0f}"'
        f' viewBox="0 0 {width:.0f} {height:.0f}">',
        f'<rect x="0" y="0" width="{width:.0f}" height="{height:.0f}" fill="white"/>',
    ]

    # --- Lights (under everything) ---
    for lt in scene.lights:
        out.append(f'<circle cx="{lt.x:.1f}" cy="{lt.y:.1f}" r="{lt.dim:.1f}"'
                   f' fill="{lt.color}" fill-opacity="{lt.alpha * 0.5:.2f}" stroke="none"/>')
        out.append(f'<circle cx="{lt.x:.1f}" cy="{lt.y:.1f}" r="{lt.bright:.1f}"'
                   f' fill="{lt.color}" fill-opacity="{lt.alpha:.2f}" stroke="none"/>')

    # --- Walls, then doors on top ---
    for w in scene.walls:
        if not w.is_door:
            _line(out, w.edge, WALL_STROKE, 2, ' stroke-linecap="round"')
    for w in scene.walls:
        if w.is_door:
            dash = ' stroke-dasharray="4,2"' if w.door_state == "open" else ""
            _line(out, w.edge, DOOR_STROKE, 3, dash)

    # --- Notes ---
    for n in scene.notes:
        out.append(f'<circle cx="{n.x:.1f}" cy="{n.y:.1f}" r="4" fill="{NOTE_FILL}"/>')
        out.append(f'<text x="{n.x:.1f}" y="{n.y - 7:.1f}" text-anchor="middle"'
                   f' font-family="Arial" font-size="10" fill="#333">{escape(n.label)}</text>')

    # --- Title block ---
    n_doors = sum(1 for w in scene.walls if w.is_door)
    out.append(f'<text x="8" y="16" font-family="Arial" font-size="12" font-weight="bold"'
               f' fill="#333">{escape(title)}</text>')
    out.append(f'<text x="8" y="30" font-family="Arial" font-size="9" fill="#666">'
               f'{len(scene.walls) - n_doors} walls, {n_doors} doors, '
               f'{len(scene.lights)} lights, {len(scene.notes)} notes</text>')
    out.append("</svg>")
    return "\n".join(out)
