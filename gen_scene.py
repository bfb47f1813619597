"""Compile a vector layout into wall, light, and note records.

Reads the layout SVG and room metadata JSON, writes the scene records as JSON
(stdout by default) and optionally a preview SVG of the result.
"""
import argparse
import json
import logging
import sys

from shared.config import CompilerConfig, load_config
from layout.parse import LayoutError
from scene.assemble import compile_scene
from scene.rooms import load_rooms
from scene.gen_preview import render_scene_svg


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument("layout", help="layout SVG file")
    p.add_argument("--rooms", help="room metadata JSON (list, or object with 'rooms')")
    p.add_argument("--width", type=float, required=True, help="target canvas width")
    p.add_argument("--height", type=float, required=True, help="target canvas height")
    p.add_argument("--offset-x", type=float, default=0.0, help="canvas padding, x")
    p.add_argument("--offset-y", type=float, default=0.0, help="canvas padding, y")
    p.add_argument("--config", help="compiler configuration JSON")
    p.add_argument("--no-walls", action="store_true", help="skip wall generation")
    p.add_argument("--out", help="output JSON file (default: stdout)")
    p.add_argument("--preview", help="also write a preview SVG here")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    cfg = load_config(args.config) if args.config else CompilerConfig()
    if args.no_walls:
        cfg = cfg._replace(generate_walls=False)
    rooms = load_rooms(args.rooms) if args.rooms else []
    with open(args.layout) as f:
        svg_text = f.read()

    try:
        scene = compile_scene(svg_text, rooms, args.width, args.height,
                              (args.offset_x, args.offset_y), cfg)
    except LayoutError as e:
        print(f"{args.layout}: {e}; skipping wall/light placement", file=sys.stderr)
        return 1

    text = json.dumps(scene.as_dict(), indent=2)
    if args.out:
        with open(args.out, "w") as f:
            f.write(text + "\n")
        print(f"Scene records written to {args.out}")
    else:
        print(text)

    if args.preview:
        with open(args.preview, "w") as f:
            f.write(render_scene_svg(scene, args.width, args.height))
        print(f"Preview written to {args.preview}", file=sys.stderr)

    n_doors = sum(1 for w in scene.walls if w.is_door)
    print(f"Placed {len(scene.walls) - n_doors} wall segments + {n_doors} doors, "
          f"{len(scene.lights)} lights, and {len(scene.notes)} notes.", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
