"""
Tangram engine — command line.

Usage:
    python -m tangram list                       # built-in levels
    python -m tangram show NAME [--canvas WxH]   # target poses on a canvas
    python -m tangram check NAME                 # validation report
"""

import sys

from tangram.geometry import CoordinateMapper
from tangram.level import get_level, load_builtin_levels, validate_level


def _parse_canvas(value: str) -> CoordinateMapper:
    w, _, h = value.lower().partition("x")
    try:
        return CoordinateMapper(float(w), float(h))
    except ValueError:
        print(f"Invalid canvas size: {value} (expected WxH, e.g. 768x1024)")
        sys.exit(1)


def _require_level(args: list[str]):
    if len(args) < 2:
        print("A level name is required")
        sys.exit(1)
    level = get_level(args[1])
    if level is None:
        print(f"Unknown level: {args[1]}")
        sys.exit(1)
    return level


def main():
    args = sys.argv[1:]
    cmd = args[0] if args else "list"

    if cmd == "list":
        for level in load_builtin_levels():
            print(f"{level.id:<14} {level.name:<14} {level.difficulty.value:<7} "
                  f"{len(level.targets)} targets")
    elif cmd == "show":
        level = _require_level(args)
        mapper = CoordinateMapper(768, 1024)
        for i, a in enumerate(args):
            if a == "--canvas" and i + 1 < len(args):
                mapper = _parse_canvas(args[i + 1])
        print(f"{level.name} on {mapper.canvas_width:g}x{mapper.canvas_height:g}")
        for t in level.targets:
            x, y = mapper.to_canvas(t.x_pct, t.y_pct)
            flip = " mirrored" if t.mirrored else ""
            print(f"  {t.kind.value:<18} ({x:7.1f}, {y:7.1f}) rot={t.rotation_deg:g}°{flip}")
    elif cmd == "check":
        level = _require_level(args)
        errors = validate_level(level)
        if not errors:
            print(f"{level.name}: OK")
        for e in errors:
            print(f"{level.name}: {e}")
        sys.exit(1 if errors else 0)
    else:
        print(f"Unknown command: {cmd}")
        print("Usage: python -m tangram list | show NAME [--canvas WxH] | check NAME")
        sys.exit(1)


if __name__ == "__main__":
    main()
