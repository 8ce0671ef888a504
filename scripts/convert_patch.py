"""Convert a DeHackEd/BEX edit stream into EDGE DDF lumps.

Usage examples:
    python -m scripts.convert_patch --edits edits.json
    python -m scripts.convert_patch --edits edits.json --frames frames.json --out-dir out/
    python -m scripts.convert_patch --edits edits.json --format 5 --quiet --json
    python -m scripts.convert_patch --edits edits.json --all --verbose
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from deh_ddf.ddf.convert import convert_edits
from deh_ddf.engine.config import ConversionConfig
from deh_ddf.engine.diagnostics import ConversionError
from deh_ddf.engine.edits import load_edits
from deh_ddf.engine.frames import FrameTable


EXIT_CONVERSION_ERROR = 5


def _write_lumps(lumps: dict[str, str], out_dir: Path) -> list[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name, text in lumps.items():
        path = out_dir / f"{name}.txt"
        path.write_text(text)
        written.append(path)
    return written


def _render_lumps(lumps: dict[str, str]) -> str:
    parts: list[str] = []
    for name, text in lumps.items():
        parts.append(f"==== {name} ====")
        parts.append(text)
    return "\n".join(parts)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert a DeHackEd edit stream to DDF")
    parser.add_argument("--edits", type=Path, required=True, help="Path to the edit-stream JSON file.")
    parser.add_argument("--frames", type=Path, help="Path to a frame-table JSON file.")
    parser.add_argument("--out-dir", type=Path, help="Write one <LUMP>.txt file per lump here.")
    parser.add_argument("--format", type=int, default=6, help="Patch format (5 = legacy DEHACKED).")
    parser.add_argument("--all", action="store_true", help="Emit every compiled-in definition.")
    parser.add_argument("--quiet", action="store_true", help="Do not log warnings.")
    parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON output.")
    parser.add_argument("--verbose", action="store_true", help="Log conversion progress.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = ConversionConfig(
        patch_format=min(args.format, 6),
        all_mode=args.all,
        quiet=args.quiet,
    )
    frames = FrameTable.from_json(args.frames) if args.frames is not None else None
    try:
        lumps, session = convert_edits(load_edits(args.edits), config, frames)
    except ConversionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR

    if args.json:
        payload = {
            "lumps": lumps,
            "warnings": [str(w) for w in session.warnings],
        }
        print(json.dumps(payload, indent=2))
        return 0

    if args.out_dir is not None:
        for path in _write_lumps(lumps, args.out_dir):
            print(f"Wrote {path}")
    else:
        print(_render_lumps(lumps))

    if session.warnings:
        print(f"{len(session.warnings)} warning(s)", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
