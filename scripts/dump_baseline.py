"""List the compiled-in map objects the converter starts from.

Usage:
    python -m scripts.dump_baseline [--attacks | --things] [--frames PATH]
"""

import argparse
from pathlib import Path

from deh_ddf.engine.frames import FrameTable
from deh_ddf.engine.session import ConversionSession


def format_row(mt_num: int, info) -> str:
    kind = "attack" if info.is_attack else "thing"
    name = info.name.lstrip("*")
    return f"{mt_num:4d}  {name:<28} {info.doomednum:6d}  {kind}"


def baseline_rows(session: ConversionSession, attacks: bool = False, things: bool = False) -> list[str]:
    rows: list[str] = []
    for mt_num, info in enumerate(session.baseline_mobjs):
        if attacks and not info.is_attack:
            continue
        if things and info.is_attack:
            continue
        rows.append(format_row(mt_num, info))
    return rows


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Dump compiled-in map objects")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--attacks", action="store_true", help="Only list attacks.")
    group.add_argument("--things", action="store_true", help="Only list things.")
    parser.add_argument("--frames", type=Path, help="Frame-table JSON used to resolve states.")
    args = parser.parse_args(argv)

    frames = FrameTable.from_json(args.frames) if args.frames is not None else None
    session = ConversionSession(frames=frames)
    rows = baseline_rows(session, attacks=args.attacks, things=args.things)

    print(f"{'id':>4}  {'name':<28} {'ednum':>6}  kind")
    for row in rows:
        print(row)
    print(f"\n{len(rows)} entries")


if __name__ == "__main__":
    main()
