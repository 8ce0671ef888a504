"""Frame table: the compiled-in animation frames a conversion starts from.

Frame 0 is always the null frame ``S_NULL``. Map-object and weapon rows
name their frames symbolically and are resolved through :meth:`index_of`;
names the table does not know resolve to the null frame.

The JSON form is an object with a ``frames`` list, one object per frame::

    {"name": "S_PLAY", "sprite": "PLAY", "frame": 0, "tics": -1,
     "action": "A_NULL", "next": "S_NULL", "misc1": 0, "misc2": 0}

``sprite`` and ``next`` may be names or integers. ``bright: true`` sets the
fullbright bit. An optional top-level ``legacy_count`` gives how many
leading frames a format-5 patch may address (default: all of them).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from deh_ddf.models.records import Frame
from deh_ddf.models.sprites import find_sprite


NULL_STATE_NAME = "S_NULL"
FULLBRIGHT = 0x8000


def parse_int_like(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("bool is not a valid integer value")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value.strip(), 0)
    raise ValueError(f"Expected integer-like value, got: {value!r}")


def normalize_action(name: str) -> str:
    name = name.strip()
    if not name.upper().startswith("A_"):
        name = "A_" + name
    return name


class FrameTable:
    """Read-only list of frames with symbolic names."""

    __slots__ = ("frames", "names", "legacy_count", "_index")

    def __init__(self, frames: list[Frame], names: list[str],
                 legacy_count: int | None = None):
        if len(frames) != len(names):
            raise ValueError("frames and names must have the same length")
        if not frames or names[0].upper() != NULL_STATE_NAME:
            frames = [null_frame()] + list(frames)
            names = [NULL_STATE_NAME] + list(names)
        self.frames = frames
        self.names = names
        self.legacy_count = len(frames) if legacy_count is None else legacy_count
        self._index = {}
        for idx, name in enumerate(names):
            self._index.setdefault(name.upper(), idx)

    def __len__(self) -> int:
        return len(self.frames)

    def get(self, idx: int) -> Frame | None:
        if 0 <= idx < len(self.frames):
            return self.frames[idx]
        return None

    def index_of(self, name: str) -> int:
        return self._index.get(name.upper(), 0)

    def name_of(self, idx: int) -> str:
        if 0 <= idx < len(self.names):
            return self.names[idx]
        return f"S_FRAME{idx}"

    # --- Factories ---

    @classmethod
    def empty(cls) -> FrameTable:
        return cls([null_frame()], [NULL_STATE_NAME])

    @classmethod
    def from_records(cls, records: list[dict[str, Any]],
                     legacy_count: int | None = None) -> FrameTable:
        """Build a table from JSON-style frame objects.

        Frame names are collected first so ``next`` may refer forward.
        """
        names = [str(rec.get("name", f"S_FRAME{i}")) for i, rec in enumerate(records)]
        offset = 0
        if not names or names[0].upper() != NULL_STATE_NAME:
            offset = 1
        index = {name.upper(): i + offset for i, name in enumerate(names)}
        index.setdefault(NULL_STATE_NAME, 0)

        frames = [_frame_from_record(rec, index) for rec in records]
        return cls(frames, names, legacy_count)

    @classmethod
    def from_json(cls, path: Path) -> FrameTable:
        payload = json.loads(Path(path).read_text())
        if isinstance(payload, list):
            return cls.from_records(payload)
        if not isinstance(payload, dict) or not isinstance(payload.get("frames"), list):
            raise ValueError("frame table JSON must be a list or an object with 'frames'")
        legacy = payload.get("legacy_count")
        return cls.from_records(
            payload["frames"],
            None if legacy is None else parse_int_like(legacy),
        )


def null_frame() -> Frame:
    return Frame(sprite=0, subsprite=0, tics=-1)


def _sprite_from(value: Any) -> int:
    if isinstance(value, str) and not value.strip().lstrip("-").isdigit():
        num = find_sprite(value.strip())
        if num is None:
            raise ValueError(f"Unknown sprite name: {value!r}")
        return num
    return parse_int_like(value)


def _state_from(value: Any, index: dict[str, int]) -> int:
    if isinstance(value, str) and not value.strip().lstrip("-").isdigit():
        key = value.strip().upper()
        if key not in index:
            raise ValueError(f"Unknown frame name: {value!r}")
        return index[key]
    return parse_int_like(value)


def _frame_from_record(rec: dict[str, Any], index: dict[str, int]) -> Frame:
    if not isinstance(rec, dict):
        raise ValueError("Each frame entry must be an object")
    subsprite = parse_int_like(rec.get("frame", 0))
    if rec.get("bright"):
        subsprite |= FULLBRIGHT
    args = [parse_int_like(v) for v in rec.get("args", [])][:8]
    args += [0] * (8 - len(args))
    if "misc1" in rec:
        args[0] = parse_int_like(rec["misc1"])
    if "misc2" in rec:
        args[1] = parse_int_like(rec["misc2"])
    return Frame(
        sprite=_sprite_from(rec.get("sprite", 0)),
        subsprite=subsprite,
        tics=parse_int_like(rec.get("tics", -1)),
        action=normalize_action(str(rec.get("action", "A_NULL"))),
        next_state=_state_from(rec.get("next", 0), index),
        args=args,
    )
