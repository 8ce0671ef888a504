"""Typed edit requests and the JSON edit-stream loader.

Each request is what a patch tokenizer produces for one line of a patch.
``apply`` hands it to the session, which validates, writes and marks.

In the JSON form every object carries a ``kind`` key. Thing numbers are
1-based there, as in a patch file; frames, weapons, ammo and sounds are
0-based. For example::

    [{"kind": "thing_field", "thing": 3, "field": "Hit points", "value": 700},
     {"kind": "ammo_field", "ammo": 0, "field": "Max ammo", "value": 400},
     {"kind": "thing_bits", "thing": 3, "bits": "SOLID+SHOOTABLE"}]
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from deh_ddf.engine.diagnostics import ConversionError
from deh_ddf.engine.frames import parse_int_like
from deh_ddf.engine.session import ConversionSession


@dataclass(slots=True)
class SetThingField:
    thing: int          # 0-based entity id
    field: str
    value: int

    def apply(self, session: ConversionSession) -> None:
        session.set_thing_field(self.thing, self.field, self.value)


@dataclass(slots=True)
class SetThingBits:
    thing: int
    bits: str

    def apply(self, session: ConversionSession) -> None:
        session.set_thing_bits(self.thing, self.bits)


@dataclass(slots=True)
class SetMBF21Bits:
    thing: int
    bits: str

    def apply(self, session: ConversionSession) -> None:
        session.set_mbf21_bits(self.thing, self.bits)


@dataclass(slots=True)
class SetWeaponField:
    weapon: int
    field: str
    value: int

    def apply(self, session: ConversionSession) -> None:
        session.set_weapon_field(self.weapon, self.field, self.value)


@dataclass(slots=True)
class SetWeaponBits:
    weapon: int
    bits: str

    def apply(self, session: ConversionSession) -> None:
        session.set_weapon_bits(self.weapon, self.bits)


@dataclass(slots=True)
class SetAmmoField:
    ammo: int
    field: str
    value: int

    def apply(self, session: ConversionSession) -> None:
        session.set_ammo_field(self.ammo, self.field, self.value)


@dataclass(slots=True)
class SetMiscField:
    field: str
    value: int

    def apply(self, session: ConversionSession) -> None:
        session.set_misc_field(self.field, self.value)


@dataclass(slots=True)
class SetFrameField:
    frame: int
    field: str
    value: int

    def apply(self, session: ConversionSession) -> None:
        session.set_frame_field(self.frame, self.field, self.value)


@dataclass(slots=True)
class SetFramePointer:
    frame: int
    action: str         # with or without the A_ prefix

    def apply(self, session: ConversionSession) -> None:
        session.set_frame_pointer(self.frame, self.action)


@dataclass(slots=True)
class SetCodepFrame:
    frame: int
    source: int         # compiled-in frame whose action is copied

    def apply(self, session: ConversionSession) -> None:
        session.set_codep_frame(self.frame, self.source)


@dataclass(slots=True)
class SetSoundField:
    sound: int
    field: str
    value: int

    def apply(self, session: ConversionSession) -> None:
        session.set_sound_field(self.sound, self.field, self.value)


@dataclass(slots=True)
class RenameSound:
    old: str
    new: str

    def apply(self, session: ConversionSession) -> None:
        session.rename_sound(self.old, self.new)


@dataclass(slots=True)
class RenameSprite:
    old: str
    new: str

    def apply(self, session: ConversionSession) -> None:
        session.rename_sprite(self.old, self.new)


@dataclass(slots=True)
class SetBexString:
    mnemonic: str
    text: str

    def apply(self, session: ConversionSession) -> None:
        session.set_bex_string(self.mnemonic, self.text)


@dataclass(slots=True)
class SetCheat:
    name: str
    text: str

    def apply(self, session: ConversionSession) -> None:
        session.set_cheat(self.name, self.text)


Edit = (
    SetThingField | SetThingBits | SetMBF21Bits | SetWeaponField | SetWeaponBits
    | SetAmmoField | SetMiscField | SetFrameField | SetFramePointer | SetCodepFrame
    | SetSoundField | RenameSound | RenameSprite | SetBexString | SetCheat
)


def apply_edits(session: ConversionSession, edits: list[Edit]) -> None:
    for edit in edits:
        edit.apply(session)


# ---------------------------------------------------------------------------
# JSON loading
# ---------------------------------------------------------------------------

def _require(entry: dict[str, Any], key: str) -> Any:
    if key not in entry:
        raise ValueError(f"edit of kind {entry.get('kind')!r} is missing {key!r}")
    return entry[key]


def _int(entry: dict[str, Any], key: str) -> int:
    return parse_int_like(_require(entry, key))


def _str(entry: dict[str, Any], key: str) -> str:
    return str(_require(entry, key))


def _thing(entry: dict[str, Any]) -> int:
    # patch thing numbers start at 1
    return _int(entry, "thing") - 1


def edit_from_dict(entry: dict[str, Any]) -> Edit:
    if not isinstance(entry, dict):
        raise ValueError("Each edit entry must be an object")
    kind = str(entry.get("kind", "")).strip().lower()

    if kind == "thing_field":
        return SetThingField(_thing(entry), _str(entry, "field"), _int(entry, "value"))
    if kind == "thing_bits":
        return SetThingBits(_thing(entry), _str(entry, "bits"))
    if kind == "mbf21_bits":
        return SetMBF21Bits(_thing(entry), _str(entry, "bits"))
    if kind == "weapon_field":
        return SetWeaponField(_int(entry, "weapon"), _str(entry, "field"), _int(entry, "value"))
    if kind == "weapon_bits":
        return SetWeaponBits(_int(entry, "weapon"), _str(entry, "bits"))
    if kind == "ammo_field":
        return SetAmmoField(_int(entry, "ammo"), _str(entry, "field"), _int(entry, "value"))
    if kind == "misc_field":
        return SetMiscField(_str(entry, "field"), _int(entry, "value"))
    if kind == "frame_field":
        return SetFrameField(_int(entry, "frame"), _str(entry, "field"), _int(entry, "value"))
    if kind == "frame_pointer":
        return SetFramePointer(_int(entry, "frame"), _str(entry, "action"))
    if kind == "codep_frame":
        return SetCodepFrame(_int(entry, "frame"), _int(entry, "source"))
    if kind == "sound_field":
        return SetSoundField(_int(entry, "sound"), _str(entry, "field"), _int(entry, "value"))
    if kind == "rename_sound":
        return RenameSound(_str(entry, "old"), _str(entry, "new"))
    if kind == "rename_sprite":
        return RenameSprite(_str(entry, "old"), _str(entry, "new"))
    if kind == "bex_string":
        return SetBexString(_str(entry, "mnemonic"), _str(entry, "text"))
    if kind == "cheat":
        return SetCheat(_str(entry, "name"), _str(entry, "text"))

    raise ConversionError(f"unknown edit kind: {kind!r}")


def load_edits(source: Path | str | list[Any]) -> list[Edit]:
    """Load an edit stream from a JSON file, a JSON string or a parsed list."""
    if isinstance(source, list):
        payload = source
    elif isinstance(source, Path):
        payload = json.loads(source.read_text())
    else:
        payload = json.loads(source)
    if isinstance(payload, dict) and "edits" in payload:
        payload = payload["edits"]
    if not isinstance(payload, list):
        raise ValueError("edit JSON must be a list of objects")
    return [edit_from_dict(entry) for entry in payload]
