"""Field registries and the generic validate-then-write step.

Every patchable record kind (thing, weapon, frame) has a table of
:class:`FieldRef` entries mapping a patch field name to an attribute of the
record and a value kind. :func:`apply_field` walks any of these tables the
same way: find the field case-insensitively, range-check the value by its
kind and the patch format, and write it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from deh_ddf.engine.diagnostics import Diagnostics
from deh_ddf.models.constants import DSDEHACKED_LIMIT, VANILLA_SOUNDS, VANILLA_SPRITES, AmmoType
from deh_ddf.models.flags import ALL_BEX_FLAGS


class FieldKind(Enum):
    UNCONSTRAINED = auto()
    NON_NEGATIVE = auto()
    POSITIVE_ONLY = auto()
    FRAME_INDEX = auto()
    SOUND_INDEX = auto()
    SPRITE_INDEX = auto()
    SUBSPRITE_INDEX = auto()     # bit 15 (fullbright) is ignored
    AMMO_INDEX = auto()
    BIT_FLAG_WORD = auto()


MAX_SUBSPRITE = 31
BRIGHT_BIT = 0x8000


@dataclass(frozen=True, slots=True)
class FieldRef:
    name: str            # patch field name, matched case-insensitively
    attr: str            # record attribute
    kind: FieldKind
    index: int = -1      # element of a list attribute (frame args)
    mask: int = 0        # bits stripped from numeric BIT_FLAG_WORD writes

    def get(self, record: Any) -> int:
        value = getattr(record, self.attr)
        return value[self.index] if self.index >= 0 else value

    def set(self, record: Any, value: int) -> None:
        if self.index >= 0:
            getattr(record, self.attr)[self.index] = value
        else:
            setattr(record, self.attr, value)


@dataclass(frozen=True, slots=True)
class FieldLimits:
    """Upper bounds for index-valued fields under one patch format."""
    max_frame: int
    max_sound: int
    max_sprite: int
    max_ammo: int = int(AmmoType.NOAMMO)

    @classmethod
    def for_format(cls, patch_format: int, legacy_frames: int) -> FieldLimits:
        if patch_format <= 5:
            return cls(
                max_frame=legacy_frames - 1,
                max_sound=VANILLA_SOUNDS - 1,
                max_sprite=VANILLA_SPRITES - 1,
            )
        return cls(
            max_frame=DSDEHACKED_LIMIT,
            max_sound=DSDEHACKED_LIMIT,
            max_sprite=DSDEHACKED_LIMIT,
        )

    def max_for(self, kind: FieldKind) -> int:
        if kind is FieldKind.FRAME_INDEX:
            return self.max_frame
        if kind is FieldKind.SOUND_INDEX:
            return self.max_sound
        if kind is FieldKind.SPRITE_INDEX:
            return self.max_sprite
        if kind is FieldKind.AMMO_INDEX:
            return self.max_ammo
        if kind is FieldKind.SUBSPRITE_INDEX:
            return MAX_SUBSPRITE
        raise ValueError(f"{kind} has no index range")


K = FieldKind

THING_FIELDS: tuple[FieldRef, ...] = (
    FieldRef("ID #", "doomednum", K.UNCONSTRAINED),
    FieldRef("Initial frame", "spawnstate", K.FRAME_INDEX),
    FieldRef("Hit points", "spawnhealth", K.POSITIVE_ONLY),
    FieldRef("First moving frame", "seestate", K.FRAME_INDEX),
    FieldRef("Alert sound", "seesound", K.SOUND_INDEX),
    FieldRef("Reaction time", "reactiontime", K.NON_NEGATIVE),
    FieldRef("Attack sound", "attacksound", K.SOUND_INDEX),
    FieldRef("Injury frame", "painstate", K.FRAME_INDEX),
    FieldRef("Pain chance", "painchance", K.NON_NEGATIVE),
    FieldRef("Pain sound", "painsound", K.SOUND_INDEX),
    FieldRef("Close attack frame", "meleestate", K.FRAME_INDEX),
    FieldRef("Far attack frame", "missilestate", K.FRAME_INDEX),
    FieldRef("Death frame", "deathstate", K.FRAME_INDEX),
    FieldRef("Exploding frame", "xdeathstate", K.FRAME_INDEX),
    FieldRef("Death sound", "deathsound", K.SOUND_INDEX),
    FieldRef("Speed", "speed", K.NON_NEGATIVE),
    FieldRef("Width", "radius", K.NON_NEGATIVE),
    FieldRef("Height", "height", K.NON_NEGATIVE),
    FieldRef("Mass", "mass", K.NON_NEGATIVE),
    FieldRef("Missile damage", "damage", K.NON_NEGATIVE),
    FieldRef("Action sound", "activesound", K.SOUND_INDEX),
    FieldRef("Bits", "flags", K.BIT_FLAG_WORD, mask=int(ALL_BEX_FLAGS)),
    FieldRef("MBF21 Bits", "mbf21_flags", K.BIT_FLAG_WORD),
    FieldRef("Infighting group", "infight_group", K.NON_NEGATIVE),
    FieldRef("Projectile group", "proj_group", K.UNCONSTRAINED),
    FieldRef("Splash group", "splash_group", K.NON_NEGATIVE),
    FieldRef("Rip sound", "rip_sound", K.SOUND_INDEX),
    FieldRef("Fast speed", "fast_speed", K.NON_NEGATIVE),
    FieldRef("Melee range", "melee_range", K.NON_NEGATIVE),
    FieldRef("Respawn frame", "raisestate", K.FRAME_INDEX),
    FieldRef("Dropped item", "dropped_item", K.UNCONSTRAINED),
    FieldRef("Gib health", "gib_health", K.UNCONSTRAINED),
    FieldRef("Pickup width", "pickup_width", K.NON_NEGATIVE),
    FieldRef("Projectile pass height", "proj_pass_height", K.NON_NEGATIVE),
    FieldRef("Fullbright", "fullbright", K.NON_NEGATIVE),
)

# The first two weapon frame names are swapped relative to their meaning.
WEAPON_FIELDS: tuple[FieldRef, ...] = (
    FieldRef("Ammo type", "ammo", K.AMMO_INDEX),
    FieldRef("Deselect frame", "upstate", K.FRAME_INDEX),
    FieldRef("Select frame", "downstate", K.FRAME_INDEX),
    FieldRef("Bobbing frame", "readystate", K.FRAME_INDEX),
    FieldRef("Shooting frame", "atkstate", K.FRAME_INDEX),
    FieldRef("Firing frame", "flashstate", K.FRAME_INDEX),
    FieldRef("Ammo per shot", "ammo_per_shot", K.NON_NEGATIVE),
    FieldRef("MBF21 Bits", "mbf21_flags", K.BIT_FLAG_WORD),
)

FRAME_FIELDS: tuple[FieldRef, ...] = (
    FieldRef("Sprite number", "sprite", K.SPRITE_INDEX),
    FieldRef("Sprite subnumber", "subsprite", K.SUBSPRITE_INDEX),
    FieldRef("Duration", "tics", K.UNCONSTRAINED),
    FieldRef("Next frame", "next_state", K.FRAME_INDEX),
    FieldRef("Unknown 1", "args", K.UNCONSTRAINED, index=0),
    FieldRef("Unknown 2", "args", K.UNCONSTRAINED, index=1),
) + tuple(
    FieldRef(f"Args{i + 1}", "args", K.UNCONSTRAINED, index=i) for i in range(8)
)


def find_field(refs: tuple[FieldRef, ...], name: str) -> FieldRef | None:
    key = name.strip().lower()
    for ref in refs:
        if ref.name.lower() == key:
            return ref
    return None


def validate_value(ref: FieldRef, value: int, limits: FieldLimits,
                   diagnostics: Diagnostics) -> bool:
    """Range-check ``value`` for ``ref``; warn and return False if it fails."""
    if ref.kind in (K.UNCONSTRAINED, K.BIT_FLAG_WORD):
        return True

    if value < 0 or (value == 0 and ref.kind is K.POSITIVE_ONLY):
        diagnostics.warn("field", "bad value '%d' for %s", value, ref.name)
        return False

    if ref.kind in (K.NON_NEGATIVE, K.POSITIVE_ONLY):
        return True

    if ref.kind is K.SUBSPRITE_INDEX:
        value &= ~BRIGHT_BIT

    if value > limits.max_for(ref.kind):
        diagnostics.warn("field", "bad value '%d' for %s", value, ref.name)
        return False
    return True


def apply_field(refs: tuple[FieldRef, ...], name: str, record: Any, value: int,
                limits: FieldLimits, diagnostics: Diagnostics) -> bool:
    """Validate and write one field.

    Returns False only when ``name`` is not in ``refs``. A known field whose
    value fails validation is left unchanged but still counts as found.
    """
    ref = find_field(refs, name)
    if ref is None:
        return False
    if validate_value(ref, value, limits, diagnostics):
        if ref.kind is K.BIT_FLAG_WORD and ref.mask:
            value &= ~ref.mask
        ref.set(record, value)
    return True
