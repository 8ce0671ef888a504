"""Conversion session: baseline tables, the mutable overlay, and edit rules.

A session owns everything one conversion run touches. Baseline records are
never written; the first write to an entity ("mark") copies its baseline
record into the overlay, and every later read goes through the overlay.
An entity is dirty exactly when it has an overlay record.

Dependency rules run when the edit is applied and go one hop only: marking
an entity because of a rule never triggers another rule. The frame and
sprite rules need the complete edit set and run once, in
:meth:`ConversionSession.resolve_dependencies`, before conversion.
"""

from __future__ import annotations

import copy
import logging

from deh_ddf.data.mobjinfo import build_brain_explode, build_mobjinfo
from deh_ddf.data.weapons import build_weapons
from deh_ddf.engine.bits import parse_bits
from deh_ddf.engine.config import ConversionConfig
from deh_ddf.engine.diagnostics import ConversionError, Diagnostics
from deh_ddf.engine.fields import (
    FRAME_FIELDS,
    THING_FIELDS,
    WEAPON_FIELDS,
    FieldLimits,
    apply_field,
)
from deh_ddf.engine.frames import FrameTable, normalize_action
from deh_ddf.engine.monsters import is_monster
from deh_ddf.models.actions import find_action
from deh_ddf.models.constants import (
    EXTRA_FIRST,
    EXTRA_LAST,
    MAX_AMMO_VALUE,
    MAX_ENTITY_ID,
    NUM_AMMO,
    NUM_MOBJ_TYPES,
    NUM_WEAPONS,
    AmmoType,
    MobjType,
    WeaponType,
)
from deh_ddf.models.flags import LEGACY_FLAG_NAMES, MBF21_FLAG_NAMES, WEAPON_MBF21_FLAG_NAMES
from deh_ddf.models.language import (
    CHEATS,
    LANGUAGE_ENTRIES,
    UNSUPPORTED_BEX_STRINGS,
    find_cheat,
    find_language_entry,
    truncate_cheat,
)
from deh_ddf.models.records import AmmoSettings, Frame, MiscSettings, MobjInfo, WeaponInfo
from deh_ddf.models.sounds import (
    DDF_SOUND_NAMES,
    RANDOM_SOUND_GROUPS,
    SFX_NONE,
    all_sound_ids,
    is_dehextra_sound,
    original_sound,
)
from deh_ddf.models.sprites import INVISIBLE_SPRITE, SPRITE_NAMES, find_sprite


logger = logging.getLogger(__name__)


MAX_FRAME_ID = 32767

# Pickup entities for each ammo type: (small, box)
AMMO_PICKUPS: dict[int, tuple[int, int]] = {
    AmmoType.BULLET: (MobjType.CLIP, MobjType.MISC17),
    AmmoType.SHELL: (MobjType.MISC22, MobjType.MISC23),
    AmmoType.ROCKET: (MobjType.MISC18, MobjType.MISC19),
    AmmoType.CELL: (MobjType.MISC20, MobjType.MISC21),
}

# (patch name, minimum, MiscSettings attribute or None if ignored, affected ids)
MISC_FIELDS: tuple[tuple[str, int, str | None, tuple[int, ...]], ...] = (
    ("Initial Bullets", 0, "init_ammo", (MobjType.PLAYER,)),
    ("Max Health", 1, "max_health", (MobjType.MISC2,)),
    ("Max Armor", 1, "max_armour",
     (MobjType.MISC0, MobjType.MISC1, MobjType.MISC3, MobjType.MEGA)),
    ("Green Armor Class", 0, "green_armour_class", (MobjType.MISC0,)),
    ("Blue Armor Class", 0, "blue_armour_class", (MobjType.MISC1,)),
    ("Max Soulsphere", 1, "soul_limit", (MobjType.MISC12,)),
    ("Soulsphere Health", 1, "soul_health", (MobjType.MISC12,)),
    ("Megasphere Health", 1, "mega_health", (MobjType.MEGA,)),
    ("God Mode Health", 0, None, ()),
    ("IDFA Armor", 0, None, ()),
    ("IDFA Armor Class", 0, None, ()),
    ("IDKFA Armor", 0, None, ()),
    ("IDKFA Armor Class", 0, None, ()),
)

INFIGHT_OFF = 202
INFIGHT_ON = 221

MOBJ_STATE_ROLES = (
    "spawnstate", "seestate", "painstate", "meleestate", "missilestate",
    "deathstate", "xdeathstate", "raisestate",
)
WEAPON_STATE_ROLES = ("upstate", "downstate", "readystate", "atkstate", "flashstate")

MAX_SOUND_NAME = 6
SPRITE_NAME_LEN = 4


class ConversionSession:
    """All tables for one conversion run. Build a fresh one per run."""

    def __init__(self, config: ConversionConfig | None = None,
                 frames: FrameTable | None = None):
        self.config = config or ConversionConfig()
        self.diagnostics = Diagnostics(quiet=self.config.quiet)
        self.frames = frames or FrameTable.empty()
        self.limits = FieldLimits.for_format(self.config.patch_format, self.frames.legacy_count)

        self.baseline_mobjs: list[MobjInfo] = build_mobjinfo(self.frames)
        self.brain_explode: MobjInfo = build_brain_explode(self.frames)
        self.baseline_weapons: list[WeaponInfo] = build_weapons(self.frames)

        self.misc = MiscSettings()
        self.ammo = AmmoSettings()

        self.mobj_overlay: dict[int, MobjInfo] = {}
        self.weapon_overlay: dict[int, WeaponInfo] = {}
        self.frame_overlay: dict[int, Frame] = {}
        self.ammo_modified: set[int] = set()

        self.sound_new_names: dict[int, str] = {}
        self.sound_priorities: dict[int, int] = {}
        self.sound_modified: set[int] = set()
        self.sprite_new_names: dict[int, str] = {}
        self.bex_strings: dict[int, str] = {}
        self.cheats: dict[int, str] = {}

    # ------------------------------------------------------------------
    # Warnings
    # ------------------------------------------------------------------

    def warn(self, category: str, fmt: str, *args) -> None:
        self.diagnostics.warn(category, fmt, *args)

    @property
    def warnings(self):
        return self.diagnostics.warnings

    # ------------------------------------------------------------------
    # Map objects
    # ------------------------------------------------------------------

    def mark_thing(self, mt_num: int) -> MobjInfo:
        """Return the overlay record for ``mt_num``, creating it if needed."""
        if mt_num < 0 or mt_num > MAX_ENTITY_ID:
            raise ValueError(f"entity id out of range: {mt_num}")

        # merged thing/attack pairs are emitted together
        if mt_num == MobjType.TFOG:
            self.mark_thing(MobjType.TELEPORTMAN)
        if mt_num == MobjType.SPAWNFIRE:
            self.mark_thing(MobjType.SPAWNSHOT)

        entry = self.mobj_overlay.get(mt_num)
        if entry is not None:
            return entry

        if mt_num < NUM_MOBJ_TYPES:
            entry = copy.deepcopy(self.baseline_mobjs[mt_num])
        else:
            doomednum = mt_num if EXTRA_FIRST <= mt_num <= EXTRA_LAST else -1
            entry = MobjInfo(
                name="X", doomednum=doomednum,
                spawnhealth=0, reactiontime=0, mass=0,
            )
        self.mobj_overlay[mt_num] = entry
        logger.debug("marked thing %d", mt_num)
        return entry

    def is_marked(self, mt_num: int) -> bool:
        return mt_num in self.mobj_overlay

    def marked_things(self) -> list[int]:
        return sorted(self.mobj_overlay)

    def baseline_mobj(self, mt_num: int) -> MobjInfo | None:
        if 0 <= mt_num < NUM_MOBJ_TYPES:
            return self.baseline_mobjs[mt_num]
        return None

    def mobj(self, mt_num: int) -> MobjInfo | None:
        """The effective record: overlay if marked, else the baseline."""
        entry = self.mobj_overlay.get(mt_num)
        if entry is not None:
            return entry
        return self.baseline_mobj(mt_num)

    def merge_partner(self, mt_num: int) -> MobjInfo:
        """The record another entity is merged with; it must exist."""
        info = self.mobj(mt_num)
        if info is None:
            raise ConversionError(f"missing merge target: thing {mt_num + 1}")
        return info

    def mobj_name(self, mt_num: int) -> str:
        if 0 <= mt_num < NUM_MOBJ_TYPES:
            return self.baseline_mobjs[mt_num].name
        if EXTRA_FIRST <= mt_num <= EXTRA_LAST:
            return "MT_EXTRA%02d" % (mt_num - EXTRA_FIRST)
        return "DEHACKED_%d" % (mt_num + 1)

    def use_thing(self, mt_num: int) -> None:
        """Note a reference to ``mt_num`` from another definition.

        The standard DDF already defines everything before the MBF dog, so
        only later entities need to be emitted.
        """
        if mt_num >= MobjType.DOGS:
            self.mark_thing(mt_num)

    def is_spawnable(self, mt_num: int) -> bool:
        base = self.baseline_mobj(mt_num)
        if base is not None and base.is_attack:
            return False
        info = self.mobj(mt_num)
        return info is not None and info.doomednum > 0

    def mbf21_flags_of(self, mt_num: int) -> int:
        info = self.mobj(mt_num)
        return info.mbf21_flags if info is not None else 0

    def set_player_health(self, value: int) -> None:
        self.mark_thing(MobjType.PLAYER).spawnhealth = value

    def mark_all_monsters(self) -> None:
        for mt_num in range(NUM_MOBJ_TYPES):
            if mt_num == MobjType.PLAYER:
                continue
            if is_monster(self.mobj(mt_num), knows_roles=False):
                self.mark_thing(mt_num)

    def _thing_id_ok(self, mt_num: int) -> bool:
        if 0 <= mt_num <= MAX_ENTITY_ID:
            return True
        self.warn("edit", "illegal thing number: %d", mt_num + 1)
        return False

    def set_thing_field(self, mt_num: int, name: str, value: int) -> None:
        if not self._thing_id_ok(mt_num):
            return
        info = self.mark_thing(mt_num)
        if not apply_field(THING_FIELDS, name, info, value, self.limits, self.diagnostics):
            self.warn("field", "UNKNOWN THING FIELD: %s", name)

    def set_thing_bits(self, mt_num: int, text: str) -> None:
        if not self._thing_id_ok(mt_num):
            return
        info = self.mark_thing(mt_num)
        info.flags = parse_bits(LEGACY_FLAG_NAMES, text, self.diagnostics)

    def set_mbf21_bits(self, mt_num: int, text: str) -> None:
        if not self._thing_id_ok(mt_num):
            return
        info = self.mark_thing(mt_num)
        info.mbf21_flags = parse_bits(MBF21_FLAG_NAMES, text, self.diagnostics)

    # ------------------------------------------------------------------
    # Weapons
    # ------------------------------------------------------------------

    def mark_weapon(self, wp_num: int) -> WeaponInfo:
        entry = self.weapon_overlay.get(wp_num)
        if entry is None:
            entry = copy.deepcopy(self.baseline_weapons[wp_num])
            self.weapon_overlay[wp_num] = entry
        return entry

    def weapon(self, wp_num: int) -> WeaponInfo:
        return self.weapon_overlay.get(wp_num) or self.baseline_weapons[wp_num]

    def marked_weapons(self) -> list[int]:
        return sorted(self.weapon_overlay)

    def _weapon_id_ok(self, wp_num: int) -> bool:
        if 0 <= wp_num < NUM_WEAPONS:
            return True
        self.warn("edit", "illegal weapon number: %d", wp_num)
        return False

    def set_weapon_field(self, wp_num: int, name: str, value: int) -> None:
        if not self._weapon_id_ok(wp_num):
            return
        scratch = copy.deepcopy(self.weapon(wp_num))
        if not apply_field(WEAPON_FIELDS, name, scratch, value, self.limits, self.diagnostics):
            self.warn("field", "UNKNOWN WEAPON FIELD: %s", name)
            return
        self.weapon_overlay[wp_num] = scratch

    def set_weapon_bits(self, wp_num: int, text: str) -> None:
        if not self._weapon_id_ok(wp_num):
            return
        info = self.mark_weapon(wp_num)
        info.mbf21_flags = parse_bits(WEAPON_MBF21_FLAG_NAMES, text, self.diagnostics)

    # ------------------------------------------------------------------
    # Ammo and misc
    # ------------------------------------------------------------------

    def mark_ammo(self, a_num: int) -> None:
        self.ammo_modified.add(a_num)
        self.mark_thing(MobjType.PLAYER)
        self.mark_thing(MobjType.MISC24)  # backpack
        for mt_num in AMMO_PICKUPS[a_num]:
            self.mark_thing(mt_num)

    def set_ammo_field(self, a_num: int, name: str, value: int) -> None:
        if not 0 <= a_num < NUM_AMMO:
            self.warn("edit", "illegal ammo number: %d", a_num)
            return
        key = name.strip().lower()
        if key not in ("max ammo", "per ammo"):
            self.warn("field", "UNKNOWN AMMO FIELD: %s", name)
            return
        value = min(value, MAX_AMMO_VALUE)
        if value < 0:
            self.warn("field", "Bad value '%d' for AMMO field: %s", value, name)
            return
        if key == "max ammo":
            self.ammo.player_max[a_num] = value
        else:
            self.ammo.pickup[a_num] = value
        self.mark_ammo(a_num)

    def set_misc_field(self, name: str, value: int) -> None:
        key = name.strip().lower()

        if key == "initial health":
            if value < 1:
                self.warn("field", "Bad value '%d' for MISC field: %s", value, name)
                return
            self.set_player_health(value)
            return

        if key == "bfg cells/shot":
            if value < 1:
                self.warn("field", "Bad value '%d' for MISC field: %s", value, name)
                return
            self.misc.bfg_cells_per_shot = value
            self.mark_weapon(WeaponType.BFG)
            return

        if key == "monsters infight":
            if value not in (INFIGHT_OFF, INFIGHT_ON):
                self.warn("field", "Bad value '%d' for MISC field: %s", value, name)
                return
            self.misc.monster_infight = value
            if value == INFIGHT_ON:
                self.mark_all_monsters()
            return

        for field_name, minimum, attr, affected in MISC_FIELDS:
            if field_name.lower() != key:
                continue
            if attr is None:
                self.warn("field", "Ignoring MISC field: %s", name)
                return
            if value < minimum:
                self.warn("field", "Bad value '%d' for MISC field: %s", value, name)
                value = minimum
            setattr(self.misc, attr, value)
            for mt_num in affected:
                self.mark_thing(mt_num)
            return

        self.warn("field", "UNKNOWN MISC FIELD: %s", name)

    @property
    def monsters_infight(self) -> bool:
        return self.misc.monster_infight == INFIGHT_ON

    # ------------------------------------------------------------------
    # Frames
    # ------------------------------------------------------------------

    def frame(self, st_num: int) -> Frame | None:
        entry = self.frame_overlay.get(st_num)
        if entry is not None:
            return entry
        return self.frames.get(st_num)

    def mark_frame(self, st_num: int) -> Frame | None:
        """Overlay record for frame ``st_num``; the null frame is never marked."""
        if st_num == 0:
            return None
        entry = self.frame_overlay.get(st_num)
        if entry is not None:
            return entry
        base = self.frames.get(st_num)
        if base is not None:
            entry = copy.deepcopy(base)
        else:
            entry = Frame(
                sprite=find_sprite(INVISIBLE_SPRITE), subsprite=0, tics=-1,
                action="A_NULL", next_state=st_num,
            )
        self.frame_overlay[st_num] = entry
        return entry

    def total_frames(self) -> int:
        top = max(self.frame_overlay) + 1 if self.frame_overlay else 0
        return max(len(self.frames), top)

    def _frame_id_ok(self, st_num: int) -> bool:
        if 0 <= st_num <= MAX_FRAME_ID:
            return True
        self.warn("edit", "illegal FRAME number: %d", st_num)
        return False

    def set_frame_field(self, st_num: int, name: str, value: int) -> None:
        if not self._frame_id_ok(st_num) or st_num == 0:
            return
        entry = self.mark_frame(st_num)
        if name.strip().lower() == "action pointer":
            self.warn("field", "raw Action pointer not supported")
            return
        if not apply_field(FRAME_FIELDS, name, entry, value, self.limits, self.diagnostics):
            self.warn("field", "UNKNOWN FRAME FIELD: %s", name)

    def set_frame_pointer(self, st_num: int, action: str) -> None:
        if not self._frame_id_ok(st_num) or st_num == 0:
            return
        entry = self.mark_frame(st_num)
        info = find_action(action)
        if info is None:
            self.warn("field", "unknown action %s for CODEPTR.", action)
            return
        entry.action = info.bex_name

    def set_codep_frame(self, st_num: int, source: int) -> None:
        if not self._frame_id_ok(st_num) or st_num == 0:
            return
        entry = self.mark_frame(st_num)
        base = self.frames.get(source) if 0 <= source < self.frames.legacy_count else None
        if base is None:
            self.warn("field", "Illegal Codep frame number: %d", source)
            return
        entry.action = normalize_action(base.action)

    # ------------------------------------------------------------------
    # Sounds
    # ------------------------------------------------------------------

    def mark_sound(self, s_num: int) -> None:
        if s_num != SFX_NONE:
            self.sound_modified.add(s_num)

    def sound_priority(self, s_num: int) -> int:
        if s_num in self.sound_priorities:
            return self.sound_priorities[s_num]
        return original_sound(s_num).priority

    def sound_lump(self, s_num: int) -> str:
        return self.sound_new_names.get(s_num) or original_sound(s_num).name

    def ddf_sound_name(self, s_num: int) -> str:
        """Entry name of a sound in the DDF sound table."""
        orig = original_sound(s_num).name
        return DDF_SOUND_NAMES.get(orig, orig).upper()

    def sound_name(self, s_num: int) -> str:
        """Name a thing or attack uses to refer to sound ``s_num``."""
        info = original_sound(s_num)
        if info is None:
            self.warn("sound", "unknown sound number %d", s_num)
            return "NULL"
        if is_dehextra_sound(s_num):
            self.mark_sound(s_num)
        if info.name in RANDOM_SOUND_GROUPS:
            return RANDOM_SOUND_GROUPS[info.name]
        return self.ddf_sound_name(s_num)

    def set_sound_field(self, s_num: int, name: str, value: int) -> None:
        if original_sound(s_num) is None:
            self.warn("edit", "illegal sound number: %d", s_num)
            return
        key = name.strip().lower()
        if key.startswith("zero") or key.startswith("neg. one"):
            return
        if key == "offset":
            self.warn("field", "raw sound Offset not supported.")
            return
        if key == "value":
            if value < 0:
                self.warn("field", "bad sound priority value: %d.", value)
                value = 0
            self.sound_priorities[s_num] = value
            self.mark_sound(s_num)
            return
        self.warn("field", "UNKNOWN SOUND FIELD: %s", name)

    def rename_sound(self, before: str, after: str) -> None:
        for text in (before, after):
            if not 1 <= len(text) <= MAX_SOUND_NAME:
                self.warn("rename", "Bad length for sound name '%s'.", text)
                return
        key = before.lower()
        for s_num in all_sound_ids():
            if original_sound(s_num).name == key:
                self.sound_new_names[s_num] = after
                self.mark_sound(s_num)
                return
        self.warn("rename", "unknown sound name '%s'.", before)

    # ------------------------------------------------------------------
    # Sprites
    # ------------------------------------------------------------------

    def sprite_name(self, spr_num: int) -> str:
        if not 0 <= spr_num < len(SPRITE_NAMES):
            self.warn("sprite", "unknown sprite number %d", spr_num)
            return "NULL"
        name = self.sprite_new_names.get(spr_num, SPRITE_NAMES[spr_num])
        if name.upper() == INVISIBLE_SPRITE:
            return "NULL"
        return name

    def rename_sprite(self, before: str, after: str) -> None:
        for text in (before, after):
            if len(text) != SPRITE_NAME_LEN:
                self.warn("rename", "Bad length for sprite name '%s'.", text)
                return
        spr_num = find_sprite(before)
        if spr_num is None:
            self.warn("rename", "unknown sprite name '%s'.", before)
            return
        self.sprite_new_names[spr_num] = after

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------

    def set_bex_string(self, bex_name: str, text: str) -> None:
        if not text:
            self.warn("text", "empty replacement for BEX string %s", bex_name)
            return
        if bex_name.upper() in UNSUPPORTED_BEX_STRINGS:
            self.warn("text", "unsupported BEX string: %s", bex_name)
            return
        idx = find_language_entry(bex_name)
        if idx is None:
            self.warn("text", "unknown BEX string: %s", bex_name)
            return
        self.bex_strings[idx] = text

    def set_cheat(self, deh_name: str, text: str) -> None:
        if not text:
            self.warn("text", "empty replacement for cheat %s", deh_name)
            return
        idx = find_cheat(deh_name)
        if idx is None:
            self.warn("text", "UNKNOWN CHEAT FIELD: %s", deh_name)
            return
        self.cheats[idx] = truncate_cheat(CHEATS[idx], text)

    def language_ldf_name(self, idx: int) -> str:
        return LANGUAGE_ENTRIES[idx].ldf_name

    # ------------------------------------------------------------------
    # Deferred dependencies
    # ------------------------------------------------------------------

    def resolve_dependencies(self) -> None:
        """Sprite and frame rules, run once after every edit is applied."""
        self._sprite_dependencies()
        self._frame_dependencies()

    def _sprite_dependencies(self) -> None:
        if not self.sprite_new_names:
            return
        for st_num in range(1, len(self.frames)):
            if self.frames.get(st_num).sprite in self.sprite_new_names:
                self.mark_frame(st_num)

    def chain_frames(self, start: int):
        """Yield every frame number the chain from ``start`` can visit."""
        pending = [start]
        seen: set[int] = set()
        while pending:
            st_num = pending.pop()
            if st_num == 0 or st_num in seen:
                continue
            seen.add(st_num)
            yield st_num
            st = self.frame(st_num)
            if st is None or st.tics < 0:
                continue
            pending.append(st.next_state)
            info = find_action(st.action)
            if info is not None and info.bex_name == "A_RandomJump":
                pending.append(st.misc1)

    def chain_reaches(self, start: int, targets: set[int] | dict[int, Frame]) -> bool:
        """Whether the frame chain from ``start`` visits any of ``targets``."""
        return any(st_num in targets for st_num in self.chain_frames(start))

    def _frame_dependencies(self) -> None:
        if not self.frame_overlay:
            return
        targets = self.frame_overlay
        for wp_num in range(NUM_WEAPONS):
            if wp_num in self.weapon_overlay:
                continue
            weapon = self.weapon(wp_num)
            if any(self.chain_reaches(getattr(weapon, role), targets)
                   for role in WEAPON_STATE_ROLES):
                self.mark_weapon(wp_num)
        for mt_num in range(NUM_MOBJ_TYPES):
            if mt_num in self.mobj_overlay:
                continue
            info = self.baseline_mobjs[mt_num]
            if any(self.chain_reaches(getattr(info, role), targets)
                   for role in MOBJ_STATE_ROLES):
                self.mark_thing(mt_num)

