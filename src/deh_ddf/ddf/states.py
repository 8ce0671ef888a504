"""State-role grouper: turns frame chains into DDF ``STATES(...)`` blocks.

An entity's roles (spawn, chase, melee, ...) each start a frame chain.
``begin_group`` seeds a role from its chain start, ``spread_groups`` walks
every chain forward and ``output_group`` writes one role's frames.

Role tags are single letters. Upper case tags belong to map objects, lower
case tags to weapons:

    S IDLE   E CHASE   L MELEE   M MISSILE   P PAIN   D DEATH
    X OVERKILL   R RESPAWN   H RESURRECT
    u UP   d DOWN   r READY   a ATTACK   f FLASH

Chains are spread in role priority order (``THING_GROUP_ORDER`` for map
objects, ``WEAPON_GROUP_ORDER`` for weapons), not in frame index order:
when two chains overlap, a frame belongs to the higher-priority role even
if a lower-priority chain starts at a smaller frame number. A later chain
that reaches an owned frame stops and jumps there (``#IDLE:3``) instead of
repeating it. A role whose very first frame is already owned by another
role still emits that one frame.

While writing frames the grouper records which attacks the actions invoke
(``attack_slots``) and the union of their action flags (``act_flags``);
the converters read both afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from deh_ddf.models.actions import NULL_ACTION, ActFlag, action_info
from deh_ddf.models.records import Frame
from deh_ddf.models.sounds import SFX_NONE
from deh_ddf.models.sprites import INVISIBLE_SPRITE, find_sprite

if TYPE_CHECKING:
    from deh_ddf.ddf.writer import LumpWriter
    from deh_ddf.engine.session import ConversionSession


RANGE = 0
COMBAT = 1
SPARE = 2

_ATTACK_KINDS = {"R": RANGE, "C": COMBAT, "S": SPARE}

GROUP_NAMES = {
    "S": "IDLE",
    "E": "CHASE",
    "L": "MELEE",
    "M": "MISSILE",
    "P": "PAIN",
    "D": "DEATH",
    "X": "OVERKILL",
    "R": "RESPAWN",
    "H": "RESURRECT",
    "u": "UP",
    "d": "DOWN",
    "r": "READY",
    "a": "ATTACK",
    "f": "FLASH",
}

THING_GROUP_ORDER = "SELMPDXRH"
WEAPON_GROUP_ORDER = "udraf"

FULLBRIGHT_BIT = 0x8000
BRAINDIE_MIN_TICS = 44
WEAPON_FLASH_SCAN = 30

# misc1 of A_Turn / A_Face is a BAM angle
_BAM_PER_DEGREE = 11930465


def is_weapon_group(group: str) -> bool:
    return group.islower()


def group_to_name(group: str) -> str:
    try:
        return GROUP_NAMES[group]
    except KeyError:
        raise ValueError(f"bad state group {group!r}") from None


def misc_to_angle(value: int) -> int:
    # C division truncates towards zero
    degrees = abs(value) // _BAM_PER_DEGREE
    return -degrees if value < 0 else degrees


class StateGrouper:
    """Per-entity grouping state. Call :meth:`reset` before each entity."""

    __slots__ = (
        "session", "out", "scratch", "order",
        "groups", "group_for_state", "offset_for_state",
        "attack_slots", "act_flags", "force_fullbright",
    )

    def __init__(self, session: ConversionSession, out: LumpWriter, scratch=None):
        self.session = session
        self.out = out
        self.scratch = scratch        # ScratchAttacks registry for A_Scratch
        self.reset()

    def reset(self, order: str = THING_GROUP_ORDER) -> None:
        self.order = order
        self.groups: dict[str, list[int]] = {}
        self.group_for_state: dict[int, str] = {}
        self.offset_for_state: dict[int, int] = {}
        self.attack_slots: list[str | None] = [None, None, None]
        self.act_flags = 0
        self.force_fullbright = False

    # ------------------------------------------------------------------
    # Grouping
    # ------------------------------------------------------------------

    def begin_group(self, group: str, first: int) -> int:
        """Seed ``group`` at frame ``first``; returns 1 if seeded, else 0."""
        if first == 0:
            return 0
        self.groups[group] = [first]
        return 1

    def _frame(self, st_num: int) -> Frame | None:
        return self.session.frame(st_num)

    def _claim(self, group: str, st_num: int) -> None:
        self.group_for_state[st_num] = group
        self.offset_for_state[st_num] = len(self.groups[group])

    def _walk(self, group: str, alt_jumps: bool) -> bool:
        states = self.groups[group]
        changed = False
        i = 0
        while i < len(states):
            cur = states[i]
            i += 1
            if self.group_for_state.get(cur) != group:
                continue
            st = self._frame(cur)
            if st is None:
                continue

            if alt_jumps:
                if action_info(st.action).bex_name != "A_RandomJump":
                    continue
                nxt = st.misc1
            else:
                # a death sequence always leaves its first frame, even one
                # that would otherwise hibernate
                first_death = group in "DX" and len(states) == 1
                if st.tics < 0 and not first_death:
                    continue
                nxt = st.next_state

            if nxt == 0 or nxt in self.group_for_state:
                continue
            if self._frame(nxt) is None:
                continue
            states.append(nxt)
            self._claim(group, nxt)
            changed = True
        return changed

    def _ordered_groups(self) -> list[str]:
        ranked = [g for g in self.order if g in self.groups]
        return ranked + [g for g in self.groups if g not in ranked]

    def spread_groups(self) -> None:
        ranked = self._ordered_groups()
        for group in ranked:
            first = self.groups[group][0]
            if first not in self.group_for_state:
                self._claim(group, first)

        changed = True
        while changed:
            changed = False
            for group in ranked:
                if self._walk(group, alt_jumps=False):
                    changed = True
            for group in ranked:
                if self._walk(group, alt_jumps=True):
                    changed = True

    def check_weapon_flash(self, first: int) -> bool:
        """Whether the attack chain from ``first`` fires the flash frames."""
        for _ in range(WEAPON_FLASH_SCAN):
            if first == 0:
                break
            st = self._frame(first)
            if st is None or st.tics < 0:
                break
            if action_info(st.action).flags & ActFlag.FLASH:
                return True
            first = st.next_state
        return False

    def check_missile_state(self, st_num: int) -> bool:
        """Whether ``st_num`` starts a chain that goes somewhere."""
        if st_num == 0:
            return False
        st = self._frame(st_num)
        if st is None:
            return False
        return st.tics >= 0 and st.next_state != 0

    # ------------------------------------------------------------------
    # Names
    # ------------------------------------------------------------------

    def redirector_name(self, next_st: int) -> str:
        group = self.group_for_state.get(next_st)
        if group is None:
            self.session.warn("states", "Redirection to state %d FAILED", next_st)
            return "IDLE"
        offset = self.offset_for_state[next_st]
        if offset == 1:
            return group_to_name(group)
        return "%s:%d" % (group_to_name(group), offset)

    def update_attacks(self, group: str, act_name: str, info) -> str:
        """Record the attacks ``info`` implies; return the action text to use.

        When a slot already holds a different attack, the action is
        specialised to name its attack explicitly, e.g. ``RANGE_ATTACK(X)``.
        """
        if info.atk_1 is None:
            return act_name

        if is_weapon_group(group):
            kind1 = RANGE
        else:
            kind1 = _ATTACK_KINDS.get(info.atk_1[0], SPARE)
        atk1 = info.atk_1[2:]
        slot = self.attack_slots[kind1]
        free1 = slot is None or slot.upper() == atk1.upper()

        atk2 = None
        kind2 = -1
        free2 = True
        if info.atk_2 is not None:
            kind2 = _ATTACK_KINDS.get(info.atk_2[0], SPARE)
            atk2 = info.atk_2[2:]
            slot = self.attack_slots[kind2]
            free2 = slot is None or slot.upper() == atk2.upper()

        if free1 and free2:
            self.attack_slots[kind1] = atk1
            if atk2 is not None:
                self.attack_slots[kind2] = atk2
            return act_name

        self.out.printf("    // Specialising %s\n", act_name)

        if act_name.upper() == "BRAINSPIT":
            self.session.warn("states", "Multiple range attacks used with A_BrainSpit.")
            return act_name

        if atk2 is not None:
            if group not in "LM":
                self.session.warn("states", "Not enough attack slots for COMBOATTACK.")
            if (group == "L" and kind2 == COMBAT) or (group == "M" and kind2 == RANGE):
                atk1, kind1 = atk2, kind2
            act_name = ("RANGE_ATTACK", "CLOSE_ATTACK", "SPARE_ATTACK")[kind1]

        return "%s(%s)" % (act_name, atk1)

    def special_action(self, st: Frame) -> str:
        """DDF text for actions whose meaning comes from misc1/misc2."""
        name = action_info(st.action).bex_name
        session = self.session

        if name == "A_Die":
            return "DIE"

        if name == "A_KeenDie":
            return "KEEN_DIE"

        if name == "A_RandomJump":
            nxt, perc = st.misc1, st.misc2
            if nxt <= 0 or session.frame(nxt) is None:
                return "NOTHING"
            perc = int(perc * 100 / 256)
            perc = max(0, min(100, perc))
            return "JUMP(%s,%d%%)" % (self.redirector_name(nxt), perc)

        if name == "A_Turn":
            return "TURN(%d)" % misc_to_angle(st.misc1)

        if name == "A_Face":
            return "FACE(%d)" % misc_to_angle(st.misc1)

        if name == "A_PlaySound":
            if st.misc1 == SFX_NONE:
                return "NOTHING"
            sfx = session.sound_name(st.misc1)
            if sfx.upper() == "NULL":
                return "NOTHING"
            return 'PLAYSOUND("%s")' % sfx

        if name == "A_Scratch":
            damage, sfx_id = st.misc1, st.misc2
            if damage == 0 and sfx_id == 0:
                return "NOTHING"
            sfx = session.sound_name(sfx_id) if sfx_id > 0 else None
            if sfx is not None and sfx.upper() == "NULL":
                sfx = None
            return "CLOSE_ATTACK(%s)" % self.scratch.add(damage, sfx)

        if name == "A_LineEffect":
            if st.misc1 <= 0:
                return "NOTHING"
            return "ACTIVATE_LINETYPE(%d,%d)" % (st.misc1, st.misc2)

        if name == "A_Spawn":
            # thing numbers in misc1 are 1-based, as in a patch
            mt_num = st.misc1 - 1
            if not session.is_spawnable(mt_num):
                session.warn("states", "Action A_SPAWN unusable type (%d)", st.misc1)
                return "NOTHING"
            session.use_thing(mt_num)
            return "SPAWN(%s)" % session.mobj_name(mt_num)

        raise ValueError(f"bad special action {st.action}")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _frame_prefix(self, st: Frame) -> tuple[str, str, str]:
        sprite = self.session.sprite_name(st.sprite)
        letter = chr(ord("A") + (st.subsprite & 31))
        bright = "BRIGHT" if (st.subsprite & FULLBRIGHT_BIT or self.force_fullbright) else "NORMAL"
        return sprite, letter, bright

    def output_state(self, group: str, cur: int, do_action: bool) -> None:
        st = self._frame(cur)
        if st is None:
            st = Frame(sprite=find_sprite(INVISIBLE_SPRITE), subsprite=0, tics=-1)

        info = action_info(st.action) if do_action else NULL_ACTION
        is_null = info is NULL_ACTION or info.bex_name == "A_NULL"
        weapon = is_weapon_group(group)

        if info.flags & ActFlag.UNIMPL:
            self.session.warn("states", "Frame %d: action %s is not yet supported.",
                              cur, info.bex_name)

        weap_act = False
        if info.flags & ActFlag.SPECIAL:
            act_name = self.special_action(st)
        else:
            act_name = info.ddf_name
            weap_act = act_name.startswith("W:")
            if weap_act:
                act_name = act_name[2:]

        mismatch = not is_null and weap_act != weapon
        if mismatch and act_name.upper() != "NOTHING":
            if weap_act:
                self.session.warn("states", "Frame %d: weapon action %s used in thing.",
                                  cur, info.bex_name)
            else:
                self.session.warn("states", "Frame %d: thing action %s used in weapon.",
                                  cur, info.bex_name)
            act_name = "NOTHING"

        if is_null or weap_act == weapon:
            act_name = self.update_attacks(group, act_name, info)

        sprite, letter, bright = self._frame_prefix(st)

        if info.flags & ActFlag.MAKEDEAD:
            self.out.printf("    %s:%s:0:%s:MAKEDEAD,  // %s\n",
                            sprite, letter, bright, info.bex_name)

        if info.flags & ActFlag.FACE:
            self.out.printf("    %s:%s:0:%s:FACE_TARGET,\n", sprite, letter, bright)

        if info.flags & ActFlag.SPREAD:
            if not self.act_flags & ActFlag.SPREAD:
                self.out.printf("    %s:%s:0:%s:RESET_SPREADER,\n", sprite, letter, bright)
            self.out.printf("    %s:%s:0:%s:%s,  // A_FatAttack\n",
                            sprite, letter, bright, act_name)

        tics = st.tics
        if 0 <= tics < BRAINDIE_MIN_TICS and act_name.upper() == "BRAINDIE":
            tics = BRAINDIE_MIN_TICS

        self.out.printf("    %s:%s:%d:%s:%s", sprite, letter, tics, bright, act_name)

        if mismatch:
            return
        self.act_flags |= info.flags

    def output_spawn_state(self, first: int) -> bool:
        """Write ``STATES(SPAWN)``; True if no IDLE states are needed."""
        self.out.printf("\n")
        self.out.printf("STATES(SPAWN) =\n")

        st = self._frame(first)
        if st is None:
            st = Frame(sprite=find_sprite(INVISIBLE_SPRITE), subsprite=0, tics=-1)

        # the first action is not run when a thing is spawned
        self.output_state("S", first, False)

        if st.tics < 0:
            self.out.printf(";\n")
            return True
        if st.next_state == 0:
            self.out.printf(",#REMOVE;\n")
            return True
        self.out.printf(",#%s;\n", self.redirector_name(st.next_state))
        return False

    def output_group(self, group: str) -> None:
        states = self.groups.get(group)
        if not states:
            return

        if group == "S" and self.output_spawn_state(states[0]):
            return

        self.out.printf("\n")
        self.out.printf("STATES(%s) =\n", group_to_name(group))

        for i, cur in enumerate(states):
            is_last = i == len(states) - 1

            self.output_state(group, cur, True)

            st = self._frame(cur)
            nxt = st.next_state if st is not None else 0
            if st is None or st.tics < 0:
                pass
            elif nxt == 0:
                self.out.printf(",#REMOVE")
            elif is_last or nxt != states[i + 1]:
                self.out.printf(",#%s", self.redirector_name(nxt))

            if is_last:
                self.out.printf(";\n")
                return
            self.out.printf(",\n")
