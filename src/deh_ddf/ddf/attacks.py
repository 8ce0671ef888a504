"""Attack conversion: the ``DDFATK`` lump.

Projectiles and other "attack" entities (names starting with ``*``) are
written here instead of the things lump. The lump also holds the scratch
attacks created by ``A_Scratch`` frames and, when a patch breaks the lost
soul's missile frames, fresh pain-elemental spawner attacks.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from deh_ddf.ddf.states import StateGrouper
from deh_ddf.ddf.things import f_fixed, format_speed, handle_attacks, handle_flags, handle_mbf21_flags, quoted_sound
from deh_ddf.ddf.writer import LumpWriter
from deh_ddf.engine.diagnostics import ConversionError
from deh_ddf.engine.session import ConversionSession
from deh_ddf.models.actions import ActFlag
from deh_ddf.models.constants import MobjType
from deh_ddf.models.records import MobjInfo
from deh_ddf.models.sounds import SFX_NONE, find_sound


logger = logging.getLogger(__name__)


LUMP_NAME = "DDFATK"

SCRATCH_RANGE = 80
PAIN_SPAWN_LIMIT = 21


@dataclass(frozen=True, slots=True)
class AttackExtra:
    mt_num: int
    atk_type: str
    atk_height: int
    translucency: int
    flags: str         # letters, see below


# Extra-table flag letters
KF_FACE_TARG = "F"
KF_SIGHT = "S"
KF_KILL_FAIL = "K"
KF_PUFF_SMK = "p"
KF_TOO_CLOSE = "c"
KF_NO_TRACE = "t"
KF_KEEP_FIRE = "e"

ATTACK_EXTRA: tuple[AttackExtra, ...] = (
    AttackExtra(MobjType.FIRE, "TRACKER", 0, 75, "FS"),
    AttackExtra(MobjType.TRACER, "PROJECTILE", 48, 75, "cptF"),
    AttackExtra(MobjType.FATSHOT, "FIXED_SPREADER", 32, 75, ""),
    AttackExtra(MobjType.TROOPSHOT, "PROJECTILE", 32, 75, "F"),
    AttackExtra(MobjType.BRUISERSHOT, "PROJECTILE", 32, 75, "F"),
    AttackExtra(MobjType.HEADSHOT, "PROJECTILE", 32, 75, "F"),
    AttackExtra(MobjType.ARACHPLAZ, "PROJECTILE", 16, 50, "eF"),
    AttackExtra(MobjType.ROCKET, "PROJECTILE", 44, 75, "FK"),
    AttackExtra(MobjType.PLASMA, "PROJECTILE", 32, 75, "eK"),
    AttackExtra(MobjType.BFG, "PROJECTILE", 32, 50, "K"),
    AttackExtra(MobjType.EXTRABFG, "SPRAY", 0, 75, ""),
    AttackExtra(MobjType.SPAWNSHOT, "SHOOTTOSPOT", 16, 100, ""),
)

_EXTRA_BY_TYPE = {ext.mt_num: ext for ext in ATTACK_EXTRA}

PLAYER_MISSILE = "PLAYER_MISSILE"
PLAYER_ROCKET_HEIGHT = 32


def sanitize_name(text: str) -> str:
    return re.sub(r"[^A-Z0-9]", "_", text.upper())


@dataclass(slots=True)
class ScratchAttack:
    damage: int
    sfx: str | None
    name: str


class ScratchAttacks:
    """Close-combat attacks synthesised for ``A_Scratch`` frames."""

    __slots__ = ("attacks",)

    def __init__(self):
        self.attacks: list[ScratchAttack] = []

    def add(self, damage: int, sfx: str | None) -> str:
        safe_sfx = sanitize_name(sfx) if sfx else "QUIET"
        name = "SCRATCH_%s_%d" % (safe_sfx, damage)
        if not any(atk.name == name for atk in self.attacks):
            self.attacks.append(ScratchAttack(damage, sfx, name))
        return name

    def __len__(self) -> int:
        return len(self.attacks)

    def __iter__(self):
        return iter(self.attacks)


class AttackConverter:
    """Writes the attacks lump for one session."""

    def __init__(self, session: ConversionSession, out: LumpWriter, grouper: StateGrouper,
                 scratch: ScratchAttacks):
        self.session = session
        self.out = out
        self.grouper = grouper
        self.scratch = scratch
        self.got_one = False

    def begin_lump(self) -> None:
        self.out.begin_lump(LUMP_NAME)
        self.out.printf("<ATTACKS>\n\n")

    def finish_lump(self) -> None:
        self.out.printf("\n")
        self.out.finish_lump()

    def _ensure_lump(self) -> None:
        if not self.got_one:
            self.got_one = True
            self.begin_lump()

    # --- Scratch attacks ---

    def convert_scratch(self, atk: ScratchAttack) -> None:
        self._ensure_lump()
        out = self.out
        out.printf("[%s]\n", atk.name)
        out.printf("ATTACKTYPE=CLOSECOMBAT;\n")
        out.printf("DAMAGE.VAL=%d;\n", atk.damage)
        out.printf("DAMAGE.MAX=%d;\n", atk.damage)
        out.printf("ATTACKRANGE=%d;\n", SCRATCH_RANGE)
        out.printf("ATTACK_SPECIAL=FACE_TARGET;\n")
        if atk.sfx:
            out.printf("ENGAGED_SOUND=%s;\n", atk.sfx)
        out.printf("\n")

    # --- Projectiles ---

    def handle_atk_specials(self, ext: AttackExtra, plr_rocket: bool) -> None:
        specials = []
        if KF_FACE_TARG in ext.flags and not plr_rocket:
            specials.append("FACE_TARGET")
        if KF_SIGHT in ext.flags:
            specials.append("NEED_SIGHT")
        if KF_KILL_FAIL in ext.flags:
            specials.append("KILL_FAILED_SPAWN")
        if KF_PUFF_SMK in ext.flags:
            specials.append("SMOKING_TRACER")
        if specials:
            self.out.printf("ATTACK_SPECIAL = %s;\n", ",".join(specials))

    def handle_sounds(self, info: MobjInfo, mt_num: int) -> None:
        session, out = self.session, self.out

        if info.seesound != SFX_NONE:
            out.printf("LAUNCH_SOUND = %s;\n", quoted_sound(session, info.seesound))
        if info.deathsound != SFX_NONE:
            out.printf("DEATH_SOUND = %s;\n", quoted_sound(session, info.deathsound))
        if info.rip_sound != SFX_NONE:
            out.printf("RIP_SOUND = %s;\n", quoted_sound(session, info.rip_sound))

        if mt_num == MobjType.FIRE:
            out.printf("ATTEMPT_SOUND = %s;\n", quoted_sound(session, find_sound("vilatk")))
            out.printf("ENGAGED_SOUND = %s;\n", quoted_sound(session, find_sound("barexp")))

        if mt_num == MobjType.FATSHOT:
            out.printf("ATTEMPT_SOUND = %s;\n", quoted_sound(session, find_sound("manatk")))

    def handle_frames(self, info: MobjInfo, mt_num: int) -> None:
        session, grouper = self.session, self.grouper
        grouper.reset()
        grouper.force_fullbright = info.fullbright > 0

        if mt_num == MobjType.SPAWNSHOT:
            # the spawn cube and its spawn fire become one attack
            spawnfire = session.merge_partner(MobjType.SPAWNFIRE)
            count = grouper.begin_group("D", spawnfire.spawnstate)
            count += grouper.begin_group("S", info.spawnstate)
            if count != 2:
                session.warn("states", "Brain cube is missing spawn/fire states.")
            if count == 0:
                return
            grouper.spread_groups()
            grouper.output_group("S")
            grouper.output_group("D")
            return

        count = grouper.begin_group("D", info.deathstate)
        count += grouper.begin_group("E", info.seestate)
        count += grouper.begin_group("S", info.spawnstate)

        if count == 0:
            session.warn("states", "Attack [%s] has no states.", session.mobj_name(mt_num)[1:])
            return

        grouper.spread_groups()
        grouper.output_group("S")
        grouper.output_group("E")
        grouper.output_group("D")

    def convert_attack(self, info: MobjInfo, mt_num: int, plr_rocket: bool = False) -> None:
        if not info.is_attack:
            return
        # emitted as part of the brain cube
        if mt_num == MobjType.SPAWNFIRE:
            return

        self._ensure_lump()
        session, out, grouper = self.session, self.out, self.grouper
        atk_name = session.mobj_name(mt_num)[1:]

        out.printf("[%s]\n", PLAYER_MISSILE if plr_rocket else atk_name)

        ext = _EXTRA_BY_TYPE.get(mt_num)
        if ext is None:
            raise ConversionError(f"Missing attack {atk_name} in extra table.")

        out.printf("ATTACKTYPE = %s;\n", ext.atk_type)
        out.printf("RADIUS = %1.1f;\n", f_fixed(info.radius))
        out.printf("HEIGHT = %1.1f;\n", f_fixed(info.height))

        if info.spawnhealth != 1000:
            out.printf("SPAWNHEALTH = %d;\n", info.spawnhealth)
        if info.speed != 0:
            out.printf("SPEED = %s;\n", format_speed(info.speed))
        if info.mass != 100:
            out.printf("MASS = %d;\n", info.mass)

        if mt_num == MobjType.BRUISERSHOT:
            out.printf("FAST = 1.4;\n")
        elif mt_num in (MobjType.TROOPSHOT, MobjType.HEADSHOT):
            out.printf("FAST = 2.0;\n")

        if plr_rocket:
            out.printf("ATTACK_HEIGHT = %d;\n", PLAYER_ROCKET_HEIGHT)
        elif ext.atk_height != 0:
            out.printf("ATTACK_HEIGHT = %d;\n", ext.atk_height)

        if mt_num == MobjType.FIRE:
            out.printf("DAMAGE.VAL = 20;\n")
            out.printf("EXPLODE_DAMAGE.VAL = 70;\n")
        elif mt_num == MobjType.EXTRABFG:
            out.printf("DAMAGE.VAL   = 65;\n")
            out.printf("DAMAGE.ERROR = 50;\n")
        elif info.damage > 0:
            out.printf("DAMAGE.VAL = %d;\n", info.damage)
            out.printf("DAMAGE.MAX = %d;\n", info.damage * 8)

        if mt_num == MobjType.BFG:
            out.printf("SPARE_ATTACK = BFG9000_SPRAY;\n")

        if ext.translucency != 100:
            out.printf("TRANSLUCENCY = %d%%;\n", ext.translucency)

        if KF_PUFF_SMK in ext.flags:
            out.printf("PUFF = SMOKE;\n")
        if KF_TOO_CLOSE in ext.flags:
            out.printf("TOO_CLOSE_RANGE = 196;\n")
        if KF_NO_TRACE in ext.flags:
            out.printf("NO_TRACE_CHANCE = 50%%;\n")
            out.printf("TRACE_ANGLE = 9;\n")
        if KF_KEEP_FIRE in ext.flags:
            out.printf("KEEP_FIRING_CHANCE = 4%%;\n")

        self.handle_atk_specials(ext, plr_rocket)
        self.handle_sounds(info, mt_num)
        self.handle_frames(info, mt_num)

        out.printf("\n")

        handle_flags(session, out, grouper, info, mt_num, 0)
        handle_mbf21_flags(out, info)

        if any(grouper.attack_slots):
            session.warn("attacks", "Attack [%s] contained an attacking action.", atk_name)
            handle_attacks(session, out, grouper, info, mt_num)

        if grouper.act_flags & ActFlag.EXPLODE:
            out.printf("EXPLODE_DAMAGE.VAL = 128;\n")

        out.printf("\n")

    # --- Pain elemental ---

    def check_pain_elemental(self) -> None:
        """Rebuild the lost-soul spawner attacks if their frames broke.

        ELEMENTAL_SPAWNER and ELEMENTAL_DEATHSPAWN start the spawned lost
        soul in its missile frames; they only need rewriting when those no
        longer lead anywhere. An unmarked lost soul still has its
        compiled-in frames.
        """
        if not self.session.is_marked(MobjType.SKULL):
            return
        skull = self.session.mobj(MobjType.SKULL)
        if self.grouper.check_missile_state(skull.missilestate):
            return

        self._ensure_lump()

        if skull.seestate:
            spawn_at = "CHASE:1"
        elif skull.missilestate:
            spawn_at = "MISSILE:1"
        elif skull.meleestate:
            spawn_at = "MELEE:1"
        else:
            spawn_at = "IDLE:1"

        out = self.out
        out.printf("[ELEMENTAL_SPAWNER]\n")
        out.printf("ATTACKTYPE = SPAWNER;\n")
        out.printf("ATTACK_HEIGHT = 8;\n")
        out.printf("ATTACK_SPECIAL = PRESTEP_SPAWN,FACE_TARGET;\n")
        out.printf("SPAWNED_OBJECT = LOST_SOUL;\n")
        out.printf("SPAWN_OBJECT_STATE = %s;\n", spawn_at)
        out.printf("SPAWN_LIMIT = %d;\n", PAIN_SPAWN_LIMIT)
        out.printf("\n")
        out.printf("[ELEMENTAL_DEATHSPAWN]\n")
        out.printf("ATTACKTYPE = TRIPLE_SPAWNER;\n")
        out.printf("ATTACK_HEIGHT = 8;\n")
        out.printf("ATTACK_SPECIAL = PRESTEP_SPAWN,FACE_TARGET;\n")
        out.printf("SPAWNED_OBJECT = LOST_SOUL;\n")
        out.printf("SPAWN_OBJECT_STATE = %s;\n", spawn_at)

    # --- Whole lump ---

    def convert_all(self) -> None:
        session = self.session
        self.got_one = False

        for atk in self.scratch:
            self.convert_scratch(atk)

        for mt_num in session.marked_things():
            info = session.mobj_overlay[mt_num]
            if not info.is_attack:
                continue
            logger.debug("converting attack %d (%s)", mt_num, session.mobj_name(mt_num))
            self.convert_attack(info, mt_num)
            if mt_num == MobjType.ROCKET:
                self.convert_attack(info, mt_num, plr_rocket=True)

        self.check_pain_elemental()

        if self.got_one:
            self.finish_lump()
