"""Map-object conversion: the ``DDFTHING`` lump.

Every marked map object that is not an attack becomes one ``[NAME:num]``
block. The player is written eight times (one per player slot), and the
boss brain's death missile is appended whenever the lump has content.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from deh_ddf.ddf.states import COMBAT, RANGE, SPARE, StateGrouper
from deh_ddf.ddf.writer import LumpWriter
from deh_ddf.engine.diagnostics import ConversionError
from deh_ddf.engine.monsters import is_monster
from deh_ddf.engine.session import ConversionSession
from deh_ddf.models.actions import ActFlag
from deh_ddf.models.constants import FRACUNIT, NO_GROUP, NUM_MOBJ_TYPES, AmmoType, MobjType
from deh_ddf.models.flags import (
    EXTRA_FLAG_DDF,
    LEGACY_FLAG_NAMES,
    MBF21_FLAG_NAMES,
    TRANSLATION_MASK,
    ExtraFlag,
    LegacyFlag,
    extra_flags,
)
from deh_ddf.models.records import MobjInfo
from deh_ddf.models.sounds import SFX_NONE, find_sound
from deh_ddf.models.sprites import SPRITE_NAMES, find_sprite


logger = logging.getLogger(__name__)


LUMP_NAME = "DDFTHING"

CAST_MAX = 20
SIDE_ALL = 16777215

# Decorations whose real height differs from the 16-unit default
HEIGHT_FIXES: tuple[tuple[int, int], ...] = (
    (MobjType.MISC14, 60), (MobjType.MISC29, 78), (MobjType.MISC30, 58),
    (MobjType.MISC31, 46), (MobjType.MISC33, 38), (MobjType.MISC34, 50),
    (MobjType.MISC38, 56), (MobjType.MISC39, 48), (MobjType.MISC41, 96),
    (MobjType.MISC42, 96), (MobjType.MISC43, 96), (MobjType.MISC44, 72),
    (MobjType.MISC45, 72), (MobjType.MISC46, 72), (MobjType.MISC70, 64),
    (MobjType.MISC72, 52), (MobjType.MISC73, 40), (MobjType.MISC74, 64),
    (MobjType.MISC75, 64), (MobjType.MISC76, 120),
    (MobjType.MISC36, 56), (MobjType.MISC37, 56), (MobjType.MISC47, 56),
    (MobjType.MISC48, 128), (MobjType.MISC35, 56), (MobjType.MISC40, 56),
    (MobjType.MISC50, 56), (MobjType.MISC77, 42),
)

# (cast position, entity, title)
CAST_MEMBERS: tuple[tuple[int, int, str], ...] = (
    (1, MobjType.PLAYER, "OurHeroName"),
    (2, MobjType.POSSESSED, "ZombiemanName"),
    (3, MobjType.SHOTGUY, "ShotgunGuyName"),
    (4, MobjType.CHAINGUY, "HeavyWeaponDudeName"),
    (5, MobjType.TROOP, "ImpName"),
    (6, MobjType.SERGEANT, "DemonName"),
    (7, MobjType.SKULL, "LostSoulName"),
    (8, MobjType.HEAD, "CacodemonName"),
    (9, MobjType.KNIGHT, "HellKnightName"),
    (10, MobjType.BRUISER, "BaronOfHellName"),
    (11, MobjType.BABY, "ArachnotronName"),
    (12, MobjType.PAIN, "PainElementalName"),
    (13, MobjType.UNDEAD, "RevenantName"),
    (14, MobjType.FATSO, "MancubusName"),
    (15, MobjType.VILE, "ArchVileName"),
    (16, MobjType.SPIDER, "SpiderMastermindName"),
    (17, MobjType.CYBORG, "CyberdemonName"),
)

CAST_TITLES = {pos: title for pos, _, title in CAST_MEMBERS}

BUILTIN_DROPS = {
    MobjType.WOLFSS: "CLIP",
    MobjType.POSSESSED: "CLIP",
    MobjType.SHOTGUY: "SHOTGUN",
    MobjType.CHAINGUY: "CHAINGUN",
}


@dataclass(frozen=True, slots=True)
class PlayerInfo:
    name: str
    num: int
    remap: str


PLAYERS: tuple[PlayerInfo, ...] = (
    PlayerInfo("OUR_HERO", 1, "PLAYER_GREEN"),
    PlayerInfo("PLAYER2", 2, "PLAYER_DK_GREY"),
    PlayerInfo("PLAYER3", 3, "PLAYER_BROWN"),
    PlayerInfo("PLAYER4", 4, "PLAYER_DULL_RED"),
    PlayerInfo("PLAYER5", 4001, "PLAYER_ORANGE"),
    PlayerInfo("PLAYER6", 4002, "PLAYER_LT_GREY"),
    PlayerInfo("PLAYER7", 4003, "PLAYER_LT_RED"),
    PlayerInfo("PLAYER8", 4004, "PLAYER_PINK"),
)

NUM_PLAYERS = len(PLAYERS)

# Ammo types beyond Doom's four that a player can still carry
EXTRA_AMMO_LIMITS = (
    ("PELLETS", 200), ("NAILS", 100), ("GRENADES", 50), ("GAS", 300),
    ("AMMO9", 100), ("AMMO10", 200), ("AMMO11", 50), ("AMMO12", 300),
    ("AMMO13", 100), ("AMMO14", 200), ("AMMO15", 50), ("AMMO16", 300),
)


@dataclass(frozen=True, slots=True)
class PickupItem:
    sprite: str
    benefit: str
    par_num: int          # 0 = no amount, 1 = (amount), 2 = (amount:limit)
    amount: int
    limit: int
    ldf: str
    sound: str


PICKUP_ITEMS: tuple[PickupItem, ...] = (
    # health and armour
    PickupItem("BON1", "HEALTH", 2, 1, 200, "GotHealthPotion", "itemup"),
    PickupItem("STIM", "HEALTH", 2, 10, 100, "GotStim", "itemup"),
    PickupItem("MEDI", "HEALTH", 2, 25, 100, "GotMedi", "itemup"),
    PickupItem("BON2", "GREEN_ARMOUR", 2, 1, 200, "GotArmourHelmet", "itemup"),
    PickupItem("ARM1", "GREEN_ARMOUR", 2, 100, 100, "GotArmour", "itemup"),
    PickupItem("ARM2", "BLUE_ARMOUR", 2, 200, 200, "GotMegaArmour", "itemup"),

    # keys
    PickupItem("BKEY", "KEY_BLUECARD", 0, 0, 0, "GotBlueCard", "itemup"),
    PickupItem("YKEY", "KEY_YELLOWCARD", 0, 0, 0, "GotYellowCard", "itemup"),
    PickupItem("RKEY", "KEY_REDCARD", 0, 0, 0, "GotRedCard", "itemup"),
    PickupItem("BSKU", "KEY_BLUESKULL", 0, 0, 0, "GotBlueSkull", "itemup"),
    PickupItem("YSKU", "KEY_YELLOWSKULL", 0, 0, 0, "GotYellowSkull", "itemup"),
    PickupItem("RSKU", "KEY_REDSKULL", 0, 0, 0, "GotRedSkull", "itemup"),

    # ammo
    PickupItem("CLIP", "BULLETS", 1, 10, 0, "GotClip", "itemup"),
    PickupItem("AMMO", "BULLETS", 1, 50, 0, "GotClipBox", "itemup"),
    PickupItem("SHEL", "SHELLS", 1, 4, 0, "GotShells", "itemup"),
    PickupItem("SBOX", "SHELLS", 1, 20, 0, "GotShellBox", "itemup"),
    PickupItem("ROCK", "ROCKETS", 1, 1, 0, "GotRocket", "itemup"),
    PickupItem("BROK", "ROCKETS", 1, 5, 0, "GotRocketBox", "itemup"),
    PickupItem("CELL", "CELLS", 1, 20, 0, "GotCell", "itemup"),
    PickupItem("CELP", "CELLS", 1, 100, 0, "GotCellPack", "itemup"),

    # powerups
    PickupItem("SOUL", "HEALTH", 2, 100, 200, "GotSoul", "getpow"),
    PickupItem("PMAP", "POWERUP_AUTOMAP", 0, 0, 0, "GotMap", "getpow"),
    PickupItem("PINS", "POWERUP_PARTINVIS", 2, 100, 100, "GotInvis", "getpow"),
    PickupItem("PINV", "POWERUP_INVULNERABLE", 2, 30, 30, "GotInvulner", "getpow"),
    PickupItem("PVIS", "POWERUP_LIGHTGOGGLES", 2, 120, 120, "GotVisor", "getpow"),
    PickupItem("SUIT", "POWERUP_ACIDSUIT", 2, 60, 60, "GotSuit", "getpow"),

    # weapons
    PickupItem("CSAW", "CHAINSAW", 0, 0, 0, "GotChainSaw", "wpnup"),
    PickupItem("SHOT", "SHOTGUN,SHELLS", 1, 8, 0, "GotShotGun", "wpnup"),
    PickupItem("SGN2", "SUPERSHOTGUN,SHELLS", 1, 8, 0, "GotDoubleBarrel", "wpnup"),
    PickupItem("MGUN", "CHAINGUN,BULLETS", 1, 20, 0, "GotChainGun", "wpnup"),
    PickupItem("LAUN", "ROCKET_LAUNCHER,ROCKETS", 1, 2, 0, "GotRocketLauncher", "wpnup"),
    PickupItem("PLAS", "PLASMA_RIFLE,CELLS", 1, 40, 0, "GotPlasmaGun", "wpnup"),
    PickupItem("BFUG", "BFG9000,CELLS", 1, 40, 0, "GotBFG", "wpnup"),
)

_PICKUPS_BY_SPRITE = {item.sprite: item for item in PICKUP_ITEMS}

BIG_AMMO_BOXES = frozenset({"AMMO", "BROK", "CELP", "SBOX"})
BIG_BOX_FACTOR = 5

AMMO_FOR_SPRITE = {
    "CLIP": AmmoType.BULLET, "AMMO": AmmoType.BULLET,
    "SHEL": AmmoType.SHELL, "SBOX": AmmoType.SHELL,
    "ROCK": AmmoType.ROCKET, "BROK": AmmoType.ROCKET,
    "CELL": AmmoType.CELL, "CELP": AmmoType.CELL,
}


# ---------------------------------------------------------------------------
# Shared helpers (also used for attacks)
# ---------------------------------------------------------------------------

def f_fixed(value: int) -> float:
    return value / FRACUNIT


def format_speed(speed: int) -> str:
    """Speed is fixed point for missiles but a plain int for walkers."""
    if speed >= 1024:
        return "%1.2f" % f_fixed(speed)
    return "%d" % speed


def quoted_sound(session: ConversionSession, s_num: int) -> str:
    return '"%s"' % session.sound_name(s_num)


def fix_heights(session: ConversionSession) -> None:
    """Give modified decorations their real heights.

    Only marked entities still at the 16-unit default are touched; ceiling
    things keep 16, which some patches rely on for display.
    """
    for mt_num, new_height in HEIGHT_FIXES:
        info = session.mobj_overlay.get(mt_num)
        if info is None:
            continue
        if info.flags & LegacyFlag.SPAWNCEILING:
            continue
        if info.height != 16 * FRACUNIT:
            continue
        info.height = new_height * FRACUNIT


class FlagClause:
    """Builds one ``SPECIAL = A,B,C;`` line."""

    __slots__ = ("out", "keyword", "names")

    def __init__(self, out: LumpWriter, info: MobjInfo):
        self.out = out
        self.keyword = "PROJECTILE_SPECIAL" if info.is_attack else "SPECIAL"
        self.names: list[str] = []

    def add(self, name: str) -> None:
        self.names.append(name)

    def flush(self) -> None:
        if self.names:
            self.out.printf("%s = %s;\n", self.keyword, ",".join(self.names))


def handle_flags(session: ConversionSession, out: LumpWriter, grouper: StateGrouper,
                 info: MobjInfo, mt_num: int, player: int) -> None:
    cur_f = info.flags

    # the player has always slid along walls
    if player:
        cur_f |= LegacyFlag.SLIDE
    else:
        cur_f &= ~LegacyFlag.PICKUP

    # the teleport target must be linked into its sector
    if mt_num == MobjType.TELEPORTMAN:
        cur_f &= ~LegacyFlag.NOSECTOR

    if info.mass < 0:
        cur_f |= LegacyFlag.SPAWNCEILING | LegacyFlag.NOGRAVITY

    if cur_f & LegacyFlag.BOUNCES:
        cur_f |= LegacyFlag.SHOOTABLE

    monster = is_monster(info, player, knows_roles=True, act_flags=grouper.act_flags)
    force_disloyal = monster and session.monsters_infight

    clause = FlagClause(out, info)

    for entry in LEGACY_FLAG_NAMES:
        if cur_f & entry.bits and entry.ddf is not None:
            clause.add(entry.ddf)

    implied = extra_flags(mt_num, player)
    for flag, ddf in EXTRA_FLAG_DDF.items():
        if flag not in implied:
            continue
        if flag is ExtraFlag.DISLOYAL:
            force_disloyal = True
            continue
        clause.add(ddf)

    if force_disloyal:
        clause.add(EXTRA_FLAG_DDF[ExtraFlag.DISLOYAL])

    if monster:
        clause.add("MONSTER")

    clause.add("DEHACKED_COMPAT")
    clause.flush()

    translation = cur_f & TRANSLATION_MASK
    if translation:
        if translation == LegacyFlag.TRANSLATION1:
            out.printf("PALETTE_REMAP = PLAYER_DK_GREY;\n")
        elif translation == LegacyFlag.TRANSLATION2:
            out.printf("PALETTE_REMAP = PLAYER_BROWN;\n")
        else:
            out.printf("PALETTE_REMAP = PLAYER_DULL_RED;\n")

    if cur_f & LegacyFlag.TRANSLUCENT:
        out.printf("TRANSLUCENCY = 50%%;\n")

    if cur_f & LegacyFlag.FRIEND and not player:
        out.printf("SIDE = %d;\n", SIDE_ALL)


def handle_mbf21_flags(out: LumpWriter, info: MobjInfo) -> None:
    clause = FlagClause(out, info)
    for entry in MBF21_FLAG_NAMES:
        if info.mbf21_flags & entry.bits and entry.ddf is not None:
            clause.add(entry.ddf)
    clause.add("MBF21_COMPAT")
    clause.flush()


def handle_attacks(session: ConversionSession, out: LumpWriter, grouper: StateGrouper,
                   info: MobjInfo, mt_num: int) -> None:
    slots = grouper.attack_slots

    if slots[RANGE]:
        out.printf("RANGE_ATTACK = %s;\n", slots[RANGE])
        out.printf("MINATTACK_CHANCE = 25%%;\n")

    if slots[COMBAT]:
        out.printf("CLOSE_ATTACK = %s;\n", slots[COMBAT])
    elif info.meleestate and not info.is_attack:
        session.warn("attacks", "No close attack in melee states of [%s].",
                     session.mobj_name(mt_num))
        out.printf("CLOSE_ATTACK = DEMON_CLOSECOMBAT; // dummy attack\n")

    if slots[SPARE]:
        out.printf("SPARE_ATTACK = %s;\n", slots[SPARE])


# ---------------------------------------------------------------------------
# Converter
# ---------------------------------------------------------------------------

class ThingConverter:
    """Writes the things lump for one session."""

    def __init__(self, session: ConversionSession, out: LumpWriter, grouper: StateGrouper):
        self.session = session
        self.out = out
        self.grouper = grouper
        self.got_one = False
        self.cast_mobjs: list[int] = [-1] * CAST_MAX
        self.keen_deaths: list[int] = []

    def begin_lump(self) -> None:
        self.out.begin_lump(LUMP_NAME)
        self.out.printf("<THINGS>\n\n")

    def finish_lump(self) -> None:
        self.out.printf("\n")
        self.out.finish_lump()

    # --- Cast ---

    def collect_the_cast(self) -> None:
        self.cast_mobjs = [-1] * CAST_MAX
        for order, mt_num, _ in CAST_MEMBERS:
            if order >= CAST_MAX:
                raise ConversionError(f"cast table overflow at position {order}")
            info = self.session.mobj(mt_num)
            # cast members need CHASE and DEATH states
            if info.seestate == 0 or info.deathstate == 0:
                continue
            self.cast_mobjs[order] = mt_num

    def handle_cast_order(self, mt_num: int, player: int) -> None:
        if player >= 2:
            return
        order = 1
        for pos in range(1, CAST_MAX):
            # skip missing members so the real order stays contiguous
            if self.cast_mobjs[pos] < 0:
                continue
            if self.cast_mobjs[pos] == mt_num:
                self.out.printf("CASTORDER = %d;\n", order)
                self.out.printf("CAST_TITLE = %s;\n", CAST_TITLES[pos])
                return
            order += 1

    # --- Handlers ---

    def handle_drop_item(self, info: MobjInfo, mt_num: int) -> None:
        if info.dropped_item == 0:
            return
        if info.dropped_item > 0:
            drop_num = info.dropped_item - 1
            if not self.session.is_spawnable(drop_num):
                self.session.warn("things", "Dropped item %d of [%s] is not a spawnable thing.",
                                  info.dropped_item, self.session.mobj_name(mt_num))
                return
            self.session.use_thing(drop_num)
            item = self.session.mobj_name(drop_num)
        else:
            item = BUILTIN_DROPS.get(mt_num)
            if item is None:
                return
        self.out.printf('DROPITEM = "%s";\n', item)

    def handle_player(self, player: int) -> None:
        if player <= 0:
            return
        if player > NUM_PLAYERS:
            raise ConversionError(f"bad player number {player}")

        pi = PLAYERS[player - 1]
        ammo = self.session.ammo.player_max
        out = self.out

        out.printf("PLAYER = %d;\n", player)
        out.printf("SIDE = %d;\n", 1 << (player - 1))
        out.printf("PALETTE_REMAP = %s;\n", pi.remap)

        out.printf("INITIAL_BENEFIT = \n")
        out.printf("    BULLETS.LIMIT(%d), ", ammo[AmmoType.BULLET])
        out.printf("SHELLS.LIMIT(%d), ", ammo[AmmoType.SHELL])
        out.printf("ROCKETS.LIMIT(%d), ", ammo[AmmoType.ROCKET])
        out.printf("CELLS.LIMIT(%d),\n", ammo[AmmoType.CELL])
        for i in range(0, len(EXTRA_AMMO_LIMITS), 4):
            row = EXTRA_AMMO_LIMITS[i:i + 4]
            out.printf("    %s,\n", ", ".join("%s.LIMIT(%d)" % pair for pair in row))
        out.printf("    BULLETS(%d);\n", self.session.misc.init_ammo)

    def handle_item(self, info: MobjInfo, mt_num: int) -> None:
        if not info.flags & LegacyFlag.SPECIAL:
            return
        if info.spawnstate == 0:
            return

        session = self.session
        misc = session.misc
        ammo = session.ammo
        out = self.out

        st = session.frame(info.spawnstate)
        spr_num = st.sprite if st is not None else -1
        sprite = SPRITE_NAMES[spr_num] if 0 <= spr_num < len(SPRITE_NAMES) else "????"

        if sprite == "PSTR":  # berserk
            out.printf("PICKUP_BENEFIT = POWERUP_BERSERK(60:60),HEALTH(100:100);\n")
            out.printf("PICKUP_MESSAGE = GotBerserk;\n")
            out.printf("PICKUP_SOUND = %s;\n", session.sound_name(find_sound("getpow")))
            out.printf("PICKUP_EFFECT = SWITCH_WEAPON(FIST);\n")
            return

        if sprite == "MEGA":
            out.printf("PICKUP_BENEFIT = ")
            out.printf("HEALTH(%d:%d),", misc.mega_health, misc.mega_health)
            out.printf("BLUE_ARMOUR(%d:%d);\n", misc.max_armour, misc.max_armour)
            out.printf("PICKUP_MESSAGE = GotMega;\n")
            out.printf("PICKUP_SOUND = %s;\n", session.sound_name(find_sound("getpow")))
            return

        if sprite == "BPAK":  # backpack full of ammo
            out.printf("PICKUP_BENEFIT = \n")
            out.printf("    BULLETS.LIMIT(%d), ", 2 * ammo.player_max[AmmoType.BULLET])
            out.printf("    SHELLS.LIMIT(%d),\n", 2 * ammo.player_max[AmmoType.SHELL])
            out.printf("    ROCKETS.LIMIT(%d), ", 2 * ammo.player_max[AmmoType.ROCKET])
            out.printf("    CELLS.LIMIT(%d),\n", 2 * ammo.player_max[AmmoType.CELL])
            out.printf("    BULLETS(10), SHELLS(4), ROCKETS(1), CELLS(20);\n")
            out.printf("PICKUP_MESSAGE = GotBackpack;\n")
            out.printf("PICKUP_SOUND = %s;\n", session.sound_name(find_sound("itemup")))
            return

        pu = _PICKUPS_BY_SPRITE.get(sprite)
        if pu is None:
            session.warn("things", 'Unknown pickup sprite "%s" for item [%s]',
                         sprite, session.mobj_name(mt_num))
            return

        amount, limit = pu.amount, pu.limit

        if sprite == "BON2":
            limit = misc.max_armour
        elif sprite == "ARM1":
            amount = misc.green_armour_class * 100
            limit = misc.max_armour
        elif sprite == "ARM2":
            amount = misc.blue_armour_class * 100
            limit = misc.max_armour
        elif sprite == "BON1":
            limit = misc.max_health
        elif sprite == "SOUL":
            amount = misc.soul_health
            limit = misc.soul_limit
        elif sprite in AMMO_FOR_SPRITE:
            amount = ammo.pickup[AMMO_FOR_SPRITE[sprite]]

        if sprite in BIG_AMMO_BOXES:
            amount *= BIG_BOX_FACTOR

        if pu.par_num == 2 and amount > limit:
            amount = limit

        out.printf("PICKUP_BENEFIT = %s", pu.benefit)
        if pu.par_num == 1:
            out.printf("(%d)", amount)
        elif pu.par_num == 2:
            out.printf("(%d:%d)", amount, limit)
        out.printf(";\n")
        out.printf("PICKUP_MESSAGE = %s;\n", pu.ldf)

        if info.activesound == SFX_NONE:
            out.printf("PICKUP_SOUND = %s;\n", session.sound_name(find_sound(pu.sound)))

    def handle_sounds(self, info: MobjInfo, mt_num: int) -> None:
        session, out = self.session, self.out

        if info.activesound != SFX_NONE:
            key = "PICKUP_SOUND" if info.flags & LegacyFlag.PICKUP else "ACTIVE_SOUND"
            out.printf("%s = %s;\n", key, quoted_sound(session, info.activesound))
        elif mt_num == MobjType.TELEPORTMAN:
            out.printf("ACTIVE_SOUND = %s;\n", quoted_sound(session, find_sound("telept")))

        if info.seesound != SFX_NONE:
            out.printf("SIGHTING_SOUND = %s;\n", quoted_sound(session, info.seesound))
        elif mt_num == MobjType.BOSSSPIT:
            out.printf("SIGHTING_SOUND = %s;\n", quoted_sound(session, find_sound("bossit")))

        if info.attacksound != SFX_NONE and info.meleestate != 0:
            out.printf("STARTCOMBAT_SOUND = %s;\n", quoted_sound(session, info.attacksound))

        if info.painsound != SFX_NONE:
            out.printf("PAIN_SOUND = %s;\n", quoted_sound(session, info.painsound))

        if info.deathsound != SFX_NONE:
            out.printf("DEATH_SOUND = %s;\n", quoted_sound(session, info.deathsound))

        if info.rip_sound != SFX_NONE:
            out.printf("RIP_SOUND = %s;\n", quoted_sound(session, info.rip_sound))

    def handle_frames(self, info: MobjInfo, mt_num: int) -> None:
        session, out, grouper = self.session, self.out, self.grouper
        grouper.reset()
        grouper.force_fullbright = info.fullbright > 0

        if mt_num == MobjType.TELEPORTMAN:
            # the teleport fog's spawn frames become this entity's CHASE
            out.printf("TRANSLUCENCY = 50%%;\n")
            out.printf("\n")
            out.printf("STATES(IDLE) = %s:A:-1:NORMAL:TRANS_SET(0%%);\n",
                       session.sprite_name(find_sprite("TFOG")))

            tfog = session.merge_partner(MobjType.TFOG)
            if grouper.begin_group("E", tfog.spawnstate) == 0:
                session.warn("states", "Teleport fog has no spawn states.")
                return
            grouper.spread_groups()
            grouper.output_group("E")
            return

        count = 0
        count += grouper.begin_group("R", info.raisestate)
        count += grouper.begin_group("X", info.xdeathstate)
        count += grouper.begin_group("D", info.deathstate)
        count += grouper.begin_group("P", info.painstate)
        count += grouper.begin_group("M", info.missilestate)
        count += grouper.begin_group("L", info.meleestate)
        count += grouper.begin_group("E", info.seestate)
        count += grouper.begin_group("S", info.spawnstate)

        if count == 0:
            if mt_num != MobjType.BOSSTARGET:
                session.warn("states", "Mobj [%s:%d] has no states.",
                             session.mobj_name(mt_num), info.doomednum)
            out.printf("TRANSLUCENCY = 0%%;\n")
            out.printf("\n")
            out.printf("STATES(IDLE) = %s:A:-1:NORMAL:NOTHING;\n",
                       session.sprite_name(find_sprite("CAND")))
            return

        grouper.spread_groups()
        for group in "SELMPDXR":
            grouper.output_group(group)

        if grouper.act_flags & ActFlag.RAISER:
            if grouper.begin_group("H", session.frames.index_of("S_VILE_HEAL1")) > 0:
                grouper.spread_groups()
                grouper.output_group("H")

    def handle_mbf21_fields(self, info: MobjInfo) -> None:
        out = self.out
        if info.infight_group != NO_GROUP:
            out.printf("INFIGHTING_GROUP = %d;\n", info.infight_group)
        if info.proj_group != NO_GROUP:
            out.printf("PROJECTILE_GROUP = %d;\n", info.proj_group)
        if info.splash_group != NO_GROUP:
            out.printf("SPLASH_GROUP = %d;\n", info.splash_group)
        if info.fast_speed > 0:
            out.printf("FAST_SPEED = %s;\n", format_speed(info.fast_speed))
        if info.melee_range > 0:
            out.printf("MELEE_RANGE = %1.1f;\n", f_fixed(info.melee_range))
        if info.gib_health != 0:
            out.printf("GIB_HEALTH = %d;\n", info.gib_health)
        if info.pickup_width > 0:
            out.printf("PICKUP_WIDTH = %1.1f;\n", f_fixed(info.pickup_width))
        if info.proj_pass_height > 0:
            out.printf("PROJECTILE_PASS_HEIGHT = %1.1f;\n", f_fixed(info.proj_pass_height))

    # --- One entity ---

    def convert_mobj(self, info: MobjInfo, mt_num: int, player: int = 0,
                     brain_missile: bool = False) -> None:
        if info.is_attack:
            return

        if not self.got_one:
            self.got_one = True
            self.begin_lump()

        session, out, grouper = self.session, self.out, self.grouper
        ddf_name = info.name if brain_missile else session.mobj_name(mt_num)

        if player > 0:
            pi = PLAYERS[player - 1]
            out.printf("[%s:%d]\n", pi.name, pi.num)
        elif info.doomednum < 0:
            out.printf("[%s]\n", ddf_name)
        else:
            out.printf("[%s:%d]\n", ddf_name, info.doomednum)

        out.printf("RADIUS = %1.1f;\n", f_fixed(info.radius))
        out.printf("HEIGHT = %1.1f;\n", f_fixed(info.height))

        if info.spawnhealth != 1000:
            out.printf("SPAWNHEALTH = %d;\n", info.spawnhealth)

        if player > 0:
            out.printf("SPEED = 1;\n")
        elif info.speed != 0:
            out.printf("SPEED = %s;\n", format_speed(info.speed))

        if info.mass != 100 and info.mass > 0:
            out.printf("MASS = %d;\n", info.mass)

        if info.reactiontime != 0:
            out.printf("REACTION_TIME = %dT;\n", info.reactiontime)

        if info.painchance >= 256:
            out.printf("PAINCHANCE = 100%%;\n")
        elif info.painchance > 0:
            out.printf("PAINCHANCE = %1.1f%%;\n", info.painchance * 100.0 / 256.0)

        if mt_num == MobjType.BOSSSPIT and not brain_missile:
            out.printf("SPIT_SPOT = BRAIN_SPAWNSPOT;\n")

        if not brain_missile:
            self.handle_cast_order(mt_num, player)
            self.handle_drop_item(info, mt_num)
        self.handle_player(player)
        self.handle_item(info, mt_num)
        self.handle_sounds(info, mt_num)
        self.handle_frames(info, mt_num)

        out.printf("\n")

        handle_flags(session, out, grouper, info, mt_num, player)
        handle_mbf21_flags(out, info)
        self.handle_mbf21_fields(info)
        handle_attacks(session, out, grouper, info, mt_num)

        if grouper.act_flags & ActFlag.EXPLODE:
            out.printf("EXPLODE_DAMAGE.VAL = 128;\n")
        elif grouper.act_flags & ActFlag.DETONATE:
            out.printf("EXPLODE_DAMAGE.VAL = %d;\n", info.damage)

        if grouper.act_flags & ActFlag.KEENDIE and mt_num not in self.keen_deaths:
            self.keen_deaths.append(mt_num)

        out.printf("\n")

    # --- Whole lump ---

    def convert_all(self) -> None:
        session = self.session
        fix_heights(session)
        self.collect_the_cast()

        if session.config.all_mode:
            for mt_num in range(NUM_MOBJ_TYPES):
                session.mark_thing(mt_num)

        self.got_one = False
        done: set[int] = set()
        while True:
            # converting can mark more entities (A_Spawn, drop items)
            pending = [i for i in session.marked_things() if i not in done]
            if not pending:
                break
            mt_num = pending[0]
            done.add(mt_num)
            info = session.mobj_overlay[mt_num]

            if mt_num == MobjType.PLAYER:
                for player in range(1, NUM_PLAYERS + 1):
                    self.convert_mobj(info, mt_num, player)
                continue

            logger.debug("converting thing %d (%s)", mt_num, session.mobj_name(mt_num))
            self.convert_mobj(info, mt_num)

        if self.got_one:
            self.convert_mobj(session.brain_explode, MobjType.ROCKET, brain_missile=True)
            self.finish_lump()
