"""Flag vocabularies: legacy mobj bits, MBF21 bits, weapon MBF21 bits, and
the synthetic "extra" flags inferred from an entity's identity.

The three bit vocabularies are kept apart on purpose: each one has its own
mnemonic table for the bit-token parser and its own translation to DDF
specials. They only meet in the emitted ``SPECIAL =`` clauses.
"""

from dataclasses import dataclass
from enum import Enum, IntFlag

from deh_ddf.models.constants import MobjType


class LegacyFlag(IntFlag):
    SPECIAL = 0x1
    SOLID = 0x2
    SHOOTABLE = 0x4
    NOSECTOR = 0x8
    NOBLOCKMAP = 0x10
    AMBUSH = 0x20
    JUSTHIT = 0x40
    JUSTATTACKED = 0x80
    SPAWNCEILING = 0x100
    NOGRAVITY = 0x200
    DROPOFF = 0x400
    PICKUP = 0x800
    NOCLIP = 0x1000
    SLIDE = 0x2000
    FLOAT = 0x4000
    TELEPORT = 0x8000
    MISSILE = 0x10000
    DROPPED = 0x20000
    SHADOW = 0x40000
    NOBLOOD = 0x80000
    CORPSE = 0x100000
    INFLOAT = 0x200000
    COUNTKILL = 0x400000
    COUNTITEM = 0x800000
    SKULLFLY = 0x1000000
    NOTDMATCH = 0x2000000
    TRANSLATION1 = 0x4000000
    TRANSLATION2 = 0x8000000
    STEALTH = 0x10000000
    TOUCHY = 0x20000000
    TRANSLUCENT = 0x40000000

    # Boom/MBF reuse two vanilla bits
    BOUNCES = 0x40
    FRIEND = 0x200000


TRANSLATION_MASK = LegacyFlag.TRANSLATION1 | LegacyFlag.TRANSLATION2

# Only settable through mnemonics, never through a raw numeric "Bits" value.
ALL_BEX_FLAGS = (
    LegacyFlag.STEALTH | LegacyFlag.TRANSLUCENT | LegacyFlag.TOUCHY
    | LegacyFlag.BOUNCES | LegacyFlag.FRIEND
)


class Mbf21Flag(IntFlag):
    LOGRAV = 0x1
    SHORTMRANGE = 0x2
    DMGIGNORED = 0x4
    NORADIUSDMG = 0x8
    FORCERADIUSDMG = 0x10
    HIGHERMPROB = 0x20
    RANGEHALF = 0x40
    NOTHRESHOLD = 0x80
    LONGMELEE = 0x100
    BOSS = 0x200
    MAP07BOSS1 = 0x400
    MAP07BOSS2 = 0x800
    E1M8BOSS = 0x1000
    E2M8BOSS = 0x2000
    E3M8BOSS = 0x4000
    E4M6BOSS = 0x8000
    E4M8BOSS = 0x10000
    RIP = 0x20000
    FULLVOLSOUNDS = 0x40000


class WeaponMbf21Flag(IntFlag):
    NOTHRUST = 0x1
    SILENT = 0x2
    NOAUTOFIRE = 0x4
    FLEEMELEE = 0x8
    AUTOSWITCHFROM = 0x10
    NOAUTOSWITCHTO = 0x20


@dataclass(frozen=True, slots=True)
class FlagName:
    """One row of a mnemonic table."""
    mnemonic: str        # name used in a DEHACKED/BEX patch
    bits: int            # 0 when the mnemonic is accepted but ignored
    ddf: str | None      # DDF special(s), comma-joined; None drops the bit


LEGACY_FLAG_NAMES: tuple[FlagName, ...] = (
    FlagName("SPECIAL", LegacyFlag.SPECIAL, "SPECIAL"),
    FlagName("SOLID", LegacyFlag.SOLID, "SOLID"),
    FlagName("SHOOTABLE", LegacyFlag.SHOOTABLE, "SHOOTABLE"),
    FlagName("NOSECTOR", LegacyFlag.NOSECTOR, "NOSECTOR"),
    FlagName("NOBLOCKMAP", LegacyFlag.NOBLOCKMAP, "NOBLOCKMAP"),
    FlagName("AMBUSH", LegacyFlag.AMBUSH, "AMBUSH"),
    FlagName("JUSTHIT", 0, None),
    FlagName("JUSTATTACKED", 0, None),
    FlagName("SPAWNCEILING", LegacyFlag.SPAWNCEILING, "SPAWNCEILING"),
    FlagName("NOGRAVITY", LegacyFlag.NOGRAVITY, "NOGRAVITY"),
    FlagName("DROPOFF", LegacyFlag.DROPOFF, "DROPOFF"),
    FlagName("PICKUP", LegacyFlag.PICKUP, "PICKUP"),
    FlagName("NOCLIP", LegacyFlag.NOCLIP, "NOCLIP"),
    FlagName("SLIDE", LegacyFlag.SLIDE, "SLIDER"),
    FlagName("FLOAT", LegacyFlag.FLOAT, "FLOAT"),
    FlagName("TELEPORT", LegacyFlag.TELEPORT, "TELEPORT"),
    FlagName("MISSILE", LegacyFlag.MISSILE, "MISSILE"),
    FlagName("DROPPED", LegacyFlag.DROPPED, "DROPPED"),
    FlagName("SHADOW", LegacyFlag.SHADOW, "FUZZY"),
    FlagName("NOBLOOD", LegacyFlag.NOBLOOD, "DAMAGESMOKE"),
    FlagName("CORPSE", LegacyFlag.CORPSE, "CORPSE"),
    FlagName("INFLOAT", 0, None),
    FlagName("COUNTKILL", LegacyFlag.COUNTKILL, "COUNT_AS_KILL"),
    FlagName("COUNTITEM", LegacyFlag.COUNTITEM, "COUNT_AS_ITEM"),
    FlagName("SKULLFLY", LegacyFlag.SKULLFLY, "SKULLFLY"),
    FlagName("NOTDMATCH", LegacyFlag.NOTDMATCH, "NODEATHMATCH"),
    FlagName("TRANSLATION1", LegacyFlag.TRANSLATION1, None),
    FlagName("TRANSLATION2", LegacyFlag.TRANSLATION2, None),
    FlagName("TRANSLATION", LegacyFlag.TRANSLATION1, None),  # Boom bug compat
    FlagName("TOUCHY", LegacyFlag.TOUCHY, "TOUCHY"),
    FlagName("BOUNCES", LegacyFlag.BOUNCES, "BOUNCE"),
    FlagName("FRIEND", LegacyFlag.FRIEND, None),
    FlagName("TRANSLUCENT", LegacyFlag.TRANSLUCENT, None),
    FlagName("TRANSLUC50", LegacyFlag.TRANSLUCENT, None),
    FlagName("STEALTH", LegacyFlag.STEALTH, None),
    FlagName("UNUSED1", 0, None),
    FlagName("UNUSED2", 0, None),
    FlagName("UNUSED3", 0, None),
    FlagName("UNUSED4", 0, None),
)

MBF21_FLAG_NAMES: tuple[FlagName, ...] = (
    FlagName("LOGRAV", Mbf21Flag.LOGRAV, "LOGRAV"),
    FlagName("DMGIGNORED", Mbf21Flag.DMGIGNORED, "NEVERTARGETED"),
    FlagName("NORADIUSDMG", Mbf21Flag.NORADIUSDMG, "EXPLODE_IMMUNE"),
    FlagName("HIGHERMPROB", Mbf21Flag.HIGHERMPROB, "TRIGGER_HAPPY"),
    FlagName("RANGEHALF", Mbf21Flag.RANGEHALF, "TRIGGER_HAPPY"),
    FlagName("NOTHRESHOLD", Mbf21Flag.NOTHRESHOLD, "NOGRUDGE"),
    FlagName("BOSS", Mbf21Flag.BOSS, "BOSSMAN"),
    FlagName("RIP", Mbf21Flag.RIP, "TUNNEL"),
    FlagName("FULLVOLSOUNDS", Mbf21Flag.FULLVOLSOUNDS, "ALWAYS_LOUD"),
    # no DDF equivalent
    FlagName("SHORTMRANGE", Mbf21Flag.SHORTMRANGE, None),
    FlagName("LONGMELEE", Mbf21Flag.LONGMELEE, None),
    FlagName("FORCERADIUSDMG", Mbf21Flag.FORCERADIUSDMG, None),
    FlagName("MAP07BOSS1", Mbf21Flag.MAP07BOSS1, None),
    FlagName("MAP07BOSS2", Mbf21Flag.MAP07BOSS2, None),
    FlagName("E1M8BOSS", Mbf21Flag.E1M8BOSS, None),
    FlagName("E2M8BOSS", Mbf21Flag.E2M8BOSS, None),
    FlagName("E3M8BOSS", Mbf21Flag.E3M8BOSS, None),
    FlagName("E4M6BOSS", Mbf21Flag.E4M6BOSS, None),
    FlagName("E4M8BOSS", Mbf21Flag.E4M8BOSS, None),
)

WEAPON_MBF21_FLAG_NAMES: tuple[FlagName, ...] = (
    FlagName("NOTHRUST", WeaponMbf21Flag.NOTHRUST, "NOTHRUST"),
    FlagName("SILENT", WeaponMbf21Flag.SILENT, "SILENT_TO_MONSTERS"),
    FlagName("NOAUTOFIRE", WeaponMbf21Flag.NOAUTOFIRE, None),
    FlagName("FLEEMELEE", WeaponMbf21Flag.FLEEMELEE, None),
    FlagName("AUTOSWITCHFROM", WeaponMbf21Flag.AUTOSWITCHFROM, None),
    FlagName("NOAUTOSWITCHTO", WeaponMbf21Flag.NOAUTOSWITCHTO, None),
)


class ExtraFlag(Enum):
    """Flags with no patch mnemonic, keyed by their one-letter code."""
    DISLOYAL = "D"
    TRIGGER_HAPPY = "H"
    BOSSMAN = "B"
    LOUD = "L"
    NO_RAISE = "R"
    NO_GRUDGE = "G"
    NO_ITEM_RESPAWN = "I"


# Emission order; DISLOYAL is emitted last (it can also be forced).
EXTRA_FLAG_DDF: dict[ExtraFlag, str] = {
    ExtraFlag.DISLOYAL: "DISLOYAL,ATTACK_HURTS",
    ExtraFlag.TRIGGER_HAPPY: "TRIGGER_HAPPY",
    ExtraFlag.BOSSMAN: "BOSSMAN",
    ExtraFlag.LOUD: "ALWAYS_LOUD",
    ExtraFlag.NO_RAISE: "NO_RESURRECT",
    ExtraFlag.NO_GRUDGE: "NO_GRUDGE,NEVERTARGETED",
    ExtraFlag.NO_ITEM_RESPAWN: "NO_RESPAWN",
}

EXTRA_FLAGS_BY_TYPE: dict[int, str] = {
    MobjType.INS: "I",
    MobjType.INV: "I",
    MobjType.POSSESSED: "D",
    MobjType.SHOTGUY: "D",
    MobjType.CHAINGUY: "D",
    MobjType.SKULL: "DHM",
    MobjType.UNDEAD: "H",
    MobjType.VILE: "GR",
    MobjType.CYBORG: "BHR",
    MobjType.SPIDER: "BHR",
    MobjType.BOSSSPIT: "B",
    MobjType.BOSSBRAIN: "L",
}

PLAYER_EXTRA_FLAGS = "D"


def extra_flags(mt_num: int, player: int = 0) -> set[ExtraFlag]:
    """Extra flags implied by an entity's identity (unknown letters ignored)."""
    letters = PLAYER_EXTRA_FLAGS if player > 0 else EXTRA_FLAGS_BY_TYPE.get(mt_num, "")
    known = {flag.value: flag for flag in ExtraFlag}
    return {known[ch] for ch in letters if ch in known}
