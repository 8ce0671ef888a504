"""Compiled-in map-object definitions (Doom, then the Boom/MBF additions).

Rows name their frames and sounds symbolically. ``build_mobjinfo`` resolves
them against a frame table and the sound table, so the same rows work with
whatever frame table the session is given. Unset fields take the
:class:`MobjInfo` defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from deh_ddf.models.constants import FRACUNIT
from deh_ddf.models.flags import LegacyFlag as MF, Mbf21Flag as MBF
from deh_ddf.models.records import MobjInfo
from deh_ddf.models.sounds import find_sound

if TYPE_CHECKING:
    from deh_ddf.engine.frames import FrameTable


STATE_FIELDS = (
    "spawnstate", "seestate", "painstate", "meleestate", "missilestate",
    "deathstate", "xdeathstate", "raisestate",
)

SOUND_FIELDS = (
    "seesound", "attacksound", "painsound", "deathsound", "activesound",
    "rip_sound",
)


@dataclass(frozen=True, slots=True)
class MobjRow:
    name: str
    doomednum: int
    fields: dict = field(default_factory=dict)


def _mobj(name: str, doomednum: int, **fields) -> MobjRow:
    return MobjRow(name, doomednum, fields)


MOBJ_ROWS: tuple[MobjRow, ...] = (
    # MT_PLAYER
    _mobj(
        "OUR_HERO", -1,
        spawnstate="S_PLAY", spawnhealth=100, seestate="S_PLAY_RUN1",
        reactiontime=0, painstate="S_PLAY_PAIN", painchance=255,
        painsound="plpain", missilestate="S_PLAY_ATK1",
        deathstate="S_PLAY_DIE1", xdeathstate="S_PLAY_XDIE1",
        deathsound="pldeth", radius=16 * FRACUNIT, height=56 * FRACUNIT,
        flags=MF.SOLID | MF.SHOOTABLE | MF.DROPOFF | MF.PICKUP | MF.NOTDMATCH,
    ),
    # MT_POSSESSED
    _mobj(
        "ZOMBIEMAN", 3004,
        spawnstate="S_POSS_STND", spawnhealth=20, seestate="S_POSS_RUN1",
        seesound="posit1", attacksound="pistol", painstate="S_POSS_PAIN",
        painchance=200, painsound="popain", missilestate="S_POSS_ATK1",
        deathstate="S_POSS_DIE1", xdeathstate="S_POSS_XDIE1",
        deathsound="podth1", speed=8, radius=20 * FRACUNIT,
        height=56 * FRACUNIT, activesound="posact",
        flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        raisestate="S_POSS_RAISE1",
    ),
    # MT_SHOTGUY
    _mobj(
        "SHOTGUN_GUY", 9,
        spawnstate="S_SPOS_STND", spawnhealth=30, seestate="S_SPOS_RUN1",
        seesound="posit2", painstate="S_SPOS_PAIN", painchance=170,
        painsound="popain", missilestate="S_SPOS_ATK1",
        deathstate="S_SPOS_DIE1", xdeathstate="S_SPOS_XDIE1",
        deathsound="podth2", speed=8, radius=20 * FRACUNIT,
        height=56 * FRACUNIT, activesound="posact",
        flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        raisestate="S_SPOS_RAISE1",
    ),
    # MT_VILE
    _mobj(
        "ARCHVILE", 64,
        spawnstate="S_VILE_STND", spawnhealth=700, seestate="S_VILE_RUN1",
        seesound="vilsit", painstate="S_VILE_PAIN", painchance=10,
        painsound="vipain", missilestate="S_VILE_ATK1",
        deathstate="S_VILE_DIE1", deathsound="vildth", speed=15,
        radius=20 * FRACUNIT, height=56 * FRACUNIT, mass=500,
        activesound="vilact", flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
    ),
    # MT_FIRE
    _mobj(
        "*ARCHVILE_FIRE", -1,
        spawnstate="S_FIRE1", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.NOBLOCKMAP | MF.NOGRAVITY,
    ),
    # MT_UNDEAD
    _mobj(
        "REVENANT", 66,
        spawnstate="S_SKEL_STND", spawnhealth=300, seestate="S_SKEL_RUN1",
        seesound="skesit", painstate="S_SKEL_PAIN", painchance=100,
        painsound="popain", meleestate="S_SKEL_FIST1",
        missilestate="S_SKEL_MISS1", deathstate="S_SKEL_DIE1",
        deathsound="skedth", speed=10, radius=20 * FRACUNIT,
        height=56 * FRACUNIT, mass=500, activesound="skeact",
        flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        raisestate="S_SKEL_RAISE1",
    ),
    # MT_TRACER
    _mobj(
        "*REVENANT_MISSILE", -1,
        spawnstate="S_TRACER", seesound="skeatk", deathstate="S_TRACEEXP1",
        deathsound="barexp", speed=10 * FRACUNIT, radius=11 * FRACUNIT,
        height=8 * FRACUNIT, damage=10,
        flags=MF.NOBLOCKMAP | MF.MISSILE | MF.DROPOFF | MF.NOGRAVITY,
    ),
    # MT_SMOKE
    _mobj(
        "SMOKE", -1,
        spawnstate="S_SMOKE1", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.NOBLOCKMAP | MF.NOGRAVITY,
    ),
    # MT_FATSO
    _mobj(
        "MANCUBUS", 67,
        spawnstate="S_FATT_STND", spawnhealth=600, seestate="S_FATT_RUN1",
        seesound="mansit", painstate="S_FATT_PAIN", painchance=80,
        painsound="mnpain", missilestate="S_FATT_ATK1",
        deathstate="S_FATT_DIE1", deathsound="mandth", speed=8,
        radius=48 * FRACUNIT, height=64 * FRACUNIT, mass=1000,
        activesound="posact", flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        mbf21_flags=MBF.MAP07BOSS1, raisestate="S_FATT_RAISE1",
    ),
    # MT_FATSHOT
    _mobj(
        "*MANCUBUS_FIREBALL", -1,
        spawnstate="S_FATSHOT1", seesound="firsht", deathstate="S_FATSHOTX1",
        deathsound="firxpl", speed=20 * FRACUNIT, radius=6 * FRACUNIT,
        height=8 * FRACUNIT, damage=8,
        flags=MF.NOBLOCKMAP | MF.MISSILE | MF.DROPOFF | MF.NOGRAVITY,
    ),
    # MT_CHAINGUY
    _mobj(
        "HEAVY_WEAPON_DUDE", 65,
        spawnstate="S_CPOS_STND", spawnhealth=70, seestate="S_CPOS_RUN1",
        seesound="posit2", painstate="S_CPOS_PAIN", painchance=170,
        painsound="popain", missilestate="S_CPOS_ATK1",
        deathstate="S_CPOS_DIE1", xdeathstate="S_CPOS_XDIE1",
        deathsound="podth2", speed=8, radius=20 * FRACUNIT,
        height=56 * FRACUNIT, activesound="posact",
        flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        raisestate="S_CPOS_RAISE1",
    ),
    # MT_TROOP
    _mobj(
        "IMP", 3001,
        spawnstate="S_TROO_STND", spawnhealth=60, seestate="S_TROO_RUN1",
        seesound="bgsit1", painstate="S_TROO_PAIN", painchance=200,
        painsound="popain", meleestate="S_TROO_ATK1",
        missilestate="S_TROO_ATK1", deathstate="S_TROO_DIE1",
        xdeathstate="S_TROO_XDIE1", deathsound="bgdth1", speed=8,
        radius=20 * FRACUNIT, height=56 * FRACUNIT, activesound="bgact",
        flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        raisestate="S_TROO_RAISE1",
    ),
    # MT_SERGEANT
    _mobj(
        "DEMON", 3002,
        spawnstate="S_SARG_STND", spawnhealth=150, seestate="S_SARG_RUN1",
        seesound="sgtsit", attacksound="sgtatk", painstate="S_SARG_PAIN",
        painchance=180, painsound="dmpain", meleestate="S_SARG_ATK1",
        deathstate="S_SARG_DIE1", deathsound="sgtdth", speed=10,
        radius=30 * FRACUNIT, height=56 * FRACUNIT, mass=400,
        activesound="dmact", flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        raisestate="S_SARG_RAISE1",
    ),
    # MT_SHADOWS
    _mobj(
        "SPECTRE", 58,
        spawnstate="S_SARG_STND", spawnhealth=150, seestate="S_SARG_RUN1",
        seesound="sgtsit", attacksound="sgtatk", painstate="S_SARG_PAIN",
        painchance=180, painsound="dmpain", meleestate="S_SARG_ATK1",
        deathstate="S_SARG_DIE1", deathsound="sgtdth", speed=10,
        radius=30 * FRACUNIT, height=56 * FRACUNIT, mass=400,
        activesound="dmact",
        flags=MF.SOLID | MF.SHOOTABLE | MF.SHADOW | MF.COUNTKILL,
        raisestate="S_SARG_RAISE1",
    ),
    # MT_HEAD
    _mobj(
        "CACODEMON", 3005,
        spawnstate="S_HEAD_STND", spawnhealth=400, seestate="S_HEAD_RUN1",
        seesound="cacsit", painstate="S_HEAD_PAIN", painchance=128,
        painsound="dmpain", missilestate="S_HEAD_ATK1",
        deathstate="S_HEAD_DIE1", deathsound="cacdth", speed=8,
        radius=31 * FRACUNIT, height=56 * FRACUNIT, mass=400,
        activesound="dmact",
        flags=MF.SOLID | MF.SHOOTABLE | MF.FLOAT | MF.NOGRAVITY | MF.COUNTKILL,
        raisestate="S_HEAD_RAISE1",
    ),
    # MT_BRUISER
    _mobj(
        "BARON_OF_HELL", 3003,
        spawnstate="S_BOSS_STND", seestate="S_BOSS_RUN1", seesound="brssit",
        painstate="S_BOSS_PAIN", painchance=50, painsound="dmpain",
        meleestate="S_BOSS_ATK1", missilestate="S_BOSS_ATK1",
        deathstate="S_BOSS_DIE1", deathsound="brsdth", speed=8,
        radius=24 * FRACUNIT, height=64 * FRACUNIT, mass=1000,
        activesound="dmact", flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        mbf21_flags=MBF.E1M8BOSS, raisestate="S_BOSS_RAISE1",
    ),
    # MT_BRUISERSHOT
    _mobj(
        "*BARON_FIREBALL", -1,
        spawnstate="S_BRBALL1", seesound="firsht", deathstate="S_BRBALLX1",
        deathsound="firxpl", speed=15 * FRACUNIT, radius=6 * FRACUNIT,
        height=8 * FRACUNIT, damage=8,
        flags=MF.NOBLOCKMAP | MF.MISSILE | MF.DROPOFF | MF.NOGRAVITY,
    ),
    # MT_KNIGHT
    _mobj(
        "HELL_KNIGHT", 69,
        spawnstate="S_BOS2_STND", spawnhealth=500, seestate="S_BOS2_RUN1",
        seesound="kntsit", painstate="S_BOS2_PAIN", painchance=50,
        painsound="dmpain", meleestate="S_BOS2_ATK1",
        missilestate="S_BOS2_ATK1", deathstate="S_BOS2_DIE1",
        deathsound="kntdth", speed=8, radius=24 * FRACUNIT,
        height=64 * FRACUNIT, mass=1000, activesound="dmact",
        flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        raisestate="S_BOS2_RAISE1",
    ),
    # MT_SKULL
    _mobj(
        "LOST_SOUL", 3006,
        spawnstate="S_SKULL_STND", spawnhealth=100, seestate="S_SKULL_RUN1",
        attacksound="sklatk", painstate="S_SKULL_PAIN", painchance=256,
        painsound="dmpain", missilestate="S_SKULL_ATK1",
        deathstate="S_SKULL_DIE1", deathsound="firxpl", speed=8,
        radius=16 * FRACUNIT, height=56 * FRACUNIT, mass=50, damage=3,
        activesound="dmact",
        flags=MF.SOLID | MF.SHOOTABLE | MF.FLOAT | MF.NOGRAVITY,
    ),
    # MT_SPIDER
    _mobj(
        "THE_SPIDER_MASTERMIND", 7,
        spawnstate="S_SPID_STND", spawnhealth=3000, seestate="S_SPID_RUN1",
        seesound="spisit", attacksound="shotgn", painstate="S_SPID_PAIN",
        painchance=40, painsound="dmpain", missilestate="S_SPID_ATK1",
        deathstate="S_SPID_DIE1", deathsound="spidth", speed=12,
        radius=128 * FRACUNIT, height=100 * FRACUNIT, mass=1000,
        activesound="dmact", flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        mbf21_flags=MBF.E3M8BOSS | MBF.E4M8BOSS,
    ),
    # MT_BABY
    _mobj(
        "ARACHNOTRON", 68,
        spawnstate="S_BSPI_STND", spawnhealth=500, seestate="S_BSPI_SIGHT",
        seesound="bspsit", painstate="S_BSPI_PAIN", painchance=128,
        painsound="dmpain", missilestate="S_BSPI_ATK1",
        deathstate="S_BSPI_DIE1", deathsound="bspdth", speed=12,
        radius=64 * FRACUNIT, height=64 * FRACUNIT, mass=600,
        activesound="bspact", flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        mbf21_flags=MBF.MAP07BOSS2, raisestate="S_BSPI_RAISE1",
    ),
    # MT_CYBORG
    _mobj(
        "THE_CYBERDEMON", 16,
        spawnstate="S_CYBER_STND", spawnhealth=4000, seestate="S_CYBER_RUN1",
        seesound="cybsit", painstate="S_CYBER_PAIN", painchance=20,
        painsound="dmpain", missilestate="S_CYBER_ATK1",
        deathstate="S_CYBER_DIE1", deathsound="cybdth", speed=16,
        radius=40 * FRACUNIT, height=110 * FRACUNIT, mass=1000,
        activesound="dmact", flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        mbf21_flags=MBF.E2M8BOSS | MBF.E4M6BOSS,
    ),
    # MT_PAIN
    _mobj(
        "PAIN_ELEMENTAL", 71,
        spawnstate="S_PAIN_STND", spawnhealth=400, seestate="S_PAIN_RUN1",
        seesound="pesit", painstate="S_PAIN_PAIN", painchance=128,
        painsound="pepain", missilestate="S_PAIN_ATK1",
        deathstate="S_PAIN_DIE1", deathsound="pedth", speed=8,
        radius=31 * FRACUNIT, height=56 * FRACUNIT, mass=400,
        activesound="dmact",
        flags=MF.SOLID | MF.SHOOTABLE | MF.FLOAT | MF.NOGRAVITY | MF.COUNTKILL,
        raisestate="S_PAIN_RAISE1",
    ),
    # MT_WOLFSS
    _mobj(
        "WOLFENSTEIN_SS", 84,
        spawnstate="S_SSWV_STND", spawnhealth=50, seestate="S_SSWV_RUN1",
        seesound="sssit", painstate="S_SSWV_PAIN", painchance=170,
        painsound="popain", missilestate="S_SSWV_ATK1",
        deathstate="S_SSWV_DIE1", xdeathstate="S_SSWV_XDIE1",
        deathsound="ssdth", speed=8, radius=20 * FRACUNIT,
        height=56 * FRACUNIT, activesound="posact",
        flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        raisestate="S_SSWV_RAISE1",
    ),
    # MT_KEEN
    _mobj(
        "COMMANDER_KEEN", 72,
        spawnstate="S_KEENSTND", spawnhealth=100, painstate="S_KEENPAIN",
        painchance=256, painsound="keenpn", deathstate="S_COMMKEEN",
        deathsound="keendt", radius=16 * FRACUNIT, height=72 * FRACUNIT,
        mass=10000000,
        flags=MF.SOLID | MF.SPAWNCEILING | MF.NOGRAVITY | MF.SHOOTABLE | MF.COUNTKILL,
    ),
    # MT_BOSSBRAIN
    _mobj(
        "BOSS_BRAIN", 88,
        spawnstate="S_BRAIN", spawnhealth=250, painstate="S_BRAIN_PAIN",
        painchance=255, painsound="bospn", deathstate="S_BRAIN_DIE1",
        deathsound="bosdth", radius=16 * FRACUNIT, height=16 * FRACUNIT,
        mass=10000000, flags=MF.SOLID | MF.SHOOTABLE,
    ),
    # MT_BOSSSPIT
    _mobj(
        "BRAIN_SHOOTER", 89,
        spawnstate="S_BRAINEYE", seestate="S_BRAINEYESEE",
        radius=20 * FRACUNIT, height=32 * FRACUNIT,
        flags=MF.NOBLOCKMAP | MF.NOSECTOR,
    ),
    # MT_BOSSTARGET
    _mobj(
        "BRAIN_SPAWNSPOT", 87,
        radius=20 * FRACUNIT, height=32 * FRACUNIT,
        flags=MF.NOBLOCKMAP | MF.NOSECTOR,
    ),
    # MT_SPAWNSHOT
    _mobj(
        "*BRAIN_CUBE", -1,
        spawnstate="S_SPAWN1", seesound="bospit", deathsound="firxpl",
        speed=10 * FRACUNIT, radius=6 * FRACUNIT, height=32 * FRACUNIT,
        damage=3,
        flags=MF.NOBLOCKMAP | MF.MISSILE | MF.DROPOFF | MF.NOGRAVITY | MF.NOCLIP,
    ),
    # MT_SPAWNFIRE
    _mobj(
        "*SPAWNFIRE", -1,
        spawnstate="S_SPAWNFIRE1", radius=20 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.NOBLOCKMAP | MF.NOGRAVITY,
    ),
    # MT_BARREL
    _mobj(
        "BARREL", 2035,
        spawnstate="S_BAR1", spawnhealth=20, deathstate="S_BEXP",
        deathsound="barexp", radius=10 * FRACUNIT, height=42 * FRACUNIT,
        flags=MF.SOLID | MF.SHOOTABLE | MF.NOBLOOD,
    ),
    # MT_TROOPSHOT
    _mobj(
        "*IMP_FIREBALL", -1,
        spawnstate="S_TBALL1", seesound="firsht", deathstate="S_TBALLX1",
        deathsound="firxpl", speed=10 * FRACUNIT, radius=6 * FRACUNIT,
        height=8 * FRACUNIT, damage=3,
        flags=MF.NOBLOCKMAP | MF.MISSILE | MF.DROPOFF | MF.NOGRAVITY,
    ),
    # MT_HEADSHOT
    _mobj(
        "*CACO_FIREBALL", -1,
        spawnstate="S_RBALL1", seesound="firsht", deathstate="S_RBALLX1",
        deathsound="firxpl", speed=10 * FRACUNIT, radius=6 * FRACUNIT,
        height=8 * FRACUNIT, damage=5,
        flags=MF.NOBLOCKMAP | MF.MISSILE | MF.DROPOFF | MF.NOGRAVITY,
    ),
    # MT_ROCKET
    _mobj(
        "*CYBERDEMON_MISSILE", -1,
        spawnstate="S_ROCKET", seesound="rlaunc", deathstate="S_EXPLODE1",
        deathsound="barexp", speed=20 * FRACUNIT, radius=11 * FRACUNIT,
        height=8 * FRACUNIT, damage=20,
        flags=MF.NOBLOCKMAP | MF.MISSILE | MF.DROPOFF | MF.NOGRAVITY,
    ),
    # MT_PLASMA
    _mobj(
        "*PLAYER_PLASMA", -1,
        spawnstate="S_PLASBALL", seesound="plasma", deathstate="S_PLASEXP",
        deathsound="firxpl", speed=25 * FRACUNIT, radius=13 * FRACUNIT,
        height=8 * FRACUNIT, damage=5,
        flags=MF.NOBLOCKMAP | MF.MISSILE | MF.DROPOFF | MF.NOGRAVITY,
    ),
    # MT_BFG
    _mobj(
        "*PLAYER_BFG9000", -1,
        spawnstate="S_BFGSHOT", deathstate="S_BFGLAND", deathsound="rxplod",
        speed=25 * FRACUNIT, radius=13 * FRACUNIT, height=8 * FRACUNIT,
        damage=100,
        flags=MF.NOBLOCKMAP | MF.MISSILE | MF.DROPOFF | MF.NOGRAVITY,
    ),
    # MT_ARACHPLAZ
    _mobj(
        "*ARACHNOTRON_PLASMA", -1,
        spawnstate="S_ARACH_PLAZ", seesound="plasma",
        deathstate="S_ARACH_PLEX", deathsound="firxpl", speed=25 * FRACUNIT,
        radius=13 * FRACUNIT, height=8 * FRACUNIT, damage=5,
        flags=MF.NOBLOCKMAP | MF.MISSILE | MF.DROPOFF | MF.NOGRAVITY,
    ),
    # MT_PUFF
    _mobj(
        "PUFF", -1,
        spawnstate="S_PUFF1", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.NOBLOCKMAP | MF.NOGRAVITY,
    ),
    # MT_BLOOD
    _mobj(
        "BLOOD", -1,
        spawnstate="S_BLOOD1", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.NOBLOCKMAP,
    ),
    # MT_TFOG
    _mobj(
        "TELEPORT_FOG", -1,
        spawnstate="S_TFOG", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.NOBLOCKMAP | MF.NOGRAVITY,
    ),
    # MT_IFOG
    _mobj(
        "RESPAWN_FOG", -1,
        spawnstate="S_IFOG", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.NOBLOCKMAP | MF.NOGRAVITY,
    ),
    # MT_TELEPORTMAN
    _mobj(
        "TELEPORT_FLASH", 14,
        radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.NOBLOCKMAP | MF.NOSECTOR,
    ),
    # MT_EXTRABFG
    _mobj(
        "*BFG9000_SPRAY", -1,
        spawnstate="S_BFGEXP", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.NOBLOCKMAP | MF.NOGRAVITY,
    ),
    # MT_MISC0
    _mobj(
        "GREEN_ARMOUR", 2018,
        spawnstate="S_ARM1", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC1
    _mobj(
        "BLUE_ARMOUR", 2019,
        spawnstate="S_ARM2", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC2
    _mobj(
        "HEALTH_POTION", 2014,
        spawnstate="S_BON1", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.COUNTITEM,
    ),
    # MT_MISC3
    _mobj(
        "ARMOUR_HELMET", 2015,
        spawnstate="S_BON2", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.COUNTITEM,
    ),
    # MT_MISC4
    _mobj(
        "BLUE_KEY", 5,
        spawnstate="S_BKEY", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.NOTDMATCH,
    ),
    # MT_MISC5
    _mobj(
        "RED_KEY", 13,
        spawnstate="S_RKEY", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.NOTDMATCH,
    ),
    # MT_MISC6
    _mobj(
        "YELLOW_KEY", 6,
        spawnstate="S_YKEY", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.NOTDMATCH,
    ),
    # MT_MISC7
    _mobj(
        "YELLOW_SKULLKEY", 39,
        spawnstate="S_YSKULL", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.NOTDMATCH,
    ),
    # MT_MISC8
    _mobj(
        "RED_SKULLKEY", 38,
        spawnstate="S_RSKULL", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.NOTDMATCH,
    ),
    # MT_MISC9
    _mobj(
        "BLUE_SKULLKEY", 40,
        spawnstate="S_BSKULL", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.NOTDMATCH,
    ),
    # MT_MISC10
    _mobj(
        "STIMPACK", 2011,
        spawnstate="S_STIM", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC11
    _mobj(
        "MEDIKIT", 2012,
        spawnstate="S_MEDI", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC12
    _mobj(
        "SOULSPHERE", 2013,
        spawnstate="S_SOUL", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.COUNTITEM,
    ),
    # MT_INV
    _mobj(
        "INVULNERABILITY_SPHERE", 2022,
        spawnstate="S_PINV", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.COUNTITEM,
    ),
    # MT_MISC13
    _mobj(
        "BERSERKER", 2023,
        spawnstate="S_PSTR", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.COUNTITEM,
    ),
    # MT_INS
    _mobj(
        "BLURSPHERE", 2024,
        spawnstate="S_PINS", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.COUNTITEM,
    ),
    # MT_MISC14
    _mobj(
        "RADIATION_SUIT", 2025,
        spawnstate="S_SUIT", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC15
    _mobj(
        "AUTOMAP", 2026,
        spawnstate="S_PMAP", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.COUNTITEM,
    ),
    # MT_MISC16
    _mobj(
        "LIGHT_SPECS", 2045,
        spawnstate="S_PVIS", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.COUNTITEM,
    ),
    # MT_MEGA
    _mobj(
        "MEGASPHERE", 83,
        spawnstate="S_MEGA", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.COUNTITEM,
    ),
    # MT_CLIP
    _mobj(
        "CLIP", 2007,
        spawnstate="S_CLIP", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC17
    _mobj(
        "BOX_OF_BULLETS", 2048,
        spawnstate="S_AMMO", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC18
    _mobj(
        "ROCKET", 2010,
        spawnstate="S_ROCK", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC19
    _mobj(
        "BOX_OF_ROCKETS", 2046,
        spawnstate="S_BROK", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC20
    _mobj(
        "CELLS", 2047,
        spawnstate="S_CELL", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC21
    _mobj(
        "CELL_PACK", 17,
        spawnstate="S_CELP", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC22
    _mobj(
        "SHELLS", 2008,
        spawnstate="S_SHEL", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC23
    _mobj(
        "BOX_OF_SHELLS", 2049,
        spawnstate="S_SBOX", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC24
    _mobj(
        "BACKPACK", 8,
        spawnstate="S_BPAK", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC25
    _mobj(
        "BFG", 2006,
        spawnstate="S_BFUG", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_CHAINGUN
    _mobj(
        "CHAINGUN", 2002,
        spawnstate="S_MGUN", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC26
    _mobj(
        "CHAINSAW", 2005,
        spawnstate="S_CSAW", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC27
    _mobj(
        "MISSILE_LAUNCHER", 2003,
        spawnstate="S_LAUN", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC28
    _mobj(
        "PLASMA_RIFLE", 2004,
        spawnstate="S_PLAS", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_SHOTGUN
    _mobj(
        "SHOTGUN", 2001,
        spawnstate="S_SHOT", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_SUPERSHOTGUN
    _mobj(
        "SUPER_SHOTGUN", 82,
        spawnstate="S_SHOT2", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL,
    ),
    # MT_MISC29
    _mobj(
        "TALL_TECH_LAMP", 85,
        spawnstate="S_TECHLAMP", radius=16 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SOLID,
    ),
    # MT_MISC30
    _mobj(
        "SMALL_TECH_LAMP", 86,
        spawnstate="S_TECH2LAMP", radius=16 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SOLID,
    ),
    # MT_MISC31
    _mobj(
        "SMALL_BOLLARD_LAMP", 2028,
        spawnstate="S_COLU", radius=16 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SOLID,
    ),
    # MT_MISC32
    _mobj(
        "TALL_GREEN_COLUMN", 30,
        spawnstate="S_TALLGRNCOL", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC33
    _mobj(
        "SHORT_GREEN_COLUMN", 31,
        spawnstate="S_SHRTGRNCOL", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC34
    _mobj(
        "TALL_RED_COLUMN", 32,
        spawnstate="S_TALLREDCOL", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC35
    _mobj(
        "SHORT_RED_COLUMN", 33,
        spawnstate="S_SHRTREDCOL", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC36
    _mobj(
        "SKULL_ON_COLUMN", 37,
        spawnstate="S_SKULLCOL", radius=16 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SOLID,
    ),
    # MT_MISC37
    _mobj(
        "BEATING_HEART_COLUMN", 36,
        spawnstate="S_HEARTCOL", radius=16 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SOLID,
    ),
    # MT_MISC38
    _mobj(
        "EYE_SYMBOL", 41,
        spawnstate="S_EVILEYE", radius=16 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SOLID,
    ),
    # MT_MISC39
    _mobj(
        "FLOATING_SKULLROCK", 42,
        spawnstate="S_FLOATSKULL", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC40
    _mobj(
        "TORCHED_TREE", 43,
        spawnstate="S_TORCHTREE", radius=16 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SOLID,
    ),
    # MT_MISC41
    _mobj(
        "BRONZE_BLUE_TORCH", 44,
        spawnstate="S_BLUETORCH", radius=16 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SOLID,
    ),
    # MT_MISC42
    _mobj(
        "BRONZE_GREEN_TORCH", 45,
        spawnstate="S_GREENTORCH", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC43
    _mobj(
        "BRONZE_RED_TORCH", 46,
        spawnstate="S_REDTORCH", radius=16 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SOLID,
    ),
    # MT_MISC44
    _mobj(
        "WOODEN_BLUE_TORCH", 55,
        spawnstate="S_BTORCHSHRT", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC45
    _mobj(
        "WOODEN_GREEN_TORCH", 56,
        spawnstate="S_GTORCHSHRT", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC46
    _mobj(
        "WOODEN_RED_TORCH", 57,
        spawnstate="S_RTORCHSHRT", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC47
    _mobj(
        "SPIKY_STUMP", 47,
        spawnstate="S_STALAGTITE", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC48
    _mobj(
        "TECHNOCOLUMN", 48,
        spawnstate="S_TECHPILLAR", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC49
    _mobj(
        "BLACK_CANDLE", 34,
        spawnstate="S_CANDLESTIK", radius=20 * FRACUNIT,
        height=16 * FRACUNIT,
    ),
    # MT_MISC50
    _mobj(
        "CANDELABRA", 35,
        spawnstate="S_CANDELABRA", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC51
    _mobj(
        "TWITCHING_BLOKE_I", 49,
        spawnstate="S_BLOODYTWITCH", radius=16 * FRACUNIT,
        height=68 * FRACUNIT,
        flags=MF.SOLID | MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC52
    _mobj(
        "HANGING_DEAD_BLOKE_I", 50,
        spawnstate="S_MEAT2", radius=16 * FRACUNIT, height=84 * FRACUNIT,
        flags=MF.SOLID | MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC53
    _mobj(
        "HANGING_DEAD_BLOKE_II", 51,
        spawnstate="S_MEAT3", radius=16 * FRACUNIT, height=84 * FRACUNIT,
        flags=MF.SOLID | MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC54
    _mobj(
        "HANGING_DEAD_BLOKE_III", 52,
        spawnstate="S_MEAT4", radius=16 * FRACUNIT, height=68 * FRACUNIT,
        flags=MF.SOLID | MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC55
    _mobj(
        "HANGING_DEAD_BLOKE_IV", 53,
        spawnstate="S_MEAT5", radius=16 * FRACUNIT, height=52 * FRACUNIT,
        flags=MF.SOLID | MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC56
    _mobj(
        "HANGING_DEAD_BLOKE_V", 59,
        spawnstate="S_MEAT2", radius=20 * FRACUNIT, height=84 * FRACUNIT,
        flags=MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC57
    _mobj(
        "HANGING_DEAD_BLOKE_VI", 60,
        spawnstate="S_MEAT4", radius=20 * FRACUNIT, height=68 * FRACUNIT,
        flags=MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC58
    _mobj(
        "HANGING_DEAD_BLOKE_VII", 61,
        spawnstate="S_MEAT3", radius=20 * FRACUNIT, height=52 * FRACUNIT,
        flags=MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC59
    _mobj(
        "HANGING_DEAD_BLOKE_VIII", 62,
        spawnstate="S_MEAT5", radius=20 * FRACUNIT, height=52 * FRACUNIT,
        flags=MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC60
    _mobj(
        "TWITCHING_BLOKE_II", 63,
        spawnstate="S_BLOODYTWITCH", radius=20 * FRACUNIT,
        height=68 * FRACUNIT, flags=MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC61
    _mobj(
        "DEAD_CACODEMON", 22,
        spawnstate="S_HEAD_DIE6", radius=20 * FRACUNIT, height=16 * FRACUNIT,
    ),
    # MT_MISC62
    _mobj(
        "DEAD_PLAYER", 15,
        spawnstate="S_PLAY_DIE7", radius=20 * FRACUNIT, height=16 * FRACUNIT,
    ),
    # MT_MISC63
    _mobj(
        "DEAD_FORMER_HUMAN", 18,
        spawnstate="S_POSS_DIE5", radius=20 * FRACUNIT, height=16 * FRACUNIT,
    ),
    # MT_MISC64
    _mobj(
        "DEAD_DEMON", 21,
        spawnstate="S_SARG_DIE6", radius=20 * FRACUNIT, height=16 * FRACUNIT,
    ),
    # MT_MISC65
    _mobj(
        "DEAD_LOSTSOUL", 23,
        spawnstate="S_SKULL_DIE6", radius=20 * FRACUNIT,
        height=16 * FRACUNIT,
    ),
    # MT_MISC66
    _mobj(
        "DEAD_IMP", 20,
        spawnstate="S_TROO_DIE5", radius=20 * FRACUNIT, height=16 * FRACUNIT,
    ),
    # MT_MISC67
    _mobj(
        "DEAD_FORMER_SARG", 19,
        spawnstate="S_SPOS_DIE5", radius=20 * FRACUNIT, height=16 * FRACUNIT,
    ),
    # MT_MISC68
    _mobj(
        "DEAD_GIBBER_PLAYER1", 10,
        spawnstate="S_PLAY_XDIE9", radius=20 * FRACUNIT,
        height=16 * FRACUNIT,
    ),
    # MT_MISC69
    _mobj(
        "DEAD_GIBBED_PLAYER2", 12,
        spawnstate="S_PLAY_XDIE9", radius=20 * FRACUNIT,
        height=16 * FRACUNIT,
    ),
    # MT_MISC70
    _mobj(
        "HEADS_ON_A_STICK", 28,
        spawnstate="S_HEADSONSTICK", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC71
    _mobj(
        "POOL_OF_BLOOD", 24,
        spawnstate="S_GIBS", radius=20 * FRACUNIT, height=16 * FRACUNIT,
    ),
    # MT_MISC72
    _mobj(
        "SKULL_ON_A_STICK", 27,
        spawnstate="S_HEADONASTICK", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC73
    _mobj(
        "SKULL_CENTREPIECE", 29,
        spawnstate="S_HEADCANDLES", radius=16 * FRACUNIT,
        height=16 * FRACUNIT, flags=MF.SOLID,
    ),
    # MT_MISC74
    _mobj(
        "SKEWERED_BLOKE", 25,
        spawnstate="S_DEADSTICK", radius=16 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SOLID,
    ),
    # MT_MISC75
    _mobj(
        "DYING_SKEWERED_BLOKE", 26,
        spawnstate="S_LIVESTICK", radius=16 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SOLID,
    ),
    # MT_MISC76
    _mobj(
        "BIG_TREE", 54,
        spawnstate="S_BIGTREE", radius=32 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SOLID,
    ),
    # MT_MISC77
    _mobj(
        "BURNING_BARREL", 70,
        spawnstate="S_BBAR1", radius=16 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SOLID,
    ),
    # MT_MISC78
    _mobj(
        "GUTTED_HUNG_BLOKE_I", 73,
        spawnstate="S_HANGNOGUTS", radius=16 * FRACUNIT,
        height=88 * FRACUNIT,
        flags=MF.SOLID | MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC79
    _mobj(
        "GUTTED_HUNG_BLOKE_II", 74,
        spawnstate="S_HANGBNOBRAIN", radius=16 * FRACUNIT,
        height=88 * FRACUNIT,
        flags=MF.SOLID | MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC80
    _mobj(
        "GUTTED_TORSO_I", 75,
        spawnstate="S_HANGTLOOKDN", radius=16 * FRACUNIT,
        height=64 * FRACUNIT,
        flags=MF.SOLID | MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC81
    _mobj(
        "GUTTED_TORSO_II", 76,
        spawnstate="S_HANGTSKULL", radius=16 * FRACUNIT,
        height=64 * FRACUNIT,
        flags=MF.SOLID | MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC82
    _mobj(
        "GUTTED_TORSO_III", 77,
        spawnstate="S_HANGTLOOKUP", radius=16 * FRACUNIT,
        height=64 * FRACUNIT,
        flags=MF.SOLID | MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC83
    _mobj(
        "GUTTED_TORSO_IV", 78,
        spawnstate="S_HANGTNOBRAIN", radius=16 * FRACUNIT,
        height=64 * FRACUNIT,
        flags=MF.SOLID | MF.SPAWNCEILING | MF.NOGRAVITY,
    ),
    # MT_MISC84
    _mobj(
        "POOL_OF_BLOOD_I", 79,
        spawnstate="S_COLONGIBS", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.NOBLOCKMAP,
    ),
    # MT_MISC85
    _mobj(
        "POOL_OF_BLOOD_II", 80,
        spawnstate="S_SMALLPOOL", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.NOBLOCKMAP,
    ),
    # MT_MISC86
    _mobj(
        "BRAINSTEM", 81,
        spawnstate="S_BRAINSTEM", radius=20 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.NOBLOCKMAP,
    ),

    # BOOM and MBF things
    # MT_PUSH
    _mobj(
        "POINT_PUSHER", 5001,
        spawnstate="S_TNT1", radius=FRACUNIT / 8, height=FRACUNIT / 8,
        mass=10, flags=MF.NOBLOCKMAP,
    ),
    # MT_PULL
    _mobj(
        "POINT_PULLER", 5002,
        spawnstate="S_TNT1", radius=FRACUNIT / 8, height=FRACUNIT / 8,
        mass=10, flags=MF.NOBLOCKMAP,
    ),
    # MT_DOGS
    _mobj(
        "DOG", 888,
        spawnstate="S_DOGS_STND", spawnhealth=500, seestate="S_DOGS_RUN1",
        seesound="dgsit", attacksound="dgatk", painstate="S_DOGS_PAIN",
        painchance=180, painsound="dgpain", meleestate="S_DOGS_ATK1",
        deathstate="S_DOGS_DIE1", deathsound="dgdth", speed=10,
        radius=12 * FRACUNIT, height=28 * FRACUNIT, activesound="dgact",
        flags=MF.SOLID | MF.SHOOTABLE | MF.COUNTKILL,
        raisestate="S_DOGS_RAISE1",
    ),
    # MT_PLASMA1
    _mobj(
        "BETA_PLASMA_1", -1,
        spawnstate="S_PLS1BALL", seesound="plasma", deathstate="S_PLS1EXP",
        deathsound="firxpl", speed=25 * FRACUNIT, radius=13 * FRACUNIT,
        height=8 * FRACUNIT, damage=4,
        flags=MF.NOBLOCKMAP | MF.MISSILE | MF.DROPOFF | MF.BOUNCES,
    ),
    # MT_PLASMA2
    _mobj(
        "BETA_PLASMA_2", -1,
        spawnstate="S_PLS2BALL", seesound="plasma",
        deathstate="S_PLS2BALLX1", deathsound="firxpl", speed=25 * FRACUNIT,
        radius=6 * FRACUNIT, height=8 * FRACUNIT, damage=4,
        flags=MF.NOBLOCKMAP | MF.MISSILE | MF.DROPOFF | MF.BOUNCES,
    ),
    # MT_SCEPTRE
    _mobj(
        "BETA_SCEPTRE", 2016,
        spawnstate="S_BON3", radius=10 * FRACUNIT, height=16 * FRACUNIT,
        flags=MF.SPECIAL | MF.COUNTITEM,
    ),
    # MT_BIBLE
    _mobj(
        "BETA_BIBLE", 2017,
        spawnstate="S_BON4", radius=20 * FRACUNIT, height=10 * FRACUNIT,
        flags=MF.SPECIAL | MF.COUNTITEM,
    ),
    # MT_MUSICSOURCE
    _mobj(
        "MUSIC_SOURCE", 14164,
        spawnstate="S_TNT1", radius=16, height=16, flags=MF.NOBLOCKMAP,
    ),
    # MT_GIBDTH
    _mobj(
        "GIB_DEATH", -1,
        spawnstate="S_TNT1", radius=4 * FRACUNIT, height=4 * FRACUNIT,
        flags=MF.NOBLOCKMAP | MF.DROPOFF,
    ),
)

# Only used for the boss brain's death explosions, never patchable.
BRAIN_EXPLODE_ROW = _mobj(
    "BRAIN_DEATH_MISSILE", -1,
    spawnstate="S_BRAINEXPLODE1", seesound="rlaunc", deathsound="barexp",
    speed=20 * FRACUNIT, radius=11 * FRACUNIT, height=8 * FRACUNIT,
    damage=128, flags=MF.NOBLOCKMAP | MF.MISSILE | MF.DROPOFF | MF.NOGRAVITY,
)


def resolve_row(row: MobjRow, frames: FrameTable) -> MobjInfo:
    """Turn a symbolic row into a record with frame and sound ids."""
    values = dict(row.fields)
    for key in STATE_FIELDS:
        if key in values:
            values[key] = frames.index_of(values[key])
    for key in SOUND_FIELDS:
        if key in values:
            values[key] = find_sound(values[key]) or 0
    return MobjInfo(row.name, row.doomednum, **values)


def build_mobjinfo(frames: FrameTable) -> list[MobjInfo]:
    return [resolve_row(row, frames) for row in MOBJ_ROWS]


def build_brain_explode(frames: FrameTable) -> MobjInfo:
    return resolve_row(BRAIN_EXPLODE_ROW, frames)
