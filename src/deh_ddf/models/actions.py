"""Codepointer table: what each frame action means when converted.

Each row gives the DDF action name (``W:`` prefix = weapon-only action) and
up to two attacks the action implies, written ``K:NAME`` where ``K`` is
``R`` (range), ``C`` (close combat) or ``S`` (spare).
"""

from dataclasses import dataclass
from enum import IntFlag


class ActFlag(IntFlag):
    EXPLODE = 1 << 0      # A_Explode
    BOSSDEATH = 1 << 1
    KEENDIE = 1 << 2      # A_KeenDie
    LOOK = 1 << 3
    DETONATE = 1 << 4     # A_Detonate
    SPREAD = 1 << 6       # A_FatAttack1/2/3
    CHASER = 1 << 7       # A_Chase
    FALLER = 1 << 8       # A_Fall
    RAISER = 1 << 9       # A_VileChase
    FLASH = 1 << 14       # weapon goes into its flash state
    MAKEDEAD = 1 << 15    # needs an extra MAKEDEAD state
    FACE = 1 << 16        # needs an extra FACE_TARGET state
    SPECIAL = 1 << 17     # converted from misc1/misc2
    UNIMPL = 1 << 18


AF = ActFlag


@dataclass(frozen=True, slots=True)
class ActionInfo:
    bex_name: str
    flags: int
    ddf_name: str          # unused when SPECIAL is set
    atk_1: str | None
    atk_2: str | None


ACTIONS: tuple[ActionInfo, ...] = (
    ActionInfo("A_NULL", 0, "NOTHING", None, None),

    # weapon actions
    ActionInfo("A_Light0", 0, "W:LIGHT0", None, None),
    ActionInfo("A_WeaponReady", 0, "W:READY", None, None),
    ActionInfo("A_Lower", 0, "W:LOWER", None, None),
    ActionInfo("A_Raise", 0, "W:RAISE", None, None),
    ActionInfo("A_Punch", 0, "W:SHOOT", "C:PLAYER_PUNCH", None),
    ActionInfo("A_ReFire", 0, "W:REFIRE", None, None),
    ActionInfo("A_FirePistol", AF.FLASH, "W:SHOOT", "R:PLAYER_PISTOL", None),
    ActionInfo("A_Light1", 0, "W:LIGHT1", None, None),
    ActionInfo("A_FireShotgun", AF.FLASH, "W:SHOOT", "R:PLAYER_SHOTGUN", None),
    ActionInfo("A_Light2", 0, "W:LIGHT2", None, None),
    ActionInfo("A_FireShotgun2", AF.FLASH, "W:SHOOT", "R:PLAYER_SHOTGUN2", None),
    ActionInfo("A_CheckReload", 0, "W:CHECKRELOAD", None, None),
    ActionInfo("A_OpenShotgun2", 0, "W:PLAYSOUND(DBOPN)", None, None),
    ActionInfo("A_LoadShotgun2", 0, "W:PLAYSOUND(DBLOAD)", None, None),
    ActionInfo("A_CloseShotgun2", 0, "W:PLAYSOUND(DBCLS)", None, None),
    ActionInfo("A_FireCGun", AF.FLASH, "W:SHOOT", "R:PLAYER_CHAINGUN", None),
    ActionInfo("A_GunFlash", AF.FLASH, "W:FLASH", None, None),
    ActionInfo("A_FireMissile", 0, "W:SHOOT", "R:PLAYER_MISSILE", None),
    ActionInfo("A_Saw", 0, "W:SHOOT", "C:PLAYER_SAW", None),
    ActionInfo("A_FirePlasma", AF.FLASH, "W:SHOOT", "R:PLAYER_PLASMA", None),
    ActionInfo("A_BFGsound", 0, "W:PLAYSOUND(BFG)", None, None),
    ActionInfo("A_FireBFG", 0, "W:SHOOT", "R:PLAYER_BFG9000", None),

    # thing actions
    ActionInfo("A_BFGSpray", 0, "SPARE_ATTACK", None, None),
    ActionInfo("A_Explode", AF.EXPLODE, "EXPLOSIONDAMAGE", None, None),
    ActionInfo("A_Pain", 0, "MAKEPAINSOUND", None, None),
    ActionInfo("A_PlayerScream", 0, "PLAYER_SCREAM", None, None),
    ActionInfo("A_Fall", AF.FALLER, "MAKEDEAD", None, None),
    ActionInfo("A_XScream", 0, "MAKEOVERKILLSOUND", None, None),
    ActionInfo("A_Look", AF.LOOK, "LOOKOUT", None, None),
    ActionInfo("A_Chase", AF.CHASER, "CHASE", None, None),
    ActionInfo("A_FaceTarget", 0, "FACETARGET", None, None),
    ActionInfo("A_PosAttack", 0, "RANGE_ATTACK", "R:FORMER_HUMAN_PISTOL", None),
    ActionInfo("A_Scream", 0, "MAKEDEATHSOUND", None, None),
    ActionInfo("A_SPosAttack", 0, "RANGE_ATTACK", "R:FORMER_HUMAN_SHOTGUN", None),
    ActionInfo("A_VileChase", AF.CHASER | AF.RAISER, "RESCHASE", None, None),
    ActionInfo("A_VileStart", 0, "PLAYSOUND(VILATK)", None, None),
    ActionInfo("A_VileTarget", 0, "RANGE_ATTACK", "R:ARCHVILE_FIRE", None),
    ActionInfo("A_VileAttack", 0, "EFFECTTRACKER", None, None),
    ActionInfo("A_StartFire", 0, "TRACKERSTART", None, None),
    ActionInfo("A_Fire", 0, "TRACKERFOLLOW", None, None),
    ActionInfo("A_FireCrackle", 0, "TRACKERACTIVE", None, None),
    ActionInfo("A_Tracer", 0, "RANDOM_TRACER", None, None),
    ActionInfo("A_SkelWhoosh", AF.FACE, "PLAYSOUND(SKESWG)", None, None),
    ActionInfo("A_SkelFist", AF.FACE, "CLOSE_ATTACK", "C:REVENANT_CLOSECOMBAT", None),
    ActionInfo("A_SkelMissile", 0, "RANGE_ATTACK", "R:REVENANT_MISSILE", None),
    ActionInfo("A_FatRaise", AF.FACE, "PLAYSOUND(MANATK)", None, None),
    ActionInfo("A_FatAttack1", AF.SPREAD, "RANGE_ATTACK", "R:MANCUBUS_FIREBALL", None),
    ActionInfo("A_FatAttack2", AF.SPREAD, "RANGE_ATTACK", "R:MANCUBUS_FIREBALL", None),
    ActionInfo("A_FatAttack3", AF.SPREAD, "RANGE_ATTACK", "R:MANCUBUS_FIREBALL", None),
    ActionInfo("A_BossDeath", 0, "NOTHING", None, None),
    ActionInfo("A_CPosAttack", 0, "RANGE_ATTACK", "R:FORMER_HUMAN_CHAINGUN", None),
    ActionInfo("A_CPosRefire", 0, "REFIRE_CHECK", None, None),
    ActionInfo("A_TroopAttack", 0, "COMBOATTACK", "R:IMP_FIREBALL", "C:IMP_CLOSECOMBAT"),
    ActionInfo("A_SargAttack", 0, "CLOSE_ATTACK", "C:DEMON_CLOSECOMBAT", None),
    ActionInfo("A_HeadAttack", 0, "COMBOATTACK", "R:CACO_FIREBALL", "C:CACO_CLOSECOMBAT"),
    ActionInfo("A_BruisAttack", 0, "COMBOATTACK", "R:BARON_FIREBALL", "C:BARON_CLOSECOMBAT"),
    ActionInfo("A_SkullAttack", 0, "RANGE_ATTACK", "R:SKULL_ASSAULT", None),
    ActionInfo("A_Metal", 0, "WALKSOUND_CHASE", None, None),
    ActionInfo("A_SpidRefire", 0, "REFIRE_CHECK", None, None),
    ActionInfo("A_BabyMetal", 0, "WALKSOUND_CHASE", None, None),
    ActionInfo("A_BspiAttack", 0, "RANGE_ATTACK", "R:ARACHNOTRON_PLASMA", None),
    ActionInfo("A_Hoof", 0, "PLAYSOUND(HOOF)", None, None),
    ActionInfo("A_CyberAttack", 0, "RANGE_ATTACK", "R:CYBERDEMON_MISSILE", None),
    ActionInfo("A_PainAttack", 0, "RANGE_ATTACK", "R:ELEMENTAL_SPAWNER", None),
    ActionInfo("A_PainDie", AF.MAKEDEAD, "SPARE_ATTACK", "S:ELEMENTAL_DEATHSPAWN", None),
    ActionInfo("A_KeenDie", AF.SPECIAL | AF.KEENDIE | AF.MAKEDEAD, "", None, None),
    ActionInfo("A_BrainPain", 0, "MAKEPAINSOUND", None, None),
    ActionInfo("A_BrainScream", 0, "BRAINSCREAM", None, None),
    ActionInfo("A_BrainDie", 0, "BRAINDIE", None, None),
    ActionInfo("A_BrainAwake", 0, "NOTHING", None, None),
    ActionInfo("A_BrainSpit", 0, "BRAINSPIT", "R:BRAIN_CUBE", None),
    ActionInfo("A_SpawnSound", 0, "MAKEACTIVESOUND", None, None),
    ActionInfo("A_SpawnFly", 0, "CUBETRACER", None, None),
    ActionInfo("A_BrainExplode", 0, "BRAINMISSILEEXPLODE", None, None),
    ActionInfo("A_CubeSpawn", 0, "CUBESPAWN", None, None),

    # BOOM and MBF actions
    ActionInfo("A_Die", AF.SPECIAL, "", None, None),
    ActionInfo("A_Stop", 0, "STOP", None, None),
    ActionInfo("A_Detonate", AF.DETONATE, "EXPLOSIONDAMAGE", None, None),
    ActionInfo("A_Mushroom", 0, "MUSHROOM", None, None),

    ActionInfo("A_Spawn", AF.SPECIAL, "", None, None),
    ActionInfo("A_Turn", AF.SPECIAL, "", None, None),
    ActionInfo("A_Face", AF.SPECIAL, "", None, None),
    ActionInfo("A_Scratch", AF.SPECIAL, "", None, None),
    ActionInfo("A_PlaySound", AF.SPECIAL, "", None, None),
    ActionInfo("A_RandomJump", AF.SPECIAL, "", None, None),
    ActionInfo("A_LineEffect", AF.SPECIAL, "", None, None),

    ActionInfo("A_FireOldBFG", 0, "W:SHOOT", "R:INTERNAL_FIRE_OLD_BFG", None),
    ActionInfo(
        "A_BetaSkullAttack", 0, "RANGE_ATTACK",
        "R:INTERNAL_BETA_LOST_SOUL_ATTACK", None,
    ),
)

_BY_NAME = {info.bex_name.upper(): info for info in ACTIONS}

NULL_ACTION = ACTIONS[0]


def find_action(name: str) -> ActionInfo | None:
    """Look up a codepointer by name, with or without the ``A_`` prefix."""
    key = name.strip().upper()
    if not key.startswith("A_"):
        key = "A_" + key
    return _BY_NAME.get(key)


def action_info(name: str) -> ActionInfo:
    """Like :func:`find_action` but unknown names behave as ``A_NULL``."""
    return find_action(name) or NULL_ACTION
