"""Monster classification heuristic.

Weights come from statistical analysis of major patches (standard Doom,
Batman, Mordeth, Wheel-of-Time, Osiris). Patches in the wild were tuned
against these exact numbers, so both thresholds must stay as they are.
"""

from deh_ddf.models.actions import ActFlag
from deh_ddf.models.flags import LegacyFlag
from deh_ddf.models.records import MobjInfo


THRESHOLD_WITH_ROLES = 370
THRESHOLD_WITHOUT_ROLES = 300

WEIGHT_SOLID = 25
WEIGHT_SHOOTABLE = 72
WEIGHT_PAIN = 91
WEIGHT_ATTACK = 91
WEIGHT_DEATH = 72
WEIGHT_RAISE = 31
WEIGHT_CHASER = 78
WEIGHT_FALLER = 61
WEIGHT_SPEED = 87


def monster_score(info: MobjInfo, knows_roles: bool = False, act_flags: int = 0) -> int:
    score = 0
    if info.flags & LegacyFlag.SOLID:
        score += WEIGHT_SOLID
    if info.flags & LegacyFlag.SHOOTABLE:
        score += WEIGHT_SHOOTABLE
    if info.painstate:
        score += WEIGHT_PAIN
    if info.missilestate or info.meleestate:
        score += WEIGHT_ATTACK
    if info.deathstate:
        score += WEIGHT_DEATH
    if info.raisestate:
        score += WEIGHT_RAISE
    if knows_roles:
        if act_flags & ActFlag.CHASER:
            score += WEIGHT_CHASER
        if act_flags & ActFlag.FALLER:
            score += WEIGHT_FALLER
    if info.speed > 0:
        score += WEIGHT_SPEED
    return score


def meets_monster_threshold(score: int, knows_roles: bool) -> bool:
    return score >= (THRESHOLD_WITH_ROLES if knows_roles else THRESHOLD_WITHOUT_ROLES)


def is_monster(info: MobjInfo, player: int = 0, knows_roles: bool = False,
               act_flags: int = 0) -> bool:
    """Whether ``info`` should be treated as a monster.

    ``knows_roles`` is True once the entity's frames have been walked and
    ``act_flags`` holds the actions found there; the bar is higher then.
    """
    if player > 0:
        return False
    if info.doomednum <= 0:
        return False
    if info.is_attack:
        return False
    if info.flags & LegacyFlag.COUNTKILL:
        return True
    if info.flags & (LegacyFlag.SPECIAL | LegacyFlag.COUNTITEM):
        return False
    score = monster_score(info, knows_roles, act_flags)
    return meets_monster_threshold(score, knows_roles)
