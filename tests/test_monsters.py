from deh_ddf.engine.monsters import (
    WEIGHT_ATTACK,
    WEIGHT_DEATH,
    is_monster,
    meets_monster_threshold,
    monster_score,
)
from deh_ddf.models.actions import ActFlag
from deh_ddf.models.flags import LegacyFlag
from deh_ddf.models.records import MobjInfo


def _info(**fields) -> MobjInfo:
    fields.setdefault("name", "TEST")
    fields.setdefault("doomednum", 5000)
    return MobjInfo(**fields)


def test_thresholds_are_inclusive():
    assert meets_monster_threshold(370, knows_roles=True) is True
    assert meets_monster_threshold(369, knows_roles=True) is False
    assert meets_monster_threshold(300, knows_roles=False) is True
    assert meets_monster_threshold(299, knows_roles=False) is False


def test_score_without_roles_ignores_action_flags():
    # solid + shootable + pain + attack + speed = 25 + 72 + 91 + 91 + 87
    info = _info(
        flags=LegacyFlag.SOLID | LegacyFlag.SHOOTABLE,
        painstate=3, missilestate=4, speed=8,
    )
    assert monster_score(info) == 366
    assert monster_score(info, knows_roles=False, act_flags=ActFlag.CHASER) == 366
    assert monster_score(info, knows_roles=True, act_flags=ActFlag.CHASER) == 444


def test_score_counts_melee_or_missile_once():
    info = _info(meleestate=2, missilestate=3, deathstate=4)
    assert monster_score(info) == WEIGHT_ATTACK + WEIGHT_DEATH


def test_classification_between_thresholds_depends_on_roles():
    # 25 + 72 + 91 + 72 + 31 + 87 = 378 with roles unknown
    info = _info(
        flags=LegacyFlag.SOLID | LegacyFlag.SHOOTABLE,
        painstate=1, deathstate=2, raisestate=3, speed=1,
    )
    assert is_monster(info, knows_roles=False) is True
    assert is_monster(info, knows_roles=True) is True

    # 72 + 91 + 72 + 87 = 322: enough early, not enough once roles are known
    info = _info(flags=LegacyFlag.SHOOTABLE, painstate=1, deathstate=2, speed=1)
    assert is_monster(info, knows_roles=False) is True
    assert is_monster(info, knows_roles=True) is False
    assert is_monster(info, knows_roles=True, act_flags=ActFlag.CHASER) is True


def test_short_circuits():
    killer = _info(flags=LegacyFlag.COUNTKILL)
    assert is_monster(killer) is True
    assert is_monster(killer, player=1) is False

    assert is_monster(_info(doomednum=-1, flags=LegacyFlag.COUNTKILL)) is False
    assert is_monster(_info(name="*SHOT", flags=LegacyFlag.COUNTKILL)) is False

    item = _info(
        flags=LegacyFlag.SPECIAL | LegacyFlag.SOLID | LegacyFlag.SHOOTABLE,
        painstate=1, missilestate=2, deathstate=3, speed=4,
    )
    assert is_monster(item) is False


def test_entity_without_states_or_flags_is_never_a_monster():
    info = _info()
    assert monster_score(info, knows_roles=True, act_flags=0) == 0
    assert is_monster(info, knows_roles=False) is False
    assert is_monster(info, knows_roles=True) is False
