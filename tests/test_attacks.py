import pytest

from deh_ddf.ddf.attacks import AttackConverter, ScratchAttacks, sanitize_name
from deh_ddf.ddf.convert import convert_edits
from deh_ddf.ddf.states import StateGrouper
from deh_ddf.ddf.writer import LumpWriter
from deh_ddf.engine.config import ConversionConfig
from deh_ddf.engine.diagnostics import ConversionError
from deh_ddf.engine.edits import SetFrameField, SetThingField
from deh_ddf.engine.frames import FrameTable
from deh_ddf.engine.session import ConversionSession
from deh_ddf.models.constants import FRACUNIT, MobjType
from deh_ddf.models.records import MobjInfo


def _config() -> ConversionConfig:
    return ConversionConfig(quiet=True)


def _brain_frames() -> FrameTable:
    return FrameTable.from_records([
        {"name": "S_SPAWN1", "sprite": "BOSF", "frame": 0, "bright": True, "tics": 3,
         "next": "S_SPAWN2"},
        {"name": "S_SPAWN2", "sprite": "BOSF", "frame": 1, "bright": True, "tics": 3,
         "next": "S_SPAWN1"},
        {"name": "S_SPAWNFIRE1", "sprite": "FIRE", "frame": 0, "bright": True, "tics": 4,
         "next": "S_SPAWNFIRE2"},
        {"name": "S_SPAWNFIRE2", "sprite": "FIRE", "frame": 1, "bright": True, "tics": 4,
         "next": "S_NULL"},
    ])


def _skull_frames() -> FrameTable:
    return FrameTable.from_records([
        {"name": "S_SKULL_STND", "sprite": "SKUL", "frame": 0, "tics": 10, "action": "A_Look",
         "next": "S_SKULL_STND"},
        {"name": "S_SKULL_RUN1", "sprite": "SKUL", "frame": 0, "tics": 6, "action": "A_Chase",
         "next": "S_SKULL_RUN1"},
        {"name": "S_SKULL_ATK1", "sprite": "SKUL", "frame": 2, "tics": 10, "action": "A_FaceTarget",
         "next": "S_SKULL_ATK2"},
        {"name": "S_SKULL_ATK2", "sprite": "SKUL", "frame": 3, "tics": 4, "action": "A_SkullAttack",
         "next": "S_SKULL_ATK2"},
    ])


def test_brain_cube_and_spawn_fire_become_one_attack():
    lumps, session = convert_edits(
        [SetThingField(MobjType.SPAWNFIRE, "Hit points", 5)], _config(), _brain_frames(),
    )
    text = lumps["DDFATK"]

    assert session.marked_things() == [MobjType.SPAWNSHOT, MobjType.SPAWNFIRE]
    assert text.count("[BRAIN_CUBE]") == 1
    assert "[SPAWNFIRE]" not in text
    assert "DDFTHING" not in lumps

    assert "ATTACKTYPE = SHOOTTOSPOT;\n" in text
    assert "STATES(SPAWN) =" in text
    assert "STATES(DEATH) =" in text
    assert "    FIRE:A:4:BRIGHT:NOTHING,\n    FIRE:B:4:BRIGHT:NOTHING,#REMOVE;\n" in text
    assert "Brain cube is missing spawn/fire states." not in session.diagnostics.messages("states")


def test_brain_cube_without_fire_frames_warns():
    lumps, session = convert_edits(
        [SetThingField(MobjType.SPAWNSHOT, "Speed", 12 * FRACUNIT)], _config(),
    )
    assert "[BRAIN_CUBE]" in lumps["DDFATK"]
    assert "Brain cube is missing spawn/fire states." in session.diagnostics.messages("states")


def test_rocket_is_also_written_as_player_missile():
    lumps, session = convert_edits(
        [SetThingField(MobjType.ROCKET, "Speed", 25 * FRACUNIT)], _config(),
    )
    text = lumps["DDFATK"]

    assert text.startswith("<ATTACKS>\n\n[CYBERDEMON_MISSILE]\n")
    assert (
        "ATTACKTYPE = PROJECTILE;\n"
        "RADIUS = 11.0;\n"
        "HEIGHT = 8.0;\n"
        "SPEED = 25.00;\n"
        "ATTACK_HEIGHT = 44;\n"
        "DAMAGE.VAL = 20;\n"
        "DAMAGE.MAX = 160;\n"
        "TRANSLUCENCY = 75%;\n"
        "ATTACK_SPECIAL = FACE_TARGET,KILL_FAILED_SPAWN;\n"
        'LAUNCH_SOUND = "RLAUNC";\n'
        'DEATH_SOUND = "BAREXP";\n'
    ) in text

    player = text[text.index("[PLAYER_MISSILE]"):]
    assert "ATTACK_HEIGHT = 32;\n" in player
    assert "ATTACK_SPECIAL = KILL_FAILED_SPAWN;\n" in player
    assert text.index("[CYBERDEMON_MISSILE]") < text.index("[PLAYER_MISSILE]")
    assert "Attack [CYBERDEMON_MISSILE] has no states." in session.diagnostics.messages("states")


def test_fast_monster_shots():
    lumps, _ = convert_edits([
        SetThingField(MobjType.BRUISERSHOT, "Missile damage", 9),
        SetThingField(MobjType.TROOPSHOT, "Missile damage", 4),
    ], _config())
    text = lumps["DDFATK"]
    assert "FAST = 1.4;\n" in text
    assert "FAST = 2.0;\n" in text
    assert "DAMAGE.VAL = 4;\nDAMAGE.MAX = 32;\n" in text


def test_scratch_attacks_come_first():
    session = ConversionSession(_config())
    out = LumpWriter()
    scratch = ScratchAttacks()
    scratch.add(10, None)
    scratch.add(4, "ClAw-1")
    scratch.add(10, None)

    converter = AttackConverter(session, out, StateGrouper(session, out, scratch), scratch)
    converter.convert_all()

    assert out.text("DDFATK") == (
        "<ATTACKS>\n\n"
        "[SCRATCH_QUIET_10]\n"
        "ATTACKTYPE=CLOSECOMBAT;\n"
        "DAMAGE.VAL=10;\n"
        "DAMAGE.MAX=10;\n"
        "ATTACKRANGE=80;\n"
        "ATTACK_SPECIAL=FACE_TARGET;\n"
        "\n"
        "[SCRATCH_CLAW_1_4]\n"
        "ATTACKTYPE=CLOSECOMBAT;\n"
        "DAMAGE.VAL=4;\n"
        "DAMAGE.MAX=4;\n"
        "ATTACKRANGE=80;\n"
        "ATTACK_SPECIAL=FACE_TARGET;\n"
        "ENGAGED_SOUND=ClAw-1;\n"
        "\n"
        "\n"
    )


def test_sanitize_name():
    assert sanitize_name("dsclaw-1") == "DSCLAW_1"


def test_no_attacks_means_no_lump():
    lumps, _ = convert_edits([SetThingField(MobjType.TROOP, "Speed", 9)], _config())
    assert "DDFATK" not in lumps


# ---------------------------------------------------------------------------
# Pain elemental
# ---------------------------------------------------------------------------

def test_broken_skull_missile_rebuilds_spawner_attacks():
    lumps, _ = convert_edits([SetThingField(MobjType.SKULL, "Hit points", 50)], _config())
    text = lumps["DDFATK"]

    assert text == (
        "<ATTACKS>\n\n"
        "[ELEMENTAL_SPAWNER]\n"
        "ATTACKTYPE = SPAWNER;\n"
        "ATTACK_HEIGHT = 8;\n"
        "ATTACK_SPECIAL = PRESTEP_SPAWN,FACE_TARGET;\n"
        "SPAWNED_OBJECT = LOST_SOUL;\n"
        "SPAWN_OBJECT_STATE = IDLE:1;\n"
        "SPAWN_LIMIT = 21;\n"
        "\n"
        "[ELEMENTAL_DEATHSPAWN]\n"
        "ATTACKTYPE = TRIPLE_SPAWNER;\n"
        "ATTACK_HEIGHT = 8;\n"
        "ATTACK_SPECIAL = PRESTEP_SPAWN,FACE_TARGET;\n"
        "SPAWNED_OBJECT = LOST_SOUL;\n"
        "SPAWN_OBJECT_STATE = IDLE:1;\n"
        "\n"
    )


def test_working_skull_missile_needs_no_spawner():
    lumps, _ = convert_edits(
        [SetThingField(MobjType.SKULL, "Hit points", 50)], _config(), _skull_frames(),
    )
    assert "DDFATK" not in lumps


def test_spawn_state_follows_first_available_role():
    frames = _skull_frames()
    lumps, _ = convert_edits([
        SetThingField(MobjType.SKULL, "Hit points", 50),
        # make the attack frame stop
        SetFrameField(frames.index_of("S_SKULL_ATK1"), "Duration", -1),
    ], _config(), frames)
    assert "SPAWN_OBJECT_STATE = CHASE:1;\n" in lumps["DDFATK"]


def test_unmarked_skull_is_left_alone():
    lumps, _ = convert_edits([SetThingField(MobjType.PAIN, "Hit points", 500)], _config())
    assert "DDFATK" not in lumps


def test_attack_without_extra_entry_is_fatal():
    session = ConversionSession(_config())
    out = LumpWriter()
    scratch = ScratchAttacks()
    converter = AttackConverter(session, out, StateGrouper(session, out, scratch), scratch)
    with pytest.raises(ConversionError):
        converter.convert_attack(MobjInfo(name="*BOGUS", doomednum=-1), MobjType.PUFF)


def test_missing_merge_partner_is_fatal():
    session = ConversionSession(_config(), _brain_frames())
    session.baseline_mobjs[MobjType.SPAWNFIRE] = None
    out = LumpWriter()
    scratch = ScratchAttacks()
    converter = AttackConverter(session, out, StateGrouper(session, out, scratch), scratch)
    with pytest.raises(ConversionError):
        converter.handle_frames(session.mobj(MobjType.SPAWNSHOT), MobjType.SPAWNSHOT)
