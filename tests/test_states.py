import pytest

from deh_ddf.ddf.attacks import ScratchAttacks
from deh_ddf.ddf.states import (
    COMBAT,
    RANGE,
    WEAPON_GROUP_ORDER,
    StateGrouper,
    group_to_name,
    misc_to_angle,
)
from deh_ddf.ddf.writer import LumpWriter
from deh_ddf.engine.config import ConversionConfig
from deh_ddf.engine.frames import FrameTable
from deh_ddf.engine.session import ConversionSession
from deh_ddf.models.actions import ActFlag
from deh_ddf.models.constants import MobjType
from deh_ddf.models.records import Frame
from deh_ddf.models.sounds import find_sound


def _frames() -> FrameTable:
    return FrameTable.from_records([
        {"name": "S_A1", "sprite": "TROO", "frame": 0, "tics": 10, "action": "A_Look", "next": "S_A2"},
        {"name": "S_A2", "sprite": "TROO", "frame": 1, "tics": 10, "action": "A_Look", "next": "S_A1"},
        {"name": "S_R1", "sprite": "TROO", "frame": 2, "tics": 3, "action": "A_Chase", "next": "S_R2"},
        {"name": "S_R2", "sprite": "TROO", "frame": 3, "tics": 3, "action": "A_Chase", "next": "S_R1"},
        {"name": "S_D1", "sprite": "TROO", "frame": 4, "tics": 8, "action": "A_Scream", "next": "S_D2"},
        {"name": "S_D2", "sprite": "TROO", "frame": 5, "tics": -1, "next": "S_NULL"},
        {"name": "S_M1", "sprite": "TROO", "frame": 6, "tics": 8, "action": "A_TroopAttack", "next": "S_R1"},
        {"name": "S_GONE", "sprite": "BAR1", "frame": 0, "bright": True, "tics": 4, "next": "S_NULL"},
        {"name": "S_STILL", "sprite": "BAR1", "frame": 1, "tics": -1},
        {"name": "S_PISTOL1", "sprite": "PISG", "frame": 0, "tics": 4, "action": "A_WeaponReady",
         "next": "S_PISTOL2"},
        {"name": "S_PISTOL2", "sprite": "PISG", "frame": 1, "tics": 6, "action": "A_FirePistol",
         "next": "S_NULL"},
    ])


def _grouper():
    session = ConversionSession(ConversionConfig(quiet=True), frames=_frames())
    out = LumpWriter()
    out.begin_lump("TEST")
    return StateGrouper(session, out, ScratchAttacks()), session, out


def _text(out: LumpWriter) -> str:
    out.finish_lump()
    return out.text("TEST")


def test_begin_group_skips_null_frame():
    grouper, session, _ = _grouper()
    assert grouper.begin_group("S", 0) == 0
    assert grouper.begin_group("S", 1) == 1
    assert grouper.groups == {"S": [1]}


def test_spawn_idle_chase_and_death_blocks():
    grouper, session, out = _grouper()
    idx = session.frames.index_of
    grouper.begin_group("D", idx("S_D1"))
    grouper.begin_group("E", idx("S_R1"))
    grouper.begin_group("S", idx("S_A1"))
    grouper.spread_groups()
    for group in "SED":
        grouper.output_group(group)

    assert _text(out) == (
        "\nSTATES(SPAWN) =\n"
        "    TROO:A:10:NORMAL:NOTHING,#IDLE:2;\n"
        "\nSTATES(IDLE) =\n"
        "    TROO:A:10:NORMAL:LOOKOUT,\n"
        "    TROO:B:10:NORMAL:LOOKOUT,#IDLE;\n"
        "\nSTATES(CHASE) =\n"
        "    TROO:C:3:NORMAL:CHASE,\n"
        "    TROO:D:3:NORMAL:CHASE,#CHASE;\n"
        "\nSTATES(DEATH) =\n"
        "    TROO:E:8:NORMAL:MAKEDEATHSOUND,\n"
        "    TROO:F:-1:NORMAL:NOTHING;\n"
    )
    assert grouper.act_flags & ActFlag.LOOK
    assert grouper.act_flags & ActFlag.CHASER


def test_chain_into_claimed_frame_jumps_instead_of_repeating():
    grouper, session, out = _grouper()
    idx = session.frames.index_of
    grouper.begin_group("E", idx("S_R1"))
    grouper.begin_group("M", idx("S_M1"))
    grouper.spread_groups()
    grouper.output_group("M")

    assert _text(out) == (
        "\nSTATES(MISSILE) =\n"
        "    TROO:G:8:NORMAL:COMBOATTACK,#CHASE;\n"
    )
    assert grouper.attack_slots == ["IMP_FIREBALL", "IMP_CLOSECOMBAT", None]


def test_spawn_state_endings():
    grouper, session, out = _grouper()
    assert grouper.output_spawn_state(session.frames.index_of("S_GONE")) is True
    assert grouper.output_spawn_state(session.frames.index_of("S_STILL")) is True
    assert _text(out) == (
        "\nSTATES(SPAWN) =\n    BAR1:A:4:BRIGHT:NOTHING,#REMOVE;\n"
        "\nSTATES(SPAWN) =\n    BAR1:B:-1:NORMAL:NOTHING;\n"
    )


def test_force_fullbright():
    grouper, session, out = _grouper()
    grouper.force_fullbright = True
    grouper.output_spawn_state(session.frames.index_of("S_STILL"))
    assert "BAR1:B:-1:BRIGHT:NOTHING;" in _text(out)


def test_weapon_action_in_thing_is_replaced():
    grouper, session, out = _grouper()
    grouper.output_state("S", session.frames.index_of("S_PISTOL1"), True)
    assert _text(out) == "    PISG:A:4:NORMAL:NOTHING"
    assert session.diagnostics.messages("states") == [
        "Frame 10: weapon action A_WeaponReady used in thing."
    ]


def test_weapon_groups_and_flash_detection():
    grouper, session, out = _grouper()
    grouper.reset(WEAPON_GROUP_ORDER)
    ready = session.frames.index_of("S_PISTOL1")
    assert grouper.check_weapon_flash(ready) is True
    assert grouper.check_weapon_flash(session.frames.index_of("S_A1")) is False

    grouper.begin_group("r", ready)
    grouper.spread_groups()
    grouper.output_group("r")
    assert _text(out) == (
        "\nSTATES(READY) =\n"
        "    PISG:A:4:NORMAL:READY,\n"
        "    PISG:B:6:NORMAL:SHOOT,#REMOVE;\n"
    )
    assert grouper.attack_slots[RANGE] == "PLAYER_PISTOL"


def test_occupied_slot_specialises_the_action():
    grouper, session, out = _grouper()
    grouper.attack_slots[RANGE] = "IMP_FIREBALL"
    grouper.attack_slots[COMBAT] = "IMP_CLOSECOMBAT"
    frame = Frame(sprite=0, subsprite=0, tics=4, action="A_PosAttack")
    session.frame_overlay[50] = frame

    grouper.output_state("M", 50, True)
    text = _text(out)
    assert "    // Specialising RANGE_ATTACK\n" in text
    assert text.endswith(":RANGE_ATTACK(FORMER_HUMAN_PISTOL)")


def test_check_missile_state():
    grouper, session, _ = _grouper()
    idx = session.frames.index_of
    assert grouper.check_missile_state(idx("S_M1")) is True
    assert grouper.check_missile_state(idx("S_STILL")) is False
    assert grouper.check_missile_state(idx("S_GONE")) is False
    assert grouper.check_missile_state(0) is False


def _special(grouper, action: str, misc1: int = 0, misc2: int = 0) -> str:
    return grouper.special_action(
        Frame(sprite=0, subsprite=0, tics=1, action=action, args=[misc1, misc2, 0, 0, 0, 0, 0, 0])
    )


def test_special_actions():
    grouper, session, _ = _grouper()
    idx = session.frames.index_of
    grouper.begin_group("E", idx("S_R1"))
    grouper.spread_groups()

    assert _special(grouper, "A_RandomJump", idx("S_R2"), 128) == "JUMP(CHASE:2,50%)"
    assert _special(grouper, "A_RandomJump", 0, 128) == "NOTHING"
    assert _special(grouper, "A_Turn", 90 * 11930465) == "TURN(90)"
    assert _special(grouper, "A_Face", -90 * 11930465) == "FACE(-90)"
    assert _special(grouper, "A_PlaySound", find_sound("pistol")) == 'PLAYSOUND("PISTOL")'
    assert _special(grouper, "A_PlaySound", 0) == "NOTHING"
    assert _special(grouper, "A_LineEffect", 0) == "NOTHING"
    assert _special(grouper, "A_LineEffect", 9, 2) == "ACTIVATE_LINETYPE(9,2)"
    assert _special(grouper, "A_Die") == "DIE"
    assert _special(grouper, "A_KeenDie") == "KEEN_DIE"


def test_scratch_registers_attack():
    grouper, _, _ = _grouper()
    assert _special(grouper, "A_Scratch", 5, 0) == "CLOSE_ATTACK(SCRATCH_QUIET_5)"
    assert _special(grouper, "A_Scratch", 5, find_sound("pistol")) == "CLOSE_ATTACK(SCRATCH_PISTOL_5)"
    assert _special(grouper, "A_Scratch", 5, 0) == "CLOSE_ATTACK(SCRATCH_QUIET_5)"
    assert _special(grouper, "A_Scratch", 0, 0) == "NOTHING"
    assert [atk.name for atk in grouper.scratch] == ["SCRATCH_QUIET_5", "SCRATCH_PISTOL_5"]


def test_spawn_uses_one_based_thing_numbers():
    grouper, session, _ = _grouper()
    assert _special(grouper, "A_Spawn", MobjType.TROOP + 1) == "SPAWN(IMP)"
    assert session.marked_things() == []

    assert _special(grouper, "A_Spawn", MobjType.DOGS + 1) == "SPAWN(DOG)"
    assert session.marked_things() == [MobjType.DOGS]

    assert _special(grouper, "A_Spawn", MobjType.SPAWNSHOT + 1) == "NOTHING"
    assert session.diagnostics.messages("states") == [
        "Action A_SPAWN unusable type (%d)" % (MobjType.SPAWNSHOT + 1)
    ]


def test_angles_truncate_towards_zero():
    assert misc_to_angle(11930465 * 45 + 5) == 45
    assert misc_to_angle(-(11930465 * 45 + 5)) == -45


def test_group_names():
    assert group_to_name("X") == "OVERKILL"
    assert group_to_name("f") == "FLASH"
    with pytest.raises(ValueError):
        group_to_name("Q")


def test_shared_frames_go_to_the_higher_priority_role():
    frames = FrameTable.from_records([
        {"name": "S_X1", "sprite": "TROO", "frame": 0, "tics": 5, "next": "S_C1"},
        {"name": "S_Y1", "sprite": "TROO", "frame": 1, "tics": 5, "next": "S_C1"},
        {"name": "S_C1", "sprite": "TROO", "frame": 2, "tics": 5, "next": "S_C1"},
    ])
    session = ConversionSession(ConversionConfig(quiet=True), frames=frames)
    out = LumpWriter()
    out.begin_lump("TEST")
    grouper = StateGrouper(session, out, ScratchAttacks())

    # death starts at the lower frame number but ranks below chase
    grouper.begin_group("D", frames.index_of("S_X1"))
    grouper.begin_group("E", frames.index_of("S_Y1"))
    grouper.spread_groups()
    grouper.output_group("D")

    assert grouper.group_for_state[frames.index_of("S_C1")] == "E"
    assert _text(out) == (
        "\nSTATES(DEATH) =\n"
        "    TROO:A:5:NORMAL:NOTHING,#CHASE:2;\n"
    )
