import copy

import pytest

from deh_ddf.engine.config import ConversionConfig
from deh_ddf.engine.frames import FrameTable
from deh_ddf.engine.session import INFIGHT_ON, ConversionSession
from deh_ddf.models.constants import FRACUNIT, NO_GROUP, MobjType, WeaponType
from deh_ddf.models.flags import LegacyFlag
from deh_ddf.models.sounds import find_sound


def _session(**config) -> ConversionSession:
    return ConversionSession(ConversionConfig(quiet=True, **config))


def _frames() -> FrameTable:
    return FrameTable.from_records([
        {"name": "S_TROO_STND", "sprite": "TROO", "frame": 0, "tics": 10,
         "action": "A_Look", "next": "S_TROO_STND"},
        {"name": "S_TROO_RUN1", "sprite": "TROO", "frame": 1, "tics": 3,
         "action": "A_Chase", "next": "S_TROO_RUN1"},
        {"name": "S_TROO_ATK1", "sprite": "TROO", "frame": 2, "tics": 8,
         "action": "A_TroopAttack", "next": "S_TROO_RUN1"},
        {"name": "S_LONELY", "sprite": "BAR1", "frame": 0, "tics": -1},
    ])


def test_mark_copies_baseline_and_is_idempotent():
    session = _session()
    first = session.mark_thing(MobjType.TROOP)
    snapshot = copy.deepcopy(first)

    again = session.mark_thing(MobjType.TROOP)

    assert again is first
    assert again == snapshot
    assert again == session.baseline_mobjs[MobjType.TROOP]
    assert again is not session.baseline_mobjs[MobjType.TROOP]


def test_unmarked_lookups_fall_through_to_baseline():
    session = _session()
    assert session.mobj(MobjType.TROOP) is session.baseline_mobjs[MobjType.TROOP]
    assert session.marked_things() == []


def test_extra_entities_start_from_fixed_defaults():
    session = _session()
    extra = session.mark_thing(150)
    assert extra.doomednum == 150
    assert extra.spawnhealth == 0
    assert extra.mass == 0
    assert extra.infight_group == NO_GROUP

    beyond = session.mark_thing(400)
    assert beyond.doomednum == -1
    assert session.mobj_name(150) == "MT_EXTRA00"
    assert session.mobj_name(400) == "DEHACKED_401"


def test_mark_rejects_out_of_range_ids():
    session = _session()
    with pytest.raises(ValueError):
        session.mark_thing(32768)


def test_merged_pairs_are_marked_together():
    session = _session()
    session.mark_thing(MobjType.TFOG)
    session.mark_thing(MobjType.SPAWNFIRE)
    assert session.marked_things() == sorted([
        MobjType.SPAWNSHOT, MobjType.SPAWNFIRE, MobjType.TFOG, MobjType.TELEPORTMAN,
    ])


def test_max_ammo_marks_player_backpack_and_bullet_pickups():
    session = _session()
    before = copy.deepcopy(session.baseline_mobjs[MobjType.CLIP])

    session.set_ammo_field(0, "Max ammo", 400)

    assert session.ammo.player_max[0] == 400
    assert session.marked_things() == sorted([
        MobjType.PLAYER, MobjType.CLIP, MobjType.MISC17, MobjType.MISC24,
    ])
    assert session.mobj(MobjType.CLIP) == before
    assert session.ammo.pickup == [10, 4, 20, 1]


def test_ammo_values_are_clamped_and_negative_rejected():
    session = _session()
    session.set_ammo_field(1, "Per ammo", 50000)
    assert session.ammo.pickup[1] == 10000

    session.set_ammo_field(2, "Max ammo", -5)
    assert session.ammo.player_max[2] == 300
    assert session.warnings[-1].category == "field"


def test_ammo_six_is_rejected():
    session = _session()
    session.set_ammo_field(6, "Max ammo", 10)
    assert session.marked_things() == []
    assert session.diagnostics.messages("edit") == ["illegal ammo number: 6"]


def test_unknown_and_valid_bits_mnemonics():
    session = _session()
    session.set_thing_bits(MobjType.TROOP, "FOOBAR+SOLID")

    assert session.mobj(MobjType.TROOP).flags == LegacyFlag.SOLID
    assert session.diagnostics.messages("bits") == ["unknown BITS mnemonic: FOOBAR"]


def test_unknown_thing_field_still_marks():
    session = _session()
    session.set_thing_field(MobjType.TROOP, "Wibble", 3)
    assert session.is_marked(MobjType.TROOP)
    assert session.diagnostics.messages("field") == ["UNKNOWN THING FIELD: Wibble"]


def test_out_of_range_value_leaves_field_unchanged():
    session = _session(patch_format=5)
    imp = session.mobj(MobjType.TROOP)
    original = imp.seesound

    session.set_thing_field(MobjType.TROOP, "Alert sound", 109)

    assert session.mobj(MobjType.TROOP).seesound == original
    assert session.diagnostics.messages("field") == ["bad value '109' for Alert sound"]


def test_single_field_edit_marks_only_its_entity():
    session = _session()
    session.set_thing_field(MobjType.TROOP, "Hit points", 90)
    assert session.marked_things() == [MobjType.TROOP]
    assert session.mobj(MobjType.TROOP).spawnhealth == 90


def test_weapon_field_unknown_does_not_mark():
    session = _session()
    session.set_weapon_field(WeaponType.PISTOL, "Wibble", 1)
    assert session.marked_weapons() == []

    session.set_weapon_field(WeaponType.PISTOL, "Ammo per shot", 2)
    assert session.marked_weapons() == [WeaponType.PISTOL]
    assert session.weapon(WeaponType.PISTOL).ammo_per_shot == 2


def test_misc_fields_mark_their_pickups():
    session = _session()
    session.set_misc_field("Soulsphere Health", 150)
    assert session.misc.soul_health == 150
    assert session.marked_things() == [MobjType.MISC12]

    session.set_misc_field("Initial Health", 120)
    assert session.mobj(MobjType.PLAYER).spawnhealth == 120

    session.set_misc_field("BFG Cells/Shot", 30)
    assert session.misc.bfg_cells_per_shot == 30
    assert session.marked_weapons() == [WeaponType.BFG]


def test_misc_field_below_minimum_is_clamped():
    session = _session()
    session.set_misc_field("Max Health", 0)
    assert session.misc.max_health == 1
    assert session.is_marked(MobjType.MISC2)


def test_ignored_and_unknown_misc_fields_warn():
    session = _session()
    session.set_misc_field("God Mode Health", 200)
    session.set_misc_field("Rocket Jumping", 1)
    assert session.diagnostics.messages("field") == [
        "Ignoring MISC field: God Mode Health",
        "UNKNOWN MISC FIELD: Rocket Jumping",
    ]
    assert session.marked_things() == []


def test_infighting_marks_every_monster():
    session = _session()
    session.set_misc_field("Monsters Infight", INFIGHT_ON)

    assert session.monsters_infight
    marked = session.marked_things()
    assert MobjType.TROOP in marked
    assert MobjType.CYBORG in marked
    assert MobjType.PLAYER not in marked
    assert MobjType.CLIP not in marked


def test_infighting_rejects_other_values():
    session = _session()
    session.set_misc_field("Monsters Infight", 7)
    assert not session.monsters_infight
    assert session.marked_things() == []


def test_player_health_writes_overlay():
    session = _session()
    session.set_player_health(250)
    assert session.mobj(MobjType.PLAYER).spawnhealth == 250
    assert session.baseline_mobjs[MobjType.PLAYER].spawnhealth == 100


def test_use_thing_only_marks_later_entities():
    session = _session()
    session.use_thing(MobjType.TROOP)
    session.use_thing(MobjType.DOGS)
    assert session.marked_things() == [MobjType.DOGS]


def test_frame_edits_mark_the_owning_entity_once_resolved():
    session = ConversionSession(ConversionConfig(quiet=True), frames=_frames())
    run1 = session.frames.index_of("S_TROO_RUN1")

    session.set_frame_field(run1, "Duration", 5)
    assert session.marked_things() == []

    session.resolve_dependencies()

    assert session.frame(run1).tics == 5
    assert session.frames.get(run1).tics == 3
    assert MobjType.TROOP in session.marked_things()


def test_sprite_rename_marks_frames_using_it():
    session = ConversionSession(ConversionConfig(quiet=True), frames=_frames())
    session.rename_sprite("BAR1", "BARL")
    session.resolve_dependencies()

    lonely = session.frames.index_of("S_LONELY")
    assert list(session.frame_overlay) == [lonely]
    assert session.sprite_name(session.frame(lonely).sprite) == "BARL"


def test_frame_zero_is_never_marked():
    session = ConversionSession(ConversionConfig(quiet=True), frames=_frames())
    session.set_frame_field(0, "Duration", 5)
    assert session.frame_overlay == {}


def test_new_frames_past_the_table_start_invisible():
    session = _session()
    session.set_frame_field(1200, "Duration", 4)
    frame = session.frame(1200)
    assert frame.tics == 4
    assert frame.next_state == 1200
    assert session.sprite_name(frame.sprite) == "NULL"
    assert session.total_frames() == 1201


def test_codepointer_accepts_names_with_or_without_prefix():
    session = ConversionSession(ConversionConfig(quiet=True), frames=_frames())
    session.set_frame_pointer(2, "Scream")
    session.set_frame_pointer(3, "A_Fall")
    session.set_frame_pointer(4, "NotAnAction")
    assert session.frame(2).action == "A_Scream"
    assert session.frame(3).action == "A_Fall"
    assert session.diagnostics.messages("field") == ["unknown action NotAnAction for CODEPTR."]


def test_codep_frame_copies_compiled_action():
    session = ConversionSession(ConversionConfig(quiet=True), frames=_frames())
    source = session.frames.index_of("S_TROO_ATK1")
    session.set_codep_frame(1, source)
    assert session.frame(1).action == "A_TroopAttack"

    session.set_codep_frame(1, 9999)
    assert session.diagnostics.messages("field") == ["Illegal Codep frame number: 9999"]


def test_sound_edits():
    session = _session()
    pistol = find_sound("pistol")

    session.set_sound_field(pistol, "Value", 99)
    session.rename_sound("pistol", "mypist")

    assert session.sound_priority(pistol) == 99
    assert session.sound_lump(pistol) == "mypist"
    assert session.sound_modified == {pistol}


def test_sound_rename_rejects_long_names():
    session = _session()
    session.rename_sound("pistol", "toolongname")
    assert session.sound_new_names == {}
    assert session.diagnostics.messages("rename") == ["Bad length for sound name 'toolongname'."]


def test_text_replacements():
    session = _session()
    session.set_bex_string("GOTARMBONUS", "Picked up a shard.")
    session.set_bex_string("NOSUCHSTRING", "x")
    assert list(session.bex_strings.values()) == ["Picked up a shard."]
    assert session.diagnostics.messages("text") == ["unknown BEX string: NOSUCHSTRING"]


def test_radius_is_fixed_point_in_baseline():
    session = _session()
    assert session.mobj(MobjType.TROOP).radius == 20 * FRACUNIT
