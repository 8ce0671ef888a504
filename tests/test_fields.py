from deh_ddf.engine.diagnostics import Diagnostics
from deh_ddf.engine.fields import (
    FRAME_FIELDS,
    THING_FIELDS,
    WEAPON_FIELDS,
    FieldKind,
    FieldLimits,
    apply_field,
    find_field,
    validate_value,
)
from deh_ddf.models.flags import LegacyFlag
from deh_ddf.models.records import Frame, MobjInfo, WeaponInfo


def _thing() -> MobjInfo:
    return MobjInfo(name="TEST", doomednum=1, spawnhealth=50)


def _bex_limits() -> FieldLimits:
    return FieldLimits.for_format(6, 1000)


def test_find_field_is_case_insensitive():
    ref = find_field(THING_FIELDS, "  hit POINTS ")
    assert ref is not None
    assert ref.attr == "spawnhealth"
    assert find_field(THING_FIELDS, "Hit point") is None


def test_unknown_field_returns_false_without_warning():
    diag = Diagnostics(quiet=True)
    thing = _thing()
    assert apply_field(THING_FIELDS, "Bogus", thing, 5, _bex_limits(), diag) is False
    assert len(diag) == 0


def test_positive_only_rejects_zero_but_counts_as_found():
    diag = Diagnostics(quiet=True)
    thing = _thing()
    assert apply_field(THING_FIELDS, "Hit points", thing, 0, _bex_limits(), diag) is True
    assert thing.spawnhealth == 50
    assert diag.messages("field") == ["bad value '0' for Hit points"]


def test_non_negative_accepts_zero_and_rejects_negative():
    diag = Diagnostics(quiet=True)
    thing = _thing()
    apply_field(THING_FIELDS, "Speed", thing, 0, _bex_limits(), diag)
    assert thing.speed == 0
    apply_field(THING_FIELDS, "Speed", thing, -1, _bex_limits(), diag)
    assert thing.speed == 0
    assert len(diag) == 1


def test_unconstrained_accepts_negative():
    diag = Diagnostics(quiet=True)
    thing = _thing()
    apply_field(THING_FIELDS, "Dropped item", thing, -7, _bex_limits(), diag)
    assert thing.dropped_item == -7
    assert len(diag) == 0


def test_legacy_format_caps_indices_at_vanilla_tables():
    limits = FieldLimits.for_format(5, 967)
    assert limits.max_frame == 966
    assert limits.max_sound == 108
    assert limits.max_sprite == 137
    assert limits.max_ammo == 5


def test_bex_format_raises_caps_but_not_ammo():
    limits = _bex_limits()
    assert limits.max_frame == 32767
    assert limits.max_sound == 32767
    assert limits.max_sprite == 32767
    assert limits.max_ammo == 5


def test_index_fields_reject_max_plus_one():
    limits = FieldLimits.for_format(5, 100)
    diag = Diagnostics(quiet=True)
    thing = _thing()
    thing.spawnstate = 7

    apply_field(THING_FIELDS, "Initial frame", thing, 100, limits, diag)
    assert thing.spawnstate == 7
    apply_field(THING_FIELDS, "Initial frame", thing, 99, limits, diag)
    assert thing.spawnstate == 99

    apply_field(THING_FIELDS, "Alert sound", thing, 109, limits, diag)
    assert thing.seesound == 0
    apply_field(THING_FIELDS, "Alert sound", thing, 108, limits, diag)
    assert thing.seesound == 108


def test_ammo_index_rejects_six():
    diag = Diagnostics(quiet=True)
    weapon = WeaponInfo("PISTOL", 0, 1, 2, 2, "")
    apply_field(WEAPON_FIELDS, "Ammo type", weapon, 6, _bex_limits(), diag)
    assert weapon.ammo == 0
    apply_field(WEAPON_FIELDS, "Ammo type", weapon, 5, _bex_limits(), diag)
    assert weapon.ammo == 5


def test_subsprite_ignores_bright_bit_when_checking_range():
    diag = Diagnostics(quiet=True)
    frame = Frame(sprite=0, subsprite=0, tics=1)
    apply_field(FRAME_FIELDS, "Sprite subnumber", frame, 0x8000 | 31, _bex_limits(), diag)
    assert frame.subsprite == 0x8000 | 31
    apply_field(FRAME_FIELDS, "Sprite subnumber", frame, 32, _bex_limits(), diag)
    assert frame.subsprite == 0x8000 | 31
    assert len(diag) == 1


def test_numeric_bits_write_strips_mnemonic_only_flags():
    diag = Diagnostics(quiet=True)
    thing = _thing()
    raw = int(LegacyFlag.SOLID | LegacyFlag.TRANSLUCENT | LegacyFlag.FRIEND)
    apply_field(THING_FIELDS, "Bits", thing, raw, _bex_limits(), diag)
    assert thing.flags == LegacyFlag.SOLID


def test_frame_args_share_storage_with_misc_fields():
    diag = Diagnostics(quiet=True)
    frame = Frame(sprite=0, subsprite=0, tics=1)
    apply_field(FRAME_FIELDS, "Unknown 1", frame, 12, _bex_limits(), diag)
    apply_field(FRAME_FIELDS, "Args2", frame, 34, _bex_limits(), diag)
    assert frame.misc1 == 12
    assert frame.misc2 == 34


def test_validate_value_bit_word_always_valid():
    diag = Diagnostics(quiet=True)
    ref = find_field(THING_FIELDS, "MBF21 Bits")
    assert ref.kind is FieldKind.BIT_FLAG_WORD
    assert validate_value(ref, -1, _bex_limits(), diag) is True
