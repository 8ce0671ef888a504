from deh_ddf.engine.bits import parse_bits, parse_c_int
from deh_ddf.engine.diagnostics import Diagnostics
from deh_ddf.models.flags import (
    LEGACY_FLAG_NAMES,
    MBF21_FLAG_NAMES,
    WEAPON_MBF21_FLAG_NAMES,
    LegacyFlag,
    Mbf21Flag,
    WeaponMbf21Flag,
)


def test_parse_c_int_follows_percent_i_rules():
    assert parse_c_int("17") == 17
    assert parse_c_int("0x1F") == 31
    assert parse_c_int("017") == 15
    assert parse_c_int("0") == 0
    assert parse_c_int("12abc") is None
    assert parse_c_int("09") is None


def test_mnemonics_and_numbers_are_ored():
    diag = Diagnostics(quiet=True)
    bits = parse_bits(LEGACY_FLAG_NAMES, "SOLID+shootable|0x400", diag)
    assert bits == LegacyFlag.SOLID | LegacyFlag.SHOOTABLE | 0x400
    assert len(diag) == 0


def test_all_delimiters_split_tokens():
    diag = Diagnostics(quiet=True)
    bits = parse_bits(LEGACY_FLAG_NAMES, "SOLID, SHOOTABLE\tNOGRAVITY\fFLOAT\rMISSILE", diag)
    assert bits == (
        LegacyFlag.SOLID | LegacyFlag.SHOOTABLE | LegacyFlag.NOGRAVITY
        | LegacyFlag.FLOAT | LegacyFlag.MISSILE
    )


def test_unknown_mnemonic_is_warned_and_skipped():
    diag = Diagnostics(quiet=True)
    bits = parse_bits(LEGACY_FLAG_NAMES, "SOLID+WIBBLE", diag)
    assert bits == LegacyFlag.SOLID
    assert diag.messages("bits") == ["unknown BITS mnemonic: WIBBLE"]


def test_unreadable_number_is_warned():
    diag = Diagnostics(quiet=True)
    bits = parse_bits(LEGACY_FLAG_NAMES, "4x+SOLID", diag)
    assert bits == LegacyFlag.SOLID
    assert diag.messages("bits") == ["unreadable BITS value: 4x"]


def test_ignored_mnemonics_contribute_nothing():
    diag = Diagnostics(quiet=True)
    assert parse_bits(LEGACY_FLAG_NAMES, "JUSTHIT+INFLOAT", diag) == 0
    assert len(diag) == 0


def test_vocabularies_are_kept_apart():
    diag = Diagnostics(quiet=True)
    assert parse_bits(MBF21_FLAG_NAMES, "BOSS+RIP", diag) == Mbf21Flag.BOSS | Mbf21Flag.RIP
    assert parse_bits(WEAPON_MBF21_FLAG_NAMES, "SILENT", diag) == WeaponMbf21Flag.SILENT
    assert len(diag) == 0

    assert parse_bits(WEAPON_MBF21_FLAG_NAMES, "BOSS", diag) == 0
    assert parse_bits(MBF21_FLAG_NAMES, "SOLID", diag) == 0
    assert len(diag) == 2


def test_translucent_alias_sets_same_bit():
    diag = Diagnostics(quiet=True)
    assert parse_bits(LEGACY_FLAG_NAMES, "TRANSLUC50", diag) == LegacyFlag.TRANSLUCENT
