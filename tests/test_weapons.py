from deh_ddf.ddf.attacks import ScratchAttacks
from deh_ddf.ddf.convert import convert_edits
from deh_ddf.ddf.states import StateGrouper
from deh_ddf.ddf.weapons import WeaponConverter
from deh_ddf.ddf.writer import LumpWriter
from deh_ddf.engine.config import ConversionConfig
from deh_ddf.engine.edits import SetMiscField, SetWeaponBits, SetWeaponField
from deh_ddf.engine.frames import FrameTable
from deh_ddf.engine.session import ConversionSession
from deh_ddf.models.constants import AmmoType, WeaponType


def _config(**kwargs) -> ConversionConfig:
    return ConversionConfig(quiet=True, **kwargs)


def _pistol_frames() -> FrameTable:
    return FrameTable.from_records([
        {"name": "S_PISTOL", "sprite": "PISG", "frame": 0, "tics": 1, "action": "A_WeaponReady",
         "next": "S_PISTOL"},
        {"name": "S_PISTOLDOWN", "sprite": "PISG", "frame": 0, "tics": 1, "action": "A_Lower",
         "next": "S_PISTOLDOWN"},
        {"name": "S_PISTOLUP", "sprite": "PISG", "frame": 0, "tics": 1, "action": "A_Raise",
         "next": "S_PISTOLUP"},
        {"name": "S_PISTOL1", "sprite": "PISG", "frame": 0, "tics": 4, "next": "S_PISTOL2"},
        {"name": "S_PISTOL2", "sprite": "PISG", "frame": 1, "tics": 6, "action": "A_FirePistol",
         "next": "S_PISTOL3"},
        {"name": "S_PISTOL3", "sprite": "PISG", "frame": 2, "tics": 4, "next": "S_PISTOL4"},
        {"name": "S_PISTOL4", "sprite": "PISG", "frame": 1, "tics": 5, "action": "A_ReFire",
         "next": "S_PISTOL"},
        {"name": "S_PISTOLFLASH", "sprite": "PISF", "frame": 0, "bright": True, "tics": 7,
         "action": "A_Light1", "next": "S_LIGHTDONE"},
        {"name": "S_LIGHTDONE", "sprite": "SHTG", "frame": 4, "tics": 0, "action": "A_Light0",
         "next": "S_NULL"},
    ])


def test_weapon_without_frames_warns():
    lumps, session = convert_edits(
        [SetWeaponField(WeaponType.PISTOL, "Ammo per shot", 2)], _config(),
    )
    assert lumps["DDFWEAP"].startswith(
        "<WEAPONS>\n\n"
        "[PISTOL]\n"
        "AMMOTYPE = BULLETS;\n"
        "AMMOPERSHOT = 2;\n"
        "AUTOMATIC = TRUE;\n"
        "BINDKEY = 2;\n"
        "PRIORITY = 2;\n"
        "FREE = TRUE;\n"
        "REFIRE_INACCURATE = TRUE;\n"
    )
    assert "Weapon [PISTOL] has no states." in session.diagnostics.messages("states")


def test_pistol_states_and_attack():
    lumps, _ = convert_edits(
        [SetWeaponField(WeaponType.PISTOL, "Ammo per shot", 1)], _config(), _pistol_frames(),
    )
    text = lumps["DDFWEAP"]

    assert (
        "\nSTATES(UP) =\n"
        "    PISG:A:1:NORMAL:RAISE,#UP;\n"
        "\nSTATES(DOWN) =\n"
        "    PISG:A:1:NORMAL:LOWER,#DOWN;\n"
        "\nSTATES(READY) =\n"
        "    PISG:A:1:NORMAL:READY,#READY;\n"
    ) in text
    assert "\nSTATES(ATTACK) =\n" in text
    assert "\nSTATES(FLASH) =\n" in text
    assert "\nATTACK = PLAYER_PISTOL;\n" in text


def test_flash_frames_skipped_when_never_fired():
    frames = _pistol_frames()
    lumps, _ = convert_edits([
        SetWeaponField(WeaponType.PISTOL, "Ammo per shot", 1),
        SetWeaponField(WeaponType.PISTOL, "Shooting frame", frames.index_of("S_PISTOL3")),
    ], _config(), frames)
    assert "STATES(FLASH)" not in lumps["DDFWEAP"]


def test_bfg_ammo_comes_from_misc_setting():
    lumps, _ = convert_edits([SetMiscField("BFG Cells/Shot", 30)], _config())
    text = lumps["DDFWEAP"]
    assert text.startswith(
        "<WEAPONS>\n\n"
        "[BFG_9000]\n"
        "AMMOTYPE = CELLS;\n"
        "AMMOPERSHOT = 30;\n"
    )
    assert "DANGEROUS = TRUE;\n" in text


def test_chainsaw_sounds_and_flags():
    lumps, _ = convert_edits(
        [SetWeaponField(WeaponType.CHAINSAW, "Ammo type", AmmoType.NOAMMO)], _config(),
    )
    text = lumps["DDFWEAP"]
    assert "AMMOPERSHOT" not in text
    assert (
        "NOTHRUST = TRUE;\n"
        "FEEDBACK = TRUE;\n"
    ) in text
    assert (
        'START_SOUND = "SAWUP";\n'
        'IDLE_SOUND = "SAWIDL";\n'
        'ENGAGED_SOUND = "SAWFUL";\n'
    ) in text


def test_mbf21_weapon_flags():
    lumps, _ = convert_edits(
        [SetWeaponBits(WeaponType.SHOTGUN, "SILENT+NOAUTOFIRE")], _config(),
    )
    text = lumps["DDFWEAP"]
    assert "SILENT_TO_MONSTERS = TRUE;\n" in text
    assert "NOAUTOFIRE" not in text


def test_unknown_weapon_field_leaves_weapon_untouched():
    lumps, session = convert_edits(
        [SetWeaponField(WeaponType.SHOTGUN, "Recoil", 3)], _config(),
    )
    assert "DDFWEAP" not in lumps
    assert session.diagnostics.messages("field") == ["UNKNOWN WEAPON FIELD: Recoil"]


def test_extra_attacks_share_primary_ammo():
    session = ConversionSession(_config())
    out = LumpWriter()
    grouper = StateGrouper(session, out, ScratchAttacks())
    weapons = WeaponConverter(session, out, grouper)
    out.begin_lump("TEST")
    grouper.attack_slots = ["PLAYER_SHOTGUN", "PLAYER_PUNCH", "PLAYER_SHOTGUN"]

    weapons.handle_attacks(session.weapon(WeaponType.SHOTGUN), WeaponType.SHOTGUN)
    out.finish_lump()

    assert out.text("TEST") == (
        "\n"
        "ATTACK = PLAYER_SHOTGUN;\n"
        "SEC_ATTACK = PLAYER_PUNCH;\n"
        "SEC_AMMOTYPE = SHELLS;\n"
        "SEC_AMMOPERSHOT = 1;\n"
    )


def test_all_mode_writes_every_weapon():
    lumps, _ = convert_edits([], _config(all_mode=True))
    text = lumps["DDFWEAP"]
    for name in ("FIST", "PISTOL", "SHOTGUN", "CHAINGUN", "ROCKET_LAUNCHER",
                 "PLASMA_RIFLE", "BFG_9000", "CHAINSAW", "SUPER_SHOTGUN"):
        assert "[%s]\n" % name in text
