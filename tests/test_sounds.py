from deh_ddf.ddf.convert import convert_edits
from deh_ddf.engine.config import ConversionConfig
from deh_ddf.engine.edits import RenameSound, SetSoundField, SetThingField
from deh_ddf.engine.frames import FrameTable
from deh_ddf.models.constants import MobjType
from deh_ddf.models.sounds import SFX_CHGUN, SFX_PISTOL, SFX_STNMOV, find_sound


def _config(**kwargs) -> ConversionConfig:
    return ConversionConfig(quiet=True, **kwargs)


def test_priority_change_writes_one_entry():
    lumps, _ = convert_edits([SetSoundField(SFX_PISTOL, "Value", 80)], _config())
    assert lumps["DDFSFX"] == (
        "<SOUNDS>\n\n"
        "[PISTOL]\n"
        'LUMP_NAME = "DSPISTOL";\n'
        "PRIORITY = 80;\n"
        "\n"
        "\n"
    )


def test_chaingun_plays_the_pistol_lump():
    lumps, _ = convert_edits([
        RenameSound("pistol", "pew"),
        SetSoundField(SFX_CHGUN, "Value", 70),
    ], _config())
    text = lumps["DDFSFX"]
    assert '[PISTOL]\nLUMP_NAME = "DSPEW";\n' in text
    assert '[CHGUN]\nLUMP_NAME = "DSPEW";\nPRIORITY = 70;\n' in text
    assert text.index("[PISTOL]") < text.index("[CHGUN]")


def test_singular_and_looping_sounds():
    lumps, _ = convert_edits([SetSoundField(SFX_STNMOV, "Value", 100)], _config())
    assert (
        "[STNMOV]\n"
        'LUMP_NAME = "DSSTNMOV";\n'
        "PRIORITY = 100;\n"
        "SINGULAR = 18;\n"
        "LOOP = TRUE;\n"
    ) in lumps["DDFSFX"]


def test_ignored_and_bad_sound_fields():
    lumps, session = convert_edits([
        SetSoundField(SFX_PISTOL, "Zero 1", 5),
        SetSoundField(SFX_PISTOL, "Offset", 5),
        SetSoundField(SFX_PISTOL, "Pitch", 5),
        SetSoundField(300, "Value", 5),
    ], _config())
    assert "DDFSFX" not in lumps
    assert session.diagnostics.messages("field") == [
        "raw sound Offset not supported.",
        "UNKNOWN SOUND FIELD: Pitch",
    ]
    assert session.diagnostics.messages("edit") == ["illegal sound number: 300"]


def test_negative_priority_is_clamped():
    lumps, _ = convert_edits([SetSoundField(SFX_PISTOL, "Value", -4)], _config())
    assert "PRIORITY = 0;\n" in lumps["DDFSFX"]


def test_dehextra_sound_used_by_a_thing_gets_an_entry():
    lumps, _ = convert_edits(
        [SetThingField(MobjType.TROOP, "Alert sound", 500)], _config(),
    )
    assert (
        "[FRE000]\n"
        'LUMP_NAME = "DSFRE000";\n'
        "PRIORITY = 127;\n"
    ) in lumps["DDFSFX"]
    assert 'SIGHTING_SOUND = "FRE000";\n' in lumps["DDFTHING"]


def test_dog_sounds_keep_their_names():
    lumps, _ = convert_edits([SetSoundField(find_sound("dgsit"), "Value", 90)], _config())
    assert '[DOG_SIGHT]\nLUMP_NAME = "DSDGSIT";\n' in lumps["DDFSFX"]


def test_all_mode_writes_the_whole_table():
    lumps, _ = convert_edits([], _config(all_mode=True))
    text = lumps["DDFSFX"]
    assert text.startswith("<SOUNDS>\n\n[PISTOL]\n")
    assert "[SCRSHT]\n" in text
    assert "[FRE000]" not in text


def test_extra_sound_in_unmodified_frame_gets_defined():
    frames = FrameTable.from_records([
        {"name": "S_TROO_STND", "sprite": "TROO", "frame": 0, "tics": 10, "action": "A_PlaySound",
         "misc1": 500, "next": "S_TROO_STND"},
    ])
    lumps, session = convert_edits([SetThingField(MobjType.TROOP, "Hit points", 70)], _config(), frames)

    assert 'PLAYSOUND("FRE000")' in lumps["DDFTHING"]
    assert list(lumps)[0] == "DDFSFX"
    assert "[FRE000]\n" in lumps["DDFSFX"]
    assert session.frame_overlay == {}
