from deh_ddf.ddf.convert import convert_edits
from deh_ddf.ddf.rscript import RscriptConverter
from deh_ddf.ddf.writer import LumpWriter
from deh_ddf.engine.config import ConversionConfig
from deh_ddf.engine.edits import SetMBF21Bits, SetThingField
from deh_ddf.engine.frames import FrameTable
from deh_ddf.engine.session import ConversionSession
from deh_ddf.models.constants import MobjType
from deh_ddf.models.flags import Mbf21Flag


HEADER = "// <SCRIPTS>\n\n// --- DOOM I Scripts ---\n\n"
DOOM2 = "// --- DOOM II Scripts ---\n\n"


def _config() -> ConversionConfig:
    return ConversionConfig(quiet=True)


def test_stock_bosses_need_no_scripts():
    lumps, _ = convert_edits([], _config())
    assert lumps["RSCRIPT"] == HEADER + DOOM2 + "\n"


def test_added_boss_lists_every_carrier():
    lumps, _ = convert_edits([SetMBF21Bits(MobjType.TROOP, "E1M8BOSS")], _config())
    assert lumps["RSCRIPT"] == (
        HEADER
        + "start_map E1M8\n"
        "  radiustrigger 0 0 -1\n"
        "    ondeath IMP\n"
        "    ondeath BARON_OF_HELL\n"
        "    activate_linetype 38 666\n"
        "  end_radiustrigger\n"
        "end_map\n\n\n"
        + DOOM2 + "\n"
    )


def test_removed_boss_leaves_empty_map_block():
    lumps, _ = convert_edits([SetMBF21Bits(MobjType.BABY, "")], _config())
    text = lumps["RSCRIPT"]
    assert (
        "start_map MAP07\n"
        "  radiustrigger 0 0 -1\n"
        "    ondeath MANCUBUS\n"
        "    activate_linetype 38 666\n"
        "  end_radiustrigger\n"
        "end_map\n\n\n"
    ) in text
    assert "linetype 30 667" not in text


def test_keen_script_follows_keen_deaths():
    session = ConversionSession(_config())
    session.mark_thing(MobjType.KEEN)
    session.mark_thing(MobjType.TROOP)
    out = LumpWriter()
    RscriptConverter(session, out, keen_deaths=[MobjType.TROOP]).convert_all()

    assert out.text("RSCRIPT").endswith(
        "start_map MAP32\n"
        "  radiustrigger 0 0 -1\n"
        "    ondeath IMP\n"
        "    activate_linetype 2 666\n"
        "  end_radiustrigger\n"
        "end_map\n\n\n"
        "\n"
    )


def test_keen_converted_without_keen_death():
    lumps, _ = convert_edits([SetThingField(MobjType.KEEN, "Hit points", 200)], _config())
    assert lumps["RSCRIPT"].endswith("start_map MAP32\nend_map\n\n\n\n")


def test_keen_death_frames_are_detected_during_conversion():
    frames = FrameTable.from_records([
        {"name": "S_COMM_DIE1", "sprite": "KEEN", "frame": 2, "tics": 6, "action": "A_KeenDie",
         "next": "S_COMM_DIE2"},
        {"name": "S_COMM_DIE2", "sprite": "KEEN", "frame": 3, "tics": -1},
    ])
    lumps, _ = convert_edits([
        SetThingField(MobjType.TROOP, "Death frame", frames.index_of("S_COMM_DIE1")),
    ], _config(), frames)
    text = lumps["RSCRIPT"]
    assert "start_map MAP32\n  radiustrigger 0 0 -1\n    ondeath IMP\n" in text


def test_keens_never_count_as_bosses():
    session = ConversionSession(_config())
    info = session.mark_thing(MobjType.TROOP)
    info.mbf21_flags = int(Mbf21Flag.E1M8BOSS)
    converter = RscriptConverter(session, LumpWriter(), keen_deaths=[MobjType.TROOP])
    assert converter.collect_bosses(Mbf21Flag.E1M8BOSS) == [MobjType.BRUISER]
