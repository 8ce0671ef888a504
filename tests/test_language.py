from deh_ddf.ddf.convert import convert_edits
from deh_ddf.ddf.language import quote_ldf
from deh_ddf.engine.config import ConversionConfig
from deh_ddf.engine.edits import SetBexString, SetCheat
from deh_ddf.models.language import CHEATS, find_cheat, truncate_cheat


def _config(**kwargs) -> ConversionConfig:
    return ConversionConfig(quiet=True, **kwargs)


def test_quote_ldf_escapes_quotes_and_breaks_lines():
    assert quote_ldf("plain") == '"plain"'
    assert quote_ldf('say "hi"') == '"say \\"hi\\""'
    assert quote_ldf("one\ntwo") == '"one\\n"\n  "two"'


def test_strings_then_cheats():
    lumps, _ = convert_edits([
        SetCheat("Chainsaw", "idgimmesawnow"),
        SetBexString("GOTCLIP", 'Got "ammo"\nnow'),
    ], _config())
    assert lumps["DDFLANG"] == (
        "<LANGUAGES>\n\n"
        "[ENGLISH]\n"
        'GotClip = "Got \\"ammo\\"\\n"\n  "now";\n'
        "\n"
        'idchoppers = "idgimmesaw";\n'
        "\n"
    )


def test_cheat_only_patch():
    lumps, _ = convert_edits([SetCheat("god mode", "iamgod")], _config())
    assert lumps["DDFLANG"] == (
        "<LANGUAGES>\n\n"
        "[ENGLISH]\n"
        'iddqd = "iamgo";\n'
        "\n"
    )


def test_cheat_end_mark_shortens_code():
    cheat = CHEATS[find_cheat("Chainsaw")]
    assert truncate_cheat(cheat, "idsaw\xffjunk") == "idsaw"
    # a mark in the first two characters is ignored
    assert truncate_cheat(cheat, "i\xffdchoppersxx") == "i\xffdchopper"


def test_bad_text_edits_warn():
    lumps, session = convert_edits([
        SetBexString("NOT_A_STRING", "x"),
        SetBexString("GOTCLIP", ""),
        SetBexString("savegamename", "x"),
        SetCheat("Fly mode", "idfly"),
    ], _config())
    assert "DDFLANG" not in lumps
    assert session.diagnostics.messages("text") == [
        "unknown BEX string: NOT_A_STRING",
        "empty replacement for BEX string GOTCLIP",
        "unsupported BEX string: savegamename",
        "UNKNOWN CHEAT FIELD: Fly mode",
    ]


def test_all_mode_writes_original_cheats():
    lumps, _ = convert_edits([], _config(all_mode=True))
    text = lumps["DDFLANG"]
    assert text.startswith('<LANGUAGES>\n\n[ENGLISH]\nidbehold9 = "idbehold";\n')
    assert "GotClip" not in text
