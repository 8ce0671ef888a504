import json

import pytest

from deh_ddf.engine.config import ConversionConfig
from deh_ddf.engine.session import ConversionSession
from deh_ddf.models.constants import MobjType
from scripts.convert_patch import EXIT_CONVERSION_ERROR, main
from scripts.dump_baseline import baseline_rows, format_row


def _write_edits(tmp_path, edits) -> str:
    path = tmp_path / "edits.json"
    path.write_text(json.dumps(edits))
    return str(path)


def test_json_output_has_lumps_and_warnings(tmp_path, capsys):
    edits = _write_edits(tmp_path, [
        {"kind": "thing_bits", "thing": 12, "bits": "FOOBAR+SOLID"},
        {"kind": "cheat", "name": "God mode", "text": "iamgod"},
    ])
    assert main(["--edits", edits, "--json", "--quiet"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert set(payload) == {"lumps", "warnings"}
    assert list(payload["lumps"]) == ["DDFTHING", "DDFLANG", "RSCRIPT"]
    assert "[IMP:3001]" in payload["lumps"]["DDFTHING"]
    assert "[bits] unknown BITS mnemonic: FOOBAR" in payload["warnings"]


def test_out_dir_gets_one_file_per_lump(tmp_path, capsys):
    edits = _write_edits(tmp_path, [{"kind": "misc_field", "field": "BFG Cells/Shot", "value": 20}])
    out_dir = tmp_path / "out"
    assert main(["--edits", edits, "--out-dir", str(out_dir), "--quiet"]) == 0

    assert sorted(p.name for p in out_dir.iterdir()) == ["DDFWEAP.txt", "RSCRIPT.txt"]
    assert "AMMOPERSHOT = 20;" in (out_dir / "DDFWEAP.txt").read_text()
    assert "Wrote" in capsys.readouterr().out


def test_plain_output_names_each_lump(tmp_path, capsys):
    edits = _write_edits(tmp_path, [{"kind": "sound_field", "sound": 1, "field": "Value", "value": 99}])
    assert main(["--edits", edits, "--quiet"]) == 0
    out = capsys.readouterr().out
    assert "==== DDFSFX ====" in out
    assert "==== RSCRIPT ====" in out


def test_warnings_are_counted_on_stderr(tmp_path, capsys):
    edits = _write_edits(tmp_path, [{"kind": "misc_field", "field": "Warp speed", "value": 1}])
    assert main(["--edits", edits, "--quiet"]) == 0
    assert "1 warning(s)" in capsys.readouterr().err


def test_conversion_error_exit_code(tmp_path, capsys):
    edits = _write_edits(tmp_path, [{"kind": "par_time", "value": 30}])
    assert main(["--edits", edits]) == EXIT_CONVERSION_ERROR
    assert capsys.readouterr().err.startswith("Error: unknown edit kind")


def test_frames_file_is_used(tmp_path, capsys):
    frames = tmp_path / "frames.json"
    frames.write_text(json.dumps({"frames": [
        {"name": "S_TROO_STND", "sprite": "TROO", "frame": 0, "tics": 10, "action": "A_Look",
         "next": "S_TROO_STND"},
    ]}))
    edits = _write_edits(tmp_path, [{"kind": "thing_field", "thing": 12, "field": "Speed", "value": 9}])
    assert main(["--edits", edits, "--frames", str(frames), "--json", "--quiet"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert "TROO:A:10:NORMAL:NOTHING" in payload["lumps"]["DDFTHING"]


def test_baseline_rows_filter_attacks():
    session = ConversionSession()
    attacks = baseline_rows(session, attacks=True)
    things = baseline_rows(session, things=True)
    assert len(attacks) + len(things) == len(session.baseline_mobjs)
    assert all(row.endswith("attack") for row in attacks)
    assert format_row(MobjType.TROOP, session.baseline_mobjs[MobjType.TROOP]) == (
        "  11  IMP" + " " * 28 + "3001  thing"
    )


def test_doom_version_is_not_an_option(tmp_path):
    edits = _write_edits(tmp_path, [])
    with pytest.raises(SystemExit):
        main(["--edits", edits, "--doom-version", "19"])
    assert not hasattr(ConversionConfig(), "doom_version")
