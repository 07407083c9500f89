import json

import pytest

from hydrocalc.cli import main


SCENARIO = ["--bore", "50", "--rod", "25", "--stroke", "300", "--pressure", "150", "--flow", "20", "--efficiency", "0.9"]


def test_prints_display_lines(capsys):
    assert main(SCENARIO) == 0
    out = capsys.readouterr().out
    assert "26.51 kN" in out
    assert "51.54 s" in out
    assert len(out.strip().splitlines()) == 9


def test_json_output(capsys):
    main([*SCENARIO, "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["system"] == "metric"
    assert payload["labels"]["area"] == "cm²"
    assert payload["display"]["stat-cycle-time"] == "51.54 s"


def test_preset_in_imperial(capsys):
    main(["--preset", "compact_50x25", "--units", "imperial", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["display"]["piston-area"] == "3.04 in²"


def test_unparsable_field_is_zero(capsys):
    main(["--bore", "abc", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["display"]["piston-area"] == "0.00 cm²"


def test_compare(capsys):
    main(["--preset", "compact_50x25", "--compare"])
    out = capsys.readouterr().out
    assert "metric" in out and "imperial" in out
    assert "lbf" in out


def test_bad_config_exits(tmp_path):
    path = tmp_path / "calc.json"
    path.write_text(json.dumps({"unit_system": "si"}), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(path)])
    assert exc.value.code == 2


def test_bad_units_exits():
    with pytest.raises(SystemExit) as exc:
        main(["--units", "si"])
    assert exc.value.code == 2


@pytest.mark.parametrize(
    "data",
    [
        {"digits": None},
        {"grouping": "false"},
        {"initial_inputs": [1, 2]},
    ],
)
def test_malformed_config_exits(tmp_path, capsys, data):
    path = tmp_path / "calc.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--config", str(path)])
    assert exc.value.code == 2
    assert "cannot load config" in capsys.readouterr().err


def test_table(capsys):
    assert main([*SCENARIO, "--table"]) == 0
    out = capsys.readouterr().out
    assert "Extend force" in out
    assert "26.51 kN" in out
    assert "Extend time" in out


def test_infinite_input_renders_zero(capsys):
    main(["--bore", "Infinity", "--json"])
    payload = json.loads(capsys.readouterr().out)
    assert payload["display"]["piston-area"] == "0 cm²"
