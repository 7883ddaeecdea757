import json

import pytest

from py_driftcalc.__main__ import format_table, main
from py_driftcalc import Calculator
from tests.fixtures_and_helpers import create_308_input, create_308_record

CALC_ARGS = ["calc", "-mv", "823", "-w", "10.9", "-bc", "0.462", "-zd", "91", "-sd", "457", "-wv", "4.5"]


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


class TestCalc:

    def test_table(self, capsys):
        assert main(CALC_ARGS) == 0
        out = capsys.readouterr().out
        assert "Distance" in out
        assert "450 m" in out
        assert "-38 mm" in out

    def test_json(self, capsys):
        assert main(CALC_ARGS + ["--json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert rows == Calculator().fire(create_308_input()).to_list()

    def test_input_file(self, tmp_path, capsys):
        path = tmp_path / "shot.json"
        path.write_text(json.dumps(create_308_record()), encoding="utf-8")
        assert main(["calc", "-i", str(path), "--json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert rows[-1]['distance'] == 450

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "custom.toml"
        path.write_text("[pydc]\ncLongRangeStep = 150\n", encoding="utf-8")
        assert main(["-c", str(path)] + CALC_ARGS + ["--json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert [row['distance'] for row in rows] == [0, 150, 300, 450]

    def test_missing_required(self):
        assert main(["calc", "-mv", "823", "-w", "10.9"]) == 2

    def test_invalid_value(self):
        assert main(["calc", "-mv", "0", "-w", "10.9", "-bc", "0.462"]) == 2

    def test_missing_input_file(self, tmp_path):
        assert main(["calc", "-i", str(tmp_path / "missing.json")]) == 2

    def test_bad_input_file(self, tmp_path):
        path = tmp_path / "shot.json"
        path.write_text("{", encoding="utf-8")
        assert main(["calc", "-i", str(path)]) == 2

    def test_int_too_large_in_input_file(self, tmp_path):
        path = tmp_path / "shot.json"
        path.write_text(json.dumps(create_308_record(altitude=10 ** 400)), encoding="utf-8")
        assert main(["calc", "-i", str(path)]) == 2

    def test_range_error(self, tmp_path):
        path = tmp_path / "pydc.toml"
        path.write_text("[pydc]\ncMinimumVelocity = 800.0\n", encoding="utf-8")
        assert main(["-c", str(path)] + CALC_ARGS) == 1

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])


def test_format_table():
    hit_result = Calculator().fire(create_308_input(target_distance=100))
    lines = format_table(hit_result).splitlines()
    assert len(lines) == len(hit_result) + 2
    assert lines[0].split() == ['Distance', 'Velocity', 'Energy', 'Drop', 'Drift', 'Time', 'MOA', 'MIL']
    assert set(lines[1]) == {'-', ' '}
    assert len({len(line) for line in lines}) == 1
