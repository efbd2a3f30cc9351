import json
import os
import subprocess
import sys

import pytest

from pawtrails.cli import build_parser, main

SAMPLE_GPX_PATH = os.path.join(
    os.path.dirname(__file__), "data", "sample_hike.gpx"
)


def run_cli(*args, cwd=None):
    return subprocess.run(
        [sys.executable, "-m", "pawtrails", *args],
        capture_output=True,
        text=True,
        cwd=cwd,
    )


class TestCli:
    def test_run_with_sample_file(self, tmp_path):
        result = run_cli(SAMPLE_GPX_PATH, cwd=tmp_path)
        assert result.returncode == 0
        output = result.stdout
        assert "PawTrails Activity" in output
        assert "Samples:        20" in output
        assert "Distance:" in output
        assert "Duration:       00:19:00" in output
        assert "Pace:" in output
        assert "Elevation Gain:" in output
        assert "Min Elevation:  328 ft" in output
        assert "Activity:" in output
        assert "Terrain:        Hilly" in output

    def test_analysis_output(self, tmp_path):
        result = run_cli(
            SAMPLE_GPX_PATH, "--pet-name", "Biscuit", "--breed", "Border Collie", "--energy", "High",
            cwd=tmp_path,
        )
        assert result.returncode == 0
        assert "=== Analysis ===" in result.stdout
        assert "Biscuit had a 19-minute" in result.stdout
        assert "herding breed" in result.stdout

    def test_save_and_chart(self, tmp_path):
        store_path = tmp_path / "hikes.json"
        chart_path = tmp_path / "profile.png"
        result = run_cli(
            SAMPLE_GPX_PATH, "--save", str(store_path), "--chart", str(chart_path),
            "--trail-name", "Sample Loop", cwd=tmp_path,
        )
        assert result.returncode == 0
        hikes = json.loads(store_path.read_text())
        assert len(hikes) == 1
        assert hikes[0]["custom_trail_name"] == "Sample Loop"
        assert len(hikes[0]["gps_data"]) == 20
        assert chart_path.read_bytes().startswith(b"\x89PNG")

    def test_small_buffer(self, tmp_path):
        result = run_cli(SAMPLE_GPX_PATH, "--max-samples", "5", cwd=tmp_path)
        assert result.returncode == 0
        assert "Samples:        5" in result.stdout

    def test_nonexistent_file(self, tmp_path):
        result = run_cli("/nonexistent/file.gpx", cwd=tmp_path)
        assert result.returncode != 0
        assert "Error" in result.stderr

    def test_too_few_points(self, tmp_path):
        gpx = tmp_path / "one.gpx"
        gpx.write_text("""<?xml version="1.0"?>
        <gpx version="1.1" xmlns="http://www.topografix.com/GPX/1/1">
          <trk><trkseg><trkpt lat="47.0" lon="-122.0"><ele>100</ele></trkpt></trkseg></trk>
        </gpx>""")
        result = run_cli(str(gpx), cwd=tmp_path)
        assert result.returncode == 1
        assert "fewer than 2 track points" in result.stderr

    def test_local_config_sets_buffer(self, tmp_path):
        (tmp_path / "pawtrails.json").write_text(json.dumps({"max_samples": 3}))
        result = run_cli(SAMPLE_GPX_PATH, cwd=tmp_path)
        assert result.returncode == 0
        assert "Samples:        3" in result.stdout


class TestMain:
    def test_in_process(self, capsys, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        main([SAMPLE_GPX_PATH, "--elevation-scale", "1.0"])
        out = capsys.readouterr().out
        assert "Min Elevation:  100 ft" in out
        assert "Max Elevation:  155 ft" in out

    def test_missing_file_exits(self, capsys, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(SystemExit) as exc:
            main(["/nonexistent/file.gpx"])
        assert exc.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_parser_defaults_from_config(self):
        args = build_parser({"max_samples": 42}).parse_args(["track.gpx"])
        assert args.max_samples == 42
        assert args.save is None
