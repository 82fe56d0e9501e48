"""
Tests for the command-line interface.
"""

import json

import pytest
from click.testing import CliRunner

from trailsplit.cli import cli
from trailsplit.shared.constants import SETTINGS_KEY


def _gpx(n=12):
    points = "\n".join(
        f'<trkpt lat="{51.0 + i * 0.002:.4f}" lon="3.7000"><ele>{100 + i * 20}</ele></trkpt>'
        for i in range(n)
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">\n'
        f"<trk><trkseg>\n{points}\n</trkseg></trk>\n</gpx>\n"
    )


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def gpx_file(tmp_path):
    path = tmp_path / "route.gpx"
    path.write_text(_gpx())
    return path


@pytest.fixture
def settings_file(tmp_path):
    return tmp_path / "settings.json"


class TestSegmentsCommand:

    def test_full_track(self, runner, gpx_file, settings_file):
        result = runner.invoke(cli, ["segments", str(gpx_file), "--settings-file", str(settings_file)])
        assert result.exit_code == 0, result.output
        assert "12 points, 0 markers" in result.output
        assert "Full track" in result.output

    def test_with_splits(self, runner, gpx_file, settings_file):
        result = runner.invoke(cli, [
            "segments", str(gpx_file),
            "--split", "4", "--split", "8:hotel",
            "--settings-file", str(settings_file),
        ])
        assert result.exit_code == 0, result.output
        assert "Track 1 [0-4] -> split" in result.output
        assert "Track 2 [4-8] -> hotel" in result.output
        assert "Track 3 [8-11]" in result.output
        assert "Total (cumulative)" in result.output

    def test_overrides_shown(self, runner, gpx_file, settings_file):
        result = runner.invoke(cli, [
            "segments", str(gpx_file), "--fitness", "4", "--backpack", "0",
            "--settings-file", str(settings_file),
        ])
        assert "fitness 4, backpack 0 kg" in result.output

    def test_split_out_of_range(self, runner, gpx_file, settings_file):
        result = runner.invoke(cli, [
            "segments", str(gpx_file), "--split", "99", "--settings-file", str(settings_file),
        ])
        assert result.exit_code == 1
        assert "outside track range" in result.output

    def test_bad_split_type(self, runner, gpx_file, settings_file):
        result = runner.invoke(cli, [
            "segments", str(gpx_file), "--split", "3:castle", "--settings-file", str(settings_file),
        ])
        assert result.exit_code == 2

    def test_empty_gpx(self, runner, tmp_path, settings_file):
        path = tmp_path / "empty.gpx"
        path.write_text(_gpx(0))
        result = runner.invoke(cli, ["segments", str(path), "--settings-file", str(settings_file)])
        assert result.exit_code == 1
        assert "No track points" in result.output

    def test_latin1_gpx(self, runner, tmp_path, settings_file):
        path = tmp_path / "col.gpx"
        path.write_bytes(
            _gpx().replace('encoding="UTF-8"', 'encoding="ISO-8859-1"')
            .replace("<trk>", "<trk><name>Col de lé</name>")
            .encode("latin-1")
        )
        result = runner.invoke(cli, ["segments", str(path), "--settings-file", str(settings_file)])
        assert result.exit_code == 0, result.output
        assert "12 points, 0 markers" in result.output

    def test_undecodable_gpx(self, runner, tmp_path, settings_file):
        path = tmp_path / "broken.gpx"
        path.write_bytes(_gpx().replace("<trk>", "<trk><name>Col de lé</name>").encode("latin-1"))
        result = runner.invoke(cli, ["segments", str(path), "--settings-file", str(settings_file)])
        assert result.exit_code == 1
        assert "Invalid GPX file" in result.output


class TestExportAndShow:

    def test_export_then_show(self, runner, gpx_file, tmp_path, settings_file):
        out_dir = tmp_path / "projects"
        result = runner.invoke(cli, [
            "export", str(gpx_file), "--split", "5:rest", "--output-dir", str(out_dir),
        ])
        assert result.exit_code == 0, result.output

        written = list(out_dir.glob("trail-project-*.json"))
        assert len(written) == 1
        data = json.loads(written[0].read_text())
        assert data["markers"] == [{"pointIndex": 5, "type": "rest"}]

        shown = runner.invoke(cli, ["show", str(written[0]), "--settings-file", str(settings_file)])
        assert shown.exit_code == 0, shown.output
        assert "Track 1 [0-5] -> rest" in shown.output

    def test_show_invalid_project(self, runner, tmp_path, settings_file):
        path = tmp_path / "broken.json"
        path.write_text(json.dumps({"version": "2.0"}))
        result = runner.invoke(cli, ["show", str(path), "--settings-file", str(settings_file)])
        assert result.exit_code == 1
        assert "trackPoints" in result.output


class TestSettingsCommand:

    def test_defaults(self, runner, settings_file):
        result = runner.invoke(cli, ["settings", "--settings-file", str(settings_file)])
        assert result.exit_code == 0
        assert "fitness_level: 2" in result.output
        assert "backpack_weight_kg: 15" in result.output
        assert not settings_file.exists()

    def test_update_persists(self, runner, settings_file):
        runner.invoke(cli, ["settings", "--fitness", "5", "--settings-file", str(settings_file)])
        stored = json.loads(settings_file.read_text())[SETTINGS_KEY]
        assert stored["fitnessLevel"] == 5
        assert stored["backpackWeightKg"] == 15.0

    def test_rejects_out_of_range(self, runner, settings_file):
        result = runner.invoke(cli, ["settings", "--fitness", "7", "--settings-file", str(settings_file)])
        assert result.exit_code == 2

    def test_stored_settings_used_by_segments(self, runner, gpx_file, settings_file):
        runner.invoke(cli, ["settings", "--fitness", "1", "--backpack", "5", "--settings-file", str(settings_file)])
        result = runner.invoke(cli, ["segments", str(gpx_file), "--settings-file", str(settings_file)])
        assert "fitness 1, backpack 5 kg" in result.output
