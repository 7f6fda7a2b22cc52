"""
Tests for the extract_palette command-line entry point.
"""

import json

import pytest

import extract_palette as cli

from conftest import solid_rgba


@pytest.fixture
def red_png(write_png):
    return write_png("red.png", solid_rgba(6, 6, (255, 0, 0, 255)))


class TestMain:
    def test_text_output(self, red_png, capsys):
        assert cli.main([str(red_png), "--jobs", "1"]) == 0
        out = capsys.readouterr().out
        assert "=== red.png ===" in out
        assert "#ff0000" in out
        assert "share=100.0%" in out

    def test_json_output(self, red_png, capsys):
        assert cli.main([str(red_png), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["red.png"][0]["paletteColor"] == "#ff0000"
        assert data["red.png"][0]["textColor"] == "#000000"
        assert data["red.png"][0]["percentage"] == 1.0

    def test_missing_source(self, tmp_path, capsys):
        assert cli.main([str(tmp_path / "nope.png")]) == 2
        assert "[error]" in capsys.readouterr().err

    def test_folder_with_broken_file(self, tmp_path, write_png, capsys):
        write_png("a.png", solid_rgba(4, 4, (0, 0, 255, 255)))
        write_png("b.png", solid_rgba(4, 4, (0, 255, 0, 255)))
        (tmp_path / "c.png").write_bytes(b"not a png")
        (tmp_path / "notes.txt").write_text("ignored")

        assert cli.main([str(tmp_path), "--jobs", "2"]) == 1
        captured = capsys.readouterr()
        assert captured.out.index("=== a.png ===") < captured.out.index("=== b.png ===")
        assert "#0000ff" in captured.out
        assert "#00ff00" in captured.out
        assert "notes.txt" not in captured.out
        assert "c.png" in captured.err

    def test_sort_by_hex(self, write_png, capsys):
        arr = solid_rgba(4, 4, (255, 0, 0, 255))
        arr[:, :1] = (0, 0, 255, 255)
        path = write_png("two.png", arr)
        assert cli.main([str(path), "--json", "--sort", "hex", "--step", "1", "--threshold", "0"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [c["paletteColor"] for c in data["two.png"]] == ["#0000ff", "#ff0000"]

    def test_transparent_image_reports_empty(self, write_png, capsys):
        path = write_png("clear.png", solid_rgba(4, 4, (0, 0, 0, 0)))
        assert cli.main([str(path)]) == 0
        assert "palette is empty" in capsys.readouterr().out


class TestArgs:
    def test_defaults(self, tmp_path):
        args = cli.parse_cli_args([str(tmp_path)])
        assert args.size == 10
        assert args.max_resolution == 1024
        assert args.step == 2
        assert args.threshold == 50
        assert args.sort == "population"
        assert not args.json

    def test_invalid_sort_rejected(self, tmp_path):
        with pytest.raises(SystemExit):
            cli.parse_cli_args([str(tmp_path), "--sort", "hue"])


def test_empty_folder_warns(tmp_path, capsys):
    assert cli.main([str(tmp_path)]) == 0
    assert "[warn] no images found" in capsys.readouterr().out


def test_oversized_image_reported_and_batch_continues(tmp_path, write_png, monkeypatch, capsys):
    from PIL import Image

    write_png("a.png", solid_rgba(100, 100, (255, 0, 0, 255)))
    write_png("b.png", solid_rgba(4, 4, (0, 255, 0, 255)))
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

    assert cli.main([str(tmp_path), "--jobs", "1"]) == 1
    captured = capsys.readouterr()
    assert "a.png" in captured.err
    assert "#00ff00" in captured.out


def test_config_line_shows_debug_flag(red_png, capsys):
    assert cli.main([str(red_png), "--debug"]) == 0
    assert "Debug: on" in capsys.readouterr().out
