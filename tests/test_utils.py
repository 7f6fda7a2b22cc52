"""
Tests for console formatting helpers.
"""

from palette_extract.core_types import PaletteColor
from palette_extract.utils import (
    error,
    format_number_compact,
    format_percentage,
    key_value_pairs_to_string,
    palette_line,
    print_config_line,
)


def test_format_percentage():
    assert format_percentage(0.25) == "25.0%"
    assert format_percentage(1.0, decimals=0) == "100%"


def test_format_number_compact():
    assert format_number_compact(1024) == "1,024"
    assert format_number_compact(0.5) == "0.5"
    assert format_number_compact(50.0) == "50"


def test_key_value_pairs():
    assert key_value_pairs_to_string([("Size", 10), ("JSON", True)]) == "Size: 10  JSON: on"


def test_palette_line():
    line = palette_line(PaletteColor("#ff0000", "#000000", 1234, 0.5))
    assert "#ff0000" in line
    assert "text=#000000" in line
    assert "pixels=1,234" in line
    assert "share=50.0%" in line
    assert "hue=0.0°" in line


def test_config_line_routes_debug(capsys):
    print_config_line("extract", [("Step", 2)], debug=True)
    print_config_line("extract", [("Step", 2)], debug=False)
    out = capsys.readouterr().out.splitlines()
    assert out == ["[debug] [extract] Step: 2", "[extract] Step: 2"]


def test_error_goes_to_stderr(capsys):
    error("boom")
    captured = capsys.readouterr()
    assert captured.err == "[error] boom\n"
    assert captured.out == ""
