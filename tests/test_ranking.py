"""
Unit tests for ranking clusters into palette entries and display sorting.
"""

import pytest

from palette_extract.core_types import Cluster, PaletteColor
from palette_extract.ranking import rank_clusters, sort_palette


@pytest.fixture
def rgb_clusters():
    return [
        Cluster((255, 0, 0), 2),
        Cluster((0, 255, 0), 1),
        Cluster((0, 0, 255), 1),
    ]


class TestRankClusters:
    def test_formats_entries(self, rgb_clusters):
        palette = rank_clusters(rgb_clusters, 10)
        assert palette == [
            PaletteColor("#ff0000", "#000000", 2, 0.5),
            PaletteColor("#00ff00", "#000000", 1, 0.25),
            PaletteColor("#0000ff", "#FFFFFF", 1, 0.25),
        ]

    def test_truncation_keeps_shares_of_full_total(self, rgb_clusters):
        palette = rank_clusters(rgb_clusters, 2)
        assert [p.percentage for p in palette] == [0.5, 0.25]

    @pytest.mark.parametrize("size", [0, -3, 0.4])
    def test_palette_size_clamped_to_one(self, rgb_clusters, size):
        palette = rank_clusters(rgb_clusters, size)
        assert len(palette) == 1
        assert palette[0].palette_color == "#ff0000"

    def test_sorts_descending_keeping_tie_order(self):
        clusters = [Cluster((1, 1, 1), 1), Cluster((2, 2, 2), 2), Cluster((3, 3, 3), 1)]
        palette = rank_clusters(clusters, 10)
        assert [p.palette_color for p in palette] == ["#020202", "#010101", "#030303"]

    def test_empty(self):
        assert rank_clusters([], 10) == []


class TestSortPalette:
    @pytest.fixture
    def palette(self):
        return [
            PaletteColor("#ff0000", "#000000", 5, 0.5),
            PaletteColor("#00ff00", "#000000", 2, 0.2),
            PaletteColor("#0000ff", "#FFFFFF", 3, 0.3),
        ]

    def test_population(self, palette):
        assert [p.population for p in sort_palette(palette, "population")] == [5, 3, 2]

    def test_population_ascending(self, palette):
        assert [p.population for p in sort_palette(palette, "population-asc")] == [2, 3, 5]

    def test_hex(self, palette):
        assert [p.palette_color for p in sort_palette(palette, "hex")] == [
            "#0000ff",
            "#00ff00",
            "#ff0000",
        ]

    def test_unknown_mode(self, palette):
        with pytest.raises(ValueError):
            sort_palette(palette, "hue")
