"""Tests for the static PNG preview."""

import h3
import pytest

from h3viz.features import build_features
from h3viz.models import FeatureCollection, RenderOptions
from h3viz.preview import render_png

CENTER = "8a1fb46622dffff"


class TestRenderPng:

    def test_separate_cells_with_edges(self, tmp_path):
        collection = build_features(
            [sorted(h3.grid_disk(CENTER, 1))],
            RenderOptions(show_cell_index=True, show_edge_length=True),
        )
        out = render_png(collection, tmp_path / "cells.png")
        assert out.exists()
        assert out.stat().st_size > 0

    def test_grouped_outline(self, tmp_path):
        collection = build_features(
            [sorted(h3.grid_disk(CENTER, 2))], RenderOptions(render_cells_separately=False)
        )
        out = render_png(collection, tmp_path / "nested" / "outline.png", show_labels=False)
        assert out.exists()

    def test_empty_collection_raises(self, tmp_path):
        with pytest.raises(ValueError, match="empty"):
            render_png(FeatureCollection(), tmp_path / "empty.png")
