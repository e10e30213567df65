import h3
import pytest

from h3viz.errors import AdapterError
from h3viz.geometry import (
    cell_boundary,
    cell_edges,
    cell_resolution,
    cells_outline,
    edge_boundary,
    edge_cells,
    edge_key,
    edge_length_m,
    normalize_cell,
)

CENTER = "8a1fb46622dffff"


def test_normalize_accepts_int_and_uppercase():
    assert normalize_cell(0x8A1FB46622DFFFF) == CENTER
    assert normalize_cell(CENTER.upper()) == CENTER


@pytest.mark.parametrize("bad", ["", "zzz", "8a1fb46622dfff", None, 1.5])
def test_normalize_rejects_garbage(bad):
    with pytest.raises(AdapterError):
        normalize_cell(bad)


def test_adapter_error_is_value_error():
    with pytest.raises(ValueError):
        normalize_cell("nope")


def test_cell_resolution():
    assert cell_resolution(CENTER) == 10


def test_cell_boundary_is_closed_lnglat_ring():
    polygon = cell_boundary(CENTER)
    ring = polygon["coordinates"][0]
    assert polygon["type"] == "Polygon"
    assert ring[0] == ring[-1]
    assert len(ring) == len(h3.cell_to_boundary(CENTER)) + 1

    lat, lng = h3.cell_to_boundary(CENTER)[0]
    assert ring[0] == [lng, lat]


def test_edge_key_matches_inverse():
    neighbour = sorted(h3.grid_ring(CENTER, 1))[0]
    forward = h3.cells_to_directed_edge(CENTER, neighbour)
    backward = h3.cells_to_directed_edge(neighbour, CENTER)
    assert forward != backward
    assert edge_key(forward) == edge_key(backward)
    assert set(edge_key(forward)) == {CENTER, neighbour}


def test_cell_edges_originate_at_cell():
    for edge in cell_edges(CENTER):
        assert edge_cells(edge)[0] == CENTER


def test_edge_boundary_and_length():
    edge = cell_edges(CENTER)[0]
    line = edge_boundary(edge)
    assert line["type"] == "LineString"
    assert len(line["coordinates"]) == 2
    assert 0 < edge_length_m(edge) < 1000


def test_invalid_edge():
    with pytest.raises(AdapterError):
        edge_cells(CENTER)


def test_cells_outline_single_cell():
    outline = cells_outline([CENTER])
    assert outline["type"] in ("Polygon", "MultiPolygon")
    assert outline["coordinates"]


def test_cells_outline_mixed_resolution():
    with pytest.raises(AdapterError, match="different resolutions"):
        cells_outline([CENTER, h3.cell_to_parent(CENTER, 8)])
