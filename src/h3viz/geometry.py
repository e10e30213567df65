"""Geometry adapter over the ``h3`` package.

Everything the rest of h3viz knows about the hexagonal grid goes through
these functions. Positions are returned as GeoJSON mappings in
``[lng, lat]`` order; ``h3`` itself speaks ``(lat, lng)``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence, Tuple, Union

import h3

from .errors import AdapterError

CellLike = Union[str, int]

_H3_ERRORS = (h3.H3BaseException, ValueError, TypeError)


def normalize_cell(cell: CellLike) -> str:
    """Return *cell* as a validated H3 index string."""
    try:
        if isinstance(cell, int) and not isinstance(cell, bool):
            cell = h3.int_to_str(cell)
        if not isinstance(cell, str):
            raise TypeError(f"expected str or int, got {type(cell).__name__}")
        cell = cell.strip().lower()
        valid = h3.is_valid_cell(cell)
    except _H3_ERRORS as exc:
        raise AdapterError(f"Invalid H3 cell {cell!r}: {exc}") from exc
    if not valid:
        raise AdapterError(f"Invalid H3 cell {cell!r}")
    return cell


def cell_resolution(cell: str) -> int:
    try:
        return h3.get_resolution(cell)
    except _H3_ERRORS as exc:
        raise AdapterError(f"Cannot read resolution of {cell!r}: {exc}") from exc


def cell_sort_key(cell: str) -> int:
    """Canonical ordering key: the integer value of the index."""
    return h3.str_to_int(cell)


def _ring(latlngs: Iterable[Tuple[float, float]]) -> List[List[float]]:
    return [[lng, lat] for lat, lng in latlngs]


def cell_boundary(cell: str) -> Dict[str, Any]:
    """Closed GeoJSON Polygon for a single cell."""
    try:
        ring = _ring(h3.cell_to_boundary(cell))
    except _H3_ERRORS as exc:
        raise AdapterError(f"Cannot compute boundary of {cell!r}: {exc}") from exc
    ring.append(list(ring[0]))
    return {"type": "Polygon", "coordinates": [ring]}


def cell_edges(cell: str) -> List[str]:
    """Directed edges leaving *cell* (six for hexagons, five for pentagons)."""
    try:
        return list(h3.origin_to_directed_edges(cell))
    except _H3_ERRORS as exc:
        raise AdapterError(f"Cannot enumerate edges of {cell!r}: {exc}") from exc


def edge_cells(edge: str) -> Tuple[str, str]:
    try:
        origin, destination = h3.directed_edge_to_cells(edge)
    except _H3_ERRORS as exc:
        raise AdapterError(f"Invalid directed edge {edge!r}: {exc}") from exc
    return origin, destination


def edge_key(edge: str) -> Tuple[str, str]:
    """Unordered endpoint pair; an edge and its inverse share the same key."""
    origin, destination = edge_cells(edge)
    if cell_sort_key(origin) <= cell_sort_key(destination):
        return origin, destination
    return destination, origin


def edge_boundary(edge: str) -> Dict[str, Any]:
    try:
        coords = _ring(h3.directed_edge_to_boundary(edge))
    except _H3_ERRORS as exc:
        raise AdapterError(f"Cannot compute boundary of edge {edge!r}: {exc}") from exc
    return {"type": "LineString", "coordinates": coords}


def edge_length_m(edge: str) -> float:
    try:
        return float(h3.edge_length(edge, unit="m"))
    except _H3_ERRORS as exc:
        raise AdapterError(f"Cannot measure edge {edge!r}: {exc}") from exc


def cells_outline(cells: Sequence[str]) -> Dict[str, Any]:
    """Merged Polygon / MultiPolygon covering *cells*.

    All cells must share one resolution.
    """
    resolutions = sorted({cell_resolution(c) for c in cells})
    if len(resolutions) > 1:
        raise AdapterError(
            f"Cannot merge cells of different resolutions {resolutions} into one outline"
        )
    try:
        geo = h3.cells_to_geo(list(cells))
    except _H3_ERRORS as exc:
        raise AdapterError(f"Cannot merge {len(cells)} cells into an outline: {exc}") from exc
    return {"type": geo["type"], "coordinates": _listify(geo["coordinates"])}


def _listify(value):
    if isinstance(value, (list, tuple)):
        return [_listify(v) for v in value]
    return value
