"""Cell groups → GeoJSON feature collection.

Two mutually exclusive layouts are supported:

- **separate** — one polygon per cell, labelled with its resolution and/or
  index, plus (optionally) one line per physical cell boundary labelled
  with its length.
- **grouped** — one merged outline per group, no labels.

The layout is picked once by :func:`select_mode`. Passing more than one
group always selects the grouped layout, whatever the options say.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from .geometry import (
    CellLike,
    cell_boundary,
    cell_edges,
    cell_resolution,
    cell_sort_key,
    cells_outline,
    edge_boundary,
    edge_key,
    edge_length_m,
    normalize_cell,
)
from .models import Feature, FeatureCollection, RenderOptions

logger = logging.getLogger(__name__)

LINE_BREAK = "<br>"


class RenderMode(Enum):
    SEPARATE = "separate"
    GROUPED = "grouped"


def normalize_groups(groups: Iterable[Iterable[CellLike]]) -> Tuple[Tuple[str, ...], ...]:
    """Copy caller groups into tuples of validated cell strings."""
    return tuple(tuple(normalize_cell(c) for c in group) for group in groups)


def select_mode(groups: Sequence[Sequence[str]], options: RenderOptions) -> RenderMode:
    if options.render_cells_separately and len(groups) == 1:
        return RenderMode.SEPARATE
    return RenderMode.GROUPED


def build_features(
    groups: Iterable[Iterable[CellLike]],
    options: Optional[RenderOptions] = None,
) -> FeatureCollection:
    """Build the feature collection for *groups* under *options*."""
    options = options or RenderOptions()
    groups = normalize_groups(groups)
    mode = select_mode(groups, options)
    logger.debug("Rendering %d group(s) in %s mode", len(groups), mode.value)

    if mode is RenderMode.SEPARATE:
        features = _separate_features(groups[0], options)
    else:
        features = _grouped_features(groups)
    return FeatureCollection(tuple(features))


# ═══════════════════════════════════════════════════════════════════
# Labels
# ═══════════════════════════════════════════════════════════════════

def cell_label(cell: str, options: RenderOptions) -> str:
    parts: List[str] = []
    if options.show_resolution:
        parts.append(f"Res: {cell_resolution(cell)}")
    if options.show_cell_index:
        parts.append(cell)
    return LINE_BREAK.join(parts)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_edge_length(meters: float) -> str:
    """``"2 km"`` above one kilometre, ``"999 m"`` otherwise."""
    if meters > 1000:
        return f"{_round_half_up(meters / 1000)} km"
    return f"{_round_half_up(meters)} m"


# ═══════════════════════════════════════════════════════════════════
# Layouts
# ═══════════════════════════════════════════════════════════════════

def _separate_features(cells: Sequence[str], options: RenderOptions) -> List[Feature]:
    features: List[Feature] = []
    seen_edges: Set[Tuple[str, str]] = set()

    for cell in cells:
        features.append(Feature(cell_boundary(cell), {"label": cell_label(cell, options)}))
        if not options.show_edge_length:
            continue
        for edge in cell_edges(cell):
            key = edge_key(edge)
            if key in seen_edges:
                continue
            seen_edges.add(key)
            label = format_edge_length(edge_length_m(edge))
            features.append(Feature(edge_boundary(edge), {"label": label}))

    logger.debug("Built %d cell and %d edge features", len(cells), len(seen_edges))
    return features


def _grouped_features(groups: Sequence[Sequence[str]]) -> List[Feature]:
    features: List[Feature] = []
    for index, group in enumerate(groups):
        cells = sorted(set(group), key=cell_sort_key)
        if not cells:
            logger.debug("Skipping empty group %d", index)
            continue
        features.append(Feature(cells_outline(cells)))
    return features
