from __future__ import annotations

import copy
import json
import numbers
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class RenderOptions:
    """Display flags for one render call.

    *show_cell_index*, *show_edge_length* and *show_resolution* only take
    effect when cells are rendered separately.
    """

    show_cell_index: bool = False
    show_edge_length: bool = False
    show_resolution: bool = True
    render_cells_separately: bool = True
    output_filename: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CircleOverlay:
    """A circle drawn on the map, independent of any cell."""

    lat: float
    lng: float
    radius_meters: int

    def to_dict(self) -> Dict[str, Any]:
        radius = self.radius_meters
        radius = int(radius) if isinstance(radius, numbers.Integral) else float(radius)
        return {"lat": float(self.lat), "lng": float(self.lng), "radius_meters": radius}


@dataclass(frozen=True)
class Feature:
    geometry: Dict[str, Any]
    properties: Dict[str, str] = field(default_factory=dict)

    @property
    def label(self) -> Optional[str]:
        return self.properties.get("label")

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "geometry": copy.deepcopy(self.geometry),
            "properties": dict(self.properties),
        }


@dataclass(frozen=True)
class FeatureCollection:
    """Ordered features; order only affects drawing order."""

    features: Tuple[Feature, ...] = ()

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self):
        return iter(self.features)

    @property
    def cell_features(self) -> Tuple[Feature, ...]:
        return tuple(f for f in self.features if f.geometry["type"] != "LineString")

    @property
    def edge_features(self) -> Tuple[Feature, ...]:
        return tuple(f for f in self.features if f.geometry["type"] == "LineString")

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "FeatureCollection",
            "features": [f.to_geojson() for f in self.features],
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_geojson(), indent=indent)
