"""Circle overlays → Leaflet drawing statements."""

from __future__ import annotations

import json
import numbers
from typing import Iterable, List

from .models import CircleOverlay


def _js_number(value) -> str:
    # Plain int/float first: numpy scalars repr as "np.float64(...)".
    # json spells NaN and Infinity the way JavaScript does.
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return json.dumps(int(value))
    return json.dumps(float(value))


def circle_instruction(circle: CircleOverlay) -> str:
    # Values are passed through untouched; Leaflet decides what is drawable.
    lat = _js_number(circle.lat)
    lng = _js_number(circle.lng)
    radius = _js_number(circle.radius_meters)
    return f"L.circle([{lat}, {lng}], {{radius: {radius}}}).addTo(map);"


def circle_instructions(circles: Iterable[CircleOverlay]) -> List[str]:
    return [circle_instruction(c) for c in circles]
