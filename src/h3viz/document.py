"""Feature collection + overlay statements → standalone Leaflet page."""

from __future__ import annotations

from typing import Sequence

import jinja2

from .errors import TemplateError
from .models import FeatureCollection

LEAFLET_VERSION = "1.9.4"

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{{ title|e }}</title>
    <link rel="stylesheet" href="https://unpkg.com/leaflet@{{ leaflet_version }}/dist/leaflet.css" />
    <script src="https://unpkg.com/leaflet@{{ leaflet_version }}/dist/leaflet.js"></script>
    <style>
        html, body { height: 100%; margin: 0; }
        #map { height: 100%; width: 100%; }
    </style>
</head>
<body>
    <div id="map"></div>
    <script>
        const map = L.map('map');

        L.tileLayer('https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png', {
            maxZoom: 19,
            attribution: '&copy; OpenStreetMap contributors'
        }).addTo(map);

        const data = {{ geojson }};

        const layer = L.geoJSON(data, {
            style: function (feature) {
                return feature.geometry.type === 'LineString'
                    ? { color: '#d1495b', weight: 3 }
                    : { color: '#2b2b2b', weight: 1, fillColor: '#5aa9e6', fillOpacity: 0.15 };
            },
            onEachFeature: function (feature, featureLayer) {
                const label = feature.properties && feature.properties.label;
                if (!label) {
                    return;
                }
                featureLayer.on('click', function () {
                    featureLayer.bindTooltip(label, { permanent: true }).openTooltip();
                });
            }
        }).addTo(map);

        if (layer.getBounds().isValid()) {
            map.fitBounds(layer.getBounds());
        } else {
            map.setView([0, 0], 2);
        }
{% for statement in overlays %}
        {{ statement }}
{%- endfor %}
    </script>
</body>
</html>
"""

_environment = jinja2.Environment(
    undefined=jinja2.StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
)


def _embed_json(collection: FeatureCollection) -> str:
    # A label containing "</script>" must not close the script block.
    return collection.to_json().replace("</", "<\\/")


def assemble_document(
    collection: FeatureCollection,
    overlays: Sequence[str] = (),
    title: str = "h3viz",
) -> str:
    """Render the page for *collection* with *overlays* appended to the map script."""
    try:
        template = _environment.from_string(PAGE_TEMPLATE)
        return template.render(
            title=title,
            leaflet_version=LEAFLET_VERSION,
            geojson=_embed_json(collection),
            overlays=list(overlays),
        )
    except jinja2.TemplateError as exc:
        raise TemplateError(f"Failed to render map document: {exc}") from exc
