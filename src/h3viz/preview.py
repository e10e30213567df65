from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from .features import LINE_BREAK
from .models import Feature, FeatureCollection


def render_png(
    collection: FeatureCollection,
    output_path: str | Path,
    face_alpha: float = 0.15,
    edge_color: str = "#2b2b2b",
    face_color: str = "#5aa9e6",
    line_color: str = "#d1495b",
    show_labels: bool = True,
    padding: float = 0.0005,
    dpi: int = 150,
) -> Path:
    """Draw a feature collection to PNG in plain lng/lat axes.

    Requires matplotlib; imported lazily so the HTML path stays lightweight.
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import Polygon
    except ImportError as exc:  # pragma: no cover - requires optional dep
        raise RuntimeError(
            "matplotlib is required for PNG previews. Install with `pip install h3viz[render]`."
        ) from exc

    if not len(collection):
        raise ValueError("Nothing to render: the feature collection is empty.")

    fig, ax = plt.subplots()
    xs: List[float] = []
    ys: List[float] = []

    for feature in collection:
        geometry = feature.geometry
        if geometry["type"] == "LineString":
            line = geometry["coordinates"]
            lx, ly = zip(*line)
            ax.plot(lx, ly, color=line_color, linewidth=1.5, zorder=2)
            xs.extend(lx)
            ys.extend(ly)
        else:
            for ring in _exterior_rings(geometry):
                ax.add_patch(
                    Polygon(ring, closed=True, facecolor=face_color, alpha=face_alpha)
                )
                rx, ry = zip(*ring)
                ax.plot(rx, ry, color=edge_color, linewidth=1.0, zorder=1)
                xs.extend(rx)
                ys.extend(ry)
        if show_labels and feature.label:
            cx, cy = _label_anchor(feature)
            ax.annotate(
                feature.label.replace(LINE_BREAK, "\n"),
                (cx, cy),
                ha="center",
                va="center",
                fontsize=6,
                zorder=3,
            )

    ax.set_aspect("equal", "datalim")
    ax.set_xlim(min(xs) - padding, max(xs) + padding)
    ax.set_ylim(min(ys) - padding, max(ys) + padding)
    ax.axis("off")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight", pad_inches=0)
    plt.close(fig)
    return output_path


def _exterior_rings(geometry: dict) -> Iterable[Sequence[Sequence[float]]]:
    if geometry["type"] == "Polygon":
        return [geometry["coordinates"][0]]
    return [polygon[0] for polygon in geometry["coordinates"]]


def _label_anchor(feature: Feature) -> Tuple[float, float]:
    geometry = feature.geometry
    if geometry["type"] == "LineString":
        points = geometry["coordinates"]
    else:
        ring = list(_exterior_rings(geometry))[0]
        points = ring[:-1] if len(ring) > 1 and ring[0] == ring[-1] else ring
    cx = sum(p[0] for p in points) / len(points)
    cy = sum(p[1] for p in points) / len(points)
    return cx, cy
