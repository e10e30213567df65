"""High-level entry points: cells in, HTML (or an opened page) out.

Usage
-----
>>> from h3viz import RenderOptions, show_cells
>>> show_cells(["8a1fb46622dffff"], RenderOptions(show_edge_length=True))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from .config import PublishConfig
from .document import assemble_document
from .features import build_features, normalize_groups
from .geometry import CellLike
from .models import CircleOverlay, RenderOptions
from .overlays import circle_instructions
from .publish import artifact_filename, publish

logger = logging.getLogger(__name__)


def generate_html(
    groups: Iterable[Iterable[CellLike]],
    options: Optional[RenderOptions] = None,
    circles: Iterable[CircleOverlay] = (),
) -> str:
    options = options or RenderOptions()
    collection = build_features(groups, options)
    return assemble_document(collection, circle_instructions(circles))


def show_in_browser(
    groups: Iterable[Iterable[CellLike]],
    options: Optional[RenderOptions] = None,
    circles: Iterable[CircleOverlay] = (),
    config: Optional[PublishConfig] = None,
    open_browser: bool = True,
) -> Path:
    """Render *groups*, write the page and open it.

    Returns the written path. Raises :class:`~h3viz.errors.LaunchError`
    (with ``.path`` set) if the page was written but could not be opened.
    """
    options = options or RenderOptions()
    groups = normalize_groups(groups)
    circles = tuple(circles)

    html = generate_html(groups, options, circles)
    filename = artifact_filename(groups, options, circles)
    logger.debug("Publishing %d group(s) as %s", len(groups), filename)
    return publish(html, filename, config=config, open_browser=open_browser)


def show_cells(
    cells: Iterable[CellLike],
    options: Optional[RenderOptions] = None,
    circles: Iterable[CircleOverlay] = (),
    config: Optional[PublishConfig] = None,
) -> Path:
    """Single-group shortcut for :func:`show_in_browser`."""
    return show_in_browser([list(cells)], options, circles, config)
