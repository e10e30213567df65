"""h3viz — render H3 cells on an interactive map for visual debugging.

Public API is organised into layers:

- **Core** — models, errors, geometry adapter
- **Building** — feature collections and circle overlays
- **Output** — HTML document, publishing, high-level viewer
- **Rendering** — static PNG preview (requires matplotlib)
"""

# ── Core ────────────────────────────────────────────────────────────
from .models import CircleOverlay, Feature, FeatureCollection, RenderOptions
from .errors import (
    H3VizError,
    AdapterError,
    PreconditionError,
    TemplateError,
    PersistError,
    LaunchError,
)
from .io import load_cell_groups, save_cell_groups

# ── Building ────────────────────────────────────────────────────────
from .features import (
    RenderMode,
    build_features,
    cell_label,
    format_edge_length,
    select_mode,
)
from .overlays import circle_instruction, circle_instructions

# ── Output ──────────────────────────────────────────────────────────
from .document import assemble_document
from .config import PublishConfig
from .publish import artifact_filename, launch, persist, persist_with_fallback, publish
from .viewer import generate_html, show_cells, show_in_browser

# ── Rendering (requires matplotlib) ────────────────────────────────
from .preview import render_png

__all__ = [
    # Core
    "CircleOverlay",
    "Feature",
    "FeatureCollection",
    "RenderOptions",
    "H3VizError",
    "AdapterError",
    "PreconditionError",
    "TemplateError",
    "PersistError",
    "LaunchError",
    "load_cell_groups",
    "save_cell_groups",
    # Building
    "RenderMode",
    "build_features",
    "cell_label",
    "format_edge_length",
    "select_mode",
    "circle_instruction",
    "circle_instructions",
    # Output
    "assemble_document",
    "PublishConfig",
    "artifact_filename",
    "launch",
    "persist",
    "persist_with_fallback",
    "publish",
    "generate_html",
    "show_cells",
    "show_in_browser",
    # Rendering
    "render_png",
]
