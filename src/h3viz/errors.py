"""Exception types raised by h3viz.

Each kind also derives from the built-in exception a caller would
naturally expect (``ValueError`` for bad cells, ``OSError`` for write
failures, ...), so existing ``except`` clauses keep working.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence


class H3VizError(Exception):
    """Base class for all h3viz errors."""


class AdapterError(H3VizError, ValueError):
    """The H3 layer could not produce geometry for a cell, edge or group."""


# Grouped rendering of mixed-resolution cells is a precondition failure.
PreconditionError = AdapterError


class TemplateError(H3VizError, RuntimeError):
    """Substituting data into the page template failed."""


class PersistError(H3VizError, OSError):
    """Every candidate output location refused the write."""

    def __init__(self, message: str, attempted: Sequence[Path] = ()) -> None:
        super().__init__(message)
        self.attempted: tuple[Path, ...] = tuple(Path(p) for p in attempted)


class LaunchError(H3VizError, RuntimeError):
    """The browser could not be started. The artifact stays on disk."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path
