"""Naming, writing and opening rendered pages.

Filenames are derived from a canonical JSON form of the render inputs so
that identical calls reuse one file and different calls do not collide.
Group and cell order is part of that form: in the separate-cells layout
it is the drawing order.
"""

from __future__ import annotations

import hashlib
import json
import logging
import webbrowser
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .config import PublishConfig
from .errors import LaunchError, PersistError
from .models import CircleOverlay, RenderOptions

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

FILENAME_PREFIX = "h3viz-"
_DIGEST_LENGTH = 16


def canonical_payload(
    groups: Sequence[Sequence[str]],
    options: RenderOptions,
    circles: Iterable[CircleOverlay] = (),
) -> str:
    payload = {
        "groups": [list(group) for group in groups],
        "options": options.to_dict(),
        "circles": [c.to_dict() for c in circles],
    }
    return json.dumps(payload, sort_keys=True, separators=(",", ":"))


def artifact_filename(
    groups: Sequence[Sequence[str]],
    options: RenderOptions,
    circles: Iterable[CircleOverlay] = (),
) -> str:
    if options.output_filename:
        return options.output_filename
    digest = hashlib.sha256(canonical_payload(groups, options, circles).encode("utf-8"))
    return f"{FILENAME_PREFIX}{digest.hexdigest()[:_DIGEST_LENGTH]}.html"


def persist(data: bytes, path: PathLike) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def persist_with_fallback(
    data: bytes,
    filename: PathLike,
    config: Optional[PublishConfig] = None,
) -> Path:
    """Write *data* under the primary directory, else under the fallback one.

    An absolute *filename* is written as-is (no fallback).
    """
    config = config or PublishConfig.from_env()
    filename = Path(filename)
    if filename.is_absolute():
        candidates: List[Path] = [filename]
    else:
        candidates = [config.output_dir / filename, config.fallback_dir / filename]

    errors: List[str] = []
    for index, candidate in enumerate(candidates):
        try:
            written = persist(data, candidate)
        except OSError as exc:
            errors.append(f"{candidate}: {exc}")
            if index + 1 < len(candidates):
                logger.warning("Could not write %s (%s); trying fallback location", candidate, exc)
            continue
        logger.info("Wrote %s", written)
        return written

    raise PersistError(
        "Could not write rendered document: " + "; ".join(errors),
        attempted=candidates,
    )


def launch(path: PathLike) -> None:
    path = Path(path).resolve()
    try:
        opened = webbrowser.open(path.as_uri())
    except webbrowser.Error as exc:
        raise LaunchError(f"Could not open {path} in a browser: {exc}", path=path) from exc
    if not opened:
        raise LaunchError(f"No browser available to open {path}", path=path)


def publish(
    document: str,
    filename: PathLike,
    config: Optional[PublishConfig] = None,
    open_browser: bool = True,
) -> Path:
    """Persist *document* and optionally open it.

    A launch failure raises :class:`LaunchError` whose ``path`` points at
    the file that was already written.
    """
    path = persist_with_fallback(document.encode("utf-8"), filename, config)
    if open_browser:
        launch(path)
    return path
