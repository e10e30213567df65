"""Where rendered pages are written."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

OUTPUT_DIR_ENV = "H3VIZ_OUTPUT_DIR"


def _default_output_dir() -> Path:
    return Path(tempfile.gettempdir()) / "h3viz"


@dataclass(frozen=True)
class PublishConfig:
    """Output locations for the artifact publisher.

    Attributes
    ----------
    output_dir : Path
        Tried first.
    fallback_dir : Path
        Used when writing to *output_dir* fails.
    """

    output_dir: Path = field(default_factory=_default_output_dir)
    fallback_dir: Path = field(default_factory=Path.cwd)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PublishConfig":
        environ = os.environ if environ is None else environ
        override = environ.get(OUTPUT_DIR_ENV)
        if override:
            return cls(output_dir=Path(override).expanduser())
        return cls()
