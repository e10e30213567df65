from __future__ import annotations

import json
from pathlib import Path
from typing import List, Sequence, Union

PathLike = Union[str, Path]


def load_cell_groups(path: PathLike) -> List[List[str]]:
    """Read cell groups from *path*.

    JSON files hold either a flat list of cells (one group) or a list of
    lists. Anything else is read as text: one cell per line, blank lines
    separate groups, ``#`` starts a comment.
    """
    text = Path(path).read_text(encoding="utf-8")
    if Path(path).suffix.lower() == ".json":
        return _groups_from_json(json.loads(text))
    return _groups_from_text(text)


def save_cell_groups(groups: Sequence[Sequence[str]], path: PathLike) -> None:
    data = [[str(cell) for cell in group] for group in groups]
    Path(path).write_text(json.dumps(data, indent=2), encoding="utf-8")


def _groups_from_json(data) -> List[List[str]]:
    if not isinstance(data, list):
        raise ValueError("Cell file must contain a JSON list")
    if all(isinstance(item, list) for item in data):
        return [[_cell_from_json(c) for c in group] for group in data]
    return [[_cell_from_json(c) for c in data]]


def _cell_from_json(value) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValueError(f"Not a cell identifier: {value!r}")
    return value if isinstance(value, str) else format(value, "x")


def _groups_from_text(text: str) -> List[List[str]]:
    groups: List[List[str]] = []
    current: List[str] = []
    for raw in text.splitlines():
        line = raw.split("#", 1)[0].strip()
        if line:
            current.append(line)
        elif current and not raw.strip():
            groups.append(current)
            current = []
    if current:
        groups.append(current)
    return groups
