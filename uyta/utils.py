"""Small helpers shared across the game."""

from __future__ import annotations

import json
from os import PathLike
from typing import Any, Union

PathType = Union[str, "PathLike[str]"]


def parse_json(path: PathType) -> Any:
    """Read the JSON document stored at ``path`` and return the decoded value.

    Raises ``OSError`` when the file cannot be read and
    ``json.JSONDecodeError`` when its contents are not valid JSON.
    """
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)