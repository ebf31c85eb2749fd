"""Loading of textures and sound effects from asset directories."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pygame

from uyta.utils import PathType

DEFAULT_TEXTURES_DIR = "static/textures"
DEFAULT_SOUNDS_DIR = "static/sfx"


def asset_name(filename: str) -> str:
    """The key an asset file is known by: its name up to the first dot."""
    return filename.split(".", 1)[0]


def _asset_files(directory: PathType):
    for entry in sorted(Path(directory).iterdir()):
        if entry.is_file():
            yield entry


def load_textures(directory: PathType = DEFAULT_TEXTURES_DIR) -> Dict[str, Any]:
    """Load every image in ``directory`` keyed by :func:`asset_name`.

    Raises ``FileNotFoundError`` for a missing directory and ``pygame.error``
    for a file that is not a readable image.
    """
    return {
        asset_name(entry.name): pygame.image.load(str(entry))
        for entry in _asset_files(directory)
    }


def load_sounds(directory: PathType = DEFAULT_SOUNDS_DIR) -> Dict[str, Any]:
    """Load every sound in ``directory`` keyed by :func:`asset_name`.

    The mixer must be initialised before any file is loaded.
    """
    return {
        asset_name(entry.name): pygame.mixer.Sound(str(entry))
        for entry in _asset_files(directory)
    }