"""A smoothly following 2D camera steered with the W, A, S and D keys."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Collection, Optional, Protocol, Tuple

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
CAMERA_SPEED = 500.0
CAMERA_SMOOTHING = 10.0

Vec = Tuple[float, float]
Size = Tuple[int, int]


class _Tutorial(Protocol):
    def complete_step(self, index: int) -> None: ...


def lerp(start: float, end: float, amount: float) -> float:
    """Linear interpolation from ``start`` to ``end`` by ``amount``."""
    return start + amount * (end - start)


def _normalized(x: float, y: float) -> Vec:
    length = math.hypot(x, y)
    if length == 0:
        return (0.0, 0.0)
    return (x / length, y / length)


@dataclass
class Camera2D:
    """A 2D view: ``target`` in the world is shown at ``offset`` on screen."""

    target: Vec = (0.0, 0.0)
    offset: Vec = (0.0, 0.0)
    zoom: float = 1.0
    rotation: float = 0.0

    def world_to_screen(self, point: Vec) -> Vec:
        """Screen coordinates of the world ``point``."""
        dx = point[0] - self.target[0]
        dy = point[1] - self.target[1]
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        rx = dx * cos_a - dy * sin_a
        ry = dx * sin_a + dy * cos_a
        return (rx * self.zoom + self.offset[0], ry * self.zoom + self.offset[1])

    def screen_to_world(self, point: Vec) -> Vec:
        """World coordinates of the screen ``point``."""
        dx = (point[0] - self.offset[0]) / self.zoom
        dy = (point[1] - self.offset[1]) / self.zoom
        angle = math.radians(self.rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        rx = dx * cos_a + dy * sin_a
        ry = -dx * sin_a + dy * cos_a
        return (rx + self.target[0], ry + self.target[1])


class CameraController:
    """Moves a point with the keyboard and lets the camera trail behind it."""

    def __init__(self, screen_size: Size = (SCREEN_WIDTH, SCREEN_HEIGHT)) -> None:
        self.position: Vec = (0.0, 0.0)
        self.speed = CAMERA_SPEED
        self.camera = Camera2D(
            target=(0.0, 0.0),
            offset=(screen_size[0] / 2.0, screen_size[1] / 2.0),
        )

    def update_position(
        self,
        keys: Collection[str],
        frame_time: float,
        tutorial: _Tutorial,
        resized_to: Optional[Size] = None,
    ) -> None:
        """Apply one frame of movement.

        ``keys`` holds the lower-case names of the held keys ("w", "a", "s", "d").
        """
        if any(key in keys for key in "adws"):
            tutorial.complete_step(0)

        dx = 1.0 if "d" in keys else (-1.0 if "a" in keys else 0.0)
        dy = 1.0 if "s" in keys else (-1.0 if "w" in keys else 0.0)
        nx, ny = _normalized(dx, dy)
        step = self.speed * frame_time
        self.position = (self.position[0] + nx * step, self.position[1] + ny * step)

        amount = CAMERA_SMOOTHING * frame_time
        self.camera.target = (
            lerp(self.camera.target[0], self.position[0], amount),
            lerp(self.camera.target[1], self.position[1], amount),
        )

        if resized_to is not None:
            self.camera.offset = (resized_to[0] / 2.0, resized_to[1] / 2.0)