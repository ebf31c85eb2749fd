"""Workers that walk the island and harvest ripe crops and trees."""

from __future__ import annotations

import math
import random
from collections import deque
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

import pygame

from uyta.camera_controller import Camera2D, lerp
from uyta.game_map import TILE_PIXEL_SIZE, TILE_SIZE, Farmland, GameMap, TreeTile

Position = Tuple[int, int]

WALK_SMOOTHING = 5.0
HARVEST_SOUND_COUNT = 5
NO_TARGET: Position = (2**31 - 1, 2**31 - 1)

_SEARCH_DIRECTIONS: Tuple[Position, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
_FACING = {(0, 1): 0, (0, -1): 1, (1, 0): 2, (-1, 0): 3}


class JobType(Enum):
    """Kinds of work a worker looks for."""

    HARVEST = "harvest"


def _is_ripe(game_map: GameMap, tile: Any) -> bool:
    if isinstance(tile, Farmland):
        return tile.stage >= game_map.crops_data[tile.crop].time_to_grow
    if isinstance(tile, TreeTile):
        return tile.stage >= game_map.tree_data[tile.tree].time_to_fruit
    return False


class Worker:
    """A worker standing on a tile with the path it is about to walk."""

    def __init__(self, worker_id: int, x: int, y: int) -> None:
        self.id = worker_id
        self.position: Position = (x, y)
        self.display_position: Tuple[float, float] = (
            float(x * TILE_SIZE),
            float(y * TILE_SIZE - TILE_SIZE // 2),
        )
        self.path: List[Position] = []

    def find_closest_target(self, game_map: GameMap, job: JobType) -> Position:
        """Pick the nearest free tile with work and reserve it.

        Returns ``NO_TARGET`` when there is nothing to do.
        """
        closest = NO_TARGET
        if job is JobType.HARVEST:
            shortest = math.inf
            for tile_position, tile in game_map.tiles.items():
                if game_map.occupation_map.get(tile_position, False):
                    continue
                if not _is_ripe(game_map, tile):
                    continue
                distance = math.dist(tile_position, self.position)
                if distance < shortest:
                    closest = tile_position
                    shortest = distance

        game_map.occupation_map[closest] = True
        return closest

    def follow_path(self, game_map: GameMap, sounds: Mapping[str, Any]) -> Tuple[int, int]:
        """Take one step, or harvest and plan anew when the path is done.

        Returns the money and experience earned on this tick.
        """
        if self.path:
            self.position = self.path.pop(0)
            return (0, 0)

        tile = game_map.tiles[self.position]
        money = exp = 0
        if _is_ripe(game_map, tile):
            if isinstance(tile, Farmland):
                money = game_map.crops_data[tile.crop].sell_price
                exp = tile.crop + 1
            else:
                money = game_map.tree_data[tile.tree].sell_price
                exp = tile.tree + 1
            tile.stage = 0
            if self.position in game_map.occupation_map:
                game_map.occupation_map[self.position] = False
            sounds[f"harvest{random.randrange(HARVEST_SOUND_COUNT)}"].play()

        self.find_path(game_map, JobType.HARVEST)
        return (money, exp)

    def find_path(self, game_map: GameMap, job: JobType) -> Optional[List[Position]]:
        """Plan a shortest walk over land to the closest job and store it."""
        start = self.position
        target = self.find_closest_target(game_map, job)

        if start not in game_map.tiles or target not in game_map.tiles:
            return None

        parents: Dict[Position, Optional[Position]] = {start: None}
        queue = deque([start])

        while queue:
            current = queue.popleft()
            if current == target:
                path = []
                node: Optional[Position] = current
                while parents[node] is not None:
                    path.append(node)
                    node = parents[node]
                path.append(start)
                path.reverse()
                self.path = list(path)
                return path

            for dx, dy in _SEARCH_DIRECTIONS:
                nxt = (current[0] + dx, current[1] + dy)
                if nxt in parents or nxt not in game_map.tiles:
                    continue
                parents[nxt] = current
                queue.append(nxt)

        return None

    def facing_index(self) -> int:
        """Sprite column for the direction of the next step."""
        direction = (0, 1)
        if self.path:
            nxt = self.path[0]
            direction = (nxt[0] - self.position[0], nxt[1] - self.position[1])
        return _FACING.get(direction, 1)

    def draw(self, surface: Any, texture: Any, frame_time: float, camera: Camera2D) -> None:
        """Glide the sprite towards the tile and draw it through ``camera``."""
        amount = WALK_SMOOTHING * frame_time
        self.display_position = (
            lerp(self.display_position[0], float(self.position[0] * TILE_SIZE), amount),
            lerp(self.display_position[1], float(self.position[1] * TILE_SIZE), amount),
        )

        source = pygame.Rect(
            self.facing_index() * TILE_PIXEL_SIZE, 0, TILE_PIXEL_SIZE, TILE_PIXEL_SIZE
        )
        frame = pygame.Surface(source.size, pygame.SRCALPHA)
        frame.blit(texture, (0, 0), area=source)
        size = max(1, round(TILE_SIZE * camera.zoom))
        frame = pygame.transform.scale(frame, (size, size))
        x, y = camera.world_to_screen(self.display_position)
        surface.blit(frame, (int(x), int(y)))