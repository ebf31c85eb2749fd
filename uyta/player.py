"""The player's purse, experience and the actions bought from the toolbar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Tuple

import pygame

from uyta.game_map import Farmland, GameMap, Grass, TreeTile
from uyta.ui import MenuMode
from uyta.worker import Worker

Position = Tuple[int, int]

WHITE = (255, 255, 255)
DARKORANGE = (255, 140, 0)
SHADE = (0, 0, 0, int(255 * 0.5))
WORKER_MIN_MONEY = 100
LEVEL_FACTOR = 3


def _fill(surface: Any, rect: Tuple[int, int, int, int], rgba) -> None:
    x, y, width, height = rect
    overlay = pygame.Surface((max(0, width), max(0, height)), pygame.SRCALPHA)
    overlay.fill(rgba)
    surface.blit(overlay, (x, y))


@dataclass
class Player:
    """Money (real and shown), level and experience."""

    money: int = 100
    display_money: int = 0
    level: int = 1
    exp: int = 0
    exp_to_lvl_up: int = 20

    def update_money(self) -> None:
        """Move the shown money one unit towards the real amount."""
        if self.display_money < self.money:
            self.display_money += 1
        elif self.display_money > self.money:
            self.display_money -= 1

    def update_exp(self, sounds: Mapping[str, Any]) -> bool:
        """Level up when enough experience is gathered; returns whether it did."""
        if self.exp < self.exp_to_lvl_up:
            return False
        self.level += 1
        self.exp = 0
        self.exp_to_lvl_up *= LEVEL_FACTOR
        sounds["level_up"].play()
        return True

    def draw_stats(self, surface: Any, font: Any) -> None:
        """Draw the money counter and the experience bar."""
        _fill(surface, (10, 10, 130, 28), SHADE)
        surface.blit(font.render(str(self.display_money), True, WHITE), (14, 14))

        width = surface.get_width()
        fill = self.exp / self.exp_to_lvl_up
        _fill(surface, (width // 4, 10, width // 2, 24), SHADE)
        filled = int(fill * (width // 2))
        if filled > 0:
            pygame.draw.rect(surface, DARKORANGE, pygame.Rect(width // 4, 10, filled, 24))
        surface.blit(
            font.render(f"Уровень {self.level}", True, WHITE), (int(width / 4 + 10), 10)
        )

    def _claim(self, game_map: GameMap, selected_tile: Position) -> bool:
        if selected_tile not in game_map.tiles:
            return False
        if selected_tile in game_map.occupation_map:
            game_map.occupation_map[selected_tile] = False
        return True

    def plant_crops(
        self, canvas: Any, game_map: GameMap, selected_tile: Position, tutorial: Any
    ) -> None:
        """Till grass or replant a different crop on the selected tile."""
        if not self._claim(game_map, selected_tile):
            return
        tutorial.complete_step(1)

        tile = game_map.tiles[selected_tile]
        price = canvas.toolbar_data.crops[canvas.selected].price
        if isinstance(tile, Grass):
            if self.money >= price:
                self.money -= price
                game_map.tiles[selected_tile] = Farmland(crop=canvas.selected, stage=0)
        elif isinstance(tile, Farmland):
            if canvas.mode is not MenuMode.CROPS:
                return
            if tile.crop != canvas.selected and self.money >= price:
                self.money -= price
                tile.crop = canvas.selected
                tile.stage = 0

    def plant_trees(self, canvas: Any, game_map: GameMap, selected_tile: Position) -> None:
        """Plant the selected tree on a grass tile."""
        if not self._claim(game_map, selected_tile):
            return
        if not isinstance(game_map.tiles[selected_tile], Grass):
            return
        price = canvas.toolbar_data.trees[canvas.selected].price
        if self.money >= price:
            self.money -= price
            game_map.tiles[selected_tile] = TreeTile(tree=canvas.selected)

    def perform_misc(
        self,
        canvas: Any,
        workers: List[Worker],
        selected_tile: Position,
        game_map: GameMap,
    ) -> None:
        """Hire a worker (item 0) or clear a tile back to grass (item 1)."""
        if (
            canvas.selected == 0
            and self.money >= WORKER_MIN_MONEY
            and selected_tile in game_map.tiles
        ):
            workers.append(Worker(len(workers), selected_tile[0], selected_tile[1]))
            self.money -= canvas.toolbar_data.misc[canvas.selected].price

        if canvas.selected == 1:
            if not self._claim(game_map, selected_tile):
                return
            if isinstance(game_map.tiles[selected_tile], (TreeTile, Farmland)):
                game_map.tiles[selected_tile] = Grass()