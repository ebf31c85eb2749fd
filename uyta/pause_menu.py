"""The pause menu with its main and settings pages."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple

import pygame

from uyta.game_map import TILE_SCALE
from uyta.ui import Rect

FONT_SIZE = 24
GRAY = (130, 130, 130)
RAYWHITE = (245, 245, 245)
BACKDROP = (0, 0, 0, int(255 * 0.8))

Size = Tuple[int, int]


class ButtonState(Enum):
    """How the mouse relates to a button this frame."""

    NORMAL = "normal"
    HOVERED = "hovered"
    PRESSED = "pressed"


class PauseMenuState(Enum):
    """Which page of the pause menu is shown."""

    MAIN = "main"
    SETTINGS = "settings"


@dataclass
class Button:
    """A labelled clickable rectangle."""

    rect: Rect
    label: str
    state: ButtonState = ButtonState.NORMAL


def _volume_label(master_volume: float) -> str:
    percent = int(math.floor(master_volume * 100.0 + 0.5))
    return f"Общая громкость\n{percent}%"


def _draw_text(surface: Any, font: Any, text: str, position, color) -> None:
    x, y = position
    for row, line in enumerate(text.split("\n")):
        if not line:
            continue
        surface.blit(font.render(line, True, color), (int(x), int(y + row * FONT_SIZE)))


class PauseMenu:
    """Pause state and the buttons of the visible page."""

    def __init__(self, screen_size: Size) -> None:
        self.is_paused = False
        self.buttons: List[Button] = []
        self.state = PauseMenuState.MAIN
        self.screen_size = screen_size
        self.switch_state(screen_size, PauseMenuState.MAIN)

    def switch_state(self, screen_size: Size, state: PauseMenuState) -> None:
        """Show ``state`` and lay its buttons out for ``screen_size``."""
        screen_width, screen_height = (float(v) for v in screen_size)
        menu_width = screen_width * 0.5
        menu_height = screen_height * 0.75
        left = screen_width / 2.0 - menu_width / 4.0
        top = screen_height / 2.0 - menu_height / 2.0
        wide = menu_width / 2.0

        if state is PauseMenuState.MAIN:
            self.buttons = [
                Button(Rect(left, top + 60.0, wide, 50.0), "Настройки"),
                Button(Rect(left, top + 120.0, wide, 50.0), "Выйти из игры"),
            ]
        else:
            self.buttons = [
                Button(Rect(left, top + 60.0, 50.0, 50.0), "-"),
                Button(
                    Rect(screen_width / 2.0 + menu_width / 4.0 - 50.0, top + 60.0, 50.0, 50.0),
                    "+",
                ),
                Button(Rect(left, top + 120.0, wide, 50.0), "Во весь экран"),
                Button(Rect(left, top + 180.0, wide, 50.0), "Сохранить"),
            ]

        self.screen_size = screen_size
        self.state = state

    def toggle_pause(self, escape_released: bool) -> None:
        """Flip the pause state when Escape was released."""
        if escape_released:
            self.is_paused = not self.is_paused

    def update_buttons(
        self,
        mouse_position: Tuple[float, float],
        mouse_pressed: bool,
        resized_to: Optional[Size] = None,
    ) -> bool:
        """Update button states; returns whether the menu takes the mouse."""
        if not self.is_paused:
            return False

        if resized_to is not None:
            self.switch_state(resized_to, self.state)

        blocks_mouse = False
        for button in self.buttons:
            if button.rect.contains(mouse_position):
                button.state = ButtonState.PRESSED if mouse_pressed else ButtonState.HOVERED
                blocks_mouse = True
            else:
                button.state = ButtonState.NORMAL
        return blocks_mouse

    def draw(self, surface: Any, font: Any, master_volume: float) -> None:
        """Draw the menu over ``surface`` when paused."""
        if not self.is_paused:
            return

        screen_width, screen_height = surface.get_size()
        menu_width = int(screen_width * 0.5)
        menu_height = int(screen_height * 0.75)

        backdrop = pygame.Surface((menu_width, menu_height), pygame.SRCALPHA)
        backdrop.fill(BACKDROP)
        surface.blit(
            backdrop,
            (screen_width // 2 - menu_width // 2, screen_height // 2 - menu_height // 2),
        )
        _draw_text(
            surface,
            font,
            "Меню",
            (screen_width // 2 - 24, screen_height // 2 - menu_height // 2 + 10),
            RAYWHITE,
        )

        for button in self.buttons:
            color = RAYWHITE if button.state is ButtonState.HOVERED else GRAY
            pygame.draw.rect(surface, color, button.rect._as_pygame(), width=TILE_SCALE)
            rect = button.rect
            _draw_text(
                surface,
                font,
                button.label,
                (
                    rect.x + rect.width / 2.0 - len(button.label) * 6.0,
                    rect.y + rect.height / 2.0 - 12.0,
                ),
                RAYWHITE,
            )

        if self.state is PauseMenuState.SETTINGS:
            _draw_text(
                surface,
                font,
                _volume_label(master_volume),
                (
                    screen_width / 2.0 - menu_width / 4.0 + 60.0,
                    screen_height / 2.0 - menu_height / 2.0 + 60.0,
                ),
                RAYWHITE,
            )