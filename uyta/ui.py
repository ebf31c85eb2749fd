"""The toolbar on the left edge of the screen: mode buttons and item slots."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Mapping, Optional, Protocol, Sequence, Tuple

import pygame

from uyta.game_map import TILE_PIXEL_SIZE
from uyta.utils import PathType, parse_json

UI_BUTTON_SIZE = 60.0
UI_GAPS = 20.0
DEFAULT_TOOLBAR_PATH = "static/toolbar.json"

WHITE = (255, 255, 255)
GRAY = (130, 130, 130)
RAYWHITE = (245, 245, 245)
HIGHLIGHT = (245, 245, 245, int(255 * 0.9))
SHADE = (0, 0, 0, int(255 * 0.5))

LOCK_MESSAGE = "Откроется на уровне {}"

Point = Tuple[float, float]


class _HasLevel(Protocol):
    level: int


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in screen pixels."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies inside; the right and bottom edges are excluded."""
        px, py = point
        return (
            self.x <= px < self.x + self.width
            and self.y <= py < self.y + self.height
        )

    def _as_pygame(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))


def _unsigned(record: Mapping[str, Any], key: str) -> int:
    value = record[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{key!r} must be a non-negative integer, got {value!r}")
    return value


@dataclass(frozen=True)
class ToolbarItem:
    """One buyable entry of the toolbar."""

    tooltip: str
    unlock_level: int
    price: int

    @classmethod
    def _from_record(cls, record: Mapping[str, Any]) -> "ToolbarItem":
        tooltip = record["tooltip"]
        if not isinstance(tooltip, str):
            raise ValueError(f"'tooltip' must be a string, got {tooltip!r}")
        return cls(
            tooltip=tooltip,
            unlock_level=_unsigned(record, "unlock_level"),
            price=_unsigned(record, "price"),
        )


@dataclass(frozen=True)
class ToolbarData:
    """The items offered in each toolbar mode."""

    crops: List[ToolbarItem]
    trees: List[ToolbarItem]
    misc: List[ToolbarItem]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ToolbarData":
        """Build toolbar data from a decoded JSON document."""
        return cls(
            crops=[ToolbarItem._from_record(r) for r in data["crops"]],
            trees=[ToolbarItem._from_record(r) for r in data["trees"]],
            misc=[ToolbarItem._from_record(r) for r in data["misc"]],
        )

    @classmethod
    def from_file(cls, path: PathType = DEFAULT_TOOLBAR_PATH) -> "ToolbarData":
        """Build toolbar data from a JSON file."""
        return cls.from_dict(parse_json(path))


class MenuMode(Enum):
    """Which group of items the toolbar currently offers."""

    CROPS = "crops"
    TREES = "trees"
    MISC = "misc"


_MODE_ORDER = (MenuMode.CROPS, MenuMode.TREES, MenuMode.MISC)
_MODE_ICONS = ("crop_menu", "tree_menu", "misc_menu")


def _pool(toolbar_data: ToolbarData, mode: MenuMode) -> List[ToolbarItem]:
    if mode is MenuMode.CROPS:
        return toolbar_data.crops
    if mode is MenuMode.TREES:
        return toolbar_data.trees
    return toolbar_data.misc


def _default_content() -> List[Rect]:
    return [
        Rect(10.0, UI_BUTTON_SIZE + UI_GAPS, UI_BUTTON_SIZE, UI_BUTTON_SIZE),
        Rect(10.0, 2 * UI_BUTTON_SIZE + UI_GAPS * 1.5, UI_BUTTON_SIZE, UI_BUTTON_SIZE),
        Rect(10.0, 3 * UI_BUTTON_SIZE + UI_GAPS * 2.0, UI_BUTTON_SIZE, UI_BUTTON_SIZE),
    ]


def _fill(surface: Any, rect: Rect, rgba: Tuple[int, int, int, int]) -> None:
    overlay = pygame.Surface((int(rect.width), int(rect.height)), pygame.SRCALPHA)
    overlay.fill(rgba)
    surface.blit(overlay, (int(rect.x), int(rect.y)))


def _tinted(image: Any, tint: Tuple[int, int, int]) -> Any:
    if tint == WHITE:
        return image
    image = image.copy()
    image.fill(tint + (255,), special_flags=pygame.BLEND_RGBA_MULT)
    return image


def _blit_region(
    surface: Any, texture: Any, source: Rect, dest: Rect, tint: Tuple[int, int, int]
) -> None:
    region = pygame.Surface((int(source.width), int(source.height)), pygame.SRCALPHA)
    region.blit(texture, (0, 0), area=source._as_pygame())
    region = pygame.transform.scale(region, (int(dest.width), int(dest.height)))
    surface.blit(_tinted(region, tint), (int(dest.x), int(dest.y)))


def _draw_text(
    surface: Any, font: Any, text: str, position: Point, color, line_height: float
) -> None:
    x, y = position
    for row, line in enumerate(text.split("\n")):
        if not line:
            continue
        rendered = font.render(line, True, color)
        surface.blit(rendered, (int(x), int(y + row * line_height)))


@dataclass
class Canvas:
    """Mode buttons, the item slots of the current mode and the current choice."""

    toolbar_data: ToolbarData
    mode: MenuMode = MenuMode.CROPS
    selected: int = 0
    content: List[Rect] = field(default_factory=_default_content)
    subcontent: List[Rect] = field(default_factory=list)
    lock_hint: Optional[Tuple[str, Tuple[int, int]]] = None

    def blocks_mouse(self, mouse_position: Point) -> bool:
        """Whether the mouse is over any toolbar button."""
        return any(rect.contains(mouse_position) for rect in self.content) or any(
            rect.contains(mouse_position) for rect in self.subcontent
        )

    def layout_submenu(self, game_map: Any) -> List[Rect]:
        """Recompute the item slots for the current mode and return them."""
        if self.mode is MenuMode.CROPS:
            amount = len(game_map.crops_data)
        else:
            amount = 2
        self.subcontent = [
            Rect(
                UI_BUTTON_SIZE + UI_GAPS,
                i * (UI_BUTTON_SIZE + UI_GAPS / 2.0) + UI_BUTTON_SIZE + UI_GAPS,
                UI_BUTTON_SIZE,
                UI_BUTTON_SIZE,
            )
            for i in range(amount)
        ]
        return self.subcontent

    def _set_hint(self, level: int, mouse_position: Point) -> str:
        text = LOCK_MESSAGE.format(level)
        x = int(mouse_position[0])
        y = int(mouse_position[1]) - int(UI_BUTTON_SIZE) // 2
        self.lock_hint = (text, (x, y))
        return text

    def update(
        self, mouse_position: Point, mouse_down: bool, player: _HasLevel
    ) -> Optional[str]:
        """React to the mouse; returns the lock message to show, if any."""
        self.lock_hint = None
        hint: Optional[str] = None

        for rect, mode in zip(self.content, _MODE_ORDER):
            if not rect.contains(mouse_position):
                continue
            first = _pool(self.toolbar_data, mode)[0]
            if mouse_down and first.unlock_level <= player.level:
                self.mode = mode
                self.selected = 0
            if first.unlock_level > player.level:
                hint = self._set_hint(first.unlock_level, mouse_position)

        pool = _pool(self.toolbar_data, self.mode)
        for index, rect in enumerate(self.subcontent):
            if not rect.contains(mouse_position):
                continue
            item = pool[index]
            if item.unlock_level <= player.level:
                if mouse_down:
                    self.selected = index
            else:
                hint = self._set_hint(item.unlock_level, mouse_position)

        return hint

    def draw(
        self,
        surface: Any,
        game_map: Any,
        textures: Mapping[str, Any],
        player: _HasLevel,
        font: Any,
    ) -> None:
        """Draw the mode buttons, the item slots, the tooltip and any lock hint."""
        scale = UI_BUTTON_SIZE / TILE_PIXEL_SIZE

        for rect, mode, icon_name in zip(self.content, _MODE_ORDER, _MODE_ICONS):
            _fill(surface, rect, HIGHLIGHT if self.mode is mode else SHADE)
            locked = (
                mode is not MenuMode.CROPS
                and _pool(self.toolbar_data, mode)[0].unlock_level > player.level
            )
            icon = textures[icon_name]
            width, height = icon.get_size()
            icon = pygame.transform.scale(
                icon, (int(width * scale), int(height * scale))
            )
            surface.blit(_tinted(icon, GRAY if locked else WHITE), (int(rect.x), int(rect.y)))

        pool = _pool(self.toolbar_data, self.mode)
        for index, rect in enumerate(self.layout_submenu(game_map)):
            _fill(surface, rect, HIGHLIGHT if self.selected == index else SHADE)
            item = pool[index]
            tint = GRAY if item.unlock_level > player.level else WHITE

            if self.mode is MenuMode.CROPS:
                texture = textures[f"crop{index}"]
                source = Rect(
                    game_map.crops_data[index].time_to_grow * TILE_PIXEL_SIZE,
                    0,
                    TILE_PIXEL_SIZE,
                    TILE_PIXEL_SIZE,
                )
            elif self.mode is MenuMode.TREES:
                texture = textures[f"tree{index}"]
                source = Rect(
                    (game_map.tree_data[index].time_to_grow // 5) * TILE_PIXEL_SIZE,
                    0,
                    TILE_PIXEL_SIZE,
                    TILE_PIXEL_SIZE * 2,
                )
            else:
                texture = textures[f"misc{index}"]
                source = Rect(0, 0, TILE_PIXEL_SIZE, TILE_PIXEL_SIZE)
            _blit_region(surface, texture, source, rect, tint)

            if self.selected != index:
                continue

            price = str(item.price) if item.price > 0 else ""
            _draw_text(
                surface,
                font,
                f"{item.tooltip}\n{price}",
                (2 * (UI_BUTTON_SIZE + UI_GAPS), rect.y),
                RAYWHITE,
                UI_BUTTON_SIZE / 2,
            )

        if self.lock_hint is not None:
            text, (x, y) = self.lock_hint
            width = len(text.encode("utf-8")) * (int(UI_BUTTON_SIZE) // 6)
            _fill(surface, Rect(x, y, width, UI_BUTTON_SIZE / 2), SHADE)
            _draw_text(surface, font, text, (x + 5, y), RAYWHITE, UI_BUTTON_SIZE / 2)