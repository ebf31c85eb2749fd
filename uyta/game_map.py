"""The island map: tile kinds, growth ticks and buying new land."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Protocol, Tuple, Union

from uyta.utils import PathType, parse_json

CHUNK_WIDTH = 5
CHUNK_HEIGHT = 5
TILE_PIXEL_SIZE = 16
TILE_SCALE = 4
TILE_SIZE = TILE_PIXEL_SIZE * TILE_SCALE

INITIAL_EXPANSION_COST = 1000
EXPANSION_COST_FACTOR = 3
DEFAULT_TILES_PATH = "static/tiles.json"

DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))

Position = Tuple[int, int]


class _HasMoney(Protocol):
    money: int


def _unsigned(record: Mapping[str, Any], key: str) -> int:
    value = record[key]
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{key!r} must be a non-negative integer, got {value!r}")
    return value


@dataclass(frozen=True)
class Crop:
    """Static description of a crop kind."""

    time_to_grow: int
    sell_price: int

    @classmethod
    def _from_record(cls, record: Mapping[str, Any]) -> "Crop":
        return cls(
            time_to_grow=_unsigned(record, "time_to_grow"),
            sell_price=_unsigned(record, "sell_price"),
        )


@dataclass(frozen=True)
class Tree:
    """Static description of a tree kind."""

    time_to_grow: int
    time_to_fruit: int
    sell_price: int

    @classmethod
    def _from_record(cls, record: Mapping[str, Any]) -> "Tree":
        return cls(
            time_to_grow=_unsigned(record, "time_to_grow"),
            time_to_fruit=_unsigned(record, "time_to_fruit"),
            sell_price=_unsigned(record, "sell_price"),
        )


@dataclass(frozen=True)
class Grass:
    """An empty tile of land."""


@dataclass
class TreeTile:
    """A tile with a tree that grows, then ripens fruit."""

    tree: int
    grow: int = 0
    stage: int = 0


@dataclass
class Farmland:
    """A tile of tilled soil carrying a crop."""

    crop: int
    stage: int = 0


Tile = Union[Grass, TreeTile, Farmland]


def _chunk_positions(center: Position):
    half_width = CHUNK_WIDTH // 2
    half_height = CHUNK_HEIGHT // 2
    cx, cy = center
    for x in range(cx - half_width, cx + half_width + 1):
        for y in range(cy - half_height, cy + half_height + 1):
            yield (x, y)


def _neighbour_chunks(center: Position) -> List[Position]:
    cx, cy = center
    return [(dx * CHUNK_WIDTH + cx, dy * CHUNK_HEIGHT + cy) for dx, dy in DIRECTIONS]


@dataclass
class GameMap:
    """All land tiles, their contents and the points where land can be bought."""

    crops_data: List[Crop]
    tree_data: List[Tree]
    tiles: Dict[Position, Tile] = field(default_factory=dict)
    occupation_map: Dict[Position, bool] = field(default_factory=dict)
    land_expansion_points: List[Position] = field(default_factory=list)
    next_expansion_cost: int = INITIAL_EXPANSION_COST

    def __post_init__(self) -> None:
        if not self.tiles:
            self.tiles = {pos: Grass() for pos in _chunk_positions((0, 0))}
        if not self.land_expansion_points:
            self.land_expansion_points = _neighbour_chunks((0, 0))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameMap":
        """Build a fresh map from decoded tile data."""
        crops = [Crop._from_record(record) for record in data["crops_data"]]
        trees = [Tree._from_record(record) for record in data["tree_data"]]
        return cls(crops_data=crops, tree_data=trees)

    @classmethod
    def from_file(cls, path: PathType = DEFAULT_TILES_PATH) -> "GameMap":
        """Build a fresh map from a JSON tile data file."""
        return cls.from_dict(parse_json(path))

    def update_tiles(self) -> None:
        """Advance every crop and tree by one growth tick."""
        for tile in self.tiles.values():
            if isinstance(tile, Farmland):
                if tile.stage < self.crops_data[tile.crop].time_to_grow:
                    tile.stage += 1
            elif isinstance(tile, TreeTile):
                data = self.tree_data[tile.tree]
                grown = tile.grow >= data.time_to_grow
                if grown and tile.stage >= data.time_to_fruit:
                    continue
                if grown:
                    tile.stage += 1
                else:
                    tile.grow += 1

    def buy_land(self, selected_tile: Position, player: _HasMoney) -> bool:
        """Buy the chunk at ``selected_tile`` if it is an expansion point.

        Returns whether a purchase took place.
        """
        if player.money < self.next_expansion_cost:
            return False
        if selected_tile not in self.land_expansion_points:
            return False

        player.money -= self.next_expansion_cost
        self.next_expansion_cost *= EXPANSION_COST_FACTOR

        point = selected_tile
        self.land_expansion_points.remove(point)

        for pos in _chunk_positions(point):
            self.tiles[pos] = Grass()

        self.land_expansion_points.extend(_neighbour_chunks(point))
        return True