"""Drawing of the background, the world seen through the camera and the overlay."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence, Tuple

import pygame

from uyta.camera_controller import Camera2D
from uyta.game_map import (
    DIRECTIONS,
    TILE_PIXEL_SIZE,
    TILE_SCALE,
    TILE_SIZE,
    Farmland,
    GameMap,
    TreeTile,
)

RAYWHITE = (245, 245, 245)
BLACK = (0, 0, 0)

Position = Tuple[int, int]


def tree_sprite_offset(game_map: GameMap, tile: TreeTile) -> int:
    """Horizontal pixel offset of the sprite frame for a tree tile."""
    data = game_map.tree_data[tile.tree]
    ttg = data.time_to_grow
    if tile.grow < ttg:
        return (tile.grow // 5) * TILE_PIXEL_SIZE
    if tile.stage >= data.time_to_fruit:
        return (ttg // 5) * TILE_PIXEL_SIZE
    return ((ttg - 1) // 5) * TILE_PIXEL_SIZE


def draw_bg(surface: Any, bg_texture: Any) -> None:
    """Clear to black and lay the background texture at double size."""
    surface.fill(BLACK)
    width, height = bg_texture.get_size()
    surface.blit(pygame.transform.scale(bg_texture, (width * 2, height * 2)), (0, 0))


def _screen_size(camera: Camera2D, length: float) -> int:
    return max(1, round(length * camera.zoom))


def _blit_world(
    surface: Any,
    camera: Camera2D,
    texture: Any,
    source: Tuple[int, int, int, int],
    dest: Tuple[float, float, float, float],
) -> None:
    tex_width, tex_height = texture.get_size()
    if tex_width == 0 or tex_height == 0:
        return
    sx, sy, sw, sh = source
    region = pygame.Surface((sw, sh), pygame.SRCALPHA)
    # Source rectangles outside the texture wrap around, as with a repeating sampler.
    region.blit(texture, (0, 0), area=pygame.Rect(sx % tex_width, sy % tex_height, sw, sh))
    dx, dy, dw, dh = dest
    region = pygame.transform.scale(
        region, (_screen_size(camera, dw), _screen_size(camera, dh))
    )
    x, y = camera.world_to_screen((dx, dy))
    surface.blit(region, (round(x), round(y)))


def _blit_whole(surface: Any, camera: Camera2D, texture: Any, position, scale: float) -> None:
    width, height = texture.get_size()
    scaled = pygame.transform.scale(
        texture,
        (_screen_size(camera, width * scale), _screen_size(camera, height * scale)),
    )
    x, y = camera.world_to_screen(position)
    surface.blit(scaled, (round(x), round(y)))


def _texture(textures: Mapping[str, Any], name: str) -> Any:
    texture = textures.get(name)
    return texture if texture is not None else textures["error"]


def draw_map(
    surface: Any,
    game_map: GameMap,
    camera: Camera2D,
    textures: Mapping[str, Any],
    workers: Sequence[Any],
    font: Any,
    frame_time: float,
) -> None:
    """Draw expansion points, ground, borders, plants and workers."""
    expansion_texture = textures["land_expansion"]
    cost_text = str(game_map.next_expansion_cost)
    for px, py in game_map.land_expansion_points:
        _blit_whole(
            surface, camera, expansion_texture, (px * TILE_SIZE, py * TILE_SIZE), TILE_SCALE
        )
        x, y = camera.world_to_screen(
            (
                px * TILE_SIZE + len(cost_text) * 2,
                py * TILE_SIZE - TILE_SIZE // 3,
            )
        )
        surface.blit(font.render(cost_text, True, RAYWHITE), (round(x), round(y)))

    ordered = sorted(game_map.tiles.items(), key=lambda item: item[0])
    border_texture = textures["borders"]

    for (tx, ty), tile in ordered:
        ground = "dirt" if isinstance(tile, Farmland) else "grass"
        _blit_whole(surface, camera, textures[ground], (tx * TILE_SIZE, ty * TILE_SIZE), TILE_SCALE)

        for dx, dy in DIRECTIONS:
            nx, ny = tx + dx, ty + dy
            if (nx, ny) in game_map.tiles:
                continue
            _blit_world(
                surface,
                camera,
                border_texture,
                (dx * TILE_PIXEL_SIZE, dy * TILE_PIXEL_SIZE, TILE_PIXEL_SIZE, TILE_PIXEL_SIZE),
                (nx * TILE_SIZE, ny * TILE_SIZE, TILE_SIZE, TILE_SIZE),
            )

    worker_texture = textures["worker"]
    for position, tile in ordered:
        tx, ty = position
        if isinstance(tile, Farmland):
            _blit_world(
                surface,
                camera,
                _texture(textures, f"crop{tile.crop}"),
                (tile.stage * TILE_PIXEL_SIZE, 0, TILE_PIXEL_SIZE, TILE_PIXEL_SIZE),
                (tx * TILE_SIZE, ty * TILE_SIZE, TILE_SIZE, TILE_SIZE),
            )
        elif isinstance(tile, TreeTile):
            _blit_world(
                surface,
                camera,
                _texture(textures, f"tree{tile.tree}"),
                (tree_sprite_offset(game_map, tile), 0, TILE_PIXEL_SIZE, TILE_PIXEL_SIZE * 2),
                (tx * TILE_SIZE, ty * TILE_SIZE - TILE_SIZE, TILE_SIZE, TILE_SIZE * 2),
            )

        for worker in workers:
            if worker.position == position:
                worker.draw(surface, worker_texture, frame_time, camera)


def draw_for_camera(
    surface: Any,
    game_map: GameMap,
    camera: Camera2D,
    textures: Mapping[str, Any],
    workers: Sequence[Any],
    font: Any,
    selected_tile: Position,
    frame_time: float,
) -> bool:
    """Draw the world and outline the tile under the mouse.

    Returns whether the selected tile is land and was outlined.
    """
    draw_map(surface, game_map, camera, textures, workers, font, frame_time)

    if selected_tile not in game_map.tiles:
        return False

    x, y = camera.world_to_screen(
        (selected_tile[0] * TILE_SIZE, selected_tile[1] * TILE_SIZE)
    )
    size = _screen_size(camera, TILE_SIZE)
    pygame.draw.rect(
        surface, RAYWHITE, pygame.Rect(round(x), round(y), size, size), width=TILE_SCALE
    )
    return True


def draw_fg(
    surface: Any,
    canvas: Any,
    game_map: GameMap,
    textures: Mapping[str, Any],
    player: Any,
    pause_menu: Any,
    tutorial: Any,
    font: Any,
    master_volume: float,
) -> None:
    """Draw the screen-space overlay: stats, toolbar, tutorial and pause menu."""
    player.draw_stats(surface, font)
    canvas.draw(surface, game_map, textures, player, font)
    tutorial.draw(surface, font)
    pause_menu.draw(surface, font, master_volume)