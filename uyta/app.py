"""The game window and its main loop."""

from __future__ import annotations

import argparse
import math
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Tuple

import pygame

from uyta.assets import load_sounds, load_textures
from uyta.camera_controller import SCREEN_HEIGHT, SCREEN_WIDTH, CameraController
from uyta.game_map import TILE_PIXEL_SIZE, TILE_SIZE, GameMap
from uyta.pause_menu import ButtonState, PauseMenu, PauseMenuState
from uyta.player import Player
from uyta.renderer import draw_bg, draw_fg, draw_for_camera
from uyta.tutorial import Tutorial
from uyta.ui import Canvas, MenuMode, ToolbarData
from uyta.worker import Worker

TITLE = "Уйта"
TILE_UPDATE_TIME = 0.5
TARGET_FPS = 60
FONT_SIZE = 24
VOLUME_STEP = 0.1

BG_COLOR_A = (0, 255, 255, int(255 * 0.7))
BG_COLOR_B = (0, 255, 255, int(255 * 0.6))

_MOVE_KEYS = (("w", pygame.K_w), ("a", pygame.K_a), ("s", pygame.K_s), ("d", pygame.K_d))

Position = Tuple[int, int]


def make_background(size: Tuple[int, int]) -> pygame.Surface:
    """A checkerboard of translucent cyan squares, one tile texel per square."""
    width, height = size
    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    surface.fill(BG_COLOR_B)
    for cell_y, y in enumerate(range(0, height, TILE_PIXEL_SIZE)):
        for cell_x, x in enumerate(range(0, width, TILE_PIXEL_SIZE)):
            if (cell_x + cell_y) % 2 == 0:
                surface.fill(BG_COLOR_A, pygame.Rect(x, y, TILE_PIXEL_SIZE, TILE_PIXEL_SIZE))
    return surface


def selected_tile_at(world_position: Tuple[float, float]) -> Position:
    """The tile containing a world-space point."""
    return (
        math.floor(world_position[0] / TILE_SIZE),
        math.floor(world_position[1] / TILE_SIZE),
    )


def handle_input(
    canvas: Canvas,
    game_map: GameMap,
    player: Player,
    workers: List[Worker],
    selected_tile: Position,
    tutorial: Tutorial,
    mouse_position: Tuple[float, float],
    mouse_pressed: bool,
) -> None:
    """Apply a click on the world with the tool chosen in the toolbar."""
    if canvas.blocks_mouse(mouse_position) or not mouse_pressed:
        return

    if canvas.mode is MenuMode.CROPS:
        player.plant_crops(canvas, game_map, selected_tile, tutorial)
    elif canvas.mode is MenuMode.TREES:
        player.plant_trees(canvas, game_map, selected_tile)
    else:
        player.perform_misc(canvas, workers, selected_tile, game_map)

    game_map.buy_land(selected_tile, player)


def _apply_volume(sounds: Mapping[str, Any], volume: float) -> None:
    for sound in sounds.values():
        sound.set_volume(volume)


def _run(static: Path) -> None:
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    if pygame.mixer.get_init() is None:
        pygame.mixer.init()

    sounds = load_sounds(static / "sfx")
    textures = load_textures(static / "textures")
    camera_controller = CameraController(screen.get_size())
    game_map = GameMap.from_file(static / "tiles.json")
    player = Player()
    workers = [Worker(0, 0, 0)]
    canvas = Canvas(toolbar_data=ToolbarData.from_file(static / "toolbar.json"))
    pause_menu = PauseMenu(screen.get_size())
    tutorial = Tutorial()
    font = pygame.font.Font(str(static / "tilita.ttf"), FONT_SIZE)
    bg_texture = make_background((SCREEN_WIDTH, SCREEN_HEIGHT))

    clock = pygame.time.Clock()
    master_volume = 1.0
    timer = 0.0

    while True:
        frame_time = clock.tick(TARGET_FPS) / 1000.0
        timer += frame_time

        escape_released = f1_pressed = mouse_pressed = False
        resized_to: Optional[Tuple[int, int]] = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYUP and event.key == pygame.K_ESCAPE:
                escape_released = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_F1:
                f1_pressed = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mouse_pressed = True
            elif event.type == pygame.VIDEORESIZE:
                resized_to = (event.w, event.h)

        screen = pygame.display.get_surface()
        mouse_position = pygame.mouse.get_pos()

        pause_menu.toggle_pause(escape_released)
        pause_blocks_mouse = pause_menu.update_buttons(mouse_position, mouse_pressed, resized_to)
        pressed = [button.state is ButtonState.PRESSED for button in pause_menu.buttons]

        if pause_menu.state is PauseMenuState.MAIN:
            if pressed[1]:
                return
            if pressed[0]:
                pause_menu.switch_state(screen.get_size(), PauseMenuState.SETTINGS)
        else:
            if pressed[0]:
                master_volume = max(master_volume - VOLUME_STEP, 0.0)
                _apply_volume(sounds, master_volume)
            if pressed[1]:
                master_volume = min(master_volume + VOLUME_STEP, 1.0)
                _apply_volume(sounds, master_volume)
            if pressed[2]:
                pygame.display.toggle_fullscreen()
            if pressed[3]:
                pause_menu.switch_state(screen.get_size(), PauseMenuState.MAIN)

        held = pygame.key.get_pressed()
        keys = {name for name, code in _MOVE_KEYS if held[code]}
        camera_controller.update_position(keys, frame_time, tutorial, resized_to)

        world_position = camera_controller.camera.screen_to_world(mouse_position)
        selected_tile = selected_tile_at(world_position)

        if not pause_blocks_mouse:
            handle_input(
                canvas,
                game_map,
                player,
                workers,
                selected_tile,
                tutorial,
                mouse_position,
                mouse_pressed,
            )

        player.update_money()
        player.update_exp(sounds)
        tutorial.close_tutorial(f1_pressed)

        if timer >= TILE_UPDATE_TIME:
            timer = 0.0
            game_map.update_tiles()
            for worker in workers:
                money, exp = worker.follow_path(game_map, sounds)
                player.money += money
                player.exp += exp

        screen = pygame.display.get_surface()
        draw_bg(screen, bg_texture)
        draw_for_camera(
            screen,
            game_map,
            camera_controller.camera,
            textures,
            workers,
            font,
            selected_tile,
            frame_time,
        )
        canvas.update(mouse_position, pygame.mouse.get_pressed()[0], player)
        draw_fg(
            screen,
            canvas,
            game_map,
            textures,
            player,
            pause_menu,
            tutorial,
            font,
            master_volume,
        )
        pygame.display.flip()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="uyta", description="A small island farming game.")
    parser.add_argument(
        "--static",
        default="static",
        help="directory holding textures, sounds, the font and the data files",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        _run(Path(args.static))
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())