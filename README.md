# Уйта

A small farming game on a floating island, built on pygame. You plant crops
and trees, hire workers who walk to ripe tiles and harvest them for you, earn
money and experience, and buy new chunks of land to grow the island. The
interface text is in Russian.

## Installing

```
pip install .
```

## Running

```
uyta
uyta --static path/to/assets
```

`--static` names the asset directory and defaults to `static` in the current
working directory. The package ships no assets of its own; the directory must
hold:

- `tiles.json` with `crops_data` (a list of `{"time_to_grow", "sell_price"}`)
  and `tree_data` (a list of `{"time_to_grow", "time_to_fruit", "sell_price"}`)
- `toolbar.json` with `crops`, `trees` and `misc`, each a list of
  `{"tooltip", "unlock_level", "price"}`
- `textures/`: images keyed by file name up to the first dot. The game uses
  `grass`, `dirt`, `borders`, `land_expansion`, `worker`, `error`,
  `crop_menu`, `tree_menu`, `misc_menu`, and `crop<N>`, `tree<N>`, `misc<N>`
  for the toolbar items
- `sfx/`: sounds keyed the same way; the game plays `level_up` and
  `harvest0` to `harvest4`
- `tilita.ttf`: the interface font

Numbers in the JSON files must be non-negative integers; anything else raises
`ValueError` when the data is loaded.

## Controls

- **W, A, S, D**: move the camera
- **Left mouse button**: use the selected tool on the tile under the cursor,
  or buy land at an expansion marker
- **Esc**: open or close the pause menu (settings, volume, fullscreen, quit)
- **F1**: hide the tutorial hints once every step is done

## How it plays

- The toolbar on the left switches between crops, trees and miscellaneous
  tools. Items above the player's level are greyed out and show the level
  that unlocks them.
- Every half second crops grow one stage on farmland and then wait to be
  harvested. Trees grow first and then bear fruit again and again.
- The first miscellaneous tool hires a worker on the clicked tile (the player
  needs at least 100 money). The second clears a tile back to grass.
- Workers reserve the nearest ripe tile, walk there by a shortest path over
  the island, and collect its price as money and its index plus one as
  experience.
- Land is bought at the markers around the island. The first chunk costs
  1000, and each one after it costs three times as much as the one before.
- Levelling up resets experience, and the next level needs three times as
  much.

## Using the pieces

The game logic runs without a window:

- `uyta.game_map.GameMap`: tiles (`Grass`, `Farmland`, `TreeTile`), growth
  via `update_tiles()`, and `buy_land(tile, player)`, which returns whether a
  purchase happened. Build one with `GameMap.from_dict(...)` or
  `GameMap.from_file(path)`.
- `uyta.player.Player`: money, level and experience, with `plant_crops`,
  `plant_trees`, `perform_misc`, `update_money` and `update_exp`.
- `uyta.worker.Worker`: `find_path`, `find_closest_target`, `follow_path`.
- `uyta.ui.Canvas` and `uyta.ui.ToolbarData`: toolbar state and hit testing.
- `uyta.pause_menu.PauseMenu`, `uyta.tutorial.Tutorial`,
  `uyta.camera_controller.CameraController`: menu, hints and camera.
- `uyta.assets`: `load_textures(directory)` and `load_sounds(directory)`.
- `uyta.renderer` draws everything onto a pygame surface.

## What it does not do

- The game keeps no saved progress. The settings button labelled
  «Сохранить» only returns to the main pause page; nothing is written to disk.
- The volume setting lasts only until the game is closed.

## Development

```
pip install -e .[test]
pytest
```