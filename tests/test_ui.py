import json
from types import SimpleNamespace

import pygame
import pytest

from uyta.game_map import Crop, GameMap, Tree
from uyta.ui import Canvas, MenuMode, Rect, ToolbarData, ToolbarItem

TOOLBAR = {
    "crops": [
        {"tooltip": "Морковь", "unlock_level": 1, "price": 10},
        {"tooltip": "Картофель", "unlock_level": 1, "price": 20},
        {"tooltip": "Тыква", "unlock_level": 3, "price": 40},
    ],
    "trees": [
        {"tooltip": "Яблоня", "unlock_level": 2, "price": 100},
        {"tooltip": "Груша", "unlock_level": 3, "price": 150},
    ],
    "misc": [
        {"tooltip": "Работник", "unlock_level": 1, "price": 100},
        {"tooltip": "Лопата", "unlock_level": 1, "price": 0},
    ],
}


class RecordingFont:
    def __init__(self):
        self.texts = []

    def render(self, text, antialias, color):
        self.texts.append(text)
        return pygame.Surface((max(len(text), 1), 8))


def make_map():
    return GameMap(
        crops_data=[Crop(3, 10), Crop(5, 20), Crop(7, 30)],
        tree_data=[Tree(10, 5, 50), Tree(15, 5, 80)],
    )


def make_canvas():
    return Canvas(ToolbarData.from_dict(TOOLBAR))


def make_textures():
    names = ["crop_menu", "tree_menu", "misc_menu", "crop0", "crop1", "crop2",
             "tree0", "tree1", "misc0", "misc1"]
    return {name: pygame.Surface((128, 32)) for name in names}


def center(rect):
    return (rect.x + rect.width / 2, rect.y + rect.height / 2)


def test_rect_contains_edges():
    rect = Rect(10, 20, 30, 40)
    assert rect.contains((10, 20))
    assert rect.contains((39.9, 59.9))
    assert not rect.contains((40, 30))
    assert not rect.contains((20, 60))
    assert not rect.contains((9.9, 30))


def test_toolbar_from_dict():
    data = ToolbarData.from_dict(TOOLBAR)
    assert data.crops[0] == ToolbarItem("Морковь", 1, 10)
    assert len(data.trees) == 2
    assert data.misc[1].price == 0


def test_toolbar_from_file(tmp_path):
    path = tmp_path / "toolbar.json"
    path.write_text(json.dumps(TOOLBAR), encoding="utf-8")
    assert ToolbarData.from_file(path) == ToolbarData.from_dict(TOOLBAR)


def test_toolbar_missing_section():
    with pytest.raises(KeyError):
        ToolbarData.from_dict({"crops": [], "trees": []})


def test_toolbar_negative_price():
    bad = dict(TOOLBAR, misc=[{"tooltip": "x", "unlock_level": 1, "price": -1}])
    with pytest.raises(ValueError):
        ToolbarData.from_dict(bad)


def test_new_canvas_defaults():
    canvas = make_canvas()
    assert canvas.mode is MenuMode.CROPS
    assert canvas.selected == 0
    assert len(canvas.content) == 3
    assert canvas.subcontent == []


def test_blocks_mouse_over_content_only():
    canvas = make_canvas()
    assert all(canvas.blocks_mouse(center(rect)) for rect in canvas.content)
    assert not canvas.blocks_mouse((1000, 1000))


def test_layout_submenu_counts():
    canvas = make_canvas()
    game_map = make_map()
    assert len(canvas.layout_submenu(game_map)) == len(game_map.crops_data)
    canvas.mode = MenuMode.TREES
    assert len(canvas.layout_submenu(game_map)) == 2


def test_layout_submenu_stacked_right_of_content():
    canvas = make_canvas()
    rects = canvas.layout_submenu(make_map())
    ys = [rect.y for rect in rects]
    assert ys == sorted(ys)
    right_edge = max(rect.x + rect.width for rect in canvas.content)
    assert all(rect.x >= right_edge for rect in rects)
    assert all(canvas.blocks_mouse(center(rect)) for rect in rects)


def test_update_switches_to_unlocked_mode():
    canvas = make_canvas()
    canvas.selected = 1
    hint = canvas.update(center(canvas.content[2]), True, SimpleNamespace(level=1))
    assert canvas.mode is MenuMode.MISC
    assert canvas.selected == 0
    assert hint is None


def test_update_locked_mode_gives_hint():
    canvas = make_canvas()
    hint = canvas.update(center(canvas.content[1]), True, SimpleNamespace(level=1))
    assert canvas.mode is MenuMode.CROPS
    assert hint == "Откроется на уровне 2"
    assert canvas.lock_hint[0] == hint


def test_update_without_click_keeps_mode():
    canvas = make_canvas()
    canvas.update(center(canvas.content[2]), False, SimpleNamespace(level=5))
    assert canvas.mode is MenuMode.CROPS


def test_update_selects_subitem():
    canvas = make_canvas()
    canvas.layout_submenu(make_map())
    canvas.update(center(canvas.subcontent[1]), True, SimpleNamespace(level=1))
    assert canvas.selected == 1


def test_update_locked_subitem_not_selected():
    canvas = make_canvas()
    canvas.layout_submenu(make_map())
    hint = canvas.update(center(canvas.subcontent[2]), True, SimpleNamespace(level=1))
    assert canvas.selected == 0
    assert hint == "Откроется на уровне 3"


def test_draw_shows_selected_tooltip():
    canvas = make_canvas()
    font = RecordingFont()
    surface = pygame.Surface((1280, 720))
    canvas.draw(surface, make_map(), make_textures(), SimpleNamespace(level=1), font)
    assert font.texts == ["Морковь", "10"]
    assert len(canvas.subcontent) == 3


def test_draw_free_item_has_no_price():
    canvas = make_canvas()
    canvas.mode = MenuMode.MISC
    canvas.selected = 1
    font = RecordingFont()
    surface = pygame.Surface((1280, 720))
    canvas.draw(surface, make_map(), make_textures(), SimpleNamespace(level=1), font)
    assert font.texts == ["Лопата"]


def test_draw_includes_lock_hint():
    canvas = make_canvas()
    player = SimpleNamespace(level=1)
    canvas.update(center(canvas.content[1]), False, player)
    font = RecordingFont()
    canvas.draw(pygame.Surface((1280, 720)), make_map(), make_textures(), player, font)
    assert font.texts[-1] == "Откроется на уровне 2"