import pygame
import pytest

from uyta.assets import asset_name, load_sounds, load_textures


def _save_image(path, size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("harvest0.wav", "harvest0"),
        ("crop0.v2.png", "crop0"),
        ("noext", "noext"),
        ("level_up.ogg", "level_up"),
    ],
)
def test_asset_name(filename, expected):
    assert asset_name(filename) == expected


def test_load_textures_keys_and_contents(tmp_path):
    _save_image(tmp_path / "grass.bmp", (16, 16), (0, 200, 0))
    _save_image(tmp_path / "crop0.v2.bmp", (32, 16), (200, 0, 0))
    (tmp_path / "nested").mkdir()

    textures = load_textures(tmp_path)

    assert sorted(textures) == ["crop0", "grass"]
    assert textures["grass"].get_size() == (16, 16)
    assert textures["crop0"].get_size() == (32, 16)
    assert tuple(textures["grass"].get_at((3, 3)))[:3] == (0, 200, 0)
    assert tuple(textures["crop0"].get_at((20, 5)))[:3] == (200, 0, 0)


def test_load_textures_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_textures(tmp_path / "absent")


def test_load_textures_bad_file(tmp_path):
    (tmp_path / "bad.bmp").write_bytes(b"nope")
    with pytest.raises(pygame.error):
        load_textures(tmp_path)


def test_load_sounds_empty_directory(tmp_path):
    assert load_sounds(tmp_path) == {}


def test_load_sounds_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sounds(tmp_path / "absent")