import os
import logging

import pytest
from PIL import Image

from pathgame.core.definitions import TileID
from pathgame.visualization.asset_manager import AssetManager, PYGAME_AVAILABLE

pytestmark = pytest.mark.skipif(not PYGAME_AVAILABLE, reason="Pygame not available")


@pytest.fixture(autouse=True)
def init_pygame():
    # Use dummy video driver to avoid opening windows in CI
    os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
    import pygame
    pygame.init()
    yield
    pygame.quit()


def test_background_loaded_and_scaled(tmp_path):
    path = tmp_path / 'bg.png'
    Image.new('RGB', (10, 10), (10, 20, 30)).save(path)

    assets = AssetManager(background_path=str(path))
    surface = assets.load_background((64, 48))

    assert surface is not None
    assert surface.get_size() == (64, 48)
    r, g, b = tuple(surface.get_at((5, 5)))[:3]
    assert abs(r - 10) <= 1 and abs(g - 20) <= 1 and abs(b - 30) <= 1

    # Cached for the same size
    assert assets.load_background((64, 48)) is surface


def test_webp_background_is_decoded(tmp_path):
    path = tmp_path / 'NEW.webp'
    try:
        Image.new('RGB', (8, 8), (200, 0, 0)).save(path, format='WEBP', lossless=True)
    except (OSError, KeyError, ValueError):
        pytest.skip("Pillow built without WebP support")

    assets = AssetManager(background_path=str(path))
    surface = assets.load_background((16, 16))
    assert surface is not None
    r, g, b = tuple(surface.get_at((8, 8)))[:3]
    assert abs(r - 200) <= 1 and g <= 1 and b <= 1


def test_missing_background_logs_error_and_returns_none(tmp_path, caplog):
    assets = AssetManager(background_path=str(tmp_path / 'missing.webp'))
    with caplog.at_level(logging.ERROR):
        assert assets.load_background((64, 48)) is None
    assert "failed to load" in caplog.text
    assert "missing.webp" in caplog.text


def test_unreadable_background_is_not_retried(tmp_path, caplog):
    path = tmp_path / 'broken.webp'
    path.write_bytes(b'not an image')
    assets = AssetManager(background_path=str(path))

    with caplog.at_level(logging.ERROR):
        assert assets.load_background((64, 48)) is None
        assert assets.load_background((64, 48)) is None
    assert caplog.text.count("failed to load") == 1


def test_no_background_configured():
    assert AssetManager(background_path=None).load_background((10, 10)) is None


def test_solid_tiles_are_cached():
    assets = AssetManager(tile_size=16)
    obstacle = assets.get_tile(TileID.OBSTACLE)
    assert obstacle.get_size() == (16, 16)
    assert tuple(obstacle.get_at((0, 0)))[:3] == (255, 0, 0)
    assert assets.get_tile(TileID.OBSTACLE) is obstacle
    assert tuple(assets.get_tile('goal').get_at((3, 3)))[:3] == (0, 255, 0)


def test_overlays_are_translucent():
    assets = AssetManager(tile_size=16)
    assert assets.get_path_overlay().get_at((0, 0)) == (255, 223, 186, 150)
    win = assets.get_win_overlay((40, 30))
    assert win.get_size() == (40, 30)
    assert win.get_at((0, 0)).a == 150


def test_set_tile_size_clears_cache():
    assets = AssetManager(tile_size=16)
    assets.get_tile('goal')
    assets.set_tile_size(8)
    assert assets.get_tile('goal').get_size() == (8, 8)


def test_oversized_background_falls_back(tmp_path, monkeypatch, caplog):
    path = tmp_path / 'huge.png'
    Image.new('RGB', (64, 64), (1, 2, 3)).save(path)
    # Anything over twice the limit is refused outright by Pillow
    monkeypatch.setattr(Image, 'MAX_IMAGE_PIXELS', 100)

    assets = AssetManager(background_path=str(path))
    with caplog.at_level(logging.ERROR):
        assert assets.load_background((64, 48)) is None
    assert "failed to load" in caplog.text
