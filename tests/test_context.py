import os

import pygame
import pytest

from ptsd.config import FPS_CAP, WINDOW_HEIGHT, WINDOW_WIDTH
from ptsd.context import Context

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def ctx():
    context = Context.get_instance()
    yield context
    context.close()


def test_get_instance_is_shared(ctx):
    assert Context.get_instance() is ctx


def test_window_matches_config(ctx):
    assert ctx.window_width == WINDOW_WIDTH
    assert ctx.window_height == WINDOW_HEIGHT
    assert ctx.window.get_size() == (WINDOW_WIDTH, WINDOW_HEIGHT)


def test_exit_flag(ctx):
    assert ctx.exit is False
    ctx.exit = True
    assert ctx.exit is True


def test_quit_event_requests_exit(ctx):
    ctx.setup()
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    ctx.update()
    assert ctx.input.exit_requested()


def test_update_advances_time(ctx):
    ctx.update()
    assert ctx.time.delta_ms() > 0


def test_frame_cap_waits(ctx):
    ctx.update()
    after_first = ctx.time.elapsed_ms()
    ctx.update()
    assert ctx.time.elapsed_ms() - after_first >= 1000.0 / FPS_CAP - 2


def test_update_clears_window(ctx):
    ctx.window.fill((255, 255, 255))
    ctx.update()
    assert tuple(ctx.window.get_at((0, 0)))[:3] == (0, 0, 0)


def test_set_window_icon(ctx, tmp_path):
    path = tmp_path / "icon.png"
    pygame.image.save(pygame.Surface((16, 16)), str(path))
    ctx.set_window_icon(str(path))
    assert ctx.icon.get_size() == (16, 16)


def test_set_window_icon_missing(ctx, tmp_path):
    with pytest.raises(FileNotFoundError):
        ctx.set_window_icon(str(tmp_path / "missing.png"))
    assert ctx.icon is None


def test_close_releases_instance():
    first = Context.get_instance()
    first.close()
    assert first.window is None
    second = Context.get_instance()
    try:
        assert second is not first
        assert second.window.get_size() == (WINDOW_WIDTH, WINDOW_HEIGHT)
    finally:
        second.close()