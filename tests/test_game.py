from unittest import mock

import pygame
import pytest

from spritequest.game import Game, main
from spritequest.states import MenuState, PlayState

RED = (255, 0, 0)


@pytest.fixture
def assets(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.setenv("SDL_VIDEO_WINDOW_POS", "0,0")
    image = pygame.Surface((400, 100))
    image.fill(RED)
    pygame.image.save(image, str(tmp_path / "button.png"))
    pygame.image.save(image, str(tmp_path / "exit.png"))
    yield tmp_path
    pygame.quit()


@pytest.fixture
def game(assets):
    g = Game(asset_dir=assets)
    g.init("Test", 100, 100, 640, 480, False)
    return g


def test_init_starts_running_in_menu(game):
    assert game.running is True
    assert isinstance(game.state_machine.current, MenuState)
    assert game.screen.get_size() == (640, 480)


def test_quit_stops_running(game):
    game.quit()
    assert game.running is False


def test_quit_event_stops_running(game):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    game.handle_events()
    assert game.running is False


def test_return_key_switches_to_play(game):
    game.input.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    game.handle_events()
    assert isinstance(game.state_machine.current, PlayState)
    assert len(game.state_machine) == 1


def test_menu_textures_dropped_after_switch(game):
    assert "playbutton" in game.textures
    game.input.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_RETURN))
    game.handle_events()
    assert "playbutton" not in game.textures
    assert "exitbutton" not in game.textures


def test_render_draws_menu_buttons(game):
    game.update()
    game.render()
    assert tuple(game.screen.get_at((150, 150)))[:3] == RED
    assert tuple(game.screen.get_at((5, 5)))[:3] == (0, 0, 0)


def test_render_before_init_raises(assets):
    with pytest.raises(RuntimeError):
        Game(asset_dir=assets).render()


def test_clean_shuts_display_down(game):
    game.clean()
    assert pygame.display.get_init() is False
    assert game.screen is None


def test_main_runs_until_quit(assets):
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main(["--assets", str(assets)]) == 0
    assert pygame.display.get_init() is False