from types import SimpleNamespace
import asyncio
import logging

import pygame
import pytest

from skyflap.core.events import EventType, score_event
from skyflap.core.state import GameState
from skyflap.simulator.window import SimulatorWindow


@pytest.fixture
def window(settings):
    window = SimulatorWindow(settings)
    yield window
    window._cleanup()


def test_window_starts_on_ready_screen(window):
    assert window._show_ready
    assert not window._show_score
    assert window.size == (640, 960)


def test_space_activates(window):
    window._handle_keydown(SimpleNamespace(key=pygame.K_SPACE))
    window.game.tick()
    assert window.game.state == GameState.PLAYING
    assert window._show_score and not window._show_ready


def test_r_key_restarts(window):
    window._handle_keydown(SimpleNamespace(key=pygame.K_SPACE))
    window.game.tick()
    window._handle_keydown(SimpleNamespace(key=pygame.K_r))
    window.game.tick()
    assert window.game.state == GameState.READY
    assert window._show_ready


def test_click_activates_while_playing(window):
    window._handle_click((10, 10))
    assert window.game.pending_inputs == 1


def test_click_outside_restart_button_is_ignored_when_over(window):
    window.game.activate()
    while window.game.state != GameState.OVER:
        window.game.tick()
    assert window._final_score == 0

    window._handle_click((0, 0))
    assert window.game.pending_inputs == 0

    window._handle_click(window._restart_button_rect().center)
    window.game.tick()
    assert window.game.state == GameState.READY
    assert window._final_score is None


def test_escape_stops_loop(window):
    window._running = True
    window._handle_keydown(SimpleNamespace(key=pygame.K_ESCAPE))
    assert not window._running


def test_failed_tick_still_cleans_up(window, monkeypatch):
    def crash():
        raise RuntimeError("tick failed")

    monkeypatch.setattr(window, "_init_pygame", lambda: None)
    monkeypatch.setattr(window, "_handle_events", lambda: None)
    monkeypatch.setattr(window.game, "tick", crash)

    with pytest.raises(RuntimeError, match="tick failed"):
        asyncio.run(window.run())

    assert window._log_handler not in logging.getLogger().handlers
    window.event_bus.emit(score_event(EventType.GAME_OVER, 3))
    assert window._final_score is None
