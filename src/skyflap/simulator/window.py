"""
Game window using pygame.

Hosts a GameSimulation, turns keyboard/mouse input into activations
and restarts, and shows the playfield with its UI overlays.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
import asyncio
import logging
import random

import pygame

from skyflap.config.settings import Settings, get_settings
from skyflap.core.events import EventBus
from skyflap.core.presentation import Presentation, connect
from skyflap.game.simulation import GameSimulation
from skyflap.graphics.scene import SceneRenderer

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Window configuration."""
    title: str = "SKYFLAP"
    fps: int = 60
    scale: int = 2

    # Colors
    text_color: tuple[int, int, int] = (255, 255, 255)
    shadow_color: tuple[int, int, int] = (30, 30, 30)
    panel_color: tuple[int, int, int, int] = (20, 25, 35, 210)
    accent_color: tuple[int, int, int] = (241, 196, 15)
    button_color: tuple[int, int, int] = (230, 126, 34)

    @classmethod
    def from_settings(cls, settings: Settings) -> "WindowConfig":
        return cls(
            title=settings.display.title,
            fps=settings.display.fps,
            scale=settings.display.scale,
        )


class SimulatorWindow(Presentation):
    """
    Main game window.

    Keyboard Mapping:
        SPACE: Start / flap
        Left click: Start / flap (or press RESTART when the game is over)
        R: Restart
        D: Toggle debug overlay
        L: Toggle log viewer
        S: Capture screenshot
        ESC / Q: Exit
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        config: Optional[WindowConfig] = None,
        event_bus: Optional[EventBus] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.config = config or WindowConfig.from_settings(self.settings)
        self.event_bus = event_bus or EventBus()

        # Overlay state, driven by the presentation hooks
        self._show_ready = False
        self._show_score = False
        self._score = 0
        self._final_score: Optional[int] = None

        self._disconnect = connect(self.event_bus, self)
        self.game = GameSimulation(self.settings, self.event_bus, rng=rng)
        self.scene = SceneRenderer(self.settings.playfield)

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = self.settings.display.show_debug or self.settings.debug

        self._font: pygame.font.Font | None = None
        self._big_font: pygame.font.Font | None = None
        self._small_font: pygame.font.Font | None = None

        # Log viewer
        self._show_log = False
        self._log_buffer: list[str] = []
        self._max_log_lines = 16
        self._setup_log_capture()

        logger.info("SimulatorWindow created")

    @property
    def size(self) -> Tuple[int, int]:
        """Window size in screen pixels."""
        return (
            self.settings.playfield.width * self.config.scale,
            self.settings.playfield.height * self.config.scale,
        )

    # Presentation hooks
    def on_ready_entered(self) -> None:
        self._show_ready = True
        self._show_score = False
        self._final_score = None
        self._score = 0

    def on_playing_entered(self) -> None:
        self._show_ready = False
        self._show_score = True

    def on_game_over(self, final_score: int) -> None:
        self._final_score = final_score
        logger.info(f"Game over, final score: {final_score}")

    def on_score_changed(self, new_score: int) -> None:
        self._score = new_score

    # Setup
    def _setup_log_capture(self) -> None:
        """Setup log capturing for the log viewer."""
        class WindowLogHandler(logging.Handler):
            def __init__(self, window: "SimulatorWindow"):
                super().__init__()
                self.window = window

            def emit(self, record):
                msg = self.format(record)
                self.window._log_buffer.append(msg)
                if len(self.window._log_buffer) > self.window._max_log_lines * 2:
                    self.window._log_buffer = self.window._log_buffer[-self.window._max_log_lines:]

        self._log_handler = WindowLogHandler(self)
        self._log_handler.setFormatter(logging.Formatter("%(levelname).1s %(name)s: %(message)s"))
        logging.getLogger().addHandler(self._log_handler)

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        self._screen = pygame.display.set_mode(self.size, pygame.DOUBLEBUF)
        self._clock = pygame.time.Clock()

        pygame.font.init()
        self._font = pygame.font.SysFont(None, 14 * self.config.scale)
        self._big_font = pygame.font.SysFont(None, 28 * self.config.scale)
        self._small_font = pygame.font.SysFont(None, 9 * self.config.scale)

        logger.info(f"Pygame initialized: {self.size[0]}x{self.size[1]}")

    # Input
    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event.pos)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key == pygame.K_ESCAPE or key == pygame.K_q:
            self._running = False
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key == pygame.K_l:
            self._show_log = not self._show_log
        elif key == pygame.K_s:
            self._capture_screenshot()
        elif key == pygame.K_r:
            self.game.restart()
        elif key == pygame.K_SPACE:
            self.game.activate()

    def _handle_click(self, pos: Tuple[int, int]) -> None:
        """Handle a left click at screen position ``pos``."""
        if self._final_score is not None:
            if self._restart_button_rect().collidepoint(pos):
                self.game.restart()
            return
        self.game.activate()

    def _restart_button_rect(self) -> pygame.Rect:
        w, h = self.size
        s = self.config.scale
        rect = pygame.Rect(0, 0, 100 * s, 28 * s)
        rect.center = (w // 2, h // 2 + 40 * s)
        return rect

    # Rendering
    def _render(self) -> None:
        """Render playfield and overlays."""
        if not self._screen:
            return

        buffer = self.scene.render(self.game)
        surface = pygame.surfarray.make_surface(buffer.swapaxes(0, 1))
        if self.config.scale != 1:
            surface = pygame.transform.scale(surface, self.size)
        self._screen.blit(surface, (0, 0))

        if self._show_ready:
            self._render_ready()
        if self._show_score and self._final_score is None:
            self._render_score()
        if self._final_score is not None:
            self._render_game_over()
        if self._show_debug:
            self._render_debug_panel()
        if self._show_log:
            self._render_log_panel()

        pygame.display.flip()

    def _text(
        self,
        font: pygame.font.Font,
        text: str,
        center: Tuple[int, int],
        color: Optional[tuple[int, int, int]] = None,
    ) -> None:
        """Draw centred text with a drop shadow."""
        shadow = font.render(text, True, self.config.shadow_color)
        surface = font.render(text, True, color or self.config.text_color)
        offset = self.config.scale
        self._screen.blit(shadow, shadow.get_rect(center=(center[0] + offset, center[1] + offset)))
        self._screen.blit(surface, surface.get_rect(center=center))

    def _render_ready(self) -> None:
        w, h = self.size
        s = self.config.scale
        self._text(self._big_font, "GET READY", (w // 2, h // 3), self.config.accent_color)
        self._text(self._font, "SPACE or click to flap", (w // 2, h // 3 + 30 * s))

    def _render_score(self) -> None:
        w, _ = self.size
        self._text(self._big_font, str(self._score), (w // 2, 40 * self.config.scale))

    def _render_game_over(self) -> None:
        w, h = self.size
        s = self.config.scale

        panel = pygame.Rect(0, 0, 200 * s, 150 * s)
        panel.center = (w // 2, h // 2)
        surf = pygame.Surface(panel.size, pygame.SRCALPHA)
        surf.fill(self.config.panel_color)
        self._screen.blit(surf, panel.topleft)

        self._text(self._big_font, "GAME OVER", (w // 2, h // 2 - 45 * s), self.config.accent_color)
        self._text(self._font, f"Score: {self._final_score}", (w // 2, h // 2 - 10 * s))

        button = self._restart_button_rect()
        pygame.draw.rect(self._screen, self.config.button_color, button, border_radius=6 * s)
        self._text(self._font, "RESTART", button.center)

    def _render_debug_panel(self) -> None:
        """Render the debug information panel."""
        if not self._small_font:
            return

        bird = self.game.bird
        lines = [
            f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: --",
            f"Frame: {self.game.frame}",
            f"State: {self.game.state.name}",
            f"Score: {self.game.score.value}",
            f"Pipes: {len(self.game.obstacles)}",
            f"Bird y: {bird.y:.1f}  v: {bird.velocity:.2f}",
        ]

        s = self.config.scale
        y = 6 * s
        for line in lines:
            text_surface = self._small_font.render(line, True, self.config.text_color)
            self._screen.blit(text_surface, (6 * s, y))
            y += 10 * s

    def _render_log_panel(self) -> None:
        """Render the log viewer panel."""
        if not self._small_font:
            return

        w, h = self.size
        s = self.config.scale
        rect = pygame.Rect(0, h - 120 * s, w, 120 * s)
        surf = pygame.Surface(rect.size, pygame.SRCALPHA)
        surf.fill(self.config.panel_color)
        self._screen.blit(surf, rect.topleft)

        y = rect.y + 4 * s
        for line in self._log_buffer[-self._max_log_lines:]:
            if line.startswith("E"):
                color = (255, 100, 100)
            elif line.startswith("W"):
                color = (255, 200, 100)
            elif line.startswith("I"):
                color = (150, 200, 150)
            else:
                color = (150, 150, 170)

            display_line = line[:55] + "..." if len(line) > 58 else line
            text_surf = self._small_font.render(display_line, True, color)
            self._screen.blit(text_surf, (rect.x + 4 * s, y))
            y += 7 * s
            if y > rect.bottom - 7 * s:
                break

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._screen:
            filename = f"skyflap_{self._frame_count}.png"
            pygame.image.save(self._screen, filename)
            logger.info(f"Screenshot saved: {filename}")

    # Main loop
    async def run(self) -> None:
        """Main game loop: one simulation tick per rendered frame."""
        self._init_pygame()
        self._running = True

        logger.info("Simulator started")

        try:
            while self._running:
                self._handle_events()
                self.game.tick()
                self._render()

                if self._clock:
                    self._clock.tick(self.config.fps)
                self._frame_count += 1

                # Yield to other tasks
                await asyncio.sleep(0)
        finally:
            self._cleanup()

    def _cleanup(self) -> None:
        """Release pygame and detach from the game."""
        self._disconnect()
        logging.getLogger().removeHandler(self._log_handler)
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        """Stop the main loop."""
        self._running = False
