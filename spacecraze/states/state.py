"""Screens of the game and the letterboxed view they are drawn through."""

from __future__ import annotations

import abc
import enum
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import pygame

from spacecraze.constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from spacecraze.util import logger

UI_FONT_PATH = "res/fonts/ShareTechMono-Regular.ttf"
FIXED_STEP = 1 / 60.0

Pointer = Callable[[], tuple[Sequence[float], bool]]


class StateId(enum.IntEnum):
    """Which screen runs next."""

    EXIT = -1
    MENU = 0
    GAME = 1
    PAUSE = 2


def compute_viewport(
    view_size: Sequence[float], window_size: Sequence[float]
) -> tuple[float, float, float, float]:
    """Return the viewport, as window fractions, that keeps the view's aspect ratio."""
    view_width, view_height = view_size
    width, height = (float(value) for value in window_size)
    ratio = view_width / view_height
    if width / height > ratio:
        share = ratio * height / width
        return ((1 - share) / 2, 0.0, share, 1.0)
    share = (1 / ratio * width) / height
    return (0.0, (1 - share) / 2, 1.0, share)


@dataclass
class View:
    """A world area of ``size`` shown in the ``viewport`` part of the window."""

    size: tuple[float, float] = (SCREEN_WIDTH, SCREEN_HEIGHT)
    viewport: tuple[float, float, float, float] = (0.0, 0.0, 1.0, 1.0)

    def viewport_rect(self, window_size: Sequence[int]) -> pygame.Rect:
        width, height = window_size
        left, top, share_x, share_y = self.viewport
        return pygame.Rect(
            int(0.5 + width * left),
            int(0.5 + height * top),
            int(0.5 + width * share_x),
            int(0.5 + height * share_y),
        )

    def map_pixel_to_coords(
        self, pixel: Sequence[float], window_size: Sequence[int]
    ) -> pygame.Vector2:
        """Convert a window pixel to world coordinates."""
        rect = self.viewport_rect(window_size)
        if rect.width <= 0 or rect.height <= 0:
            return pygame.Vector2()
        return pygame.Vector2(
            (pixel[0] - rect.left) / rect.width * self.size[0],
            (pixel[1] - rect.top) / rect.height * self.size[1],
        )

    def present(self, scene: pygame.Surface, target: pygame.Surface) -> None:
        """Scale a scene drawn in world coordinates into the viewport of ``target``."""
        rect = self.viewport_rect(target.get_size())
        if rect.width <= 0 or rect.height <= 0:
            return
        image = scene
        if scene.get_size() != rect.size:
            image = pygame.transform.scale(scene, rect.size)
        target.blit(image, rect.topleft)

    def scene(self) -> pygame.Surface:
        """Return a transparent surface covering the view's world area."""
        size = (round(self.size[0]), round(self.size[1]))
        surface = pygame.Surface(size, pygame.SRCALPHA)
        surface.fill((0, 0, 0, 0))
        return surface


def read_mouse() -> tuple[Sequence[float], bool]:
    """Return the mouse position in window pixels and whether the left button is down."""
    return pygame.mouse.get_pos(), bool(pygame.mouse.get_pressed()[0])


class State(abc.ABC):
    """One screen of the game: it runs until it names the next screen."""

    def __init__(self, pointer: Pointer | None = None) -> None:
        self.view = View()
        self.window: pygame.Surface | None = None
        self.state = StateId.EXIT
        self.pointer = pointer or read_mouse

    @abc.abstractmethod
    def run(self, window: pygame.Surface) -> StateId:
        """Run the screen on ``window`` and return the next one."""

    @abc.abstractmethod
    def handle(self, event: pygame.event.Event) -> None:
        """React to one input event."""

    @abc.abstractmethod
    def update(self, dt: float) -> None:
        """Advance the screen by ``dt`` seconds."""

    @abc.abstractmethod
    def draw(self) -> None:
        """Draw the screen onto its window."""

    def resize(self, size: Sequence[int], view: View) -> None:
        """Letterbox ``view`` inside a window of ``size``."""
        width, height = size
        if width <= 0 or height <= 0:
            return
        view.viewport = compute_viewport(view.size, size)

    @abc.abstractmethod
    def init(self) -> None:
        """Set up the screen's contents."""

    @abc.abstractmethod
    def cleanup(self) -> None:
        """Release the screen's contents."""

    def _require_window(self) -> pygame.Surface:
        if self.window is None:
            raise RuntimeError("the state has no window")
        return self.window

    def _read_pointer(self) -> tuple[pygame.Vector2, bool]:
        window = self._require_window()
        pixel, pressed = self.pointer()
        return self.view.map_pixel_to_coords(pixel, window.get_size()), pressed

    def _main_loop(self, current: StateId, fixed_step: bool) -> StateId:
        clock = pygame.time.Clock()
        start = time.perf_counter()
        last_update = 0.0
        accumulator = 0.0
        timer = 0.0
        frames = 0
        updates = 0

        while True:
            for event in pygame.event.get():
                self.handle(event)

            now = time.perf_counter() - start
            dt = now - last_update
            last_update = now

            if fixed_step:
                accumulator += dt
                while accumulator >= FIXED_STEP:
                    updates += 1
                    accumulator -= FIXED_STEP
                    self.update(dt)
            else:
                self.update(dt)
                updates += 1

            self.draw()
            pygame.display.flip()
            frames += 1

            if time.perf_counter() - start - timer > 1.0:
                timer += 1.0
                logger.info("FPS: %d, UPS: %d", frames, updates)
                frames = 0
                updates = 0

            if self.state != current:
                return self.state

            clock.tick(FPS)