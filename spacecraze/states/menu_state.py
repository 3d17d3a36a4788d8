"""The main menu with its buttons and the high-score list."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pygame

from spacecraze.constants import HIGHSCORE_PATH
from spacecraze.objects.base import GameObject
from spacecraze.objects.star import Star
from spacecraze.states.state import UI_FONT_PATH, Pointer, State, StateId, View
from spacecraze.ui.button import (
    BUTTON_ACTIVE_COLOR,
    BUTTON_COLOR,
    BUTTON_HOVER_COLOR,
    TEXT_SIZE,
    Button,
    load_font,
)
from spacecraze.util import read_scores

STAR_COUNT = 120
BUTTON_SIZE = (200.0, 50.0)
CENTRE_X = 640.0 / 2.0

TITLE = "Space Craze"
SCOREBOARD = "Scoreboard"
TITLE_SIZE = 65
SCORE_SIZE = 42

YELLOW = (255, 255, 0)
WHITE = (255, 255, 255)

BUTTONS = (("Play", 200.0), ("Highscore", 260.0), ("Exit", 320.0), ("Back", 380.0))


def format_score_list(scores: Sequence[tuple[str, int]]) -> str:
    """Render high-score entries as ``name: score`` lines."""
    return "".join(f"{name}: {score}\n" for name, score in scores)


def _blit_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    color: tuple[int, int, int],
    center: Sequence[float],
) -> None:
    images = [font.render(line, True, color) for line in text.split("\n")]
    width = max(image.get_width() for image in images)
    height = font.get_linesize() * len(images)
    left = center[0] - width / 2
    top = center[1] - height / 2
    for row, image in enumerate(images):
        surface.blit(image, (round(left), round(top + row * font.get_linesize())))


class MenuState(State):
    """Lets the player start a game, view the high scores or quit."""

    def __init__(
        self,
        pointer: Pointer | None = None,
        star_factory: Callable[[], GameObject] = Star,
        star_count: int = STAR_COUNT,
        highscore_path: str | Path = HIGHSCORE_PATH,
    ) -> None:
        super().__init__(pointer)
        self.highscore_path = highscore_path
        self.button_font = load_font(UI_FONT_PATH, TEXT_SIZE)
        self.title_font = load_font(UI_FONT_PATH, TITLE_SIZE)
        self.score_font = load_font(UI_FONT_PATH, SCORE_SIZE)

        self.toggle_score = False
        self.scores: list[tuple[str, int]] = []
        self.score_list = ""
        self.buttons: list[Button] = []
        self.objects: list[GameObject] = []

        self.init()
        self.stars = [star_factory() for _ in range(star_count)]

    def run(self, window: pygame.Surface) -> StateId:
        self.window = window
        self.state = StateId.MENU
        self.view = View()
        self.resize(window.get_size(), self.view)

        self.scores = read_scores(self.highscore_path)
        self.score_list = format_score_list(self.scores)

        return self._main_loop(StateId.MENU, fixed_step=True)

    def handle(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.state = StateId.EXIT

        if event.type == pygame.VIDEORESIZE:
            self.resize(event.size, self.view)

        if event.type == pygame.KEYDOWN and self.toggle_score and event.key == pygame.K_ESCAPE:
            self.toggle_score = False

    def update(self, dt: float) -> None:
        position, pressed = self._read_pointer()
        play, highscore, exit_button, back = self.buttons

        if not self.toggle_score:
            if play.update(position, pressed):
                self.state = StateId.GAME
            if highscore.update(position, pressed):
                self.toggle_score = True
            if exit_button.update(position, pressed):
                self.state = StateId.EXIT
        elif back.update(position, pressed):
            self.toggle_score = False

        for star in self.stars:
            star.update(dt, self.objects)

    def draw(self) -> None:
        window = self._require_window()
        window.fill((0, 0, 0))
        scene = self.view.scene()

        for star in self.stars:
            star.draw(scene)

        if not self.toggle_score:
            _blit_text(scene, self.title_font, TITLE, YELLOW, (CENTRE_X, 80.0))
            for button in self.buttons[:3]:
                button.draw(scene)
        else:
            _blit_text(scene, self.score_font, SCOREBOARD, YELLOW, (CENTRE_X, 40.0))
            _blit_text(scene, self.score_font, self.score_list, WHITE, (CENTRE_X, 220.0))
            self.buttons[3].draw(scene)

        self.view.present(scene, window)

    def init(self) -> None:
        self.buttons = []
        for label, y in BUTTONS:
            button = Button()
            button.set_size(BUTTON_SIZE)
            button.set_color(BUTTON_COLOR, BUTTON_HOVER_COLOR, BUTTON_ACTIVE_COLOR)
            button.set_text(label, self.button_font)
            button.set_position((CENTRE_X, y))
            self.buttons.append(button)

    def cleanup(self) -> None:
        self.stars.clear()