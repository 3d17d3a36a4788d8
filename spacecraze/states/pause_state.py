"""The pause screen, shown over a still image of the game."""

from __future__ import annotations

import pygame

from spacecraze.states.state import UI_FONT_PATH, Pointer, State, StateId, View
from spacecraze.ui.button import (
    BUTTON_ACTIVE_COLOR,
    BUTTON_COLOR,
    BUTTON_HOVER_COLOR,
    TEXT_SIZE,
    Button,
    load_font,
)

BUTTON_SIZE = (200.0, 50.0)


class PauseState(State):
    """Offers to continue the game or to leave for the menu."""

    def __init__(
        self,
        font: pygame.font.Font | None = None,
        pointer: Pointer | None = None,
    ) -> None:
        super().__init__(pointer)
        self.font = font or load_font(UI_FONT_PATH, TEXT_SIZE)
        self.continue_button = Button()
        self.menu_button = Button()
        self.window_view = View()
        self._snapshot: pygame.Surface | None = None
        self.init()

    def run(self, window: pygame.Surface) -> StateId:
        self.window = window
        self.view = View()
        self.resize(window.get_size(), self.view)
        self.state = StateId.PAUSE
        self._capture_window()
        return self._main_loop(StateId.PAUSE, fixed_step=True)

    def _capture_window(self) -> None:
        window = self._require_window()
        self._snapshot = window.copy()
        self.window_view = View(size=window.get_size())

    def handle(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.state = StateId.EXIT

        if event.type == pygame.VIDEORESIZE:
            self.resize(event.size, self.view)
            self.resize(event.size, self.window_view)

        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.state = StateId.GAME

    def update(self, dt: float) -> None:
        position, pressed = self._read_pointer()
        if self.continue_button.update(position, pressed):
            self.state = StateId.GAME
        if self.menu_button.update(position, pressed):
            self.state = StateId.MENU

    def draw(self) -> None:
        window = self._require_window()
        window.fill((0, 0, 0))
        if self._snapshot is not None:
            self.window_view.present(self._snapshot, window)

        scene = self.view.scene()
        self.continue_button.draw(scene)
        self.menu_button.draw(scene)
        self.view.present(scene, window)

    def init(self) -> None:
        centre = 640.0 / 2.0
        for button, label, y in (
            (self.continue_button, "Continue", 200.0),
            (self.menu_button, "Exit to menu", 260.0),
        ):
            button.set_size(BUTTON_SIZE)
            button.set_color(BUTTON_COLOR, BUTTON_HOVER_COLOR, BUTTON_ACTIVE_COLOR)
            button.set_text(label, self.font)
            button.set_position((centre, y))

    def cleanup(self) -> None:
        """Release the captured image of the game."""
        self._snapshot = None