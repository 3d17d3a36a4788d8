"""Entry point: opens the window and switches between the game's screens."""

from __future__ import annotations

import random
import re
import time
from collections.abc import Sequence
from pathlib import Path

import pygame

from spacecraze.constants import CONFIG_PATH, SCREEN_HEIGHT, SCREEN_WIDTH
from spacecraze.states.game_state import GameState
from spacecraze.states.menu_state import MenuState
from spacecraze.states.pause_state import PauseState
from spacecraze.states.state import State, StateId

TITLE = "Space Craze"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_seed(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid seed: {text!r}")
    return int(match.group(1))


def configure(path: str | Path) -> None:
    """Apply ``key=value`` settings from a config file; a missing file is ignored.

    ``seed=<n>`` seeds the random generator with ``n``; a bare ``seed`` seeds
    it from the clock.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            lines = handle.read().splitlines()
    except OSError:
        return

    for line in lines:
        words = line.split("=")
        if words and words[-1] == "":
            words.pop()
        if not words:
            continue
        if words[0] == "seed":
            if len(words) == 1:
                random.seed(int(time.time()))
            else:
                random.seed(_parse_seed(words[1]))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game until the player exits."""
    pygame.init()
    window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)

    configure(CONFIG_PATH)

    menu = MenuState()
    game = GameState()
    pause = PauseState()
    states: dict[StateId, State] = {
        StateId.MENU: menu,
        StateId.GAME: game,
        StateId.PAUSE: pause,
    }

    current = StateId.MENU
    try:
        while current != StateId.EXIT:
            if current == StateId.MENU:
                game.reset()
            current = states[current].run(pygame.display.get_surface() or window)
    finally:
        pygame.display.quit()
        for state in states.values():
            state.cleanup()
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())