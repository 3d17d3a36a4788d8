"""The game screen: the player, the enemies, the score and the game-over prompt."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Sequence
from pathlib import Path

import pygame

from spacecraze.constants import HIGHSCORE_PATH, SCREEN_HEIGHT, SCREEN_WIDTH, WAVES_PATH
from spacecraze.objects.base import Collidable, GameObject
from spacecraze.objects.enemies import Boss
from spacecraze.objects.player import Player
from spacecraze.objects.star import Star
from spacecraze.resources import AudioManager
from spacecraze.spawner import Spawner
from spacecraze.states.state import UI_FONT_PATH, Pointer, State, StateId, View
from spacecraze.ui.button import load_font
from spacecraze.ui.gamebar import GameBar
from spacecraze.util import read_scores, score_value

PRELOADED_SOUNDS = (
    "res/audio/explosion.wav",
    "res/audio/hurt.wav",
    "res/audio/laser.wav",
    "res/audio/powerup.wav",
    "res/audio/ufo.wav",
)

STAR_COUNT = 120
BOSS_SCORE_INTERVAL = 20
MAX_SCORES = 5

NAME_FONT_SIZE = 40
GAME_OVER_FONT_SIZE = 38
GAME_OVER_TEXT = "  Game over! Skriv in ditt\nnamn och spara ditt resultat"

NAME_CENTER = (SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2)
GAME_OVER_CENTER = (SCREEN_WIDTH / 2, 100.0)

WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)


def record_score(path: str | Path, name: str, score: int) -> list[tuple[str, int]]:
    """Add a result to the high-score file, keep the best five and return them."""
    scores = read_scores(path)
    scores.append((name, score))
    best = list(reversed(sorted(scores, key=score_value)))[:MAX_SCORES]
    with open(path, "w", encoding="utf-8", newline="") as handle:
        for entry_name, entry_score in best:
            handle.write(f"{entry_name},{entry_score}\n")
    return best


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


class GameState(State):
    """Runs the game itself until the player pauses, quits or saves a score."""

    def __init__(
        self,
        pointer: Pointer | None = None,
        player_factory: Callable[[], Player] = Player,
        star_factory: Callable[[], GameObject] = Star,
        bar_factory: Callable[[Player], GameBar] = GameBar,
        boss_factory: Callable[[], GameObject] = Boss,
        spawner: Spawner | None = None,
        waves_path: str | Path = WAVES_PATH,
        highscore_path: str | Path = HIGHSCORE_PATH,
        star_count: int = STAR_COUNT,
        preload_audio: bool = True,
    ) -> None:
        super().__init__(pointer)
        self.player_factory = player_factory
        self.star_factory = star_factory
        self.bar_factory = bar_factory
        self.boss_factory = boss_factory
        self.spawner = spawner if spawner is not None else Spawner(1.0, 1.0)
        self.waves_path = waves_path
        self.highscore_path = highscore_path
        self.star_count = star_count

        if preload_audio:
            audio = AudioManager.instance()
            for path in PRELOADED_SOUNDS:
                audio.load(path)

        self.name_font = load_font(UI_FONT_PATH, NAME_FONT_SIZE)
        self.game_over_font = load_font(UI_FONT_PATH, GAME_OVER_FONT_SIZE)

        self.player: Player | None = None
        self.game_bar: GameBar | None = None
        self.boss: GameObject | None = None
        self.objects: list[GameObject] = []
        self.new_objects: list[GameObject] = []
        self.stars: list[GameObject] = []
        self.name_input = ""
        self.score = 0
        self.boss_fight = False
        self.game_over = False

    def _require_player(self) -> Player:
        if self.player is None:
            raise RuntimeError("the game has not been initialised")
        return self.player

    def _require_bar(self) -> GameBar:
        if self.game_bar is None:
            raise RuntimeError("the game has not been initialised")
        return self.game_bar

    def run(self, window: pygame.Surface) -> StateId:
        self.window = window
        self.state = StateId.GAME
        self.view = View()
        self.resize(window.get_size(), self.view)
        return self._main_loop(StateId.GAME, fixed_step=False)

    def handle(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.state = StateId.EXIT

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.state = StateId.PAUSE
            if event.key == pygame.K_g:
                self._require_player().toggle_god_mode()
            if self.game_over:
                if event.key == pygame.K_BACKSPACE and self.name_input:
                    self.name_input = self.name_input[:-1]
                if event.key == pygame.K_RETURN:
                    self.save_score()
                    self.state = StateId.MENU

        if self.game_over and event.type == pygame.TEXTINPUT:
            self.name_input += "".join(ch for ch in event.text if 0x20 <= ord(ch) <= 0x7E)

        if event.type == pygame.VIDEORESIZE:
            self.resize(event.size, self.view)

    def update(self, dt: float) -> None:
        player = self._require_player()
        bar = self._require_bar()

        for star in self.stars:
            star.update(dt, self.new_objects)

        self.check_collision()

        player.update(dt, self.new_objects)
        for obj in self.objects:
            obj.update(dt, self.new_objects)

        survivors = []
        for obj in self.objects:
            if not obj.dead:
                survivors.append(obj)
                continue
            if obj.add_score:
                self.score += 1
                bar.show_score(self.score)
            if obj is self.boss:
                self.boss_fight = False
                self.boss = None
        self.objects = survivors

        if player.dead:
            self.game_over = True

        self.objects.extend(self.new_objects)
        self.new_objects.clear()

        if not self.boss_fight and self.score % BOSS_SCORE_INTERVAL == 0 and self.score != 0:
            self.objects.clear()
            self.boss = self.boss_factory()
            self.objects.append(self.boss)
            self.boss_fight = True

        if not self.boss_fight and self.spawner.update(dt, self.new_objects):
            self.spawner.read_file(self.waves_path, player)

        bar.update()

    def draw(self) -> None:
        window = self._require_window()
        window.fill((0, 0, 0))
        scene = self.view.scene()

        for star in self.stars:
            star.draw(scene)
        for obj in self.objects:
            obj.draw(scene)
        self._require_player().draw(scene)
        self._require_bar().draw(scene)

        if self.game_over:
            _blit_text(scene, self.name_font, self.name_input, WHITE, NAME_CENTER)
            _blit_text(scene, self.game_over_font, GAME_OVER_TEXT, YELLOW, GAME_OVER_CENTER)

        self.view.present(scene, window)

    def check_collision(self) -> None:
        """Let every pair of touching collidables, the player included, react."""
        participants = [*self.objects, self._require_player()]
        for first, second in itertools.combinations(participants, 2):
            if not (isinstance(first, Collidable) and isinstance(second, Collidable)):
                continue
            if first.collides(second):
                first.on_collision(second, self.new_objects)
                second.on_collision(first, self.new_objects)

    def save_score(self) -> None:
        record_score(self.highscore_path, self.name_input, self.score)

    def init(self) -> None:
        self.player = self.player_factory()
        self.spawner.read_file(self.waves_path, self.player)
        self.stars = [self.star_factory() for _ in range(self.star_count)]
        self.game_bar = self.bar_factory(self.player)
        self.score = 0
        self.name_input = ""
        self.game_over = False

    def cleanup(self) -> None:
        self.objects.clear()
        self.new_objects.clear()
        self.stars.clear()
        self.spawner.cleanup()
        self.game_bar = None
        self.player = None

    def reset(self) -> None:
        self.cleanup()
        self.init()