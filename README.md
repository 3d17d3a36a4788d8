# spacecraze

A side-scrolling space shooter built on pygame. Fly your ship through waves
of bombs, UFOs and seeking asteroids, pick up power-ups, and face a boss
every twenty points. When you die, type your name and press Enter to record
your score in the highscore table.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

Start the game from the directory that holds the `res/` folder:

```
spacecraze
```

The command runs `spacecraze.app.main`. It opens a resizable 640×480
window; when it is resized the picture is scaled and letterboxed to keep its
aspect ratio.

Controls:

- Arrow keys or W, A, S, D: move the ship
- Space: fire
- Escape: pause the game; on the pause screen, go back to the game; in the
  menu, leave the scoreboard
- G: toggle god mode (no damage is taken)

The menu has Play, Highscore and Exit buttons; the pause screen has Continue
and Exit to menu.

Power-ups that destroyed enemies sometimes drop:

- Triple shot: fire three shots at once for ten seconds
- Missile: fire exploding missiles for ten seconds
- Extra life: gain one hitpoint

## Files the game reads

All paths are relative to the working directory.

- `res/data.json`: speeds, hitpoints, fire rate and other tuning values for
  the player, the enemies, the projectiles, the power-ups and the stars,
  under the keys `Player`, `Bomb`, `Boss`, `Seeker`, `UFO`, `PowerUp`,
  `Star` and `Projectile` (with `Player` and `Enemy` inside). It is read the
  first time an object needs it; if it is missing the game stops with an
  error.
- `res/waves.lvl`: the enemy waves, one wave per line. Each line holds
  `;`-separated entries of an amount followed by a type letter: `b` for
  bombs, `s` for seekers and `u` for UFOs, for example `5b;2u`. Lines
  starting with `#` are comments. When every wave has been played, the file
  is read again.
- `res/config.txt`: optional. A line `seed=<number>` fixes the random seed
  so that every game plays out the same; a bare `seed` line seeds from the
  clock.
- Images, sounds and fonts under `res/` (for example `res/player.png`,
  `res/audio/laser.wav`, `res/fonts/ShareTechMono-Regular.ttf`). An image
  that cannot be loaded is drawn as nothing, a sound that cannot be loaded
  (or any sound when no audio device is available) stays silent, and a
  missing font is replaced by pygame's default font.

## Highscores

The five best scores are kept in `highscore.csv` in the working directory,
one `name,score` pair per line, best first. `spacecraze.states.game_state.record_score`
adds a result to such a file and returns the entries kept, and
`spacecraze.util.read_scores` reads one back.

## What is not included

The package holds only the game's code. It ships no `res/` folder: no
images, sounds, fonts, `data.json` or `waves.lvl`. These have to be
provided before the game can be played.