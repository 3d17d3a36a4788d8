"""Fixed values shared by the whole game."""

FPS = 60

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 480

PI = 3.1415926
ROOT2 = 1.4142135

STAR_BLUE = (158, 158, 255, 255)
STAR_GREEN = (158, 255, 158, 255)
STAR_RED = (255, 158, 158, 255)

CONFIG_PATH = "res/config.txt"
DATA_PATH = "res/data.json"
WAVES_PATH = "res/waves.lvl"
HIGHSCORE_PATH = "highscore.csv"