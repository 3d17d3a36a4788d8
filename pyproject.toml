[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spacecraze"
version = "0.1.0"
description = "Side-scrolling space shooter with waves of enemies, power-ups, boss fights and a highscore table"
requires-python = ">=3.10"
keywords = ["game", "shooter", "arcade", "pygame", "space"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spacecraze = "spacecraze.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spacecraze"]

[tool.pytest.ini_options]
addopts = "-ra"
