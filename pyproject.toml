[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hatgame"
version = "0.1.0"
description = "Game logic for a top-down arcade shooter: animation, collision, combat, enemies and experience"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "shooter", "collision", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hatgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
