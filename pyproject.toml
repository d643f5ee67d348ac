[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tunedeck"
version = "0.1.0"
description = "A small desktop audio player with a persistent playlist, volume control and seek bar."
requires-python = ">=3.10"
dependencies = [
    "pygame",
    "pillow",
]
keywords = ["audio", "music", "player", "playlist", "mp3", "flac", "wav", "tkinter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tunedeck = "tunedeck.mainwindow:main"

[tool.hatch.build.targets.wheel]
packages = ["tunedeck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
