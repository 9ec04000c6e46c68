[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spritequest"
version = "0.1.0"
description = "A small pygame sprite game with a button menu and joystick, mouse and keyboard input, plus a typewriter dialog demo."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "sprites", "pygame", "state machine", "dialog", "typewriter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spritequest = "spritequest.game:main"
spritequest-dialog = "spritequest.dialog:main"

[tool.hatch.build.targets.wheel]
packages = ["spritequest"]

[tool.pytest.ini_options]
addopts = "-ra"
