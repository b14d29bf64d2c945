[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glarcade"
version = "0.1.0"
description = "Small arcade games and graphics demos drawn with pygame: Asteroids, Pong, a Sierpinski chaos game and two starter windows"
requires-python = ">=3.10"
keywords = ["game", "arcade", "asteroids", "pong", "sierpinski", "chaos-game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
glarcade-asteroids = "glarcade.asteroids.app:main"
glarcade-pong = "glarcade.pong.app:main"
glarcade-sierpinski = "glarcade.sierpinski:main"
glarcade-hello = "glarcade.demos:hello_world_main"
glarcade-first-app = "glarcade.demos:first_app_main"

[tool.hatch.build.targets.wheel]
packages = ["glarcade"]

[tool.pytest.ini_options]
addopts = "-ra"
