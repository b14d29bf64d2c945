"""Small arcade games and graphics demos: Asteroids, Pong, a Sierpinski chaos game and two starter windows."""

__version__ = "0.1.0"