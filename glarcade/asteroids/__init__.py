"""Asteroids: a ship, bullets, drifting rocks, a scrolling star field and the pygame window."""