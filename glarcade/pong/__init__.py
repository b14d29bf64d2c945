"""Two-player Pong: paddles, ball, walls, match rules and the pygame window."""