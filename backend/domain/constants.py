"""
Game constants for the terminal snake game.

Flip these constants in code if you want a different board or pace; the
board size is fixed for the lifetime of a process.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Board settings
BOARD_WIDTH = 40
BOARD_HEIGHT = 20

# Game settings
TICK_SECONDS = 0.1
FOOD_SCORE = 10

# Glyphs
EMPTY_GLYPH = " "
FOOD_GLYPH = "●"
HEAD_GLYPH = "█"
BODY_GLYPH = "▓"

# Screen text
CONTROLS_TEXT = "Controls: W=Up, S=Down, A=Left, D=Right, R=Restart, Q=Quit"
GAME_OVER_TEXT = "GAME OVER! Press Q to quit or R to restart"
FAREWELL_TEXT = "Thanks for playing!"
