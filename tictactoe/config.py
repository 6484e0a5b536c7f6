# -----------------------------------------------------------------------------
# GAME SETTINGS
# -----------------------------------------------------------------------------

AI_MOVE_DELAY_MS = 500                  # pause before the AI plays O

DEFAULT_PLAYER_NAMES = {
    "X": "Player X",
    "O": "Player O",
}

# -----------------------------------------------------------------------------
# UI TEXT
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
GAME_OVER_TITLE = "Game Over"
DRAW_MESSAGE = "It's a draw!"
NEXT_ROUND_TEXT = "Next Round"
VS_AI_TEXT = "Playing vs AI 🤖"
VS_PLAYER_TEXT = "Playing vs Player 👥"
O_NAME_PLACEHOLDER = "Player O / AI"

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
