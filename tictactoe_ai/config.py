"""
Engine configuration for the TicTacToe AI.
All the settings for difficulty, timing and scoring in one place.
"""


class EngineConfig:
    """
    Configuration class for engine settings.
    Change these values to tune the opponent!
    """

    # ==================== TIMING ====================
    # Pause before an engine move is handed back, so the reply
    # doesn't feel instantaneous. Tests set this to 0.
    THINK_DELAY_SECONDS = 0.3

    # ==================== PLAYERS ====================
    # X always moves first, the person plays the other side
    ENGINE_SIDE = "O"

    # "easy" (random), "medium" (heuristic) or "hard" (minimax)
    DEFAULT_DIFFICULTY = "medium"

    # ==================== BOARD GEOMETRY ====================
    CENTER = 4
    CORNERS = (0, 2, 6, 8)
    EDGES = (1, 3, 5, 7)

    # ==================== MINIMAX SCORES ====================
    # Same score at any depth
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    # ==================== LOGGING ====================
    # Overridden by the LOG_LEVEL environment variable
    LOG_LEVEL = "INFO"
