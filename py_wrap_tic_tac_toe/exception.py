class GameError(Exception):
    pass


class LogicError(GameError):
    """Raised when a caller breaks an internal contract of the game."""
