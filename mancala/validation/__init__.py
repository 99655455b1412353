from .board_checks import BoardInvariantError, validate_board

__all__ = ["BoardInvariantError", "validate_board"]
