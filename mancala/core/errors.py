from __future__ import annotations


class MancalaError(Exception):
    pass


class IllegalMoveError(MancalaError, ValueError):
    pass


class GameOverError(MancalaError, RuntimeError):
    pass
