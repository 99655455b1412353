"""Turn handling for a single game of Mancala."""

from .controller import Listener, TurnController

__all__ = ["Listener", "TurnController"]
