from .gym_env import MancalaEnv

__all__ = ["MancalaEnv"]
