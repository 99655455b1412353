from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from mancala.core import PlayerId
from mancala.search import DEFAULT_DEPTH, SearchConfig


@dataclass
class GameConfig:
    search_depth: int = DEFAULT_DEPTH
    ai_player: Optional[PlayerId] = PlayerId.TWO
    terminal_score: float = -1
    validate_invariants: bool = True

    def __post_init__(self) -> None:
        if self.ai_player is not None:
            self.ai_player = PlayerId(self.ai_player)
        # raises on a non-positive depth
        self.search_config()

    def search_config(self) -> SearchConfig:
        return SearchConfig(depth=self.search_depth, terminal_score=self.terminal_score)


def game_config_from_dict(data: Dict[str, Any]) -> GameConfig:
    known = {f.name for f in fields(GameConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    return GameConfig(**data)


def load_game_config(path: Union[str, Path]) -> GameConfig:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return game_config_from_dict(data)
