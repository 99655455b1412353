import pytest

from mancala.config import GameConfig, game_config_from_dict, load_game_config
from mancala.core import PlayerId


def test_defaults():
    config = GameConfig()
    assert config.search_depth == 12
    assert config.ai_player == PlayerId.TWO
    assert config.search_config().depth == 12


def test_load_yaml(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text("search_depth: 4\nai_player: 1\nvalidate_invariants: false\n")
    config = load_game_config(path)

    assert config.search_depth == 4
    assert config.ai_player == PlayerId.ONE
    assert config.validate_invariants is False


def test_null_ai_player_means_two_humans(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text("ai_player: null\n")
    assert load_game_config(path).ai_player is None


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_game_config(path) == GameConfig()


def test_unknown_keys_rejected():
    with pytest.raises(ValueError):
        game_config_from_dict({"board_size": 8})


@pytest.mark.parametrize("depth", [0, -1])
def test_invalid_depth_rejected(depth):
    with pytest.raises(ValueError):
        GameConfig(search_depth=depth)


def test_invalid_ai_player_rejected():
    with pytest.raises(ValueError):
        GameConfig(ai_player=3)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_game_config(tmp_path / "missing.yaml")


def test_bundled_default_config():
    from pathlib import Path

    config = load_game_config(Path(__file__).resolve().parents[1] / "configs" / "default.yaml")
    assert config == GameConfig()
