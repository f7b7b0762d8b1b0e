"""Tests for antsvbees.simulation.config - YAML config loading."""

from pathlib import Path

import pytest

from antsvbees.simulation.config import GameConfig


class TestGameConfig:
    """Tests for config defaults and YAML loading."""

    def test_defaults(self) -> None:
        cfg = GameConfig()
        assert cfg.seed == 42
        assert cfg.starting_food == 2
        assert cfg.tunnels == 3
        assert cfg.tunnel_length == 8
        assert cfg.moat_frequency == 0
        assert cfg.starting_boosts["BugSpray"] == 0
        assert cfg.waves[0] == (2, 1)

    def test_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "test.yaml"
        yaml_file.write_text(
            "seed: 99\n"
            "tunnels: 2\n"
            "moat_frequency: 3\n"
            "starting_boosts:\n"
            "  BugSpray: 2\n"
            "waves:\n"
            "  - [1, 4]\n"
            "  - [3, 2]\n",
        )
        cfg = GameConfig.from_yaml(yaml_file)
        assert cfg.seed == 99
        assert cfg.tunnels == 2
        assert cfg.moat_frequency == 3
        assert cfg.tunnel_length == 8
        assert cfg.starting_boosts == {"BugSpray": 2}
        assert cfg.waves == [(1, 4), (3, 2)]

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert GameConfig.from_yaml(yaml_file) == GameConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            GameConfig.from_yaml(tmp_path / "missing.yaml")

    def test_shipped_default_config_loads(self) -> None:
        path = Path(__file__).resolve().parent.parent / "config" / "default.yaml"
        cfg = GameConfig.from_yaml(path)
        assert cfg.tunnels == 3
        assert len(cfg.waves) == 14
