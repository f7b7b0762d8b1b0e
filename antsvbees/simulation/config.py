"""Config — load match parameters from YAML files.

Starting food, tunnel layout, bee strength, starting boosts and the wave
schedule live in YAML and are parsed into a typed dataclass here, so new
scenarios need no code changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from antsvbees.colony.boosts import DEFAULT_BOOSTS


def _default_waves() -> list[tuple[int, int]]:
    return [(turn, 1) for turn in range(2, 16)]


@dataclass
class GameConfig:
    """Top-level match configuration.

    Attributes:
        seed: RNG seed for deterministic replay.
        starting_food: Food available before the first turn.
        tunnels: Number of parallel tunnels.
        tunnel_length: Steps in each tunnel.
        moat_frequency: Every n-th step is water (0 disables moats).
        bee_armor: Armor of each bee.
        bee_damage: Sting damage of each bee.
        starting_boosts: Boost counts available at the start.
        waves: ``(turn, count)`` pairs scheduling bee waves.
    """

    seed: int = 42
    starting_food: int = 2
    tunnels: int = 3
    tunnel_length: int = 8
    moat_frequency: int = 0
    bee_armor: float = 3
    bee_damage: float = 1
    starting_boosts: dict[str, int] = field(
        default_factory=lambda: dict(DEFAULT_BOOSTS),
    )
    waves: list[tuple[int, int]] = field(default_factory=_default_waves)

    @classmethod
    def from_yaml(cls, path: str | Path) -> GameConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated GameConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        waves = data.get("waves")
        return cls(
            seed=data.get("seed", cls.seed),
            starting_food=data.get("starting_food", cls.starting_food),
            tunnels=data.get("tunnels", cls.tunnels),
            tunnel_length=data.get("tunnel_length", cls.tunnel_length),
            moat_frequency=data.get("moat_frequency", cls.moat_frequency),
            bee_armor=data.get("bee_armor", cls.bee_armor),
            bee_damage=data.get("bee_damage", cls.bee_damage),
            starting_boosts=data.get("starting_boosts", dict(DEFAULT_BOOSTS)),
            waves=(
                _default_waves()
                if waves is None
                else [(int(turn), int(count)) for turn, count in waves]
            ),
        )
