"""Game — the turn loop and the player's command surface.

Owns the colony, the hive and the turn counter, and resolves each turn
in a fixed order:

1. Defenders act (so an ant can stop a bee before it moves)
2. Invaders act (sting or advance)
3. Locations act (water washes away ants that acted this turn)
4. The hive releases this turn's wave (new bees wait a turn to act)

Commands take ``"row,col"`` coordinate strings and return None on
success or a reason string on failure; they never raise.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

import numpy as np

from antsvbees.colony.colony import Colony
from antsvbees.colony.boosts import make_inventory
from antsvbees.colony.hive import Hive
from antsvbees.errors import ILLEGAL_LOCATION, UNKNOWN_ANT_TYPE
from antsvbees.insects.defender import Defender, DefenderKind
from antsvbees.simulation.config import GameConfig
from antsvbees.simulation.events import EventKind, EventLog
from antsvbees.world.location import Location

logger = logging.getLogger(__name__)


class Outcome(Enum):
    """State of the match after a turn."""

    ONGOING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class Game:
    """Drives a match forward turn by turn.

    Attributes:
        colony: The defending colony and its tunnels.
        hive: Source of the invading waves.
        turn: Number of completed turns.
    """

    colony: Colony
    hive: Hive
    turn: int = 0

    def take_turn(self) -> None:
        """Resolve one full turn and advance the turn counter."""
        self.colony.events.emit(EventKind.TURN, f"Turn {self.turn} begins")
        self.colony.defenders_act()
        self.colony.invaders_act()
        self.colony.locations_act()
        self.hive.invade(self.colony, self.turn)
        self.turn += 1
        self.colony.events.emit(EventKind.TURN, f"Turn {self.turn - 1} ends")

    def outcome(self) -> Outcome:
        """Evaluate the match; a bee at the queen beats an empty board."""
        if self.colony.queen_has_invaders():
            return Outcome.LOST
        if len(self.colony.all_invaders()) + self.hive.count_waiting() == 0:
            return Outcome.WON
        return Outcome.ONGOING

    def is_won(self) -> bool | None:
        """Return True if won, False if lost, None while still ongoing."""
        match self.outcome():
            case Outcome.WON:
                return True
            case Outcome.LOST:
                return False
        return None

    # -- Commands --

    def deploy_ant(self, kind_name: str, coordinates: str) -> str | None:
        """Deploy a new ant of the named kind at ``"row,col"``."""
        kind = DefenderKind.from_name(kind_name)
        if kind is None:
            return UNKNOWN_ANT_TYPE
        try:
            location = self._resolve(coordinates)
        except (ValueError, IndexError):
            return ILLEGAL_LOCATION
        return self.colony.deploy_defender(Defender.create(kind), location)

    def remove_ant(self, coordinates: str) -> str | None:
        """Remove the visible ant at ``"row,col"``; empty locations are fine."""
        try:
            location = self._resolve(coordinates)
        except (ValueError, IndexError):
            return ILLEGAL_LOCATION
        self.colony.remove_defender(location)
        return None

    def boost_ant(self, boost_name: str, coordinates: str) -> str | None:
        """Spend a boost on the visible ant at ``"row,col"``."""
        try:
            location = self._resolve(coordinates)
        except (ValueError, IndexError):
            return ILLEGAL_LOCATION
        return self.colony.apply_boost(boost_name, location)

    def _resolve(self, coordinates: str) -> Location:
        row, col = coordinates.split(",")
        if not (row.isdigit() and col.isdigit()):
            msg = f"coordinates must be plain 'row,col' digits, got {coordinates!r}"
            raise ValueError(msg)
        return self.colony.location_at(int(row), int(col))

    # -- Read-only views for display --

    @property
    def food(self) -> int:
        return self.colony.food

    @property
    def locations(self) -> list[list[Location]]:
        return self.colony.locations

    @property
    def events(self) -> EventLog:
        return self.colony.events

    def boost_names(self) -> list[str]:
        return self.colony.boost_names()

    def hive_invader_count(self) -> int:
        return self.hive.count_waiting()


def build_game(config: GameConfig) -> Game:
    """Create a colony and hive from config and wire them into a Game.

    Both share one seeded generator so a seed fully determines play.

    Args:
        config: Loaded game configuration.

    Returns:
        A ready-to-play Game at turn 0.
    """
    rng = np.random.default_rng(config.seed)
    colony = Colony(
        food=config.starting_food,
        tunnels=config.tunnels,
        tunnel_length=config.tunnel_length,
        moat_frequency=config.moat_frequency,
        boosts=make_inventory(config.starting_boosts),
        rng=rng,
    )
    hive = Hive(bee_armor=config.bee_armor, bee_damage=config.bee_damage, rng=rng)
    for turn, count in config.waves:
        hive.add_wave(turn, count)
    logger.info(
        "Built %dx%d colony with %d bees waiting",
        config.tunnels,
        config.tunnel_length,
        hive.count_waiting(),
    )
    return Game(colony=colony, hive=hive)
