"""Hive — where bees wait until their wave is released.

The hive is itself a location: scheduled bees sit in it until their turn
comes, then each is moved to a tunnel entrance.  Entrance choice comes
from a seeded generator or a caller-supplied chooser so replays and tests
are deterministic.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.random import Generator

from antsvbees.insects.invader import Invader
from antsvbees.simulation.events import EventKind
from antsvbees.world.location import Location

if TYPE_CHECKING:
    from antsvbees.colony.colony import Colony

logger = logging.getLogger(__name__)

EntranceChooser = Callable[[Sequence[Location]], Location]


@dataclass(eq=False)
class Hive(Location):
    """A location that releases scheduled waves of bees.

    Attributes:
        bee_armor: Armor of every bee this hive creates.
        bee_damage: Sting damage of every bee this hive creates.
        waves: Bees scheduled per turn number.
        rng: Seeded generator for picking entrances.
        chooser: Optional replacement for the random entrance pick.
    """

    name: str = "Hive"
    bee_armor: float = 3
    bee_damage: float = 1
    waves: dict[int, list[Invader]] = field(default_factory=dict, repr=False)
    rng: Generator = field(default_factory=np.random.default_rng, repr=False)
    chooser: EntranceChooser | None = field(default=None, repr=False)

    def add_wave(self, turn: int, count: int) -> Hive:
        """Schedule ``count`` new bees to invade on ``turn``.

        Scheduling the same turn again adds to that wave.

        Returns:
            This hive, so calls can be chained.
        """
        wave = self.waves.setdefault(turn, [])
        for _ in range(count):
            bee = Invader(self.bee_armor, self.bee_damage)
            self.add_invader(bee)
            wave.append(bee)
        logger.debug("Scheduled %d bees for turn %d", count, turn)
        return self

    def invade(self, colony: Colony, turn: int) -> list[Invader]:
        """Release the wave scheduled for ``turn`` into the colony.

        Args:
            colony: The colony whose entrances receive the bees.
            turn: The current turn number.

        Returns:
            The released bees (empty if nothing was scheduled).
        """
        wave = self.waves.pop(turn, [])
        for bee in wave:
            self.remove_invader(bee)
            entrance = self.choose_entrance(colony.entrances)
            entrance.add_invader(bee)
            colony.events.emit(EventKind.SPAWN, f"{bee} flies in")
        return wave

    def choose_entrance(self, entrances: Sequence[Location]) -> Location:
        """Pick the entrance a released bee arrives at."""
        if self.chooser is not None:
            return self.chooser(entrances)
        return entrances[int(self.rng.integers(len(entrances)))]

    def count_waiting(self) -> int:
        """Return the number of bees still held in the hive."""
        return len(self.invaders)
