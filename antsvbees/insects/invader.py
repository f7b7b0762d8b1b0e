"""Invader — a bee advancing on the queen.

Each turn a bee stings whatever defender is visible at its location, or
otherwise flies one step toward the queen.  Leaf boosts can leave a bee
stuck (it cannot move) or cold (it cannot sting) for its next action.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from antsvbees.insects.insect import Insect
from antsvbees.simulation.events import EventKind

if TYPE_CHECKING:
    from antsvbees.colony.colony import Colony
    from antsvbees.insects.defender import Defender


class InvaderStatus(Enum):
    """One-turn status effects applied by boosted throwers."""

    STUCK = auto()
    COLD = auto()


@dataclass(eq=False)
class Invader(Insect):
    """A bee.

    Attributes:
        damage: Armor removed from a defender per sting.
        status: Effect that applies to the next action only.
    """

    name = "Bee"

    damage: float = 1
    status: InvaderStatus | None = None

    def sting(self, defender: Defender, colony: Colony) -> bool:
        """Damage a defender; return True if it expired."""
        colony.events.emit(EventKind.ATTACK, f"{self} stings {defender}!")
        return defender.reduce_armor(self.damage, colony)

    def act(self, colony: Colony) -> None:
        """Sting a blocking defender, or advance toward the queen."""
        location = self.location
        if location is None:
            return
        defender = location.get_defender()
        if defender is not None:
            if self.status is not InvaderStatus.COLD:
                self.sting(defender, colony)
        elif self.is_alive and self.status is not InvaderStatus.STUCK:
            location.exit_invader(self)
        self.status = None

    def detach(self) -> None:
        if self.location is not None:
            self.location.remove_invader(self)
