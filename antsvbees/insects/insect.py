"""Insect — the contract shared by defenders and invaders.

Every insect has armor and a back-reference to the location it occupies.
Insects compare by identity so two bees with equal stats are still
distinct occupants of a location.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from antsvbees.simulation.events import EventKind

if TYPE_CHECKING:
    from antsvbees.colony.colony import Colony
    from antsvbees.world.location import Location


@dataclass(eq=False)
class Insect:
    """Base state for anything that occupies a location.

    Attributes:
        armor: Remaining health; the insect expires at zero or below.
        location: Where the insect currently is (None when off the board).
    """

    name: ClassVar[str] = "Insect"

    armor: float
    location: Location | None = field(default=None, repr=False, kw_only=True)

    @property
    def is_alive(self) -> bool:
        """Return True while armor remains."""
        return self.armor > 0

    def reduce_armor(self, amount: float, colony: Colony) -> bool:
        """Take damage and detach from the board if it was fatal.

        Args:
            amount: Armor to remove.
            colony: Colony whose event log records the death.

        Returns:
            True if the insect expired.
        """
        self.armor -= amount
        if self.armor <= 0:
            colony.events.emit(
                EventKind.DEATH,
                f"{self} ran out of armor and expired",
            )
            if self.location is not None:
                self.detach()
            return True
        return False

    def detach(self) -> None:
        """Remove this insect from its current location."""
        raise NotImplementedError

    def act(self, colony: Colony) -> None:
        """Take this insect's turn."""
        raise NotImplementedError

    def __str__(self) -> str:
        where = self.location.name if self.location is not None else ""
        return f"{self.name}({where})"
