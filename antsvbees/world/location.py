"""Location — a single node in the tunnel graph.

Each location links ``exit`` toward the queen and ``entrance`` toward the
hive.  It holds at most one regular defender and at most one guard in
independent slots, plus any number of invaders in arrival order (index 0
is the frontmost).  Water locations wash defenders away at the end of a
turn.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from antsvbees.errors import ContractViolation
from antsvbees.simulation.events import EventKind

if TYPE_CHECKING:
    from antsvbees.colony.colony import Colony
    from antsvbees.insects.defender import Defender
    from antsvbees.insects.invader import Invader


@dataclass(eq=False)
class Location:
    """A place in a tunnel that insects can occupy.

    Attributes:
        name: Display name, e.g. ``tunnel[0,3]``.
        is_water: Whether non-amphibious defenders are washed away here.
        exit: Next location toward the queen (None for the queen's place).
        entrance: Next location toward the hive (None at a tunnel mouth).
        defender: The regular (non-guard) defender, if any.
        guard: The guard defender, if any.
        invaders: Invaders present, frontmost first.
    """

    name: str
    is_water: bool = False
    exit: Location | None = field(default=None, repr=False)
    entrance: Location | None = field(default=None, repr=False)
    defender: Defender | None = field(default=None, repr=False)
    guard: Defender | None = field(default=None, repr=False)
    invaders: list[Invader] = field(default_factory=list, repr=False)

    # -- Defenders --

    def get_defender(self) -> Defender | None:
        """Return the visible defender: the guard if present, else the regular one."""
        if self.guard is not None:
            return self.guard
        return self.defender

    def get_guarded_defender(self) -> Defender | None:
        """Return the regular defender, bypassing any guard."""
        return self.defender

    def add_defender(self, defender: Defender) -> bool:
        """Place a defender in its slot.

        Args:
            defender: The defender to bind to this location.

        Returns:
            True if placed, False if the matching slot was already taken.
        """
        if defender.kind.is_guard:
            if self.guard is not None:
                return False
            self.guard = defender
        else:
            if self.defender is not None:
                return False
            self.defender = defender
        defender.location = self
        return True

    def remove_defender(self, defender: Defender | None = None) -> Defender | None:
        """Detach a defender and return it.

        With no argument the guard is removed first, then the regular
        defender.  Passing a defender removes that one from whichever
        slot holds it.

        Returns:
            The removed defender, or None if nothing was removed.
        """
        if defender is None:
            defender = self.get_defender()
        if defender is None:
            return None
        if defender is self.guard:
            self.guard = None
        elif defender is self.defender:
            self.defender = None
        else:
            return None
        defender.location = None
        return defender

    # -- Invaders --

    def add_invader(self, invader: Invader) -> None:
        """Append an invader at the back of this location."""
        self.invaders.append(invader)
        invader.location = self

    def remove_invader(self, invader: Invader) -> None:
        """Remove one invader, keeping the others in order."""
        if invader in self.invaders:
            self.invaders.remove(invader)
            invader.location = None

    def remove_all_invaders(self) -> None:
        """Detach every invader from this location."""
        for invader in self.invaders:
            invader.location = None
        self.invaders = []

    def exit_invader(self, invader: Invader) -> None:
        """Move an invader one step toward the queen.

        Raises:
            ContractViolation: If this location has no exit.
        """
        if self.exit is None:
            msg = f"{self.name} has no exit for {invader}"
            raise ContractViolation(msg)
        self.remove_invader(invader)
        self.exit.add_invader(invader)

    def get_closest_invader(
        self,
        max_distance: float,
        min_distance: float = 0,
    ) -> Invader | None:
        """Find the frontmost invader within a hop window toward the hive.

        Walks ``entrance`` links from this location, counting hops.

        Args:
            max_distance: Furthest hop count to look at.
            min_distance: Nearest hop count to look at.

        Returns:
            The frontmost invader of the first occupied location in range,
            or None.
        """
        place: Location | None = self
        distance = 0
        while place is not None and distance <= max_distance:
            if distance >= min_distance and place.invaders:
                return place.invaders[0]
            place = place.entrance
            distance += 1
        return None

    # -- Terrain --

    def act(self, colony: Colony) -> None:
        """Apply terrain effects at the end of a turn.

        Water evicts the guard unconditionally, then the regular defender
        unless it can swim.
        """
        if not self.is_water:
            return
        if self.guard is not None:
            colony.events.emit(EventKind.WASHED_AWAY, f"{self.guard} was washed away")
            self.remove_defender(self.guard)
        if self.defender is not None and not self.defender.kind.is_amphibious:
            colony.events.emit(
                EventKind.WASHED_AWAY,
                f"{self.defender} was washed away",
            )
            self.remove_defender(self.defender)

    def __str__(self) -> str:
        return self.name
