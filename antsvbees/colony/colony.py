"""Colony — the ants' tunnel network, food economy, and boost inventory.

The Colony builds a rectangular grid of tunnels that all drain into the
queen's place, and runs the per-turn phases for defenders, invaders and
terrain.  Every phase walks the grid row-major (tunnel, then step) over a
snapshot taken before anyone acts, so insects that move or die mid-phase
are neither skipped nor visited twice.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

import numpy as np
from numpy.random import Generator

from antsvbees.colony.boosts import make_inventory
from antsvbees.errors import (
    NO_ANT_AT_LOCATION,
    NO_SUCH_BOOST,
    NOT_ENOUGH_FOOD,
    TUNNEL_OCCUPIED,
)
from antsvbees.insects.defender import Defender
from antsvbees.insects.invader import Invader
from antsvbees.simulation.events import EventKind, EventLog
from antsvbees.world.location import Location


@dataclass
class Colony:
    """Top-level state for the defending colony.

    Attributes:
        food: Food available for deploying ants.
        tunnels: Number of parallel tunnels.
        tunnel_length: Number of steps in each tunnel.
        moat_frequency: Every n-th step is water (0 disables moats).
        boosts: Available boost counts keyed by name.
        rng: Seeded random generator used by growers.
        events: Channel that insects and places report to.
        queen_location: The terminal location bees must not reach.
        locations: Grid of locations indexed ``locations[tunnel][step]``.
        entrances: Outermost location of each tunnel, where bees arrive.
    """

    food: int
    tunnels: int
    tunnel_length: int
    moat_frequency: int = 0
    boosts: Counter[str] = field(default_factory=make_inventory)
    rng: Generator = field(default_factory=np.random.default_rng, repr=False)
    events: EventLog = field(default_factory=EventLog, repr=False)
    queen_location: Location = field(
        default_factory=lambda: Location("Ant Queen"),
        repr=False,
    )
    locations: list[list[Location]] = field(init=False, repr=False)
    entrances: list[Location] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Build the tunnel grid outward from the queen's place.

        Raises:
            ValueError: If there are no tunnels or the tunnels are empty.
        """
        if self.tunnels < 1 or self.tunnel_length < 1:
            msg = (
                f"colony needs at least one tunnel step, got "
                f"{self.tunnels}x{self.tunnel_length}"
            )
            raise ValueError(msg)
        self.locations = []
        self.entrances = []
        for tunnel in range(self.tunnels):
            row: list[Location] = []
            previous = self.queen_location
            for step in range(self.tunnel_length):
                is_water = (
                    self.moat_frequency != 0 and (step + 1) % self.moat_frequency == 0
                )
                terrain = "water" if is_water else "tunnel"
                current = Location(
                    name=f"{terrain}[{tunnel},{step}]",
                    is_water=is_water,
                    exit=previous,
                )
                # The queen's place has many entrances; keep only the last.
                previous.entrance = current
                row.append(current)
                previous = current
            self.locations.append(row)
            if row:
                self.entrances.append(row[-1])

    def location_at(self, tunnel: int, step: int) -> Location:
        """Return the location at grid coordinates ``(tunnel, step)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not (0 <= tunnel < self.tunnels and 0 <= step < self.tunnel_length):
            msg = f"({tunnel}, {step}) out of bounds for {self.tunnels}x{self.tunnel_length}"
            raise IndexError(msg)
        return self.locations[tunnel][step]

    # -- Economy --

    def increase_food(self, amount: int) -> None:
        self.food += amount

    def deploy_defender(self, defender: Defender, location: Location) -> str | None:
        """Pay for and place a defender.

        Args:
            defender: The defender to deploy.
            location: Where to place it.

        Returns:
            None on success, otherwise the reason it failed.  Food is
            only deducted when placement succeeds.
        """
        if self.food < defender.food_cost:
            return NOT_ENOUGH_FOOD
        if not location.add_defender(defender):
            return TUNNEL_OCCUPIED
        self.food -= defender.food_cost
        self.events.emit(EventKind.DEPLOY, f"{defender} deployed")
        return None

    def remove_defender(self, location: Location) -> Defender | None:
        """Remove the visible defender at a location (no refund)."""
        return location.remove_defender()

    def add_boost(self, name: str) -> None:
        """Add one boost of the given kind, e.g. when a grower finds it."""
        self.boosts[name] += 1
        self.events.emit(EventKind.DISCOVERY, f"Found a {name}!")

    def apply_boost(self, name: str, location: Location) -> str | None:
        """Spend a boost on the visible defender at a location.

        Returns:
            None on success, otherwise the reason it failed.
        """
        if self.boosts[name] < 1:
            return NO_SUCH_BOOST
        defender = location.get_defender()
        if defender is None:
            return NO_ANT_AT_LOCATION
        self.boosts[name] -= 1
        defender.set_boost(name, self)
        return None

    def boost_names(self) -> list[str]:
        """Return the names of boosts with at least one available."""
        return [name for name, count in self.boosts.items() if count > 0]

    # -- Turn phases --

    def defenders_act(self) -> None:
        """Let every deployed defender act once.

        A guard first lets the defender it shields act, then acts itself.
        """
        for defender in self.all_defenders():
            if defender.location is None:
                continue
            if defender.kind.is_guard:
                guarded = defender.guarded()
                if guarded is not None:
                    guarded.act(self)
            defender.act(self)

    def invaders_act(self) -> None:
        """Let every invader on the board act once."""
        for invader in self.all_invaders():
            if invader.location is None:
                continue
            invader.act(self)

    def locations_act(self) -> None:
        """Apply terrain effects at every location."""
        for row in self.locations:
            for location in row:
                location.act(self)

    # -- Queries --

    def all_defenders(self) -> list[Defender]:
        """Return the visible (guard-first) defender of every location, row-major."""
        defenders: list[Defender] = []
        for row in self.locations:
            for location in row:
                defender = location.get_defender()
                if defender is not None:
                    defenders.append(defender)
        return defenders

    def all_invaders(self) -> list[Invader]:
        """Return every invader in the tunnels, row-major."""
        invaders: list[Invader] = []
        for row in self.locations:
            for location in row:
                invaders.extend(location.invaders)
        return invaders

    def queen_has_invaders(self) -> bool:
        return len(self.queen_location.invaders) > 0
