"""Defender -- an ant deployed into a tunnel.

Defender kinds form a closed set.  Each ``DefenderKind`` carries a
capability profile (cost, armor, slot, swimming, boost use) and the turn
behaviour is selected by matching on the kind:

- **Grower**: rolls once per turn for food or a newly found boost.
- **Thrower**: throws a leaf at the closest bee within range.  Leaf
  boosts extend the range or leave the target stuck/cold; bug spray
  damages every bee on its own location and the thrower itself.
- **Eater**: swallows a bee on its location and digests it over several
  turns, coughing it back up if hurt early in the meal.
- **Scuba**: a thrower that survives water.
- **Guard**: occupies the guard slot and shields the regular defender;
  it has no action of its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from antsvbees.colony.boosts import Boost
from antsvbees.insects.insect import Insect
from antsvbees.insects.invader import InvaderStatus
from antsvbees.simulation.events import EventKind
from antsvbees.world.location import Location

if TYPE_CHECKING:
    from antsvbees.colony.colony import Colony

# -- Constants ---------------------------------------------------------------

_THROW_RANGE = 3
_FLYING_LEAF_RANGE = 5
_LEAF_DAMAGE = 1
_BUG_SPRAY_DAMAGE = 10
_DIGEST_TURNS = 3  # meal counter past which the bee is digested

# Cumulative grower roll thresholds, checked in order.
_GROWER_FOOD_ROLL = 0.6
_GROWER_FINDS: tuple[tuple[float, Boost], ...] = (
    (0.7, Boost.FLYING_LEAF),
    (0.8, Boost.STICKY_LEAF),
    (0.9, Boost.ICY_LEAF),
    (0.95, Boost.BUG_SPRAY),
)


class DefenderKind(Enum):
    """Closed set of defender variants and their capabilities.

    Values are ``(display name, food cost, armor, is_guard,
    is_amphibious, accepts_boost)``.
    """

    GROWER = ("Grower", 1, 1, False, False, False)
    THROWER = ("Thrower", 4, 1, False, False, True)
    EATER = ("Eater", 4, 2, False, False, False)
    SCUBA = ("Scuba", 5, 1, False, True, True)
    GUARD = ("Guard", 4, 2, True, False, False)

    def __init__(
        self,
        display_name: str,
        cost: int,
        armor: int,
        is_guard: bool,
        is_amphibious: bool,
        accepts_boost: bool,
    ) -> None:
        self.display_name = display_name
        self.cost = cost
        self.armor = armor
        self.is_guard = is_guard
        self.is_amphibious = is_amphibious
        self.accepts_boost = accepts_boost

    @classmethod
    def from_name(cls, name: str) -> DefenderKind | None:
        """Look a kind up by case-insensitive display name."""
        for kind in cls:
            if kind.display_name.lower() == name.lower():
                return kind
        return None


@dataclass(eq=False)
class Defender(Insect):
    """A deployed ant.

    Attributes:
        kind: Which variant this ant is.
        boost: The most recently applied boost (None if unboosted).
        turns_eating: Eater meal progress; 0 means ready to eat.
        stomach: Holding place for a swallowed bee (eaters only).
    """

    kind: DefenderKind = DefenderKind.GROWER
    boost: str | None = None
    turns_eating: int = 0
    stomach: Location | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Give eaters a stomach to hold swallowed bees."""
        if self.kind is DefenderKind.EATER and self.stomach is None:
            self.stomach = Location("stomach")

    @classmethod
    def create(cls, kind: DefenderKind) -> Defender:
        """Build a fresh defender with its kind's starting armor."""
        return cls(armor=kind.armor, kind=kind)

    @property
    def name(self) -> str:  # type: ignore[override]
        return self.kind.display_name

    @property
    def food_cost(self) -> int:
        return self.kind.cost

    @property
    def is_full(self) -> bool:
        """Return True while an eater has a bee in its stomach."""
        return self.stomach is not None and bool(self.stomach.invaders)

    def guarded(self) -> Defender | None:
        """Return the regular defender this guard shields, if any."""
        if self.location is None or not self.kind.is_guard:
            return None
        return self.location.get_guarded_defender()

    def set_boost(self, boost: str, colony: Colony) -> None:
        """Replace the current boost; the last one applied wins."""
        self.boost = boost
        if self.kind.accepts_boost:
            colony.events.emit(EventKind.BOOST, f"{self} is given a {boost}")
        else:
            colony.events.emit(
                EventKind.BOOST,
                f"{self} is given a {boost} but has no use for it",
            )

    def detach(self) -> None:
        if self.location is not None:
            self.location.remove_defender(self)

    # -- Turn behaviour --

    def act(self, colony: Colony) -> None:
        """Take this defender's turn according to its kind."""
        location = self.location
        if location is None:
            return
        match self.kind:
            case DefenderKind.GROWER:
                self._grow(colony)
            case DefenderKind.THROWER | DefenderKind.SCUBA:
                self._throw(location, colony)
            case DefenderKind.EATER:
                self._eat(location, colony)
            case DefenderKind.GUARD:
                pass

    def reduce_armor(self, amount: float, colony: Colony) -> bool:
        """Take damage; an eater hurt mid-meal coughs its bee back up."""
        if self.kind is not DefenderKind.EATER or not self.is_full:
            return super().reduce_armor(amount, colony)

        if self.armor - amount > 0:
            if self.turns_eating == 1:
                self._cough_up(colony)
                self.turns_eating = _DIGEST_TURNS
        elif 0 < self.turns_eating <= 2:
            self._cough_up(colony)
        return super().reduce_armor(amount, colony)

    # -- Private behaviour methods --

    def _grow(self, colony: Colony) -> None:
        roll = float(colony.rng.random())
        if roll < _GROWER_FOOD_ROLL:
            colony.increase_food(1)
            return
        for threshold, boost in _GROWER_FINDS:
            if roll < threshold:
                colony.add_boost(boost.value)
                return

    def _throw(self, location: Location, colony: Colony) -> None:
        if self.boost == Boost.BUG_SPRAY:
            self._spray(location, colony)
            return

        if self.boost == Boost.FLYING_LEAF:
            max_range = _FLYING_LEAF_RANGE
        else:
            max_range = _THROW_RANGE
        target = location.get_closest_invader(max_range)
        if target is None:
            return

        colony.events.emit(EventKind.ATTACK, f"{self} throws a leaf at {target}")
        target.reduce_armor(_LEAF_DAMAGE, colony)
        if self.boost == Boost.STICKY_LEAF:
            target.status = InvaderStatus.STUCK
            colony.events.emit(EventKind.STATUS, f"{target} is stuck!")
        elif self.boost == Boost.ICY_LEAF:
            target.status = InvaderStatus.COLD
            colony.events.emit(EventKind.STATUS, f"{target} is cold!")
        self.boost = None

    def _spray(self, location: Location, colony: Colony) -> None:
        colony.events.emit(
            EventKind.ATTACK,
            f"{self} sprays bug repellant everywhere!",
        )
        for target in list(location.invaders):
            target.reduce_armor(_BUG_SPRAY_DAMAGE, colony)
        self.boost = None
        self.reduce_armor(_BUG_SPRAY_DAMAGE, colony)

    def _eat(self, location: Location, colony: Colony) -> None:
        stomach = self.stomach
        if stomach is None:
            return
        if self.turns_eating == 0:
            target = location.get_closest_invader(0)
            if target is not None:
                colony.events.emit(EventKind.EAT, f"{self} eats {target}!")
                location.remove_invader(target)
                stomach.add_invader(target)
                self.turns_eating = 1
        elif self.turns_eating > _DIGEST_TURNS:
            if stomach.invaders:
                stomach.remove_invader(stomach.invaders[0])
            self.turns_eating = 0
        else:
            self.turns_eating += 1

    def _cough_up(self, colony: Colony) -> None:
        stomach = self.stomach
        if self.location is None or stomach is None or not stomach.invaders:
            return
        eaten = stomach.invaders[0]
        stomach.remove_invader(eaten)
        self.location.add_invader(eaten)
        colony.events.emit(EventKind.EAT, f"{self} coughs up {eaten}!")
