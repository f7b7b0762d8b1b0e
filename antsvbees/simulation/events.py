"""Events — the per-game channel the engine reports happenings on.

Stings, throws, discoveries, deaths and turn boundaries are appended to
an ``EventLog`` owned by the colony.  The display side polls it with
``drain()``; every event is also written to the module logger at DEBUG.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

logger = logging.getLogger(__name__)


class EventKind(Enum):
    """Category of an engine event."""

    TURN = auto()
    DEPLOY = auto()
    ATTACK = auto()
    STATUS = auto()
    EAT = auto()
    DEATH = auto()
    WASHED_AWAY = auto()
    DISCOVERY = auto()
    BOOST = auto()
    SPAWN = auto()


@dataclass(frozen=True)
class Event:
    """A single thing that happened during play.

    Attributes:
        kind: Event category.
        message: Human-readable description.
    """

    kind: EventKind
    message: str


@dataclass
class EventLog:
    """Ordered buffer of events awaiting collection.

    Attributes:
        events: Events emitted since the last drain.
    """

    events: list[Event] = field(default_factory=list)

    def emit(self, kind: EventKind, message: str) -> Event:
        """Record an event and mirror it to the logger."""
        event = Event(kind=kind, message=message)
        self.events.append(event)
        logger.debug("%s: %s", kind.name, message)
        return event

    def drain(self) -> list[Event]:
        """Return all pending events and clear the buffer."""
        pending = self.events
        self.events = []
        return pending

    def of_kind(self, kind: EventKind) -> list[Event]:
        """Return pending events of one kind without clearing them."""
        return [e for e in self.events if e.kind == kind]
