"""Boosts — single-use consumables that change a thrower's next shot.

The inventory is a ``Counter`` keyed by boost name, so an unseen boost
simply has a count of zero.
"""

from __future__ import annotations

from collections import Counter
from enum import Enum


class Boost(str, Enum):
    """Built-in boost kinds, valued by their display names."""

    FLYING_LEAF = "FlyingLeaf"
    STICKY_LEAF = "StickyLeaf"
    ICY_LEAF = "IcyLeaf"
    BUG_SPRAY = "BugSpray"


DEFAULT_BOOSTS: dict[str, int] = {
    Boost.FLYING_LEAF.value: 1,
    Boost.STICKY_LEAF.value: 1,
    Boost.ICY_LEAF.value: 1,
    Boost.BUG_SPRAY.value: 0,
}


def make_inventory(counts: dict[str, int] | None = None) -> Counter[str]:
    """Build a boost inventory with every built-in kind present.

    Args:
        counts: Starting counts; missing built-in kinds start at zero.

    Returns:
        A Counter mapping boost name to available count.
    """
    inventory: Counter[str] = Counter({b.value: 0 for b in Boost})
    inventory.update(DEFAULT_BOOSTS if counts is None else counts)
    return inventory
