"""Errors — failure reasons returned by the command surface.

User-facing failures are plain strings returned from ``Game`` and
``Colony`` commands; they are never raised.  Broken internal contracts
raise ``ContractViolation`` instead.
"""

from __future__ import annotations

UNKNOWN_ANT_TYPE = "unknown ant type"
ILLEGAL_LOCATION = "illegal location"
NOT_ENOUGH_FOOD = "not enough food"
TUNNEL_OCCUPIED = "tunnel already occupied"
NO_SUCH_BOOST = "no such boost"
NO_ANT_AT_LOCATION = "no Ant at location"


class ContractViolation(AssertionError):
    """An engine invariant was broken by the caller (a programming error)."""
