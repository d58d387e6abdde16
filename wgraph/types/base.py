"""Cost alias and edge-direction enum used across wgraph."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Numeric cost of a node or an edge (distance, latency, weight, ...).
Cost = Union[int, float]


class DirectMode(IntEnum):
    """How a generator assigns the ``bidirectional`` flag to new edges."""

    #: Every edge is directed-only.
    ALL_DIRECT = 1
    #: Every edge is bidirectional.
    ALL_BIDIRECTIONAL = 2
    #: Each edge flips a fair coin.
    MIXED = 3

    @classmethod
    def from_string(cls, value: str) -> "DirectMode":
        """Parse a case-insensitive member name (e.g. ``"mixed"``).

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid direct_mode '{value}'. Valid values are: {valid}"
            ) from None
