"""Compass orientation of the ant and the turn/move arithmetic on it."""

from __future__ import annotations

from enum import IntEnum

ORIENTATION_COUNT = 4


class Orientation(IntEnum):
    """Direction the ant faces, numbered clockwise from north."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @classmethod
    def from_token(cls, raw: str | int) -> Orientation:
        """Parse ``0``-``3`` or a compass letter/name (case-insensitive)."""
        if isinstance(raw, bool):
            raise ValueError("orientation must be an integer or compass name")
        if isinstance(raw, int):
            return cls(raw)
        token = raw.strip().upper()
        if token.lstrip("-").isdigit():
            return cls(int(token))
        for member in cls:
            if member.name == token or member.name[0] == token:
                return member
        valid = ", ".join(member.name for member in cls)
        raise ValueError(f"orientation must be 0-3 or one of {valid}")


# (d_col, d_row); rows grow southwards
MOVE_OFFSETS: dict[Orientation, tuple[int, int]] = {
    Orientation.NORTH: (0, -1),
    Orientation.EAST: (1, 0),
    Orientation.SOUTH: (0, 1),
    Orientation.WEST: (-1, 0),
}


def turn(orientation: int, turn_direction: int) -> Orientation:
    """Rotate ``orientation`` by ``turn_direction`` quarter turns clockwise.

    Wraps in both directions, so any turn magnitude is accepted.
    """
    wrapped = (orientation + turn_direction) % ORIENTATION_COUNT
    return Orientation((wrapped + ORIENTATION_COUNT) % ORIENTATION_COUNT)
