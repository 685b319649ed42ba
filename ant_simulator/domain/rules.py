"""Per-color transition rules and the dense 256-slot rule table.

The table is a plain tuple indexed by the raw color byte: every color has a
rule, and colors nobody configured fall back to the default no-op rule
(recolor to 0, no turn).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import IntEnum

from ant_simulator.config.constants import MAX_COLOR, NUM_COLORS


class TurnDirection(IntEnum):
    """Quarter-turn applied to the ant's orientation (clockwise positive)."""

    LEFT = -1
    NONE = 0
    RIGHT = 1

    @classmethod
    def from_letter(cls, raw: str) -> TurnDirection:
        """Parse a single ``L``/``N``/``R`` letter (case-insensitive)."""
        letter = raw.strip().upper()
        if len(letter) != 1:
            raise ValueError(f"turn direction must be a single letter; got {raw!r}")
        for member in cls:
            if member.name[0] == letter:
                return member
        raise ValueError(f"turn direction must be one of L, N, R; got {raw!r}")

    @property
    def letter(self) -> str:
        return self.name[0]


def _check_color(value: int, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label} must be an integer")
    if not 0 <= value <= MAX_COLOR:
        raise ValueError(f"{label} ({value}) not in range [0, {MAX_COLOR}]")
    return value


@dataclass(frozen=True)
class Rule:
    """What happens when the ant stands on one color.

    ``is_defined`` only records whether somebody configured the slot; an
    undefined rule steps exactly like ``(replacement_color=0, turn=NONE)``.
    """

    is_defined: bool = False
    replacement_color: int = 0
    turn_direction: TurnDirection = TurnDirection.NONE

    def __post_init__(self) -> None:
        _check_color(self.replacement_color, "replacement_color")
        # Coerce plain ints (-1/0/1) to the enum
        object.__setattr__(self, "turn_direction", TurnDirection(self.turn_direction))

    @classmethod
    def defined(cls, replacement_color: int, turn_direction: int) -> Rule:
        return cls(
            is_defined=True,
            replacement_color=replacement_color,
            turn_direction=TurnDirection(turn_direction),
        )


UNDEFINED_RULE = Rule()


class RuleTable:
    """Immutable table holding exactly one ``Rule`` per color value."""

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[Rule]) -> None:
        table = tuple(rules)
        if len(table) != NUM_COLORS:
            raise ValueError(f"rule table must have exactly {NUM_COLORS} entries, got {len(table)}")
        for rule in table:
            if not isinstance(rule, Rule):
                raise ValueError(f"rule table entries must be Rule, got {type(rule).__name__}")
        self._rules: tuple[Rule, ...] = table

    @classmethod
    def from_mapping(cls, rules: Mapping[int, Rule]) -> RuleTable:
        """Build a table from sparse ``{color: rule}`` entries."""
        slots = [UNDEFINED_RULE] * NUM_COLORS
        for color, rule in rules.items():
            slots[_check_color(color, "rule color")] = rule
        return cls(slots)

    @classmethod
    def empty(cls) -> RuleTable:
        return cls([UNDEFINED_RULE] * NUM_COLORS)

    def __getitem__(self, color: int) -> Rule:
        return self._rules[color]

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleTable):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable({self.to_spec()!r})"

    def defined_colors(self) -> tuple[int, ...]:
        """Colors whose slot was explicitly configured, ascending."""
        return tuple(color for color, rule in enumerate(self._rules) if rule.is_defined)

    def replacement_colors(self) -> tuple[int, ...]:
        """Replacement color per slot, for tight stepping loops."""
        return tuple(rule.replacement_color for rule in self._rules)

    def turn_directions(self) -> tuple[int, ...]:
        """Turn direction per slot as plain ints, for tight stepping loops."""
        return tuple(int(rule.turn_direction) for rule in self._rules)

    def to_spec(self) -> str:
        """Render defined rules in CLI ``color,replacement,turn`` form."""
        return " ".join(
            f"{color},{self._rules[color].replacement_color},"
            f"{self._rules[color].turn_direction.letter}"
            for color in self.defined_colors()
        )
