"""Tests for ant_simulator.domain.rules module."""

from __future__ import annotations

import pytest

from ant_simulator.config.constants import NUM_COLORS
from ant_simulator.domain.rules import UNDEFINED_RULE, Rule, RuleTable, TurnDirection


class TestTurnDirection:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("L", TurnDirection.LEFT),
            ("l", TurnDirection.LEFT),
            ("N", TurnDirection.NONE),
            ("n", TurnDirection.NONE),
            ("R", TurnDirection.RIGHT),
            ("r", TurnDirection.RIGHT),
        ],
    )
    def test_from_letter(self, raw: str, expected: TurnDirection) -> None:
        assert TurnDirection.from_letter(raw) is expected

    @pytest.mark.parametrize("raw", ["", "X", "LR", "left"])
    def test_from_letter_rejects_other_tokens(self, raw: str) -> None:
        with pytest.raises(ValueError):
            TurnDirection.from_letter(raw)

    def test_numeric_values(self) -> None:
        assert [int(d) for d in TurnDirection] == [-1, 0, 1]

    def test_letter_round_trip(self) -> None:
        for direction in TurnDirection:
            assert TurnDirection.from_letter(direction.letter) is direction


class TestRule:
    def test_default_rule_is_undefined_noop(self) -> None:
        rule = Rule()
        assert rule.is_defined is False
        assert rule.replacement_color == 0
        assert rule.turn_direction is TurnDirection.NONE

    def test_defined_constructor(self) -> None:
        rule = Rule.defined(9, -1)
        assert rule.is_defined is True
        assert rule.replacement_color == 9
        assert rule.turn_direction is TurnDirection.LEFT

    @pytest.mark.parametrize("color", [-1, 256])
    def test_replacement_color_range(self, color: int) -> None:
        with pytest.raises(ValueError, match="replacement_color"):
            Rule.defined(color, TurnDirection.NONE)

    def test_turn_outside_single_step_rejected(self) -> None:
        with pytest.raises(ValueError):
            Rule(is_defined=True, replacement_color=0, turn_direction=2)  # type: ignore[arg-type]

    def test_rules_are_frozen(self) -> None:
        rule = Rule.defined(1, TurnDirection.RIGHT)
        with pytest.raises(AttributeError):
            rule.replacement_color = 3  # type: ignore[misc]


class TestRuleTable:
    def test_empty_table_has_one_slot_per_color(self) -> None:
        table = RuleTable.empty()
        assert len(table) == NUM_COLORS
        assert all(rule == UNDEFINED_RULE for rule in table)
        assert table.defined_colors() == ()

    def test_from_mapping_fills_gaps_with_default(self) -> None:
        table = RuleTable.from_mapping(
            {0: Rule.defined(1, TurnDirection.LEFT), 255: Rule.defined(3, TurnDirection.RIGHT)}
        )
        assert len(table) == NUM_COLORS
        assert table[0] == Rule.defined(1, TurnDirection.LEFT)
        assert table[255] == Rule.defined(3, TurnDirection.RIGHT)
        assert table[128] == UNDEFINED_RULE
        assert table.defined_colors() == (0, 255)

    @pytest.mark.parametrize("color", [-1, 256])
    def test_from_mapping_rejects_bad_colors(self, color: int) -> None:
        with pytest.raises(ValueError, match="rule color"):
            RuleTable.from_mapping({color: Rule()})

    @pytest.mark.parametrize("size", [0, 255, 257])
    def test_wrong_size_rejected(self, size: int) -> None:
        with pytest.raises(ValueError, match="exactly 256"):
            RuleTable([Rule()] * size)

    def test_non_rule_entries_rejected(self) -> None:
        with pytest.raises(ValueError, match="Rule"):
            RuleTable([Rule()] * 255 + [(0, 1)])  # type: ignore[list-item]

    def test_is_backed_by_a_dense_tuple(self) -> None:
        table = RuleTable.empty()
        assert isinstance(table._rules, tuple)

    def test_equality_and_hash(self) -> None:
        a = RuleTable.from_mapping({4: Rule.defined(5, TurnDirection.NONE)})
        b = RuleTable.from_mapping({4: Rule.defined(5, TurnDirection.NONE)})
        assert a == b
        assert hash(a) == hash(b)
        assert a != RuleTable.empty()

    def test_hot_path_projections(self) -> None:
        table = RuleTable.from_mapping({2: Rule.defined(7, TurnDirection.LEFT)})
        replacements = table.replacement_colors()
        turns = table.turn_directions()
        assert len(replacements) == len(turns) == NUM_COLORS
        assert replacements[2] == 7
        assert turns[2] == -1
        assert replacements[3] == 0 and turns[3] == 0

    def test_to_spec(self) -> None:
        table = RuleTable.from_mapping(
            {1: Rule.defined(0, TurnDirection.RIGHT), 0: Rule.defined(1, TurnDirection.LEFT)}
        )
        assert table.to_spec() == "0,1,L 1,0,R"
