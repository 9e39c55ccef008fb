"""Tests for gcd/lcm and multi-path synchronization."""

import math

import pytest

from nodewalk.errors import (
    AperiodicWalkError,
    MissingNodeError,
    NoStartNodesError,
    NonTerminatingWalkError,
)
from nodewalk.network.table import build_transition_table
from nodewalk.network.types import TransitionRecord, TransitionTable
from nodewalk.parsing import parse_instructions
from nodewalk.walk.synchronize import (
    find_start_nodes,
    gcd,
    lcm,
    lcm_of,
    synchronize,
    synchronize_walks,
    verify_periodicity,
    walk_all,
)
from nodewalk.walk.types import WalkResult
from nodewalk.walk.walker import suffix_match


def _table(edges: dict[str, tuple[str, str]]) -> TransitionTable:
    return build_transition_table(
        TransitionRecord(source, left, right) for source, (left, right) in edges.items()
    )


def _ghost_table() -> TransitionTable:
    """Two independent loops: 11A reaches 11Z in 2, 22A reaches 22Z in 3."""
    return _table({
        "11A": ("11B", "XXX"),
        "11B": ("XXX", "11Z"),
        "11Z": ("11B", "XXX"),
        "22A": ("22B", "XXX"),
        "22B": ("22C", "22C"),
        "22C": ("22Z", "22Z"),
        "22Z": ("22B", "22B"),
        "XXX": ("XXX", "XXX"),
    })


LR = parse_instructions("LR")


class TestGcdLcm:
    """Euclid gcd and lcm identities."""

    @pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (1, 1), (100, 75), (21, 6)])
    def test_gcd_symmetric(self, a: int, b: int) -> None:
        assert gcd(a, b) == gcd(b, a)

    @pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (100, 75), (20221, 13207)])
    def test_gcd_matches_math(self, a: int, b: int) -> None:
        assert gcd(a, b) == math.gcd(a, b)

    def test_gcd_zero(self) -> None:
        assert gcd(9, 0) == 9
        assert gcd(0, 9) == 9

    @pytest.mark.parametrize("a,b", [(2, 3), (4, 6), (12, 18), (13207, 20221)])
    def test_lcm_times_gcd_is_product(self, a: int, b: int) -> None:
        assert lcm(a, b) * gcd(a, b) == a * b

    def test_lcm_zero(self) -> None:
        assert lcm(0, 5) == 0
        assert lcm(0, 0) == 0

    def test_lcm_of_single_value(self) -> None:
        assert lcm_of([42]) == 42

    def test_lcm_of_list(self) -> None:
        assert lcm_of([2, 3]) == 6
        assert lcm_of([4, 6, 10]) == 60

    def test_lcm_of_large_values_exact(self) -> None:
        values = [20221, 13207, 16579, 14893, 22357, 17141]
        assert lcm_of(values) == math.lcm(*values)

    def test_lcm_of_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            lcm_of([])


class TestSynchronize:
    """Independent walks combined by lcm."""

    def test_two_walks_combine_to_six(self) -> None:
        table = _ghost_table()
        starts = find_start_nodes(table, suffix_match("A"))
        assert starts == ["11A", "22A"]
        assert synchronize(starts, suffix_match("Z"), table, LR) == 6

    def test_per_walk_counts(self) -> None:
        table = _ghost_table()
        result = synchronize_walks(["11A", "22A"], suffix_match("Z"), table, LR)
        assert result.walks == (
            WalkResult("11A", "11Z", 2),
            WalkResult("22A", "22Z", 3),
        )
        assert result.steps == 6

    def test_order_irrelevant(self) -> None:
        table = _ghost_table()
        assert synchronize(["22A", "11A"], suffix_match("Z"), table, LR) == 6

    def test_walks_each_start_from_cursor_zero(self) -> None:
        """Every walk sees the same instructions regardless of earlier walks."""
        table = _ghost_table()
        results = walk_all(["11A", "11A", "11A"], suffix_match("Z"), table, LR)
        assert [r.steps for r in results] == [2, 2, 2]

    def test_single_start(self) -> None:
        table = _ghost_table()
        assert synchronize(["22A"], suffix_match("Z"), table, LR) == 3

    def test_empty_start_list_raises(self) -> None:
        with pytest.raises(NoStartNodesError):
            synchronize([], suffix_match("Z"), _ghost_table(), LR)

    def test_no_matching_start_raises(self) -> None:
        with pytest.raises(NoStartNodesError, match=r"\*Q"):
            find_start_nodes(_ghost_table(), suffix_match("Q"), pattern="*Q")

    def test_missing_node_propagates(self) -> None:
        table = _table({"11A": ("QQQ", "QQQ")})
        with pytest.raises(MissingNodeError):
            synchronize(["11A"], suffix_match("Z"), table, LR)

    def test_step_ceiling_propagates(self) -> None:
        table = _table({"11A": ("11A", "11A"), "11Z": ("11Z", "11Z")})
        with pytest.raises(NonTerminatingWalkError):
            synchronize(["11A"], suffix_match("Z"), table, LR, max_steps=10)


class TestPeriodicity:
    """verify_periodicity() checks the lcm precondition."""

    def test_periodic_walks_pass(self) -> None:
        table = _ghost_table()
        result = synchronize_walks(["11A", "22A"], suffix_match("Z"), table, LR)
        for w in result.walks:
            verify_periodicity(w, suffix_match("Z"), table, LR)

    def test_aperiodic_walk_raises(self) -> None:
        table = _table({
            "AAA": ("BBB", "BBB"),
            "BBB": ("ZZZ", "ZZZ"),
            "ZZZ": ("ZZZ", "ZZZ"),
        })
        instructions = parse_instructions("L")
        result = synchronize_walks(["AAA"], suffix_match("Z"), table, instructions)
        assert result.steps == 2
        with pytest.raises(AperiodicWalkError) as exc_info:
            verify_periodicity(result.walks[0], suffix_match("Z"), table, instructions)
        assert exc_info.value.first == 2
        assert exc_info.value.second == 1

    def test_resumes_from_instruction_cursor(self) -> None:
        """The second lap continues where the first left the instructions."""
        table = _table({
            "AAA": ("BBB", "BBB"),
            "BBB": ("CCC", "CCC"),
            "CCC": ("ZZZ", "ZZZ"),
            "ZZZ": ("CCC", "ZZZ"),
        })
        instructions = parse_instructions("LR")
        # AAA -L-> BBB -R-> CCC -L-> ZZZ in 3; then cursor 1: ZZZ -R-> ZZZ is 1
        result = synchronize_walks(["AAA"], suffix_match("Z"), table, instructions)
        assert result.steps == 3
        with pytest.raises(AperiodicWalkError) as exc_info:
            verify_periodicity(result.walks[0], suffix_match("Z"), table, instructions)
        assert exc_info.value.second == 1

    def test_first_lap_match_is_not_enough(self) -> None:
        """A walk whose first lap repeats but whose later laps drift is rejected."""
        table = _table({
            "11A": ("11B", "11B"),
            "11B": ("11Z", "11Z"),
            "11Z": ("11D", "11C"),
            "11C": ("11Z", "11Z"),
            "11D": ("11E", "11E"),
            "11E": ("11E", "11E"),
            "22A": ("22B", "22B"),
            "22B": ("22C", "22C"),
            "22C": ("22Z", "22Z"),
            "22Z": ("22B", "22B"),
        })
        instructions = parse_instructions("LLR")
        result = synchronize_walks(["11A", "22A"], suffix_match("Z"), table, instructions)
        assert [w.steps for w in result.walks] == [2, 3]
        assert result.steps == 6
        verify_periodicity(result.walks[1], suffix_match("Z"), table, instructions)
        with pytest.raises(AperiodicWalkError) as exc_info:
            verify_periodicity(result.walks[0], suffix_match("Z"), table, instructions)
        assert exc_info.value.start == "11A"
        assert exc_info.value.first == 2
        assert exc_info.value.second is None

    def test_period_spanning_several_laps_passes(self) -> None:
        """22A repeats its goal state only every second lap under LR."""
        table = _ghost_table()
        result = walk_all(["22A"], suffix_match("Z"), table, LR)[0]
        assert result.steps == 3
        verify_periodicity(result, suffix_match("Z"), table, LR)

    def test_step_ceiling_names_original_start(self) -> None:
        table = _ghost_table()
        result = walk_all(["22A"], suffix_match("Z"), table, LR)[0]
        with pytest.raises(NonTerminatingWalkError) as exc_info:
            verify_periodicity(result, suffix_match("Z"), table, LR, max_steps=2)
        assert exc_info.value.start == "22A"
        assert exc_info.value.max_steps == 2

    def test_zero_step_walk_accepted(self) -> None:
        verify_periodicity(
            WalkResult("11Z", "11Z", 0), suffix_match("Z"), _ghost_table(), LR
        )
