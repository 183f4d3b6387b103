# tests/logic_tests/test_consensus_engine.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Test suite for the consensus table procedure

"""Test suite for the consensus engine.

Checks the exact table produced for known inputs (row order, parents and
cancellation references), the preconditions on the seed cubes, and that
the surviving cubes always cover the same points as the seeds.
"""

import itertools

import pytest
from model.cube import Cube, DONT_CARE
from model.exceptions import ShapeMismatchError
from logic.consensus import (
    NOT_CANCELLED,
    ConsensusEngine,
    ConsensusTable,
    run_consensus,
)

DC = DONT_CARE


def points(cubes):
    covered = set()
    for cube in cubes:
        covered |= cube.get_covered_cubes()
    return covered


def snapshot(table):
    return [(row.number, row.formed_by, str(row.cube), row.cancelled_by) for row in table]


class TestConsensusTable:
    """Test cases for the exact table contents."""

    def test_three_variable_example(self):
        """Seeds of ``x and y or not y and z`` in enumeration order."""
        seeds = [Cube(1, 1, 0), Cube(0, 0, 1), Cube(1, 0, 1), Cube(1, 1, 1)]
        table = ConsensusEngine(*seeds).run()

        assert snapshot(table) == [
            (1, (), "(1,1,0)", 6),
            (2, (), "(0,0,1)", 5),
            (3, (), "(1,0,1)", 5),
            (4, (), "(1,1,1)", 6),
            (5, (3, 2), "(-,0,1)", NOT_CANCELLED),
            (6, (4, 1), "(1,1,-)", NOT_CANCELLED),
        ]
        assert table.surviving_cubes() == [Cube(DC, 0, 1), Cube(1, 1, DC)]

    def test_consensus_already_covered_is_cancelled_on_creation(self):
        """A consensus covered by an active row points at that row."""
        seeds = [Cube(DC, 1), Cube(0, 0), Cube(1, 1)]
        table = ConsensusEngine(*seeds).run()

        # (0,0) with (-,1) gives (0,-), which cancels (0,0) and becomes row 4
        assert snapshot(table)[:4] == [
            (1, (), "(-,1)", NOT_CANCELLED),
            (2, (), "(0,0)", 4),
            (3, (), "(1,1)", NOT_CANCELLED),
            (4, (2, 1), "(0,-)", NOT_CANCELLED),
        ]

    def test_covered_consensus_references_earliest_covering_row(self):
        seeds = [Cube(0, DC), Cube(DC, 0), Cube(1, 0), Cube(1, 1)]
        table = ConsensusEngine(*seeds).run()

        # (1,0) with (0,-) gives (-,0), which row 2 already covers
        assert snapshot(table)[4] == (5, (3, 1), "(-,0)", 2)
        assert table.row(7).cancelled_by == 6
        assert table.surviving_cubes() == [Cube(DC, DC)]

    def test_single_seed(self):
        table = ConsensusEngine(Cube(1, 0)).run()
        assert snapshot(table) == [(1, (), "(1,0)", NOT_CANCELLED)]

    def test_two_seeds_are_not_combined_by_default(self):
        """The last row never acts as outer row."""
        table = ConsensusEngine(Cube(0), Cube(1)).run()
        assert len(table) == 2
        assert table.surviving_cubes() == [Cube(0), Cube(1)]

    def test_exhaustive_mode_processes_the_last_row(self):
        table = ConsensusEngine(Cube(0), Cube(1), exhaustive=True).run()
        assert snapshot(table) == [
            (1, (), "(0)", 3),
            (2, (), "(1)", 3),
            (3, (2, 1), "(-)", NOT_CANCELLED),
        ]

    def test_exhaustive_or_of_two_variables(self):
        seeds = [Cube(1, 0), Cube(0, 1), Cube(1, 1)]
        table = run_consensus(seeds, exhaustive=True)
        assert table.surviving_cubes() == [Cube(DC, 1), Cube(1, DC)]

    def test_row_helpers(self):
        table = ConsensusEngine(Cube(1, 1, 0), Cube(0, 0, 1), Cube(1, 0, 1), Cube(1, 1, 1)).run()
        assert isinstance(table, ConsensusTable)
        assert table.row(5).formed_by == (3, 2)
        assert table[0].is_seed
        assert not table.row(6).is_seed
        assert table.row(1).is_cancelled
        assert [r.number for r in table.active_rows()] == [5, 6]


class TestConsensusPreconditions:
    """Test cases for invalid seed sets."""

    def test_empty_input_is_rejected(self):
        with pytest.raises(ValueError):
            ConsensusEngine()

    def test_mixed_lengths_are_rejected(self):
        with pytest.raises(ShapeMismatchError):
            ConsensusEngine(Cube(1, 0), Cube(1))

    def test_engines_do_not_share_tables(self):
        first = ConsensusEngine(Cube(1, 0), Cube(0, 0), Cube(1, 1))
        second = ConsensusEngine(Cube(1, 0), Cube(0, 0), Cube(1, 1))
        first.run()
        assert len(second.table) == 3
        assert all(not row.is_cancelled for row in second.table)


class TestConsensusInvariants:
    """Properties that hold for every seed set."""

    MINTERMS = [Cube(*bits) for bits in itertools.product((0, 1), repeat=3)]

    @pytest.mark.parametrize("exhaustive", [False, True])
    def test_cover_preserves_points_for_all_functions(self, exhaustive):
        """For every 3-variable function the survivors cover exactly the seeds."""
        for mask in range(1, 1 << len(self.MINTERMS)):
            seeds = [m for i, m in enumerate(self.MINTERMS) if mask & (1 << i)]
            table = run_consensus(seeds, exhaustive=exhaustive)
            survivors = table.surviving_cubes()

            assert points(survivors) == set(seeds), f"seeds {seeds}"
            assert survivors, "a non-empty seed set keeps at least one row"

    def test_survivors_do_not_cover_each_other(self):
        for mask in range(1, 1 << len(self.MINTERMS)):
            seeds = [m for i, m in enumerate(self.MINTERMS) if mask & (1 << i)]
            survivors = run_consensus(seeds, exhaustive=True).surviving_cubes()
            for a, b in itertools.permutations(survivors, 2):
                assert not a.covers(b), f"{a} covers {b} for seeds {seeds}"

    def test_cancelled_rows_are_covered_by_their_canceller_chain(self):
        seeds = [Cube(1, 1, 0), Cube(0, 0, 1), Cube(1, 0, 1), Cube(1, 1, 1)]
        table = run_consensus(seeds)
        for row in table:
            if row.is_cancelled:
                assert table.row(row.cancelled_by).cube.covers(row.cube)
