# logic/consensus.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Consensus procedure over an append-only table of cubes

"""
Implements the consensus procedure on a table of cubes.

The table starts with one seed row per product term. Pairs of active rows
whose cubes differ in exactly one defined variable produce a consensus
cube, which is appended as a new row. A new row that is already covered by
an active row is cancelled on creation; otherwise it cancels every active
row it covers. When the procedure stops, the active rows form an
irredundant (but not necessarily minimum) cover of the seed cubes.

Rows refer to each other by 1-based row number only, so the table is a
plain list that only ever grows.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from model.cube import Cube
from model.exceptions import ShapeMismatchError
from utils.logger import get_logger

NOT_CANCELLED: Optional[int] = None


@dataclass
class ConsensusRow:
    """
    One line of the consensus table.

    Attributes:
        number: 1-based position of the row in the table.
        cube: The row's cube.
        formed_by: Row numbers of the two parents; empty for seed rows.
        cancelled_by: Row number of a covering row, or NOT_CANCELLED.
    """
    number: int
    cube: Cube
    formed_by: Tuple[int, ...] = ()
    cancelled_by: Optional[int] = NOT_CANCELLED

    @property
    def is_cancelled(self) -> bool:
        return self.cancelled_by is not NOT_CANCELLED

    @property
    def is_seed(self) -> bool:
        return not self.formed_by


@dataclass
class ConsensusTable:
    """
    Ordered, append-only sequence of consensus rows.
    """
    rows: List[ConsensusRow] = field(default_factory=list)

    def append(
        self, cube: Cube, formed_by: Tuple[int, ...] = (), cancelled_by: Optional[int] = NOT_CANCELLED
    ) -> ConsensusRow:
        row = ConsensusRow(len(self.rows) + 1, cube, formed_by, cancelled_by)
        self.rows.append(row)
        return row

    def first_covering(self, cube: Cube) -> Optional[ConsensusRow]:
        """
        Earliest active row whose cube covers ``cube``.
        """
        for row in self.rows:
            if not row.is_cancelled and row.cube.covers(cube):
                return row
        return None

    def active_rows(self) -> List[ConsensusRow]:
        return [row for row in self.rows if not row.is_cancelled]

    def surviving_cubes(self) -> List[Cube]:
        """
        Cubes of all uncancelled rows, in table order.
        """
        return [row.cube for row in self.active_rows()]

    def row(self, number: int) -> ConsensusRow:
        return self.rows[number - 1]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[ConsensusRow]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> ConsensusRow:
        return self.rows[index]


class ConsensusEngine:
    """
    Runs the consensus procedure for one set of seed cubes.

    Each engine owns its table; independent engines share no state.

    Attributes:
        table: The growing consensus table.
        exhaustive: Also let the last appended row act as outer row.
    """

    def __init__(self, *cubes: Cube, exhaustive: bool = False):
        if not cubes:
            raise ValueError("Consensus needs at least one cube")

        length = cubes[0].get_length()
        for cube in cubes:
            if cube.get_length() != length:
                raise ShapeMismatchError("All cubes must have the same size.")

        self.exhaustive = exhaustive
        self.table = ConsensusTable()
        for cube in cubes:
            self.table.append(cube)

    def run(self) -> ConsensusTable:
        """
        Apply the consensus rule until no outer row is left.

        The outer row ``g`` ascends from the second row, the inner row
        descends from ``g - 1`` to the first row, and a covered consensus
        is attributed to the earliest covering row. Changing this order
        changes which (equally valid) cover is produced.

        Returns:
            The complete table, including cancelled rows.
        """
        logger = get_logger()
        logger.debug(
            f"Starting consensus on {len(self.table)} seed cubes"
            f"{' (exhaustive)' if self.exhaustive else ''}"
        )

        rows = self.table.rows
        tail = 0 if self.exhaustive else 1
        g = 1
        while g < len(rows) - tail:
            if not rows[g].is_cancelled:
                for k in range(g - 1, -1, -1):
                    if not rows[k].is_cancelled:
                        self._process_pair(g, k)
            g += 1

        logger.debug(
            f"Consensus finished with {len(rows)} rows, "
            f"{len(self.table.active_rows())} uncancelled"
        )
        return self.table

    def _process_pair(self, g: int, k: int) -> None:
        logger = get_logger()
        rows = self.table.rows
        outer = rows[g].cube
        inner = rows[k].cube

        if not inner.has_complementary_digit_with(outer) or not inner.has_consensus_with(outer):
            return

        consensus = inner.get_consensus_with(outer)

        covering = self.table.first_covering(consensus)
        if covering is not None:
            cancelled_by = covering.number
        else:
            cancelled_by = NOT_CANCELLED
            new_number = len(rows) + 1
            for row in rows:
                if not row.is_cancelled and consensus.covers(row.cube):
                    row.cancelled_by = new_number
                    logger.row_cancelled(row.number, str(row.cube), new_number)

        row = self.table.append(consensus, (g + 1, k + 1), cancelled_by)
        logger.row_appended(
            row.number,
            str(row.cube),
            f"{g + 1},{k + 1}",
            "-" if cancelled_by is NOT_CANCELLED else str(cancelled_by),
        )


def run_consensus(cubes: List[Cube], exhaustive: bool = False) -> ConsensusTable:
    """Convenience wrapper: build an engine for ``cubes`` and run it."""
    return ConsensusEngine(*cubes, exhaustive=exhaustive).run()
