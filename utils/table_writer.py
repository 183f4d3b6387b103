# utils/table_writer.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Text and CSV output of consensus tables

import csv
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from utils.logger import get_logger

UNCANCELLED_MARKER = "-"

CSV_HEADERS = ["row", "formed_by", "cube", "cancelled_by"]


def table_rows(table: Iterable) -> List[List[str]]:
    """Flatten consensus rows into display strings.

    Each row becomes ``[number, formed_by, cube, cancelled_by]``; seed rows
    have an empty ``formed_by`` and active rows show the uncancelled marker.

    Args:
        table: Iterable of consensus rows

    Returns:
        List of string cells, one list per row
    """
    cells = []
    for row in table:
        cells.append(
            [
                str(row.number),
                ",".join(str(n) for n in row.formed_by),
                str(row.cube),
                UNCANCELLED_MARKER if row.cancelled_by is None else str(row.cancelled_by),
            ]
        )
    return cells


def format_consensus_table(table: Iterable, headers: Optional[Sequence[str]] = None) -> str:
    """Render a consensus table as aligned plain text.

    Args:
        table: Iterable of consensus rows
        headers: Column titles (defaults to No./Formed by/Cube/Cancelled by)

    Returns:
        Multi-line string with a header line and one line per row
    """
    headers = list(headers or ["No.", "Formed by", "Cube", "Cancelled by"])
    cells = table_rows(table)

    widths = [len(h) for h in headers]
    for line in cells:
        widths = [max(w, len(c)) for w, c in zip(widths, line)]

    def fmt(line: Sequence[str]) -> str:
        return "  ".join(c.ljust(w) for c, w in zip(line, widths)).rstrip()

    out = [fmt(headers), fmt(["-" * w for w in widths])]
    out.extend(fmt(line) for line in cells)
    return "\n".join(out)


def write_consensus_csv(table: Iterable, filepath: Union[str, Path]) -> int:
    """Write a consensus table to a CSV file.

    Expected CSV format:
        row,formed_by,cube,cancelled_by
        1,,"(1,1,0)",6
        5,"3,2","(-,0,1)",-

    Args:
        table: Iterable of consensus rows
        filepath: Destination path

    Returns:
        Number of rows written (excluding the header)
    """
    logger = get_logger()
    cells = table_rows(table)

    with open(filepath, "w", newline="", encoding="utf-8") as file:
        writer = csv.writer(file)
        writer.writerow(CSV_HEADERS)
        writer.writerows(cells)

    logger.debug(f"Wrote {len(cells)} consensus rows to {filepath}")
    return len(cells)
