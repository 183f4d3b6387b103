# utils/config.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Engine configuration shared by the pipeline and the command line

"""Configuration for a minimization run.

The engine itself imposes no limits; callers bound the exponential cost of
truth-table enumeration (2^k assignments) and table growth (up to 3^k rows)
through ``max_variables``.
"""

from __future__ import annotations
from dataclasses import dataclass, replace

from parser.symbols import FormulaSymbols, get_symbol_table

DEFAULT_MAX_VARIABLES = 8


@dataclass(frozen=True)
class EngineConfig:
    """Settings for one minimization run.

    Attributes:
        max_variables: Largest accepted number of distinct variables
        symbols: Name of the symbol table used for output
        exhaustive: Let the last table row take part as outer row
        flatten_output: Omit parentheses in associative chains on output
    """

    max_variables: int = DEFAULT_MAX_VARIABLES
    symbols: str = "ascii"
    exhaustive: bool = False
    flatten_output: bool = True

    def __post_init__(self):
        if self.max_variables < 0:
            raise ValueError("max_variables must not be negative")
        # Fail early on unknown symbol tables
        get_symbol_table(self.symbols)

    def symbol_table(self) -> FormulaSymbols:
        return get_symbol_table(self.symbols)

    def with_overrides(self, **changes) -> EngineConfig:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def from_args(cls, args) -> EngineConfig:
        """Build a configuration from parsed command line arguments."""
        return cls(
            max_variables=args.max_variables,
            symbols=args.symbols,
            exhaustive=args.exhaustive,
        )
