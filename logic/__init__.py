# logic/__init__.py

"""Minimization engine interface.

This package provides:
  • ConsensusEngine: consensus procedure over an append-only cube table
  • formula_from_cubes / Reconstructor: cubes back to formulas and text
  • minimize: the full text-to-cover pipeline
  • VariableLimitError: raised when the configured variable ceiling is exceeded
"""

from .consensus import ConsensusEngine, ConsensusRow, ConsensusTable, NOT_CANCELLED
from .reconstructor import Reconstructor, formula_from_cubes
from .minimizer import MinimizationResult, VariableLimitError, minimize

__all__ = [
    "ConsensusEngine",
    "ConsensusRow",
    "ConsensusTable",
    "NOT_CANCELLED",
    "Reconstructor",
    "formula_from_cubes",
    "MinimizationResult",
    "VariableLimitError",
    "minimize",
]
