# logic/reconstructor.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Rebuilds formulas from cubes and renders them for display

"""
Turns the surviving cubes of a consensus table back into a formula.

Each cube becomes one product term whose literals are named after the
canonical variable order; don't-care positions contribute no literal. The
product terms are joined by ``or`` in cube order. Rendering goes through a
symbol table, which is the only point where notation enters the engine.
"""

from typing import List, Sequence

from parser import ast_nodes as ast
from parser.dnf_transformer import product_term_from_assignment, build_or
from parser.symbols import ASCII_SYMBOLS, FormulaPrinter, FormulaSymbols
from model.cube import Cube
from model.exceptions import ShapeMismatchError
from utils.logger import get_logger


def formula_from_cubes(variable_names: Sequence[str], *cubes: Cube) -> ast.Formula:
    """
    Build a sum-of-products formula from cubes.

    Args:
        variable_names: Name for each cube position, in cube order.
        *cubes: Product terms to join.

    Returns:
        The disjunction of one product term per cube. A cube made only of
        don't-cares yields ``true``; no cubes at all yields ``false``.

    Raises:
        ShapeMismatchError: Cubes differ in length, or the number of names
            does not match the cube length.
    """
    if not cubes:
        return ast.FALSE

    length = cubes[0].get_length()
    if any(c.get_length() != length for c in cubes):
        raise ShapeMismatchError("All cubes must have same number of components.")

    assignments = [c.to_assignment(variable_names) for c in cubes]
    return build_or([product_term_from_assignment(a) for a in assignments])


class Reconstructor:
    """
    Builds and renders the minimized formula.

    Attributes:
        symbols: Symbol table used by ``render``.
        flatten: Drop parentheses around associative chains when rendering.
    """

    def __init__(self, symbols: FormulaSymbols = ASCII_SYMBOLS, flatten: bool = True):
        self.symbols = symbols
        self.flatten = flatten
        self._printer = FormulaPrinter(symbols, flatten=flatten)

    def reconstruct(self, variable_names: Sequence[str], cubes: List[Cube]) -> ast.Formula:
        logger = get_logger()
        formula = formula_from_cubes(variable_names, *cubes)
        logger.debug(f"Reconstructed formula from {len(cubes)} cubes")
        return formula

    def render(self, formula: ast.Formula) -> str:
        return self._printer.render(formula)
