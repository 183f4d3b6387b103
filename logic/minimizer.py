# logic/minimizer.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# End-to-end minimization pipeline

"""
Runs the whole pipeline on formula text:

    text → AST → true assignments → DNF → cubes → consensus table
         → surviving cubes → minimized formula

The result keeps every intermediate product so that a front end can show
the parsed formula, the DNF (when it differs from the input), the full
consensus table and the minimized formula.

Tautologies and contradictions are explicit: an unsatisfiable formula has
no table and minimizes to ``false``; a satisfiable formula without
variables minimizes to ``true``.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from parser import parse
from parser import ast_nodes as ast
from parser.dnf_transformer import dnf_from_product_terms, get_product_terms
from model.cube import Cube
from utils.config import EngineConfig
from utils.logger import get_logger
from .consensus import ConsensusEngine, ConsensusTable
from .reconstructor import Reconstructor


class VariableLimitError(ValueError):
    """Raised when a formula has more variables than the configured ceiling."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Formula has {count} variables, the configured maximum is {limit}"
        )


@dataclass(frozen=True, eq=False)
class MinimizationResult:
    """
    Everything produced by one pipeline run.

    Attributes:
        formula: The parsed formula.
        variables: Canonical variable order.
        true_assignments: Satisfying assignments in enumeration order.
        dnf: Canonical DNF (``false`` when unsatisfiable).
        table: Consensus table, or None when unsatisfiable.
        minimized: Formula built from the surviving cubes.
        formula_text, dnf_text, minimized_text: Renderings with the
            configured symbol table.
    """
    formula: ast.Formula
    variables: List[str]
    true_assignments: List[ast.Assignment]
    dnf: ast.Formula
    table: Optional[ConsensusTable]
    minimized: ast.Formula
    formula_text: str
    dnf_text: str
    minimized_text: str

    @property
    def is_unsatisfiable(self) -> bool:
        return not self.true_assignments

    @property
    def dnf_differs(self) -> bool:
        """True when the DNF should be shown next to the input."""
        return self.dnf_text != self.formula_text

    @property
    def cover(self) -> List[Cube]:
        return self.table.surviving_cubes() if self.table is not None else []


def minimize(text: str, config: Optional[EngineConfig] = None) -> MinimizationResult:
    """
    Parse ``text`` and compute its consensus-irredundant cover.

    Args:
        text: Formula source.
        config: Engine settings; defaults to ``EngineConfig()``.

    Returns:
        The pipeline result.

    Raises:
        ParseError: ``text`` is not a well-formed formula.
        VariableLimitError: Too many variables for the configured ceiling.
    """
    logger = get_logger()
    config = config or EngineConfig()
    reconstructor = Reconstructor(config.symbol_table(), flatten=config.flatten_output)

    formula = parse(text)
    variables = formula.collect_atoms()
    logger.debug(f"Variables in canonical order: {variables}")

    if len(variables) > config.max_variables:
        raise VariableLimitError(len(variables), config.max_variables)

    terms = get_product_terms(formula)
    dnf = dnf_from_product_terms(terms)

    if not terms:
        logger.debug("Formula is unsatisfiable, cover is empty")
        table = None
        minimized = ast.FALSE
    else:
        cubes = [Cube.from_assignment(t) for t in terms]
        table = ConsensusEngine(*cubes, exhaustive=config.exhaustive).run()
        minimized = reconstructor.reconstruct(variables, table.surviving_cubes())

    return MinimizationResult(
        formula=formula,
        variables=variables,
        true_assignments=terms,
        dnf=dnf,
        table=table,
        minimized=minimized,
        formula_text=reconstructor.render(formula),
        dnf_text=reconstructor.render(dnf),
        minimized_text=reconstructor.render(minimized),
    )
