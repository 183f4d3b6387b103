# parser/dnf_transformer.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Truth-table enumeration and Disjunctive Normal Form derivation

"""Derives the canonical Disjunctive Normal Form (DNF) of a formula.

The DNF is read off the truth table: every satisfying assignment over the
formula's variables becomes one product term (a conjunction with one
literal per variable) and the product terms are joined by ``or`` in
assignment order.

The transformation process:
1. Collect the variables in canonical order (first occurrence)
2. Enumerate all 2^k assignments and keep the satisfying ones
3. Build and deduplicate one product term per assignment
4. Join the product terms left to right

A formula without satisfying assignments has no product terms; its DNF is
the ``false`` constant.
"""

from __future__ import annotations
from typing import Dict, List, Sequence, Tuple

from . import ast_nodes as ast
from utils.logger import get_logger


def generate_assignments(atoms: Sequence[str]) -> List[ast.Assignment]:
    """Generate every assignment of truth values to ``atoms``.

    Assignment ``i`` sets the atom at position ``j`` to True iff bit ``j``
    of ``i`` is set, so the first atom toggles fastest.

    Args:
        atoms: Variable names in canonical order

    Returns:
        List of 2^len(atoms) assignments, each keyed in ``atoms`` order
    """
    return [
        {atom: bool(i & (1 << j)) for j, atom in enumerate(atoms)}
        for i in range(1 << len(atoms))
    ]


def get_all_true_assignments(formula: ast.Formula) -> List[ast.Assignment]:
    """Return all assignments over the formula's atoms that satisfy it."""
    return [a for a in generate_assignments(formula.collect_atoms()) if formula.evaluate(a)]


def product_term_from_assignment(assignment: ast.Assignment) -> ast.Formula:
    """Build the conjunction of literals described by ``assignment``.

    Args:
        assignment: Mapping from variable name to truth value

    Returns:
        Left-nested conjunction; ``true`` for an empty assignment
    """
    literals = [
        ast.Atom(name) if value else ast.Not(ast.Atom(name))
        for name, value in assignment.items()
    ]
    return build_and(literals)


def get_product_terms(formula: ast.Formula) -> List[ast.Assignment]:
    """Return the distinct satisfying assignments in enumeration order.

    Assignments are deduplicated by the ordered tuple of their
    ``(variable, value)`` pairs.
    """
    terms: Dict[Tuple[Tuple[str, bool], ...], ast.Assignment] = {}
    for assignment in get_all_true_assignments(formula):
        terms.setdefault(tuple(assignment.items()), assignment)
    return list(terms.values())


def get_dnf(formula: ast.Formula) -> ast.Formula:
    """Convert ``formula`` into its canonical DNF.

    Args:
        formula: Formula to convert

    Returns:
        Disjunction of product terms, or the ``false`` constant when the
        formula is unsatisfiable
    """
    return dnf_from_product_terms(get_product_terms(formula))


def dnf_from_product_terms(terms: Sequence[ast.Assignment]) -> ast.Formula:
    """Join already enumerated product terms into a DNF.

    Args:
        terms: Distinct satisfying assignments, as from ``get_product_terms``

    Returns:
        Disjunction of product terms, or the ``false`` constant for no terms
    """
    logger = get_logger()
    logger.debug(f"DNF derivation found {len(terms)} product terms")

    if not terms:
        return ast.FALSE

    return build_or([product_term_from_assignment(t) for t in terms])


def is_unsatisfiable(formula: ast.Formula) -> bool:
    """Return True if no assignment satisfies ``formula``."""
    return not get_all_true_assignments(formula)


def build_and(factors: Sequence[ast.Formula]) -> ast.Formula:
    """Build left-associative conjunction from factors.

    Args:
        factors: Expressions to conjoin

    Returns:
        Conjunction expression or 'true' if empty
    """
    if not factors:
        return ast.TRUE

    expr = factors[0]
    for factor in factors[1:]:
        expr = ast.And(expr, factor)
    return expr


def build_or(terms: Sequence[ast.Formula]) -> ast.Formula:
    """Build left-associative disjunction from terms.

    Args:
        terms: Expressions to disjoin

    Returns:
        Disjunction expression or 'false' if empty
    """
    if not terms:
        return ast.FALSE

    expr = terms[0]
    for term in terms[1:]:
        expr = ast.Or(expr, term)
    return expr
