# parser/__init__.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Formula parsing and normal form components for propositional logic

"""Propositional formula parsing and normalization.

This module provides the front half of the minimization pipeline: textual
formulas are tokenized, parsed into abstract syntax trees and converted
into their canonical Disjunctive Normal Form (DNF).

Core Functions:
    parse: Converts formula strings into Abstract Syntax Trees
    parse_and_dnf: Parsing followed by DNF derivation

Supported Logic:
    - Boolean connectives (and, or, not)
    - Parenthetical grouping
    - Propositional variables and the constants true/false

Grammar Features:
    - Right-associative binary operators
    - ``not`` binds tighter than ``and``, which binds tighter than ``or``

Example:
    >>> from parser import parse_and_dnf
    >>> str(parse_and_dnf("x and y"))
    'x and y'
"""

from .exceptions import ParseError
from .grammar import parse_formula
from .dnf_transformer import get_dnf
from utils.logger import get_logger


def parse(source: str):
    """Parse a formula string into its Abstract Syntax Tree.

    Uses a fresh parser instance for each invocation, so parsing is
    stateless and independent calls share nothing.

    Args:
        source: Formula text, e.g. ``"x and not (y or z)"``

    Returns:
        Root AST node representing the parsed formula

    Raises:
        ParseError: Formula syntax is malformed

    Example:
        >>> parse("x and y")
        And(left=Atom(name='x'), right=Atom(name='y'))
    """
    logger = get_logger()

    try:
        return parse_formula(source)

    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_and_dnf(source: str):
    """Parse a formula string and return its canonical DNF.

    Args:
        source: Formula text

    Returns:
        DNF formula, or the ``false`` constant for an unsatisfiable formula

    Raises:
        ParseError: Formula parsing fails
    """
    logger = get_logger()
    logger.debug(f"Parsing and transforming formula to DNF: {source}")

    ast = parse(source)
    dnf = get_dnf(ast)

    logger.debug(f"DNF derivation completed, result type: {type(dnf).__name__}")
    return dnf


__all__ = ["parse", "parse_and_dnf", "ParseError"]

__version__ = "1.0.0"
__description__ = "Propositional formula parsing and DNF derivation components"
