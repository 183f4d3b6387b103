# parser/symbols.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Operator symbol tables and string rendering of formula trees

"""Operator symbol tables and the formula printer.

A symbol table maps the operator keys ``not``, ``and``, ``or``,
``implication`` and ``equivalence`` to the strings used when a formula is
rendered. The same AST can therefore be printed as parser keywords, as
Unicode logic symbols or as LaTeX math.

Rendering rules:
    - Parentheses are emitted only where precedence requires them
      (``or`` < ``and`` < ``not``).
    - ``and``/``or`` chains nest to the right when parsed, so a left
      operand using the same connective is parenthesized unless the
      printer flattens associative chains.
    - An empty ``and`` symbol renders as juxtaposition.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Dict, Mapping

from . import ast_nodes as ast


@dataclass(frozen=True)
class FormulaSymbols:
    """Strings used for each logical operator.

    Attributes:
        not_: Negation symbol
        and_: Conjunction symbol (empty string means juxtaposition)
        or_: Disjunction symbol
        implication: Implication symbol
        equivalence: Equivalence symbol
        negation_wraps: Render negation as ``not_{operand}`` (LaTeX accents)
    """

    not_: str
    and_: str
    or_: str
    implication: str
    equivalence: str
    negation_wraps: bool = False

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str], negation_wraps: bool = False):
        """Build a table from a ``{not, and, or, implication, equivalence}`` mapping."""
        missing = {"not", "and", "or", "implication", "equivalence"} - set(mapping)
        if missing:
            raise ValueError(f"Symbol table is missing keys: {sorted(missing)}")
        return cls(
            not_=mapping["not"],
            and_=mapping["and"],
            or_=mapping["or"],
            implication=mapping["implication"],
            equivalence=mapping["equivalence"],
            negation_wraps=negation_wraps,
        )

    def as_dict(self) -> Dict[str, str]:
        """Return the table keyed by operator name."""
        raw = asdict(self)
        return {
            "not": raw["not_"],
            "and": raw["and_"],
            "or": raw["or_"],
            "implication": raw["implication"],
            "equivalence": raw["equivalence"],
        }


ASCII_SYMBOLS = FormulaSymbols(
    not_="not", and_="and", or_="or", implication="->", equivalence="<->"
)

UNICODE_SYMBOLS = FormulaSymbols(
    not_="¬", and_="∧", or_="∨", implication="→", equivalence="↔"
)

LATEX_SYMBOLS = FormulaSymbols(
    not_="\\bar",
    and_="",
    or_="\\lor",
    implication="\\implies",
    equivalence="\\iff",
    negation_wraps=True,
)

SYMBOL_TABLES: Dict[str, FormulaSymbols] = {
    "ascii": ASCII_SYMBOLS,
    "unicode": UNICODE_SYMBOLS,
    "latex": LATEX_SYMBOLS,
}


def get_symbol_table(name: str) -> FormulaSymbols:
    """Look up a shipped symbol table by name.

    Raises:
        ValueError: Unknown table name
    """
    try:
        return SYMBOL_TABLES[name]
    except KeyError:
        raise ValueError(
            f"Unknown symbol table '{name}', expected one of {sorted(SYMBOL_TABLES)}"
        ) from None


_PRECEDENCE = {ast.Or: 1, ast.And: 2, ast.Not: 3, ast.Atom: 4}


class FormulaPrinter(ast.Visitor):
    """Renders a formula tree to text using a symbol table.

    Attributes:
        symbols: Symbol table used for the operators
        flatten: Omit parentheses around left-nested associative chains
    """

    def __init__(self, symbols: FormulaSymbols = ASCII_SYMBOLS, flatten: bool = False):
        self.symbols = symbols
        self.flatten = flatten

    def render(self, formula: ast.Formula) -> str:
        return formula.accept(self)

    def visit_atom(self, n: ast.Atom) -> str:
        return n.name

    def visit_not(self, n: ast.Not) -> str:
        inner = n.operand.accept(self)
        if self.symbols.negation_wraps:
            return f"{self.symbols.not_}{{{inner}}}"
        if _PRECEDENCE[type(n.operand)] < _PRECEDENCE[ast.Not]:
            inner = f"({inner})"
        separator = " " if self.symbols.not_[-1:].isalnum() else ""
        return f"{self.symbols.not_}{separator}{inner}"

    def visit_and(self, n: ast.And) -> str:
        return self._binary(n, self.symbols.and_)

    def visit_or(self, n: ast.Or) -> str:
        return self._binary(n, self.symbols.or_)

    def _binary(self, n, symbol: str) -> str:
        own = _PRECEDENCE[type(n)]

        left = n.left.accept(self)
        left_prec = _PRECEDENCE[type(n.left)]
        same_op = type(n.left) is type(n)
        if left_prec < own or (same_op and not self.flatten):
            left = f"({left})"

        right = n.right.accept(self)
        if _PRECEDENCE[type(n.right)] < own:
            right = f"({right})"

        if not symbol:
            return f"{left} {right}"
        return f"{left} {symbol} {right}"
