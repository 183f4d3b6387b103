# parser/grammar.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Recursive-descent parser for propositional formulas

"""Recursive-descent grammar for propositional formulas.

The parser reads the token list produced by the SLY lexer with a single
look-ahead token and builds the AST bottom-up.

Grammar (lowest to highest precedence):
    Exp  -> Term ("or" Exp)?
    Term -> Fac ("and" Term)?
    Fac  -> "not" Fac | "(" Exp ")" | literal

Both binary rules re-enter themselves on the right, so ``a and b and c``
parses as ``a and (b and c)``.
"""

from typing import List, Optional

from .lexer import tokenize
from .ast_nodes import Formula, Atom, Not, And, Or, TRUE, FALSE
from .exceptions import ParseError
from utils.logger import get_logger


# Token types that cannot start an operand
_NON_OPERANDS = {"AND", "OR", "RPAREN"}

_DESCRIPTIONS = {
    "NOT": "'not'",
    "AND": "'and'",
    "OR": "'or'",
    "LPAREN": "'('",
    "RPAREN": "')'",
}


class _FormulaParser:
    """Single look-ahead recursive-descent parser.

    A fresh instance is created for every input string; the instance keeps
    the token list and the position of the look-ahead token.
    """

    def __init__(self, text: str):
        self._text = text
        self._tokens: List = tokenize(text)
        self._position = 0

    @property
    def lookahead(self):
        """Current look-ahead token, or None at end of input."""
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return None

    def _lookahead_type(self) -> Optional[str]:
        token = self.lookahead
        return token.type if token is not None else None

    def _actual(self) -> Optional[str]:
        token = self.lookahead
        return token.value if token is not None else None

    def match(self, expected: str):
        """Consume the look-ahead token if it has type ``expected``.

        Args:
            expected: Token type the grammar requires at this point

        Returns:
            The consumed token

        Raises:
            ParseError: The look-ahead token has another type
        """
        token = self.lookahead
        if token is None or token.type != expected:
            raise ParseError(
                expected=_DESCRIPTIONS.get(expected, expected), actual=self._actual()
            )
        self._position += 1
        return token

    def parse(self) -> Formula:
        """Parse the complete input.

        Raises:
            ParseError: Empty input, syntax error or trailing input
        """
        if not self._tokens:
            raise ParseError("Input formula is empty.", expected="formula")

        result = self.parse_exp()

        if self.lookahead is not None:
            raise ParseError(
                f"Unexpected token at end of input: {self._actual()!r}",
                expected="end of input",
                actual=self._actual(),
            )
        return result

    def parse_exp(self) -> Formula:
        """Exp -> Term ("or" Exp)?"""
        term = self.parse_term()
        if self._lookahead_type() == "OR":
            self.match("OR")
            return Or(term, self.parse_exp())
        return term

    def parse_term(self) -> Formula:
        """Term -> Fac ("and" Term)?"""
        fac = self.parse_fac()
        if self._lookahead_type() == "AND":
            self.match("AND")
            return And(fac, self.parse_term())
        return fac

    def parse_fac(self) -> Formula:
        """Fac -> "not" Fac | "(" Exp ")" | literal"""
        kind = self._lookahead_type()

        if kind == "NOT":
            self.match("NOT")
            return Not(self.parse_fac())

        if kind == "LPAREN":
            self.match("LPAREN")
            exp = self.parse_exp()
            self.match("RPAREN")
            return exp

        if kind is None or kind in _NON_OPERANDS:
            raise ParseError(
                f"No operand found: got {self._actual()!r}"
                if kind is not None
                else "No operand found: unexpected end of input",
                expected="operand",
                actual=self._actual(),
            )

        token = self.match(kind)
        if kind == "TRUE":
            return TRUE
        if kind == "FALSE":
            return FALSE
        return Atom(token.value)


def parse_formula(text: str) -> Formula:
    """Parse ``text`` into a formula tree using a fresh parser."""
    logger = get_logger()
    logger.debug(f"Parsing formula: {text}")

    result = _FormulaParser(text).parse()

    logger.debug(f"Successfully parsed formula into {type(result).__name__}")
    return result
