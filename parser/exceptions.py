# parser/exceptions.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Custom exceptions for formula parsing

"""Domain-specific exceptions for propositional formula parsing.

This module defines the exception raised while tokenizing and parsing
formulas. A parse either returns a complete formula or raises; there is
no partial result.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when formula parsing fails due to syntax errors.

    Carries the token the parser was waiting for and the token it actually
    found, when those are known. ``actual`` is ``None`` at end of input.

    Attributes:
        expected: Description of the expected token, if any
        actual: Text of the offending token, or None at end of input
    """

    def __init__(
        self,
        message: Optional[str] = None,
        expected: Optional[str] = None,
        actual: Optional[str] = None,
    ):
        self.expected = expected
        self.actual = actual
        if message is None:
            found = "end of input" if actual is None else repr(actual)
            message = f"Unexpected token: expected {expected}, got {found}"
        super().__init__(message)
