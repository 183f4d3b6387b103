# parser/lexer.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module breaks input strings into tokens for the recursive-descent
parser. Keywords are whole words only, so ``nothing`` or ``order`` stay
identifiers.

Supported Tokens:
- Keywords: not, and, or, true, false
- Punctuation: (, )
- Identifiers: any other word, or any single non-space symbol
- Whitespace: ignored during tokenization
"""

from sly import Lexer


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formulas.

    Every non-space character starts some token, so the lexer never
    reports illegal characters; a stray symbol such as ``&`` becomes a
    one-character identifier and is rejected (or accepted) by the parser.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "NOT",
        "AND",
        "OR",
        "TRUE",
        "FALSE",
        "LPAREN",
        "RPAREN",
        "ID",
        "SYMBOL",
    }

    ignore = " \t\r\n"

    # Any other whitespace, including form feed and Unicode spaces
    ignore_ws = r"\s+"

    LPAREN = r"\("
    RPAREN = r"\)"

    # Words; reserved words are remapped to their keyword types
    ID = r"\w+"
    ID["not"] = "NOT"
    ID["and"] = "AND"
    ID["or"] = "OR"
    ID["true"] = "TRUE"
    ID["false"] = "FALSE"

    # Fallback: any other single visible character
    SYMBOL = r"\S"


def tokenize(text: str):
    """Tokenize ``text`` into a materialized list of SLY tokens."""
    return list(FormulaLexer().tokenize(text))
