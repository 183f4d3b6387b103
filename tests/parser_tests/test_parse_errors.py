# tests/parser_tests/test_parse_errors.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Test suite for parser syntax validation and error handling

"""Test suite for parser syntax validation and error handling.

This module tests round-trip parsing of valid formulas and verifies that
malformed input raises ParseError without producing a partial formula.
"""

import pytest
from parser import parse, parse_and_dnf, ParseError
from parser.symbols import FormulaPrinter, ASCII_SYMBOLS
from utils.logger import get_logger


class TestFormulaParserSyntax:
    """Test cases for parser syntax validation and error handling."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    VALID_FORMULAS = [
        # Basic expressions
        "p",
        "not q",
        "p and q",
        "p or q",
        # Nesting and precedence
        "(p and q) or not r",
        "not (p or q)",
        "not not p",
        "(p or q) and (r or not s)",
        "p and (q or (r and (s or t)))",
        "(p and q) and r",
        "(p or q) or r",
        # Boolean constants
        "true",
        "false or p",
        # Whitespace handling
        "  (p or q)  ",
        "\t p and q \n",
        # Identifier shapes
        "variable_123",
        "_underscore_var",
        "nothing and order",
    ]

    @pytest.mark.parametrize("formula", VALID_FORMULAS)
    def test_round_trip_parsing_integrity(self, formula):
        """Test that parsing -> stringifying -> parsing preserves AST structure.

        Args:
            formula: Valid formula string
        """
        original_ast = parse(formula)
        stringified = str(original_ast)
        reparsed_ast = parse(stringified)

        self.logger.debug(f"Original: {formula}")
        self.logger.debug(f"Stringified: {stringified}")

        assert original_ast == reparsed_ast, (
            f"Round-trip parsing failed:\n"
            f"Original: {formula}\n"
            f"Stringified: {stringified}\n"
            f"ASTs are not equal"
        )

    @pytest.mark.parametrize("formula", VALID_FORMULAS)
    def test_dnf_round_trip_parsing(self, formula):
        """Test that the printed DNF parses back to the same tree.

        Args:
            formula: Valid formula string
        """
        dnf_ast = parse_and_dnf(formula)
        dnf_string = str(dnf_ast)

        assert parse(dnf_string) == dnf_ast, (
            f"DNF round-trip failed:\n"
            f"Original: {formula}\n"
            f"DNF: {dnf_string}"
        )

    INVALID_SYNTAX_CASES = [
        # Incomplete terms
        ("x and", "Trailing incomplete term"),
        ("x or", "Trailing incomplete disjunction"),
        ("not", "Negation without operand"),
        ("and x", "Leading operator"),
        # Parenthesis errors
        ("(x", "Unclosed parenthesis"),
        ("(x and y))", "Unbalanced right parenthesis"),
        ("x or (y and z", "Unclosed parenthesis in nested expression"),
        ("x or y) and z", "Unopened parenthesis"),
        ("()", "Empty expression within parentheses"),
        # Operator errors
        ("x or or y", "Double operator"),
        ("x y", "Missing operator between literals"),
        ("x and (or y)", "Operator adjacent to parenthesis"),
        ("not (x y)", "Missing operator inside negated group"),
        ("x & y", "Symbol identifier is trailing input"),
        # Empty/whitespace errors
        ("", "Empty input string"),
        ("     ", "Whitespace only input"),
        ("\t\n", "Whitespace only with tabs/newlines"),
    ]

    @pytest.mark.parametrize("invalid_input, description", INVALID_SYNTAX_CASES)
    def test_parse_error_handling(self, invalid_input, description):
        """Test that invalid syntax raises ParseError.

        Args:
            invalid_input: Invalid formula string
            description: Description of the syntax error
        """
        self.logger.debug(f"Testing parse error for: '{invalid_input}' ({description})")

        with pytest.raises(ParseError) as exc_info:
            parse(invalid_input)

        assert len(str(exc_info.value)) > 0, "ParseError should have non-empty message"

    @pytest.mark.parametrize("invalid_input, description", INVALID_SYNTAX_CASES)
    def test_dnf_parse_error_handling(self, invalid_input, description):
        """Test that the DNF pipeline propagates ParseError.

        Args:
            invalid_input: Invalid formula string
            description: Description of the syntax error
        """
        with pytest.raises(ParseError):
            parse_and_dnf(invalid_input)

    def test_missing_operand_reports_end_of_input(self):
        """Test that a trailing operator reports the missing operand."""
        with pytest.raises(ParseError) as exc_info:
            parse("x and")

        assert exc_info.value.expected == "operand"
        assert exc_info.value.actual is None
        assert "no operand" in str(exc_info.value).lower()

    def test_unclosed_parenthesis_reports_expected_token(self):
        """Test that match() reports what it expected and what it found."""
        with pytest.raises(ParseError) as exc_info:
            parse("(x or y")

        assert exc_info.value.expected == "')'"
        assert exc_info.value.actual is None

    def test_trailing_input_reports_offending_token(self):
        """Test that leftover tokens are rejected with the token text."""
        with pytest.raises(ParseError) as exc_info:
            parse("x y")

        assert exc_info.value.actual == "y"
        assert "end of input" in str(exc_info.value)

    def test_keyword_as_operand_is_rejected(self):
        """Test that a keyword cannot stand in for a variable."""
        with pytest.raises(ParseError) as exc_info:
            parse("x and or")

        assert exc_info.value.actual == "or"

    def test_parse_error_is_runtime_error(self):
        """Test the exception hierarchy."""
        assert issubclass(ParseError, RuntimeError)

    def test_flattened_printing_is_not_round_trip_safe(self):
        """Test that only the default printer preserves left-nested chains."""
        formula = parse("(p and q) and r")
        flat = FormulaPrinter(ASCII_SYMBOLS, flatten=True).render(formula)

        assert flat == "p and q and r"
        assert parse(flat) != formula
        assert str(formula) == "(p and q) and r"
