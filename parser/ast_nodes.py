# parser/ast_nodes.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct
tree representations of propositional formulas. The set of node types is
closed: every formula is built from exactly four variants.

Node Types:
    Atom: Propositional variables and the constants ``true``/``false``
    Not: Negation
    And, Or: Binary connectives

All nodes support the visitor design pattern for traversal and
transformation. Evaluation and atom collection are implemented on top of
it and never mutate a node; every transformation builds new nodes.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Protocol


Assignment = Dict[str, bool]

TRUE_NAME = "true"
FALSE_NAME = "false"


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_atom(self, n: Atom): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...


@dataclass(frozen=True, slots=True)
class Formula:
    """Base class for all AST nodes in propositional formulas.

    Concrete nodes expose ``left`` and ``right`` operands. An atom has
    neither; a negation reports the empty placeholder atom on the left and
    its operand on the right.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def is_atomic(self) -> bool:
        """Return True if the node has neither a left nor a right operand."""
        return self.left is None and self.right is None

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        """Determine the truth value of the formula under ``assignment``.

        Args:
            assignment: Mapping from variable name to truth value

        Returns:
            The truth value of the formula

        Raises:
            KeyError: A variable of the formula is missing from the assignment
        """
        return self.accept(_Evaluator(assignment))

    def collect_atoms(self) -> List[str]:
        """Collect variable names in order of first occurrence.

        The traversal is depth-first, left operand before right operand.
        This order is the canonical variable order used for assignment
        generation and cube conversion. The empty placeholder and the
        Boolean constants are not variables and are skipped.

        Returns:
            Ordered list of distinct variable names
        """
        atoms: List[str] = []
        seen = set()
        stack: List[Formula] = [self]

        while stack:
            node = stack.pop()
            if node.is_atomic():
                if node.is_variable() and node.name not in seen:
                    seen.add(node.name)
                    atoms.append(node.name)
                continue
            # Right is pushed first so that left is visited first
            stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

        return atoms

    def is_variable(self) -> bool:
        return False

    def __str__(self) -> str:
        """Return the ASCII keyword rendering of the formula.

        The rendering parses back to a structurally equal formula.
        """
        from .symbols import ASCII_SYMBOLS, FormulaPrinter

        return FormulaPrinter(ASCII_SYMBOLS).render(self)


@dataclass(frozen=True, slots=True)
class Atom(Formula):
    """Propositional variable or Boolean constant.

    Represents leaf nodes in the AST. The names ``true`` and ``false``
    denote the constants; the empty name is reserved for the placeholder
    returned as the left operand of a negation.

    Attributes:
        name: The identifier string for this atom
    """

    name: str

    @property
    def left(self) -> Optional[Formula]:
        return None

    @property
    def right(self) -> Optional[Formula]:
        return None

    def is_constant(self) -> bool:
        """Return True for the constants ``true`` and ``false``."""
        return self.name in (TRUE_NAME, FALSE_NAME)

    def is_variable(self) -> bool:
        """Return True if this atom names a real variable."""
        return self.name != "" and not self.is_constant()

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_atom method."""
        return v.visit_atom(self)


@dataclass(frozen=True, slots=True)
class Not(Formula):
    """Logical negation of a single operand.

    Attributes:
        operand: The formula being negated
    """

    operand: Formula

    @property
    def left(self) -> Optional[Formula]:
        """Placeholder for the missing left operand of a unary node."""
        return EMPTY_ATOM

    @property
    def right(self) -> Optional[Formula]:
        return self.operand

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_not method."""
        return v.visit_not(self)


@dataclass(frozen=True, slots=True)
class And(Formula):
    """Logical conjunction.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_and method."""
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(Formula):
    """Logical disjunction.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Formula
    right: Formula

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_or method."""
        return v.visit_or(self)


# "No operand" placeholder; never counted as a variable
EMPTY_ATOM = Atom("")

# Distinguished representations of a tautology and a contradiction
TRUE = Atom(TRUE_NAME)
FALSE = Atom(FALSE_NAME)


class _Evaluator:
    """Visitor computing the truth value of a formula."""

    def __init__(self, assignment: Mapping[str, bool]):
        self._assignment = assignment

    def visit_atom(self, n: Atom) -> bool:
        if n.name == TRUE_NAME:
            return True
        if n.name == FALSE_NAME:
            return False
        return bool(self._assignment[n.name])

    def visit_not(self, n: Not) -> bool:
        return not n.operand.accept(self)

    def visit_and(self, n: And) -> bool:
        return n.left.accept(self) and n.right.accept(self)

    def visit_or(self, n: Or) -> bool:
        return n.left.accept(self) or n.right.accept(self)
