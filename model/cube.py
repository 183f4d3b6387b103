# model/cube.py

"""
Immutable n-cube of cube calculus.

A cube is a product term written as a ternary vector: position ``i`` is
``1`` for the plain variable, ``0`` for its negation and ``-`` (don't-care)
when the variable does not occur in the term.

Supports:
  •  Covering (⊇) and expansion into the minterms covered.
  •  Intersection (∩) and componentwise addition.
  •  The consensus rule on a single complementary digit.
  •  Conversion to and from named truth assignments.
"""

from __future__ import annotations
from dataclasses import dataclass
from itertools import product
from typing import Dict, FrozenSet, Mapping, Optional, Sequence, Tuple

from .exceptions import ShapeMismatchError


DONT_CARE = None

Digit = Optional[int]


def _normalize(value) -> Digit:
    # Booleans are ints in Python but are not cube digits
    if type(value) is int and value in (0, 1):
        return value
    return DONT_CARE


@dataclass(frozen=True, slots=True, init=False)
class Cube:
    digits: Tuple[Digit, ...]

    def __init__(self, *values):
        object.__setattr__(self, "digits", tuple(_normalize(v) for v in values))

    @classmethod
    def from_assignment(cls, assignment: Mapping[str, object]) -> Cube:
        """
        Build a cube from an assignment, in the assignment's key order.
        True → 1, False → 0, anything else → don't-care.
        """
        def digit(value) -> Digit:
            if value is True:
                return 1
            if value is False:
                return 0
            return DONT_CARE

        return cls(*(digit(v) for v in assignment.values()))

    @classmethod
    def from_string(cls, text: str) -> Cube:
        """
        Parse the printed form, e.g. ``(1,0,-)``. Surrounding parentheses
        and whitespace are optional.
        """
        body = text.strip()
        if body.startswith("(") and body.endswith(")"):
            body = body[1:-1]
        if not body.strip():
            return cls()

        values = []
        for part in body.split(","):
            part = part.strip()
            if part not in ("0", "1", "-"):
                raise ValueError(f"Invalid cube digit '{part}' in {text!r}")
            values.append(int(part) if part != "-" else DONT_CARE)
        return cls(*values)

    def to_assignment(self, variable_names: Sequence[str]) -> Dict[str, bool]:
        """
        Map each defined digit to its variable; don't-care positions are
        left out of the result.
        """
        if len(variable_names) != len(self.digits):
            raise ShapeMismatchError(
                f"Cube {self} has {len(self.digits)} components but "
                f"{len(variable_names)} variable names were given"
            )
        return {
            name: digit == 1
            for name, digit in zip(variable_names, self.digits)
            if digit is not DONT_CARE
        }

    def get_length(self) -> int:
        return len(self.digits)

    def dont_care_count(self) -> int:
        return sum(1 for d in self.digits if d is DONT_CARE)

    def covers(self, other: Cube) -> bool:
        """
        True if every point of ``other`` is a point of this cube, i.e.
        ``other`` agrees with every defined digit of this cube.
        """
        self._check_shape(other)
        return all(
            mine is DONT_CARE or mine == theirs
            for mine, theirs in zip(self.digits, other.digits)
        )

    def get_covered_cubes(self) -> FrozenSet[Cube]:
        """
        All fully specified cubes covered by this cube
        (2 ** dont_care_count() of them).
        """
        if not self.dont_care_count():
            return frozenset((self,))
        choices = [(0, 1) if d is DONT_CARE else (d,) for d in self.digits]
        return frozenset(Cube(*combo) for combo in product(*choices))

    def intersect(self, other: Cube) -> Optional[Cube]:
        """
        Componentwise intersection, or None when some position is 0 in
        one cube and 1 in the other.
        """
        self._check_shape(other)
        result = []
        for mine, theirs in zip(self.digits, other.digits):
            if mine is DONT_CARE:
                result.append(theirs)
            elif theirs is DONT_CARE or mine == theirs:
                result.append(mine)
            else:
                return None
        return Cube(*result)

    def add(self, other: Cube) -> Cube:
        """
        Componentwise addition: a don't-care yields the other digit,
        equal digits are kept, 0 + 1 yields don't-care.
        """
        self._check_shape(other)
        result = []
        for mine, theirs in zip(self.digits, other.digits):
            if mine is DONT_CARE:
                result.append(theirs)
            elif theirs is DONT_CARE or mine == theirs:
                result.append(mine)
            else:
                result.append(DONT_CARE)
        return Cube(*result)

    def has_complementary_digit_with(self, other: Cube) -> bool:
        self._check_shape(other)
        return any(
            {mine, theirs} == {0, 1} for mine, theirs in zip(self.digits, other.digits)
        )

    def has_consensus_with(self, other: Cube) -> bool:
        """
        At most one position where both digits are defined and differ.
        """
        return self._conflicts(other) <= 1

    def get_consensus_with(self, other: Cube) -> Cube:
        """
        Consensus cube: the conflicting variable is eliminated, the
        remaining digits are combined as in an intersection.
        """
        self._check_shape(other)
        result = []
        for mine, theirs in zip(self.digits, other.digits):
            if mine == theirs:
                result.append(mine)
            elif mine is not DONT_CARE and theirs is not DONT_CARE:
                result.append(DONT_CARE)
            else:
                result.append(theirs if mine is DONT_CARE else mine)
        return Cube(*result)

    def _conflicts(self, other: Cube) -> int:
        self._check_shape(other)
        return sum(
            1
            for mine, theirs in zip(self.digits, other.digits)
            if mine is not DONT_CARE and theirs is not DONT_CARE and mine != theirs
        )

    def _check_shape(self, other: Cube) -> None:
        if len(self.digits) != len(other.digits):
            raise ShapeMismatchError(
                f"Cubes {self} and {other} have different lengths"
            )

    def __len__(self) -> int:
        return len(self.digits)

    def __iter__(self):
        return iter(self.digits)

    def __str__(self) -> str:
        return "(" + ",".join("-" if d is DONT_CARE else str(d) for d in self.digits) + ")"

    __repr__ = __str__
