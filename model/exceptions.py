# model/exceptions.py
# This file is part of Quincy - A Boolean Consensus Minimizer
#
# Exceptions for cube calculus preconditions


class ShapeMismatchError(ValueError):
    """Raised when cubes or variable-name lists of differing length are combined.

    Lengths are never truncated or padded to make an operation fit.
    """

    pass
