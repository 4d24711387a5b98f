# formula/exceptions.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# Custom exceptions for formula construction and access

"""Domain-specific exceptions for formula construction and inspection.

Two failure kinds exist in the formula core. Malformed atom names are
rejected at construction time, and accessors called against the wrong
variant signal a programming error. Neither is meant to be recovered from
inside the library; both carry a standard-library base class so callers
can treat them as ordinary ``ValueError`` / ``TypeError`` conditions.
"""


class FormulaError(Exception):
    """Base class for all errors raised by the formula core."""

    pass


class InvalidAtomNameError(FormulaError, ValueError):
    """Exception raised when an atom name violates the identifier rules.

    Atom names must be non-empty identifiers (``[A-Za-z_][A-Za-z0-9_]*``)
    and must not collide with the reserved constants ``true`` and ``false``.
    """

    pass


class PreconditionError(FormulaError, TypeError):
    """Exception raised when an operation is applied to the wrong variant.

    Requesting the operand of a binary node, the left child of an atom, or
    building a connective from something that is not a formula are all
    programmer errors and fail immediately with this exception.
    """

    pass
