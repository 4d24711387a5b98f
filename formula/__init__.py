# formula/__init__.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# Formula data model and printer public API

"""Immutable propositional formulas and their precedence-correct printer.

Formulas are closed trees of frozen nodes (constants, atoms, ``~``, ``&``,
``|``, ``=>``, ``<=>``) built bottom-up through the ``make_*`` functions.
The printer renders any formula as one line of infix text that re-parses,
under the usual left-associative precedence grammar, to the same tree, and
it never emits a redundant pair of parentheses.

Example:
    >>> from formula import make_and, make_or, make_atom, to_string
    >>> p, q, r = make_atom("p"), make_atom("q"), make_atom("r")
    >>> to_string(make_and(p, make_or(q, r)))
    'p & (q | r)'
"""

from .ast_nodes import (
    Formula,
    FormulaType,
    TrueConst,
    FalseConst,
    Atom,
    Not,
    And,
    Or,
    Imp,
    Iff,
)
from .exceptions import FormulaError, InvalidAtomNameError, PreconditionError
from .factory import (
    type_of,
    make_true,
    make_false,
    make_atom,
    make_not,
    make_and,
    make_or,
    make_imp,
    make_iff,
    operand,
    left,
    right,
)
from .printer import to_string, print_formula, FormulaPrinter

__all__ = [
    "Formula",
    "FormulaType",
    "TrueConst",
    "FalseConst",
    "Atom",
    "Not",
    "And",
    "Or",
    "Imp",
    "Iff",
    "FormulaError",
    "InvalidAtomNameError",
    "PreconditionError",
    "type_of",
    "make_true",
    "make_false",
    "make_atom",
    "make_not",
    "make_and",
    "make_or",
    "make_imp",
    "make_iff",
    "operand",
    "left",
    "right",
    "to_string",
    "print_formula",
    "FormulaPrinter",
]

__version__ = "1.0.0"
__description__ = "Propositional formula model and minimal-parenthesis printer"
