# formula/factory.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# Construction functions and checked accessors for formula nodes

"""Public construction and inspection API for formulas.

Parsers and client code build formulas through the ``make_*`` functions,
combining already-built subformulas into larger nodes. Operands are stored
by reference, so a subformula may appear under several parents.

The accessors ``operand``, ``left`` and ``right`` check the node's variant
first; asking a node for a child it does not have raises
``PreconditionError`` immediately.
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
    UnaryConnective,
    BinaryConnective,
)
from .exceptions import PreconditionError

_TRUE = TrueConst()
_FALSE = FalseConst()


def type_of(node: Formula) -> FormulaType:
    """Return the variant tag of ``node``.

    Raises:
        PreconditionError: If ``node`` is not a formula
    """
    if not isinstance(node, Formula):
        raise PreconditionError(f"Expected a Formula, got {type(node).__name__}")
    return node.type


def make_true() -> TrueConst:
    """Return the shared ``true`` constant."""
    return _TRUE


def make_false() -> FalseConst:
    """Return the shared ``false`` constant."""
    return _FALSE


def make_atom(name: str) -> Atom:
    """Create an atom for the proposition ``name``.

    Args:
        name: Identifier matching ``[A-Za-z_][A-Za-z0-9_]*``, other than
            ``true`` or ``false``

    Returns:
        New Atom node

    Raises:
        InvalidAtomNameError: If the name is empty, not an identifier, or
            reserved
    """
    return Atom(name)


def make_not(op: Formula) -> Not:
    """Create the negation of ``op``.

    Raises:
        PreconditionError: If ``op`` is not a formula
    """
    return Not(op)


def make_and(left: Formula, right: Formula) -> And:
    """Create the conjunction ``left & right``.

    Both operands are stored by reference, not copied.

    Raises:
        PreconditionError: If either operand is not a formula
    """
    return And(left, right)


def make_or(left: Formula, right: Formula) -> Or:
    """Create the disjunction ``left | right``.

    Raises:
        PreconditionError: If either operand is not a formula
    """
    return Or(left, right)


def make_imp(left: Formula, right: Formula) -> Imp:
    """Create the implication ``left => right``.

    Raises:
        PreconditionError: If either operand is not a formula
    """
    return Imp(left, right)


def make_iff(left: Formula, right: Formula) -> Iff:
    """Create the biconditional ``left <=> right``.

    Raises:
        PreconditionError: If either operand is not a formula
    """
    return Iff(left, right)


def operand(node: Formula) -> Formula:
    """Return the operand of a unary node.

    Raises:
        PreconditionError: If ``node`` is not a unary connective
    """
    if not isinstance(node, UnaryConnective):
        raise PreconditionError(
            f"operand() requires a unary connective, got {type_of(node).name}"
        )
    return node.operand


def left(node: Formula) -> Formula:
    """Return the left operand of a binary node.

    Raises:
        PreconditionError: If ``node`` is not a binary connective
    """
    if not isinstance(node, BinaryConnective):
        raise PreconditionError(
            f"left() requires a binary connective, got {type_of(node).name}"
        )
    return node.left


def right(node: Formula) -> Formula:
    """Return the right operand of a binary node.

    Raises:
        PreconditionError: If ``node`` is not a binary connective
    """
    if not isinstance(node, BinaryConnective):
        raise PreconditionError(
            f"right() requires a binary connective, got {type_of(node).name}"
        )
    return node.right
