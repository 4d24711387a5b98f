# formula/ast_nodes.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# Immutable node classes for logical formula representation

"""Node classes for representing propositional formulas as immutable trees.

This module defines frozen, slotted dataclasses that form a closed set of
formula variants. Nodes are built bottom-up from already-constructed
subformulas and are never mutated afterwards, so a subformula may be shared
by any number of parents without aliasing concerns.

Node Types:
    TrueConst, FalseConst: Boolean constants
    Atom: Uninterpreted proposition identified by its name
    Not: Unary negation
    And, Or, Imp, Iff: Binary connectives

Every node reports its variant through ``type`` (a ``FormulaType`` member)
and supports the visitor design pattern for traversal.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from itertools import zip_longest
from enum import Enum, auto
from typing import ClassVar, Protocol

from .exceptions import InvalidAtomNameError, PreconditionError

ATOM_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
RESERVED_WORDS = frozenset({"true", "false"})


class FormulaType(Enum):
    """Variant tags for formula nodes.

    ``FORALL`` and ``EXISTS`` are reserved for first-order quantifiers. No
    node class reports them and the printer has no entry for them.
    """

    TRUE = auto()
    FALSE = auto()
    ATOM = auto()
    NOT = auto()
    AND = auto()
    OR = auto()
    IMP = auto()
    IFF = auto()
    FORALL = auto()
    EXISTS = auto()


class Visitor(Protocol):
    """Interface for formula visitors implementing the visitor design pattern.

    Concrete visitors implement one visit method per formula variant.
    """

    def visit_true(self, n: TrueConst): ...

    def visit_false(self, n: FalseConst): ...

    def visit_atom(self, n: Atom): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_imp(self, n: Imp): ...

    def visit_iff(self, n: Iff): ...


@dataclass(frozen=True, slots=True, eq=False)
class Formula:
    """Base class for all formula nodes.

    Subclasses set the ``TYPE`` class attribute and implement ``accept``.
    ``str()`` of any node yields its minimal-parenthesization rendering;
    ``repr()`` keeps the structural dataclass form for debugging. Equality
    and hashing are structural and iterative, so they hold for formulas of
    any depth.
    """

    TYPE: ClassVar[FormulaType]

    @property
    def type(self) -> FormulaType:
        """Variant tag of this node."""
        return self.TYPE

    def accept(self, v: Visitor):
        """Dispatch to the visit method matching this node's variant.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        from .printer import to_string

        return to_string(self)

    def __eq__(self, other) -> bool:
        """Structural equality, compared without recursion.

        Two formulas are equal when their prefix token streams match; with
        fixed arities the stream determines the tree.
        """
        if self is other:
            return True
        if not isinstance(other, Formula):
            return NotImplemented
        missing = object()
        return all(
            x == y
            for x, y in zip_longest(
                preorder_tokens(self), preorder_tokens(other), fillvalue=missing
            )
        )

    def __hash__(self) -> int:
        return hash(tuple(preorder_tokens(self)))


def preorder_tokens(node: Formula):
    """Yield the prefix token stream of ``node`` using an explicit stack.

    Atoms yield ``(FormulaType.ATOM, name)``; every other node yields its tag.
    Shared subformulas are expanded at each occurrence.
    """
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, Atom):
            yield (FormulaType.ATOM, current.name)
            continue

        yield current.TYPE
        if isinstance(current, BinaryConnective):
            stack.append(current.right)
            stack.append(current.left)
        elif isinstance(current, UnaryConnective):
            stack.append(current.operand)


@dataclass(frozen=True, slots=True, eq=False)
class TrueConst(Formula):
    """Boolean constant ``true``."""

    TYPE: ClassVar[FormulaType] = FormulaType.TRUE

    def accept(self, v: Visitor):
        return v.visit_true(self)


@dataclass(frozen=True, slots=True, eq=False)
class FalseConst(Formula):
    """Boolean constant ``false``."""

    TYPE: ClassVar[FormulaType] = FormulaType.FALSE

    def accept(self, v: Visitor):
        return v.visit_false(self)


@dataclass(frozen=True, slots=True, eq=False)
class Atom(Formula):
    """Uninterpreted proposition identified by its name.

    Two atoms with the same name are equal and hash alike, whether or not
    they are the same object.

    Attributes:
        name: Identifier of the proposition

    Raises:
        InvalidAtomNameError: If ``name`` is not an identifier or is a
            reserved word
    """

    TYPE: ClassVar[FormulaType] = FormulaType.ATOM

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not ATOM_NAME_PATTERN.fullmatch(
            self.name
        ):
            raise InvalidAtomNameError(f"Invalid atom name: {self.name!r}")
        if self.name in RESERVED_WORDS:
            raise InvalidAtomNameError(
                f"Atom name {self.name!r} is reserved for a Boolean constant"
            )

    def accept(self, v: Visitor):
        return v.visit_atom(self)


def _require_formula(value, role: str) -> None:
    if not isinstance(value, Formula):
        raise PreconditionError(
            f"{role} must be a Formula, got {type(value).__name__}"
        )


@dataclass(frozen=True, slots=True, eq=False)
class UnaryConnective(Formula):
    """Connective with a single operand.

    Attributes:
        operand: The subformula the connective applies to
    """

    operand: Formula

    def __post_init__(self):
        _require_formula(self.operand, "operand")


@dataclass(frozen=True, slots=True, eq=False)
class Not(UnaryConnective):
    """Logical negation, printed as ``~``."""

    TYPE: ClassVar[FormulaType] = FormulaType.NOT

    def accept(self, v: Visitor):
        return v.visit_not(self)


@dataclass(frozen=True, slots=True, eq=False)
class BinaryConnective(Formula):
    """Connective with a left and a right operand.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Formula
    right: Formula

    def __post_init__(self):
        _require_formula(self.left, "left operand")
        _require_formula(self.right, "right operand")


@dataclass(frozen=True, slots=True, eq=False)
class And(BinaryConnective):
    """Logical conjunction, printed as ``&``."""

    TYPE: ClassVar[FormulaType] = FormulaType.AND

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True, eq=False)
class Or(BinaryConnective):
    """Logical disjunction, printed as ``|``."""

    TYPE: ClassVar[FormulaType] = FormulaType.OR

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True, eq=False)
class Imp(BinaryConnective):
    """Material implication, printed as ``=>``."""

    TYPE: ClassVar[FormulaType] = FormulaType.IMP

    def accept(self, v: Visitor):
        return v.visit_imp(self)


@dataclass(frozen=True, slots=True, eq=False)
class Iff(BinaryConnective):
    """Biconditional, printed as ``<=>``."""

    TYPE: ClassVar[FormulaType] = FormulaType.IFF

    def accept(self, v: Visitor):
        return v.visit_iff(self)
