# formula/printer.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# Precedence-driven printer with minimal parenthesization

"""Render formulas as infix text with minimal, round-trip-safe parentheses.

The printer assumes the text will be read back by a parser in which binary
connectives are left-associative and bind according to the table below
(lower rank binds tighter):

    rank 0  true, false, atoms
    rank 1  ~    (prefix)
    rank 2  &
    rank 3  |
    rank 4  =>
    rank 5  <=>

A child of a binary connective with rank P is wrapped in parentheses when
its rank is greater than P, and additionally when it is the right operand
and its rank equals P. The operand of ``~`` is wrapped only when it is a
binary connective. No other parentheses are ever emitted.
"""

from __future__ import annotations
import sys
from enum import Enum
from typing import Dict, List, Optional, TextIO, Union

from . import ast_nodes as ast
from .ast_nodes import FormulaType
from utils.logger import get_logger

ATOMIC_RANK = 0

# Binding rank per variant; lower binds tighter
PRECEDENCE: Dict[FormulaType, int] = {
    FormulaType.TRUE: ATOMIC_RANK,
    FormulaType.FALSE: ATOMIC_RANK,
    FormulaType.ATOM: ATOMIC_RANK,
    FormulaType.NOT: 1,
    FormulaType.AND: 2,
    FormulaType.OR: 3,
    FormulaType.IMP: 4,
    FormulaType.IFF: 5,
}

# Printed tokens for constants and connectives; atoms print their own name.
# Binary symbols carry their surrounding spaces.
SYMBOLS: Dict[FormulaType, str] = {
    FormulaType.TRUE: "true",
    FormulaType.FALSE: "false",
    FormulaType.NOT: "~",
    FormulaType.AND: " & ",
    FormulaType.OR: " | ",
    FormulaType.IMP: " => ",
    FormulaType.IFF: " <=> ",
}

# A rendering step: literal text to emit, or a node still to expand
WorkItem = Union[str, ast.Formula]


class Side(Enum):
    """Position of a child relative to its parent connective."""

    OPERAND = "operand"
    LEFT = "left"
    RIGHT = "right"


def precedence_of(node: ast.Formula) -> int:
    """Return the binding rank of ``node``'s variant (lower binds tighter)."""
    return PRECEDENCE[node.type]


def symbol_of(node: ast.Formula) -> str:
    """Return the printed token for a constant or connective."""
    return SYMBOLS[node.type]


def needs_parens(parent: ast.Formula, child: ast.Formula, side: Side) -> bool:
    """Decide whether ``child`` must be parenthesized under ``parent``.

    Args:
        parent: Unary or binary connective holding ``child``
        child: The subformula being rendered
        side: Which operand slot of ``parent`` holds ``child``

    Returns:
        True if omitting parentheses would change the re-parsed tree
    """
    parent_rank = precedence_of(parent)
    child_rank = precedence_of(child)

    if side is Side.RIGHT:
        return child_rank >= parent_rank
    return child_rank > parent_rank


class FormulaPrinter(ast.Visitor):
    """Visitor that renders a formula using the precedence table.

    Each visit method expands one node into its work items: literal text
    and child nodes, with parentheses around children that need them.
    ``render`` drives the expansion with an explicit stack, so the depth of
    the formula is bounded by memory rather than by the interpreter's
    recursion limit. Shared subformulas are rendered once per occurrence.
    """

    def render(self, node: ast.Formula) -> str:
        parts: List[str] = []
        stack: List[WorkItem] = [node]

        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            else:
                stack.extend(reversed(item.accept(self)))

        return "".join(parts)

    def _child(
        self, parent: ast.Formula, child: ast.Formula, side: Side
    ) -> List[WorkItem]:
        if needs_parens(parent, child, side):
            return ["(", child, ")"]
        return [child]

    def _binary(self, n: ast.BinaryConnective) -> List[WorkItem]:
        return (
            self._child(n, n.left, Side.LEFT)
            + [symbol_of(n)]
            + self._child(n, n.right, Side.RIGHT)
        )

    def visit_true(self, n: ast.TrueConst) -> List[WorkItem]:
        return [symbol_of(n)]

    def visit_false(self, n: ast.FalseConst) -> List[WorkItem]:
        return [symbol_of(n)]

    def visit_atom(self, n: ast.Atom) -> List[WorkItem]:
        return [n.name]

    def visit_not(self, n: ast.Not) -> List[WorkItem]:
        return [symbol_of(n)] + self._child(n, n.operand, Side.OPERAND)

    def visit_and(self, n: ast.And) -> List[WorkItem]:
        return self._binary(n)

    def visit_or(self, n: ast.Or) -> List[WorkItem]:
        return self._binary(n)

    def visit_imp(self, n: ast.Imp) -> List[WorkItem]:
        return self._binary(n)

    def visit_iff(self, n: ast.Iff) -> List[WorkItem]:
        return self._binary(n)


def to_string(formula: ast.Formula) -> str:
    """Render ``formula`` as a single line of infix text.

    Args:
        formula: Root of the formula to render

    Returns:
        Minimal-parenthesization rendering without surrounding whitespace
    """
    return FormulaPrinter().render(formula)


def print_formula(formula: ast.Formula, sink: Optional[TextIO] = None) -> None:
    """Write the rendering of ``formula`` to ``sink``.

    No newline is appended; callers decide how to separate formulas.

    Args:
        formula: Root of the formula to render
        sink: Writable text stream, ``sys.stdout`` when omitted
    """
    logger = get_logger()
    logger.debug(f"Printing formula of type {formula.type.name}")

    if sink is None:
        sink = sys.stdout
    sink.write(to_string(formula))
