# tests/formula_tests/test_formula_model.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# Test suite for the formula data model and construction API

"""Test suite for formula construction, variant tags and accessors.

Covers the construction functions, the atom-name policy, immutability,
structural equality, subformula sharing, and the fail-fast behavior of
accessors used against the wrong variant.
"""

import dataclasses

import pytest

from formula import (
    Formula,
    FormulaType,
    TrueConst,
    Atom,
    Not,
    And,
    Or,
    Imp,
    Iff,
    InvalidAtomNameError,
    PreconditionError,
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
from utils.logger import get_logger


class TestFormulaConstruction:
    """Test cases for the make_* functions and variant tags."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def test_constants(self):
        """Constants report their tags and are shared values."""
        assert type_of(make_true()) is FormulaType.TRUE
        assert type_of(make_false()) is FormulaType.FALSE
        assert make_true() is make_true()
        assert make_false() is make_false()
        assert make_true() == TrueConst()
        assert make_true() != make_false()

    @pytest.mark.parametrize(
        "maker, node_class, tag",
        [
            (make_and, And, FormulaType.AND),
            (make_or, Or, FormulaType.OR),
            (make_imp, Imp, FormulaType.IMP),
            (make_iff, Iff, FormulaType.IFF),
        ],
    )
    def test_binary_constructors(self, maker, node_class, tag, atoms):
        """Each binary constructor builds its own variant and keeps operand order."""
        a, b, _, _ = atoms
        node = maker(a, b)

        assert isinstance(node, node_class)
        assert type_of(node) is tag
        assert node.type is tag
        assert left(node) is a
        assert right(node) is b

    def test_not_constructor(self, atoms):
        a = atoms[0]
        node = make_not(a)

        assert type_of(node) is FormulaType.NOT
        assert operand(node) is a

    def test_atom_constructor(self):
        atom = make_atom("ready_1")

        assert type_of(atom) is FormulaType.ATOM
        assert atom.name == "ready_1"

    def test_reserved_tags_never_reported(self, random_formulas):
        """Quantifier tags exist in the enumeration but no node reports them."""
        assert {FormulaType.FORALL, FormulaType.EXISTS} <= set(FormulaType)

        def tags(node):
            yield type_of(node)
            if isinstance(node, Not):
                yield from tags(node.operand)
            elif type_of(node) in (
                FormulaType.AND,
                FormulaType.OR,
                FormulaType.IMP,
                FormulaType.IFF,
            ):
                yield from tags(node.left)
                yield from tags(node.right)

        seen = set()
        for f in random_formulas:
            seen.update(tags(f))

        assert FormulaType.FORALL not in seen
        assert FormulaType.EXISTS not in seen


class TestAtomNamePolicy:
    """Atom names must be identifiers and must not be reserved words."""

    @pytest.mark.parametrize("name", ["p", "_x", "Var_12", "EP", "TRUE", "a1b2"])
    def test_valid_names(self, name):
        assert make_atom(name).name == name

    @pytest.mark.parametrize(
        "name, description",
        [
            ("", "Empty name"),
            ("1p", "Leading digit"),
            ("p q", "Embedded space"),
            (" p", "Leading whitespace"),
            ("p&q", "Operator character"),
            ("~p", "Negation symbol"),
            ("true", "Reserved constant"),
            ("false", "Reserved constant"),
        ],
    )
    def test_invalid_names_rejected(self, name, description):
        with pytest.raises(InvalidAtomNameError):
            make_atom(name)

    def test_non_string_name_rejected(self):
        with pytest.raises(InvalidAtomNameError):
            make_atom(None)

    def test_direct_construction_applies_policy(self):
        with pytest.raises(InvalidAtomNameError):
            Atom("")

    def test_invalid_name_is_value_error(self):
        with pytest.raises(ValueError):
            make_atom("")


class TestFormulaInvariants:
    """Immutability, structural identity and sharing."""

    def test_nodes_are_immutable(self, atoms):
        a, b, c, _ = atoms
        node = make_and(a, b)

        with pytest.raises(dataclasses.FrozenInstanceError):
            node.left = c

        with pytest.raises(dataclasses.FrozenInstanceError):
            a.name = "z"

    def test_atom_identity_by_name(self):
        first, second = make_atom("p"), make_atom("p")

        assert first is not second
        assert first == second
        assert hash(first) == hash(second)
        assert make_and(first, first) == make_and(second, second)

    def test_structural_equality_distinguishes_connectives(self, atoms):
        a, b, _, _ = atoms

        assert make_and(a, b) != make_or(a, b)
        assert make_imp(a, b) != make_iff(a, b)
        assert make_and(a, b) != make_and(b, a)

    def test_operands_are_shared_not_copied(self, atoms):
        a, b, c, _ = atoms
        shared = make_or(a, b)
        first = make_and(shared, c)
        second = make_imp(c, shared)

        assert left(first) is shared
        assert right(second) is shared

    def test_nodes_are_formulas(self, atoms):
        a = atoms[0]
        for node in (make_true(), make_false(), a, make_not(a), make_iff(a, a)):
            assert isinstance(node, Formula)

    def test_repr_is_structural(self, atoms):
        a, b, _, _ = atoms
        assert repr(make_and(a, b)) == "And(left=Atom(name='a'), right=Atom(name='b'))"

    def test_str_uses_printer(self, atoms):
        a, b, c, _ = atoms
        assert str(make_and(a, make_or(b, c))) == "a & (b | c)"


class TestAccessorPreconditions:
    """Accessors fail fast when used against the wrong variant."""

    @pytest.mark.parametrize(
        "node",
        [make_true(), make_false(), make_atom("p"), make_and(make_atom("p"), make_atom("q"))],
    )
    def test_operand_requires_unary(self, node):
        with pytest.raises(PreconditionError):
            operand(node)

    @pytest.mark.parametrize(
        "node",
        [make_true(), make_false(), make_atom("p"), make_not(make_atom("p"))],
    )
    def test_left_right_require_binary(self, node):
        with pytest.raises(PreconditionError):
            left(node)
        with pytest.raises(PreconditionError):
            right(node)

    @pytest.mark.parametrize(
        "build",
        [
            lambda: make_not(None),
            lambda: make_and(make_atom("p"), None),
            lambda: make_or(None, make_atom("p")),
            lambda: make_imp("p", make_atom("q")),
            lambda: make_iff(make_atom("p"), "q"),
        ],
    )
    def test_connectives_require_formula_operands(self, build):
        with pytest.raises(PreconditionError):
            build()

    def test_type_of_requires_formula(self):
        with pytest.raises(PreconditionError):
            type_of("p")

    def test_precondition_error_is_type_error(self):
        with pytest.raises(TypeError):
            operand(make_atom("p"))
