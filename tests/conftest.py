# tests/conftest.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the formula printer tests.

The configuration handles:
- Python path setup for module imports
- Resetting the last-parsed formula slot between tests
- Common fixtures for atoms and random formula generation
"""

import random
import sys
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from formula import (  # noqa: E402
    make_true,
    make_false,
    make_atom,
    make_not,
    make_and,
    make_or,
    make_imp,
    make_iff,
)

BINARY_MAKERS = [make_and, make_or, make_imp, make_iff]
ATOM_NAMES = ["p", "q", "r", "s", "t"]


def random_formula(rng: random.Random, depth: int):
    """Build a random formula of at most ``depth`` connective levels.

    Leaves are drawn from a small atom pool and the two constants, so the
    generated trees exercise every variant in every child position.
    """
    if depth == 0 or rng.random() < 0.2:
        choice = rng.randrange(len(ATOM_NAMES) + 2)
        if choice == len(ATOM_NAMES):
            return make_true()
        if choice == len(ATOM_NAMES) + 1:
            return make_false()
        return make_atom(ATOM_NAMES[choice])

    if rng.random() < 0.2:
        return make_not(random_formula(rng, depth - 1))

    maker = rng.choice(BINARY_MAKERS)
    return maker(random_formula(rng, depth - 1), random_formula(rng, depth - 1))


@pytest.fixture(autouse=True)
def reset_last_parsed():
    """Start every test with an empty last-parsed slot."""
    from parser import clear_last_parsed

    clear_last_parsed()
    yield
    clear_last_parsed()


@pytest.fixture
def atoms():
    """Provide the atoms a, b, c, d.

    Returns:
        Tuple of four Atom nodes
    """
    return tuple(make_atom(name) for name in "abcd")


@pytest.fixture
def random_formulas():
    """Provide a reproducible batch of random formulas.

    Returns:
        List of 300 formulas of depth up to 5
    """
    rng = random.Random(20240611)
    return [random_formula(rng, 5) for _ in range(300)]
