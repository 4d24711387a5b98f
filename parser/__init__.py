# parser/__init__.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# Companion parser for the printer's output grammar

"""Parsing of propositional formula text into formula trees.

The parser reads exactly the language the printer writes: ``true``,
``false``, identifiers, ``~``, ``&``, ``|``, ``=>``, ``<=>`` and
parentheses, with left-associative binary connectives. It is the reader
side of the printer's round-trip guarantee.

Each successful ``parse`` also leaves its root in a single process-scoped
slot, available through ``last_parsed_formula`` until the next successful
parse replaces it. ``parse`` is the only writer of that slot; prefer the
value returned by ``parse`` and use the slot only where a caller needs the
"most recently parsed formula" handle.

Core Functions:
    parse: Converts formula text into a formula tree
    last_parsed_formula: Root of the most recent successful parse, or None
    clear_last_parsed: Reset the slot to the "nothing parsed yet" state

Example:
    >>> from parser import parse
    >>> str(parse("(p & q) | r"))
    'p & q | r'
"""

from typing import Optional

from .exceptions import ParseError
from .grammar import _FormulaParser
from formula.ast_nodes import Formula
from utils.logger import get_logger

# Most recently parsed root; None means nothing parsed yet
_last_parsed: Optional[Formula] = None


def parse(source: str) -> Formula:
    """Parse formula text into a formula tree.

    Uses a fresh parser instance for each invocation. On success the result
    is also stored as the last parsed formula; a failed parse leaves the
    previous value in place.

    Args:
        source: Formula text to parse

    Returns:
        Root node of the parsed formula

    Raises:
        ParseError: Formula text is empty or malformed
    """
    global _last_parsed
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _FormulaParser()

    try:
        result = parser.parse(source)
    except ParseError:
        logger.debug("ParseError encountered during formula parsing")
        raise
    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc

    _last_parsed = result
    logger.formula_parsed(source, result)
    return result


def last_parsed_formula() -> Optional[Formula]:
    """Return the root of the most recent successful parse.

    Returns:
        The formula, or None if nothing has been parsed yet
    """
    return _last_parsed


def clear_last_parsed() -> None:
    """Forget the last parsed formula."""
    global _last_parsed
    _last_parsed = None


__all__ = ["parse", "last_parsed_formula", "clear_last_parsed", "ParseError"]

__version__ = "1.0.0"
__description__ = "Companion parser for propositional formula text"
