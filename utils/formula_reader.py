# utils/formula_reader.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# Reader for text files holding one formula per line

from pathlib import Path
from typing import Iterator, List, Tuple, Union

from formula.ast_nodes import Formula
from parser import parse, ParseError
from utils.logger import get_logger

COMMENT_PREFIX = "#"


class FormulaFileError(Exception):
    """Exception raised when a formula file is missing or holds invalid formulas."""

    pass


def read_formulas(filepath: Union[str, Path]) -> Iterator[Tuple[int, Formula]]:
    """Read formulas from a text file, one per line.

    Blank lines and lines starting with ``#`` are skipped.

    Expected format:
        # implications
        p => q
        ~(p & q) <=> ~p | ~q

    Args:
        filepath: Path to the formula file

    Yields:
        (line number, formula) pairs in file order

    Raises:
        FormulaFileError: If the file cannot be read or a line fails to parse
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise FormulaFileError(f"Formula file not found: {filepath}")

    logger.debug(f"Reading formula file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            lines = file.readlines()
    except OSError as e:
        raise FormulaFileError(f"Cannot open formula file: {filepath}") from e

    for line_no, line in enumerate(lines, start=1):
        text = line.strip()
        if not text or text.startswith(COMMENT_PREFIX):
            continue

        try:
            formula = parse(text)
        except ParseError as e:
            raise FormulaFileError(f"Error parsing line {line_no}: {e}") from e

        logger.debug(f"Read formula from line {line_no}")
        yield line_no, formula


def read_formula_file(filepath: Union[str, Path]) -> List[Formula]:
    """Read every formula in a file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formulas in file order

    Raises:
        FormulaFileError: If the file cannot be read or a line fails to parse
    """
    return [formula for _, formula in read_formulas(filepath)]
