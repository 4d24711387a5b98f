# parser/exceptions.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# Custom exceptions for formula parsing

"""Exceptions raised while reading formula text.

The formula core itself never parses text; these errors belong to the
companion parser that reads the printer's output grammar back into trees.
"""


class ParseError(RuntimeError):
    """Exception raised when formula text cannot be parsed.

    Covers empty input, illegal characters, syntax errors and atom names
    rejected by the formula constructors.
    """

    pass
