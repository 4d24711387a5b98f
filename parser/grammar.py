# parser/grammar.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implemented with the SLY parser generator.

The grammar is the one the printer targets: all binary connectives are
left-associative, and ``~`` is a prefix operator binding tighter than any
binary connective.

Operator Precedence (lowest to highest):
- IFF ('<=>'): left-associative
- IMP ('=>'): left-associative
- OR ('|'): left-associative
- AND ('&'): left-associative
- NOT ('~'): right-associative

Nodes are built bottom-up through the formula factory, so every node is
fully constructed before a parent refers to it.
"""

from sly import Parser
from .lexer import FormulaLexer
from .exceptions import ParseError
from formula import factory
from formula.ast_nodes import Formula
from utils.logger import get_logger


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser producing formula trees.

    Attributes:
        tokens: Token types from FormulaLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = FormulaLexer.tokens

    precedence = (
        ("left", "IFF"),
        ("left", "IMP"),
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("formula")
    def start(self, p) -> Formula:
        return p.formula

    @_("NOT formula")
    def formula(self, p) -> Formula:
        return factory.make_not(p.formula)

    @_("formula AND formula")
    def formula(self, p) -> Formula:
        return factory.make_and(p.formula0, p.formula1)

    @_("formula OR formula")
    def formula(self, p) -> Formula:
        return factory.make_or(p.formula0, p.formula1)

    @_("formula IMP formula")
    def formula(self, p) -> Formula:
        return factory.make_imp(p.formula0, p.formula1)

    @_("formula IFF formula")
    def formula(self, p) -> Formula:
        return factory.make_iff(p.formula0, p.formula1)

    @_("LPAREN formula RPAREN")
    def formula(self, p) -> Formula:
        return p.formula

    @_("ID")
    def formula(self, p) -> Formula:
        return factory.make_atom(p.ID)

    @_("TRUE")
    def formula(self, p) -> Formula:
        return factory.make_true()

    @_("FALSE")
    def formula(self, p) -> Formula:
        return factory.make_false()

    def parse(self, text: str) -> Formula:
        """Parse formula text into a formula tree.

        Args:
            text: Formula string to parse

        Returns:
            Root node of the parsed formula

        Raises:
            ParseError: If the text is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing formula text: {text}")

        try:
            if text.strip() == "":
                raise ParseError("Input formula is empty.")

            result = super().parse(FormulaLexer().tokenize(text))

            if result is None:
                raise ParseError("Failed to parse formula (syntax error).")

            logger.debug(f"Successfully parsed formula into {type(result).__name__}")
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at line {token.lineno}, position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of formula"

        raise ParseError(error_msg)
