# parser/lexer.py
# This file is part of FOL Printer - Propositional formula model and printer
#
# Lexical analyzer for propositional formula text using SLY

"""Lexical analyzer for propositional formula strings.

Supported Tokens:
- Operators: ~, &, |, =>, <=>, (, )
- Keywords: true, false
- Identifiers: atom names
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formulas.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    tokens = {
        "TRUE",
        "FALSE",
        "ID",
        "NOT",
        "AND",
        "OR",
        "IMP",
        "IFF",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    # <=> must be tried before =>
    IFF = r"<=>"
    IMP = r"=>"
    NOT = r"~"
    AND = r"&"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"

    ID["true"] = "TRUE"
    ID["false"] = "FALSE"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
