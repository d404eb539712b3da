# monkey_token.py
"""Token kinds, the Token value and keyword classification for Monkey."""

from dataclasses import dataclass, field
from types import MappingProxyType

ILLEGAL = "ILLEGAL"
EOF = "EOF"

# Identifiers and literals
IDENT = "IDENT"
INT = "INT"

# Operators
ASSIGN = "="
PLUS = "+"
MINUS = "-"
BANG = "!"
ASTERISK = "*"
SLASH = "/"

LT = "<"
GT = ">"

EQ = "=="
NOT_EQ = "!="

# Delimiters
COMMA = ","
SEMICOLON = ";"
LPAREN = "("
RPAREN = ")"
LBRACE = "{"
RBRACE = "}"

# Keywords
FUNCTION = "FUNCTION"
LET = "LET"
TRUE = "TRUE"
FALSE = "FALSE"
IF = "IF"
ELSE = "ELSE"
RETURN = "RETURN"

KEYWORDS = MappingProxyType({
    "fn": FUNCTION,
    "let": LET,
    "true": TRUE,
    "false": FALSE,
    "if": IF,
    "else": ELSE,
    "return": RETURN,
})


@dataclass(frozen=True)
class Token:
    """A classified lexeme.

    ``line`` and ``column`` locate the first character of the lexeme and are
    not part of token equality.
    """
    type: str
    literal: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __str__(self):
        return f"{{Type:{self.type} Literal:{self.literal}}}"


def lookup_ident(ident):
    """Return the keyword kind for ``ident``, or IDENT if it is not reserved."""
    return KEYWORDS.get(ident, IDENT)
