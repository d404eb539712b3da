"""Diagnostics built from ILLEGAL tokens.

The lexer itself never raises; these exist for tools that want to stop on
or report unrecognized input.
"""

from .monkey_token import ILLEGAL


class MonkeyError(Exception):
    """Base class for Monkey tool errors."""


class IllegalCharacterError(MonkeyError):
    def __init__(self, message, filename="<stdin>", line=0, column=0, suggestion=None):
        super().__init__(message)
        self.message = message
        self.filename = filename
        self.line = line
        self.column = column
        self.suggestion = suggestion

    @classmethod
    def from_token(cls, token, filename="<stdin>"):
        char = token.literal
        desc = f"'{char}'" if char.isprintable() else f"'\\x{ord(char):02x}'"
        return cls(
            f"Unexpected character {desc}",
            filename=filename,
            line=token.line,
            column=token.column,
            suggestion="Remove or replace this character with valid Monkey syntax.",
        )

    def __str__(self):
        return f"{self.filename}:{self.line}:{self.column}: {self.message}"


def collect_illegal(tokens, filename="<stdin>"):
    """Return an IllegalCharacterError for every ILLEGAL token in ``tokens``."""
    return [IllegalCharacterError.from_token(tok, filename)
            for tok in tokens if tok.type == ILLEGAL]
