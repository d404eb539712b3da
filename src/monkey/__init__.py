"""Monkey language lexical scanner."""

from .lexer import Lexer, tokenize
from .monkey_token import Token, lookup_ident

__version__ = "0.1.0"

__all__ = ["Lexer", "Token", "lookup_ident", "tokenize", "__version__"]
