# lexer.py
import logging

from .config import config as monkey_config
from .monkey_token import *

logger = logging.getLogger("monkey.lexer")

_SINGLE_CHAR_TOKENS = {
    '+': PLUS,
    '-': MINUS,
    '*': ASTERISK,
    '/': SLASH,
    '<': LT,
    '>': GT,
    '(': LPAREN,
    ')': RPAREN,
    '{': LBRACE,
    '}': RBRACE,
    ',': COMMA,
    ';': SEMICOLON,
}

# Characters that may start a two-character operator, with the
# second character and the resulting kind.
_TWO_CHAR_TOKENS = {
    '=': ('=', EQ, ASSIGN),
    '!': ('=', NOT_EQ, BANG),
}

_WHITESPACE = (' ', '\t', '\n', '\r')


class Lexer:
    def __init__(self, source_code, filename="<stdin>"):
        self.input = source_code
        self.filename = filename
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.line = 1
        self.column = 0
        self.read_char()

    def read_char(self):
        if self.ch == '\n':
            self.line += 1
            self.column = 0

        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]

        self.position = self.read_position
        self.read_position += 1
        self.column += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def next_token(self):
        self.skip_whitespace()

        line = self.line
        column = self.column

        if self.ch == "":
            return Token(EOF, "", line, column)

        if self.ch in _TWO_CHAR_TOKENS:
            second, double_type, single_type = _TWO_CHAR_TOKENS[self.ch]
            if self.peek_char() == second:
                first = self.ch
                self.read_char()
                tok = Token(double_type, first + self.ch, line, column)
            else:
                tok = Token(single_type, self.ch, line, column)
        elif self.ch in _SINGLE_CHAR_TOKENS:
            tok = Token(_SINGLE_CHAR_TOKENS[self.ch], self.ch, line, column)
        elif self.is_letter(self.ch):
            literal = self.read_identifier()
            return Token(lookup_ident(literal), literal, line, column)
        elif self.is_digit(self.ch):
            return Token(INT, self.read_number(), line, column)
        else:
            if monkey_config.should_log("debug"):
                logger.debug("%s:%d:%d: illegal character %r",
                             self.filename, line, column, self.ch)
            tok = Token(ILLEGAL, self.ch, line, column)

        self.read_char()
        return tok

    def __iter__(self):
        """Yield tokens until the end of input; EOF itself is not yielded."""
        while True:
            tok = self.next_token()
            if tok.type == EOF:
                return
            yield tok

    def read_identifier(self):
        start_position = self.position
        while self.is_letter(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self):
        start_position = self.position
        while self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def skip_whitespace(self):
        while self.ch in _WHITESPACE:
            self.read_char()

    def is_letter(self, char):
        return 'a' <= char <= 'z' or 'A' <= char <= 'Z' or char == '_'

    def is_digit(self, char):
        return '0' <= char <= '9'


def tokenize(source_code, filename="<stdin>"):
    """Scan ``source_code`` completely, returning all tokens including EOF."""
    lexer = Lexer(source_code, filename)
    tokens = list(lexer)
    tokens.append(lexer.next_token())
    return tokens
