import dataclasses

import pytest

from monkey.monkey_token import *


def test_lookup_ident_reserved_words():
	assert lookup_ident("fn") == FUNCTION
	assert lookup_ident("let") == LET
	assert lookup_ident("return") == RETURN


def test_lookup_ident_is_exact_and_case_sensitive():
	assert lookup_ident("Fn") == IDENT
	assert lookup_ident("le") == IDENT
	assert lookup_ident("lett") == IDENT


def test_keyword_table_is_read_only():
	with pytest.raises(TypeError):
		KEYWORDS["while"] = "WHILE"
	assert "while" not in KEYWORDS


def test_token_is_immutable():
	tok = Token(LET, "let")
	with pytest.raises(dataclasses.FrozenInstanceError):
		tok.literal = "var"


def test_token_equality_ignores_position():
	assert Token(INT, "5", 1, 1) == Token(INT, "5", 3, 7)
	assert Token(INT, "5") != Token(INT, "6")


def test_token_str():
	assert str(Token(LET, "let")) == "{Type:LET Literal:let}"
	assert str(Token(ASSIGN, "=")) == "{Type:= Literal:=}"
	assert str(Token(EOF, "")) == "{Type:EOF Literal:}"
