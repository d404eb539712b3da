from monkey.errors import IllegalCharacterError, MonkeyError, collect_illegal
from monkey.lexer import tokenize


def test_collect_illegal_reports_positions():
	errors = collect_illegal(tokenize("let a = 1;\nlet b = @ & 2;"), filename="prog.mk")
	assert [str(e) for e in errors] == [
		"prog.mk:2:9: Unexpected character '@'",
		"prog.mk:2:11: Unexpected character '&'",
	]
	assert all(isinstance(e, MonkeyError) for e in errors)
	assert errors[0].suggestion


def test_no_illegal_tokens():
	assert collect_illegal(tokenize("fn(a) { a }")) == []


def test_unprintable_character_is_escaped():
	error = IllegalCharacterError.from_token(tokenize("\x01")[0])
	assert error.message == "Unexpected character '\\x01'"
	assert (error.line, error.column) == (1, 1)
