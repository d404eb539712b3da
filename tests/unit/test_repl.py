import io

from monkey import repl


def run_repl(text, prompt=">> "):
	output = io.StringIO()
	repl.start(io.StringIO(text), output, prompt=prompt)
	return output.getvalue()


def test_prints_tokens_for_each_line():
	out = run_repl("let x = 5;\n")
	assert out == (
		">> "
		"{Type:LET Literal:let}\n"
		"{Type:IDENT Literal:x}\n"
		"{Type:= Literal:=}\n"
		"{Type:INT Literal:5}\n"
		"{Type:; Literal:;}\n"
		">> "
	)


def test_each_line_gets_a_fresh_lexer():
	out = run_repl("a\nb\n")
	assert out == ">> {Type:IDENT Literal:a}\n>> {Type:IDENT Literal:b}\n>> "


def test_blank_line_prints_nothing():
	assert run_repl("\n") == ">> >> "


def test_exit_command_stops_loop():
	out = run_repl("exit\nlet\n")
	assert out == ">> "


def test_custom_prompt():
	assert run_repl("", prompt="monkey> ") == "monkey> "


def test_default_prompt_comes_from_config():
	output = io.StringIO()
	repl.start(io.StringIO(""), output)
	assert output.getvalue() == ">> "
