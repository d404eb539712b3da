# repl.py
"""Read a line, scan it, print its tokens. Repeat until input runs out."""

from .config import config as monkey_config
from .lexer import Lexer

PROMPT = ">> "

EXIT_COMMANDS = ('exit', 'quit')


def start(input_stream, output_stream, prompt=None):
    if prompt is None:
        prompt = monkey_config.prompt or PROMPT

    while True:
        output_stream.write(prompt)
        output_stream.flush()

        line = input_stream.readline()
        if not line or line.strip() in EXIT_COMMANDS:
            return

        for tok in Lexer(line):
            output_stream.write(f"{tok}\n")
