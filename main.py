#!/usr/bin/env python3
"""
Runner for a source checkout - starts the token REPL by default
"""

import sys
import os

# Add the src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from monkey.cli.main import cli

if __name__ == "__main__":
    if len(sys.argv) == 1:
        sys.argv.append('repl')

    # Support: main.py program.mk -> main.py tokens program.mk
    if len(sys.argv) == 2 and sys.argv[1].endswith('.mk'):
        sys.argv.insert(1, 'tokens')

    cli()
