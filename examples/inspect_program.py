#!/usr/bin/env python3
"""
BL Program Inspection Demo
==========================

This script demonstrates how to use the BL toolkit to:
1. Parse a program file
2. Walk its instruction table and statements
3. Print it back in canonical form
4. Report a syntax error

Usage:
    pip install -e .
    python examples/inspect_program.py
"""

from pathlib import Path

from bl_lang import BLError, parse_program_file, parse_program_source
from bl_lang.language import Call, format_program, iter_statements


def main():
    source = Path(__file__).with_name("explorer.bl")

    # ==========================================================================
    # 1. Parse the program
    # ==========================================================================
    program = parse_program_file(source)
    print(f"Program {program.name}: {program.statement_count()} statements")

    # ==========================================================================
    # 2. List instructions and the calls each one makes
    # ==========================================================================
    for name, body in program.context.items():
        called = [n.name for n in iter_statements(body) if isinstance(n, Call)]
        print(f"  {name} calls {', '.join(called) or 'nothing'}")

    # ==========================================================================
    # 3. Canonical form with two-space indentation
    # ==========================================================================
    print()
    print(format_program(program, indent_size=2), end="")

    # ==========================================================================
    # 4. Errors carry their location
    # ==========================================================================
    print()
    try:
        parse_program_source("PROGRAM Broken IS\nBEGIN\n    move\nEND Fixed\n", "broken.bl")
    except BLError as e:
        print(f"[{e.kind.value}] {e}")


if __name__ == "__main__":
    main()
