"""
BL Pretty Printer
=================

Renders statements and programs back to canonical BL source, and dumps
trees in a debugging view.

Canonical layout (indent_size=4):

    PROGRAM Spin IS

        INSTRUCTION turnaround IS
            turnleft
            turnleft
        END turnaround

    BEGIN
        WHILE true DO
            turnaround
        END WHILE
    END Spin

Output of format_program() tokenizes and parses back to an equal Program.
"""

from typing import TextIO, Union
import logging

from bl_lang.language.ast import Block, Call, If, IfElse, Program, Statement, While

logger = logging.getLogger(__name__)

DEFAULT_INDENT_SIZE = 4

# Name printed for a Program parsed from an empty token stream
UNNAMED_PROGRAM = "Unnamed"


# =============================================================================
# Source Formatting
# =============================================================================

def _statement_lines(statement: Statement, indent: int, indent_size: int) -> list[str]:
    pad = " " * indent
    inner = indent + indent_size

    if isinstance(statement, Block):
        lines = []
        for child in statement.statements:
            lines.extend(_statement_lines(child, indent, indent_size))
        return lines
    if isinstance(statement, Call):
        return [f"{pad}{statement.name}"]
    if isinstance(statement, If):
        return (
            [f"{pad}IF {statement.condition.spelling} THEN"]
            + _statement_lines(statement.then_block, inner, indent_size)
            + [f"{pad}END IF"]
        )
    if isinstance(statement, IfElse):
        return (
            [f"{pad}IF {statement.condition.spelling} THEN"]
            + _statement_lines(statement.then_block, inner, indent_size)
            + [f"{pad}ELSE"]
            + _statement_lines(statement.else_block, inner, indent_size)
            + [f"{pad}END IF"]
        )
    if isinstance(statement, While):
        return (
            [f"{pad}WHILE {statement.condition.spelling} DO"]
            + _statement_lines(statement.body, inner, indent_size)
            + [f"{pad}END WHILE"]
        )
    raise TypeError(f"not a BL statement: {type(statement).__name__}")


def format_statement(
    statement: Statement,
    indent: int = 0,
    indent_size: int = DEFAULT_INDENT_SIZE,
) -> str:
    """
    Format a statement or block as BL source.

    Args:
        statement: Statement to format
        indent: Number of spaces before the outermost lines
        indent_size: Spaces added for each nested block

    Returns:
        The formatted text, one statement per line, with a trailing
        newline (empty string for an empty block)
    """
    lines = _statement_lines(statement, indent, indent_size)
    return "".join(f"{line}\n" for line in lines)


def format_program(program: Program, indent_size: int = DEFAULT_INDENT_SIZE) -> str:
    """
    Format a program as BL source.

    Instructions are printed in the order they appear in the context,
    each followed by a blank line.
    """
    name = program.name if program.name is not None else UNNAMED_PROGRAM
    pad = " " * indent_size

    lines = [f"PROGRAM {name} IS", ""]
    for instruction, body in program.context.items():
        lines.append(f"{pad}INSTRUCTION {instruction} IS")
        lines.extend(_statement_lines(body, 2 * indent_size, indent_size))
        lines.append(f"{pad}END {instruction}")
        lines.append("")
    lines.append("BEGIN")
    lines.extend(_statement_lines(program.body, indent_size, indent_size))
    lines.append(f"END {name}")
    return "".join(f"{line}\n" for line in lines)


def write_program(
    program: Program,
    out: TextIO,
    indent_size: int = DEFAULT_INDENT_SIZE,
) -> None:
    """Write the formatted program to a text stream."""
    text = format_program(program, indent_size)
    out.write(text)
    logger.debug(f"Wrote program '{program.name}' ({len(text)} characters)")


# =============================================================================
# Tree Dump
# =============================================================================

class TreePrinter:
    """
    Debugging view of a BL tree.

    Usage:
        printer = TreePrinter()
        print(printer.print(program))

    Output:
        Program Spin
          Instruction turnaround
            Block
              Call turnleft
              Call turnleft
          Body
            Block
              While true
                Block
                  Call turnaround
    """

    def __init__(self):
        self.output: list[str] = []
        self.indent_level = 0

    def print(self, node: Union[Program, Statement]) -> str:
        """Print the tree and return it as a string."""
        self.output = []
        self.indent_level = 0
        if isinstance(node, Program):
            self._program(node)
        else:
            self._statement(node)
        return "\n".join(self.output)

    def _emit(self, text: str) -> None:
        indent = "  " * self.indent_level
        self.output.append(f"{indent}{text}")

    def _nested(self, label: str, block: Block) -> None:
        self._emit(label)
        self.indent_level += 1
        self._statement(block)
        self.indent_level -= 1

    def _program(self, program: Program) -> None:
        name = program.name if program.name is not None else UNNAMED_PROGRAM
        self._emit(f"Program {name}")
        self.indent_level += 1
        for instruction, body in program.context.items():
            self._nested(f"Instruction {instruction}", body)
        self._nested("Body", program.body)
        self.indent_level -= 1

    def _statement(self, statement: Statement) -> None:
        if isinstance(statement, Block):
            self._emit("Block")
            self.indent_level += 1
            for child in statement.statements:
                self._statement(child)
            self.indent_level -= 1
        elif isinstance(statement, Call):
            self._emit(f"Call {statement.name}")
        elif isinstance(statement, If):
            self._emit(f"If {statement.condition.spelling}")
            self.indent_level += 1
            self._statement(statement.then_block)
            self.indent_level -= 1
        elif isinstance(statement, IfElse):
            self._emit(f"IfElse {statement.condition.spelling}")
            self.indent_level += 1
            self._nested("Then:", statement.then_block)
            self._nested("Else:", statement.else_block)
            self.indent_level -= 1
        elif isinstance(statement, While):
            self._emit(f"While {statement.condition.spelling}")
            self.indent_level += 1
            self._statement(statement.body)
            self.indent_level -= 1
        else:
            raise TypeError(f"not a BL statement: {type(statement).__name__}")


def dump_tree(node: Union[Program, Statement]) -> str:
    """Return the debugging tree view of a program or statement."""
    return TreePrinter().print(node)
