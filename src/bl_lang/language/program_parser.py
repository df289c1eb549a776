"""
BL Program Parser
=================

Parses a complete BL program from a token stream.

Grammar
-------
program      ::= 'PROGRAM' IDENTIFIER 'IS'
                 instruction*
                 'BEGIN' block 'END' IDENTIFIER
instruction  ::= 'INSTRUCTION' IDENTIFIER 'IS' block 'END' IDENTIFIER

The closing IDENTIFIER of a program or instruction must repeat its
opening name, and user-defined instruction names must be unique within
a program. Blocks are parsed by the statement parser.

An input holding nothing but END_OF_INPUT parses to an empty Program.

Example Usage
-------------
>>> from bl_lang.language.program_parser import parse_program_source
>>> program = parse_program_source('''
... PROGRAM Spin IS
...     INSTRUCTION turnaround IS
...         turnleft
...         turnleft
...     END turnaround
... BEGIN
...     WHILE true DO
...         turnaround
...     END WHILE
... END Spin
... ''')
>>> program.name
'Spin'
>>> sorted(program.context)
['turnaround']
"""

from pathlib import Path
from typing import Optional
import logging

from bl_lang.errors import DuplicateInstructionError, SourceLocation, TrailingInputError
from bl_lang.language.ast import Block, Program, Statement
from bl_lang.language.expect import (
    expect_closing_name,
    expect_identifier,
    expect_keyword,
)
from bl_lang.language.statement_parser import parse_block, parse_statement
from bl_lang.language.tokenizer import (
    TokenStream,
    is_primitive_instruction,
    read_tokens,
    tokenize,
)

logger = logging.getLogger(__name__)


def parse_instruction(tokens: TokenStream) -> tuple[str, Block]:
    """
    Parse one user-defined instruction declaration.

    Args:
        tokens: Token stream whose front is INSTRUCTION

    Returns:
        Tuple of (instruction name, body block)

    Raises:
        BLSyntaxError: If the declaration is malformed or its closing
            name differs from its opening name
    """
    expect_keyword(tokens, "INSTRUCTION", "Expected INSTRUCTION")
    name = expect_identifier(tokens, "The instruction name must be an identifier")
    expect_keyword(
        tokens, "IS", "Instruction line syntax is INSTRUCTION instruction name IS"
    )

    body = parse_block(tokens)

    expect_keyword(tokens, "END", "The closing line must start with END")
    expect_closing_name(
        tokens, name, "The closing line must end with the instruction name"
    )

    if is_primitive_instruction(name):
        logger.warning(f"Instruction '{name}' has the name of a primitive instruction")
    logger.debug(f"Parsed instruction '{name}' ({len(body)} statements)")
    return name, body


def parse(tokens: TokenStream) -> Program:
    """
    Parse a whole BL program.

    Args:
        tokens: Token stream holding the entire program

    Returns:
        A new Program. An empty Program is returned when the stream holds
        only END_OF_INPUT; the sentinel is left in place.

    Raises:
        BLSyntaxError: On the first grammar violation
        DuplicateInstructionError: If two instructions share a name
    """
    if tokens.at_end():
        return Program()

    expect_keyword(tokens, "PROGRAM", "BL file must start with PROGRAM")
    name = expect_identifier(tokens, "The program name must be an identifier")
    expect_keyword(tokens, "IS", "BL file must start with PROGRAM programName IS")

    context: dict[str, Block] = {}
    defined_at: dict[str, Optional[SourceLocation]] = {}
    while tokens.front() == "INSTRUCTION":
        location = tokens.location
        instruction_name, body = parse_instruction(tokens)
        if instruction_name in context:
            raise DuplicateInstructionError(
                instruction_name,
                location=location,
                original_location=defined_at[instruction_name],
                source_line=tokens.source_line(location),
            )
        context[instruction_name] = body
        defined_at[instruction_name] = location

    expect_keyword(tokens, "BEGIN", "The body must start with BEGIN")
    body = parse_block(tokens)
    expect_keyword(tokens, "END", "The closing line must start with END")
    expect_closing_name(tokens, name, "BL file must end with the program name")

    if not tokens.at_end():
        location = tokens.location
        raise TrailingInputError(
            tokens.front(),
            location=location,
            source_line=tokens.source_line(location),
        )

    program = Program(name=name, context=context, body=body)
    logger.debug(
        f"Parsed program '{name}': {len(context)} instructions, "
        f"{program.statement_count()} statements"
    )
    return program


# =============================================================================
# Convenience Functions
# =============================================================================

def parse_program_source(source: str, filename: str = "<input>") -> Program:
    """
    Tokenize and parse BL program text.

    Args:
        source: BL source text
        filename: Source filename for error messages

    Returns:
        The parsed Program
    """
    return parse(tokenize(source, filename))


def parse_program_file(path: str | Path, encoding: str = "utf-8") -> Program:
    """
    Read, tokenize and parse a BL program file.

    Raises:
        FileNotFoundError: If the file does not exist
        BLError: If the file cannot be read or parsed
    """
    return parse(read_tokens(path, encoding))


def parse_statement_source(
    source: str,
    filename: str = "<input>",
    block: bool = False,
) -> Statement:
    """
    Tokenize and parse BL statement text.

    Only the leading statement (or, with block=True, the leading block)
    is parsed; tokens after it are left unread.

    Args:
        source: BL source text
        filename: Source filename for error messages
        block: Parse a block of statements instead of a single one

    Returns:
        The parsed Statement, or a Block when block is True
    """
    tokens = tokenize(source, filename)
    if block:
        return parse_block(tokens)
    return parse_statement(tokens)
