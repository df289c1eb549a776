"""
BL Language Front End
=====================

Tokenizer, parsers and pretty-printer for the BL block language.

Pipeline
--------
    Source → Tokenizer → TokenStream → Program Parser → Program
                                        └ Statement Parser → Block / Statement

    Program / Statement → Pretty Printer → Source

Usage
-----
>>> from bl_lang.language import parse_program_source, format_program
>>> program = parse_program_source("PROGRAM P IS BEGIN move END P")
>>> print(format_program(program), end="")
PROGRAM P IS
<BLANKLINE>
BEGIN
    move
END P
"""

from bl_lang.language.ast import (
    Block,
    Call,
    Condition,
    If,
    IfElse,
    Program,
    Statement,
    While,
    iter_statements,
)
from bl_lang.language.tokenizer import (
    CONDITIONS,
    END_OF_INPUT,
    KEYWORDS,
    PRIMITIVE_INSTRUCTIONS,
    BLTokenizer,
    Token,
    TokenKind,
    TokenStream,
    is_condition,
    is_identifier,
    is_keyword,
    is_primitive_instruction,
    read_source,
    read_tokens,
    tokenize,
)
from bl_lang.language.statement_parser import parse_block, parse_condition, parse_statement
from bl_lang.language.program_parser import (
    parse,
    parse_instruction,
    parse_program_file,
    parse_program_source,
    parse_statement_source,
)
from bl_lang.language.printer import (
    dump_tree,
    format_program,
    format_statement,
    write_program,
)

__all__ = [
    # AST
    "Block",
    "Call",
    "Condition",
    "If",
    "IfElse",
    "Program",
    "Statement",
    "While",
    "iter_statements",
    # Tokenizer
    "CONDITIONS",
    "END_OF_INPUT",
    "KEYWORDS",
    "PRIMITIVE_INSTRUCTIONS",
    "BLTokenizer",
    "Token",
    "TokenKind",
    "TokenStream",
    "is_condition",
    "is_identifier",
    "is_keyword",
    "is_primitive_instruction",
    "read_source",
    "read_tokens",
    "tokenize",
    # Parsers
    "parse",
    "parse_block",
    "parse_condition",
    "parse_instruction",
    "parse_statement",
    "parse_program_file",
    "parse_program_source",
    "parse_statement_source",
    # Printer
    "dump_tree",
    "format_program",
    "format_statement",
    "write_program",
]
