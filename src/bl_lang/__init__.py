"""
BL Toolkit - Parser and Pretty Printer for the BL Block Language
================================================================

BL is a small imperative language for programming creatures that move
around a grid. A program declares its own instructions and a main body
built from instruction calls, IF / IF-ELSE and WHILE statements over a
fixed set of conditions:

    PROGRAM Explorer IS

        INSTRUCTION step IS
            IF next-is-empty THEN
                move
            ELSE
                turnright
            END IF
        END step

    BEGIN
        WHILE true DO
            step
        END WHILE
    END Explorer

Main Components
---------------
- **language**: tokenizer, statement and program parsers, AST,
  pretty-printer
- **cli**: the blparse command-line tool
- **errors**: exception hierarchy; every parse error is fatal and
  reported on first occurrence
- **config**: shared settings for the tools

Quick Start
-----------
    >>> from bl_lang import parse_program_source, format_program
    >>> program = parse_program_source(source, "explorer.bl")
    >>> program.name
    'Explorer'
    >>> print(format_program(program))

Or use the command-line tool:
    $ blparse program explorer.bl
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from bl_lang.errors import (
    BLError,
    BLInputError,
    BLSyntaxError,
    ClosingNameMismatchError,
    DuplicateInstructionError,
    ErrorKind,
    InternalConsistencyError,
    InvalidConditionError,
    InvalidIdentifierError,
    PrematureEndError,
    SourceLocation,
    TrailingInputError,
    UnexpectedTokenError,
)
from bl_lang.config import BLConfig
from bl_lang.language import (
    END_OF_INPUT,
    Block,
    Call,
    Condition,
    If,
    IfElse,
    Program,
    Statement,
    TokenStream,
    While,
    dump_tree,
    format_program,
    format_statement,
    parse,
    parse_block,
    parse_program_file,
    parse_program_source,
    parse_statement,
    parse_statement_source,
    tokenize,
)

__all__ = [
    "__version__",
    # Errors
    "BLError",
    "BLInputError",
    "BLSyntaxError",
    "ClosingNameMismatchError",
    "DuplicateInstructionError",
    "ErrorKind",
    "InternalConsistencyError",
    "InvalidConditionError",
    "InvalidIdentifierError",
    "PrematureEndError",
    "SourceLocation",
    "TrailingInputError",
    "UnexpectedTokenError",
    # Configuration
    "BLConfig",
    # Language
    "END_OF_INPUT",
    "Block",
    "Call",
    "Condition",
    "If",
    "IfElse",
    "Program",
    "Statement",
    "TokenStream",
    "While",
    "dump_tree",
    "format_program",
    "format_statement",
    "parse",
    "parse_block",
    "parse_program_file",
    "parse_program_source",
    "parse_statement",
    "parse_statement_source",
    "tokenize",
]
