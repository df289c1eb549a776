"""
BL Toolkit Error Hierarchy
==========================

This module defines the exception hierarchy for the BL toolkit.
All exceptions inherit from BLError, allowing callers to catch every
toolkit error with a single except clause if desired.

Exception Hierarchy
-------------------
BLError (base)
├── BLInputError - source file cannot be read
├── BLSyntaxError - grammar violations found while parsing
│   ├── InvalidIdentifierError - identifier expected, something else found
│   ├── UnexpectedTokenError - expected keyword does not match
│   ├── ClosingNameMismatchError - END name differs from the opening name
│   ├── InvalidConditionError - condition name expected
│   ├── PrematureEndError - end of input where content was required
│   └── TrailingInputError - tokens left after the program end
├── DuplicateInstructionError - user instruction defined twice
└── InternalConsistencyError - tokenizer and parser vocabularies disagree

Every parse error is fatal: the parser raises on the first violation in
left-to-right token order and never resumes. Each error carries an
ErrorKind so callers can branch on the category without matching on
exception classes or message text.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Error Categories
# =============================================================================

class ErrorKind(Enum):
    """Category of a BL diagnostic."""

    IDENTIFIER = "identifier"
    KEYWORD_MISMATCH = "keyword-mismatch"
    CLOSING_NAME_MISMATCH = "closing-name-mismatch"
    CONDITION = "condition"
    DUPLICATE_DEFINITION = "duplicate-definition"
    PREMATURE_TERMINATION = "premature-termination"
    TRAILING_INPUT = "trailing-input"
    INTERNAL = "internal"
    INPUT = "input"


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in BL source text for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Base Exception Class
# =============================================================================

class BLError(Exception):
    """
    Base exception for all BL toolkit errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text at the error location (optional)
        kind: The ErrorKind category of this error
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            maze.bl:7:9: error: Expected WHILE
                END IF
                    ^
            hint: found 'IF'
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class BLInputError(BLError):
    """Raised when BL source text cannot be read."""

    kind = ErrorKind.INPUT


# =============================================================================
# Syntax Errors
# =============================================================================

class BLSyntaxError(BLError):
    """
    Grammar violation found while parsing a token stream.

    Raised at the exact grammar position that requires the failed check.
    The token stream is left wherever the failing check stopped; the
    parse produces no partial result.
    """

    kind = ErrorKind.KEYWORD_MISMATCH


class InvalidIdentifierError(BLSyntaxError):
    """
    A position requiring an identifier holds something else.

    Example:
        PROGRAM 123 IS    // program name must be an identifier
    """

    kind = ErrorKind.IDENTIFIER

    def __init__(
        self,
        message: str,
        found: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.found = found
        super().__init__(
            message,
            location=location,
            hint=f"'{found}' is not a valid identifier",
            source_line=source_line,
        )


class UnexpectedTokenError(BLSyntaxError):
    """
    An expected literal keyword does not match the actual token.

    Example:
        WHILE next-is-empty DO move END IF    // expected WHILE after END
    """

    kind = ErrorKind.KEYWORD_MISMATCH

    def __init__(
        self,
        message: str,
        found: str,
        expected: Optional[str] = None,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.found = found
        self.expected = expected
        super().__init__(
            message,
            location=location,
            hint=f"found '{found}'",
            source_line=source_line,
        )


class ClosingNameMismatchError(BLSyntaxError):
    """
    The name after a closing END differs from the name that opened it.

    Example:
        INSTRUCTION turn IS ... END spin
    """

    kind = ErrorKind.CLOSING_NAME_MISMATCH

    def __init__(
        self,
        message: str,
        expected_name: str,
        found: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.expected_name = expected_name
        self.found = found
        super().__init__(
            message,
            location=location,
            hint=f"expected '{expected_name}', found '{found}'",
            source_line=source_line,
        )


class InvalidConditionError(BLSyntaxError):
    """A token expected to be a condition name fails classification."""

    kind = ErrorKind.CONDITION

    def __init__(
        self,
        found: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.found = found
        super().__init__(
            f"{found} is not a condition",
            location=location,
            source_line=source_line,
        )


class PrematureEndError(BLSyntaxError):
    """
    The end of input was reached where content or a keyword was required.

    The message names what was expected; the location (when known) is
    the last token consumed before the end of input.
    """

    kind = ErrorKind.PREMATURE_TERMINATION

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            message,
            location=location,
            hint="reached end of input",
            source_line=source_line,
        )


class TrailingInputError(BLSyntaxError):
    """Tokens remain after the closing line of a program."""

    kind = ErrorKind.TRAILING_INPUT

    def __init__(
        self,
        found: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.found = found
        super().__init__(
            "The only value in tokens should be the end of input",
            location=location,
            hint=f"unexpected '{found}' after the program end",
            source_line=source_line,
        )


# =============================================================================
# Structural Errors
# =============================================================================

class DuplicateInstructionError(BLError):
    """
    A user-defined instruction name is declared more than once.

    The second declaration is never added to the instruction table.
    """

    kind = ErrorKind.DUPLICATE_DEFINITION

    def __init__(
        self,
        name: str,
        location: Optional[SourceLocation] = None,
        original_location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.name = name
        self.original_location = original_location

        hint = None
        if original_location:
            hint = f"'{name}' was first defined at {original_location}"

        super().__init__(
            "The user-defined instruction name must be unique",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class InternalConsistencyError(BLError):
    """
    The tokenizer and the parser disagree about the BL vocabulary.

    Raised when a token passes condition classification but has no
    matching Condition constant. This is a toolkit bug, not bad input.
    """

    kind = ErrorKind.INTERNAL
