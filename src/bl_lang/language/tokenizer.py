"""
BL Tokenizer
============

This module turns BL source text into the flat token stream consumed by
the parsers, and owns the classification predicates the parsers rely on.

Token Categories
----------------
- Keywords: BEGIN, DO, ELSE, END, IF, INSTRUCTION, IS, PROGRAM, THEN, WHILE
- Conditions: next-is-empty, next-is-wall, random, true, ...
- Identifiers: a letter followed by letters, digits or '-', that is
  neither a keyword nor a condition
- Errors: anything else (a stray '(' or a name starting with a digit).
  Error tokens are passed through; the parser rejects them at the
  grammar position where they appear.

Lexical Rules
-------------
- Whitespace separates tokens.
- A token is a maximal run of letters, digits and '-', or any single
  other non-blank character.
- '#' starts a comment that runs to the end of the line.
- Keywords are case-sensitive.

Every token stream ends with exactly one END_OF_INPUT sentinel.

Example Usage
-------------
>>> from bl_lang.language.tokenizer import tokenize
>>> tokens = tokenize("PROGRAM Hello IS BEGIN move END Hello")
>>> tokens.front()
'PROGRAM'
>>> len(tokens)
8
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Iterable, Iterator, Optional
import logging
import re
import string

from bl_lang.errors import BLInputError, SourceLocation
from bl_lang.language.ast import Condition

logger = logging.getLogger(__name__)


# =============================================================================
# Vocabulary
# =============================================================================

# Sentinel terminating every token stream; contains blanks so it can never
# be produced from source text.
END_OF_INPUT = "### END OF INPUT ###"

KEYWORDS = frozenset({
    "BEGIN",
    "DO",
    "ELSE",
    "END",
    "IF",
    "INSTRUCTION",
    "IS",
    "PROGRAM",
    "THEN",
    "WHILE",
})

CONDITIONS = frozenset(c.spelling for c in Condition)

PRIMITIVE_INSTRUCTIONS = frozenset({
    "move",
    "turnleft",
    "turnright",
    "infect",
    "skip",
})

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")

COMMENT_CHAR = "#"

WORD_CHARS = frozenset(string.ascii_letters + string.digits + "-")


def is_keyword(token: str) -> bool:
    """Return True if token is a BL keyword."""
    return token in KEYWORDS


def is_condition(token: str) -> bool:
    """Return True if token is the spelling of a BL condition."""
    return token in CONDITIONS


def is_identifier(token: str) -> bool:
    """
    Return True if token is a lexically valid BL identifier.

    Identifiers start with a letter, continue with letters, digits or
    hyphens, and are neither keywords nor condition names.
    """
    return (
        IDENTIFIER_PATTERN.match(token) is not None
        and not is_keyword(token)
        and not is_condition(token)
    )


def is_primitive_instruction(name: str) -> bool:
    """Return True if name is one of the built-in BL instructions."""
    return name in PRIMITIVE_INSTRUCTIONS


# =============================================================================
# Tokens
# =============================================================================

class TokenKind(Enum):
    """Classification of a BL token."""

    KEYWORD = auto()
    CONDITION = auto()
    IDENTIFIER = auto()
    ERROR = auto()


def classify(token: str) -> TokenKind:
    """Return the TokenKind of a token string."""
    if is_keyword(token):
        return TokenKind.KEYWORD
    if is_condition(token):
        return TokenKind.CONDITION
    if is_identifier(token):
        return TokenKind.IDENTIFIER
    return TokenKind.ERROR


@dataclass(frozen=True)
class Token:
    """
    A single token from BL source text.

    Attributes:
        text: The token as written
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        filename: Name of the source file
    """
    text: str
    line: int
    column: int
    filename: str

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"

    @property
    def kind(self) -> TokenKind:
        return classify(self.text)

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)


# =============================================================================
# Token Stream
# =============================================================================

class TokenStream:
    """
    Destructively consumed, sentinel-terminated sequence of token strings.

    One stream is created per parse and passed by reference through every
    recursive parser call; each call removes exactly the tokens of the
    construct it parses. When built by the tokenizer the stream also
    carries the source location of every token so that errors can point
    at the offending text.

    Usage:
        tokens = TokenStream(["IF", "true", "THEN", "move", "END", "IF"])
        tokens.front()     # 'IF'
        tokens.dequeue()   # 'IF'
        len(tokens)        # 6 (five tokens plus the sentinel)
    """

    def __init__(
        self,
        tokens: Iterable[str],
        locations: Optional[Iterable[SourceLocation]] = None,
        source_lines: Optional[list[str]] = None,
    ):
        """
        Initialize the stream.

        Args:
            tokens: Token strings in source order. END_OF_INPUT is appended
                when the sequence does not already end with it.
            locations: Source location of each token (optional, same
                length as tokens)
            source_lines: Original source lines for error context

        Raises:
            ValueError: If END_OF_INPUT appears before the last position,
                or locations do not line up with tokens
        """
        self._tokens: deque[str] = deque(tokens)
        if not self._tokens or self._tokens[-1] != END_OF_INPUT:
            self._tokens.append(END_OF_INPUT)
        if END_OF_INPUT in list(self._tokens)[:-1]:
            raise ValueError("END_OF_INPUT may only terminate a token stream")

        self._locations: Optional[deque[SourceLocation]] = None
        if locations is not None:
            self._locations = deque(locations)
            if len(self._locations) == len(self._tokens) - 1:
                last = self._locations[-1] if self._locations else None
                self._locations.append(last)
            if len(self._locations) != len(self._tokens):
                raise ValueError("one location is required per token")

        self.source_lines = source_lines or []
        self.last_location: Optional[SourceLocation] = None
        self.consumed = 0

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        preview = " ".join(list(self._tokens)[:6])
        return f"TokenStream({len(self._tokens)} tokens: {preview!r})"

    def length(self) -> int:
        """Number of tokens left, including the sentinel."""
        return len(self._tokens)

    def front(self) -> str:
        """Return the next token without removing it."""
        return self._tokens[0]

    def dequeue(self) -> str:
        """
        Remove and return the next token.

        Raises:
            IndexError: If the stream has been consumed past the sentinel
        """
        token = self._tokens.popleft()
        if self._locations is not None:
            self.last_location = self._locations.popleft()
        self.consumed += 1
        return token

    def at_end(self) -> bool:
        """True when only the sentinel (or nothing) remains."""
        return not self._tokens or self._tokens[0] == END_OF_INPUT

    def remaining(self) -> list[str]:
        """Return the unconsumed tokens, excluding the sentinel."""
        return [t for t in self._tokens if t != END_OF_INPUT]

    @property
    def location(self) -> Optional[SourceLocation]:
        """Location of the front token, if known."""
        if self._locations:
            return self._locations[0]
        return None

    def source_line(self, location: Optional[SourceLocation]) -> Optional[str]:
        """Get the source text of the line holding location."""
        if location is not None and 0 < location.line <= len(self.source_lines):
            return self.source_lines[location.line - 1]
        return None


# =============================================================================
# Tokenizer Implementation
# =============================================================================

class BLTokenizer:
    """
    Splits BL source text into tokens.

    Usage:
        tokenizer = BLTokenizer(source_text, filename)
        tokens = list(tokenizer.tokenize())

    Attributes:
        source: The source text being tokenized
        filename: Name of the source file (for error reporting)
    """

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source text, line by line.

        The END_OF_INPUT sentinel is not yielded; see tokenize() at module
        level for a ready-to-parse TokenStream.
        """
        for line_number, line in enumerate(self.source.splitlines(), start=1):
            yield from self._tokenize_line(line, line_number)

    def _tokenize_line(self, line: str, line_number: int) -> Iterator[Token]:
        pos = 0
        length = len(line)
        while pos < length:
            char = line[pos]
            if char.isspace():
                pos += 1
                continue
            if char == COMMENT_CHAR:
                return
            start = pos
            if char in WORD_CHARS:
                while pos < length and line[pos] in WORD_CHARS:
                    pos += 1
            else:
                pos += 1
            yield Token(line[start:pos], line_number, start + 1, self.filename)


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, filename: str = "<input>") -> TokenStream:
    """
    Tokenize BL source text into a TokenStream ready for parsing.

    Args:
        source: BL source text
        filename: Source filename for error messages

    Returns:
        A TokenStream terminated by END_OF_INPUT
    """
    tokens = list(BLTokenizer(source, filename).tokenize())
    logger.debug(f"Tokenized {filename}: {len(tokens)} tokens")
    return TokenStream(
        [t.text for t in tokens],
        locations=[t.location for t in tokens],
        source_lines=source.splitlines(),
    )


def read_source(path: str | Path, encoding: str = "utf-8") -> str:
    """
    Read BL source text from a file.

    Raises:
        FileNotFoundError: If the file does not exist
        BLInputError: If the file cannot be decoded
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise BLInputError(f"cannot decode {path} as {encoding}: {e.reason}") from e


def read_tokens(path: str | Path, encoding: str = "utf-8") -> TokenStream:
    """
    Read and tokenize a BL source file.

    Args:
        path: Path to the BL source file
        encoding: Text encoding of the file

    Returns:
        A TokenStream terminated by END_OF_INPUT

    Raises:
        FileNotFoundError: If the file does not exist
        BLInputError: If the file cannot be decoded
    """
    return tokenize(read_source(path, encoding), str(path))
