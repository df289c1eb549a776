# =============================================================================
# test_tokenizer.py - Tokenizer Unit Tests
# =============================================================================
# Tests for the BL tokenizer, its classification predicates and the
# sentinel-terminated TokenStream consumed by the parsers.
#
# Test coverage includes:
#   - Splitting rules: whitespace, word runs, single punctuation, comments
#   - Token locations
#   - Keyword / condition / identifier classification
#   - TokenStream operations and sentinel handling
#   - Reading source files
# =============================================================================

import pytest

from bl_lang.errors import BLInputError
from bl_lang.language.ast import Condition
from bl_lang.language.tokenizer import (
    CONDITIONS,
    END_OF_INPUT,
    KEYWORDS,
    BLTokenizer,
    TokenKind,
    TokenStream,
    classify,
    is_condition,
    is_identifier,
    is_keyword,
    is_primitive_instruction,
    read_source,
    read_tokens,
    tokenize,
)


# =============================================================================
# Helper Function
# =============================================================================

def texts(source: str) -> list[str]:
    """Tokenize source and return the token strings without the sentinel."""
    return [t.text for t in BLTokenizer(source, "<test>").tokenize()]


# =============================================================================
# Splitting Rules
# =============================================================================

class TestSplitting:
    """Test how source text is split into tokens."""

    def test_empty_source(self):
        """Empty source produces no tokens."""
        assert texts("") == []

    def test_whitespace_only(self):
        """Blank lines and tabs produce no tokens."""
        assert texts("   \n\t  \n") == []

    def test_program_header(self):
        """Words are separated by whitespace."""
        assert texts("PROGRAM Foo IS") == ["PROGRAM", "Foo", "IS"]

    def test_hyphenated_words(self):
        """Hyphens are part of a word."""
        assert texts("IF next-is-not-wall THEN") == ["IF", "next-is-not-wall", "THEN"]

    def test_punctuation_is_split(self):
        """Characters outside words become single-character tokens."""
        assert texts("move;(skip)") == ["move", ";", "(", "skip", ")"]

    def test_comment_skipped(self):
        """A '#' comment runs to the end of the line."""
        assert texts("move # go forward\nskip") == ["move", "skip"]

    def test_comment_only_line(self):
        """A line holding only a comment produces no tokens."""
        assert texts("# header comment\n") == []

    def test_multiline(self):
        """Tokens are collected across lines in order."""
        source = "WHILE true DO\n    move\nEND WHILE\n"
        assert texts(source) == ["WHILE", "true", "DO", "move", "END", "WHILE"]


class TestLocations:
    """Test token line and column tracking."""

    def test_first_token(self):
        """The first token starts at line 1, column 1."""
        token = next(BLTokenizer("move", "a.bl").tokenize())
        assert (token.line, token.column, token.filename) == (1, 1, "a.bl")

    def test_indented_token(self):
        """Columns are 1-indexed and count leading blanks."""
        tokens = list(BLTokenizer("BEGIN\n    move\n", "a.bl").tokenize())
        assert tokens[1].text == "move"
        assert (tokens[1].line, tokens[1].column) == (2, 5)

    def test_location_property(self):
        """Token.location formats as file:line:column."""
        tokens = list(BLTokenizer("IF true", "b.bl").tokenize())
        assert str(tokens[1].location) == "b.bl:1:4"


# =============================================================================
# Classification
# =============================================================================

class TestClassification:
    """Test keyword, condition and identifier predicates."""

    def test_keywords(self):
        """All BL keywords are recognized and are case-sensitive."""
        for keyword in ("PROGRAM", "IS", "BEGIN", "END", "INSTRUCTION",
                        "IF", "THEN", "ELSE", "WHILE", "DO"):
            assert is_keyword(keyword)
        assert not is_keyword("if")
        assert len(KEYWORDS) == 10

    def test_conditions_match_enumeration(self):
        """Every Condition constant has exactly one condition spelling."""
        assert CONDITIONS == {c.spelling for c in Condition}
        assert is_condition("next-is-empty")
        assert is_condition("random")
        assert not is_condition("NEXT_IS_EMPTY")

    def test_identifiers(self):
        """Identifiers start with a letter and may contain digits and hyphens."""
        for name in ("move", "Foo", "turn-around", "step2", "a"):
            assert is_identifier(name), name

    def test_non_identifiers(self):
        """Keywords, conditions and malformed words are not identifiers."""
        for text in ("IF", "END", "true", "next-is-wall", "2step", "-x", "", ";", END_OF_INPUT):
            assert not is_identifier(text), text

    def test_primitive_instructions(self):
        """The built-in instruction names are recognized."""
        for name in ("move", "turnleft", "turnright", "infect", "skip"):
            assert is_primitive_instruction(name)
        assert not is_primitive_instruction("jump")

    def test_classify(self):
        """classify() returns the TokenKind of a string."""
        assert classify("WHILE") == TokenKind.KEYWORD
        assert classify("true") == TokenKind.CONDITION
        assert classify("move") == TokenKind.IDENTIFIER
        assert classify("123") == TokenKind.ERROR

    def test_token_kind(self):
        """Tokens expose their classification."""
        kinds = [t.kind for t in BLTokenizer("IF random THEN x ;").tokenize()]
        assert kinds == [
            TokenKind.KEYWORD,
            TokenKind.CONDITION,
            TokenKind.KEYWORD,
            TokenKind.IDENTIFIER,
            TokenKind.ERROR,
        ]


# =============================================================================
# TokenStream
# =============================================================================

class TestTokenStream:
    """Test the sentinel-terminated token stream."""

    def test_sentinel_appended(self):
        """A stream built from plain strings ends with END_OF_INPUT."""
        tokens = TokenStream(["move", "skip"])
        assert len(tokens) == 3
        assert tokens.remaining() == ["move", "skip"]

    def test_sentinel_not_duplicated(self):
        """An explicit trailing sentinel is kept as the only one."""
        tokens = TokenStream(["move", END_OF_INPUT])
        assert len(tokens) == 2

    def test_sentinel_mid_stream_rejected(self):
        """END_OF_INPUT may not appear before the end."""
        with pytest.raises(ValueError):
            TokenStream(["move", END_OF_INPUT, "skip"])

    def test_front_and_dequeue(self):
        """front() peeks, dequeue() removes."""
        tokens = TokenStream(["move", "skip"])
        assert tokens.front() == "move"
        assert tokens.front() == "move"
        assert tokens.dequeue() == "move"
        assert tokens.front() == "skip"
        assert tokens.length() == 2
        assert tokens.consumed == 1

    def test_at_end(self):
        """at_end() is True once only the sentinel remains."""
        tokens = TokenStream(["move"])
        assert not tokens.at_end()
        tokens.dequeue()
        assert tokens.at_end()
        assert tokens.front() == END_OF_INPUT

    def test_empty_stream(self):
        """An empty stream holds just the sentinel."""
        tokens = TokenStream([])
        assert len(tokens) == 1
        assert tokens.at_end()
        assert tokens.location is None

    def test_locations_must_line_up(self):
        """A location list of the wrong length is rejected."""
        tokenized = list(BLTokenizer("move skip").tokenize())
        with pytest.raises(ValueError):
            TokenStream(["move", "skip"], locations=[tokenized[0].location])

    def test_location_tracking(self):
        """The stream reports the front location and the last consumed one."""
        tokens = tokenize("BEGIN\n  move", "c.bl")
        assert str(tokens.location) == "c.bl:1:1"
        tokens.dequeue()
        assert str(tokens.last_location) == "c.bl:1:1"
        assert str(tokens.location) == "c.bl:2:3"

    def test_source_line(self):
        """source_line() returns the text of a location's line."""
        tokens = tokenize("BEGIN\n  move", "c.bl")
        tokens.dequeue()
        assert tokens.source_line(tokens.location) == "  move"
        assert tokens.source_line(None) is None


# =============================================================================
# Convenience Functions
# =============================================================================

class TestTokenize:
    """Test tokenize() and file reading."""

    def test_tokenize_returns_stream(self):
        """tokenize() produces a ready-to-parse stream."""
        tokens = tokenize("PROGRAM Hello IS BEGIN move END Hello")
        assert tokens.front() == "PROGRAM"
        assert len(tokens) == 8

    def test_tokenize_empty(self):
        """Empty source tokenizes to the sentinel alone."""
        tokens = tokenize("")
        assert tokens.at_end()

    def test_read_tokens(self, tmp_path):
        """read_tokens() tokenizes a file and records its name."""
        path = tmp_path / "prog.bl"
        path.write_text("PROGRAM P IS\nBEGIN\nEND P\n")
        tokens = read_tokens(path)
        assert tokens.remaining() == ["PROGRAM", "P", "IS", "BEGIN", "END", "P"]
        assert tokens.location.filename == str(path)

    def test_read_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_tokens(tmp_path / "missing.bl")

    def test_read_undecodable_file(self, tmp_path):
        """Bytes that do not decode raise BLInputError."""
        path = tmp_path / "bad.bl"
        path.write_bytes(b"PROGRAM \xff\xfe IS")
        with pytest.raises(BLInputError):
            read_source(path, "utf-8")
