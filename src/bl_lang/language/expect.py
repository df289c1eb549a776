"""
Grammar Checks
==============

Token-level checks shared by the statement and program parsers. Each
check consumes the token it inspects and raises the matching BLSyntaxError
when the grammar is violated, so a parser reads as a flat sequence of
expectations:

    expect_keyword(tokens, "PROGRAM", "BL file must start with PROGRAM")
    name = expect_identifier(tokens, "The program name must be an identifier")
    expect_keyword(tokens, "IS", "BL file must start with PROGRAM programName IS")

A check that finds END_OF_INPUT where a token was required raises
PrematureEndError with the same message it would have used for a wrong
token; the sentinel itself is never consumed.
"""

from bl_lang.errors import (
    ClosingNameMismatchError,
    InvalidConditionError,
    InvalidIdentifierError,
    PrematureEndError,
    UnexpectedTokenError,
)
from bl_lang.language.tokenizer import TokenStream, is_condition, is_identifier


def require_content(tokens: TokenStream, message: str) -> None:
    """
    Fail if the stream is exhausted.

    Raises:
        PrematureEndError: If the front token is END_OF_INPUT
    """
    if tokens.at_end():
        location = tokens.last_location
        raise PrematureEndError(message, location, tokens.source_line(location))


def expect_keyword(tokens: TokenStream, keyword: str, message: str) -> str:
    """
    Consume the front token and require it to equal keyword.

    Returns:
        The consumed keyword

    Raises:
        PrematureEndError: If the stream is exhausted
        UnexpectedTokenError: If the token is not keyword
    """
    require_content(tokens, message)
    location = tokens.location
    token = tokens.dequeue()
    if token != keyword:
        raise UnexpectedTokenError(
            message,
            found=token,
            expected=keyword,
            location=location,
            source_line=tokens.source_line(location),
        )
    return token


def expect_identifier(tokens: TokenStream, message: str) -> str:
    """
    Consume the front token and require it to be an identifier.

    Returns:
        The identifier

    Raises:
        PrematureEndError: If the stream is exhausted
        InvalidIdentifierError: If the token is not an identifier
    """
    require_content(tokens, message)
    location = tokens.location
    token = tokens.dequeue()
    if not is_identifier(token):
        raise InvalidIdentifierError(
            message,
            found=token,
            location=location,
            source_line=tokens.source_line(location),
        )
    return token


def expect_closing_name(tokens: TokenStream, name: str, message: str) -> str:
    """
    Consume the front token and require it to repeat an opening name.

    Raises:
        PrematureEndError: If the stream is exhausted
        ClosingNameMismatchError: If the token differs from name
    """
    require_content(tokens, message)
    location = tokens.location
    token = tokens.dequeue()
    if token != name:
        raise ClosingNameMismatchError(
            message,
            expected_name=name,
            found=token,
            location=location,
            source_line=tokens.source_line(location),
        )
    return token


def expect_condition(tokens: TokenStream) -> str:
    """
    Consume the front token and require it to be a condition name.

    Returns:
        The condition spelling as written

    Raises:
        PrematureEndError: If the stream is exhausted
        InvalidConditionError: If the token is not a condition
    """
    require_content(tokens, "Expected condition")
    location = tokens.location
    token = tokens.dequeue()
    if not is_condition(token):
        raise InvalidConditionError(
            token,
            location=location,
            source_line=tokens.source_line(location),
        )
    return token
