"""
BL Statement Parser
===================

Recursive descent parser for BL statements and blocks.

Grammar
-------
block       ::= statement*
statement   ::= if_stmt | while_stmt | call
if_stmt     ::= 'IF' CONDITION 'THEN' block ('ELSE' block)? 'END' 'IF'
while_stmt  ::= 'WHILE' CONDITION 'DO' block 'END' 'WHILE'
call        ::= IDENTIFIER

parse_block() and parse_statement() call each other: a block is a run of
statements, and IF/WHILE statements contain blocks. One token of
lookahead selects every production. A block ends at the first token that
cannot start a statement (ELSE, END, END_OF_INPUT, ...), which makes an
empty block legal anywhere a block is expected.

Both functions consume exactly the tokens of the construct they parse
and leave the stream positioned right after it. Any grammar violation
raises a BLSyntaxError; nothing is recovered.

Example Usage
-------------
>>> from bl_lang.language.tokenizer import tokenize
>>> from bl_lang.language.statement_parser import parse_statement
>>> parse_statement(tokenize("IF next-is-empty THEN move ELSE skip END IF"))
IfElse(condition=<Condition.NEXT_IS_EMPTY: 'next-is-empty'>, ...)
"""

from bl_lang.errors import InternalConsistencyError, UnexpectedTokenError
from bl_lang.language.ast import Block, Call, Condition, If, IfElse, Statement, While
from bl_lang.language.expect import (
    expect_condition,
    expect_keyword,
    require_content,
)
from bl_lang.language.tokenizer import TokenStream, is_identifier


def parse_condition(condition: str) -> Condition:
    """
    Convert a condition spelling into its Condition constant.

    'next-is-not-wall' maps to Condition.NEXT_IS_NOT_WALL.

    Raises:
        InternalConsistencyError: If the spelling passed condition
            classification but has no Condition constant
    """
    try:
        return Condition[condition.replace("-", "_").upper()]
    except KeyError:
        raise InternalConsistencyError(
            f"condition '{condition}' has no Condition constant"
        ) from None


def is_statement_start(token: str) -> bool:
    """Return True if token can begin a statement."""
    return token == "IF" or token == "WHILE" or is_identifier(token)


# =============================================================================
# Statement Forms
# =============================================================================

def _parse_if(tokens: TokenStream) -> Statement:
    """Parse IF ... END IF into an If or IfElse node."""
    location = tokens.location
    expect_keyword(tokens, "IF", "Expected IF")
    condition = parse_condition(expect_condition(tokens))
    expect_keyword(tokens, "THEN", "Expected THEN")

    require_content(tokens, "Termination is not allowed")
    then_block = parse_block(tokens)

    require_content(tokens, "Expected ELSE or END IF")
    if tokens.front() not in ("ELSE", "END"):
        found_at = tokens.location
        raise UnexpectedTokenError(
            "Expected ELSE or END IF",
            found=tokens.front(),
            location=found_at,
            source_line=tokens.source_line(found_at),
        )

    if tokens.front() == "ELSE":
        tokens.dequeue()
        require_content(tokens, "Termination is not allowed")
        else_block = parse_block(tokens)
        expect_keyword(tokens, "END", "Expected END IF")
        expect_keyword(tokens, "IF", "Expected END IF")
        return IfElse(condition, then_block, else_block, location=location)

    tokens.dequeue()
    expect_keyword(tokens, "IF", "Expected END IF")
    return If(condition, then_block, location=location)


def _parse_while(tokens: TokenStream) -> While:
    """Parse WHILE ... END WHILE into a While node."""
    location = tokens.location
    expect_keyword(tokens, "WHILE", "Expected WHILE")
    condition = parse_condition(expect_condition(tokens))
    expect_keyword(tokens, "DO", "Expected DO")

    require_content(tokens, "Termination is not allowed")
    body = parse_block(tokens)

    expect_keyword(tokens, "END", "Expected WHILE")
    expect_keyword(tokens, "WHILE", "Expected WHILE")
    return While(condition, body, location=location)


def _parse_call(tokens: TokenStream) -> Call:
    """Parse an instruction call; the caller has checked the identifier."""
    location = tokens.location
    return Call(tokens.dequeue(), location=location)


# =============================================================================
# Public API
# =============================================================================

def parse_statement(tokens: TokenStream) -> Statement:
    """
    Parse one statement from the front of tokens.

    Args:
        tokens: Token stream whose front is IF, WHILE or an identifier

    Returns:
        An If, IfElse, While or Call node

    Raises:
        PrematureEndError: If the stream is already exhausted
        UnexpectedTokenError: If the front token cannot start a statement
        BLSyntaxError: If the statement is malformed
    """
    require_content(tokens, "Expected a statement")
    front = tokens.front()

    if front == "IF":
        return _parse_if(tokens)
    if front == "WHILE":
        return _parse_while(tokens)
    if is_identifier(front):
        return _parse_call(tokens)

    location = tokens.location
    raise UnexpectedTokenError(
        "Expected IF, WHILE or an instruction call",
        found=front,
        location=location,
        source_line=tokens.source_line(location),
    )


def parse_block(tokens: TokenStream) -> Block:
    """
    Parse a possibly empty sequence of statements.

    Statements are parsed while the front token can start one; the first
    token that cannot is left in the stream for the caller to check.

    Args:
        tokens: Token stream positioned at the start of the block

    Returns:
        A Block holding the statements in source order
    """
    block = Block(location=tokens.location)
    while is_statement_start(tokens.front()):
        block.append(parse_statement(tokens))
    return block
