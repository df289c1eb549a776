"""
BL Abstract Syntax Tree (AST) Definitions
=========================================

This module defines the node types produced by the BL parsers.

Node Types
----------
Statement (closed union)
├── Block - ordered sequence of statements
├── If - IF condition THEN block END IF
├── IfElse - IF condition THEN block ELSE block END IF
├── While - WHILE condition DO block END WHILE
└── Call - call of a primitive or user-defined instruction

Program - name, instruction table (context) and main body block

Design Notes
------------
- All nodes are dataclasses; equality is structural.
- Statements do not share a base class. Consumers dispatch explicitly
  on the concrete type (see printer.py).
- Each node may carry the SourceLocation of its first token. Locations
  are excluded from equality and repr so that trees built from
  different sources compare equal when their structure matches.
- Call names are stored as written; resolution against primitives or
  the instruction table is left to consumers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Union

from bl_lang.errors import SourceLocation


# =============================================================================
# Conditions
# =============================================================================

class Condition(Enum):
    """
    Boolean conditions recognized by the BL grammar.

    The source spelling of each condition is its name in lowercase with
    underscores replaced by hyphens (NEXT_IS_EMPTY <-> next-is-empty).
    The tokenizer derives its condition vocabulary from this enumeration.
    """

    NEXT_IS_EMPTY = "next-is-empty"
    NEXT_IS_NOT_EMPTY = "next-is-not-empty"
    NEXT_IS_WALL = "next-is-wall"
    NEXT_IS_NOT_WALL = "next-is-not-wall"
    NEXT_IS_FRIEND = "next-is-friend"
    NEXT_IS_NOT_FRIEND = "next-is-not-friend"
    NEXT_IS_ENEMY = "next-is-enemy"
    NEXT_IS_NOT_ENEMY = "next-is-not-enemy"
    RANDOM = "random"
    TRUE = "true"

    @property
    def spelling(self) -> str:
        """Return the condition as written in BL source."""
        return self.value


# =============================================================================
# Statement Nodes
# =============================================================================

@dataclass
class Block:
    """
    Ordered sequence of zero or more statements.

    Attributes:
        statements: Child statements in source order
    """
    statements: list["Statement"] = field(default_factory=list)
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self) -> Iterator["Statement"]:
        return iter(self.statements)

    def append(self, statement: "Statement") -> None:
        """Add a statement at the end of the block."""
        self.statements.append(statement)


@dataclass
class If:
    """
    IF condition THEN block END IF.

    Attributes:
        condition: Condition tested before running the block
        then_block: Statements run when the condition holds
    """
    condition: Condition
    then_block: Block = field(default_factory=Block)
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)


@dataclass
class IfElse:
    """
    IF condition THEN block ELSE block END IF.

    Attributes:
        condition: Condition selecting the branch
        then_block: Statements run when the condition holds
        else_block: Statements run otherwise
    """
    condition: Condition
    then_block: Block = field(default_factory=Block)
    else_block: Block = field(default_factory=Block)
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)


@dataclass
class While:
    """
    WHILE condition DO block END WHILE.

    Attributes:
        condition: Condition checked before each iteration
        body: Loop body
    """
    condition: Condition
    body: Block = field(default_factory=Block)
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)


@dataclass
class Call:
    """
    Call of an instruction by name.

    Attributes:
        name: Instruction name (primitive or user-defined)
    """
    name: str
    location: Optional[SourceLocation] = field(default=None, compare=False, repr=False)


Statement = Union[Block, If, IfElse, While, Call]

STATEMENT_TYPES = (Block, If, IfElse, While, Call)


# =============================================================================
# Program Root Node
# =============================================================================

@dataclass
class Program:
    """
    A complete BL program.

    Attributes:
        name: Program name, or None for an empty program
        context: Instruction table mapping each user-defined instruction
            name to its body block
        body: Main body block
    """
    name: Optional[str] = None
    context: dict[str, Block] = field(default_factory=dict)
    body: Block = field(default_factory=Block)

    @property
    def is_empty(self) -> bool:
        """True for the program produced from an empty token stream."""
        return self.name is None and not self.context and not self.body.statements

    def statement_count(self) -> int:
        """Count the CALL, IF, IF-ELSE and WHILE statements in the program."""
        blocks = list(self.context.values()) + [self.body]
        return sum(
            1
            for block in blocks
            for node in iter_statements(block)
            if not isinstance(node, Block)
        )


# =============================================================================
# Traversal
# =============================================================================

def child_blocks(statement: Statement) -> list[Block]:
    """Return the blocks directly nested in a non-Block statement."""
    if isinstance(statement, If):
        return [statement.then_block]
    if isinstance(statement, IfElse):
        return [statement.then_block, statement.else_block]
    if isinstance(statement, While):
        return [statement.body]
    return []


def iter_statements(node: Statement) -> Iterator[Statement]:
    """
    Walk a statement tree in pre-order.

    Yields the node itself first, then every nested statement in source
    order. Blocks nested inside IF/WHILE statements are yielded as nodes
    too, so an If with a one-call body yields If, Block, Call.
    """
    yield node
    if isinstance(node, Block):
        for child in node.statements:
            yield from iter_statements(child)
    elif isinstance(node, STATEMENT_TYPES):
        for block in child_blocks(node):
            yield from iter_statements(block)
    else:
        raise TypeError(f"not a BL statement: {type(node).__name__}")
