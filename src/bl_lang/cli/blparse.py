"""
blparse - BL Parser Command-Line Interface
==========================================

Parses BL source files and prints them back in canonical form, which
makes the tool double as a syntax checker and a formatter.

Usage Examples
--------------
Check and pretty-print a program:
    $ blparse program maze.bl

Write the formatted program to a file:
    $ blparse program maze.bl -o maze-formatted.bl

Show the parsed tree instead:
    $ blparse program --ast maze.bl

Parse a single statement, or a whole block of statements:
    $ blparse statement snippet.bl
    $ blparse statement --block snippet.bl

List tokens with their classification:
    $ blparse tokens maze.bl

Exit Codes
----------
0 - Success
1 - BL syntax error (the first violation is reported)
2 - Invalid arguments or missing file
3 - Internal error
"""

from pathlib import Path
from typing import Optional
import logging

import click

from bl_lang import __version__
from bl_lang.cli.errors import handle_cli_exception
from bl_lang.config import BLConfig
from bl_lang.language import (
    BLTokenizer,
    dump_tree,
    format_program,
    format_statement,
    parse,
    parse_block,
    parse_statement,
    read_source,
    read_tokens,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Stores the configuration and verbosity for every sub-command.
    """

    def __init__(self) -> None:
        self.config = BLConfig.from_env()
        self.verbose: bool = False

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        self.config.setup_logging(self.verbose)


pass_context = click.make_pass_decorator(Context, ensure=True)


def resolve_input(input_file: Optional[Path], what: str) -> Path:
    """Return the input file, prompting for its name when not given."""
    if input_file is not None:
        return input_file
    return click.prompt(
        f"Enter valid BL {what} file name",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
    )


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.option(
    "--indent",
    type=click.IntRange(min=1),
    default=None,
    help="Spaces per nesting level in printed output (default: 4)",
)
@click.version_option(version=__version__, prog_name="blparse")
@pass_context
def main(ctx: Context, verbose: bool, indent: Optional[int]) -> None:
    """
    Parse and pretty-print BL programs.

    Every command stops at the first syntax error and reports it with
    its location in the source file.
    """
    ctx.verbose = verbose
    if indent is not None:
        ctx.config.indent_size = indent
    ctx.setup_logging()


# =============================================================================
# Program Command
# =============================================================================

@main.command("program")
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the formatted program to this file instead of stdout",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the parsed tree instead of BL source",
)
@pass_context
def program_command(
    ctx: Context,
    input_file: Optional[Path],
    output: Optional[Path],
    ast: bool,
) -> None:
    """
    Parse a BL program and print it in canonical form.

    INPUT_FILE is the BL program to parse; it is prompted for when
    omitted.
    """
    input_file = resolve_input(input_file, "program")

    try:
        if ctx.verbose:
            click.echo(f"Parsing {input_file}...")

        tokens = read_tokens(input_file, ctx.config.encoding)
        program = parse(tokens)

        if ctx.verbose:
            click.echo(
                f"Parsed: {len(program.context)} instructions, "
                f"{program.statement_count()} statements"
            )

        if ast:
            click.echo(dump_tree(program))
            return

        text = format_program(program, ctx.config.indent_size)
        if output is not None:
            output.write_text(text, encoding=ctx.config.encoding)
            click.echo(f"Formatted {input_file} -> {output}")
        else:
            click.echo(text, nl=False)

    except Exception as e:
        handle_cli_exception(e, ctx.verbose)


# =============================================================================
# Statement Command
# =============================================================================

@main.command("statement")
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--block",
    is_flag=True,
    help="Parse a block of statements instead of a single statement",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the parsed tree instead of BL source",
)
@pass_context
def statement_command(
    ctx: Context,
    input_file: Optional[Path],
    block: bool,
    ast: bool,
) -> None:
    """
    Parse a BL statement (or block) and print it in canonical form.

    INPUT_FILE holds the statement text; it is prompted for when
    omitted. Tokens after the parsed statement are reported but not
    treated as an error.
    """
    input_file = resolve_input(input_file, "statement(s)")

    try:
        tokens = read_tokens(input_file, ctx.config.encoding)
        statement = parse_block(tokens) if block else parse_statement(tokens)

        if ast:
            click.echo(dump_tree(statement))
        else:
            click.echo(format_statement(statement, indent_size=ctx.config.indent_size), nl=False)

        leftover = tokens.remaining()
        if leftover:
            kind = "block" if block else "statement"
            click.echo(
                f"Warning: {len(leftover)} token(s) after the {kind} were not parsed, "
                f"starting at '{leftover[0]}'",
                err=True,
            )

    except Exception as e:
        handle_cli_exception(e, ctx.verbose)


# =============================================================================
# Tokens Command
# =============================================================================

@main.command("tokens")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@pass_context
def tokens_command(ctx: Context, input_file: Path) -> None:
    """
    List the tokens of a BL source file.

    Each line shows the token location, its kind and its text.
    """
    try:
        source = read_source(input_file, ctx.config.encoding)
        count = 0
        for token in BLTokenizer(source, str(input_file)).tokenize():
            click.echo(f"{token.line}:{token.column}\t{token.kind.name}\t{token.text}")
            count += 1
        logger.debug(f"Listed {count} tokens from {input_file}")

    except Exception as e:
        handle_cli_exception(e, ctx.verbose)


if __name__ == "__main__":
    main()
