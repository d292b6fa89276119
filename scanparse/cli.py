import logging

import click

from scanparse import __version__
from scanparse.driver import (
    OUTPUT_FORMATS,
    format_result,
    format_tokens,
    process_lines,
    read_lines,
)


@click.command()
@click.version_option(version=__version__, prog_name="scanparse")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    help="Print the applied productions, or the parse tree level by level. "
    "[default: steps]",
)
@click.option(
    "--tokens",
    "show_tokens",
    is_flag=True,
    help="Only list the tokens of each line. Cannot be combined with --format.",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Highlight errors. Defaults to highlighting when writing to a terminal.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def cli(file, output_format, show_tokens, color, verbose):
    """Derive every line of FILE from the arithmetic expression grammar."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if show_tokens and output_format:
        raise click.UsageError("--tokens cannot be combined with --format.")
    output_format = output_format or "steps"

    try:
        lines = read_lines(file)
    except (OSError, UnicodeDecodeError) as e:
        raise click.FileError(file, hint=str(e))

    if show_tokens:
        blocks = (format_tokens(line, line_no) for line_no, line in enumerate(lines, 1))
    else:
        blocks = (
            format_result(result, output_format) for result in process_lines(lines)
        )

    # Every line is followed by an empty line, empty input lines give just that
    for block in blocks:
        if block:
            click.echo(block, color=color)
        click.echo()
