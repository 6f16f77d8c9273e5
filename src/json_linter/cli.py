"""Command-line interface for the JSON Linter."""

import logging
import sys
import click
from . import __version__
from .json_formatter import JSONFormatter
from .types import DEFAULT_INDENT_WIDTH, JSONLintError


@click.command()
@click.version_option(version=__version__)
@click.argument('json_text')
@click.option('--indent', '-n', default=DEFAULT_INDENT_WIDTH, show_default=True,
              type=click.IntRange(min=0), help='Spaces per indentation level')
@click.option('--raw-strings', is_flag=True,
              help='Write string contents verbatim instead of re-escaping them')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--profile', is_flag=True, help='Print per-stage timings to stderr')
def main(json_text: str, indent: int, raw_strings: bool, verbose: bool, profile: bool):
    """Validate JSON_TEXT and print it pretty-printed.

    Pass - as JSON_TEXT to read the text from standard input.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if json_text == '-':
        json_text = click.get_text_stream('stdin').read()

    formatter = JSONFormatter(
        default_indent_width=indent,
        escape_strings=not raw_strings,
        enable_profiling=profile,
    )

    try:
        output = formatter.pretty_json(json_text)
    except JSONLintError as e:
        click.echo(f"Error: {e.message}", err=True)
        if verbose:
            response = formatter.error_handler.handle_error(e)
            click.echo(f"Hint: {response.suggested_action}", err=True)
        sys.exit(1)
    finally:
        if profile:
            click.echo(formatter.profiler.export_metrics("summary"), err=True)

    click.echo(output)


if __name__ == '__main__':
    main()
