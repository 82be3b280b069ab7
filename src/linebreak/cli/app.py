"""CLI application entry point for linebreak.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from linebreak import __version__
from linebreak.cli.output import (
    console,
    print_error,
    print_header,
    print_lines,
    print_step,
    print_summary,
    print_text_info,
)
from linebreak.config import (
    BreakerConfig,
    LineBreakSettings,
    LoggingConfig,
    Options,
)
from linebreak.core import LineBreaker, resolve_algorithm
from linebreak.domain import Direction
from linebreak.exceptions import InvalidDirectionError, LineBreakError, TextLoadError
from linebreak.io import TextReader, render_lines
from linebreak.utils import configure_logging

app = typer.Typer(
    name="linebreak",
    help="Break plain text into evenly spaced lines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Linebreak[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_direction(value: str) -> Direction:
    """Parse a direction given on the command line.

    Raises:
        InvalidDirectionError: If the value is not ltr or rtl
    """
    try:
        return Direction(value.strip().lower())
    except ValueError:
        raise InvalidDirectionError(value) from None


@app.command()
def linebreak(
    input_text: Annotated[
        Path,
        typer.Argument(
            help="Path to a UTF-8 text file, one paragraph per line",
            show_default=False,
        ),
    ],
    width: Annotated[
        float,
        typer.Option(
            "--width",
            "-w",
            help="Line width in characters",
        ),
    ] = 40.0,
    algorithm: Annotated[
        str,
        typer.Option(
            "--algorithm",
            "-a",
            help="Line-breaking algorithm (knuth_plass|greedy)",
        ),
    ] = "knuth_plass",
    direction: Annotated[
        str,
        typer.Option(
            "--direction",
            "-d",
            help="Dominant text direction (ltr|rtl)",
        ),
    ] = "ltr",
    glue: Annotated[
        float,
        typer.Option(
            "--glue",
            help="Nominal space between words",
            min=0.0,
        ),
    ] = 1.0,
    shrink: Annotated[
        float,
        typer.Option(
            "--shrink",
            help="How much a space may shrink",
            min=0.0,
        ),
    ] = 0.0,
    expand: Annotated[
        float,
        typer.Option(
            "--expand",
            help="How much a space may expand",
            min=0.0,
        ),
    ] = 1.0,
    stats: Annotated[
        bool,
        typer.Option(
            "--stats",
            help="Print a breaking summary",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output, including logs",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Print only the broken text",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Break the paragraphs of a text file into lines.

    Every line of the input file is a paragraph, and words are separated by
    spaces. Words are measured in characters.

    Example:
        linebreak alice.txt --width 40 --algorithm greedy
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        text_direction = parse_direction(direction)
        chosen = resolve_algorithm(algorithm)
        settings = LineBreakSettings(
            options=Options(
                text_width=width,
                text_direction=text_direction,
                glue_width=glue,
                glue_shrink=shrink,
                glue_expand=expand,
            ),
            breaker=BreakerConfig(algorithm=chosen),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level,
            ),
        )
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        print_error(f"Invalid option {field}: {error['msg']}")
        raise typer.Exit(code=1)
    except LineBreakError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if log_file is not None or verbose:
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=not verbose,
        )

    try:
        reader = TextReader(input_text)
        reader.load()

        if not quiet:
            print_header(__version__)
            print_text_info(
                text_path=str(input_text),
                paragraph_count=reader.paragraph_count,
                text_width=settings.options.text_width,
                algorithm=chosen.value,
            )
            print_step("Breaking")
            console.print()

        breaker = LineBreaker(settings)
        for words in reader.iter_paragraphs():
            lines = breaker.break_paragraph(words)
            print_lines(render_lines(lines))

        if stats and not quiet:
            print_summary(breaker.stats)

    except TextLoadError as e:
        print_error(f"Could not load text: {e.reason}")
        raise typer.Exit(code=1)
    except LineBreakError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
