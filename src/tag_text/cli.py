"""Command-line interface for Tag Text."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from tag_text import __version__
from tag_text.config import get_settings
from tag_text.formats import ANSIHandler, SUPPORTED_FORMATS, get_handler
from tag_text.formatting.diagnostics import DiagnosticCollector
from tag_text.formatting.parser import TagFormatParser
from tag_text.log import configure_logging, get_logger

app = typer.Typer(
    name="tag-text",
    help="Render overlapping tag markup such as <bold>hi</bold> as styled text.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Tag Text v{__version__}")
        raise typer.Exit()


def read_markup(text: str, from_file: bool) -> Optional[str]:
    """Return the markup to parse, reading it from a file if requested."""
    if not from_file:
        return text

    path = Path(text)
    if not path.is_file():
        err_console.print(f"[red]Error:[/red] File not found: {escape(text)}")
        return None
    return path.read_text(encoding="utf-8")


def report_diagnostics(diagnostics: DiagnosticCollector) -> None:
    """Print every collected diagnostic as a warning."""
    for message in diagnostics:
        err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}", soft_wrap=True)


@app.command()
def main(
    text: str = typer.Argument(
        ...,
        help="Tag markup to render, or a path when --file is given",
    ),
    from_file: bool = typer.Option(
        False,
        "--file",
        "-f",
        help="Treat TEXT as the path of a UTF-8 file containing the markup",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-F",
        help=f"Output format: {', '.join(SUPPORTED_FORMATS)} (default: ansi)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the rendering to this file instead of the terminal",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        "-s",
        help="Exit with status 1 if the markup produced any warnings",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Parse tag markup and render the styled result.

    Tags may overlap, and unknown, unbalanced or unclosed tags are
    reported as warnings instead of errors.

    Examples:

        tag-text "<italic>hello <green>world</green></italic>"

        tag-text "<bold>hi</bold>" --format json

        tag-text notes.txt --file --format markup -o notes-clean.txt

        tag-text "<red>oops" --strict  # exits 1 on the unclosed tag
    """
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    fmt = output_format or settings.default_format
    try:
        handler = get_handler(fmt)()
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    markup = read_markup(text, from_file)
    if markup is None:
        raise typer.Exit(1)

    if verbose:
        err_console.print(f"[blue]Format:[/blue] {handler.name}")
    logger.debug("Parsing %d characters of markup", len(markup))

    diagnostics = DiagnosticCollector()
    node = TagFormatParser().parse(markup, diagnostics)
    report_diagnostics(diagnostics)

    if output is not None:
        handler.write(node, output)
        err_console.print(f"[green]Success:[/green] {escape(str(output))}")
    elif isinstance(handler, ANSIHandler):
        console.print(handler.to_rich(node), soft_wrap=True)
    else:
        console.print(
            handler.render(node), markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    if diagnostics and (strict or settings.strict):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
