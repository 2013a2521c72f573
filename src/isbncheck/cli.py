"""Command-line driver: validate each argument as an ISBN."""

import logging
from typing import Annotated

import typer

from isbncheck.config import get_settings
from isbncheck.core.exceptions import IsbnParseError
from isbncheck.core.identifiers import Isbn

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Validate ISBN-10 and ISBN-13 identifiers.",
)


def _configure_logging(level: str) -> None:
    level = level.upper()
    if level not in logging.getLevelNamesMapping():
        raise typer.BadParameter(f"Unknown log level: {level}", param_hint="--log-level")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger().setLevel(level)


@app.command()
def check(
    candidates: Annotated[
        list[str] | None,
        typer.Argument(help="Strings to validate. Pass after -- if one starts with '-'.", show_default=False),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option("--strict/--no-strict", help="Exit with status 1 if any candidate is invalid.", show_default=False),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Override the configured logging level.", show_default=False),
    ] = None,
) -> None:
    """Print 'Valid: ...' or 'Invalid: ...' for each candidate, in order."""
    settings = get_settings()
    _configure_logging(log_level or settings.log_level)
    if strict is None:
        strict = settings.strict

    invalid = 0
    for candidate in candidates or []:
        match Isbn.try_parse(candidate):
            case Isbn() as isbn:
                typer.echo(f"Valid: {isbn}")
            case IsbnParseError() as error:
                invalid += 1
                typer.echo(f"Invalid: {error}")

    total = len(candidates or [])
    logger.info(f"Checked {total} candidate(s), {invalid} invalid")

    if strict and invalid:
        raise typer.Exit(code=1)


def main() -> None:
    app()
