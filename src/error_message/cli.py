from __future__ import annotations

import json
import sys
from contextlib import nullcontext
from typing import Any, NoReturn

import typer
from loguru import logger

from error_message.application.presentation import to_json, to_string
from error_message.config import Settings
from error_message.domain.codes import STATUS_BY_CODE, code_of, status_of
from error_message.domain.exceptions import DomainError
from error_message.factories import build
from error_message.infrastructure.context import (
    bind_request_id,
    current_request_context,
)

app = typer.Typer(
    name="error-message",
    help="Look up error codes and render error messages",
)

RANGES = {"3xx": 3, "4xx": 4, "5xx": 5}


def configure_logging(settings: Settings) -> None:
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)


def parse_details(raw: str | None) -> Any:
    """Decode the ``--details`` JSON argument or exit with code 2."""
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        typer.echo(f"Invalid details JSON: {exc.msg}", err=True)
        raise typer.Exit(2)


def fail(exc: DomainError) -> NoReturn:
    logger.debug("{} {}", exc.code, exc.context)
    typer.echo(exc.message, err=True)
    raise typer.Exit(1)


@app.command("status", help="Print the HTTP status registered for CODE")
def status(code: str) -> None:
    try:
        typer.echo(str(status_of(code)))
    except DomainError as exc:
        fail(exc)


@app.command("code", help="Print the error code registered for STATUS")
def code(http_status: int = typer.Argument(..., metavar="STATUS")) -> None:
    try:
        typer.echo(code_of(http_status).value)
    except DomainError as exc:
        fail(exc)


@app.command("codes", help="List registered error codes with their statuses")
def codes(
    status_range: str | None = typer.Option(
        None, "--range", "-r", help="Only list one range: 3xx, 4xx or 5xx"
    ),
) -> None:
    if status_range is not None and status_range not in RANGES:
        typer.echo("Range must be one of 3xx, 4xx, 5xx", err=True)
        raise typer.Exit(2)
    for error_code, http_status in STATUS_BY_CODE.items():
        if status_range and http_status // 100 != RANGES[status_range]:
            continue
        typer.echo(f"{error_code.value} {http_status}")


@app.command("render", help="Build an error and print it as a log line or JSON")
def render(
    error_code: str = typer.Argument(..., metavar="CODE"),
    message: str = typer.Argument(...),
    details: str | None = typer.Option(
        None, "--details", "-d", help="Details as a JSON document"
    ),
    request_id: str | None = typer.Option(
        None, "--request-id", help="Request identifier to include in JSON output"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the JSON rendering"),
) -> None:
    settings = Settings()
    payload = parse_details(details)
    try:
        error = build(error_code, message, payload)
    except DomainError as exc:
        fail(exc)

    with bind_request_id(request_id) if request_id else nullcontext():
        context = current_request_context()
        logger.debug("Rendering {} error", error.code.value)
        if as_json:
            typer.echo(to_json(error, context, indent=settings.json_indent))
        else:
            typer.echo(to_string(error, width=settings.pretty_width))


@app.callback()
def root() -> None:
    """Root command for error-message."""
    configure_logging(Settings())


def main() -> None:  # pragma: no cover - CLI entry point
    """Entrypoint for the CLI."""
    app()


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
