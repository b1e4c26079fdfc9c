"""CLI de credify (Typer + Rich).

Comandos:
- `credify check URL...`: valida formato y existencia de perfiles de LinkedIn.
- `credify doctor run`: diagnóstico del entorno.

La CLI es un llamador más de la fachada: el espaciado entre requests
(`--delay`) vive aquí, no en el Core.
"""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.json_exporter import export_results_json, results_payload
from cli import doctor
from cli.ui_components import (
    add_format_row,
    add_result_row,
    build_format_table,
    build_results_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.errors import ClientInitError
from core.domain.models import AgentDecision, AgentResult
from core.logging_config import configure
from core.services.projector import project
from core.services.report import format_report, render_report
from core.services.validation import LinkedInValidator, ValidationOutcome, inspect_profile_url
from core.shape import is_valid_profile_format

app = typer.Typer(no_args_is_help=True, help="Validate LinkedIn profile URLs (format and existence).")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid CREDIFY_* configuration:[/red]\n{escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    configure(level="DEBUG" if verbose else settings.log_level)


def _format_only(urls: List[str], *, as_json: bool, report: bool, banner: bool) -> bool:
    verdicts = [(url, is_valid_profile_format(url)) for url in urls]

    if as_json:
        payload = [{"url": url, "format_valid": valid} for url, valid in verdicts]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    elif report:
        typer.echo("\n\n".join(format_report(url) for url in urls))
    else:
        if banner:
            print_banner(_console)
        table = build_format_table()
        for url, valid in verdicts:
            add_format_row(table, url=url, valid=valid)
        _console.print(table)

    return all(valid for _, valid in verdicts)


def _validate_all(
    urls: List[str],
    *,
    settings: AppSettings,
    timeout: Optional[float],
    delay: float,
) -> list[ValidationOutcome]:
    validator: LinkedInValidator | None
    try:
        validator = LinkedInValidator(settings, timeout=timeout)
    except ClientInitError:
        # Each eligible URL will surface CLIENT_BUILD_ERROR on its own.
        validator = None

    outcomes: list[ValidationOutcome] = []
    probed_last = False
    try:
        for url in urls:
            eligible = is_valid_profile_format(url)
            if eligible and probed_last and delay > 0:
                time.sleep(delay)
            if validator is not None:
                outcomes.append(validator.inspect(url))
            else:
                outcomes.append(inspect_profile_url(url, settings=settings, timeout=timeout))
            probed_last = probed_last or eligible
    finally:
        if validator is not None:
            validator.close()
    return outcomes


@app.command()
def check(
    urls: List[str] = typer.Argument(..., help="LinkedIn profile URLs to validate."),
    format_only: bool = typer.Option(False, "--format-only", help="Only check URL shape, no network."),
    as_json: bool = typer.Option(False, "--json", help="Print agent results as JSON."),
    report: bool = typer.Option(False, "--report", help="Print the line-oriented LLM report."),
    timeout: Optional[float] = typer.Option(None, "--timeout", min=0.1, help="Per-request timeout (seconds)."),
    delay: Optional[float] = typer.Option(None, "--delay", min=0.0, help="Pause between network checks (seconds)."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write JSON results to this file."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Hide the banner."),
) -> None:
    """Validate one or more LinkedIn profile URLs. Exits with 1 if any is rejected."""

    if format_only:
        if not _format_only(urls, as_json=as_json, report=report, banner=not no_banner):
            raise typer.Exit(code=1)
        return

    settings = AppSettings()
    pause = settings.batch_delay_seconds if delay is None else delay
    outcomes = _validate_all(urls, settings=settings, timeout=timeout, delay=pause)
    results: list[AgentResult] = [project(o.result, o.shape) for o in outcomes]

    if as_json:
        typer.echo(json.dumps(results_payload(results), ensure_ascii=False, indent=2))
    elif report:
        typer.echo("\n\n".join(render_report(o) for o in outcomes))
    else:
        if not no_banner:
            print_banner(_console)
        table = build_results_table()
        for outcome, result in zip(outcomes, results):
            add_result_row(table, url=outcome.url, result=result)
        _console.print(table)

    if output is not None:
        path = export_results_json(results=results, output_path=output)
        if not as_json and not report:
            _console.print(f"[green]JSON saved to:[/green] {path}")

    if any(result.decision is AgentDecision.REJECT for result in results):
        raise typer.Exit(code=1)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
