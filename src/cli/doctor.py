"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file
from core.domain.errors import ClientInitError
from core.fingerprints import resolve_table

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

_CONNECTIVITY_URL = "https://www.linkedin.com/"


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except ClientInitError as exc:
        return False, exc.message
    except httpx.HTTPError as exc:
        return False, f"{type(exc).__name__}: {exc}"


def _check_fingerprints(settings: AppSettings) -> tuple[bool, str]:
    source = str(settings.fingerprints_path) if settings.fingerprints_path else "built-in"
    try:
        table = resolve_table(settings.fingerprints_path)
    except (OSError, ValueError) as exc:
        return False, f"{source}: {exc}"
    return True, f"{len(table.rules)} rules ({source})"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Credify Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row("User config", "OK", str(get_user_env_file()))
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Proxy", "OK" if settings.proxy else "OPTIONAL", settings.proxy or "direct connection")

    ok_fp, detail_fp = _check_fingerprints(settings)
    table.add_row("Fingerprints", "OK" if ok_fp else "FAIL", detail_fp)

    # Connectivity (best-effort). 999 means reachable but flagged as a bot.
    ok_http, detail_http = asyncio.run(_check_http(_CONNECTIVITY_URL, settings))
    table.add_row("LinkedIn connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if ok_http and detail_http.endswith("999"):
        _console.print(
            "\n[yellow]Note:[/yellow] LinkedIn answered 999 (bot detection). "
            "Expect AUTH_REQUIRED results; space out batch checks with --delay."
        )
    if not ok_fp:
        raise typer.Exit(code=1)
