"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import AgentDecision, AgentResult

_DECISION_STYLES = {
    AgentDecision.ACCEPT: "green",
    AgentDecision.RETRY: "yellow",
    AgentDecision.REJECT: "red",
}


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (se omite en modos JSON/reporte)."""

    title = Text("CREDIFY", style="bold cyan")
    subtitle = Text("LinkedIn profile URL validation • existence probing", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_results_table() -> Table:
    table = Table(title="LinkedIn Profiles")
    table.add_column("URL", style="magenta", overflow="fold")
    table.add_column("Username", style="white")
    table.add_column("Decision", no_wrap=True)
    table.add_column("Confidence", justify="right")
    table.add_column("HTTP", justify="right", style="dim")
    table.add_column("Reason", style="dim")
    return table


def add_result_row(table: Table, *, url: str, result: AgentResult) -> None:
    style = _DECISION_STYLES[result.decision]
    status = result.metadata.http_status
    table.add_row(
        url,
        result.username or "-",
        Text(result.decision.value, style=style),
        f"{result.confidence:.2f}",
        str(status) if status is not None else "-",
        result.reason,
    )


def build_format_table() -> Table:
    table = Table(title="LinkedIn Profile URL Format")
    table.add_column("URL", style="magenta", overflow="fold")
    table.add_column("Format", no_wrap=True)
    return table


def add_format_row(table: Table, *, url: str, valid: bool) -> None:
    label = Text("valid", style="green") if valid else Text("invalid", style="red")
    table.add_row(url, label)
