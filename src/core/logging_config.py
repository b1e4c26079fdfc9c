"""Configuración de logging (stdlib logging + handler de Rich).

Por qué aquí y solo aquí:
- Módulo hoja: únicamente la CLI llama a `configure`. Quien use el Core como
  librería conserva su propia configuración de logging.
- El resto de módulos solo hace `logging.getLogger(__name__)`.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_NOISY_LOGGERS = ("httpx", "httpcore")


def configure(level: str = "WARNING") -> None:
    """Configura el logger raíz con un handler de Rich sobre stderr."""

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
