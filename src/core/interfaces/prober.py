"""Contratos de la sonda de existencia.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- La fachada depende de estas abstracciones; los tests pueden inyectar una
  sonda falsa sin tocar httpx.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ProbeOutcome


@runtime_checkable
class ProfileProber(Protocol):
    """Sonda bloqueante.

    Reglas de diseño:
    - A lo sumo dos requests por llamada (reintento único por bot-defense).
    - Errores de transporte se elevan como `core.domain.errors.NetworkError`.
    """

    def probe(self, url: str) -> ProbeOutcome:
        """Ejecuta la sonda sobre una URL con forma válida y devuelve el resultado crudo."""

        ...


@runtime_checkable
class AsyncProfileProber(Protocol):
    """Misma lógica que `ProfileProber`, suspendiendo en vez de bloquear."""

    async def probe(self, url: str) -> ProbeOutcome:
        ...
