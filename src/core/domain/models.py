"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- La proyección JSON para agentes es un `model_dump_json` directo.

Nota:
- Estos modelos describen *qué* es el resultado, no *cómo* se obtiene.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class ProbeOutcome(BaseModel):
    """Resultado crudo de la sonda HTTP.

    Vive solo durante una llamada: lo produce el prober, lo consume el
    clasificador y se descarta.
    """

    model_config = ConfigDict(frozen=True)

    http_status: int = Field(
        ...,
        ge=100,
        le=999,
        description="Status HTTP de la última respuesta recibida.",
    )
    final_url: str = Field(
        ...,
        description="URL final tras seguir redirecciones.",
    )
    body: str | None = Field(
        default=None,
        description="Cuerpo de la respuesta (texto) si se pudo leer.",
    )
    attempts: int = Field(
        default=1,
        ge=1,
        le=2,
        description="Requests emitidos (2 solo si hubo reintento por bot-defense).",
    )


class AgentDecision(str, Enum):
    """Decisión ternaria para agentes automáticos."""

    ACCEPT = "Accept"
    RETRY = "Retry"
    REJECT = "Reject"


class AgentMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    url_format_valid: bool = Field(
        ...,
        description="La URL se pudo parsear.",
    )
    domain_verified: bool = Field(
        ...,
        description="El host es linkedin.com o www.linkedin.com.",
    )
    profile_pattern_matched: bool = Field(
        ...,
        description="El path tiene forma /in/<usuario>.",
    )
    http_status: int | None = Field(
        default=None,
        description="Status HTTP observado, si hubo sonda.",
    )
    error_type: str | None = Field(
        default=None,
        description="Etiqueta de la taxonomía (None si el perfil existe).",
    )
    timestamp: str = Field(
        default_factory=utc_timestamp,
        description="Momento de la validación (ISO-8601, UTC).",
    )


class AgentResult(BaseModel):
    """Proyección de la taxonomía pensada para decisiones automáticas."""

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    is_valid: bool = Field(
        ...,
        description="La URL debe tratarse como perfil válido.",
    )
    confidence: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Confianza normalizada (0..1) en `is_valid`.",
    )
    decision: AgentDecision = Field(
        ...,
        description="Acción sugerida: Accept, Retry o Reject.",
    )
    username: str | None = Field(
        default=None,
        description="Identificador extraído del path /in/<usuario>.",
    )
    reason: str = Field(
        ...,
        min_length=1,
        description="Explicación legible del resultado.",
    )
    metadata: AgentMetadata


class CompactResult(BaseModel):
    """Resultado mínimo para respuestas de herramientas (tool calls)."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    username: str | None = None
    confidence: int = Field(
        ...,
        ge=0,
        le=100,
        description="Confianza como porcentaje entero.",
    )
    status: str = Field(..., min_length=1)
    action: str = Field(..., min_length=1)
