"""API de validación para agentes.

Puntos de entrada para llamadores automáticos (herramientas de LLM, agentes
de generación de leads). Nunca lanzan por una URL mala o una sonda
bloqueada: todo resultado se proyecta a un `AgentResult` cuyo `decision`
dice si aceptar, reintentar o rechazar.

Por qué `quick_*`:
- Reducen ese resultado a un `CompactResult` (confianza en porcentaje, una
  línea de estado y una acción sugerida) para respuestas de herramientas
  donde cada token cuenta.
"""

from __future__ import annotations

from core.config import AppSettings
from core.domain.errors import ErrorType
from core.domain.models import AgentDecision, AgentResult, CompactResult
from core.services.projector import project
from core.services.validation import inspect_profile_url, inspect_profile_url_async


def ai_validate(url: str, *, settings: AppSettings | None = None, timeout: float | None = None) -> AgentResult:
    outcome = inspect_profile_url(url, settings=settings, timeout=timeout)
    return project(outcome.result, outcome.shape)


async def ai_validate_async(
    url: str,
    *,
    settings: AppSettings | None = None,
    timeout: float | None = None,
) -> AgentResult:
    outcome = await inspect_profile_url_async(url, settings=settings, timeout=timeout)
    return project(outcome.result, outcome.shape)


def ai_validate_json(url: str, *, settings: AppSettings | None = None, timeout: float | None = None) -> str:
    return ai_validate(url, settings=settings, timeout=timeout).model_dump_json(indent=2)


async def ai_validate_json_async(
    url: str,
    *,
    settings: AppSettings | None = None,
    timeout: float | None = None,
) -> str:
    result = await ai_validate_async(url, settings=settings, timeout=timeout)
    return result.model_dump_json(indent=2)


def compact(result: AgentResult) -> CompactResult:
    """Reduce un resultado de agente a una línea de estado y una acción."""

    error_type = result.metadata.error_type
    if result.decision is AgentDecision.ACCEPT:
        if error_type is None:
            status, action = "Verified LinkedIn profile", "Use this profile with high confidence"
        elif error_type == ErrorType.AUTH_REQUIRED.value:
            status = "Valid LinkedIn profile (auth required)"
            action = "Accept this profile - LinkedIn is blocking verification but the URL is valid"
        else:
            status = "Valid LinkedIn profile format (not verified)"
            action = "Accept with caution - the profile could not be checked over the network"
    elif result.decision is AgentDecision.RETRY:
        status, action = "Network issue - retry needed", "Wait a moment and try validating again"
    elif result.metadata.domain_verified:
        if error_type == ErrorType.PROFILE_NOT_FOUND.value:
            status, action = "LinkedIn profile not found", "Search for a different LinkedIn profile URL"
        else:
            status = "Not a LinkedIn profile URL"
            action = "This is LinkedIn but not a profile - might be a company page"
    else:
        status, action = "Invalid LinkedIn URL", "Search for a different LinkedIn profile URL"

    return CompactResult(
        valid=result.is_valid,
        username=result.username,
        confidence=int(round(result.confidence * 100)),
        status=status,
        action=action,
    )


async def quick_validate(url: str, *, settings: AppSettings | None = None, timeout: float | None = None) -> CompactResult:
    return compact(await ai_validate_async(url, settings=settings, timeout=timeout))


async def quick_is_valid(url: str, *, settings: AppSettings | None = None, timeout: float | None = None) -> bool:
    result = await quick_validate(url, settings=settings, timeout=timeout)
    return result.valid


def compact_text(result: CompactResult) -> str:
    """Resumen en una línea, p. ej. `Verified LinkedIn profile @jane-doe (100% confidence)`."""

    if not result.valid:
        return f"{result.status} - {result.action}"
    if result.username:
        return f"{result.status} @{result.username} ({result.confidence}% confidence)"
    return f"{result.status} ({result.confidence}% confidence)"


async def quick_validate_text(url: str, *, settings: AppSettings | None = None, timeout: float | None = None) -> str:
    return compact_text(await quick_validate(url, settings=settings, timeout=timeout))


async def quick_validate_json(url: str, *, settings: AppSettings | None = None, timeout: float | None = None) -> str:
    result = await quick_validate(url, settings=settings, timeout=timeout)
    return result.model_dump_json(indent=2)
