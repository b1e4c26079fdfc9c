"""Proyector para agentes: taxonomía + veredicto de forma -> `AgentResult`.

Determinista y sin efectos (salvo el sello de tiempo). El mapeo es una tabla
fija. La fila clave es `AuthRequired`: las defensas anti-bot de LinkedIn
saltan casi siempre sobre perfiles reales, así que un muro de login se
proyecta como perfil *aceptado* con algo menos de confianza, nunca como
rechazo.

Nota:
- Las constantes de confianza son ajustables; lo que los llamadores usan es
  su orden relativo.
"""

from __future__ import annotations

from core.domain.models import AgentDecision, AgentMetadata, AgentResult, utc_timestamp
from core.domain.taxonomy import (
    AuthRequired,
    ClientInitFailure,
    Exists,
    InvalidShape,
    NetworkFailure,
    NotFound,
    ShapeFailure,
    Taxonomy,
)
from core.shape import ShapeVerdict, username_from_verdict

CONFIDENCE_EXISTS = 1.0
CONFIDENCE_AUTH_REQUIRED = 0.9
CONFIDENCE_NOT_FOUND = 0.95
CONFIDENCE_INVALID_URL = 1.0
CONFIDENCE_WRONG_DOMAIN = 1.0
CONFIDENCE_WRONG_PATH = 0.95
CONFIDENCE_NETWORK_FAILURE = 0.6
CONFIDENCE_CLIENT_INIT_FAILURE = 0.7

# clave -> (is_valid, confidence, decision). Los fallos de forma usan su motivo como clave.
PROJECTION_TABLE: dict[object, tuple[bool, float, AgentDecision]] = {
    Exists: (True, CONFIDENCE_EXISTS, AgentDecision.ACCEPT),
    AuthRequired: (True, CONFIDENCE_AUTH_REQUIRED, AgentDecision.ACCEPT),
    NotFound: (False, CONFIDENCE_NOT_FOUND, AgentDecision.REJECT),
    ShapeFailure.INVALID_URL: (False, CONFIDENCE_INVALID_URL, AgentDecision.REJECT),
    ShapeFailure.WRONG_DOMAIN: (False, CONFIDENCE_WRONG_DOMAIN, AgentDecision.REJECT),
    ShapeFailure.WRONG_PATH: (False, CONFIDENCE_WRONG_PATH, AgentDecision.REJECT),
    NetworkFailure: (True, CONFIDENCE_NETWORK_FAILURE, AgentDecision.RETRY),
    ClientInitFailure: (True, CONFIDENCE_CLIENT_INIT_FAILURE, AgentDecision.ACCEPT),
}


def _key(result: Taxonomy) -> object:
    if isinstance(result, InvalidShape):
        return result.reason
    return type(result)


def describe(result: Taxonomy) -> str:
    """Motivo legible para una variante de la taxonomía."""

    if isinstance(result, Exists):
        return "LinkedIn profile exists and is accessible"
    if isinstance(result, AuthRequired):
        return (
            "Valid LinkedIn profile URL - LinkedIn requires authentication to view it, "
            "which usually means the profile exists"
        )
    if isinstance(result, NotFound):
        return "LinkedIn profile not found - the URL format is valid but the profile does not exist"
    if isinstance(result, InvalidShape):
        if result.reason is ShapeFailure.INVALID_URL:
            return f"Invalid URL format: {result.detail or 'unparsable URL'}"
        if result.reason is ShapeFailure.WRONG_DOMAIN:
            return (
                f"Not a LinkedIn URL (domain: {result.detail or 'none'}) - "
                "only linkedin.com profile URLs are accepted"
            )
        return (
            f"LinkedIn URL but not a profile page (path: {result.detail or '/'}) - "
            "profile URLs look like /in/<username>"
        )
    if isinstance(result, NetworkFailure):
        return f"Network error while checking the profile ({result.cause}) - the URL format is valid, retry later"
    return (
        f"Could not create HTTP client ({result.cause}) - "
        "the URL format is valid but the profile could not be checked"
    )


def project(result: Taxonomy, shape: ShapeVerdict, *, timestamp: str | None = None) -> AgentResult:
    is_valid, confidence, decision = PROJECTION_TABLE[_key(result)]
    error_type = result.error_type
    return AgentResult(
        is_valid=is_valid,
        confidence=confidence,
        decision=decision,
        username=username_from_verdict(shape),
        reason=describe(result),
        metadata=AgentMetadata(
            url_format_valid=shape.url_format_valid,
            domain_verified=shape.domain_matches,
            profile_pattern_matched=shape.path_matches,
            http_status=getattr(result, "http_status", None),
            error_type=error_type.value if error_type is not None else None,
            timestamp=timestamp or utc_timestamp(),
        ),
    )
