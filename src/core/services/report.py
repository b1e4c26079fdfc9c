"""Reportes por líneas para consumidores LLM / agentes.

Los llamadores los parsean por prefijo de línea, no deserializando, así que
los nombres de campo y su orden son contrato::

    VALIDATION_RESULT: SUCCESS | ERROR
    URL: <input>
    PROFILE_EXISTS: TRUE | FALSE | UNKNOWN
    USERNAME: <username> | NONE
    HTTP_STATUS: <code> | NONE
    ERROR_TYPE: NONE | <etiqueta ErrorType>
    ERROR_MESSAGE: <mensaje> | NONE
    AI_AGENT_GUIDANCE: <frase>
    RECOMMENDED_NEXT_STEP: <frase>
"""

from __future__ import annotations

from core.config import AppSettings
from core.domain.errors import ErrorType
from core.domain.taxonomy import Exists, InvalidShape, NotFound
from core.services.validation import ValidationOutcome, inspect_profile_url, inspect_profile_url_async
from core.shape import is_valid_profile_format

REPORT_FIELDS: tuple[str, ...] = (
    "VALIDATION_RESULT",
    "URL",
    "PROFILE_EXISTS",
    "USERNAME",
    "HTTP_STATUS",
    "ERROR_TYPE",
    "ERROR_MESSAGE",
    "AI_AGENT_GUIDANCE",
    "RECOMMENDED_NEXT_STEP",
)

# tipo de error (None = el perfil existe) -> (guía, siguiente paso)
_GUIDANCE: dict[ErrorType | None, tuple[str, str]] = {
    None: (
        "The profile exists. Treat this URL as a verified LinkedIn profile.",
        "Proceed with profile data extraction",
    ),
    ErrorType.INVALID_URL_FORMAT: (
        "The input is not a valid URL.",
        "Verify the URL format and retry",
    ),
    ErrorType.NOT_LINKEDIN_DOMAIN: (
        "The URL does not point to linkedin.com.",
        "Ensure the URL is from the linkedin.com domain",
    ),
    ErrorType.NOT_PROFILE_URL: (
        "The URL is on LinkedIn but is not a member profile (company page, job posting, etc.).",
        "Use profile URLs in the format https://www.linkedin.com/in/<username>",
    ),
    ErrorType.PROFILE_NOT_FOUND: (
        "The URL format is valid but the profile does not exist.",
        "Verify the username or search for a different LinkedIn profile URL",
    ),
    ErrorType.AUTH_REQUIRED: (
        "LinkedIn is blocking automated checks. The URL format is valid and the profile LIKELY EXISTS.",
        "Accept this URL as a valid profile - LinkedIn authentication walls usually indicate real profiles",
    ),
    ErrorType.NETWORK_ERROR: (
        "The profile could not be checked because of a network problem. The URL format is valid.",
        "Check the network connection and retry after a short delay",
    ),
    ErrorType.CLIENT_BUILD_ERROR: (
        "The HTTP client could not be created, so existence was not checked. The URL format is valid.",
        "Check system resources and proxy configuration, then retry",
    ),
}


def _profile_exists(outcome: ValidationOutcome) -> str:
    if isinstance(outcome.result, Exists):
        return "TRUE"
    if isinstance(outcome.result, (NotFound, InvalidShape)):
        return "FALSE"
    return "UNKNOWN"


def _one_line(value: str) -> str:
    return " ".join(value.splitlines()) or "NONE"


def render_report(outcome: ValidationOutcome) -> str:
    result = outcome.result
    error = result.to_error()
    error_type = result.error_type
    guidance, next_step = _GUIDANCE[error_type]
    status = outcome.http_status

    values = {
        "VALIDATION_RESULT": "SUCCESS" if error is None else "ERROR",
        "URL": outcome.url,
        "PROFILE_EXISTS": _profile_exists(outcome),
        "USERNAME": outcome.username or "NONE",
        "HTTP_STATUS": str(status) if status is not None else "NONE",
        "ERROR_TYPE": error_type.value if error_type is not None else "NONE",
        "ERROR_MESSAGE": error.message if error is not None else "NONE",
        "AI_AGENT_GUIDANCE": guidance,
        "RECOMMENDED_NEXT_STEP": next_step,
    }
    return "\n".join(f"{field}: {_one_line(values[field])}" for field in REPORT_FIELDS)


def validate_for_llm(url: str, *, settings: AppSettings | None = None, timeout: float | None = None) -> str:
    """Valida `url` y devuelve el reporte estructurado. No imprime ni lanza."""

    return render_report(inspect_profile_url(url, settings=settings, timeout=timeout))


async def validate_for_llm_async(
    url: str,
    *,
    settings: AppSettings | None = None,
    timeout: float | None = None,
) -> str:
    return render_report(await inspect_profile_url_async(url, settings=settings, timeout=timeout))


def format_report(url: str) -> str:
    """Reporte solo de formato (sin red)."""

    valid = is_valid_profile_format(url)
    action = (
        "URL format is correct - can proceed with network validation if needed"
        if valid
        else "Fix URL format before attempting network validation"
    )
    return "\n".join(
        [
            f"URL: {_one_line(url)}",
            f"FORMAT_VALIDATION_RESULT: {'VALID' if valid else 'INVALID'}",
            f"SUGGESTED_ACTION: {action}",
        ]
    )
