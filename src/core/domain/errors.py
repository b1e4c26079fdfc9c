"""Errores de validación.

Por qué una jerarquía propia:
- La forma booleana de la fachada (`is_valid_profile_url`) devuelve `True` o
  lanza una de estas excepciones; el llamador ramifica por tipo.
- Cada excepción lleva su `error_type`, la misma etiqueta que aparece en el
  reporte para LLM y en el JSON para agentes.
"""

from __future__ import annotations

from enum import Enum


class ErrorType(str, Enum):
    """Etiquetas estables de error (contrato con parsers por prefijo)."""

    INVALID_URL_FORMAT = "INVALID_URL_FORMAT"
    NOT_LINKEDIN_DOMAIN = "NOT_LINKEDIN_DOMAIN"
    NOT_PROFILE_URL = "NOT_PROFILE_URL"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    AUTH_REQUIRED = "AUTH_REQUIRED"
    NETWORK_ERROR = "NETWORK_ERROR"
    CLIENT_BUILD_ERROR = "CLIENT_BUILD_ERROR"


class ProfileValidationError(Exception):
    """Base de todos los errores de validación de perfiles."""

    error_type: ErrorType

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidUrlError(ProfileValidationError):
    error_type = ErrorType.INVALID_URL_FORMAT

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid URL format: {detail}")
        self.detail = detail


class NotLinkedInUrlError(ProfileValidationError):
    error_type = ErrorType.NOT_LINKEDIN_DOMAIN

    def __init__(self, domain: str) -> None:
        shown = domain or "<none>"
        super().__init__(f"Not a LinkedIn URL (domain: {shown})")
        self.domain = domain


class NotProfileUrlError(ProfileValidationError):
    error_type = ErrorType.NOT_PROFILE_URL

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a LinkedIn profile URL (path: {path or '/'})")
        self.path = path


class ProfileNotFoundError(ProfileValidationError):
    error_type = ErrorType.PROFILE_NOT_FOUND

    def __init__(self) -> None:
        super().__init__("Profile not found (404) - the URL format is valid but the profile does not exist")


class AuthenticationRequiredError(ProfileValidationError):
    error_type = ErrorType.AUTH_REQUIRED

    def __init__(self) -> None:
        super().__init__("Unable to verify - LinkedIn requires authentication")


class NetworkError(ProfileValidationError):
    error_type = ErrorType.NETWORK_ERROR

    def __init__(self, cause: str) -> None:
        super().__init__(f"Network error: {cause}")
        self.cause = cause


class ClientInitError(ProfileValidationError):
    error_type = ErrorType.CLIENT_BUILD_ERROR

    def __init__(self, cause: str) -> None:
        super().__init__(f"Failed to create HTTP client: {cause}")
        self.cause = cause
