"""Taxonomía cerrada de resultados de validación.

Es la frontera entre el código que habla con la red y todo lo demás: nada
aguas abajo inspecciona status codes ni HTML, solo estas variantes.

Por qué dataclasses congeladas y no strings:
- Cada variante lleva su propio payload (status observado, causa, motivo).
- `Taxonomy` es una unión cerrada; `isinstance` basta para ramificar.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from core.domain.errors import (
    AuthenticationRequiredError,
    ClientInitError,
    ErrorType,
    InvalidUrlError,
    NetworkError,
    NotLinkedInUrlError,
    NotProfileUrlError,
    ProfileNotFoundError,
    ProfileValidationError,
)


class ShapeFailure(str, Enum):
    """Motivo por el que una URL no es elegible para la sonda."""

    INVALID_URL = "invalid_url"
    WRONG_DOMAIN = "wrong_domain"
    WRONG_PATH = "wrong_path"


@dataclass(frozen=True)
class Exists:
    http_status: int | None = None

    @property
    def error_type(self) -> ErrorType | None:
        return None

    def to_error(self) -> ProfileValidationError | None:
        return None


@dataclass(frozen=True)
class NotFound:
    http_status: int | None = None

    @property
    def error_type(self) -> ErrorType:
        return ErrorType.PROFILE_NOT_FOUND

    def to_error(self) -> ProfileValidationError:
        return ProfileNotFoundError()


@dataclass(frozen=True)
class AuthRequired:
    """El sitio pidió login en vez de revelar si el perfil existe."""

    http_status: int | None = None

    @property
    def error_type(self) -> ErrorType:
        return ErrorType.AUTH_REQUIRED

    def to_error(self) -> ProfileValidationError:
        return AuthenticationRequiredError()


@dataclass(frozen=True)
class InvalidShape:
    """La URL no pasó el matcher de forma.

    `detail` depende del motivo: el error de parseo, el dominio observado o
    el path observado.
    """

    reason: ShapeFailure
    detail: str = ""

    @property
    def error_type(self) -> ErrorType:
        if self.reason is ShapeFailure.INVALID_URL:
            return ErrorType.INVALID_URL_FORMAT
        if self.reason is ShapeFailure.WRONG_DOMAIN:
            return ErrorType.NOT_LINKEDIN_DOMAIN
        return ErrorType.NOT_PROFILE_URL

    def to_error(self) -> ProfileValidationError:
        if self.reason is ShapeFailure.INVALID_URL:
            return InvalidUrlError(self.detail)
        if self.reason is ShapeFailure.WRONG_DOMAIN:
            return NotLinkedInUrlError(self.detail)
        return NotProfileUrlError(self.detail)


@dataclass(frozen=True)
class NetworkFailure:
    cause: str

    @property
    def error_type(self) -> ErrorType:
        return ErrorType.NETWORK_ERROR

    def to_error(self) -> ProfileValidationError:
        return NetworkError(self.cause)


@dataclass(frozen=True)
class ClientInitFailure:
    """No se pudo ni siquiera intentar la validación por red."""

    cause: str

    @property
    def error_type(self) -> ErrorType:
        return ErrorType.CLIENT_BUILD_ERROR

    def to_error(self) -> ProfileValidationError:
        return ClientInitError(self.cause)


Taxonomy = Union[Exists, NotFound, AuthRequired, InvalidShape, NetworkFailure, ClientInitFailure]

# Subconjunto que puede producir el clasificador a partir de una respuesta.
ProbeVerdict = Union[Exists, NotFound, AuthRequired]


def from_error(error: ProfileValidationError) -> Taxonomy:
    """Convierte una excepción de validación en su variante de taxonomía."""

    if isinstance(error, InvalidUrlError):
        return InvalidShape(ShapeFailure.INVALID_URL, error.detail)
    if isinstance(error, NotLinkedInUrlError):
        return InvalidShape(ShapeFailure.WRONG_DOMAIN, error.domain)
    if isinstance(error, NotProfileUrlError):
        return InvalidShape(ShapeFailure.WRONG_PATH, error.path)
    if isinstance(error, ProfileNotFoundError):
        return NotFound()
    if isinstance(error, AuthenticationRequiredError):
        return AuthRequired()
    if isinstance(error, NetworkError):
        return NetworkFailure(error.cause)
    if isinstance(error, ClientInitError):
        return ClientInitFailure(error.cause)
    raise TypeError(f"Unsupported validation error: {type(error).__name__}")
