"""Matcher de forma para URLs de perfil de LinkedIn.

Puro, sin I/O. Decide si el candidato se parsea como URL, si su host es
LinkedIn (sin prefijo o `www`) y si su path tiene forma de perfil de miembro
(`/in/<usuario>`). Solo las URLs que pasan ambos predicados son elegibles
para la sonda de red.

Por qué un único parseo:
- El veredicto (`ShapeVerdict`) guarda host y path observados; el reporte,
  la proyección y la extracción de usuario leen de ahí sin reparsear.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from core.domain.errors import InvalidUrlError
from core.domain.taxonomy import InvalidShape, ShapeFailure

PROFILE_DOMAINS = frozenset({"linkedin.com", "www.linkedin.com"})

_PROFILE_PATH_RE = re.compile(r"/in/[A-Za-z0-9_.\-]+/?")
_HOST_REQUIRED_SCHEMES = frozenset({"http", "https"})


@dataclass(frozen=True)
class ParsedUrl:
    scheme: str
    host: str
    path: str
    query: str


@dataclass(frozen=True)
class ShapeVerdict:
    """Resultado de aplicar ambos predicados de forma a una URL candidata."""

    url_format_valid: bool
    domain_matches: bool
    path_matches: bool
    host: str = ""
    path: str = ""
    parse_error: str | None = None

    @property
    def eligible(self) -> bool:
        return self.url_format_valid and self.domain_matches and self.path_matches

    def failure(self) -> InvalidShape | None:
        """Primer predicado que falla como variante de taxonomía, o `None` si es elegible."""

        if not self.url_format_valid:
            return InvalidShape(ShapeFailure.INVALID_URL, self.parse_error or "unparsable URL")
        if not self.domain_matches:
            return InvalidShape(ShapeFailure.WRONG_DOMAIN, self.host)
        if not self.path_matches:
            return InvalidShape(ShapeFailure.WRONG_PATH, self.path)
        return None


def parse_candidate(url: str) -> ParsedUrl:
    """Parsea `url` una vez; lanza `InvalidUrlError` si no es una URL utilizable."""

    candidate = (url or "").strip()
    if not candidate:
        raise InvalidUrlError("empty input")
    if any(ch.isspace() or ord(ch) < 0x20 for ch in candidate):
        raise InvalidUrlError("URL contains whitespace or control characters")

    try:
        parts = urlsplit(candidate)
        # Leer el puerto lo valida (ValueError si está fuera de rango).
        parts.port
    except ValueError as exc:
        raise InvalidUrlError(str(exc)) from exc

    scheme = parts.scheme.lower()
    if not scheme:
        raise InvalidUrlError("relative URL without a scheme")

    host = (parts.hostname or "").lower()
    if scheme in _HOST_REQUIRED_SCHEMES and not host:
        raise InvalidUrlError("empty host")

    return ParsedUrl(scheme=scheme, host=host, path=parts.path, query=parts.query)


def is_profile_domain(host: str) -> bool:
    return host in PROFILE_DOMAINS


def is_profile_path(path: str) -> bool:
    return _PROFILE_PATH_RE.fullmatch(path) is not None


def check_shape(url: str) -> ShapeVerdict:
    """Aplica ambos predicados. Nunca lanza: los errores de parseo quedan en el veredicto."""

    try:
        parsed = parse_candidate(url)
    except InvalidUrlError as exc:
        return ShapeVerdict(
            url_format_valid=False,
            domain_matches=False,
            path_matches=False,
            parse_error=exc.detail,
        )

    return ShapeVerdict(
        url_format_valid=True,
        domain_matches=is_profile_domain(parsed.host),
        path_matches=is_profile_path(parsed.path),
        host=parsed.host,
        path=parsed.path,
    )


def is_valid_profile_format(url: str) -> bool:
    """Chequeo solo de formato: dominio LinkedIn y path `/in/<usuario>`, sin red."""

    return check_shape(url).eligible


def username_from_verdict(verdict: ShapeVerdict) -> str | None:
    """Último segmento no vacío del path de una URL de LinkedIn con forma de perfil."""

    if not (verdict.domain_matches and verdict.path_matches):
        return None
    segments = [segment for segment in verdict.path.split("/") if segment]
    return segments[-1] if segments else None


def extract_username(url: str) -> str | None:
    return username_from_verdict(check_shape(url))
