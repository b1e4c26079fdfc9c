"""Fachada de validación: matcher de forma -> sonda -> clasificador.

Todas las entradas ejecutan las mismas tres etapas y cortan en el primer
fallo: un fallo de forma nunca llega a la red y un fallo de red nunca llega
al clasificador.

Por qué dos formas:
- Forma taxonomía (`check_profile_url` / `check_profile_url_async`): nunca
  lanza; devuelve una variante de `core.domain.taxonomy.Taxonomy`.
- Forma booleana (`is_valid_profile_url` / `validate_profile_url_async`):
  devuelve `True` o lanza la subclase de `ProfileValidationError` que toca.

Configuración inutilizable (variable `CREDIFY_*` mal formada, archivo de
huellas ilegible) se reporta como `ClientInitFailure`: no se pudo ni
intentar la validación.

No hay reintentos aquí más allá del único reintento de bot-defense de la
sonda. Quien valide en lote debe espaciar sus llamadas.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from types import TracebackType

from pydantic import ValidationError

from adapters.linkedin_prober import AsyncLinkedInProber, LinkedInProber
from core.classifier import classify
from core.config import AppSettings
from core.domain.errors import ClientInitError, ProfileValidationError
from core.domain.taxonomy import Taxonomy, from_error
from core.fingerprints import FingerprintTable, resolve_table
from core.interfaces.prober import AsyncProfileProber, ProfileProber
from core.shape import ShapeVerdict, check_shape, username_from_verdict

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationOutcome:
    """Resultado de la taxonomía junto con el veredicto de forma del que salió."""

    url: str
    shape: ShapeVerdict
    result: Taxonomy

    @property
    def http_status(self) -> int | None:
        return getattr(self.result, "http_status", None)

    @property
    def username(self) -> str | None:
        return username_from_verdict(self.shape)


def ensure_valid(result: Taxonomy) -> bool:
    """Forma booleana de una variante: `True` o la excepción correspondiente."""

    error = result.to_error()
    if error is not None:
        raise error
    return True


def _load_config(
    settings: AppSettings | None,
    table: FingerprintTable | None,
) -> tuple[AppSettings, FingerprintTable]:
    try:
        resolved = settings if settings is not None else AppSettings()
        if table is None:
            table = resolve_table(resolved.fingerprints_path)
    except (ValidationError, json.JSONDecodeError, OSError) as exc:
        logger.warning("unusable configuration: %s", exc)
        raise ClientInitError(f"invalid configuration: {exc}") from exc
    return resolved, table


def _shape_stage(url: str) -> tuple[ShapeVerdict, ValidationOutcome | None]:
    shape = check_shape(url)
    failure = shape.failure()
    if failure is None:
        return shape, None
    logger.debug("%r rejected before probing: %s (%s)", url, failure.reason.value, failure.detail)
    return shape, ValidationOutcome(url=url, shape=shape, result=failure)


def inspect_profile_url(
    url: str,
    *,
    settings: AppSettings | None = None,
    timeout: float | None = None,
    prober: ProfileProber | None = None,
    table: FingerprintTable | None = None,
) -> ValidationOutcome:
    """Validación bloqueante con el resultado completo (forma + taxonomía)."""

    shape, rejected = _shape_stage(url)
    if rejected is not None:
        return rejected

    target = url.strip()
    try:
        settings, table = _load_config(settings, table)
        if prober is not None:
            outcome = prober.probe(target)
        else:
            with LinkedInProber(settings, timeout=timeout) as owned:
                outcome = owned.probe(target)
    except ProfileValidationError as exc:
        return ValidationOutcome(url=url, shape=shape, result=from_error(exc))

    return ValidationOutcome(url=url, shape=shape, result=classify(outcome, table))


async def inspect_profile_url_async(
    url: str,
    *,
    settings: AppSettings | None = None,
    timeout: float | None = None,
    prober: AsyncProfileProber | None = None,
    table: FingerprintTable | None = None,
) -> ValidationOutcome:
    """Gemelo no bloqueante de `inspect_profile_url`."""

    shape, rejected = _shape_stage(url)
    if rejected is not None:
        return rejected

    target = url.strip()
    try:
        if settings is None or table is None:
            # Lee .env y el archivo de huellas: fuera del event loop.
            settings, table = await asyncio.to_thread(_load_config, settings, table)
        if prober is not None:
            outcome = await prober.probe(target)
        else:
            async with AsyncLinkedInProber(settings, timeout=timeout) as owned:
                outcome = await owned.probe(target)
    except ProfileValidationError as exc:
        return ValidationOutcome(url=url, shape=shape, result=from_error(exc))

    return ValidationOutcome(url=url, shape=shape, result=classify(outcome, table))


def check_profile_url(url: str, *, settings: AppSettings | None = None, timeout: float | None = None) -> Taxonomy:
    return inspect_profile_url(url, settings=settings, timeout=timeout).result


async def check_profile_url_async(
    url: str,
    *,
    settings: AppSettings | None = None,
    timeout: float | None = None,
) -> Taxonomy:
    outcome = await inspect_profile_url_async(url, settings=settings, timeout=timeout)
    return outcome.result


def is_valid_profile_url(url: str, *, settings: AppSettings | None = None, timeout: float | None = None) -> bool:
    """`True` si el perfil existe; si no, lanza un `ProfileValidationError`.

    `AuthenticationRequiredError` significa que LinkedIn escondió la respuesta
    tras un muro de login. Se lanza para que el llamador pueda ramificar, pero
    es una señal positiva débil, no prueba de que el perfil falte.
    """

    return ensure_valid(check_profile_url(url, settings=settings, timeout=timeout))


async def validate_profile_url_async(
    url: str,
    *,
    settings: AppSettings | None = None,
    timeout: float | None = None,
) -> bool:
    return ensure_valid(await check_profile_url_async(url, settings=settings, timeout=timeout))


class LinkedInValidator:
    """Validador bloqueante reutilizable: un cliente HTTP, una tabla de huellas.

    La construcción lanza `ClientInitError` si la configuración o el cliente
    no sirven, para distinguir "no se pudo intentar" de "se intentó y la
    respuesta fue ambigua".
    """

    def __init__(self, settings: AppSettings | None = None, *, timeout: float | None = None) -> None:
        self._settings, self._table = _load_config(settings, None)
        self._prober = LinkedInProber(self._settings, timeout=timeout)

    def inspect(self, url: str) -> ValidationOutcome:
        return inspect_profile_url(url, settings=self._settings, prober=self._prober, table=self._table)

    def check(self, url: str) -> Taxonomy:
        return self.inspect(url).result

    def is_valid_profile_url(self, url: str) -> bool:
        return ensure_valid(self.check(url))

    def close(self) -> None:
        self._prober.close()

    def __enter__(self) -> "LinkedInValidator":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class AsyncLinkedInValidator:
    """Gemelo asyncio de `LinkedInValidator` (un `httpx.AsyncClient` compartido)."""

    def __init__(self, settings: AppSettings | None = None, *, timeout: float | None = None) -> None:
        self._settings, self._table = _load_config(settings, None)
        self._prober = AsyncLinkedInProber(self._settings, timeout=timeout)

    async def inspect(self, url: str) -> ValidationOutcome:
        return await inspect_profile_url_async(
            url,
            settings=self._settings,
            prober=self._prober,
            table=self._table,
        )

    async def check(self, url: str) -> Taxonomy:
        outcome = await self.inspect(url)
        return outcome.result

    async def is_valid_profile_url(self, url: str) -> bool:
        return ensure_valid(await self.check(url))

    async def aclose(self) -> None:
        await self._prober.aclose()

    async def __aenter__(self) -> "AsyncLinkedInValidator":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
