"""Sonda de existencia para perfiles de LinkedIn.

Flujo (idéntico en ambos modos):
1. GET a la URL del perfil con User-Agent de navegador y timeout acotado.
2. Si LinkedIn responde 999 (detección de bots), un único GET adicional con
   la cookie de bypass. Secuencia explícita, sin bucle: máximo dos requests.
3. Se devuelve el resultado crudo (status, URL final, cuerpo); clasificar es
   trabajo de `core.classifier`.

Cualquier error de transporte (timeout, conexión, demasiadas redirecciones)
se eleva como `NetworkError`; nunca se clasifica una respuesta parcial.
"""

from __future__ import annotations

import logging
from types import TracebackType

import httpx

from adapters.http_client import build_async_client, build_client
from core.config import BOT_DEFENSE_STATUS, AppSettings
from core.domain.errors import NetworkError
from core.domain.models import ProbeOutcome
from core.interfaces.prober import AsyncProfileProber, ProfileProber

logger = logging.getLogger(__name__)


def _describe(exc: Exception) -> str:
    if isinstance(exc, httpx.TimeoutException):
        return f"request timed out ({type(exc).__name__})"
    detail = str(exc).strip()
    return f"{type(exc).__name__}: {detail}" if detail else type(exc).__name__


def _to_outcome(response: httpx.Response, attempts: int) -> ProbeOutcome:
    return ProbeOutcome(
        http_status=response.status_code,
        final_url=str(response.url),
        body=response.text,
        attempts=attempts,
    )


class LinkedInProber(ProfileProber):
    """Sonda bloqueante. Reutilizable: el cliente no guarda estado por llamada."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_client(self._settings, timeout=timeout)

    def probe(self, url: str) -> ProbeOutcome:
        try:
            response = self._client.get(url)
            if response.status_code != BOT_DEFENSE_STATUS:
                return _to_outcome(response, attempts=1)

            logger.info("HTTP %s from %s, retrying once with bypass cookie", BOT_DEFENSE_STATUS, url)
            response = self._client.get(url, headers={"Cookie": self._settings.bypass_cookie})
            return _to_outcome(response, attempts=2)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.info("probe of %s failed: %s", url, exc)
            raise NetworkError(_describe(exc)) from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "LinkedInProber":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class AsyncLinkedInProber(AsyncProfileProber):
    """Sonda cooperativa (asyncio). Misma secuencia que `LinkedInProber`."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_async_client(self._settings, timeout=timeout)

    async def probe(self, url: str) -> ProbeOutcome:
        try:
            response = await self._client.get(url)
            if response.status_code != BOT_DEFENSE_STATUS:
                return _to_outcome(response, attempts=1)

            logger.info("HTTP %s from %s, retrying once with bypass cookie", BOT_DEFENSE_STATUS, url)
            response = await self._client.get(url, headers={"Cookie": self._settings.bypass_cookie})
            return _to_outcome(response, attempts=2)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.info("probe of %s failed: %s", url, exc)
            raise NetworkError(_describe(exc)) from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncLinkedInProber":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
