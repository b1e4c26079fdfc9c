"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers, redirects y proxy para los dos modos
  (bloqueante y async), de forma que ambos emiten exactamente la misma request.
- Facilita testeo: `respx` intercepta el transporte de estos clientes.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.config import AppSettings
from core.domain.errors import ClientInitError

_BASE_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}


def _client_kwargs(
    settings: AppSettings,
    *,
    timeout: float | None,
    extra_headers: dict[str, str] | None,
) -> dict[str, Any]:
    headers: dict[str, str] = {"User-Agent": settings.user_agent, **_BASE_HEADERS}
    if extra_headers:
        headers.update(extra_headers)
    kwargs: dict[str, Any] = {
        "timeout": httpx.Timeout(settings.effective_timeout(timeout)),
        "follow_redirects": True,
        "headers": headers,
    }
    if settings.proxy:
        kwargs["proxy"] = settings.proxy
    return kwargs


def build_client(
    settings: AppSettings | None = None,
    *,
    timeout: float | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` bloqueante con defaults seguros.

    Lanza `ClientInitError` si httpx no puede construir el cliente
    (proxy inválido, contexto TLS roto, etc.).
    """

    settings = settings or AppSettings()
    kwargs = _client_kwargs(settings, timeout=timeout, extra_headers=extra_headers)
    try:
        return httpx.Client(**kwargs)
    except (httpx.InvalidURL, ValueError, TypeError, OSError) as exc:
        raise ClientInitError(str(exc)) from exc


def build_async_client(
    settings: AppSettings | None = None,
    *,
    timeout: float | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con la misma configuración que `build_client`."""

    settings = settings or AppSettings()
    kwargs = _client_kwargs(settings, timeout=timeout, extra_headers=extra_headers)
    try:
        return httpx.AsyncClient(**kwargs)
    except (httpx.InvalidURL, ValueError, TypeError, OSError) as exc:
        raise ClientInitError(str(exc)) from exc
