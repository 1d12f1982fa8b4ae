"""Wrapper de httpx: el transporte del cliente de aliases.

Por qué un wrapper:
- Estandariza base URL, timeouts, headers y auth a partir de `AppSettings`.
- Traduce los errores de httpx a `core.errors.TransportError`, que es lo
  único que el orquestador deja pasar.
- Facilita testeo: se puede construir sobre `httpx.MockTransport`.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import httpx
from rich.console import Console

from adapters.debug_dump import default_trace_console, dump_request, dump_response
from core.config import AppSettings
from core.errors import TransportError


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` apuntando al cluster configurado.

    Por qué un builder:
    - Centraliza timeouts/headers para que CLI y librería se comporten igual.
    - `transport` permite inyectar `httpx.MockTransport` en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)

    auth = None
    if settings.username:
        auth = httpx.BasicAuth(settings.username, settings.password or "")

    return httpx.Client(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        auth=auth,
        verify=settings.verify_tls,
        transport=transport,
    )


def _error_reason(response: httpx.Response) -> str:
    """Extrae el motivo del error del cuerpo del motor, si lo hay.

    Formatos conocidos:
    - {"error": "IndexMissingException[[foo] missing]", "status": 404}
    - {"error": {"type": "index_not_found_exception", "reason": "no such index"}, "status": 404}
    """

    fallback = response.reason_phrase or "request failed"
    try:
        data: Any = response.json()
    except ValueError:
        text = response.text.strip()
        return text[:500] if text else fallback

    if not isinstance(data, dict):
        return fallback
    error = data.get("error")
    if isinstance(error, str) and error.strip():
        return error.strip()
    if isinstance(error, dict):
        err_type = error.get("type")
        reason = error.get("reason")
        if isinstance(err_type, str) and isinstance(reason, str):
            return f"{err_type}: {reason}"
        if isinstance(reason, str):
            return reason
        if isinstance(err_type, str):
            return err_type
    return fallback


def check_response(response: httpx.Response) -> None:
    """Lanza `TransportError` si el status no es 2xx."""

    if response.is_success:
        return
    response.read()
    raise TransportError(_error_reason(response), status_code=response.status_code)


class HttpTransport:
    """Implementación de `core.interfaces.transport.Transport` sobre httpx."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        *,
        settings: AppSettings | None = None,
        console: Console | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or build_client(settings)
        self._console = console

    @property
    def client(self) -> httpx.Client:
        return self._client

    def _trace_console(self) -> Console:
        if self._console is None:
            self._console = default_trace_console()
        return self._console

    def _absolute_url(self, target: str) -> httpx.URL:
        """Concatena base URL y target.

        `build_request` leería `//_aliases` (índice vacío) como URL sin esquema.
        """

        base = self._client.base_url
        return base.copy_with(raw_path=base.raw_path.rstrip(b"/") + target.encode("ascii"))

    @contextmanager
    def stream(self, method: str, target: str, *, debug: bool = False) -> Iterator[httpx.Response]:
        request = self._client.build_request(method, self._absolute_url(target))
        if debug:
            dump_request(request, self._trace_console())

        try:
            response = self._client.send(request, stream=True)
        except httpx.TimeoutException as exc:
            raise TransportError(f"Timeout calling {request.url}") from exc
        except httpx.TransportError as exc:
            raise TransportError(f"Connection error calling {request.url}: {exc}") from exc

        try:
            check_response(response)
            if debug:
                response.read()
                dump_response(response, self._trace_console())
            yield response
        except httpx.TransportError as exc:
            # Fallo leyendo el cuerpo (conexión cortada a mitad).
            raise TransportError(f"Error reading response from {request.url}: {exc}") from exc
        finally:
            response.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
