"""Volcado legible de peticiones/respuestas HTTP (modo debug).

Por qué Rich:
- La CLI ya escribe con `rich.console.Console`; el volcado usa el mismo sink
  (stderr por defecto) para no mezclarse con la salida JSON en stdout.
- No afecta al flujo ni al valor devuelto: solo imprime.
"""

from __future__ import annotations

import httpx
from rich.console import Console


def default_trace_console() -> Console:
    return Console(stderr=True, soft_wrap=True)


def _format_headers(headers: httpx.Headers) -> list[str]:
    return [f"{key}: {value}" for key, value in headers.multi_items()]


def format_request(request: httpx.Request) -> str:
    target = request.url.raw_path.decode("ascii", errors="replace")
    lines = [f"{request.method} {target} HTTP/1.1"]
    lines.extend(_format_headers(request.headers))
    lines.append("")
    body = request.content
    if body:
        lines.append(body.decode("utf-8", errors="replace"))
    return "\n".join(lines)


def format_response(response: httpx.Response) -> str:
    """Requiere que el cuerpo ya esté leído (`response.read()`)."""

    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}".rstrip()]
    lines.extend(_format_headers(response.headers))
    lines.append("")
    if response.content:
        lines.append(response.text)
    return "\n".join(lines)


def dump_request(request: httpx.Request, console: Console) -> None:
    console.rule("request", style="dim")
    console.print(format_request(request), markup=False, highlight=False)


def dump_response(response: httpx.Response, console: Console) -> None:
    console.rule("response", style="dim")
    console.print(format_response(response), markup=False, highlight=False)
