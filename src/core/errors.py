"""Excepciones del cliente de aliases.

Por qué una jerarquía:
- Quien llama puede capturar `AliasesError` para todo, o distinguir entre
  fallo de transporte y respuesta ilegible sin inspeccionar mensajes.
- Ningún error se reintenta ni se silencia dentro del core: todos abortan
  `execute()`.
"""

from __future__ import annotations


class AliasesError(Exception):
    """Base común de los errores del cliente."""


class RequestConstructionError(AliasesError):
    """No se pudo construir la ruta de la petición."""


class TransportError(AliasesError):
    """Fallo de conexión, timeout o status HTTP fuera de 2xx."""

    def __init__(self, reason: str, *, status_code: int | None = None) -> None:
        self.reason = reason
        self.status_code = status_code
        if status_code is None:
            super().__init__(reason)
        else:
            super().__init__(f"HTTP {status_code}: {reason}")


class ResponseDecodeError(AliasesError):
    """El cuerpo de la respuesta no se pudo interpretar."""


class MalformedResponse(ResponseDecodeError):
    """El cuerpo no es JSON válido."""


class UnexpectedShape(ResponseDecodeError):
    """JSON válido, pero el nivel superior no es un objeto."""
