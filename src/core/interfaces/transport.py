"""Contrato del transporte HTTP.

Por qué Protocol:
- Contrato estructural (duck typing) sin herencia rígida.
- Permite sustituir el adaptador httpx por un stub en tests sin tocar el
  orquestador.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable


@runtime_checkable
class ResponseBody(Protocol):
    """Lo mínimo que el orquestador necesita de una respuesta."""

    def read(self) -> bytes:
        ...


@runtime_checkable
class Transport(Protocol):
    """Ejecuta una petición y entrega la respuesta dentro de un `with`.

    Reglas de diseño:
    - Lanza `core.errors.TransportError` ante fallo de conexión, timeout o
      status fuera de 2xx; el orquestador no interpreta status codes.
    - Al salir del `with` la respuesta queda liberada, haya o no excepción.
    - `debug` pide al transporte el volcado de petición/respuesta.
    """

    def stream(
        self,
        method: str,
        target: str,
        *,
        debug: bool = False,
    ) -> AbstractContextManager[ResponseBody]:
        ...
