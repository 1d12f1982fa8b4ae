"""Parámetros de una consulta de aliases y reglas de construcción de URL.

Reglas:
- Cada nombre de índice se escapa por separado (`quote(..., safe="")`), así
  un nombre con `/` o `,` nunca se parte en varios segmentos.
- Sin índices la ruta es `/_aliases` (todos los índices, según el servidor).
- `pretty` solo se emite cuando es `true`; nunca se envía `pretty=false`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote, urlencode

from core.errors import RequestConstructionError

ALIASES_ENDPOINT = "_aliases"


def escape_index_name(name: str) -> str:
    return quote(name, safe="")


@dataclass
class AliasesQuery:
    """Estado acumulado por el builder para una sola petición."""

    indices: list[str] = field(default_factory=list)
    pretty: bool = False
    debug: bool = False

    def build_path(self) -> str:
        segments = [escape_index_name(name) for name in self.indices]
        for segment in segments:
            if "/" in segment:
                raise RequestConstructionError(f"Index segment is not escaped: {segment!r}")

        path = "/" + ",".join(segments)
        if segments:
            path += "/"
        return path + ALIASES_ENDPOINT

    def build_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.pretty:
            params["pretty"] = "true"
        return params

    def build_query_string(self) -> str:
        return urlencode(self.build_params())

    def build_target(self) -> str:
        """Ruta + query string, sin `?` colgando cuando no hay parámetros."""

        target = self.build_path()
        query = self.build_query_string()
        if query:
            target += "?" + query
        return target
