"""Builder fluido + orquestación de `GET /{indices}/_aliases`.

Flujo:
1) El llamador configura índices/pretty/debug (sin I/O).
2) `execute()` construye el target y delega el GET en el `Transport`.
3) El cuerpo se lee dentro del `with` del transporte y pasa al decoder.

Concurrencia:
- Una instancia pertenece a un único llamador. Para peticiones en paralelo,
  un `AliasesService` por hilo (el transporte sí puede compartirse).
"""

from __future__ import annotations

import logging

from core.domain.models import AliasesResult
from core.domain.query import AliasesQuery
from core.interfaces.transport import Transport
from core.services.aliases_decoder import decode_aliases

logger = logging.getLogger(__name__)


class AliasesService:
    """Lista los aliases de uno o varios índices.

    Ejemplo:

        result = (
            AliasesService(transport)
            .add_index("logs-2024")
            .set_pretty()
            .execute()
        )
        result.indices_by_alias("logs-current")
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport
        self._query = AliasesQuery()

    @property
    def query(self) -> AliasesQuery:
        return self._query

    def add_index(self, index_name: str) -> AliasesService:
        self._query.indices.append(index_name)
        return self

    def add_indices(self, *index_names: str) -> AliasesService:
        self._query.indices.extend(index_names)
        return self

    def set_pretty(self, pretty: bool = True) -> AliasesService:
        self._query.pretty = pretty
        return self

    def set_debug(self, debug: bool = True) -> AliasesService:
        self._query.debug = debug
        return self

    def build_path(self) -> str:
        return self._query.build_path()

    def build_query_string(self) -> str:
        return self._query.build_query_string()

    def execute(self) -> AliasesResult:
        """Ejecuta la petición y devuelve el resultado decodificado.

        Errores (se propagan tal cual, sin reintentos):
        - `TransportError` del transporte.
        - `MalformedResponse` / `UnexpectedShape` del decoder.
        """

        target = self._query.build_target()
        logger.debug("GET %s", target)

        with self._transport.stream("GET", target, debug=self._query.debug) as response:
            body = response.read()
            return decode_aliases(body)
