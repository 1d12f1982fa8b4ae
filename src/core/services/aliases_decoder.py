"""Decodificación tolerante de la respuesta de `_aliases`.

Forma esperada:

    {
      "indexName": {
        "aliases": {
          "alias1": {},
          "alias2": {}
        }
      },
      "indexName2": {...}
    }

Política:
- Falla rápido si el cuerpo no es JSON (`MalformedResponse`) o si el nivel
  superior no es un objeto (`UnexpectedShape`).
- Dentro de un objeto válido nunca falla: un índice con forma rara queda
  registrado sin aliases y se cuenta como anomalía.
- El valor de cada alias (filter, routing, ...) se ignora.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from core.domain.models import AliasEntry, AliasesResult, IndexEntry
from core.errors import MalformedResponse, UnexpectedShape

logger = logging.getLogger(__name__)


def _decode_index(index_name: str, index_data: Any) -> tuple[IndexEntry, bool]:
    """Devuelve la entrada del índice y si hubo que tolerar algo."""

    if not isinstance(index_data, dict):
        logger.debug("Index %r: expected an object, got %s", index_name, type(index_data).__name__)
        return IndexEntry(), True

    if "aliases" not in index_data:
        return IndexEntry(), False

    aliases_data = index_data["aliases"]
    if not isinstance(aliases_data, dict):
        logger.debug(
            "Index %r: 'aliases' is %s, not an object",
            index_name,
            type(aliases_data).__name__,
        )
        return IndexEntry(), True

    aliases = tuple(AliasEntry(alias_name=alias_name) for alias_name in aliases_data)
    return IndexEntry(aliases=aliases), False


def decode_aliases(body: bytes | str) -> AliasesResult:
    """Convierte el cuerpo crudo en un `AliasesResult`."""

    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError) as exc:
        raise MalformedResponse(f"Response body is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise UnexpectedShape(
            f"Expected a JSON object keyed by index name, got {type(data).__name__}"
        )

    indices: dict[str, IndexEntry] = {}
    anomalies = 0
    for index_name, index_data in data.items():
        entry, tolerated = _decode_index(index_name, index_data)
        indices[index_name] = entry
        if tolerated:
            anomalies += 1

    return AliasesResult(indices=indices, anomalies=anomalies)
