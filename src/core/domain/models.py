"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- `frozen=True`: el resultado se construye una vez por respuesta y después
  solo se consulta.

Nota:
- Estos modelos describen *qué* aliases apuntan a *qué* índices, no *cómo*
  se obtienen.
- El orden de los aliases dentro de un índice sigue al documento JSON y no
  tiene significado: no hay que depender de él.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class AliasEntry(BaseModel):
    """Un alias de un índice.

    Por qué un modelo y no un `str`:
    - El motor devuelve un objeto por alias (filter, routing, ...). Hoy solo
      usamos la clave, pero el modelo deja sitio para esos metadatos sin
      romper la forma pública.
    """

    model_config = ConfigDict(frozen=True)

    alias_name: str = Field(
        ...,
        description="Nombre del alias tal como lo devuelve el motor.",
    )


class IndexEntry(BaseModel):
    """Aliases de un índice concreto (posiblemente ninguno)."""

    model_config = ConfigDict(frozen=True)

    aliases: tuple[AliasEntry, ...] = Field(
        default=(),
        description="Aliases del índice; el orden no está garantizado.",
    )

    def alias_names(self) -> list[str]:
        return [alias.alias_name for alias in self.aliases]

    def has_alias(self, alias_name: str) -> bool:
        """Comparación exacta, sensible a mayúsculas."""

        return any(alias.alias_name == alias_name for alias in self.aliases)


class AliasesResult(BaseModel):
    """Resultado de `GET /{indices}/_aliases`.

    Invariante:
    - Todo índice presente en la respuesta cruda es una clave de `indices`,
      aunque no tenga aliases.
    """

    model_config = ConfigDict(frozen=True)

    indices: dict[str, IndexEntry] = Field(
        default_factory=dict,
        description="Índice -> aliases.",
    )
    anomalies: int = Field(
        default=0,
        ge=0,
        description="Subestructuras inesperadas toleradas durante el decode.",
    )

    def __len__(self) -> int:
        return len(self.indices)

    def __contains__(self, index_name: object) -> bool:
        return index_name in self.indices

    def get(self, index_name: str) -> IndexEntry | None:
        return self.indices.get(index_name)

    def index_names(self) -> list[str]:
        return list(self.indices)

    def alias_names(self) -> list[str]:
        """Aliases distintos, en orden de primera aparición."""

        seen: dict[str, None] = {}
        for entry in self.indices.values():
            for name in entry.alias_names():
                seen.setdefault(name, None)
        return list(seen)

    def indices_by_alias(self, alias_name: str) -> list[str]:
        """Índices que tienen exactamente `alias_name`.

        Devuelve `[]` (nunca un error) si ningún índice lo tiene.
        """

        return [
            index_name
            for index_name, entry in self.indices.items()
            if entry.has_alias(alias_name)
        ]

    def index_has_alias(self, index_entry: IndexEntry, alias_name: str) -> bool:
        return index_entry.has_alias(alias_name)

    def to_mapping(self) -> dict[str, list[str]]:
        return {name: entry.alias_names() for name, entry in self.indices.items()}
