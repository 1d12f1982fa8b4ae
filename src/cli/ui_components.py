"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en `list` y `lookup`.
"""

from __future__ import annotations

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from core.domain.models import AliasesResult


def build_aliases_table(result: AliasesResult) -> Table:
    """Una fila por índice; los índices sin aliases se muestran con `-`."""

    table = Table(title="Index aliases")
    table.add_column("Index", style="cyan", no_wrap=True)
    table.add_column("Aliases", style="white")
    for index_name, entry in result.indices.items():
        names = entry.alias_names()
        aliases = Text(", ".join(names)) if names else Text("-", style="dim")
        table.add_row(Text(index_name), aliases)
    if result.anomalies:
        table.caption = f"{result.anomalies} malformed index entries tolerated"
    return table


def build_lookup_table(alias_name: str, index_names: list[str]) -> Table:
    table = Table(title=f"Indices for alias '{escape(alias_name)}'")
    table.add_column("Index", style="cyan", no_wrap=True)
    for index_name in index_names:
        table.add_row(Text(index_name))
    return table
