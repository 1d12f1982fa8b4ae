"""CLI de es-aliases (Typer + Rich).

Comandos:
- `list`: aliases de los índices indicados (o de todos).
- `lookup`: índices que tienen un alias concreto.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from adapters.http_client import HttpTransport
from adapters.json_exporter import aliases_payload, export_aliases_json
from cli.ui_components import build_aliases_table, build_lookup_table
from core.config import AppSettings
from core.domain.models import AliasesResult
from core.errors import AliasesError
from core.services.aliases_service import AliasesService

app = typer.Typer(no_args_is_help=True, help="List search engine aliases per index.")

_console = Console()
_err_console = Console(stderr=True)


def _settings(base_url: str | None) -> AppSettings:
    settings = AppSettings()
    if base_url:
        settings = settings.model_copy(update={"base_url": base_url})
    return settings


def _fetch(
    *,
    indices: list[str] | None,
    base_url: str | None,
    pretty: bool = False,
    debug: bool = False,
) -> AliasesResult:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        with HttpTransport(settings=_settings(base_url), console=_err_console) as transport:
            return (
                AliasesService(transport)
                .add_indices(*(indices or []))
                .set_pretty(pretty)
                .set_debug(debug)
                .execute()
            )
    except AliasesError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


IndexOption = typer.Option(None, "--index", "-i", help="Index name (repeatable). Default: all indices.")
BaseUrlOption = typer.Option(None, "--base-url", help="Override ES_ALIASES_BASE_URL.")
DebugOption = typer.Option(False, "--debug", help="Dump the HTTP request/response to stderr.")


@app.command(name="list")
def list_aliases(
    index: Optional[list[str]] = IndexOption,
    pretty: bool = typer.Option(False, "--pretty", help="Ask the server for pretty-printed JSON."),
    debug: bool = DebugOption,
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Also write the result as JSON to this file."),
    base_url: Optional[str] = BaseUrlOption,
) -> None:
    """Show which aliases point at which indices."""

    result = _fetch(indices=index, base_url=base_url, pretty=pretty, debug=debug)

    if as_json:
        _console.print_json(json.dumps(aliases_payload(result), ensure_ascii=False))
    else:
        _console.print(build_aliases_table(result))

    if output is not None:
        path = export_aliases_json(result=result, output_path=output)
        _err_console.print(f"[green]Saved JSON to:[/green] {escape(str(path))}")


@app.command()
def lookup(
    alias: str = typer.Argument(..., help="Alias name (exact, case-sensitive)."),
    index: Optional[list[str]] = IndexOption,
    debug: bool = DebugOption,
    base_url: Optional[str] = BaseUrlOption,
) -> None:
    """Show the indices an alias resolves to."""

    result = _fetch(indices=index, base_url=base_url, debug=debug)
    index_names = result.indices_by_alias(alias)
    if not index_names:
        _err_console.print(f"[yellow]No index has alias[/yellow] {escape(repr(alias))}")
        raise typer.Exit(code=1)
    _console.print(build_lookup_table(alias, index_names))


def run() -> None:
    app()
