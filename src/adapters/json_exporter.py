"""Exportación JSON del resultado de aliases.

Por qué JSON:
- Interoperabilidad con scripts de reindexado y pipelines.
- Formato estable (claves ordenadas) para poder comparar snapshots.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.domain.models import AliasesResult


def aliases_payload(result: AliasesResult) -> dict[str, Any]:
    return {
        "indices": result.to_mapping(),
        "anomalies": result.anomalies,
    }


def export_aliases_json(*, result: AliasesResult, output_path: Path) -> Path:
    """Exporta `AliasesResult` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(aliases_payload(result), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
