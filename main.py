"""Lanzador de `es-aliases` desde un checkout.

Uso:
- `python -m main list -i logs-2024`
- `python -m main lookup logs-current`

Añade `src/` a `sys.path` para importar `cli`, `core` y `adapters` sin
haber hecho `pip install -e .`; el script instalado es `es-aliases`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
