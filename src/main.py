"""Script de ejecución de httpeek.

Uso durante desarrollo, sin instalar el paquete:
- `python src/main.py get https://httpbin.org/get`
- `python src/main.py post https://httpbin.org/post name=ada lang=python`

Instalado, el mismo flujo está disponible como `httpeek`.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8).
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run

if __name__ == "__main__":
    run()
