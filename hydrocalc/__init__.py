"""hydrocalc package.

Важно: пакет не должен иметь побочных эффектов при импорте.
Поэтому здесь нет eager-import'ов UI-модулей (streamlit-страница, CLI).

Импортируй нужное напрямую:
- from hydrocalc.physics import derive
- from hydrocalc.core.types import CylinderInputs
"""

from __future__ import annotations

__all__: list[str] = []
