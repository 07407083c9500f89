"""Пакет расчёта (характеристики цилиндра, прогоны по параметру)."""

from __future__ import annotations

from .cylinder import convert_inputs, derive, derive_canonical, normalize_inputs, to_display_result

__all__ = [
    "derive",
    "derive_canonical",
    "normalize_inputs",
    "convert_inputs",
    "to_display_result",
]
