"""Конфиги калькулятора.

- `CalculatorConfig` — система единиц по умолчанию, формат вывода, стартовый ввод;
- `PRESETS` — типовые цилиндры для страницы и CLI.
"""

from __future__ import annotations

from .models import CalculatorConfig, load_config
from .presets import PRESETS, Preset

__all__ = [
    "CalculatorConfig",
    "load_config",
    "Preset",
    "PRESETS",
]
