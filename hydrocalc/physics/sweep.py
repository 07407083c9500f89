"""Параметрический прогон: одно поле ввода варьируется, остальные фиксированы.

Используется страницей калькулятора для графиков (скорость от расхода и т.п.)
и отчётами. Каждая точка — независимый вызов `derive`.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

import numpy as np
import pandas as pd

from hydrocalc.core.types import CylinderInputs, RESULT_KINDS
from hydrocalc.core.units import UnitSystem
from hydrocalc.core.validation import ensure_input_field

from .cylinder import derive


def sweep(inputs: CylinderInputs, system: UnitSystem, field: str, values: Iterable[float]) -> pd.DataFrame:
    """Пересчитать результат для каждого значения поля `field`.

    Returns:
        DataFrame: колонка `field` + по колонке на каждую выходную величину
        (значения в единицах `system`).
    """

    ensure_input_field(field)

    rows = []
    for v in values:
        result = derive(replace(inputs, **{field: float(v)}), system)
        rows.append({field: float(v), **result.values()})

    return pd.DataFrame(rows, columns=[field, *RESULT_KINDS])


def linspace_sweep(
    inputs: CylinderInputs,
    system: UnitSystem,
    field: str,
    start: float,
    stop: float,
    num: int = 50,
) -> pd.DataFrame:
    grid = np.linspace(float(start), float(stop), int(num), dtype=np.float64)
    return sweep(inputs, system, field, grid)
