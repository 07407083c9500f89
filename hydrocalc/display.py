"""Форматирование результата для UI.

Граница, на которой нефинитные значения (inf/nan из деления на нулевую
площадь) превращаются в "0". Сам расчёт об этом не знает.

Ключи `DisplayValues.as_dict()` совпадают с id элементов страницы
калькулятора ("piston-area", ..., "stat-cycle-time").
"""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Dict

from hydrocalc.core.types import DerivedResult, Quantity
from hydrocalc.core.units import QUANTITY_KINDS, UNIT_LABELS, QuantityKind, UnitSystem


def format_number(value: float, digits: int = 2, grouping: bool = True) -> str:
    if not math.isfinite(value):
        return "0"
    spec = f",.{digits}f" if grouping else f".{digits}f"
    return format(value, spec)


def format_quantity(q: Quantity, digits: int = 2, grouping: bool = True) -> str:
    return f"{format_number(q.value, digits, grouping)} {q.unit}"


def unit_labels(system: UnitSystem) -> Dict[QuantityKind, str]:
    """Подписи единиц для обновления всех `.unit`-меток при смене системы."""

    return {kind: UNIT_LABELS[system][kind] for kind in QUANTITY_KINDS}


@dataclass(frozen=True)
class DisplayValues:
    piston_area: str
    annulus_area: str
    extend_force: str
    retract_force: str
    extend_volume: str
    retract_volume: str
    extend_speed: str
    retract_speed: str
    cycle_time: str

    # Сводные карточки дублируют текст детальных строк
    @property
    def stat_extend_force(self) -> str:
        return self.extend_force

    @property
    def stat_retract_force(self) -> str:
        return self.retract_force

    @property
    def stat_cycle_time(self) -> str:
        return self.cycle_time

    def as_dict(self) -> Dict[str, str]:
        return {
            "piston-area": self.piston_area,
            "annulus-area": self.annulus_area,
            "extend-force": self.extend_force,
            "retract-force": self.retract_force,
            "extend-volume": self.extend_volume,
            "retract-volume": self.retract_volume,
            "extend-speed": self.extend_speed,
            "retract-speed": self.retract_speed,
            "cycle-time": self.cycle_time,
            "stat-extend-force": self.stat_extend_force,
            "stat-retract-force": self.stat_retract_force,
            "stat-cycle-time": self.stat_cycle_time,
        }


def render(result: DerivedResult, digits: int = 2, grouping: bool = True) -> DisplayValues:
    def fmt(q: Quantity) -> str:
        return format_quantity(q, digits, grouping)

    return DisplayValues(
        piston_area=fmt(result.piston_area),
        annulus_area=fmt(result.annulus_area),
        extend_force=fmt(result.extend_force),
        retract_force=fmt(result.retract_force),
        extend_volume=fmt(result.extend_volume),
        retract_volume=fmt(result.retract_volume),
        extend_speed=fmt(result.extend_speed),
        retract_speed=fmt(result.retract_speed),
        cycle_time=fmt(result.cycle_time),
    )
