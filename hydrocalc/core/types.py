"""hydrocalc.core.types

Типы данных калькулятора: входные параметры цилиндра и результаты расчёта.

Все записи иммутабельные: на каждое изменение ввода создаётся новый экземпляр,
состояние полностью пересчитывается, а не обновляется инкрементально.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .units import QuantityKind, UnitSystem


# Поля ввода в порядке формы
INPUT_FIELDS: Tuple[str, ...] = ("bore", "rod", "stroke", "pressure", "flow", "efficiency")

# КПД безразмерный и не переводится
INPUT_KINDS: Dict[str, Optional[QuantityKind]] = {
    "bore": "length",
    "rod": "length",
    "stroke": "length",
    "pressure": "pressure",
    "flow": "flow",
    "efficiency": None,
}

# Выходные величины -> вид величины (для подписи единиц)
RESULT_KINDS: Dict[str, QuantityKind] = {
    "piston_area": "area",
    "annulus_area": "area",
    "extend_force": "force",
    "retract_force": "force",
    "extend_volume": "volume",
    "retract_volume": "volume",
    "extend_speed": "speed",
    "retract_speed": "speed",
    "extend_time": "time",
    "retract_time": "time",
    "cycle_time": "time",
}


@dataclass(frozen=True, slots=True)
class CylinderInputs:
    """Параметры цилиндра в единицах выбранной системы.

    efficiency — множитель (0..1), не проценты.
    """

    bore: float = 0.0
    rod: float = 0.0
    stroke: float = 0.0
    pressure: float = 0.0
    flow: float = 0.0
    efficiency: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return {name: float(getattr(self, name)) for name in INPUT_FIELDS}


@dataclass(frozen=True, slots=True)
class Quantity:
    value: float
    unit: str


@dataclass(frozen=True, slots=True)
class CanonicalResult:
    """Результат в каноничных единицах (см², кН, л, мм/с, с)."""

    piston_area: float
    annulus_area: float
    extend_force: float
    retract_force: float
    extend_volume: float
    retract_volume: float
    extend_speed: float
    retract_speed: float
    extend_time: float
    retract_time: float
    cycle_time: float


@dataclass(frozen=True, slots=True)
class DerivedResult:
    """Результат в выбранной системе отображения, каждое значение с подписью."""

    system: UnitSystem
    piston_area: Quantity
    annulus_area: Quantity
    extend_force: Quantity
    retract_force: Quantity
    extend_volume: Quantity
    retract_volume: Quantity
    extend_speed: Quantity
    retract_speed: Quantity
    extend_time: Quantity
    retract_time: Quantity
    cycle_time: Quantity

    def values(self) -> Dict[str, float]:
        return {name: getattr(self, name).value for name in RESULT_KINDS}
