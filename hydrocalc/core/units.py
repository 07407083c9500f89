"""hydrocalc.core.units

Слой единиц измерения калькулятора.

Принцип: все промежуточные расчёты идут в каноничных (метрических) единицах:
- длина: мм
- давление: бар
- расход: л/мин
- площадь: см²
- сила: кН
- объём: л
- скорость: мм/с
- время: с

Имперская система — только способ ввода/отображения. Перевод делается
на границе: ввод -> канон (`to_canonical`), канон -> отображение (`to_display`).
"""

from __future__ import annotations

from typing import Dict, Literal, Tuple


UnitSystem = Literal["metric", "imperial"]
QuantityKind = Literal["length", "pressure", "flow", "area", "force", "volume", "speed", "time"]

UNIT_SYSTEMS: Tuple[UnitSystem, ...] = ("metric", "imperial")
DEFAULT_UNIT_SYSTEM: UnitSystem = "metric"

QUANTITY_KINDS: Tuple[QuantityKind, ...] = (
    "length",
    "pressure",
    "flow",
    "area",
    "force",
    "volume",
    "speed",
    "time",
)

# Imperial <-> canonical factors
MM_PER_IN: float = 25.4
BAR_PER_PSI: float = 0.0689476
LPM_PER_GPM: float = 3.78541
CM2_PER_IN2: float = 6.4516
LBF_PER_KN: float = 224.809
GAL_PER_L: float = 0.264172

# Внутренние масштабы канона
MM2_PER_CM2: float = 100.0
FORCE_BAR_CM2_PER_KN: float = 100.0  # калибровка bar*cm² -> kN, не менять
VOLUME_CM2_MM_PER_L: float = 10000.0


UNIT_LABELS: Dict[UnitSystem, Dict[QuantityKind, str]] = {
    "metric": {
        "length": "mm",
        "pressure": "bar",
        "flow": "L/min",
        "area": "cm²",
        "force": "kN",
        "volume": "L",
        "speed": "mm/s",
        "time": "s",
    },
    "imperial": {
        "length": "in",
        "pressure": "psi",
        "flow": "gpm",
        "area": "in²",
        "force": "lbf",
        "volume": "gal",
        "speed": "in/s",
        "time": "s",
    },
}


def unit_label(kind: QuantityKind, system: UnitSystem) -> str:
    return UNIT_LABELS[system][kind]


def to_canonical(value: float, kind: QuantityKind, system: UnitSystem) -> float:
    """Перевести значение из системы `system` в каноничные единицы."""

    if system == "metric":
        return value
    if kind in ("length", "speed"):
        return value * MM_PER_IN
    if kind == "pressure":
        return value * BAR_PER_PSI
    if kind == "flow":
        return value * LPM_PER_GPM
    if kind == "area":
        return value * CM2_PER_IN2
    if kind == "force":
        return value / LBF_PER_KN
    if kind == "volume":
        return value / GAL_PER_L
    # время в секундах в обеих системах
    return value


def to_display(value: float, kind: QuantityKind, system: UnitSystem) -> float:
    """Перевести каноничное значение в систему отображения `system`."""

    if system == "metric":
        return value
    if kind in ("length", "speed"):
        return value / MM_PER_IN
    if kind == "pressure":
        return value / BAR_PER_PSI
    if kind == "flow":
        return value / LPM_PER_GPM
    if kind == "area":
        return value / CM2_PER_IN2
    if kind == "force":
        return value * LBF_PER_KN
    if kind == "volume":
        return value * GAL_PER_L
    return value
