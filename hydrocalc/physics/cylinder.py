"""Расчёт характеристик гидроцилиндра двустороннего действия.

Контракт: `derive(inputs, system) -> DerivedResult` — чистая функция без
состояния. Вызывается заново на каждое изменение ввода или системы единиц.

Порядок:
1) ввод (в единицах `system`) -> канон;
2) площади, силы, объёмы, скорости, времена — только в каноне;
3) канон -> система отображения + подписи единиц.

Единицы канона:
- Длина: мм
- Давление: бар
- Расход: л/мин
- Площадь: см²
- Сила: кН
- Объём: л
- Скорость: мм/с
- Время: с

Ввод не валидируется: отрицательные значения проходят со своим знаком.
Функции тотальны: деление на нулевую площадь при flow > 0 даёт inf (без
исключения), а нефинитные значения отсекаются при форматировании.
"""

from __future__ import annotations

import logging
import math

from hydrocalc.core.types import (
    INPUT_FIELDS,
    INPUT_KINDS,
    RESULT_KINDS,
    CanonicalResult,
    CylinderInputs,
    DerivedResult,
    Quantity,
)
from hydrocalc.core.units import (
    FORCE_BAR_CM2_PER_KN,
    MM2_PER_CM2,
    VOLUME_CM2_MM_PER_L,
    UnitSystem,
    to_canonical,
    to_display,
    unit_label,
)

logger = logging.getLogger(__name__)


def _circle_area(diameter: float) -> float:
    r = diameter / 2.0
    return math.pi * r * r


def _divide(num: float, den: float) -> float:
    # IEEE-деление: x/0 -> ±inf, 0/0 -> nan; Python бросает ZeroDivisionError
    if den == 0.0:
        if num == 0.0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def normalize_inputs(inputs: CylinderInputs, system: UnitSystem) -> CylinderInputs:
    """Перевести ввод из системы `system` в каноничные единицы."""

    values = {}
    for name in INPUT_FIELDS:
        kind = INPUT_KINDS[name]
        value = float(getattr(inputs, name))
        values[name] = value if kind is None else to_canonical(value, kind, system)
    return CylinderInputs(**values)


def convert_inputs(inputs: CylinderInputs, from_system: UnitSystem, to_system: UnitSystem) -> CylinderInputs:
    """Тот же физический цилиндр, записанный в другой системе единиц."""

    canonical = normalize_inputs(inputs, from_system)
    values = {}
    for name in INPUT_FIELDS:
        kind = INPUT_KINDS[name]
        value = getattr(canonical, name)
        values[name] = value if kind is None else to_display(value, kind, to_system)
    return CylinderInputs(**values)


def derive_canonical(inputs: CylinderInputs) -> CanonicalResult:
    """Посчитать все величины по каноничному вводу (мм, бар, л/мин)."""

    bore = inputs.bore
    rod = inputs.rod
    stroke = inputs.stroke
    pressure = inputs.pressure
    flow = inputs.flow
    efficiency = inputs.efficiency

    # площади, мм² -> см²
    piston_area_mm2 = _circle_area(bore)
    rod_area_mm2 = _circle_area(rod)
    annulus_area_mm2 = max(piston_area_mm2 - rod_area_mm2, 0.0)

    piston_area = piston_area_mm2 / MM2_PER_CM2
    annulus_area = annulus_area_mm2 / MM2_PER_CM2

    # силы, кН
    extend_force = pressure * piston_area / FORCE_BAR_CM2_PER_KN * efficiency
    retract_force = pressure * annulus_area / FORCE_BAR_CM2_PER_KN * efficiency

    # объёмы, л
    extend_volume = piston_area * stroke / VOLUME_CM2_MM_PER_L
    retract_volume = annulus_area * stroke / VOLUME_CM2_MM_PER_L

    # скорости, мм/с
    if flow > 0:
        extend_speed = _divide(flow * 1000.0, piston_area * 100.0)
        retract_speed = _divide(flow * 1000.0, annulus_area * 100.0)
    else:
        extend_speed = 0.0
        retract_speed = 0.0

    # времена хода, с
    extend_time = _divide(stroke, extend_speed) if extend_speed > 0 else 0.0
    retract_time = _divide(stroke, retract_speed) if retract_speed > 0 else 0.0

    return CanonicalResult(
        piston_area=piston_area,
        annulus_area=annulus_area,
        extend_force=extend_force,
        retract_force=retract_force,
        extend_volume=extend_volume,
        retract_volume=retract_volume,
        extend_speed=extend_speed,
        retract_speed=retract_speed,
        extend_time=extend_time,
        retract_time=retract_time,
        cycle_time=extend_time + retract_time,
    )


def to_display_result(canonical: CanonicalResult, system: UnitSystem) -> DerivedResult:
    """Перевести каноничный результат в систему отображения и подписать единицы."""

    quantities = {}
    for name, kind in RESULT_KINDS.items():
        value = to_display(getattr(canonical, name), kind, system)
        quantities[name] = Quantity(value=value, unit=unit_label(kind, system))
    return DerivedResult(system=system, **quantities)


def derive(inputs: CylinderInputs, system: UnitSystem) -> DerivedResult:
    canonical_inputs = normalize_inputs(inputs, system)
    canonical = derive_canonical(canonical_inputs)
    result = to_display_result(canonical, system)
    logger.debug("derive(%s, system=%s) -> %s", inputs, system, canonical)
    return result
