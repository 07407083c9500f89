"""hydrocalc.core.validation

Разбор пользовательского ввода и проверки конфигурации.

Две разные политики:
- числовые поля формы толерантны: всё, что не разбирается как число, даёт 0
  (частичный ввод показывает нули, а не ошибку);
- конфигурация/аргументы (система единиц, имя поля, digits) проверяются строго
  и бросают ValueError.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping

from .types import INPUT_FIELDS
from .units import UNIT_SYSTEMS, UnitSystem


# Числовой префикс строки: "12.5mm" -> 12.5, "1e400" -> inf, "abc" -> нет совпадения
_NUMBER_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(raw: Any) -> float:
    """Разобрать значение поля формы; неразбираемое или нечисловое -> 0.0.

    Строки разбираются по ведущему числовому префиксу ("150 bar" -> 150.0).
    "Infinity" и переполнение ("1e400") дают ±inf, как parseFloat; такой ввод
    доходит до расчёта, а на выводе превращается в "0". nan -> 0.0.
    """

    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            # int за пределами float
            value = math.inf if raw > 0 else -math.inf
    else:
        match = _NUMBER_PREFIX.match(str(raw).strip())
        if match is None:
            return 0.0
        value = float(match.group(0))

    if math.isnan(value) or value == 0.0:
        # -0.0 тоже сводим к 0.0
        return 0.0
    return value


def ensure_non_negative(value: float, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")


def ensure_unit_system(value: Any, name: str = "unit_system") -> UnitSystem:
    system = str(value).strip().lower()
    if system not in UNIT_SYSTEMS:
        raise ValueError(f"{name} must be one of {list(UNIT_SYSTEMS)}, got {value!r}")
    return system  # type: ignore[return-value]


def ensure_input_field(value: str, name: str = "field") -> str:
    if value not in INPUT_FIELDS:
        raise ValueError(f"{name} must be one of {list(INPUT_FIELDS)}, got {value!r}")
    return value


def ensure_int(value: Any, name: str) -> int:
    # bool — подкласс int, но в конфиге это ошибка
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def ensure_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean, got {value!r}")
    return value


def ensure_mapping(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"{name} must be an object, got {value!r}")
    return value
