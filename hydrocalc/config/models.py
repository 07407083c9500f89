from __future__ import annotations

from dataclasses import dataclass, field, fields
import json
from pathlib import Path
from typing import Any, Dict

from hydrocalc.core.types import CylinderInputs, INPUT_FIELDS
from hydrocalc.core.units import DEFAULT_UNIT_SYSTEM, UnitSystem
from hydrocalc.core.validation import (
    ensure_bool,
    ensure_int,
    ensure_mapping,
    ensure_non_negative,
    ensure_unit_system,
    parse_number,
)


@dataclass(frozen=True)
class CalculatorConfig:
    unit_system: UnitSystem = DEFAULT_UNIT_SYSTEM
    digits: int = 2                 # знаков после запятой в выводе
    grouping: bool = True           # разделитель тысяч
    initial_inputs: CylinderInputs = field(default_factory=CylinderInputs)

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit_system", ensure_unit_system(self.unit_system, "unit_system"))
        ensure_non_negative(self.digits, "digits")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CalculatorConfig":
        """Собрать конфиг из JSON-объекта; типы проверяются строго (ValueError)."""

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"config keys must be in {sorted(known)}, got {sorted(unknown)}")

        kwargs: Dict[str, Any] = {}
        if "unit_system" in data:
            kwargs["unit_system"] = data["unit_system"]
        if "digits" in data:
            kwargs["digits"] = ensure_int(data["digits"], "digits")
        if "grouping" in data:
            kwargs["grouping"] = ensure_bool(data["grouping"], "grouping")
        if "initial_inputs" in data:
            raw = ensure_mapping(data["initial_inputs"], "initial_inputs")
            # значения полей разбираются так же толерантно, как ввод формы
            kwargs["initial_inputs"] = CylinderInputs(
                **{name: parse_number(raw.get(name)) for name in INPUT_FIELDS}
            )
        return cls(**kwargs)


def load_config(path: str | Path) -> CalculatorConfig:
    """Прочитать конфиг из JSON; отсутствующие ключи остаются по умолчанию."""

    p = Path(path)
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"config must be a JSON object, got {type(data).__name__}")
    return CalculatorConfig.from_dict(data)
