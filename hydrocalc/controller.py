"""Контроллер формы: "изменился ввод -> derive -> render".

Состояние формы (сырой текст шести полей + система единиц) хранится как
иммутабельный снимок `FormState`; каждое изменение заменяет снимок целиком
и запускает полный пересчёт. Никаких глобальных переменных.

Порядок при смене системы единиц: сначала обновляются подписи единиц,
потом пересчёт.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import math
from typing import Callable, Dict, List, Tuple

from hydrocalc.config import CalculatorConfig
from hydrocalc.core.types import CylinderInputs, DerivedResult, INPUT_FIELDS
from hydrocalc.core.units import QuantityKind, UnitSystem
from hydrocalc.core.validation import ensure_input_field, ensure_unit_system, parse_number
from hydrocalc.display import DisplayValues, render, unit_labels
from hydrocalc.physics import derive

logger = logging.getLogger(__name__)


Listener = Callable[[Dict[QuantityKind, str], DisplayValues], None]


def _field_text(value: float) -> str:
    # repr(inf) == "inf" не разбирается обратно, а "Infinity" разбирается
    value = float(value)
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)


@dataclass(frozen=True)
class FormState:
    system: UnitSystem = "metric"
    bore: str = ""
    rod: str = ""
    stroke: str = ""
    pressure: str = ""
    flow: str = ""
    efficiency: str = ""

    @classmethod
    def from_inputs(cls, inputs: CylinderInputs, system: UnitSystem) -> "FormState":
        return cls(system=system, **{name: _field_text(getattr(inputs, name)) for name in INPUT_FIELDS})

    def inputs(self) -> CylinderInputs:
        return CylinderInputs(**{name: parse_number(getattr(self, name)) for name in INPUT_FIELDS})


class CalculatorController:
    def __init__(self, cfg: CalculatorConfig | None = None) -> None:
        self.cfg = cfg or CalculatorConfig()
        self._state = FormState.from_inputs(self.cfg.initial_inputs, self.cfg.unit_system)
        self._listeners: List[Listener] = []

        self._labels: Dict[QuantityKind, str] = unit_labels(self._state.system)
        self._result, self._display = self._compute()

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def labels(self) -> Dict[QuantityKind, str]:
        return dict(self._labels)

    @property
    def result(self) -> DerivedResult:
        return self._result

    @property
    def display(self) -> DisplayValues:
        return self._display

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def load(self) -> DisplayValues:
        """Начальная загрузка страницы: подписи единиц + пересчёт."""

        return self._update_units()

    def set_field(self, name: str, text: str) -> DisplayValues:
        ensure_input_field(name)
        self._state = replace(self._state, **{name: "" if text is None else str(text)})
        return self.recompute()

    def set_unit_system(self, system: str) -> DisplayValues:
        # сырые значения полей не пересчитываются: они читаются в новой системе
        self._state = replace(self._state, system=ensure_unit_system(system))
        return self._update_units()

    def set_state(self, state: FormState) -> DisplayValues:
        """Заменить снимок формы целиком (UI, который отдаёт всю форму разом)."""

        system_changed = state.system != self._state.system
        self._state = replace(state, system=ensure_unit_system(state.system))
        if system_changed:
            return self._update_units()
        return self.recompute()

    def _update_units(self) -> DisplayValues:
        self._labels = unit_labels(self._state.system)
        return self.recompute()

    def _compute(self) -> Tuple[DerivedResult, DisplayValues]:
        result = derive(self._state.inputs(), self._state.system)
        return result, render(result, digits=self.cfg.digits, grouping=self.cfg.grouping)

    def recompute(self) -> DisplayValues:
        self._result, self._display = self._compute()
        logger.debug("recompute: system=%s display=%s", self._state.system, self._display)

        for listener in self._listeners:
            listener(self.labels, self._display)
        return self._display
