"""Табличные представления результата (pandas) для страницы и CLI."""

from __future__ import annotations

import pandas as pd

from hydrocalc.core.types import CylinderInputs, DerivedResult, RESULT_KINDS
from hydrocalc.core.units import UNIT_SYSTEMS, UnitSystem
from hydrocalc.display import format_quantity
from hydrocalc.physics import convert_inputs, derive


QUANTITY_TITLES = {
    "piston_area": "Piston area",
    "annulus_area": "Annulus area",
    "extend_force": "Extend force",
    "retract_force": "Retract force",
    "extend_volume": "Extend volume",
    "retract_volume": "Retract volume",
    "extend_speed": "Extend speed",
    "retract_speed": "Retract speed",
    "extend_time": "Extend time",
    "retract_time": "Retract time",
    "cycle_time": "Cycle time",
}


def results_frame(result: DerivedResult, digits: int = 2) -> pd.DataFrame:
    rows = []
    for name in RESULT_KINDS:
        q = getattr(result, name)
        rows.append(
            {
                "quantity": QUANTITY_TITLES[name],
                "value": q.value,
                "unit": q.unit,
                "text": format_quantity(q, digits),
            }
        )
    return pd.DataFrame(rows, columns=["quantity", "value", "unit", "text"])


def comparison_frame(inputs: CylinderInputs, system: UnitSystem, digits: int = 2) -> pd.DataFrame:
    """Один и тот же цилиндр в обеих системах единиц.

    `inputs` заданы в системе `system`; для второй системы ввод переводится,
    так что обе колонки описывают одну физическую конфигурацию.
    """

    frame = pd.DataFrame({"quantity": [QUANTITY_TITLES[name] for name in RESULT_KINDS]})
    for target in UNIT_SYSTEMS:
        result = derive(convert_inputs(inputs, system, target), target)
        frame[target] = [format_quantity(getattr(result, name), digits) for name in RESULT_KINDS]
    return frame
