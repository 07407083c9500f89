"""Страница калькулятора гидроцилиндра (Streamlit).

Запуск:
    streamlit run hydrocalc/app.py

Streamlit перезапускает скрипт на каждое изменение виджета, поэтому
"пересчёт на каждое изменение" получается сам: каждый прогон строит новый
`FormState` и вызывает контроллер.
"""

from __future__ import annotations

import numpy as np
import streamlit as st

from hydrocalc.config import PRESETS, CalculatorConfig
from hydrocalc.controller import CalculatorController, FormState
from hydrocalc.core.types import INPUT_FIELDS, INPUT_KINDS
from hydrocalc.core.units import UNIT_SYSTEMS
from hydrocalc.physics import convert_inputs
from hydrocalc.physics.sweep import linspace_sweep
from hydrocalc.report import results_frame


FIELD_TITLES = {
    "bore": "Bore diameter",
    "rod": "Rod diameter",
    "stroke": "Stroke",
    "pressure": "Pressure",
    "flow": "Flow",
    "efficiency": "Efficiency (0-1)",
}


def _apply_preset(name: str, system: str) -> None:
    """Заполнить поля формы значениями пресета в текущей системе единиц."""

    preset = PRESETS[name]
    inputs = convert_inputs(preset.inputs, preset.system, system)
    for field_name in INPUT_FIELDS:
        st.session_state[f"field_{field_name}"] = f"{getattr(inputs, field_name):g}"


def main() -> None:
    st.set_page_config(page_title="Hydraulic Cylinder Calculator", layout="wide")
    st.title("Hydraulic Cylinder Calculator")

    system = st.sidebar.selectbox("Unit system", list(UNIT_SYSTEMS), index=0, key="unit_system")

    preset_choice = st.sidebar.selectbox("Presets", ["Custom", *PRESETS.keys()], index=0)
    if preset_choice != "Custom" and st.sidebar.button("Apply preset"):
        _apply_preset(preset_choice, system)

    controller = CalculatorController(CalculatorConfig(unit_system=system))
    labels = controller.labels

    st.subheader("Inputs")
    cols = st.columns(3)
    raw = {}
    for i, name in enumerate(INPUT_FIELDS):
        kind = INPUT_KINDS[name]
        title = FIELD_TITLES[name] if kind is None else f"{FIELD_TITLES[name]} ({labels[kind]})"
        with cols[i % 3]:
            raw[name] = st.text_input(title, key=f"field_{name}")

    display = controller.set_state(FormState(system=system, **raw))
    result = controller.result

    st.markdown("---")
    c1, c2, c3 = st.columns(3)
    c1.metric("Extend force", display.stat_extend_force)
    c2.metric("Retract force", display.stat_retract_force)
    c3.metric("Cycle time", display.stat_cycle_time)

    st.subheader("Results")
    st.dataframe(results_frame(result, digits=controller.cfg.digits), hide_index=True)

    inputs = controller.state.inputs()
    if inputs.flow > 0:
        st.subheader(f"Speed vs flow ({labels['speed']})")
        frame = linspace_sweep(inputs, system, "flow", 0.0, 2.0 * inputs.flow, num=41)
        frame = frame.replace([np.inf, -np.inf], np.nan)
        st.line_chart(frame, x="flow", y=["extend_speed", "retract_speed"])


if __name__ == "__main__":
    main()
