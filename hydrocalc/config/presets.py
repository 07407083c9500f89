"""Типовые цилиндры для быстрого заполнения формы.

Значения записаны в той системе единиц, в которой их удобно вводить.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from hydrocalc.core.types import CylinderInputs
from hydrocalc.core.units import UnitSystem


@dataclass(frozen=True)
class Preset:
    name: str
    system: UnitSystem
    inputs: CylinderInputs


PRESETS: Dict[str, Preset] = {
    p.name: p
    for p in (
        Preset(
            name="compact_50x25",
            system="metric",
            inputs=CylinderInputs(bore=50.0, rod=25.0, stroke=300.0, pressure=150.0, flow=20.0, efficiency=0.9),
        ),
        Preset(
            name="excavator_boom_90x50",
            system="metric",
            inputs=CylinderInputs(bore=90.0, rod=50.0, stroke=1500.0, pressure=210.0, flow=60.0, efficiency=0.92),
        ),
        Preset(
            name="bucket_70x40",
            system="metric",
            inputs=CylinderInputs(bore=70.0, rod=40.0, stroke=800.0, pressure=210.0, flow=40.0, efficiency=0.9),
        ),
        Preset(
            name="tie_rod_3x1.5",
            system="imperial",
            inputs=CylinderInputs(bore=3.0, rod=1.5, stroke=12.0, pressure=2500.0, flow=8.0, efficiency=0.9),
        ),
    )
}
