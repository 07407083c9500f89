"""Pytest configuration.

Goal: make `import hydrocalc` work reliably when running tests without installing
package (editable install).

This repo uses a flat layout (hydrocalc/ at repo root). Some environments run
pytest with a working directory where repo root isn't on sys.path, leading to
`ModuleNotFoundError: hydrocalc`.

This conftest ensures repo root is on sys.path.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


@pytest.fixture()
def metric_inputs():
    from hydrocalc.core.types import CylinderInputs

    # 50/25 мм, ход 300 мм, 150 бар, 20 л/мин, КПД 0.9
    return CylinderInputs(bore=50.0, rod=25.0, stroke=300.0, pressure=150.0, flow=20.0, efficiency=0.9)
