"""Командная строка калькулятора.

Usage:
    hydrocalc --bore 50 --rod 25 --stroke 300 --pressure 150 --flow 20 --efficiency 0.9
    hydrocalc --units imperial --preset tie_rod_3x1.5
    hydrocalc --preset compact_50x25 --compare
    python -m hydrocalc --config calc.json --json
"""

from __future__ import annotations

import argparse
from dataclasses import replace
import json
import logging
import sys
from typing import List, Optional

from hydrocalc.config import PRESETS, CalculatorConfig, load_config
from hydrocalc.controller import CalculatorController, FormState
from hydrocalc.core.types import INPUT_FIELDS
from hydrocalc.core.units import UNIT_SYSTEMS
from hydrocalc.physics import convert_inputs
from hydrocalc.report import QUANTITY_TITLES, comparison_frame, results_frame

logger = logging.getLogger(__name__)


DISPLAY_ORDER = (
    ("piston-area", "Piston area"),
    ("annulus-area", "Annulus area"),
    ("extend-force", "Extend force"),
    ("retract-force", "Retract force"),
    ("extend-volume", "Extend volume"),
    ("retract-volume", "Retract volume"),
    ("extend-speed", "Extend speed"),
    ("retract-speed", "Retract speed"),
    ("cycle-time", "Cycle time"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hydrocalc",
        description="Hydraulic cylinder calculator: areas, forces, volumes, speeds and cycle time",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Metric cylinder 50/25 mm, 300 mm stroke, 150 bar, 20 L/min
  hydrocalc --bore 50 --rod 25 --stroke 300 --pressure 150 --flow 20 --efficiency 0.9

  # Preset, shown in imperial units
  hydrocalc --preset compact_50x25 --units imperial
        """,
    )

    parser.add_argument("--units", choices=UNIT_SYSTEMS, default=None, help="Unit system (default: from config, metric)")
    parser.add_argument("--preset", choices=sorted(PRESETS), default=None, help="Start from a preset cylinder")
    parser.add_argument("--config", type=str, default=None, help="JSON config file")

    for name in INPUT_FIELDS:
        # сырые строки: разбор толерантный, как в форме
        parser.add_argument(f"--{name}", type=str, default=None, help=f"{name} value in the selected unit system")

    out = parser.add_mutually_exclusive_group()
    out.add_argument("--json", action="store_true", help="Print display values as JSON")
    out.add_argument("--table", action="store_true", help="Print a results table")
    out.add_argument("--compare", action="store_true", help="Print the cylinder in both unit systems")

    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _initial_state(args: argparse.Namespace, cfg: CalculatorConfig) -> FormState:
    system = args.units or cfg.unit_system
    inputs = cfg.initial_inputs
    if args.preset is not None:
        preset = PRESETS[args.preset]
        system = args.units or preset.system
        inputs = convert_inputs(preset.inputs, preset.system, system)

    state = FormState.from_inputs(inputs, system)
    overrides = {name: getattr(args, name) for name in INPUT_FIELDS if getattr(args, name) is not None}
    return replace(state, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        cfg = load_config(args.config) if args.config else CalculatorConfig()
    except (OSError, ValueError) as e:
        parser.error(f"cannot load config {args.config}: {e}")

    state = _initial_state(args, cfg)
    logger.debug("initial form state: %s", state)

    controller = CalculatorController(cfg)
    display = controller.set_state(state)
    labels = controller.labels

    if args.json:
        payload = {"system": state.system, "labels": labels, "display": display.as_dict()}
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    elif args.table:
        print(results_frame(controller.result, digits=cfg.digits).drop(columns=["value"]).to_string(index=False))
    elif args.compare:
        print(comparison_frame(state.inputs(), state.system, digits=cfg.digits).to_string(index=False))
    else:
        values = display.as_dict()
        width = max(len(title) for title in QUANTITY_TITLES.values())
        for key, title in DISPLAY_ORDER:
            print(f"{title:<{width}}  {values[key]}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
