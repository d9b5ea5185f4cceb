"""
Console demo: contrast naive per-attribute filtering with composable
specifications over the sample catalog.
"""

import argparse
import json
import logging
import sys
from typing import Any

from .catalog import sample_products
from .config_loader import load_config_bundle
from .errors import build_error, error_lines
from .logging_config import audit_log, generate_session_id, set_session_id, setup_logging
from .renderer import ConsoleRenderer
from .scenarios import DEFAULT_SCENARIOS, SCENARIOS_BY_NAME, Scenario, run_scenarios

logger = logging.getLogger(__name__)


def _fail(payload: dict[str, Any]) -> None:
    for line in error_lines(payload):
        print(line, file=sys.stderr)
    sys.exit(2)


def select_scenarios(names: list[str] | None) -> tuple[Scenario, ...]:
    if not names:
        return DEFAULT_SCENARIOS
    unknown = [n for n in names if n not in SCENARIOS_BY_NAME]
    if unknown:
        available = ", ".join(SCENARIOS_BY_NAME)
        raise ValueError(f"Unknown scenario '{unknown[0]}'. Available scenarios: {available}")
    return tuple(SCENARIOS_BY_NAME[n] for n in names)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Filter the sample catalog with naive and specification-based filters."
    )
    parser.add_argument(
        "--scenario",
        action="append",
        dest="scenarios",
        help="Scenario to run (repeatable). Defaults to all: "
        + ", ".join(SCENARIOS_BY_NAME),
    )
    parser.add_argument("--json", action="store_true", help="Emit results as JSON on stdout")
    parser.add_argument("--config-dir", type=str, help="Directory holding runtime_config.json")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )

    args = parser.parse_args()

    try:
        config_bundle = load_config_bundle(config_dir=args.config_dir)
    except (FileNotFoundError, ValueError) as exc:
        _fail(
            build_error(
                "Invalid runtime configuration.",
                details=str(exc),
                hint="Check runtime_config.json or unset SPECFILTER_STRICT_CONFIG.",
            )
        )
        return

    system_config = config_bundle["system_config"]
    setup_logging(
        console_level=args.log_level or system_config["console_log_level"],
        file_level=system_config["file_log_level"],
        json_format=system_config["json_logs"],
    )
    set_session_id(generate_session_id())

    try:
        scenarios = select_scenarios(args.scenarios)
    except ValueError as exc:
        _fail(
            build_error(
                "Invalid scenario.",
                details=str(exc),
                hint="Use --scenario with one of the listed names, or omit it to run all.",
            )
        )
        return

    results = run_scenarios(sample_products(), scenarios)
    for result in results:
        audit_log(
            "Scenario completed",
            scenario=result.scenario.name,
            matches=len(result.matches),
        )

    if args.json:
        print(json.dumps({"scenarios": [r.to_dict() for r in results]}, indent=2))
        return

    ConsoleRenderer(results, display_config=config_bundle["display_config"]).render()


if __name__ == "__main__":
    main()
