"""
Runtime configuration for the Specfilter demo.

``runtime_config.json`` carries two sections:

- ``system``: console/file log levels and whether file logs are JSON
- ``display``: rich styles for header and item lines, and the bullet glyph

Every value is checked before use. In lenient mode a bad or missing value
prints a warning and falls back to its default; in strict mode it raises.
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional, TypedDict

from rich.errors import StyleSyntaxError
from rich.style import Style

CONFIG_DIR_ENV = "SPECFILTER_CONFIG_DIR"
STRICT_ENV = "SPECFILTER_STRICT_CONFIG"
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"
RUNTIME_CONFIG_FILE = "runtime_config.json"

DEFAULT_SYSTEM: dict[str, Any] = {
    "console_log_level": "WARNING",
    "file_log_level": "DEBUG",
    "json_logs": False,
}

DEFAULT_DISPLAY: dict[str, Any] = {
    "header_style": "bold blue",
    "item_style": "bold white",
    "bullet": "*",
}


class ConfigBundle(TypedDict):
    system_config: dict[str, Any]
    display_config: dict[str, Any]


def _resolve_config_dir(config_dir: Optional[str]) -> Path:
    if config_dir:
        return Path(config_dir)
    env_dir = os.getenv(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return DEFAULT_CONFIG_DIR


def _resolve_strict(strict: Optional[bool]) -> bool:
    if strict is not None:
        return strict
    env = os.getenv(STRICT_ENV, "")
    return env.lower() in {"1", "true", "yes", "on"}


def _complain(msg: str, *, strict: bool) -> None:
    if strict:
        raise ValueError(msg)
    print(f"Warning: {msg}", file=sys.stderr)


def _read_runtime_config(path: Path, *, strict: bool) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as exc:
        if strict:
            raise FileNotFoundError(f"Missing config file: {path}") from exc
        print(f"Warning: {path} not found, using defaults.", file=sys.stderr)
        return {}
    except json.JSONDecodeError as exc:
        _complain(f"Malformed config file: {path} ({exc})", strict=strict)
        return {}
    if not isinstance(payload, dict):
        _complain(f"Expected {RUNTIME_CONFIG_FILE} to be an object.", strict=strict)
        return {}
    return payload


def _section(runtime_config: dict[str, Any], key: str, *, strict: bool) -> dict[str, Any]:
    section = runtime_config.get(key, {})
    if isinstance(section, dict):
        return section
    _complain(f"Expected {RUNTIME_CONFIG_FILE}.{key} to be an object.", strict=strict)
    return {}


def is_log_level(value: Any) -> bool:
    """True for level names logging knows, e.g. "info" or "WARNING"."""
    return isinstance(value, str) and isinstance(logging.getLevelName(value.upper()), int)


def _is_style(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        Style.parse(value)
    except StyleSyntaxError:
        return False
    return True


def _is_bullet(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


_SYSTEM_CHECKS = {
    "console_log_level": (is_log_level, "a log level name"),
    "file_log_level": (is_log_level, "a log level name"),
    "json_logs": (lambda v: isinstance(v, bool), "true or false"),
}

_DISPLAY_CHECKS = {
    "header_style": (_is_style, "a rich style such as 'bold blue'"),
    "item_style": (_is_style, "a rich style such as 'bold blue'"),
    "bullet": (_is_bullet, "a non-empty string"),
}


def _validated(
    name: str,
    raw: dict[str, Any],
    defaults: dict[str, Any],
    checks: dict[str, Any],
    *,
    strict: bool,
) -> dict[str, Any]:
    result = dict(defaults)
    for key, value in raw.items():
        if key not in checks:
            _complain(f"Unknown setting {name}.{key}.", strict=strict)
            continue
        check, expected = checks[key]
        if not check(value):
            _complain(
                f"{name}.{key} must be {expected}, got {value!r}; using {defaults[key]!r}.",
                strict=strict,
            )
            continue
        result[key] = value
    return result


def load_config_bundle(
    *, config_dir: Optional[str] = None, strict: Optional[bool] = None
) -> ConfigBundle:
    """
    Load and validate runtime settings.

    Raises:
        FileNotFoundError: strict mode and no runtime_config.json
        ValueError: strict mode and a malformed file or invalid setting
    """
    strict_flag = _resolve_strict(strict)
    path = _resolve_config_dir(config_dir) / RUNTIME_CONFIG_FILE
    runtime_config = _read_runtime_config(path, strict=strict_flag)

    return {
        "system_config": _validated(
            "system",
            _section(runtime_config, "system", strict=strict_flag),
            DEFAULT_SYSTEM,
            _SYSTEM_CHECKS,
            strict=strict_flag,
        ),
        "display_config": _validated(
            "display",
            _section(runtime_config, "display", strict=strict_flag),
            DEFAULT_DISPLAY,
            _DISPLAY_CHECKS,
            strict=strict_flag,
        ),
    }
