# SPDX-License-Identifier: MIT
"""
Post-processing configuration loader for pwfilter.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from pwfilter.core.exceptions import PWFilterConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = [".pwfilter.yml", ".pwfilter.yaml"]
CHECK_NAMES = ("confidence", "placeholder", "unicode")


def load_config(config_path: Optional[str] = None, repo_root: str = ".") -> Dict[str, Any]:
    """
    Load post-processing configuration following the search order.

    Args:
        config_path: Explicit config path from --config CLI flag
        repo_root: Repository root path for searching .pwfilter.yml/.pwfilter.yaml

    Returns:
        Dictionary containing post-processing configuration

    Raises:
        PWFilterConfigError: If config file is malformed or explicitly provided config is missing
    """
    repo_path = Path(repo_root).resolve()

    # 1. If CLI --config provided → load it
    if config_path:
        config_abs_path = Path(config_path).resolve()
        if not config_abs_path.exists():
            raise PWFilterConfigError(
                f"Specified config file not found: {config_abs_path}",
                config_path=str(config_abs_path)
            )
        return _load_config_file(config_abs_path)

    # 2. Look for .pwfilter.yml or .pwfilter.yaml at repo root
    for config_name in CONFIG_FILE_NAMES:
        config_file = repo_path / config_name
        if config_file.exists():
            return _load_config_file(config_file)

    # 3. Use built-in defaults
    logger.debug("Using default post-processing config")
    return get_default_config()


def _load_config_file(config_path: Path) -> Dict[str, Any]:
    try:
        config = _load_yaml_config(config_path)
    except PWFilterConfigError as e:
        e.config_path = str(config_path)
        raise
    except (OSError, yaml.YAMLError, ValueError) as e:
        raise PWFilterConfigError(
            f"Failed to parse config file: {e}",
            config_path=str(config_path)
        ) from e
    logger.info("Loaded config: %s", config_path)
    return config


def _load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """Load and validate YAML config file."""
    with open(config_path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise ValueError("Config must be a dictionary")

    config = _apply_defaults(config)
    validate_config(config)
    return config


def _apply_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply default values to post-processing configuration."""
    defaults = get_default_config()

    for key, value in defaults.items():
        if key not in config:
            config[key] = value

    checks = config["checks"]
    if isinstance(checks, dict):
        for name in CHECK_NAMES:
            checks.setdefault(name, True)

    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate post-processing configuration values.

    Raises:
        PWFilterConfigError: If a value has the wrong type or range
    """
    min_length = config.get("min_value_length")
    if not isinstance(min_length, int) or isinstance(min_length, bool) or min_length < 0:
        raise PWFilterConfigError(
            "min_value_length must be a non-negative integer", key="min_value_length"
        )

    sigils = config.get("variable_sigils")
    if not isinstance(sigils, list) or not all(isinstance(s, str) and s for s in sigils):
        raise PWFilterConfigError(
            "variable_sigils must be a list of non-empty strings", key="variable_sigils"
        )

    checks = config.get("checks")
    if not isinstance(checks, dict):
        raise PWFilterConfigError("checks section must be a dictionary", key="checks")
    for name, enabled in checks.items():
        if name not in CHECK_NAMES:
            raise PWFilterConfigError(f"Unknown check: {name}", key="checks")
        if not isinstance(enabled, bool):
            raise PWFilterConfigError(f"Check {name} must be true or false", key="checks")

    max_confidence = config.get("max_confidence")
    if max_confidence not in (1, 2, 3) or isinstance(max_confidence, bool):
        raise PWFilterConfigError("max_confidence must be 1, 2 or 3", key="max_confidence")


def get_default_config() -> Dict[str, Any]:
    """
    Get the default post-processing configuration.

    Returns:
        Dictionary with default settings
    """
    return {
        "min_value_length": 3,
        "variable_sigils": ["$"],
        "checks": {name: True for name in CHECK_NAMES},
        "max_confidence": 3,
    }


def create_default_config_template() -> str:
    """
    Create a minimal .pwfilter.yml template with commented examples.

    Returns:
        YAML string with default configuration template
    """
    return """# pwfilter post-processing configuration

# Values shorter than this are dropped as noise
min_value_length: 3

# Values starting with one of these are variable references, not secrets
variable_sigils:
  - "$"
  # - "%"

# Checks to run on every candidate
checks:
  confidence: true
  placeholder: true
  unicode: true

# Drop kept findings whose confidence tier is above this (1 = most trusted)
max_confidence: 3
"""
