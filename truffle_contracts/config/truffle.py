"""
Truffle build-tool configuration provider.

Truffle itself reads a JavaScript config; projects using this package
export the directory settings to JSON (``truffle-config.json`` by default).
Keys missing from the file fall back to Truffle's own defaults.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "truffle-config.json"

DEFAULT_CONFIGURATION = {
    "contracts_directory": "contracts",
    "migrations_directory": "migrations",
    "contracts_build_directory": "build/contracts",
}


def get_truffle_configuration(
    work_dir: str,
    config_name: Optional[str] = None
) -> Dict[str, Any]:
    """
    Load the Truffle configuration for a project.

    Args:
        work_dir: Project root directory
        config_name: Configuration file name, relative to work_dir

    Returns:
        Configuration dictionary including directory settings

    Raises:
        ConfigurationError: If the configuration file is not a JSON object
    """
    configuration = dict(DEFAULT_CONFIGURATION)
    config_path = Path(work_dir) / (config_name or DEFAULT_CONFIG_NAME)

    if not config_path.is_file():
        logger.debug("No configuration at %s, using defaults", config_path)
        return configuration

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(config_path, e) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            config_path, f"expected an object, got {type(data).__name__}"
        )

    for key in DEFAULT_CONFIGURATION:
        value = data.get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigurationError(
                config_path, f"{key} must be a path string, got {type(value).__name__}"
            )

    configuration.update(data)
    return configuration
