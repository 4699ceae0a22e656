"""Configuration loader backed by YAML files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from bsc_balance_checker.core.config import CheckerConfig
from bsc_balance_checker.exceptions import ConfigurationError

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"


def _read_yaml(path: Path) -> dict[str, Any]:
    """
    Read a YAML mapping from disk.

    Parameters
    ----------
    path : Path
        YAML file to read

    Returns
    -------
    dict[str, Any]
        Parsed mapping (empty for an empty file)

    Raises
    ------
    ConfigurationError
        If the file is missing, unreadable, malformed, or not a mapping

    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        msg = f"Config file {path} not found"
        raise ConfigurationError(msg) from e
    except (OSError, yaml.YAMLError) as e:
        msg = f"Cannot read config file {path}: {e}"
        raise ConfigurationError(msg) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file {path} must contain a mapping, got {type(data).__name__}"
        raise ConfigurationError(msg)
    return data


def load_defaults() -> dict[str, Any]:
    """
    Load the bundled default settings from defaults.yaml.

    Returns
    -------
    dict[str, Any]
        Default configuration values

    """
    return _read_yaml(DEFAULTS_PATH)


def load_config(path: Path | None = None, **overrides: Any) -> CheckerConfig:
    """
    Build the run configuration.

    Bundled defaults are overlaid with the user's YAML file (top-level keys
    replace defaults wholesale) and then with keyword overrides whose value
    is not None.

    Parameters
    ----------
    path : Path | None
        Optional user configuration file
    **overrides : Any
        Individual settings taking precedence over both files

    Returns
    -------
    CheckerConfig
        Validated configuration

    Raises
    ------
    ConfigurationError
        If any source cannot be read or the merged settings are invalid

    """
    data = load_defaults()
    if path is not None:
        data.update(_read_yaml(path))
    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return CheckerConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid configuration: {e}"
        raise ConfigurationError(msg) from e


def get_rpc_endpoints(path: Path | None = None) -> list[str]:
    """
    Get the ordered list of configured RPC endpoints.

    Parameters
    ----------
    path : Path | None
        Optional user configuration file

    Returns
    -------
    list[str]
        RPC endpoint URLs

    """
    return load_config(path).rpc_urls
