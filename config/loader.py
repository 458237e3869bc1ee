"""Configuration loader for the XML masking application.

This module handles loading and parsing of config.yaml settings.
"""

from pathlib import Path
from typing import Any

import yaml


DEFAULT_INPUT_EXTENSIONS = [".xml", ".txt", ".soap", ".wsdl", ".xsd", ".html", ".log"]


def load_config(config_path: str | None = None) -> dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to config.yaml in project root.

    Returns:
        Configuration dictionary
    """
    if config_path is None:
        # Look for config.yaml in project root (parent of config/)
        config_path = Path(__file__).parent.parent / "config.yaml"
    else:
        config_path = Path(config_path)

    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    return {}


def get_mask_elements(config: dict[str, Any]) -> list[str]:
    """
    Get the names of elements whose content should be masked.

    Names are returned as configured; YAML scalars such as numbers are
    converted to strings so that `- 42` masks `<42>`.

    Args:
        config: Configuration dictionary

    Returns:
        List of element names
    """
    elements = (config.get("masking") or {}).get("elements") or []
    return [str(name) for name in elements if name is not None]


def get_input_extensions(config: dict[str, Any]) -> list[str]:
    """
    Get the file extensions accepted as input.

    Args:
        config: Configuration dictionary

    Returns:
        Lower-cased extensions, each with a leading dot
    """
    extensions = (config.get("input") or {}).get("extensions") or DEFAULT_INPUT_EXTENSIONS
    normalized = []
    for ext in extensions:
        ext = str(ext).lower()
        normalized.append(ext if ext.startswith(".") else f".{ext}")
    return normalized


def get_output_config(config: dict[str, Any]) -> dict[str, str]:
    """
    Get output settings.

    Args:
        config: Configuration dictionary

    Returns:
        Dict with keys:
        - directory: output directory for batch mode
        - log_suffix: suffix appended to the input stem for log files
    """
    output = config.get("output") or {}
    return {
        "directory": output.get("directory") or "output",
        "log_suffix": output.get("log_suffix") or "_log.txt",
    }
