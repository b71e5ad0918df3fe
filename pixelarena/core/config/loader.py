"""YAML loading helpers shared by the configuration modules."""

import os
from typing import Any, Optional

import yaml

# pixelarena/assets/data, resolved relative to this file
DATA_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
    "assets",
    "data",
)


def data_path(*parts: str) -> str:
    """Build a path inside the bundled data directory."""
    return os.path.join(DATA_DIR, *parts)


def load_yaml_section(path: str, root_key: str) -> dict[str, Any]:
    """Load a YAML file and return the mapping stored under ``root_key``.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid YAML or the section is not a mapping
        KeyError: If ``root_key`` is missing
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Configuration file not found: {path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}")

    if not isinstance(data, dict) or root_key not in data:
        raise KeyError(f"Missing '{root_key}' section in {path}")

    section = data[root_key]
    if not isinstance(section, dict):
        raise ValueError(f"Section '{root_key}' in {path} must be a mapping")
    return section


def require(section: dict[str, Any], key: str, path: str, context: Optional[str] = None) -> Any:
    """Fetch a required key, naming the file and section on failure."""
    try:
        return section[key]
    except KeyError:
        where = f"{context}.{key}" if context else key
        raise KeyError(f"Invalid configuration structure in {path}: missing {where}")
