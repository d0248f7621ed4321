"""Data loading and saving utilities."""

import json
import logging
from pathlib import Path
from typing import Dict, Any

from fuzzy_handover.config import Config

logger = logging.getLogger("handover.utils")


def load_json(filepath: str | Path) -> Dict[str, Any]:
    """
    Load JSON data from a file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Parsed JSON data

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file is not valid JSON
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    with open(filepath, "r", encoding="utf-8") as f:
        return json.load(f)


def save_json(data: Dict[str, Any], filepath: str | Path) -> None:
    """
    Save data to a JSON file, creating parent directories as needed.

    Args:
        data: Data to save
        filepath: Destination path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)

    logger.debug(f"Saved {filepath}")


def load_config(filepath: str | Path) -> Config:
    """
    Load a simulation configuration from a JSON file.

    Args:
        filepath: Path to a JSON document in the layout of Config.from_dict

    Returns:
        The parsed Config

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the document holds unknown or invalid parameters
    """
    data = load_json(filepath)
    if not isinstance(data, dict):
        raise ValueError(f"Invalid configuration in {filepath}: expected a JSON object")

    config = Config.from_dict(data)
    logger.info(f"Loaded configuration from {filepath}")
    return config
