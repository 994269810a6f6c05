"""
File handling utilities for the hospital billing application.
"""

import json
from pathlib import Path
from typing import Dict, Any, Union

from .logger import get_logger

logger = get_logger('FileHandler')


def load_config(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a JSON configuration file.

    Args:
        file_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a JSON object
    """
    file_path = Path(file_path)

    if not file_path.exists():
        error_msg = f"Config file not found: {file_path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        error_msg = f"Error reading config {file_path}: {str(e)}"
        logger.error(error_msg)
        raise ValueError(error_msg) from e

    if not isinstance(config, dict):
        error_msg = f"Config file must contain a JSON object: {file_path}"
        logger.error(error_msg)
        raise ValueError(error_msg)

    logger.info(f"Loaded config from: {file_path}")
    return config
