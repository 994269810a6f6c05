"""
Logging configuration for the hospital billing application.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional, Dict, Any
import sys


def setup_logger(
    name: str = 'hospitalbilling',
    level: str = 'WARNING',
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None
) -> logging.Logger:
    """
    Set up logging configuration.

    Console output goes to stderr; stdout carries the bill itself.

    Args:
        name: Logger name
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Log file name (if None, uses name.log)
        log_dir: Log directory (if None, uses 'logs')
        config: Additional configuration options

    Returns:
        Configured logger instance
    """
    config = config or {}

    logger = logging.getLogger(name)

    # Clear any existing handlers
    logger.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger.setLevel(numeric_level)

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    simple_formatter = logging.Formatter(
        '%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(simple_formatter)
    logger.addHandler(console_handler)

    file_targets = []
    if config.get('log_to_file', False):
        file_targets.append((log_file or f'{name}.log', numeric_level))
    if config.get('separate_error_log', False):
        file_targets.append((f'{name}_errors.log', logging.ERROR))

    if file_targets:
        log_path = Path(log_dir or 'logs')
        log_path.mkdir(parents=True, exist_ok=True)
        for file_name, handler_level in file_targets:
            handler = _rotating_handler(log_path / file_name, config)
            handler.setLevel(handler_level)
            handler.setFormatter(detailed_formatter)
            logger.addHandler(handler)

    logger.info(f"Logger '{name}' initialized with level {level}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the package namespace.

    Args:
        name: Logger name, usually the class name

    Returns:
        Logger instance
    """
    return logging.getLogger(f'hospitalbilling.{name}')


def _rotating_handler(path: Path, config: Dict[str, Any]) -> logging.Handler:
    return logging.handlers.RotatingFileHandler(
        path,
        maxBytes=config.get('max_log_size', 10 * 1024 * 1024),  # 10MB
        backupCount=config.get('backup_count', 5),
        encoding='utf-8'
    )
