# utils.py
"""
Utility functions for the snowfall framework.

This module provides helper functions, such as logging setup and config
loading, that are used across different parts of the application but do
not belong to a specific domain like the simulation or rendering.
"""
import logging
import logging.handlers
import json
import os
import numpy as np
from typing import Dict, Any

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs:
#     - config: A dictionary containing a "logging" key with "level",
#       "format", and "log_file" sub-keys.
#   - Outputs: None
#   - Side Effects: Configures the root Python logger. Creates a log
#     directory if it doesn't exist. Sets up a console handler and a
#     rotating file handler.
#   - Invariants: After this function runs, the logging system is
#     initialized and ready for use throughout the application.
#
# validate_config(config: Dict[str, Any]) -> None:
#   - Side Effects: Raises ValueError for malformed scene, visualization
#     or run_control sections. Simulation parameters are validated by the
#     components that consume them.
#
# uniform_int(rng, low: int, high: int) -> int:
#   - Outputs: A uniform integer in [low, high], both ends inclusive.

def setup_logging(config: Dict[str, Any]) -> None:
    """
    Configures the logging system from a configuration dictionary.

    Sets up logging to both the console and a rotating file.
    """
    log_config = config.get('logging', {})
    log_level = log_config.get('level', 'INFO').upper()
    log_format = log_config.get('format', '%(asctime)s - %(levelname)s - %(message)s')
    log_file_path = log_config.get('log_file', 'logs/snowfall.log')

    # Ensure the log directory exists
    log_dir = os.path.dirname(log_file_path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Clear existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Rotates when the log reaches 1MB, keeps 5 backup logs.
    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path, maxBytes=1024*1024, backupCount=5
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    logging.info("Logging system initialized.")
    logging.debug(f"Log level set to {log_level}.")
    logging.debug(f"Log file path: {log_file_path}")

def load_config(path: str) -> Dict[str, Any]:
    """Loads a JSON configuration file."""
    logging.info(f"Loading configuration from {path}...")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
        logging.info("Configuration loaded successfully.")
        return config
    except FileNotFoundError:
        logging.error(f"Configuration file not found at {path}.")
        raise
    except json.JSONDecodeError:
        logging.error(f"Error decoding JSON from {path}.")
        raise

def _fail(msg: str) -> None:
    logging.critical(msg)
    raise ValueError(msg)

def validate_config(config: Dict[str, Any]) -> None:
    """
    Checks the scene, visualization and run_control sections.

    Raises:
        ValueError: If any value is out of its allowed range.
    """
    scene = config.get('scene', {})
    interval = scene.get('frame_interval_ms', 90)
    if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
        _fail(f"Configuration error: frame_interval_ms must be a positive integer, got {interval!r}.")

    vis = config.get('visualization', {})
    for key in ('cell_size', 'columns', 'rows'):
        value = vis.get(key)
        if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value <= 0):
            _fail(f"Configuration error: visualization.{key} must be a positive integer, got {value!r}.")

    run = config.get('run_control', {})
    throttle = run.get('log_throttle_steps', 100)
    if not isinstance(throttle, int) or throttle <= 0:
        _fail(f"Configuration error: log_throttle_steps must be a positive integer, got {throttle!r}.")
    max_frames = run.get('max_frames', 0)
    if not isinstance(max_frames, int) or max_frames < 0:
        _fail(f"Configuration error: max_frames must be zero or a positive integer, got {max_frames!r}.")

    logging.debug("Configuration validated.")

def uniform_int(rng: np.random.Generator, low: int, high: int) -> int:
    """Draws a uniform integer from [low, high], inclusive on both ends."""
    return int(rng.integers(low, high, endpoint=True))
