# utils.py
"""
Utility functions for the starfield application.

This module provides helpers, such as logging setup, that are used across
the application but do not belong to the simulation or rendering.
"""
import logging
import logging.handlers
import os
from typing import Dict, Any

# --- Data Contracts ---
#
# setup_logging(config: Dict[str, Any]) -> None:
#   - Inputs:
#     - config: A dictionary with optional "level", "format" and
#       "log_file" keys (see constants.LOGGING).
#   - Outputs: None
#   - Side Effects: Configures the root Python logger. Creates the log
#     directory if it doesn't exist. Sets up a console handler and a
#     rotating file handler (skipped when "log_file" is empty).
#   - Invariants: After this function runs, the logging system is
#     initialized and ready for use throughout the application.

def setup_logging(config: Dict[str, Any]) -> None:
    """
    Configures the logging system from a configuration dictionary.

    Sets up logging to the console and, when a log file is given, to a
    rotating file.
    """
    log_level = config.get('level', 'INFO').upper()
    log_format = config.get('format', '%(asctime)s - %(levelname)s - %(message)s')
    log_file_path = config.get('log_file', 'logs/starfield.log')

    logger = logging.getLogger()
    logger.setLevel(log_level)

    # Clear existing handlers to avoid duplication
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(log_format)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file_path:
        log_dir = os.path.dirname(log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        # Rotates when the log reaches 1MB, keeps 5 backup logs.
        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path, maxBytes=1024*1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logging.info("Logging system initialized.")
    logging.debug(f"Log level set to {log_level}.")
    logging.debug(f"Log file path: {log_file_path or '<console only>'}")
