"""
matrixprinter
=============

Direct ESC/P and ESC/P2 driver for dot matrix printers.

The package writes printer command bytes straight to a raw output sink (a
device node, a file, or a Windows printer share such as ``\\\\server\\LX300``)
instead of going through a graphics print subsystem, giving direct control
over pitch, print quality, character tables, emphasis and paper motion.

This package provides:
    - ESCPrinter: the command encoder that owns one print job's sink
    - escp.commands: named command bytes and pure command builders
    - get_logger / load_config: package logging and JSON configuration

Basic usage:
    >>> from matrixprinter import ESCPrinter, CharacterTable
    >>>
    >>> printer = ESCPrinter(r"\\\\printserver\\LX300", is_24pin=False)
    >>> if printer.initialize():
    ...     try:
    ...         printer.bold(True)
    ...         printer.print("Invoice 0042")
    ...         printer.bold(False)
    ...         printer.line_feed()
    ...         printer.advance_vertical(2.5)
    ...         printer.form_feed()
    ...     finally:
    ...         printer.close()

Configuration:
    >>> import os
    >>> os.environ['ESCP_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from matrixprinter import load_config, ESCPrinter
    >>> config = load_config()
    >>> with ESCPrinter.from_config(config) as printer:
    ...     printer.print("Hello")
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# VERSION METADATA
# =============================================================================

__version__ = "0.1.0"
__author__ = "matrixprinter developers"
__description__ = "Direct ESC/P and ESC/P2 driver for dot matrix printers"
__license__ = "BSD-3-Clause"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# PYTHON VERSION CHECK
# =============================================================================

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"matrixprinter requires Python 3.11 or newer. "
        f"Current version: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# LOGGING
# =============================================================================

LOGGER_NAMESPACE = "matrixprinter"


def _setup_logging() -> None:
    """
    Initialize package-wide logging.

    Configures the package logger with:
    - A console handler (stderr) for WARNING and above
    - A rotating file handler for all levels when ESCP_LOG_DIR is set
    - A format with timestamp, level, module, function and line

    The level comes from the ESCP_LOG_LEVEL environment variable (DEBUG,
    INFO, WARNING, ERROR, CRITICAL; default INFO).

    Called automatically on import. Idempotent: repeated calls do nothing
    once handlers are attached.
    """
    log_level_str = os.environ.get("ESCP_LOG_LEVEL", "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(LOGGER_NAMESPACE)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_dir_str = os.environ.get("ESCP_LOG_DIR")
    if log_dir_str:
        try:
            log_dir = Path(log_dir_str)
            log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_dir / "matrixprinter.log",
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                f"Could not initialize file logging: {e}. Logging to console only."
            )

    root_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger inside the package namespace.

    Loggers are named 'matrixprinter.<module_name>' and inherit the handlers
    set up by _setup_logging().

    Args:
        module_name: Usually ``__name__`` of the calling module.

    Returns:
        Configured logging.Logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Print job started")
        >>> logger.debug("Sent %d bytes", 12)
    """
    if not module_name.startswith(LOGGER_NAMESPACE):
        if module_name == "__main__":
            full_name = f"{LOGGER_NAMESPACE}.main"
        else:
            clean_name = module_name.lstrip(".")
            full_name = f"{LOGGER_NAMESPACE}.{clean_name}"
    else:
        full_name = module_name

    return logging.getLogger(full_name)


# =============================================================================
# CONFIGURATION
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "printer_target": None,
    "printer_24pin": False,
    "default_character_table": "BRAZIL",
    "text_encoding": None,
    "log_level": "INFO",
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load driver configuration from config.json, falling back to defaults.

    Configuration keys:
        - printer_target: str | None - Path or share name of the printer
        - printer_24pin: bool - True for 24/48-pin ESC/P2 printers
        - default_character_table: str - CharacterTable member name
        - text_encoding: str | None - Codec for text, None follows the table
        - log_level: str - Informational copy of the log level

    Args:
        config_path: Optional path to the configuration file. If None,
                     'config.json' in the current directory is used.

    Returns:
        Dictionary with every default key, user values overriding defaults.
        A missing, unreadable or malformed file yields the defaults and a
        logged warning.

    Example:
        >>> config = load_config(Path("printer.json"))
        >>> config["printer_24pin"]
        False
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("config.json")

    config = _DEFAULT_CONFIG.copy()

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError(
                    f"Configuration file must contain a JSON object, "
                    f"got {type(user_config).__name__}"
                )

            config.update(user_config)

            logger.info(f"Configuration loaded from {config_path}")
            logger.debug(f"Configuration: {config}")

        except json.JSONDecodeError as e:
            logger.warning(
                f"Could not parse {config_path}: invalid JSON "
                f"at line {e.lineno}, column {e.colno}. "
                f"Using default configuration."
            )
        except OSError as e:
            logger.warning(f"Could not read {config_path}: {e}. Using default configuration.")
        except ValueError as e:
            logger.warning(f"Invalid configuration format: {e}. Using default configuration.")
    else:
        logger.info(f"Configuration file {config_path} not found. Using default configuration.")

    return config


# =============================================================================
# PUBLIC API IMPORTS
# =============================================================================

# Imported after the utilities above: the driver modules call get_logger()
# and load_config() from this package.

from matrixprinter.escp.commands.charset import CharacterTable  # noqa: E402
from matrixprinter.escp.printer import ESCPrinter  # noqa: E402
from matrixprinter.exceptions import (  # noqa: E402
    PrinterConnectionError,
    PrinterError,
    PrinterNotInitializedError,
    PrinterWriteError,
)

__all__ = [
    # Version metadata
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Utilities
    "get_logger",
    "load_config",
    # Driver
    "ESCPrinter",
    "CharacterTable",
    # Exceptions
    "PrinterError",
    "PrinterConnectionError",
    "PrinterNotInitializedError",
    "PrinterWriteError",
]

# =============================================================================
# PACKAGE INITIALIZATION
# =============================================================================

_setup_logging()

_logger = get_logger(__name__)
_logger.debug(f"matrixprinter v{__version__} initialized")
_logger.debug(f"Python version: {sys.version}")
