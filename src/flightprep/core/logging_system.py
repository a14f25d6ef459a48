"""Logging set-up for the calculation engines and the command line.

Loggers are plain ``logging`` loggers obtained through ``get_logger``. Until
``initialize_logging`` is called, records propagate to whatever handlers the
host application installed, so importing the engines never touches the
filesystem or the root logger.

``initialize_logging`` reads an optional YAML file and adds a combined log file
in the platform log directory. Each start rotates the file, keeping the last
five runs.

Platform-specific log locations:
    - macOS: ~/Library/Logs/FlightPrep/flightprep.log
    - Linux: ~/.flightprep/logs/flightprep.log
    - Windows: %AppData%/FlightPrep/Logs/flightprep.log

Typical usage example:
    from flightprep.core.logging_system import get_logger

    logger = get_logger(__name__)
    logger.debug("CG %.2f in at %.0f lbs", cg, weight)
"""

import logging
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory.
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "FlightPrep"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "FlightPrep" / "Logs"
    else:
        return Path.home() / ".flightprep" / "logs"


def rotate_logs(log_dir: Path, log_filename: str = "flightprep.log", keep_count: int = 5) -> None:
    """Rotate logs on startup, keeping the last N runs.

    Renames the current log to ``<name>.1``, shifts older logs up by one and
    deletes anything beyond ``keep_count``.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.
    """
    log_file = log_dir / log_filename
    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration (console only)."""
    return {
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": False,
            "filename": "flightprep.log",
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "components": {},
    }


def initialize_logging(
    config_path: str | Path | None = None,
    use_platform_dir: bool = True,
    console_level: str | None = None,
) -> None:
    """Initialize the logging system, optionally from a YAML file.

    Without a config file the combined log file is enabled in the platform
    log directory on top of the console handler.

    Args:
        config_path: Path to a logging configuration YAML file.
        use_platform_dir: If True, write the log file to the platform log
            directory instead of the ``log_dir`` from the config.
        console_level: Overrides the console handler level (e.g. "DEBUG").

    Raises:
        LoggingError: If the configuration file cannot be loaded.
    """
    global _logging_config

    config = _get_default_config()
    config["combined_log"]["enabled"] = True

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")
        try:
            with config_path.open("r", encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e

        for key, value in loaded.items():
            if isinstance(value, dict) and isinstance(config.get(key), dict):
                config[key].update(value)
            else:
                config[key] = value

    if use_platform_dir:
        config["log_dir"] = str(get_platform_log_dir())
    if console_level:
        config["console"]["level"] = console_level.upper()

    _logging_config = config

    if _logging_config["combined_log"].get("enabled", False):
        log_dir = Path(_logging_config["log_dir"])
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            rotate_logs(
                log_dir,
                _logging_config["combined_log"].get("filename", "flightprep.log"),
                _logging_config["combined_log"].get("backup_count", 5),
            )
        except OSError as e:
            raise LoggingError(f"Cannot prepare log directory {log_dir}: {e}") from e

    _configure_root_logger()
    _apply_component_levels()


def _configure_root_logger() -> None:
    """Configure the root logger with handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    console_config = _logging_config.get("console", {})
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_config.get("level", "INFO")))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    combined_config = _logging_config.get("combined_log", {})
    if combined_config.get("enabled", False):
        log_file = Path(_logging_config["log_dir"]) / combined_config.get(
            "filename", "flightprep.log"
        )
        # Rotation already happened on startup
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(getattr(logging, _logging_config.get("level", "INFO")))
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


def _apply_component_levels() -> None:
    """Apply per-component levels to loggers already handed out."""
    for name, logger in _loggers_cache.items():
        _configure_component(name, logger)


def _configure_component(name: str, logger: logging.Logger) -> None:
    component_config = _logging_config.get("components", {}).get(name, {})
    logger.disabled = not component_config.get("enabled", True)
    if "level" in component_config:
        logger.setLevel(getattr(logging, component_config["level"]))


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module or component.

    Loggers are cached. A component can be given its own level, or disabled,
    under the ``components`` section of the logging YAML file.

    Args:
        name: Logger name (typically ``__name__``).

    Returns:
        Configured logger instance.

    Note:
        Use lazy formatting (%) instead of f-strings for better performance.
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = logging.getLogger(name)
    _configure_component(name, logger)
    _loggers_cache[name] = logger
    return logger


def shutdown_logging() -> None:
    """Flush and close all handlers."""
    logging.shutdown()
    logging.getLogger().handlers.clear()
    _loggers_cache.clear()
