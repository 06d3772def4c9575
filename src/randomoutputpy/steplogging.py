"""Logging module."""

import json
import logging
import os
import sys
from datetime import datetime, timezone

STEP_LOG_FORMAT = (
    "%(asctime)s - %(levelname)s - %(name)s - %(filename)s:%(lineno)s - %(message)s"
)

VERBOSE1 = 12
VERBOSE2 = 11

logging.addLevelName(VERBOSE2, "VERBOSE2")
logging.addLevelName(VERBOSE1, "VERBOSE1")


class JSONFormatter(logging.Formatter):
    """JSON formatter.

    This will take a log message and output it as JSON rather than plain text
    """

    def format(self, record):
        """Format the log message as JSON."""
        json_log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "function": record.funcName,
            "file": f"{record.pathname}:{record.lineno}",
            "logger": record.name,
            "message": record.getMessage(),
            "run_id": os.environ.get("GITHUB_RUN_ID"),
        }
        if record.exc_info:
            json_log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(json_log_record)


def verbosity_to_level(verbosity: int | None) -> int:
    """Map the -v command line value onto a logging level.

    Args:
        verbosity (int | None): 3 for DEBUG, 2 for VERBOSE2, 1 for VERBOSE1

    Returns:
        int: The logging level. Defaults to logging.INFO.
    """
    if verbosity == 3:
        return logging.DEBUG
    if verbosity == 2:
        return VERBOSE2
    if verbosity == 1:
        return VERBOSE1
    return logging.INFO


def configure_root_logger(
    level: int | str = logging.INFO, log_json: bool = False
) -> logging.Logger:
    """Set up the root logger to write to stdout.

    Workflow commands are also written to stdout, so the log lines and the
    commands the runner parses end up in the same stream, in order.

    Args:
        level (int | str, optional): The logging level. Defaults to logging.INFO.
        log_json (bool, optional): Whether to emit structured JSON log lines.

    Returns:
        logging.Logger: The root logger.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        JSONFormatter() if log_json else logging.Formatter(STEP_LOG_FORMAT)
    )

    root_logger = logging.getLogger()
    # Replace anything set up by a previous call in the same process
    for existing in [
        h for h in root_logger.handlers if getattr(h, "_step_handler", False)
    ]:
        root_logger.removeHandler(existing)
    handler._step_handler = True  # type: ignore[attr-defined]  # pylint: disable=protected-access
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Loggers created at import time were levelled before the root logger was
    # configured, bring them in line with it
    for name, logger_ in list(logging.Logger.manager.loggerDict.items()):
        if isinstance(logger_, logging.Logger) and name.startswith("randomoutputpy"):
            logger_.setLevel(level)

    return root_logger


def init_logging(name: str) -> logging.Logger:
    """Return a logger for the given module or class name.

    Args:
        name (str): The name of the logger, usually the module name

    Returns:
        logging.Logger: The logger object used for logging output.
    """
    step_logger = logging.getLogger(name)

    # Set verbosity
    step_logger.setLevel(logging.getLogger().getEffectiveLevel())
    # Ensure the logger is at least at INFO level
    if step_logger.getEffectiveLevel() > logging.INFO:
        step_logger.setLevel(logging.INFO)

    # If the log level is set in the environment, then use that. Unknown names
    # are rejected later by the settings validation
    env_level = os.environ.get("ROS_LOG_LEVEL", "").upper()
    if env_level and isinstance(logging.getLevelName(env_level), int):
        step_logger.setLevel(env_level)

    return step_logger
