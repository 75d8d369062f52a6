"""
Logging setup for the employee directory.

``setup_logging`` attaches the service's own console handler (and a file
handler when ``LOG_FILE`` is set) to the root logger.  The handlers are
named, so a second call, or a host process that already installed
handlers of its own (uvicorn, the test runner), neither duplicates nor
suppresses them.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "employee_directory.console"
FILE_HANDLER_NAME = "employee_directory.file"
HANDLER_NAMES = {CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME}


def own_handlers(logger: Optional[logging.Logger] = None) -> List[logging.Handler]:
    """Handlers on ``logger`` (root by default) that ``setup_logging`` installed."""
    logger = logger or logging.getLogger()
    return [handler for handler in logger.handlers if handler.get_name() in HANDLER_NAMES]


def _named_handler(handler: logging.Handler, name: str) -> logging.Handler:
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Optional log file, resolved relative to the working directory.
    """
    root = logging.getLogger()
    numeric_level = logging.getLevelName(level.upper())
    root.setLevel(numeric_level if isinstance(numeric_level, int) else logging.INFO)
    if own_handlers(root):
        return

    root.addHandler(_named_handler(logging.StreamHandler(), CONSOLE_HANDLER_NAME))
    if logfile:
        log_path = Path(logfile).resolve()
        root.addHandler(
            _named_handler(logging.FileHandler(log_path, encoding="utf-8"), FILE_HANDLER_NAME)
        )
