"""Diagnostic logging for the editor.

The terminal is owned by the editor while it runs, so nothing is ever logged
to stdout or stderr. Logging goes to a rotating file when ``TXTEDIT_LOG_FILE``
is set and is discarded otherwise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Mapping, Optional

ENV_PREFIX = "TXTEDIT_"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
KEY_LOGGER_NAME = "txtedit.keys"


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(f"{ENV_PREFIX}{name}")
    return value or None


def setup_logging(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Attach a file handler to the ``txtedit`` logger if configured.

    Recognised variables:
        TXTEDIT_LOG_FILE:  path of the log file (unset disables logging)
        TXTEDIT_LOG_LEVEL: level name, default INFO; DEBUG also traces keys

    Returns the log file path, or None when file logging stays off.
    """
    environ = os.environ if environ is None else environ
    root = logging.getLogger("txtedit")
    key_logger = logging.getLogger(KEY_LOGGER_NAME)
    key_logger.propagate = False

    log_file = _env(environ, "LOG_FILE")
    if log_file is None:
        key_logger.disabled = True
        return None

    level_name = (_env(environ, "LOG_LEVEL") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    path = Path(log_file).expanduser()
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=1024 * 1024, backupCount=2, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.handlers = [h for h in root.handlers if isinstance(h, logging.NullHandler)]
    root.addHandler(handler)
    root.setLevel(level)

    key_logger.handlers = []
    if level <= logging.DEBUG:
        key_logger.disabled = False
        key_logger.setLevel(logging.DEBUG)
        key_logger.addHandler(handler)
    else:
        key_logger.disabled = True

    root.info("Logging to %s at %s", path, logging.getLevelName(level))
    return path
