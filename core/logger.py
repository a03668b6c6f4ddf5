# core/logger.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

_configured = False

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _level() -> int:
    return getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)


def _stdout_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    # function hosts forward stdout to their log stream
    ch = logging.StreamHandler(sys.stdout)
    ch.setLevel(level)
    ch.setFormatter(formatter)
    return ch


def _file_handler(level: int, formatter: logging.Formatter) -> logging.Handler | None:
    """Rotating file log for local runs; LOG_TO_FILE=true turns it on."""
    if os.getenv("LOG_TO_FILE", "false").lower() != "true":
        return None

    log_file = os.getenv("LOG_FILE", "/tmp/dialed_functions.log")
    try:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=int(os.getenv("LOG_MAX_BYTES", str(2 * 1024 * 1024))),
            backupCount=int(os.getenv("LOG_BACKUPS", "3")),
        )
    except OSError as e:
        logging.getLogger(__name__).warning("Failed to initialize file logging: %s", e)
        return None
    fh.setLevel(level)
    fh.setFormatter(formatter)
    return fh


def setup_logging():
    """
    Configure the root logger once per process. Warm invocations import
    the handlers again without re-running this, and a host that already
    installed its own root handler keeps it.
    """
    global _configured
    if _configured:
        return

    level = _level()
    root = logging.getLogger()
    root.setLevel(level)

    if not root.handlers:
        formatter = logging.Formatter(LOG_FORMAT)
        if os.getenv("LOG_TO_STDOUT", "true").lower() == "true":
            root.addHandler(_stdout_handler(level, formatter))
        fh = _file_handler(level, formatter)
        if fh is not None:
            root.addHandler(fh)

    # urllib3 logs every pooled connection at DEBUG
    logging.getLogger("urllib3").setLevel(max(level, logging.INFO))

    _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    setup_logging()
    return logging.getLogger(name)
