"""Centralized logging setup for the command line tool and tests.

The ip_prefix package only creates module loggers; handlers are installed here by
whichever entry point runs first.
"""
import datetime
import logging
import os
import sys
from typing import List

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(filename)s:%(lineno)d %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


def _console_handlers(root: logging.Logger) -> List[logging.Handler]:
    # FileHandler is a StreamHandler too; only the stdout ones count as console
    return [h for h in root.handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
            and getattr(h, 'stream', None) is sys.stdout]


def ensure_logging(level: int = logging.INFO, *, force: bool = False) -> None:
    """Install console logging for netmask_tool at `level`.

    A fresh process gets one stdout handler through basicConfig. When something (a test
    runner, an embedding application) already owns the root handlers they are kept and
    only the level is adjusted, unless `force` asks for them to be replaced.
    """
    root = logging.getLogger()
    if force or not root.handlers:
        logging.basicConfig(level=level, format=DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT, stream=sys.stdout, force=force)
    else:
        root.setLevel(level)
    for h in _console_handlers(root):
        h.setLevel(level)


def configure_debug(debug: bool) -> None:
    """Console verbosity for the -debug flag / `run.debug` config key."""
    ensure_logging(logging.DEBUG if debug else logging.INFO)


def _safe_tag(tag: str) -> str:
    return "".join(c if c.isalnum() or c in '._-' else '_' for c in tag)


def configure_run_logging(run_tag: str, *, log_dir: str = "logs",
                          console_level: int = logging.INFO, file_level: int = logging.DEBUG,
                          force: bool = False) -> str:
    """Log to the console and to a per-run file under `log_dir`.

    The file is named `<run_tag>_<timestamp>.log`. If a file handler for the same tag is
    already installed (and `force` is False) it is reused. Returns the absolute logfile path.
    """
    ensure_logging(level=console_level, force=force)

    tag = _safe_tag((run_tag or "run").lower())
    os.makedirs(log_dir, exist_ok=True)

    root = logging.getLogger()
    if not force:
        for h in root.handlers:
            if isinstance(h, logging.FileHandler) and tag in os.path.basename(h.baseFilename):
                return os.path.abspath(h.baseFilename)

    timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    logfile = os.path.join(log_dir, f"{tag}_{timestamp}.log")

    fh = logging.FileHandler(logfile, mode='a', encoding='utf-8')
    fh.setLevel(file_level)
    fh.setFormatter(logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT))
    root.addHandler(fh)

    # The root level is the lower of the two so the file still gets DEBUG records.
    root.setLevel(min(console_level, file_level))

    return os.path.abspath(logfile)
