"""Logging configuration: diagnostics on stderr, optional full log file.

User-facing output is printed to stdout by the CLI and never goes through
logging.
"""
from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    *,
    console_level: int = logging.WARNING,
    log_file: Optional[Union[str, Path]] = None,
    file_level: int = logging.DEBUG,
) -> None:
    """Configure the root logger. Call once, before the first log call."""
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if log_file:
        path = Path(log_file)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(str(path), encoding="utf-8")
        except OSError as exc:
            # stderr only; the command itself still runs
            logging.getLogger(__name__).warning("Cannot open log file %s: %s", path, exc)
            return
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default
