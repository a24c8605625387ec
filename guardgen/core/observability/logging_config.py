"""
Logging configuration — one-shot setup for the guardgen CLI.

Library modules only ever do ``logger = logging.getLogger(__name__)``;
handlers and levels are attached here, once, by ``guardgen.main``.

Console level precedence:
    --debug / --verbose / --quiet  >  GUARDGEN_LOG_LEVEL  >  WARNING

A log file can be added with GUARDGEN_LOG_FILE (and its own level via
GUARDGEN_LOG_FILE_LEVEL).
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

ENV_LEVEL = "GUARDGEN_LOG_LEVEL"
ENV_FILE = "GUARDGEN_LOG_FILE"
ENV_FILE_LEVEL = "GUARDGEN_LOG_FILE_LEVEL"

# ── Format strings ──────────────────────────────────────────────

# WARNING and above: the message is enough
_FMT_PLAIN = "%(message)s"

# INFO: which generator stage said it
_FMT_INFO = "[%(name)s] %(message)s"

# DEBUG and file output: full location
_FMT_DETAIL = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_DATEFMT_DETAIL = "%H:%M:%S"


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    env = os.environ if environ is None else environ
    return env.get(ENV_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Attach handlers to the root logger.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of a log file to append to.
        log_file_level: Level for the file handler, defaults to ``level``.
    """
    console_level = _parse_level(level)

    if console_level <= logging.DEBUG:
        formatter = logging.Formatter(_FMT_DETAIL, datefmt=_DATEFMT_DETAIL)
    elif console_level <= logging.INFO:
        formatter = logging.Formatter(_FMT_INFO)
    else:
        formatter = logging.Formatter(_FMT_PLAIN)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(file_level)
        handler.setFormatter(logging.Formatter(_FMT_DETAIL, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
        root_level = min(root_level, file_level)

    root.setLevel(root_level)

    # Never raise from inside logging
    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Level name to number; anything unrecognised means WARNING."""
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.WARNING
