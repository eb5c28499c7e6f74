"""
Logging configuration for the reinit CLI.

``reinit.main`` calls ``setup_logging`` once; modules just use
``logging.getLogger(__name__)``. Console level: CLI flag, then
REINIT_LOG_LEVEL, then WARNING. REINIT_LOG_FILE adds a file handler
with its own level (REINIT_LOG_FILE_LEVEL).
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LEVEL = "REINIT_LOG_LEVEL"

_DETAILED = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"

# (max level, format) pairs checked in order; prompts need bare messages
_CONSOLE_FORMATS = (
    (logging.DEBUG, _DETAILED),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s"),
    (logging.CRITICAL, "%(message)s"),
)


def level_from_flags(debug: bool = False, verbose: bool = False, quiet: bool = False) -> str:
    """Pick the console level from CLI flags, falling back to the env var."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    return os.environ.get(ENV_LEVEL, "WARNING")


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
    quiet_third_party: bool = True,
) -> None:
    """Install the console handler (stderr) and the optional file handler.

    Console output goes to stderr so ``--json`` on stdout stays clean.
    Unless running at DEBUG, asyncio's own chatter is held at WARNING.
    """
    console_level = _parse_level(level)
    fmt = next(f for limit, f in _CONSOLE_FORMATS if console_level <= limit)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt, datefmt="%H:%M:%S"))
    handlers: list[logging.Handler] = [console]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(_parse_level(log_file_level) if log_file_level else console_level)
        file_handler.setFormatter(logging.Formatter(_DETAILED))
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(min(h.level for h in handlers))

    if quiet_third_party and console_level > logging.DEBUG:
        logging.getLogger("asyncio").setLevel(logging.WARNING)


def _parse_level(level: str | None) -> int:
    if not level:
        return logging.WARNING
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.WARNING
