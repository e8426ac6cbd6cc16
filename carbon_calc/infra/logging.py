# carbon_calc/infra/logging.py
# -*- coding: utf-8 -*-

"""
Central logging configuration for carbon_calc.

Library modules only ever call `get_logger(__name__)`; CLIs call
`init_logging()` once at start-up.

Usage
-----
    from carbon_calc.infra.logging import init_logging, get_logger

    init_logging(level="DEBUG")
    log = get_logger(__name__)
    log.info("route index ready")

Environment
-----------
- CARBON_CALC_LOG_LEVEL, if set, overrides the `level` parameter.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

LOG_LEVEL_ENV = "CARBON_CALC_LOG_LEVEL"
LOG_FORMAT = "[{asctime}][{levelname}][{name}] {message}"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

_DEFAULT_LOGS_DIR = Path("logs")
_STREAM_HANDLER_NAME = "carbon_calc.stream"
_FILE_HANDLER_NAME = "carbon_calc.file"

_current_log_file: Optional[Path] = None


# ────────────────────────────────────────────────────────────────────────────────
# Public helpers
# ────────────────────────────────────────────────────────────────────────────────

def get_current_log_path() -> Optional[Path]:
    """
    Return the file the last `init_logging()` call attached, if any.

    Handy for CLIs that want to print "Log file → ..." after start-up.
    """
    return _current_log_file


def _per_run_log_file(logs_dir: Optional[Path]) -> Path:
    """logs/<script>__<YYYYmmdd-HHMMSS>.log"""
    base_dir = Path(logs_dir) if logs_dir is not None else _DEFAULT_LOGS_DIR
    script_name = Path(sys.argv[0] or "carbon_calc").stem
    if script_name in {"-m", "-c", ""}:
        script_name = "carbon_calc"
    ts = datetime.now().strftime("%Y%m%d-%H%M%S")
    return base_dir / f"{script_name}__{ts}.log"


def init_logging(
      level: str = "INFO"
    , *
    , force: bool = True
    , write_output: bool = False
    , log_file: Optional[Path] = None
    , logs_dir: Optional[Path] = None
) -> None:
    """
    Configure root logging.

    Parameters
    ----------
    level : str, default "INFO"
        Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        CARBON_CALC_LOG_LEVEL, when set, wins over this argument.
    force : bool, default True
        Remove every existing root handler first. When False, only the
        handlers installed by a previous call are replaced.
    write_output : bool, default False
        Also write a per-run file under `logs/` (or `logs_dir`).
    log_file : Optional[Path]
        Explicit log file; implies file output. Parent dirs are created.
    logs_dir : Optional[Path]
        Base directory for the per-run file when `log_file` is not given.
    """
    global _current_log_file

    env_level = os.getenv(LOG_LEVEL_ENV)
    if env_level:
        level = env_level

    # Unknown level names fall back to INFO
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    for handler in list(root.handlers):
        # without force, only handlers from a previous init_logging() go
        ours = handler.get_name() in (_STREAM_HANDLER_NAME, _FILE_HANDLER_NAME)
        if force or ours:
            root.removeHandler(handler)
        if ours:
            handler.close()

    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT, style="{")

    # stderr keeps stdout free for the JSON payload printed by the CLIs
    stream_handler = logging.StreamHandler(stream=sys.stderr)
    stream_handler.setFormatter(formatter)
    stream_handler.set_name(_STREAM_HANDLER_NAME)
    root.addHandler(stream_handler)

    _current_log_file = None

    if write_output or log_file is not None:
        target = Path(log_file) if log_file is not None else _per_run_log_file(logs_dir)
        target.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(target, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler.set_name(_FILE_HANDLER_NAME)
        root.addHandler(file_handler)
        _current_log_file = target.resolve()

    get_logger(__name__).debug(
        "Logging configured (level=%s, file=%s)"
        , logging.getLevelName(numeric_level)
        , _current_log_file
    )


def log_banner(
      log: logging.Logger
    , msg: str
    , *
    , char: str = "="
    , width: int = 60
    , box: bool = False
) -> None:
    """
    Print a visual banner in logs.

    - Simple mode (box=False): a bar, the message, another bar.
    - Box mode: a Unicode box with the message centered.
    """
    if not box:
        bar = char * width
        log.info(bar)
        log.info(msg)
        log.info(bar)
        return

    inner = f" {msg} "
    pad = max(0, width - len(inner))
    left = pad // 2
    right = pad - left
    log.info("╔%s╗", "═" * width)
    log.info("║%s%s%s║", " " * left, inner, " " * right)
    log.info("╚%s╝", "═" * width)


def get_logger(
    name: Optional[str] = None
) -> logging.Logger:
    """
    Thin wrapper around logging.getLogger.

    Modules use this instead of logging.getLogger() so the backend can be
    swapped in one place.
    """
    return logging.getLogger(name if name is not None else "carbon_calc")
