"""
structural_ddp_models/utils/logging_config.py

Logging configuration for scripts and notebooks that build models.

Library modules only create loggers (logging.getLogger(__name__)); handlers
are attached here, by the application.

Usage:
    from structural_ddp_models.utils.logging_config import setup_logging
    setup_logging('DEBUG')  # Show grid bounds and steady-state solves
"""

import logging
import sys
from typing import Optional

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ColorFormatter(logging.Formatter):
    """
    Compact formatter: [LEVEL] module: message

    Example: [INFO] cooper_haltiwanger: Cooper-Haltiwanger grids: K in [...]
    """

    # ANSI color codes for terminal output
    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[31m',
        'RESET': '\033[0m'
    }

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        # Short module name, e.g. "steady_state" from "structural_ddp_models.economy.steady_state"
        module_short = record.name.rsplit('.', 1)[-1]
        level = record.levelname
        if self.use_colors:
            level = f"{self.COLORS.get(record.levelname, '')}[{level}]{self.COLORS['RESET']}"
        else:
            level = f"[{level}]"
        return f"{level} {module_short}: {record.getMessage()}"


def setup_logging(
    level: str = 'INFO',
    log_file: Optional[str] = None,
    use_colors: bool = True
) -> None:
    """
    Configure the root logger for console (and optionally file) output.

    Args:
        level: 'DEBUG', 'INFO', 'WARNING', 'ERROR' or 'CRITICAL'
               - 'DEBUG': steady-state solves and grid bounds
               - 'INFO': parameter overrides and a one-line grid summary
        log_file: Optional path; file logs always capture DEBUG with timestamps
        use_colors: Whether to color the level tag on the console

    Notes:
        Existing root handlers are removed to avoid duplicate output.
    """
    level_upper = level.upper()
    if level_upper not in _LEVELS:
        raise ValueError(f"Invalid logging level: {level}. Use DEBUG, INFO, WARNING, ERROR, or CRITICAL")
    level_num = getattr(logging, level_upper)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level_num)
    console_handler.setFormatter(ColorFormatter(use_colors=use_colors))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        root_logger.addHandler(file_handler)
        # Root must pass DEBUG records through to the file handler
        root_logger.setLevel(logging.DEBUG)
    else:
        root_logger.setLevel(level_num)


def disable_logging() -> None:
    """Silence everything below CRITICAL."""
    logging.getLogger().setLevel(logging.CRITICAL)
