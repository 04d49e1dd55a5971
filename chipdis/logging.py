"""Console logging utilities for chipdis.

Provides a small level-filtered console logger and a ``tqdm`` progress
wrapper used when several ROM images are disassembled in one run.
"""

import sys
import time
from typing import Iterable, Optional, TypeVar

from tqdm import tqdm

T = TypeVar("T")


class ConsoleLogger:
    """Console logger with level filtering, timestamps and colours."""

    def __init__(
        self,
        name: str = "chipdis",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
        stream=None,
    ):
        self.name = name
        self.stream = stream if stream is not None else sys.stdout
        self.log_level = log_level.upper()
        self.use_colors = (
            use_colors and hasattr(self.stream, "isatty") and self.stream.isatty()
        )
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

        self.colors = (
            {
                "DEBUG": "\033[36m",
                "INFO": "\033[32m",
                "WARNING": "\033[33m",
                "ERROR": "\033[31m",
                "CRITICAL": "\033[35m",
                "RESET": "\033[0m"
            }
            if self.use_colors
            else {
                k: ""
                for k in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "RESET"]
            }
        )

        self.level_order = {
            "DEBUG": 0,
            "INFO": 1,
            "WARNING": 2,
            "ERROR": 3,
            "CRITICAL": 4,
        }

    def set_level(self, log_level: str):
        """Change the minimum level that gets printed."""
        if log_level.upper() not in self.level_order:
            raise ValueError(
                f"Unknown log level '{log_level}'. Available: {list(self.level_order)}"
            )
        self.log_level = log_level.upper()

    def _should_log(self, level: str) -> bool:
        """Check if message should be logged based on current log level."""
        return self.level_order.get(level.upper(), 1) >= self.level_order.get(
            self.log_level, 1
        )

    def _format_message(self, level: str, message: str) -> str:
        """Format log message with timestamp, level, and colors."""
        timestamp = (
            f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        )
        level_str = f"[{level:>8s}]"
        name_str = f"[{self.name}]"

        if self.use_colors:
            color = self.colors.get(level.upper(), "")
            reset = self.colors["RESET"]
            level_str = f"{color}{level_str}{reset}"

        return f"{timestamp}{level_str}{name_str} {message}"

    def log(self, level: str, message: str):
        """Log a message at the specified level."""
        if self._should_log(level):
            formatted = self._format_message(level, message)
            print(formatted, file=self.stream, flush=True)

    def debug(self, message: str):
        """Log debug message."""
        self.log("DEBUG", message)

    def info(self, message: str):
        """Log info message."""
        self.log("INFO", message)

    def warning(self, message: str):
        """Log warning message."""
        self.log("WARNING", message)

    def error(self, message: str):
        """Log error message."""
        self.log("ERROR", message)

    def critical(self, message: str):
        self.log("CRITICAL", message)


_default_logger: Optional[ConsoleLogger] = None


def get_logger() -> ConsoleLogger:
    """Shared package logger, created on first use."""
    global _default_logger
    if _default_logger is None:
        _default_logger = ConsoleLogger()
    return _default_logger


def progress(iterable: Iterable[T], desc: Optional[str] = None, total: Optional[int] = None, **kwargs) -> Iterable[T]:
    """Wrap ``iterable`` in a tqdm bar.

    The bar is disabled for a single item so one-off runs stay quiet.
    """
    if total is None and hasattr(iterable, "__len__"):
        total = len(iterable)
    kwargs.setdefault("disable", total is not None and total <= 1)
    return tqdm(iterable, desc=desc or "Disassembling", total=total, unit="rom", **kwargs)
