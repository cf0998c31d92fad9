"""
Logging configuration for kobling - readable, colour-coded, secret-free output.

KoblingLogger wraps the standard library logger with a colorama formatter and
a file handler so connection setup is easy to follow from a terminal and from
``logs/kobling.log``. Anything that might carry a credential goes through
``kobling.utility.masking`` before it reaches a logger.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

import colorama

# Initialize colorama for cross-platform color support
colorama.init()

CATALOG_LOGGER_PREFIX = "kobling.catalog."


class ColorFormatter(logging.Formatter):
    """Custom formatter with colors"""

    COLORS = {
        "INFO": colorama.Fore.BLUE,
        "WARNING": colorama.Fore.YELLOW,
        "ERROR": colorama.Fore.RED,
        "DEBUG": colorama.Fore.BLUE,
        "START": colorama.Fore.BLUE,
        "OK": colorama.Fore.GREEN,
    }

    def format(self, record):
        # kobling.catalog.sales_mysql -> [sales_mysql]
        if record.name.startswith(CATALOG_LOGGER_PREFIX):
            catalog = record.name[len(CATALOG_LOGGER_PREFIX):]
            white = colorama.Fore.WHITE
            reset = colorama.Style.RESET_ALL
            record.catalog = f"{white}[{catalog}]{reset} "
        else:
            record.catalog = ""

        if record.levelname in self.COLORS:
            color = self.COLORS[record.levelname]
            record.levelname = f"{color}{record.levelname}{colorama.Style.RESET_ALL}"

        if hasattr(record, "color_prefix"):
            color = self.COLORS.get(record.color_prefix, "")
            record.msg = f"{color}{record.msg}{colorama.Style.RESET_ALL}"

        return super().format(record)


class KoblingLogger:
    """
    Central logging class for kobling.

    Writes to the console and, where the current working directory allows it,
    to ``logs/kobling.log``. Handlers are attached once per logger name.
    """

    class Style:
        """ANSI color codes for paths"""

        CYAN = colorama.Fore.CYAN
        GREEN = colorama.Fore.GREEN
        YELLOW = colorama.Fore.YELLOW
        RED = colorama.Fore.RED
        RESET = colorama.Style.RESET_ALL

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.style = self.Style()

        # Only set up handlers if they haven't been set up already
        if not self.logger.handlers:
            self.logger.setLevel(logging.INFO)

            file_handler = self._file_handler()
            if file_handler is not None:
                self.logger.addHandler(file_handler)

            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(logging.DEBUG)
            console_handler.setFormatter(
                ColorFormatter("%(asctime)s  %(catalog)s%(message)s", datefmt="%H:%M:%S")
            )

            self.logger.addHandler(console_handler)

            # Prevent logs from being passed to root logger
            self.logger.propagate = False

    @staticmethod
    def _file_handler() -> Optional[logging.Handler]:
        """File handler under ./logs, or None where the directory is not writable."""
        log_dir = Path.cwd() / "logs"
        try:
            log_dir.mkdir(exist_ok=True)
            file_handler = logging.FileHandler(log_dir / "kobling.log", encoding="utf-8")
        except OSError:
            return None
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            ColorFormatter("%(asctime)s  %(catalog)s%(message)s", datefmt="%H:%M:%S")
        )
        return file_handler

    def info(self, msg: str, color_prefix: Optional[str] = None) -> None:
        """Log info message with optional color prefix"""
        extra = {"color_prefix": color_prefix} if color_prefix else None
        self.logger.info(msg, extra=extra)

    def start(self, msg: str) -> None:
        """Log start message"""
        self.info(f"START {msg}", color_prefix="START")

    def success(self, msg: str) -> None:
        """Log success message in green"""
        self.info(f"OK {msg}", color_prefix="OK")

    def error(self, msg: str) -> None:
        """Log error message in red"""
        self.logger.error(msg)

    def warning(self, msg: str) -> None:
        """Log warning message in yellow"""
        self.logger.warning(msg)

    def debug(self, msg: str) -> None:
        """Log debug message in blue"""
        self.logger.debug(msg)

    def path(self, path: str, color: str = None) -> str:
        """Format a path with color"""
        if not color:
            color = self.style.CYAN
        return f"{color}{path}{self.style.RESET}"


def get_logger(name: str) -> KoblingLogger:
    """Get a configured logger instance."""
    return KoblingLogger(name)
