#!/usr/bin/env python3
"""Terminal colors and logging setup."""

import logging


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    GREY = "\033[90m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"

    @staticmethod
    def background(color: str) -> str:
        """Convert foreground color to background color."""
        return color.replace("[3", "[4", 1)

    @staticmethod
    def paint(text: str, color: str) -> str:
        return f"{color}{text}{Colors.RESET}"


class CustomFormatter(logging.Formatter):
    """Colored formatter: grey time, four-letter level, message."""

    LEVELS = {
        logging.DEBUG: ("DEBG", Colors.CYAN),
        logging.INFO: ("INFO", Colors.GREEN),
        logging.WARNING: ("WARN", Colors.YELLOW),
        logging.ERROR: ("ERRR", Colors.RED),
        logging.CRITICAL: ("CRIT", Colors.background(Colors.RED)),
    }

    def __init__(self):
        super().__init__()
        time_format = Colors.paint("%(asctime)s", Colors.GREY)
        self.formatters = {
            level: logging.Formatter(
                f"{time_format} {Colors.BOLD}{Colors.paint(label, color)} %(message)s",
                datefmt="%H:%M",
            )
            for level, (label, color) in self.LEVELS.items()
        }

    def format(self, record: logging.LogRecord) -> str:
        formatter = self.formatters.get(record.levelno, self.formatters[logging.INFO])
        return formatter.format(record)


def setup_logging(verbose: bool = False, silent: bool = False):
    """Configure root logging with colored output."""
    if silent:
        logging.disable(logging.CRITICAL)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(CustomFormatter())

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, handlers=[handler], force=True)
