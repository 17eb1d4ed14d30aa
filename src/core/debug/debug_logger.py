"""
debug_logger.py
---------------
Category-filtered console logger for the brick breaker runtime.

Every line is prefixed with a timestamp, the calling class (or module) and a
short tag, then colored by tag. Categories can be switched off individually
in LoggerConfig so that hot paths (collision, render) stay quiet by default.
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Controls which components emit log messages and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Host
        "system": True,
        "loading": False,
        "display": True,
        "input": False,

        # Simulation
        "game_state": True,
        "level": True,
        "collision": False,

        # Collaborators
        "audio": True,
        "render": False,
        "ui": False,

        # Optional
        "performance": True,
    }

    SHOW_TIMESTAMP = True
    SHOW_SOURCE = True


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger with category filtering and colored output."""

    LINE_LENGTH = 59

    # tag -> (color, level)
    TAGS = {
        "INIT": (Colors.WHITE, "INFO"),
        "SYSTEM": (Colors.MAGENTA, "INFO"),
        "STATE": (Colors.CYAN, "INFO"),
        "ACTION": (Colors.GREEN, "INFO"),
        "TRACE": (Colors.BLUE, "VERBOSE"),
        "WARN": (Colors.YELLOW, "WARN"),
        "FAIL": (Colors.RED, "ERROR"),
    }

    LEVEL_VALUES = {
        "NONE": 0,
        "ERROR": 1,
        "WARN": 2,
        "INFO": 3,
        "VERBOSE": 4,
    }

    # ===========================================================
    # Filtering
    # ===========================================================

    @staticmethod
    def enabled(category: str, level: str = "INFO") -> bool:
        """Return True if a message of this category/level would be printed."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        if not LoggerConfig.CATEGORIES.get(category, False):
            return False
        wanted = DebugLogger.LEVEL_VALUES.get(level, 3)
        allowed = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return wanted <= allowed

    # ===========================================================
    # Caller Detection
    # ===========================================================

    @staticmethod
    def _get_caller() -> str:
        """Name the class (or module) three frames up the stack."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        local_vars = frame.f_locals
        if "self" in local_vars:
            return type(local_vars["self"]).__name__
        if "cls" in local_vars and isinstance(local_vars["cls"], type):
            return local_vars["cls"].__name__

        filename = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1]
        stem = filename[:-3] if filename.endswith(".py") else filename
        return "".join(part.capitalize() for part in stem.split("_"))

    # ===========================================================
    # Core Logging
    # ===========================================================

    @staticmethod
    def _emit(tag: str, message: str, category: str):
        """Format and print one line if the category/level allows it."""
        color, level = DebugLogger.TAGS[tag]
        if not DebugLogger.enabled(category, level):
            return

        parts = []
        if LoggerConfig.SHOW_TIMESTAMP:
            parts.append(f"[{datetime.now():%H:%M:%S}] ")
        if LoggerConfig.SHOW_SOURCE:
            parts.append(f"[{DebugLogger._get_caller()}]")
        parts.append(f"[{tag}] ")
        print(f"{color}{''.join(parts)}{message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Initialization log. Empty message prints blank line."""
        if not msg.strip():
            print()
            return
        DebugLogger._emit("INIT", msg, category)

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._emit("SYSTEM", msg, category)

    @staticmethod
    def state(msg: str, category: str = "game_state"):
        DebugLogger._emit("STATE", msg, category)

    @staticmethod
    def action(msg: str, category: str = "game_state"):
        DebugLogger._emit("ACTION", msg, category)

    @staticmethod
    def trace(msg: str, category: str = "collision"):
        """Verbose trace log (only printed at LOG_LEVEL = VERBOSE)."""
        DebugLogger._emit("TRACE", msg, category)

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._emit("WARN", msg, category)

    @staticmethod
    def fail(msg: str, category: str = "system"):
        DebugLogger._emit("FAIL", msg, category)

    # ===========================================================
    # Section Formatting
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a centered section header."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        rule = "─" * DebugLogger.LINE_LENGTH
        heading = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        print(f"\n{Colors.WHITE}{rule}\n{heading}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Print a dotted startup status line: '> Module ....... [OK]'."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        status_color = {
            "OK": Colors.GREEN,
            "LOADING": Colors.CYAN,
            "FAIL": Colors.RED,
        }.get(status.upper(), Colors.WHITE)

        prefix = f"> {module}"
        badge = f"[{status}]"
        dots = max(DebugLogger.LINE_LENGTH - len(prefix) - len(badge) - 2, 1)
        print(f"{Colors.WHITE}{prefix} {'.' * dots} {status_color}{badge}{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Print an indented bullet under the last init_entry."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        indent = " " * (level * 4)
        print(f"{indent}• {Colors.WHITE}{detail}{Colors.RESET}")
