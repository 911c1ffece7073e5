# src/monkey/config.py
"""Runtime configuration, read from the environment once at import time.

    MONKEY_DEBUG=1                 enable debug tracing of the parser/evaluator
    MONKEY_LOG_LEVEL=info          threshold for ``should_log`` (default: warning)
    MONKEY_RECURSION_LIMIT=5000    host recursion limit applied by the CLI
"""
import logging
import os

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name, default=False):
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _env_int(name):
    raw = os.environ.get(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


class MonkeyConfig:
    def __init__(self):
        self.enable_debug_logs = _env_flag("MONKEY_DEBUG")
        self.log_level = os.environ.get("MONKEY_LOG_LEVEL", "warning").strip().lower()
        self.recursion_limit = _env_int("MONKEY_RECURSION_LIMIT")

    def should_log(self, level="debug"):
        """Debug output needs the debug flag; other levels compare to ``log_level``."""
        if level == "debug":
            return self.enable_debug_logs
        threshold = _LEVELS.get(self.log_level, logging.WARNING)
        return _LEVELS.get(level, logging.DEBUG) >= threshold

    def configure_logging(self):
        """Attach a basic handler to the ``monkey`` logger tree."""
        level = logging.DEBUG if self.enable_debug_logs else _LEVELS.get(self.log_level, logging.WARNING)
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        logging.getLogger("monkey").setLevel(level)

    def __repr__(self):
        return (f"MonkeyConfig(enable_debug_logs={self.enable_debug_logs}, "
                f"log_level={self.log_level!r}, recursion_limit={self.recursion_limit})")


config = MonkeyConfig()
