# slot_inventory/utils/logger.py
import datetime
from typing import Callable, List, Tuple

from slot_inventory.config import DEFAULT_LOG_LEVEL, LOG_TIME_FORMAT

class LogLevel:
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4 # Only fatal errors

LEVEL_NAMES = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRIT"
}

class Logger:
    """
    A log sink bound to a source name.
    Inventories and catalogs receive one of these instead of reaching for a global.
    """

    def __init__(self, source: str = "Inventory", level: int = DEFAULT_LOG_LEVEL,
                 writer: Callable[[str], None] = print):
        self.source = source
        self.level = level
        self._writer = writer

    def set_level(self, level: int):
        """Sets the minimum logging level."""
        self.level = level

    def bind(self, source: str) -> 'Logger':
        """Returns a logger sharing this one's level and writer under another source name."""
        return Logger(source, self.level, self._writer)

    def _log(self, level: int, message: str):
        if level < self.level:
            return
        timestamp = datetime.datetime.now().strftime(LOG_TIME_FORMAT)
        level_name = LEVEL_NAMES.get(level, "LOG")

        # Format: [TIME] [LEVEL] [Source] Message
        try:
            self._writer(f"[{timestamp}] [{level_name:<5}] [{self.source}] {message}")
        except (OSError, ValueError):
            pass # Logging is best-effort, a closed stream must not break inventory ops

    def log(self, message: str):
        """Fire-and-forget sink used by the inventory core."""
        self._log(LogLevel.DEBUG, message)

    def debug(self, message: str):
        self._log(LogLevel.DEBUG, message)

    def info(self, message: str):
        self._log(LogLevel.INFO, message)

    def warning(self, message: str):
        self._log(LogLevel.WARNING, message)

    def error(self, message: str):
        self._log(LogLevel.ERROR, message)

    def critical(self, message: str):
        self._log(LogLevel.CRITICAL, message)

    def separator(self, level: int = LogLevel.DEBUG):
        """Prints a separator line if the level is active."""
        if level >= self.level:
            try:
                self._writer("-" * 60)
            except (OSError, ValueError):
                pass

class NullLogger(Logger):
    """Discards everything."""

    def __init__(self, source: str = "Inventory"):
        super().__init__(source, LogLevel.CRITICAL + 1)

    def bind(self, source: str) -> 'Logger':
        return NullLogger(source)

class RecordingLogger(Logger):
    """
    Keeps (level, message) pairs in memory instead of printing.
    Used by the test suite to assert on warnings.
    """

    def __init__(self, source: str = "Inventory", level: int = LogLevel.DEBUG):
        self.records: List[Tuple[int, str]] = []
        super().__init__(source, level, self._record)
        self._pending_level = LogLevel.DEBUG

    def _record(self, line: str):
        self.records.append((self._pending_level, line))

    def _log(self, level: int, message: str):
        self._pending_level = level
        super()._log(level, message)

    def bind(self, source: str) -> 'Logger':
        # Share the record list so one recorder sees every component
        bound = RecordingLogger(source, self.level)
        bound.records = self.records
        return bound

    def messages(self, min_level: int = LogLevel.DEBUG) -> List[str]:
        return [line for level, line in self.records if level >= min_level]

    def clear(self):
        self.records.clear()
