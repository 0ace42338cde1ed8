"""
Notification service for the admin dashboard.
Records success/error messages for the UI (toasts) and mirrors them to the standard logger.
"""

import logging
import threading
import traceback
from collections import deque
from datetime import datetime

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'SUCCESS': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}


class NotificationService:
    """In-memory notification channel shared by the stores and the HTTP layer"""

    def __init__(self, history=100):
        self._entries = deque(maxlen=history)
        self._pending = deque(maxlen=history)
        self._lock = threading.Lock()

    def log(self, level, source, message, details=None):
        """
        Record a notification

        Args:
            level (str): SUCCESS, INFO, WARNING, ERROR (DEBUG/CRITICAL are accepted too)
            source (str): Module that raised it (blog, comments, subscribers, campaigns)
            message (str): User-facing message
            details (dict): Optional extra context, not shown to the user
        """
        level = level.upper()
        entry = {
            'timestamp': datetime.now().isoformat(),
            'level': level,
            'source': source,
            'message': message,
            'details': details,
        }
        with self._lock:
            self._entries.append(entry)
            self._pending.append(entry)

        log_line = f"[{source}] {message}"
        if details:
            log_line = f"{log_line} {details}"
        logger.log(_LOG_LEVELS.get(level, logging.INFO), log_line)
        return entry

    def success(self, source, message, details=None):
        """Record a success message"""
        return self.log('SUCCESS', source, message, details)

    def info(self, source, message, details=None):
        """Record an info message"""
        return self.log('INFO', source, message, details)

    def warning(self, source, message, details=None):
        """Record a warning message"""
        return self.log('WARNING', source, message, details)

    def error(self, source, message, details=None):
        """Record an error message"""
        return self.log('ERROR', source, message, details)

    def log_error_with_traceback(self, source, error, message=None):
        """Record an unexpected exception with its traceback in the details"""
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            'traceback': traceback.format_exc(),
        }
        return self.error(source, message or str(error), details)

    def recent(self, limit=20, source=None):
        """Most recent notifications, newest first"""
        with self._lock:
            entries = list(self._entries)
        if source:
            entries = [e for e in entries if e['source'] == source]
        return list(reversed(entries))[:limit]

    def drain(self):
        """Return notifications not yet delivered to the UI and mark them delivered"""
        with self._lock:
            pending = list(self._pending)
            self._pending.clear()
        return pending

    def clear(self):
        with self._lock:
            self._entries.clear()
            self._pending.clear()
