# gateway_logging/formatter.py
"""Emoji-Formatter und Logger-Factory für das Gateway.

Ermöglicht einfache Nutzung: ``get_logger(__name__).info("message")``.
"""

import logging
import os
from threading import Lock

_TRUE_VALUES = ("true", "1", "yes", "on")

# Umgebungsvariable je Level, mit Default
_LEVEL_TOGGLES: dict[str, tuple[str, str]] = {
    "DEBUG": ("LOGGING_DEBUG", "true"),
    "INFO": ("LOGGING_INFO", "true"),
    "WARNING": ("LOGGING_WARNING", "true"),
    "ERROR": ("LOGGING_ERROR", "true"),
    "CRITICAL": ("LOGGING_CRITICAL", "true"),
}


class EmojiFormatter(logging.Formatter):
    """Erweitert den Standard-Formatter um Emojis und farbige Level-Namen."""

    def __init__(self, fmt: str | None = None, datefmt: str | None = None, use_colors: bool = True):
        super().__init__(fmt, datefmt or "%d.%m.%y %H:%M:%S")
        self.use_colors = use_colors

        self.level_emojis = {
            "WARNING": "🟡",
            "ERROR": "🔴",
            "CRITICAL": "❌",
            "INFO": "🔵",
            "DEBUG": "⚪️",
        }

        self.colors = {
            "DEBUG": "\033[36m",
            "INFO": "\033[34m",
            "WARNING": "\033[33m",
            "ERROR": "\033[31m",
            "CRITICAL": "\033[35m",
            "RESET": "\033[0m",
        }

    def format(self, record: logging.LogRecord) -> str:
        """Formatiert Log-Record mit Emoji und farbigem Level-Namen."""
        record.level_emoji = self.level_emojis.get(record.levelname, "📝")
        original_levelname = record.levelname

        level_color = self.colors.get(record.levelname, "") if self.use_colors else ""
        try:
            if level_color:
                record.levelname = f"{level_color}{record.levelname}{self.colors['RESET']}"
            result = super().format(record)
        finally:
            # Levelnamen immer wiederherstellen (auch bei Exceptions)
            record.levelname = original_levelname

        return result


class LevelToggleFilter(logging.Filter):
    """Filtert Records anhand der ``LOGGING_<LEVEL>``-Umgebungsvariablen."""

    def filter(self, record: logging.LogRecord) -> bool:
        toggle = _LEVEL_TOGGLES.get(record.levelname)
        if toggle is None:
            return True
        env_key, default = toggle
        return os.getenv(env_key, default).lower() in _TRUE_VALUES


class LoggerFactory:
    """Factory für Logger mit Emoji-Formatter und Level-Filter."""

    _instance_cache: dict[str, "LoggerFactory"] = {}
    _cache_lock = Lock()

    def __init__(self,
                 log_level: str = os.getenv("LOG_LEVEL", "INFO"),
                 format_template: str | None = None,
                 use_colors: bool = True):
        self.log_level = getattr(logging, log_level.upper(), logging.INFO)
        self.use_colors = use_colors
        self.format_template = format_template or (
            "%(level_emoji)s %(levelname)-17s [⏱️ %(asctime)s %(msecs)d] %(name)s: %(message)s"
        )
        self._logger_cache: dict[str, logging.Logger] = {}

    def __call__(self, logger_name: str) -> logging.Logger:
        """Gibt einen konfigurierten Logger zurück (threadsafe gecacht)."""
        with self._cache_lock:
            if logger_name in self._logger_cache:
                return self._logger_cache[logger_name]

            logger = self._create_configured_logger(logger_name)
            self._logger_cache[logger_name] = logger
            return logger

    def _create_configured_logger(self, logger_name: str) -> logging.Logger:
        configured_logger = logging.getLogger(logger_name)

        for handler in configured_logger.handlers[:]:
            configured_logger.removeHandler(handler)

        configured_logger.setLevel(self.log_level)
        configured_logger.propagate = False

        handler = logging.StreamHandler()
        handler.setFormatter(EmojiFormatter(fmt=self.format_template, use_colors=self.use_colors))
        handler.addFilter(LevelToggleFilter())
        configured_logger.addHandler(handler)

        return configured_logger

    @classmethod
    def get_default_instance(cls) -> "LoggerFactory":
        """Gibt die Standard-Instanz zurück (Singleton Pattern)."""
        with cls._cache_lock:
            if "default" not in cls._instance_cache:
                cls._instance_cache["default"] = cls(log_level=os.getenv("LOG_LEVEL", "INFO"))
            return cls._instance_cache["default"]

    def clear_cache(self) -> None:
        """Leert den Logger-Cache (nützlich für Tests)."""
        with self._cache_lock:
            self._logger_cache.clear()


def get_logger(logger_name: str, **config) -> logging.Logger:
    """Convenience-Funktion für schnelle Logger-Erstellung.

    Args:
        logger_name: Name des Loggers (typischerweise __name__)
        **config: Optionale Konfigurationsparameter für ``LoggerFactory``

    Returns:
        Konfigurierter Logger
    """
    factory = LoggerFactory(**config) if config else LoggerFactory.get_default_instance()
    return factory(logger_name)
