# gateway_logging/__init__.py
"""Gateway Logging Package.

Stellt Logger mit Emoji-Formatter, strukturierte Log-Nachrichten und einen
optionalen JSON-Export auf STDOUT bereit.
"""

import json
import logging
import os

from .formatter import EmojiFormatter, LevelToggleFilter, LoggerFactory, get_logger


def structured_msg(message: str, **fields: object) -> str:
    """Erzeugt konsistente strukturierte Log-Nachrichten als JSON-Zeichenkette.

    Felder wie ``account_id``, ``action`` oder ``resources`` werden einheitlich
    neben der Nachricht abgelegt.
    """
    payload: dict[str, object] = {"message": message}
    payload.update(fields)
    try:
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"), default=str)
    except (TypeError, ValueError):
        extras = " ".join(f"{k}={v}" for k, v in fields.items())
        return f"{message} {extras}".strip()


def configure_json_logging(service_name: str = "vcs-gateway", level: str | None = None) -> None:
    """Konfiguriert JSON-Logs auf STDOUT für Log-Shipper.

    Args:
        service_name: Log-Label für den Service
        level: Optionales Log-Level (z. B. "INFO", "DEBUG")
    """
    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()

    root = logging.getLogger()
    root.setLevel(getattr(logging, log_level, logging.INFO))

    class _JsonFormatter(logging.Formatter):
        def format(self, record: logging.LogRecord) -> str:
            payload = {
                "service": service_name,
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
                "timestamp": int(record.created * 1000),
            }
            for key in ("request_id", "account_id", "user_id"):
                val = getattr(record, key, None)
                if val is not None:
                    payload[key] = val
            return json.dumps(payload, ensure_ascii=False, default=str)

    for h in list(root.handlers):
        root.removeHandler(h)
    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter())
    root.addHandler(handler)


__all__ = [
    "EmojiFormatter",
    "LevelToggleFilter",
    "LoggerFactory",
    "configure_json_logging",
    "get_logger",
    "structured_msg",
]

__version__ = "1.0.0"
