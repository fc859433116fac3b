"""Centralized logging configuration for fixturelink.

Call setup_logging() once at process startup (the API lifespan does this).
Library code only ever asks for a module logger:

    import logging
    logger = logging.getLogger(__name__)
    logger.debug("[MATCH] Selected candidate %s", candidate_id)

Environment variables:
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)
    LOG_DIR: Directory for log files (default: <project root>/logs)
    LOG_FORMAT: "text" or "json" (default: text)
"""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

_configured = False

_MAX_LOG_BYTES = 10 * 1024 * 1024  # 10MB

_NOISY_LOGGERS = (
    "uvicorn",
    "uvicorn.access",
    "httpx",
    "httpcore",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per line, for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _default_log_dir() -> Path:
    if env_dir := os.getenv("LOG_DIR"):
        return Path(env_dir)

    # Walk up to the project root (where pyproject.toml lives)
    current = Path(__file__).parent
    for _ in range(4):
        if (current / "pyproject.toml").exists():
            return current / "logs"
        current = current.parent

    return Path("logs")


def _resolve_level(log_level: str | None) -> int:
    name = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _build_formatter(use_json: bool) -> logging.Formatter:
    if use_json:
        return JSONFormatter()
    return logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def setup_logging(
    log_level: str | None = None,
    log_dir: str | Path | None = None,
    use_json: bool | None = None,
) -> None:
    """Initialize console and rotating file logging.

    Subsequent calls are no-ops.

    Args:
        log_level: Override LOG_LEVEL env var
        log_dir: Override LOG_DIR env var
        use_json: Override LOG_FORMAT env var (True for JSON output)
    """
    global _configured
    if _configured:
        return

    level = _resolve_level(log_level)
    log_path = Path(log_dir) if log_dir else _default_log_dir()
    if use_json is None:
        use_json = os.getenv("LOG_FORMAT", "text").lower() == "json"

    log_path.mkdir(parents=True, exist_ok=True)
    formatter = _build_formatter(use_json)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Full debug trail, including per-fixture selection detail
    file_handler = RotatingFileHandler(
        log_path / "fixturelink.log",
        maxBytes=_MAX_LOG_BYTES,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    error_handler = RotatingFileHandler(
        log_path / "fixturelink_errors.log",
        maxBytes=_MAX_LOG_BYTES,
        backupCount=3,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(error_handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True

    from fixturelink.config import VERSION

    logger = logging.getLogger("fixturelink")
    logger.info("[STARTUP] fixturelink %s", VERSION)
    logger.info(
        "[STARTUP] Log level=%s dir=%s format=%s",
        logging.getLevelName(level),
        log_path,
        "json" if use_json else "text",
    )
