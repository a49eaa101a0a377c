"""
Structured logging system for catalog events.
Provides JSON-formatted logs with context and metadata alongside console logs.
"""

import json
import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Any


class StructuredLogger:
    """
    Logger that outputs both human-readable and machine-parseable logs.

    Usage:
        logger = StructuredLogger("model_catalog", log_dir=Path("logs"))
        logger.info("record_loaded", model_id="dragon", triangles=871306)
    """

    def __init__(
        self,
        name: str,
        log_dir: Path | None = None,
        enable_json: bool = True,
    ):
        """
        Initialize structured logger.

        Args:
            name: Logger name
            log_dir: Directory for JSON log files (None = disabled)
            enable_json: Enable JSON file logging
        """
        self.name = name
        self.log_dir = log_dir
        self.enable_json = enable_json and log_dir is not None
        self.json_log_path: Path | None = None

        self._logger = logging.getLogger(name)

        self._json_file = None
        if self.enable_json:
            log_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.json_log_path = log_dir / f"model_catalog_{timestamp}.jsonl"
            self._json_file = open(self.json_log_path, "a", encoding="utf-8")  # noqa: SIM115

        # Session context (added to all log entries)
        self._session_context: dict[str, Any] = {
            "session_id": f"{int(time.time())}_{id(self)}",
        }

    def set_session_context(self, **kwargs) -> None:
        """Set session-level context that appears in all logs."""
        self._session_context.update(kwargs)

    def _format_message(self, event: str, **context) -> str:
        parts = [f"[{event}]"]
        parts.extend(f"{key}={value}" for key, value in context.items())
        return " ".join(parts)

    def _write_json(self, level: str, event: str, **context) -> None:
        if not self._json_file or self._json_file.closed:
            return

        entry = {
            "timestamp": datetime.now().isoformat(),
            "level": level,
            "event": event,
            **self._session_context,
            **context,
        }
        try:
            self._json_file.write(json.dumps(entry, default=str) + "\n")
            self._json_file.flush()
        except OSError as e:
            self._logger.warning(f"JSON logging failed: {e}")

    def _log(self, level: int, event: str, **context) -> None:
        self._logger.log(level, self._format_message(event, **context))
        if self.enable_json:
            self._write_json(logging.getLevelName(level), event, **context)

    def debug(self, event: str, **context) -> None:
        self._log(logging.DEBUG, event, **context)

    def info(self, event: str, **context) -> None:
        self._log(logging.INFO, event, **context)

    def warning(self, event: str, **context) -> None:
        self._log(logging.WARNING, event, **context)

    def error(self, event: str, **context) -> None:
        self._log(logging.ERROR, event, **context)

    def close(self) -> None:
        """Close JSON log file."""
        if self._json_file and not self._json_file.closed:
            self._json_file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class CatalogEventLogger:
    """Specialized logger for catalog events."""

    def __init__(self, logger: StructuredLogger):
        self.logger = logger

    def catalog_loaded(self, source: str, model_count: int):
        self.logger.debug("catalog_loaded", source=source, model_count=model_count)

    def validation_failed(self, source: str, problems: list[str]):
        self.logger.error(
            "validation_failed",
            source=source,
            problem_count=len(problems),
            problems=problems,
        )

    def catalog_exported(self, destination: str, output_format: str, model_count: int):
        self.logger.info(
            "catalog_exported",
            destination=destination,
            format=output_format,
            model_count=model_count,
        )

    def archive_verified(
        self, model_id: str, path: str, valid: bool, size_bytes: int, error: str | None
    ):
        """Log the outcome of an archive integrity check."""
        log_method = self.logger.info if valid else self.logger.warning
        log_method(
            "archive_verified",
            model_id=model_id,
            path=path,
            valid=valid,
            size_bytes=size_bytes,
            error=error,
        )


def create_structured_logger(
    log_dir: Path | None = None, enable_json: bool = False
) -> tuple[StructuredLogger, CatalogEventLogger]:
    """
    Create the structured loggers.

    Returns:
        Tuple of (base_logger, catalog_event_logger)
    """
    base = StructuredLogger("model_catalog", log_dir=log_dir, enable_json=enable_json)
    return base, CatalogEventLogger(base)
