"""Root logging setup that keeps the upstream API key out of every log line.

The recipe API authenticates with an ``apiKey`` query parameter, so any
logger that prints an upstream URL (httpx does at INFO) would leak it.
Redaction happens in a handler filter shared by the root handler and the
third-party loggers routed through it.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

REDACTED = "[redacted]"

PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PLAIN_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"

# Loggers that install their own handlers; they are reset to propagate to root.
ROUTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx", "httpcore")

_API_KEY_PARAM = re.compile(r"(?P<name>apiKey=|x-api-key[=:]\s*)[^&\s\"']+", re.IGNORECASE)


class Redactor:
    """Replace known secrets and ``apiKey`` parameters in free text."""

    def __init__(self, secrets: Iterable[str]) -> None:
        cleaned = sorted({s.strip() for s in secrets if s and s.strip()}, key=len, reverse=True)
        self._secret_pattern: Optional[re.Pattern[str]] = (
            re.compile("|".join(re.escape(secret) for secret in cleaned)) if cleaned else None
        )

    def __call__(self, text: str) -> str:
        text = _API_KEY_PARAM.sub(lambda match: match.group("name") + REDACTED, text)
        if self._secret_pattern is not None:
            text = self._secret_pattern.sub(REDACTED, text)
        return text


class SensitiveDataFilter(logging.Filter):
    """Rewrite a record in place so no formatter ever sees the raw secret."""

    def __init__(self, secrets: Iterable[str]) -> None:
        super().__init__()
        self.redact = Redactor(secrets)

    def filter(self, record: logging.LogRecord) -> bool:
        rendered = record.getMessage()
        cleaned = self.redact(rendered)
        if cleaned != rendered:
            record.msg, record.args = cleaned, ()

        # Exception messages from httpx can embed the full request URL.
        if record.exc_info and not record.exc_text:
            record.exc_text = logging.Formatter().formatException(record.exc_info)
        if record.exc_text:
            record.exc_text = self.redact(record.exc_text)

        for key, value in list(vars(record).items()):
            if key not in ("msg", "exc_text") and isinstance(value, str):
                setattr(record, key, self.redact(value))
        return True


class PlainFormatter(logging.Formatter):
    """Pipe-separated text lines; a request id is appended when the record has one."""

    def __init__(self) -> None:
        super().__init__(PLAIN_FORMAT, datefmt=PLAIN_DATEFMT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        request_id = getattr(record, "request_id", None)
        return f"{line} | request_id={request_id}" if request_id else line


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = getattr(record, "request_id", None)
        if request_id:
            payload["request_id"] = request_id
        if record.exc_text or record.exc_info:
            payload["exc_info"] = record.exc_text or self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = record.stack_info
        return json.dumps(payload, ensure_ascii=True)


def build_formatter(fmt: Optional[str]) -> logging.Formatter:
    if (fmt or "plain").strip().lower() == "json":
        return JsonFormatter()
    return PlainFormatter()


def configure_logging(level_name: str, fmt: str, secrets: Iterable[str]) -> None:
    """Install a single redacting stream handler on the root logger."""

    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.INFO

    redacting = SensitiveDataFilter(secrets)
    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(fmt))
    handler.addFilter(redacting)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)
    logging.captureWarnings(True)

    for name in ROUTED_LOGGERS:
        routed = logging.getLogger(name)
        routed.handlers = []
        routed.setLevel(level)
        routed.propagate = True
        routed.filters = [f for f in routed.filters if not isinstance(f, SensitiveDataFilter)]
        routed.addFilter(redacting)
