from __future__ import annotations

import json
import logging
import sys
import time
from typing import Any, Mapping

from core.config import AppSettings


# Attributes callers may attach with `extra=` that end up in JSON lines.
CONTEXT_KEYS = ("action_id", "source", "alias", "langcode", "path", "pid", "backend")


def _json_log_record(level: str, msg: str, *, extra: Mapping[str, Any] | None = None) -> str:
    body: dict[str, Any] = {
        "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
        "level": level,
        "msg": msg,
    }
    if extra:
        for k, v in extra.items():
            if v is None:
                continue
            body[k] = v
    return json.dumps(body, ensure_ascii=False)


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        extra: dict[str, Any] = {"logger": record.name}
        for key in CONTEXT_KEYS:
            if hasattr(record, key):
                extra[key] = getattr(record, key)
        if record.exc_info:
            extra["exc"] = self.formatException(record.exc_info)
        return _json_log_record(record.levelname, record.getMessage(), extra=extra)


def setup_logging(settings: AppSettings | None = None) -> None:
    settings = settings or AppSettings()
    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.WARNING))

    # Single handler; repeated calls (tests, nested CLI runs) must not stack them.
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream=sys.stderr)
    if settings.log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))

    root.addHandler(handler)
