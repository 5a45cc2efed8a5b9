import json
import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from inventory_api.config import get_settings

# Per-request chatter from the server and test client.
NOISY_LOGGERS = ("uvicorn.access", "httpx", "multipart.multipart", "python_multipart.multipart")

_RECORD_EXTRAS = ("product_id", "image", "slot")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in _RECORD_EXTRAS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def _resolve_level(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def build_handler(json_output: bool) -> logging.Handler:
    handler = logging.StreamHandler()
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%H:%M:%S",
            )
        )
    return handler


def setup_logging(
    level: Optional[str] = None,
    json_output: Optional[bool] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
) -> None:
    settings = get_settings()
    root_level = _resolve_level(level or settings.LOG_LEVEL)
    if json_output is None:
        json_output = settings.LOG_JSON

    root = logging.getLogger()
    root.setLevel(root_level)
    root.handlers.clear()
    root.addHandler(build_handler(json_output))

    quiet_level = max(root_level, logging.WARNING)
    for name in quiet:
        logging.getLogger(name).setLevel(quiet_level)
