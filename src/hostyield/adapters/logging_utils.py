import logging
import json
import sys
import time
from .config import config

RESERVED_KEYS = frozenset({"ts", "level", "logger", "message"})

class JsonLogFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "ts": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # merge structured fields passed via extra={"context": {...}};
        # context never overwrites the envelope
        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict):
            payload.update({k: v for k, v in ctx.items() if k not in RESERVED_KEYS})
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)

def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonLogFormatter())
        logger.addHandler(handler)
        logger.setLevel(config.LOG_LEVEL.upper())
        logger.propagate = False
    return logger
