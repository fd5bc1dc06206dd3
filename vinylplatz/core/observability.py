"""
Observability - structured logging and Prometheus metrics.
Challenge: Machine-readable logs in production, readable logs locally; business counters.
Design: setup_logging runs once from the app lifespan; counters live at module level.
"""

import json
import logging
from datetime import datetime, timezone

from prometheus_client import Counter

# Extra attributes passed via logger.info(..., extra={...}) that end up in JSON output
_EXTRA_FIELDS = ("user_id", "vinyl_id", "order_id", "error_code", "path", "status")

ORDERS_CREATED = Counter(
    "vinylplatz_orders_created_total",
    "Orders placed by buyers.",
)
ORDER_STATUS_TRANSITIONS = Counter(
    "vinylplatz_order_status_transitions_total",
    "Order status changes applied by sellers.",
    ["from_status", "to_status"],
)


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = str(val)
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Configure the root logger. Safe to call more than once (handler is replaced)."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger()
    for existing in [h for h in root.handlers if getattr(h, "_vinylplatz", False)]:
        root.removeHandler(existing)
    handler._vinylplatz = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
