"""Log formatters for JSON and human-readable output."""

import json
import logging
from datetime import UTC, datetime

# Record attributes copied into JSON output when a ride context set them.
CONTEXT_FIELDS = ("ride_id", "driver_id", "ride_class", "correlation_id")


class JSONFormatter(logging.Formatter):
    """One JSON object per line, timestamped when the record was created."""

    def __init__(self, environment: str = "development", service: str = "ridehail"):
        super().__init__()
        self.environment = environment
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service,
            "env": self.environment,
        }
        log_data.update(
            {field: getattr(record, field) for field in CONTEXT_FIELDS if hasattr(record, field)}
        )

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class DevFormatter(logging.Formatter):
    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)8s] [corr=%(correlation_id)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
