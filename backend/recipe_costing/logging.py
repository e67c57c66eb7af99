import logging
import sys
from typing import Optional


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Third-party loggers that echo every statement at INFO
_QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def configure_logging(level: Optional[str] = None) -> None:
    from recipe_costing.config import settings

    root = logging.getLogger()
    if root.handlers:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level or settings.log_level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "recipe_costing")


def log_fields(**fields: object) -> str:
    """Render fields as 'k=v k=v' for event-style log lines."""
    return " ".join(f"{k}={v}" for k, v in fields.items())
