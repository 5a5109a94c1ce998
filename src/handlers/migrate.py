"""Schema migration handler — invoked directly after each deploy."""

from typing import Any

from core.config import get_config
from core.logging_config import setup_logging
from core.services.migration import run_migrations


def handler(event: dict[str, Any], context: object) -> dict[str, str]:
    setup_logging(get_config().log_level)
    return run_migrations()
