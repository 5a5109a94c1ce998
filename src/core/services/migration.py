"""Run Alembic migrations programmatically — invoked via the migrate Lambda."""

import io
import logging

from alembic.config import Config

from alembic import command
from core.config import get_config

logger = logging.getLogger(__name__)


def run_migrations() -> dict[str, str]:
    ini_path = get_config().alembic_config
    cfg = Config(ini_path)
    # Keep the container's logging; env.py skips fileConfig when this is False.
    cfg.attributes["configure_logger"] = False

    stderr_buf = io.StringIO()
    stream_handler = logging.StreamHandler(stderr_buf)
    alembic_logger = logging.getLogger("alembic")
    previous_level = alembic_logger.level
    alembic_logger.addHandler(stream_handler)
    alembic_logger.setLevel(logging.INFO)

    try:
        command.upgrade(cfg, "head")
        output = stderr_buf.getvalue()
        logger.info("Migration complete: %s", output)
        return {"status": "success", "output": output}
    except Exception as e:
        logger.error("Migration failed: %s", e)
        raise
    finally:
        alembic_logger.removeHandler(stream_handler)
        alembic_logger.setLevel(previous_level)
