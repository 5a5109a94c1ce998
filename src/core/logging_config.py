"""Root logger level setup for Lambda containers."""

import logging

_configured = False


def setup_logging(level: str = "INFO") -> None:
    """Set the root logger level once per container.

    The Lambda runtime installs its own handler on the root logger, so only
    the level is adjusted here. A plain ``basicConfig`` is used when running
    outside Lambda and no handler exists yet.
    """
    global _configured
    if _configured:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    root.setLevel(numeric_level)
    _configured = True
