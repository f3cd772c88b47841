"""Logging setup."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger once for the application process."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # SQL statement logging is controlled by the engine's echo flag
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
