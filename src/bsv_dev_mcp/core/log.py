import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send package logs to stderr; stdout belongs to the stdio transport."""
    logger = logging.getLogger("bsv_dev_mcp")
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(h)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
