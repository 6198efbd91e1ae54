"""BAP Explorer — Logging setup."""
import logging

from bap_explorer.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Set the root level from LOG_LEVEL (DEBUG forces debug output)."""
    level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("bap_explorer").setLevel(level)
