import logging

from app.core.config import get_settings


def setup_logging() -> None:
    """Configure the root logger; level comes from Settings.LOG_LEVEL."""
    settings = get_settings()
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger().setLevel(level)
