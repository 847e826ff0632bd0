import logging

from cityweather.core.config import get_settings


logger = logging.getLogger("cityweather")
logger.setLevel(get_settings().log_level.upper())

# One console handler, even if this module is reloaded.
if not logger.handlers:
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(console_handler)
