import logging
import colorlog

from config.settings import settings

# -------------------------
# Setup Centralized Logging
# -------------------------
logger = logging.getLogger("coinbank")
logger.setLevel(settings.EFFECTIVE_LOG_LEVEL)

handler = logging.StreamHandler()
handler.setFormatter(colorlog.ColoredFormatter(
    "%(log_color)s[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s",
    datefmt="%H:%M:%S",
    reset=True,
    log_colors={
        'DEBUG':    'cyan',
        'INFO':     'green',
        'WARNING':  'yellow',
        'ERROR':    'red',
        'CRITICAL': 'red,bg_white',
    },
    secondary_log_colors={},
    style='%'
))

# Prevent duplicate handlers if re-imported
if not logger.handlers:
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Returns a child logger for a specific component."""
    return logger.getChild(name)
