import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_DIR_ENV = 'ROOMAESTRO_LOG_DIR'
DEFAULT_LOG_DIR = Path.home() / '.rooMaestro' / 'logs'
INFO_LOG_NAME = 'rooMaestro.log'
DEBUG_LOG_NAME = 'rooMaestro_debug.log'

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Create a logger
logger = logging.getLogger('rooMaestro')
logger.setLevel(logging.DEBUG)


def resolve_log_dir(log_dir: Optional[Union[str, Path]] = None) -> Path:
    if log_dir:
        return Path(log_dir)
    env_dir = os.environ.get(LOG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return DEFAULT_LOG_DIR


def setup_logging(log_dir: Optional[Union[str, Path]] = None, verbose: bool = False) -> logging.Logger:
    """Attach file and console handlers to the package logger.

    Calling it again replaces the handlers from the previous call. When the
    log directory cannot be created only the console handler is installed.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    # Console handler writes to stderr
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    target_dir = resolve_log_dir(log_dir)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        # File handlers with log rotation
        info_handler = RotatingFileHandler(target_dir / INFO_LOG_NAME, maxBytes=5*1024*1024, backupCount=9, encoding='utf-8')
        info_handler.setLevel(logging.INFO)
        debug_handler = RotatingFileHandler(target_dir / DEBUG_LOG_NAME, maxBytes=5*1024*1024, backupCount=9, encoding='utf-8')
        debug_handler.setLevel(logging.DEBUG)
    except OSError as e:
        logger.warning(f"File logging disabled, cannot use {target_dir}: {e}")
        return logger

    info_handler.setFormatter(formatter)
    debug_handler.setFormatter(formatter)
    logger.addHandler(info_handler)
    logger.addHandler(debug_handler)
    return logger
