import logging
import os
import sys

from .config import ConfigError, load_config
from .defaults import CONFIG_PATH, LOG_LEVEL
from .scanner import scan, split_path, write_names

logging.basicConfig()
logger = logging.getLogger(__package__)


def main():
    try:
        logger.setLevel(LOG_LEVEL)
    except ValueError:
        logger.warning(f"Unknown log level '{LOG_LEVEL}', ignoring.")

    try:
        path = os.environb[b"PATH"]
    except KeyError:
        logger.error("PATH is not set.")
        return 1

    try:
        config = load_config(CONFIG_PATH)
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    directories = split_path(path)
    logger.debug(f"Scanning {len(directories)} directories with check '{config.executable_check}'.")
    names = scan(
        directories, check=config.executable_check, exclude=config.exclude, workers=config.workers
    )

    try:
        write_names(names, sys.stdout.buffer)
    except BrokenPipeError:
        # Reader went away (e.g. piped into head), point stdout at devnull so the exit flush is quiet.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    return 0
