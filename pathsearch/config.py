from dataclasses import dataclass
import logging
from pathlib import Path

import yaml

from .defaults import DEFAULT_EXECUTABLE_CHECK, EXCLUDE_GLOBS, EXECUTABLE_CHECKS

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class Config:
    exclude: tuple = EXCLUDE_GLOBS
    executable_check: str = DEFAULT_EXECUTABLE_CHECK
    workers: int = None


def parse_config(data, source="<config>"):
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: expected a mapping at the top level.")

    unknown = set(data) - {"exclude", "executable_check", "workers"}
    if unknown:
        raise ConfigError(f"{source}: unknown keys {', '.join(sorted(map(str, unknown)))}.")

    exclude = data.get("exclude", EXCLUDE_GLOBS)
    if exclude is None:
        exclude = ()
    if not isinstance(exclude, (list, tuple)) or not all(isinstance(g, str) for g in exclude):
        raise ConfigError(f"{source}: 'exclude' must be a list of glob strings.")

    check = data.get("executable_check", DEFAULT_EXECUTABLE_CHECK)
    if check not in EXECUTABLE_CHECKS:
        raise ConfigError(f"{source}: 'executable_check' must be one of {', '.join(EXECUTABLE_CHECKS)}.")

    workers = data.get("workers")
    # bool is an int subclass, reject it explicitly.
    if workers is not None and (isinstance(workers, bool) or not isinstance(workers, int) or workers < 1):
        raise ConfigError(f"{source}: 'workers' must be a positive integer.")

    return Config(exclude=tuple(exclude), executable_check=check, workers=workers)


def load_config(path):
    path = Path(path)
    try:
        text = path.read_bytes()
    except FileNotFoundError:
        logger.debug(f"No config at {path}, using defaults.")
        return Config()
    except OSError as e:
        raise ConfigError(f"Unable to read {path}: {e}") from e

    try:
        # Bytes let the YAML reader detect the encoding and reject undecodable input.
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    logger.debug(f"Loaded config: {path}")
    return parse_config(data, source=str(path))
