import os
from pathlib import Path


def _default_config_path():
    config_home = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(config_home) / "pathsearch" / "config.yaml"


CONFIG_PATH = os.environ.get("PATHSEARCH_CONFIG") or _default_config_path()
LOG_LEVEL = os.environ.get("PATHSEARCH_LOG_LEVEL", "WARNING").upper()

# Any of owner/group/other execute.
EXECUTABLE_BITS = 0o111

EXECUTABLE_CHECKS = ("mode", "access")
DEFAULT_EXECUTABLE_CHECK = "mode"

EXCLUDE_GLOBS = ()
