from concurrent.futures import ThreadPoolExecutor
import fnmatch
import logging
import os

from .defaults import DEFAULT_EXECUTABLE_CHECK, EXECUTABLE_BITS

logger = logging.getLogger(__name__)


def split_path(value):
    """
        Split a PATH value into directories, as bytes in the raw OS encoding.
        Empty entries mean the current directory, like the shell treats them.
    """
    value = os.fsencode(value)
    return [directory or b"." for directory in value.split(os.fsencode(os.pathsep))]


def is_executable(entry, check=DEFAULT_EXECUTABLE_CHECK):
    # The access syscall respects ACLs and the current user but is much slower than the mode bits.
    try:
        if check == "access":
            return os.access(entry.path, os.X_OK)
        # Links are not followed, their own mode is 0o777.
        return entry.stat(follow_symlinks=False).st_mode & EXECUTABLE_BITS != 0
    except OSError:
        return False


def _excluded(name, exclude):
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in exclude)


def find_executables(directory, check=DEFAULT_EXECUTABLE_CHECK, exclude=()):
    directory = os.fsencode(directory)
    exclude = [os.fsencode(pattern) for pattern in exclude]
    found = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        # Not a file.
                        continue
                except OSError:
                    continue
                if not is_executable(entry, check):
                    # Not executable.
                    continue
                if _excluded(entry.name, exclude):
                    # Manually excluded.
                    continue
                found.append(entry.name)
    except OSError as e:
        # Missing and unreadable directories on PATH are common, contribute nothing.
        logger.debug(f"Skipping {os.fsdecode(directory)}: {e}")
        return []
    logger.debug(f"Found {len(found)} executables in {os.fsdecode(directory)}")
    return found


def scan(directories, check=DEFAULT_EXECUTABLE_CHECK, exclude=(), workers=None):
    """
        Scan all directories in parallel and return the unique executable names, sorted by bytes.
    """
    directories = list(directories)
    if not directories:
        return []
    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(executor.map(lambda d: find_executables(d, check, exclude), directories))
    names = set()
    for found in results:
        names.update(found)
    return sorted(names)


def write_names(names, stream):
    for name in names:
        stream.write(name)
        stream.write(b"\n")
    stream.flush()
