import os
from pathlib import Path


def expand_path(path: str) -> Path:
    """
    Expands '~' and '~/...' to the users home directory. Paths that do not exist as given are resolved against the
    current working directory
    """
    if path == "~" or path.startswith("~/"):
        home = Path.home()
        return home if path == "~" else home / path[2:]

    candidate = Path(path)
    if candidate.exists():
        return candidate
    return Path(os.getcwd()) / candidate
