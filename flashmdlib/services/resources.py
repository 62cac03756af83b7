import logging
from pathlib import Path

from ..config import Config
from ..exceptions import ResourceError
from ..flashcard.style import DEFAULT_CSS

logger = logging.getLogger("flashmd")


def read_stylesheet(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceError(f"Failed to load stylesheet {path}: {e}") from e


def load_stylesheet(config: Config) -> str:
    """ Returns the user stylesheet named in config, falling back to the bundled stylesheet if it is unset or unreadable """
    if not config.stylesheet:
        return DEFAULT_CSS
    try:
        return read_stylesheet(Path(config.stylesheet).expanduser())
    except ResourceError as e:
        logger.warning(f"{e}. Using default stylesheet")
        return DEFAULT_CSS
