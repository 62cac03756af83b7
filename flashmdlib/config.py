from dataclasses import dataclass, field, fields
from pathlib import Path
import json
import os
import shutil
import logging
from typing import Optional

logger = logging.getLogger("flashmd")


@dataclass
class Config:
    """Stores global configuration for the flashmd app

    Args:
        log_level: Logging level of the file handler
        width: Fixed window width in pixels
        height: Fixed window height in pixels
        always_on_top: Keep the review window above other windows
        rich_text: Render card text as Qt rich text instead of plain text
        stylesheet: Path to a Qt stylesheet replacing the bundled one
        advance_keys: Qt key names (without the 'Key_' prefix) that flip/advance the card
        quit_keys: Qt key names that close the window
    """
    log_level: str = "INFO"
    width: int = 600
    height: int = 200
    always_on_top: bool = True
    rich_text: bool = False
    stylesheet: Optional[str] = None
    advance_keys: list[str] = field(default_factory=lambda: ["Return", "Enter"])
    quit_keys: list[str] = field(default_factory=lambda: ["Escape"])
    templates_path: Path = Path(__file__).parent / "templates"

    def __post_init__(self):
        """Updates default values with values specified in config file"""
        config_path = self.config_dir() / "config.json"
        if config_path.is_file():
            self.update_from_file(config_path)

    def update_from_file(self, config_path: Path) -> None:
        try:
            with open(config_path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring config file {config_path}: {e}")
            return

        names = {f.name for f in fields(self)} - {"templates_path"}
        for k, v in data.items():
            if not isinstance(v, bool) and not isinstance(v, int) and not v: # skip emtpy entries
                continue
            if k not in names:
                logger.warning(f"Ignoring unknown config key {k!r}")
                continue
            if not self._valid_value(k, v):
                logger.warning(f"Ignoring config key {k!r}: unexpected value {v!r}")
                continue
            setattr(self, k, v)

    def _valid_value(self, name: str, value) -> bool:
        """ value must have the type of the fields default. Optional string fields accept strings """
        current = getattr(self, name)
        expected = str if current is None else type(current)
        # bool is a subclass of int
        if isinstance(value, bool) != (expected is bool):
            return False
        if not isinstance(value, expected):
            return False
        if expected is list:
            return all(isinstance(item, str) for item in value)
        return True

    @classmethod
    def config_dir(cls) -> Path:
        """
        Returns:
            platform-specific user config directory
        Raises:
            OSError: if operating system is unsupported
        """
        if os.name == "nt":
            config_dir = Path(os.getenv("APPDATA", Path.home())) / "FlashMD"
        elif os.name == "posix":
            config_dir = Path.home() / ".config" / "FlashMD"
        else:
            raise OSError("Unsupported operating system")
        return config_dir

    def log_dir(self) -> Path:
        return self.config_dir() / "logs"

    def init_config_file(self) -> Path:
        """Copies the bundled config template into the user config directory, keeping an existing file"""
        dest = self.config_dir() / "config.json"
        if dest.is_file():
            return dest
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy(self.templates_path / "config_template.json", dest)
        return dest


CONFIG = Config()
