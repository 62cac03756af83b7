import argparse
import sys
import logging
import logging.config
from typing import Optional

from .config import CONFIG, Config
from .controller import FlashcardCommand

logger = logging.getLogger("flashmd")


def logging_config(config: Config, level: Optional[str] = None) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {},

        "formatters": {
            "simple": {
                "format": "[%(asctime)s][%(levelname)s][%(name)s] %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S"
                }
            },

        "handlers": {
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": level or config.log_level,
                "formatter": "simple",
                "filename": str(config.log_dir() / "flashmd.log"),
                "maxBytes": 1000000,
                "backupCount": 2
                }
            },

        "loggers": {
            "flashmd": {
                "level": "DEBUG",
                "handlers": ["file"]
            }
        }
    }


def setup_logging(config: Config, level: Optional[str] = None) -> None:
    config.log_dir().mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(config=logging_config(config, level))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flashmd", description="Review flashcards written as '# title' sections of a markdown file")
    parser.add_argument("file", nargs="?", help="Markdown file containing the flashcards. '~' is expanded")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Overrides the log level set in config.json")
    parser.add_argument("--init-config", action="store_true", help=f"Create {Config.config_dir() / 'config.json'} from the default template")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(CONFIG, args.log_level)

    if args.init_config:
        path = CONFIG.init_config_file()
        print(f"Config file: {path}")
        return 0
    if args.file is None:
        parser.print_help()
        return 1

    instance = FlashcardCommand(CONFIG)
    logger.info(f"Calling command {type(instance)}")
    return instance.cmd(args)


if __name__ == '__main__':
    sys.exit(main())
