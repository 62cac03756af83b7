import logging
from pathlib import Path
from typing import Optional, Protocol

from .config import Config
from .exceptions import DocumentUnreadableError, EmptyDeckError
from .flashcard import FlashcardController, ReviewSession
from .models import Card
from .services import expand_path, load_cards, load_stylesheet

logger = logging.getLogger("flashmd")


class Command(Protocol):
    def cmd(self, namespace) -> int: ...


class FlashcardCommand(Command):
    """ Command for reviewing flashcards from a markdown file """
    _app = None
    _window = None

    def __init__(self, config: Config):
        self.config = config

    @classmethod
    def _ensure_import(cls):
        if cls._app is None or cls._window is None:
            from PyQt6.QtWidgets import QApplication
            from .flashcard.window import FlashcardWindow
            cls._app = QApplication.instance() or QApplication([])
            cls._window = FlashcardWindow

    @staticmethod
    def build_file(namespace) -> Optional[Path]:
        """ Expanded path of namespace.file if it is an existing file """
        path = expand_path(namespace.file)
        if not path.is_file():
            return None
        return path

    def load(self, namespace) -> ReviewSession:
        """
        raises: FileNotFoundError if namespace.file is not a file, DocumentUnreadableError, EmptyDeckError
        """
        path = self.build_file(namespace)
        if path is None:
            raise FileNotFoundError(f"The first argument was not a file: {namespace.file}")
        cards: list[Card] = load_cards(path)
        return ReviewSession(cards)

    def cmd(self, namespace) -> int:
        try:
            session = self.load(namespace)
        except FileNotFoundError as e:
            logger.error(str(e))
            print(f"{e}. Usecase: flashmd <file>")
            return 1
        except DocumentUnreadableError as e:
            logger.error(f"{e}\n{e.traceback}")
            print(e)
            return 1
        except EmptyDeckError:
            logger.error(f"No cards found in {namespace.file}")
            print(f"No cards found in {namespace.file}. Cards start with a '# <title>' line")
            return 1

        self._ensure_import()
        self._app.setStyleSheet(load_stylesheet(self.config)) #type: ignore - self._ensure_import is always called first
        window = self._window(self.config) #type: ignore
        controller = FlashcardController(window, session)
        controller.run()
        return self._app.exec() #type: ignore
