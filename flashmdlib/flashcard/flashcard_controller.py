import logging
from typing import Callable, Protocol

from .._enums import ReviewEvent
from .session import ReviewSession

logger = logging.getLogger("flashmd")


class FlashcardView(Protocol):
    def bind_primary(self, callback: Callable[[], None]) -> None: ...
    def bind_cancel(self, callback: Callable[[], None]) -> None: ...
    def setCloseCallback(self, callback: Callable[[], None]) -> None: ...
    def set_title(self, text: str) -> None: ...
    def set_body(self, text: str) -> None: ...
    def show(self) -> None: ...
    def close(self) -> bool: ...


class FlashcardController:
    """ Forwards view input to the session and re-renders the session after every transition """
    def __init__(self, view: FlashcardView, session: ReviewSession) -> None:
        self.view = view
        self.session = session

        self._setBindings()
        self.render()

    def _setBindings(self):
        self.view.bind_primary(self.primary)
        self.view.bind_cancel(self.cancel)
        self.view.setCloseCallback(self.session.on_cancel_event)

    def render(self):
        self.view.set_title(self.session.current_title())
        self.view.set_body(self.session.current_body())

    def run(self):
        logger.debug(f"Calling {self.run}")
        self.view.show()

    def primary(self):
        if self.session.terminated:
            return
        self.session.handle(ReviewEvent.Primary)
        self.render()

    def cancel(self):
        logger.info("Closing app")
        self.session.handle(ReviewEvent.Cancel)
        self.view.close()
