import random
import logging
from typing import Optional, Protocol, Sequence

from .._enums import Face, ReviewEvent
from ..exceptions import EmptyDeckError
from ..models import Card

logger = logging.getLogger("flashmd")


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class ReviewSession:
    """ Review state machine over a deck of cards

    Front --(primary)--> Back   index unchanged
    Back  --(primary)--> Front  index redrawn uniformly, may repeat
    any   --(cancel)---> terminated
    """
    def __init__(self, deck: Sequence[Card], rng: Optional[RandomSource] = None) -> None:
        """
        -- Params --
        deck: cards to review, read only for the lifetime of the session
        rng: source of randomness, needs randrange(n). Defaults to a fresh random.Random
        raises: EmptyDeckError if deck has no cards
        """
        if len(deck) == 0:
            raise EmptyDeckError("Cannot start a review session without cards")
        self._deck: tuple[Card, ...] = tuple(deck)
        self._rng = rng if rng is not None else random.Random()
        self.face = Face.Front
        self.terminated = False
        self.current_index = self._draw_index()
        logger.debug(f"Started session with {len(self._deck)} cards at index {self.current_index}")

    @property
    def deck(self) -> tuple[Card, ...]:
        return self._deck

    @property
    def current_card(self) -> Card:
        return self._deck[self.current_index]

    def __len__(self) -> int:
        return len(self._deck)

    def _draw_index(self) -> int:
        return self._rng.randrange(len(self._deck))

    def current_title(self) -> str:
        return self.current_card.title

    def current_body(self) -> str:
        """ Body of the current card, blank while the front face is shown """
        if self.face is Face.Front:
            return ""
        return self.current_card.body

    def on_primary_event(self) -> None:
        if self.terminated:
            logger.debug("Ignoring primary event on terminated session")
            return

        if self.face is Face.Back:
            self.current_index = self._draw_index()
        self.face = self.face.flipped()
        logger.debug(f"Primary event: face={self.face.value}, index={self.current_index}")

    def on_cancel_event(self) -> None:
        if not self.terminated:
            logger.info("Review session terminated")
        self.terminated = True

    def handle(self, event: ReviewEvent) -> None:
        """ Dispatch a logical input event. Unknown events are ignored """
        if event is ReviewEvent.Primary:
            self.on_primary_event()
        elif event is ReviewEvent.Cancel:
            self.on_cancel_event()
        else:
            logger.debug(f"Ignoring unknown event {event!r}")
