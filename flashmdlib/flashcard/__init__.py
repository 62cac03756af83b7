from .session import ReviewSession
from .flashcard_controller import FlashcardController

__all__ = [
        "ReviewSession",
        "FlashcardController",
        ]
