from enum import Enum, auto


class Face(Enum):
    Front = "Front"
    Back = "Back"

    def flipped(self) -> 'Face':
        return Face.Back if self is Face.Front else Face.Front


class ReviewEvent(Enum):
    """ Logical inputs forwarded by the host into a ReviewSession """
    Primary = auto()
    Cancel = auto()
