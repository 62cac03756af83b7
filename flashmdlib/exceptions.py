from pathlib import Path


class FlashError(Exception):
    pass


class DocumentUnreadableError(FlashError):
    def __init__(self, path: Path, traceback: str = ""):
        self.path = path
        self.traceback = traceback
        msg = f"Failed to read {path}"
        if traceback:
            msg += f": {traceback}"
        super().__init__(msg)


class EmptyDeckError(FlashError):
    pass


class ResourceError(FlashError):
    pass
