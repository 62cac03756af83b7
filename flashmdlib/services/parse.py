import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from ..models import Card
from ..exceptions import DocumentUnreadableError

logger = logging.getLogger("flashmd")

HEADING_PREFIX = "# "


def _flush(cards: list[Card], title: Optional[str], body: str) -> None:
    """ Finalize pending section. Sections without a title are dropped """
    if title is not None:
        cards.append(Card(title=title, body=body))


def parse_lines(lines: Iterable[str]) -> list[Card]:
    """ Split lines into cards. Every line starting with '# ' opens a new card, all other lines make up its body
    -- Params --
    lines: lines without their line terminators
    returns: cards in document order
    """
    cards: list[Card] = []
    title: Optional[str] = None
    body = ""

    for line in lines:
        if line.startswith(HEADING_PREFIX):
            _flush(cards, title, body)
            body = ""
            trimmed = line[len(HEADING_PREFIX):].strip()
            title = trimmed if trimmed else None
        else:
            body += line + "\n"
    _flush(cards, title, body)

    return cards


def split_lines(text: str) -> list[str]:
    """ Splits on '\\n' and drops the '\\r' of a '\\r\\n' terminator. A terminating newline does not produce an extra
    empty line, an unterminated last line keeps its trailing '\\r'
    """
    if not text:
        return []
    *terminated, last = text.split("\n")
    lines = [line.removesuffix("\r") for line in terminated]
    if last != "":
        lines.append(last)
    return lines


def parse_text(text: str) -> list[Card]:
    return parse_lines(split_lines(text))


def read_lines(path: Path, encoding: str = "utf-8") -> Iterator[str]:
    """ Yield decoded lines of path. Lines that cannot be decoded are skipped
    -- Params --
    path: document to read
    raises: DocumentUnreadableError if path cannot be opened or read
    """
    try:
        f = path.open("rb")
    except OSError as e:
        raise DocumentUnreadableError(path, str(e)) from e

    with f:
        lineno = 0
        while True:
            try:
                raw = f.readline()
            except OSError as e:
                raise DocumentUnreadableError(path, str(e)) from e
            if not raw:
                break
            lineno += 1
            try:
                line = raw.decode(encoding)
            except UnicodeDecodeError as e:
                logger.warning(f"Skipping line {lineno} of {path}: {e}")
                continue
            if line.endswith("\n"):
                line = line[:-1].removesuffix("\r")
            yield line


def load_cards(path: Path) -> list[Card]:
    logger.debug(f"Calling load_cards(path={path})")
    cards = parse_lines(read_lines(path))
    logger.info(f"Loaded {len(cards)} cards from {path}")
    return cards
