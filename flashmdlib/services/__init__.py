from .parse import HEADING_PREFIX, parse_lines, parse_text, split_lines, read_lines, load_cards
from .filesystem import expand_path
from .resources import load_stylesheet, read_stylesheet


__all__ = [
        "HEADING_PREFIX",
        "parse_lines",
        "parse_text",
        "split_lines",
        "read_lines",
        "load_cards",
        "expand_path",
        "load_stylesheet",
        "read_stylesheet"
        ]
