"""Placeholder templates and separator-preserving shuffles."""

import random as _random
from collections.abc import Callable

from dbdatagen.exceptions import GenerationError

PLACEHOLDER = "#"
DEFAULT_MAC_FORMAT = "##:##:##:##:##:##"

# Draws of the raw generator before giving up on filling a template
MAX_SOURCE_DRAWS = 100


def placeholder_count(template: str) -> int:
    return template.count(PLACEHOLDER)


def apply_format(template: str, source: Callable[[], str], keep: Callable[[str], bool]) -> str:
    """
    Replace each '#' in template, in order, with characters from source().

    Only characters accepted by `keep` are consumed from the raw output
    (digits for phone numbers, hex digits for MAC addresses). When one draw
    is too short, source() is called again. Every non-'#' character of the
    template is copied verbatim.

    Example:
        >>> apply_format("(###) #######", lambda: "123-456-7890", str.isdigit)
        '(123) 4567890'

    Raises:
        GenerationError: If the template has no placeholder or the source
            never yields enough characters
    """
    needed = placeholder_count(template)
    if needed == 0:
        raise GenerationError(f"Format '{template}' has no '{PLACEHOLDER}' placeholders")

    raw = ""
    draws = 0
    while len(raw) < needed:
        if draws == MAX_SOURCE_DRAWS:
            raise GenerationError(
                f"Format '{template}' needs {needed} characters, "
                f"generator produced only {len(raw)}"
            )
        raw += "".join(ch for ch in source() if keep(ch))
        draws += 1

    chars = iter(raw)
    return "".join(next(chars) if ch == PLACEHOLDER else ch for ch in template)


def is_hex_digit(ch: str) -> bool:
    return ch in "0123456789abcdefABCDEF"


def shuffle_preserving_separators(value: str, rnd: _random.Random | None = None) -> str:
    """
    Shuffle the characters of value while every comma and the first dot stay in place.

    Keeps formatted numbers looking formatted: "1,234.56" becomes e.g.
    "5,342.61", with the separators at their original indices and the other
    characters permuted. Later dots are shuffled with the other characters.
    """
    rnd = rnd or _random.Random()
    first_dot = value.find(".")
    positions = [(i, ch) for i, ch in enumerate(value) if ch == "," or i == first_dot]
    pinned = {i for i, _ in positions}
    chars = [ch for i, ch in enumerate(value) if i not in pinned]
    rnd.shuffle(chars)
    for index, separator in positions:
        chars.insert(index, separator)
    return "".join(chars)
