"""Offline recognition of three word addresses in arbitrary text.

None of these helpers touch the network: they only decide whether text has
the *shape* of a 3wa. Use ``What3words.is_valid_address`` to confirm that a
candidate actually resolves.
"""

import re
from typing import Optional

# Full-stop equivalents used between words across the supported scripts.
SEPARATORS = (
    "."
    "\uFF61"  # halfwidth ideographic full stop
    "\u3002"  # ideographic full stop
    "\uFF65"  # halfwidth katakana middle dot
    "\u30FB"  # katakana middle dot
    "\uFE12"  # vertical ideographic full stop
    "\u17D4"  # Khmer sign khan
    "\u0589"  # Armenian full stop
    "\u104B"  # Myanmar sign section
    "\u06D4"  # Arabic full stop, as used in Urdu
    "\u1362"  # Ethiopic full stop
    "\u0964"  # Devanagari danda
)

# What people type instead of a dot. Runs of one or two are tolerated.
NEAR_MISS_SEPARATORS = SEPARATORS + " ,\\/+'&:;|^_-\u3000"

# Never part of a word, in addition to ASCII digits, whitespace and SEPARATORS.
_DENIED = "`~!@#$%^&*()+-_=[{]}\\|'<,.>?/\";:£§º©®"
# Mistyped addresses may still carry underscores inside a word.
_NEAR_MISS_DENIED = _DENIED.replace("_", "")


def _word_char(denied: str) -> str:
    return "[^0-9" + re.escape(denied + SEPARATORS) + r"\s]"


_WORD_CHAR = _word_char(_DENIED)
_WORD = _WORD_CHAR + "+"
_SEP = "[" + re.escape(SEPARATORS) + "]"

# Up to four tokens joined by a single space or NBSP.
_LOOSE_WORD = _WORD + r"(?:[\u0020\u00A0]" + _WORD + r"){0,3}"

_POSSIBLE_3WA_RE = re.compile(
    "/*" + _LOOSE_WORD + _SEP + _LOOSE_WORD + _SEP + _LOOSE_WORD
)
# A match never starts inside a word, so each word run is scanned once.
_FIND_3WA_RE = re.compile(
    "(?<!" + _WORD_CHAR + ")" + _WORD + _SEP + _WORD + _SEP + _WORD
)

# "_" is both a word character and a near-miss separator. Text is split on
# the other separators here and underscores are handled by _split_word.
_NEAR_MISS_WORD_RE = re.compile(_word_char(_NEAR_MISS_DENIED) + "+")
_NEAR_MISS_SPLIT_RE = re.compile(
    "([" + re.escape(NEAR_MISS_SEPARATORS.replace("_", "")) + "]+)"
)


def is_possible_address(text: str) -> bool:
    """
    Return True if *text* is shaped like a three word address.

    Leading slashes are ignored, so ``///filled.count.soap`` passes, and a
    word may be up to four space-separated tokens.
    """
    return _POSSIBLE_3WA_RE.fullmatch(text) is not None


def did_you_mean(text: str) -> bool:
    """
    Return True if *text* looks like a 3wa typed with the wrong separators,
    e.g. ``filled count soap`` or ``filled-count-soap``.
    """
    return _near_miss_words(text) is not None


def dotted_address(text: str) -> Optional[str]:
    """
    Rewrite a near-miss 3wa with dots, e.g. ``filled count soap`` becomes
    ``filled.count.soap``. Returns None when did_you_mean(text) is False.
    """
    words = _near_miss_words(text)
    return ".".join(words) if words is not None else None


def find_possible_addresses(text: str) -> list[str]:
    """
    Return every 3wa-shaped substring of *text*, left to right.

    Only single-token words are matched here, so ordinary sentences that
    happen to contain full stops are not picked up.
    """
    return _FIND_3WA_RE.findall(text)


def _near_miss_words(text: str) -> Optional[list[str]]:
    if text.startswith("/"):
        text = text[1:]

    parts = _NEAR_MISS_SPLIT_RE.split(text)
    words, seps = parts[::2], parts[1::2]
    if len(words) > 3 or any(len(sep) > 2 for sep in seps):
        return None
    if not all(_NEAR_MISS_WORD_RE.fullmatch(word) for word in words):
        return None

    while len(words) < 3:
        words = _split_word(words)
        if words is None:
            return None
    return words


def _split_word(words: list[str]) -> Optional[list[str]]:
    """Split the first word with an inner underscore in two, or None."""
    for i, word in enumerate(words):
        at = word.find("_", 1, len(word) - 1)
        if at != -1:
            return words[:i] + [word[:at], word[at + 1:]] + words[i + 1:]
    return None
