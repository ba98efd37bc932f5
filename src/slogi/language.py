"""Syllabification and parsing of Cyrillic and Latin text."""

import re
import unicodedata
from itertools import pairwise

from slogi.models import ProcessedText, Syllable, Word, syllable_id, word_id

VOWELS = "АЕЁИОУЫЭЮЯ" + "ÄÖÜ" + "AEIOU"
LETTERS = "А-ЯЁа-яё" + "A-Za-z" + "ÄÖÜäöüß"

_VOWEL_GROUP = re.compile(f"[{VOWELS}]+", re.IGNORECASE)
_WHITESPACE = re.compile(r"(\s+)")
_LETTERS_THEN_SUFFIX = re.compile(f"([{LETTERS}]+)([^{LETTERS}]*)")

HYPHEN = "-"
MIN_VOWEL_GROUPS = 2


def syllabify(word: str) -> str:
    """Split a word into syllables separated by hyphens.

    Consonants between two vowel groups are distributed so that a single
    consonant starts the next syllable (V-CV) and a cluster keeps its first
    consonant with the preceding vowel (VC-CV). Casing is preserved.

    Parameters
    ----------
    word : str
        The word to syllabify, without whitespace or surrounding punctuation

    Returns
    -------
    str
        The word with a hyphen at each syllable break, or the word unchanged
        if it has fewer than two vowel groups

    Examples
    --------
    >>> syllabify("КОТЕНОК")
    'КО-ТЕ-НОК'
    >>> syllabify("окно")
    'ок-но'
    >>> syllabify("КОТ")
    'КОТ'

    """
    groups = list(_VOWEL_GROUP.finditer(word))
    if len(groups) < MIN_VOWEL_GROUPS:
        return word

    breaks: set[int] = set()
    for previous, current in pairwise(groups):
        consonants_between = current.start() - previous.end()
        if consonants_between == 1:
            breaks.add(previous.end())
        elif consonants_between > 1:
            breaks.add(previous.end() + 1)

    positions = sorted(b for b in breaks if 0 < b < len(word))
    if not positions:
        return word

    parts = []
    start = 0
    for position in positions:
        parts.append(word[start:position])
        start = position
    parts.append(word[start:])
    return HYPHEN.join(parts)


def _format_token(token: str) -> str:
    """Syllabify the leading letters of a token, keeping its trailing punctuation."""
    match = _LETTERS_THEN_SUFFIX.fullmatch(token)
    if match is None:
        return token
    letters, suffix = match.groups()
    return syllabify(letters) + suffix


def format_text(text: str) -> str:
    """Uppercase text and hyphenate every word, preserving whitespace verbatim.

    Tokens that are not a run of letters followed by non-letters (pure
    punctuation, numbers, already hyphenated words) pass through unchanged.
    Decomposed input (e.g. Й as И plus a combining breve) is composed first.

    Examples
    --------
    >>> format_text("Привет, мир!")
    'ПРИ-ВЕТ, МИР!'

    """
    tokens = _WHITESPACE.split(unicodedata.normalize("NFC", text).upper())
    return "".join(
        token if not token or token.isspace() else _format_token(token)
        for token in tokens
    )


def tokenize(text: str) -> list[str]:
    """Split text into words on whitespace."""
    return [w for w in text.split() if w]


def parse(text: str) -> ProcessedText:
    """Convert hyphenated text into words and syllables.

    Line breaks and repeated whitespace are not kept. A token that has no
    syllables left after splitting on hyphens (e.g. ``"-"``) becomes a single
    syllable holding the whole token, so every word has at least one syllable.

    Parameters
    ----------
    text : str
        Whitespace-separated words with hyphens between syllables

    Returns
    -------
    ProcessedText
        Words in reading order

    """
    words = []
    for word_index, token in enumerate(tokenize(text)):
        pieces = [s for s in token.split(HYPHEN) if s] or [token]
        syllables = tuple(
            Syllable(text=piece, id=syllable_id(word_index, syllable_index))
            for syllable_index, piece in enumerate(pieces)
        )
        words.append(
            Word(id=word_id(word_index), display_text=token, syllables=syllables)
        )
    return tuple(words)


def process(text: str) -> ProcessedText:
    """Format and parse raw text in one step."""
    return parse(format_text(text))
