"""Data model for syllabified text."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Syllable:
    """A single syllable of a word.

    Attributes
    ----------
    text : str
        The syllable text as it appears in the hyphenated token
    id : str
        Identifier unique within a processed text, e.g. ``syllable-0-1``

    """

    text: str
    id: str


@dataclass(frozen=True)
class Word:
    """A word split into syllables.

    Attributes
    ----------
    id : str
        Identifier unique within a processed text, e.g. ``word-0``
    display_text : str
        The hyphenated token with punctuation attached, e.g. ``ПРИ-ВЕТ,``
    syllables : tuple[Syllable, ...]
        Syllables in reading order, never empty

    """

    id: str
    display_text: str
    syllables: tuple[Syllable, ...]


@dataclass(frozen=True)
class CurrentPosition:
    """Cursor addressing one syllable of a processed text."""

    word_index: int
    syllable_index: int


ProcessedText = tuple[Word, ...]


def syllable_id(word_index: int, syllable_index: int) -> str:
    """Build the identifier of a syllable."""
    return f"syllable-{word_index}-{syllable_index}"


def word_id(word_index: int) -> str:
    """Build the identifier of a word."""
    return f"word-{word_index}"
