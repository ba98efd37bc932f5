"""Syllable-by-syllable navigation over a processed text."""

from slogi.models import CurrentPosition, ProcessedText, Syllable, Word


class Navigator:
    """Cursor that walks the syllables of a processed text in reading order.

    The cursor starts at the first syllable of the first word. ``next()`` and
    ``previous()`` stop at the last and first syllable respectively. An empty
    text has no position and both current-item queries return None.

    Parameters
    ----------
    processed_text : ProcessedText
        Words to navigate; a new Navigator is needed whenever the text changes

    """

    def __init__(self, processed_text: ProcessedText) -> None:
        self._words = processed_text
        self._position: CurrentPosition | None = (
            CurrentPosition(word_index=0, syllable_index=0) if processed_text else None
        )

    @property
    def processed_text(self) -> ProcessedText:
        """The text being navigated."""
        return self._words

    @property
    def position(self) -> CurrentPosition | None:
        """Current cursor, or None if the text is empty."""
        return self._position

    @property
    def total_syllables(self) -> int:
        """Number of syllables across all words."""
        return sum(len(word.syllables) for word in self._words)

    @property
    def at_start(self) -> bool:
        """True if there is no previous syllable."""
        return self._position is None or self._position == CurrentPosition(0, 0)

    @property
    def at_end(self) -> bool:
        """True if there is no next syllable."""
        if self._position is None:
            return True
        last_word_index = len(self._words) - 1
        return self._position == CurrentPosition(
            last_word_index, len(self._words[last_word_index].syllables) - 1
        )

    def next(self) -> bool:
        """Move to the next syllable, crossing into the next word if needed.

        Returns
        -------
        bool
            True if the position changed, False at the last syllable

        """
        if self._position is None or self.at_end:
            return False

        word_index, syllable_index = (
            self._position.word_index,
            self._position.syllable_index,
        )
        if syllable_index < len(self._words[word_index].syllables) - 1:
            self._position = CurrentPosition(word_index, syllable_index + 1)
        else:
            self._position = CurrentPosition(word_index + 1, 0)
        return True

    def previous(self) -> bool:
        """Move to the previous syllable, crossing into the previous word if needed.

        Returns
        -------
        bool
            True if the position changed, False at the first syllable

        """
        if self._position is None or self.at_start:
            return False

        word_index, syllable_index = (
            self._position.word_index,
            self._position.syllable_index,
        )
        if syllable_index > 0:
            self._position = CurrentPosition(word_index, syllable_index - 1)
        else:
            previous_word = self._words[word_index - 1]
            self._position = CurrentPosition(
                word_index - 1, len(previous_word.syllables) - 1
            )
        return True

    def current_word(self) -> Word | None:
        """Word under the cursor, or None if the position is invalid."""
        if self._position is None:
            return None
        if not 0 <= self._position.word_index < len(self._words):
            return None
        return self._words[self._position.word_index]

    def current_syllable(self) -> Syllable | None:
        """Syllable under the cursor, or None if the position is invalid."""
        word = self.current_word()
        if word is None or self._position is None:
            return None
        if not 0 <= self._position.syllable_index < len(word.syllables):
            return None
        return word.syllables[self._position.syllable_index]
