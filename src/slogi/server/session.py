"""Session state for the active reading session."""

import logging
from dataclasses import dataclass, field

from slogi.models import ProcessedText  # noqa: TC001
from slogi.navigator import Navigator

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    """In-memory state for the active reading session.

    Attributes
    ----------
    text : str | None
        Raw text submitted by the controller (None while in setup)
    navigator : Navigator
        Cursor over the processed text; replaced whenever the text changes
    submissions : int
        Number of texts submitted so far; a provider result is installed only if
        no newer text was submitted while it was being processed

    """

    text: str | None = None
    navigator: Navigator = field(default_factory=lambda: Navigator(()))
    submissions: int = 0

    @property
    def processed_text(self) -> ProcessedText:
        """Words of the current text in reading order."""
        return self.navigator.processed_text

    def begin_submission(self) -> int:
        """Register a new text submission and return its number."""
        self.submissions += 1
        return self.submissions

    def is_latest_submission(self, submission: int) -> bool:
        """True if no text was submitted after the given submission."""
        return submission == self.submissions

    def set_text(self, text: str, processed_text: ProcessedText) -> None:
        """Install a new processed text and move the cursor to its first syllable.

        Parameters
        ----------
        text : str
            The raw text the processed text was built from
        processed_text : ProcessedText
            Result of a syllabification provider

        """
        self.text = text
        self.navigator = Navigator(processed_text)
        logger.info(
            "Text updated: %d words, %d syllables",
            len(processed_text),
            self.navigator.total_syllables,
        )

    def next_syllable(self) -> bool:
        """Move to the next syllable.

        Returns
        -------
        bool
            True if the position changed

        """
        if not self.navigator.next():
            logger.debug("Cannot advance: already at last syllable")
            return False
        self._log_position()
        return True

    def previous_syllable(self) -> bool:
        """Move to the previous syllable.

        Returns
        -------
        bool
            True if the position changed

        """
        if not self.navigator.previous():
            logger.debug("Cannot go back: already at first syllable")
            return False
        self._log_position()
        return True

    def _log_position(self) -> None:
        position = self.navigator.position
        if position is not None:
            logger.info(
                "Position: word %d/%d, syllable %d",
                position.word_index + 1,
                len(self.processed_text),
                position.syllable_index + 1,
            )

    def reset(self) -> None:
        """Reset session state, discarding results of pending submissions."""
        self.text = None
        self.navigator = Navigator(())
        self.submissions += 1
