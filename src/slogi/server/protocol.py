"""WebSocket protocol message definitions."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

MAX_TEXT_LENGTH = 20_000

# Outgoing messages (server → client)


class SyllableInfo(BaseModel):
    """A syllable with its stable identifier."""

    id: str
    text: str

    model_config = ConfigDict(from_attributes=True)


class WordInfo(BaseModel):
    """A word with its display form and syllables."""

    id: str
    display_text: str
    syllables: list[SyllableInfo]

    model_config = ConfigDict(from_attributes=True)


class PositionInfo(BaseModel):
    """Cursor position within the current text."""

    word_index: int = Field(ge=0)
    syllable_index: int = Field(ge=0)

    model_config = ConfigDict(from_attributes=True)


class StatePayload(BaseModel):
    """Payload for state message."""

    text: str | None
    words: list[WordInfo]
    position: PositionInfo | None
    current_word_id: str | None
    current_syllable_id: str | None


class StateMessage(BaseModel):
    """State update message sent to clients."""

    type: Literal["state"]
    payload: StatePayload


class ErrorPayload(BaseModel):
    """Payload for error message."""

    message: str


class ErrorMessage(BaseModel):
    """Error message sent to the client whose request failed."""

    type: Literal["error"]
    payload: ErrorPayload


# Incoming messages (client → server)


class SetTextPayload(BaseModel):
    """Payload for set_text message."""

    text: str = Field(max_length=MAX_TEXT_LENGTH)


class SetTextMessage(BaseModel):
    """Syllabify a text and start reading it from the first syllable."""

    type: Literal["set_text"]
    payload: SetTextPayload


class NextSyllableMessage(BaseModel):
    """Move to the next syllable."""

    type: Literal["next_syllable"]


class PreviousSyllableMessage(BaseModel):
    """Move to the previous syllable."""

    type: Literal["previous_syllable"]


class ResetMessage(BaseModel):
    """Discard the current text and return to setup."""

    type: Literal["reset"]


# Discriminated union for incoming messages

IncomingMessage = Annotated[
    SetTextMessage | NextSyllableMessage | PreviousSyllableMessage | ResetMessage,
    Field(discriminator="type"),
]

# TypeAdapter for validating incoming messages
incoming_message_adapter = TypeAdapter(IncomingMessage)
