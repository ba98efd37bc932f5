"""Pydantic schemas for REST API requests and responses."""

from pydantic import BaseModel, Field

from slogi.server.protocol import MAX_TEXT_LENGTH, WordInfo


class TextRequest(BaseModel):
    """Request schema carrying raw text.

    Attributes
    ----------
    text : str
        Text as typed by the user, may span several lines

    """

    text: str = Field(max_length=MAX_TEXT_LENGTH)


class FormattedTextResponse(BaseModel):
    """Response schema for a formatted text.

    Attributes
    ----------
    text : str
        Uppercased text with hyphens between syllables, whitespace preserved

    """

    text: str


class ProcessedTextResponse(BaseModel):
    """Response schema for a processed text.

    Attributes
    ----------
    words : list[WordInfo]
        Words in reading order with their syllables

    """

    words: list[WordInfo]
