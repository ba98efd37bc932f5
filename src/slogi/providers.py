"""Syllabification providers turning raw text into a processed text."""

import logging
from typing import TYPE_CHECKING, Protocol

import httpx

from slogi.language import parse, process

if TYPE_CHECKING:
    from slogi.models import ProcessedText
    from slogi.settings import Settings

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "Take the following text, convert it to all uppercase, and then split each word "
    "into syllables separated by a hyphen '-'. Punctuation should be kept with its "
    "word, and words separated by newline should be kept on separate lines. For "
    "example, 'Привет, как дела?' should become 'ПРИ-ВЕТ, КАК ДЕ-ЛА?'. "
    'The text to process is: "{text}"'
)


class ProviderError(Exception):
    """Base exception for syllabification provider errors."""


class ProviderConfigurationError(ProviderError):
    """Raised when a provider cannot be built from the given settings."""


class ProviderRequestError(ProviderError):
    """Raised when the remote service cannot be reached or returns an error status."""


class ProviderResponseError(ProviderError):
    """Raised when the remote service returns no usable text."""


class SyllabificationProvider(Protocol):
    """Async callable turning raw text into a processed text."""

    async def __call__(self, text: str) -> ProcessedText: ...


async def local_provider(text: str) -> ProcessedText:
    """Syllabify text with the built-in heuristic. Never fails."""
    return process(text)


class GeminiProvider:
    """Syllabify text with the Gemini ``generateContent`` REST API.

    Parameters
    ----------
    api_key : str
        Gemini API key
    model : str
        Model name, e.g. ``gemini-2.5-flash``
    base_url : str
        API base URL up to and including the version segment
    timeout_seconds : float
        Timeout for the whole request
    transport : httpx.AsyncBaseTransport | None
        Optional transport, used to stub the service in tests

    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.model = model
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._transport = transport

    async def __call__(self, text: str) -> ProcessedText:
        """Send text to the model and parse the hyphenated answer.

        Raises
        ------
        ProviderRequestError
            If the request fails or the service responds with an error status.
        ProviderResponseError
            If the response carries no text.
        """
        body = {"contents": [{"parts": [{"text": PROMPT_TEMPLATE.format(text=text)}]}]}
        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self._timeout
            ) as client:
                response = await client.post(
                    f"{self._base_url}/models/{self.model}:generateContent",
                    headers={"x-goog-api-key": self._api_key},
                    json=body,
                )
                response.raise_for_status()
        except httpx.HTTPError as e:
            msg = f"Could not reach syllabification service: {e}"
            raise ProviderRequestError(msg) from e

        try:
            parts = response.json()["candidates"][0]["content"]["parts"]
            answer = "".join(part.get("text", "") for part in parts).strip()
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            msg = "Unexpected response from syllabification service"
            raise ProviderResponseError(msg) from e

        if not answer and text.strip():
            msg = "Syllabification service returned an empty answer"
            raise ProviderResponseError(msg)

        logger.debug("Gemini answered with %d characters", len(answer))
        return parse(answer)


def build_provider(settings: Settings) -> SyllabificationProvider:
    """Build the provider selected in settings.

    Raises
    ------
    ProviderConfigurationError
        If the Gemini provider is selected without an API key.
    """
    if settings.provider == "gemini":
        if settings.gemini_api_key is None:
            msg = "SLOGI_GEMINI_API_KEY must be set to use the gemini provider"
            raise ProviderConfigurationError(msg)
        logger.info("Using Gemini syllabification provider (%s)", settings.gemini_model)
        return GeminiProvider(
            api_key=settings.gemini_api_key.get_secret_value(),
            model=settings.gemini_model,
            base_url=settings.gemini_base_url,
            timeout_seconds=settings.provider_timeout_seconds,
        )

    logger.info("Using local syllabification provider")
    return local_provider
