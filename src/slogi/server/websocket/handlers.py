"""WebSocket message handlers."""

import logging

from fastapi import WebSocket  # noqa: TC002
from pydantic import ValidationError

from slogi.providers import ProviderError, SyllabificationProvider  # noqa: TC001
from slogi.server.protocol import incoming_message_adapter
from slogi.server.session import SessionState  # noqa: TC001
from slogi.server.websocket.state import broadcast_state, send_error

logger = logging.getLogger(__name__)


async def handle_message(websocket: WebSocket, data: dict) -> None:
    """Handle messages from any client.

    Parameters
    ----------
    websocket : WebSocket
        The client's WebSocket connection
    data : dict
        The message data

    """
    context = websocket.app.state.context
    session_state = context.session
    clients = context.clients

    try:
        message = incoming_message_adapter.validate_python(data)
    except ValidationError as e:
        logger.warning("Invalid message format: %s", e)
        return

    if message.type == "set_text":
        await set_text(
            websocket, session_state, clients, context.provider, message.payload.text
        )
    elif message.type == "next_syllable":
        await next_syllable(session_state, clients)
    elif message.type == "previous_syllable":
        await previous_syllable(session_state, clients)
    elif message.type == "reset":
        await reset(session_state, clients)


async def set_text(
    websocket: WebSocket,
    session_state: SessionState,
    clients: set[WebSocket],
    provider: SyllabificationProvider,
    text: str,
) -> None:
    """Syllabify a text and start reading it.

    If the provider fails, the current text and position are kept and only the
    requesting client is told about the failure.

    If another text is submitted while the provider is working, only the newest
    submission is installed.

    Parameters
    ----------
    websocket : WebSocket
        The requesting client's WebSocket connection
    session_state : SessionState
        The session state
    clients : set[WebSocket]
        Connected clients to broadcast to
    provider : SyllabificationProvider
        Provider turning raw text into a processed text
    text : str
        The raw text to read

    """
    submission = session_state.begin_submission()
    try:
        processed_text = await provider(text)
    except ProviderError as e:
        logger.error("Syllabification failed: %s", e)
        await send_error(websocket, f"Could not process the text: {e}")
        return

    if not session_state.is_latest_submission(submission):
        logger.info(
            "Discarding result of submission %d: a newer text is pending", submission
        )
        return

    session_state.set_text(text, processed_text)
    await broadcast_state(session_state, clients)


async def next_syllable(session_state: SessionState, clients: set[WebSocket]) -> None:
    """Advance to the next syllable and broadcast if the position changed.

    Parameters
    ----------
    session_state : SessionState
        The session state
    clients : set[WebSocket]
        Connected clients to broadcast to

    """
    if session_state.next_syllable():
        await broadcast_state(session_state, clients)


async def previous_syllable(
    session_state: SessionState, clients: set[WebSocket]
) -> None:
    """Go back to the previous syllable and broadcast if the position changed.

    Parameters
    ----------
    session_state : SessionState
        The session state
    clients : set[WebSocket]
        Connected clients to broadcast to

    """
    if session_state.previous_syllable():
        await broadcast_state(session_state, clients)


async def reset(session_state: SessionState, clients: set[WebSocket]) -> None:
    """Discard the current text and return all clients to setup.

    Parameters
    ----------
    session_state : SessionState
        The session state
    clients : set[WebSocket]
        Connected clients to broadcast to

    """
    if session_state.text is None:
        logger.warning("No text to reset")
        return

    logger.info("Reading session reset")
    session_state.reset()
    await broadcast_state(session_state, clients)
