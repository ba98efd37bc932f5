"""WebSocket state management utilities."""

import logging

from fastapi import WebSocket, WebSocketDisconnect

from slogi.server.protocol import (
    ErrorMessage,
    ErrorPayload,
    PositionInfo,
    StateMessage,
    StatePayload,
    WordInfo,
)
from slogi.server.session import SessionState  # noqa: TC001

logger = logging.getLogger(__name__)


def build_state_payload(session_state: SessionState) -> StatePayload:
    """Build protocol payload from session state.

    Parameters
    ----------
    session_state : SessionState
        The session state to convert

    Returns
    -------
    StatePayload
        Protocol message payload ready for broadcast

    """
    navigator = session_state.navigator
    position = navigator.position
    word = navigator.current_word()
    syllable = navigator.current_syllable()

    return StatePayload(
        text=session_state.text,
        words=[WordInfo.model_validate(w) for w in session_state.processed_text],
        position=PositionInfo.model_validate(position) if position else None,
        current_word_id=word.id if word else None,
        current_syllable_id=syllable.id if syllable else None,
    )


async def broadcast_state(session_state: SessionState, clients: set[WebSocket]) -> None:
    """Send current session state to one or more clients.

    Parameters
    ----------
    session_state : SessionState
        The session state to send
    clients : set[WebSocket]
        Connected clients to send to

    """
    payload = build_state_payload(session_state)
    message = StateMessage(type="state", payload=payload)
    message_dict = message.model_dump(mode="json")

    for client in list(clients):
        try:
            await client.send_json(message_dict)
        except (WebSocketDisconnect, RuntimeError) as e:
            logger.warning("Failed to send state: %s", e)


async def send_error(websocket: WebSocket, text: str) -> None:
    """Send an error message to a single client.

    Parameters
    ----------
    websocket : WebSocket
        The client's WebSocket connection
    text : str
        Human-readable error description

    """
    message = ErrorMessage(type="error", payload=ErrorPayload(message=text))
    try:
        await websocket.send_json(message.model_dump(mode="json"))
    except (WebSocketDisconnect, RuntimeError) as e:
        logger.warning("Failed to send error: %s", e)
