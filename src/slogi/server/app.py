"""FastAPI application with WebSocket endpoint."""

import logging
from dataclasses import dataclass, field

from fastapi import FastAPI, Query, WebSocket, WebSocketDisconnect

from slogi.providers import SyllabificationProvider, build_provider, local_provider
from slogi.server.routers import texts_router
from slogi.server.session import SessionState
from slogi.server.websocket.handlers import handle_message
from slogi.server.websocket.state import broadcast_state
from slogi.settings import settings

logger = logging.getLogger(__name__)


@dataclass
class AppStateContext:
    """Server state that persists across WebSocket connections."""

    session: SessionState = field(default_factory=SessionState)
    clients: set[WebSocket] = field(default_factory=set)
    provider: SyllabificationProvider = local_provider


def create_app(provider: SyllabificationProvider | None = None) -> FastAPI:
    """Create the application with the given syllabification provider.

    Parameters
    ----------
    provider : SyllabificationProvider | None
        Provider used for incoming texts. If None, the provider selected in settings
        is built.

    Returns
    -------
    FastAPI
        The configured application

    """
    application = FastAPI(title="Slogi")
    application.state.context = AppStateContext(
        provider=provider if provider is not None else build_provider(settings)
    )
    application.include_router(texts_router)
    application.add_api_route("/health", health, methods=["GET"])
    application.add_api_websocket_route("/ws", websocket_endpoint)
    return application


async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


async def websocket_endpoint(
    websocket: WebSocket,
    role: str = Query(..., description="Client role: 'controller' or 'display'"),
) -> None:
    """WebSocket endpoint for controller and display clients.

    Parameters
    ----------
    websocket : WebSocket
        The WebSocket connection
    role : str
        Client role: 'controller' or 'display'

    """
    await websocket.accept()
    context = websocket.app.state.context

    if role not in ("controller", "display"):
        logger.warning("Unknown role: %s", role)
        await websocket.close()
        return

    context.clients.add(websocket)
    logger.info(
        "%s connected; total clients: %d", role.capitalize(), len(context.clients)
    )

    # Send current state to newly connected client
    await broadcast_state(context.session, {websocket})

    try:
        while True:
            data = await websocket.receive_json()
            logger.info("Received from %s: %s", role, data)
            await handle_message(websocket, data)

    except WebSocketDisconnect:
        logger.info("%s disconnected", role.capitalize())
    except (RuntimeError, ValueError) as e:
        logger.info("%s disconnected: %s", role.capitalize(), e)
    finally:
        context.clients.discard(websocket)
        logger.info("Client disconnected; total clients: %d", len(context.clients))


app = create_app()
