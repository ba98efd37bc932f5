"""Reading server: REST endpoints and the WebSocket session."""
