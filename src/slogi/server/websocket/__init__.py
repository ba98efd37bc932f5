"""WebSocket state broadcasting and message handling."""
