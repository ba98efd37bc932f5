"""Pytest configuration for integration tests."""

import pytest

from slogi.providers import ProviderRequestError, local_provider
from slogi.server.app import app


@pytest.fixture(autouse=True)
def reset_app_state():
    """Reset app state before and after each test.

    Ensures each test starts with no text, no clients and the local provider.
    """
    context = app.state.context
    context.session.reset()
    context.clients.clear()
    context.provider = local_provider

    yield

    context.session.reset()
    context.clients.clear()
    context.provider = local_provider


@pytest.fixture
def failing_provider():
    """Install a provider that always fails, as an unreachable remote service would."""

    async def provider(_text):
        msg = "service unavailable"
        raise ProviderRequestError(msg)

    app.state.context.provider = provider
    return provider
