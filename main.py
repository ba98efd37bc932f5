"""Entry point for running the Slogi server."""

import logging
import logging.config
import sys

import uvicorn

from slogi.providers import ProviderConfigurationError, build_provider
from slogi.settings import settings

LOG_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "uvicorn": {"handlers": ["default"], "level": "INFO"},
        "uvicorn.error": {"level": "INFO"},
        "uvicorn.access": {
            "handlers": ["default"],
            "level": "INFO",
            "propagate": False,
        },
        "slogi": {"handlers": ["default"], "level": "INFO"},
    },
}

logger = logging.getLogger("slogi.main")


def main() -> None:
    """Check the provider configuration, then run the FastAPI server with uvicorn."""
    logging.config.dictConfig(LOG_CONFIG)
    try:
        build_provider(settings)
    except ProviderConfigurationError as e:
        logger.error("Invalid configuration: %s", e)  # noqa: TRY400
        sys.exit(1)

    ssl_options = {}
    if settings.ssl_enabled:
        ssl_options = {
            "ssl_certfile": settings.ssl_certfile,
            "ssl_keyfile": settings.ssl_keyfile,
        }
    else:
        logger.warning("No certificates in %s, serving plain HTTP", settings.cert_dir)

    uvicorn.run(
        "slogi.server.app:app",
        host="0.0.0.0",  # noqa: S104
        port=settings.port,
        reload=settings.reload,
        ws_ping_timeout=settings.ws_ping_timeout_seconds,
        log_config=LOG_CONFIG,
        **ssl_options,
    )


if __name__ == "__main__":
    main()
