"""Docker healthcheck script for the Slogi server.

Checks that the server answers on /health and that the syllabifier still splits a
known word.
"""

import http
import json
import os
import ssl
import sys
import urllib.error
import urllib.request

from slogi.settings import Settings

HEALTH_CHECK_TIMEOUT = 3
BASE_URL = os.environ.get("SLOGI_HEALTHCHECK_URL") or Settings().local_url
PROBE_TEXT = "мама"
PROBE_EXPECTED = "МА-МА"


def _request(path: str, context: ssl.SSLContext, body: dict | None = None) -> dict:
    data = json.dumps(body).encode() if body is not None else None
    request = urllib.request.Request(  # noqa: S310
        f"{BASE_URL}{path}",
        data=data,
        headers={"Content-Type": "application/json"},
    )
    with urllib.request.urlopen(  # noqa: S310
        request, timeout=HEALTH_CHECK_TIMEOUT, context=context
    ) as response:
        if response.status != http.HTTPStatus.OK:
            sys.exit(1)
        return json.load(response)


def main() -> None:
    """Exit non-zero unless the server is up and formats the probe word correctly."""
    ssl_context = ssl.create_default_context()
    ssl_context.check_hostname = False
    ssl_context.verify_mode = ssl.CERT_NONE

    try:
        _request("/health", ssl_context)
        formatted = _request("/api/texts/format", ssl_context, {"text": PROBE_TEXT})
    except OSError, urllib.error.URLError, ValueError:
        sys.exit(1)

    if formatted.get("text") != PROBE_EXPECTED:
        sys.exit(1)


if __name__ == "__main__":
    main()
