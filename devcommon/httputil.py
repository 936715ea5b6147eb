"""HTTP GET with retries until a deadline."""

from __future__ import annotations

import http.client
import time
import urllib.error
import urllib.request

_RETRY_DELAY = 0.5


def try_get(url: str, timeout_ms: int):
    """GET ``url``, retrying every half second until it connects or ``timeout_ms`` passes.

    Any answer from the server, error statuses included, is returned as the
    response. Raises TimeoutError once the time is up.
    """
    start = time.monotonic()
    while True:
        try:
            return urllib.request.urlopen(url)
        except urllib.error.HTTPError as response:
            return response
        except (OSError, http.client.HTTPException):
            pass
        elapsed_ms = (time.monotonic() - start) * 1000
        if elapsed_ms > timeout_ms:
            raise TimeoutError("timeout get:" + url)
        time.sleep(_RETRY_DELAY)