"""
JSONP request-with-timeout primitive.

A JSONP endpoint wraps its JSON payload in a call to a caller-chosen
function name: ``callback_name({...});``. Each request gets a fresh
correlation token used as that name, and the response is accepted only if
it invokes exactly that token, so concurrent requests cannot be confused
and no shared callback registry exists.

Guarantees:
- resolves or raises exactly once
- raises JsonpError on HTTP errors, malformed bodies, a foreign callback
  name, or when no response arrives within the timeout
- the streamed response is released on every exit path
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
import secrets
from typing import TYPE_CHECKING, Any

import httpx

from searchdocs.shared.exceptions import JsonpError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_JSONP_TIMEOUT = 10.0
CALLBACK_PREFIX = "jsonp_callback_"


def new_callback_token() -> str:
    """Per-call correlation token, e.g. ``jsonp_callback_1f3a9c2e``."""
    return f"{CALLBACK_PREFIX}{secrets.token_hex(4)}"


def with_callback(url: str, token: str) -> str:
    """Append ``callback=<token>`` to *url*."""
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}callback={token}"


def unwrap_jsonp(body: str, token: str, *, source: str | None = None) -> Any:
    """
    Extract the JSON argument of ``token(...)`` from a JSONP body.

    Accepts an optional trailing semicolon and the ``/**/`` prefix some
    servers emit.

    Raises:
        JsonpError: Body does not call *token* or the argument is not JSON
    """
    pattern = rf"\s*(?:/\*\*/\s*)?{re.escape(token)}\s*\((.*)\)\s*;?\s*"
    match = re.fullmatch(pattern, body, flags=re.DOTALL)
    if match is None:
        raise JsonpError("JSONP response did not invoke the expected callback", source=source)
    try:
        return json.loads(match.group(1))
    except json.JSONDecodeError as e:
        raise JsonpError(f"JSONP callback argument is not JSON: {e}", source=source) from e


async def jsonp_request(
    client: httpx.AsyncClient,
    url: str,
    *,
    timeout: float = DEFAULT_JSONP_TIMEOUT,
    source: str | None = None,
    token_factory: Callable[[], str] = new_callback_token,
) -> Any:
    """
    Fetch *url* as JSONP and return the decoded payload.

    Args:
        client: httpx client used for the request
        url: Target URL without a callback parameter
        timeout: Seconds to wait for the callback before rejecting
        source: Source name for error messages
        token_factory: Produces the correlation token (tests pass a fixed one)

    Raises:
        JsonpError: On load error, malformed response or timeout
    """
    token = token_factory()
    request_url = with_callback(url, token)
    logger.debug(f"JSONP request {token}: {url}")

    try:
        async with asyncio.timeout(timeout):
            async with client.stream("GET", request_url) as response:
                if response.status_code >= 400:
                    raise JsonpError(f"JSONP request failed (HTTP {response.status_code})", source=source)
                raw = await response.aread()
                body = raw.decode(response.encoding or "utf-8", errors="replace")
    except TimeoutError as e:
        raise JsonpError("JSONP request timeout", source=source) from e
    except httpx.HTTPError as e:
        raise JsonpError(f"JSONP request failed: {e}", source=source) from e

    return unwrap_jsonp(body, token, source=source)
