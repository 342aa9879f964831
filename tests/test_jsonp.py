"""Tests for the JSONP request primitive."""

import asyncio

import httpx
import pytest

from searchdocs.infrastructure.sources.jsonp import (
    CALLBACK_PREFIX,
    jsonp_request,
    new_callback_token,
    unwrap_jsonp,
    with_callback,
)
from searchdocs.shared.exceptions import JsonpError

TOKEN = "jsonp_callback_deadbeef"


def _client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestTokens:
    def test_token_format(self):
        token = new_callback_token()
        assert token.startswith(CALLBACK_PREFIX)
        assert len(token) == len(CALLBACK_PREFIX) + 8

    def test_tokens_are_unique(self):
        assert len({new_callback_token() for _ in range(50)}) == 50

    def test_with_callback(self):
        assert with_callback("https://a/?q=1", "cb") == "https://a/?q=1&callback=cb"
        assert with_callback("https://a/", "cb") == "https://a/?callback=cb"


class TestUnwrap:
    def test_plain(self):
        assert unwrap_jsonp(f'{TOKEN}({{"a": 1}});', TOKEN) == {"a": 1}

    def test_comment_prefix_and_whitespace(self):
        assert unwrap_jsonp(f'/**/ {TOKEN}( {{"a": [1, 2]}} )\n', TOKEN) == {"a": [1, 2]}

    def test_wrong_callback(self):
        with pytest.raises(JsonpError):
            unwrap_jsonp('other_cb({"a": 1})', TOKEN)

    def test_malformed_json(self):
        with pytest.raises(JsonpError):
            unwrap_jsonp(f"{TOKEN}({{not json}})", TOKEN)


class TestJsonpRequest:
    @pytest.mark.asyncio
    async def test_success(self):
        seen = []

        def handler(request):
            seen.append(request.url.params["callback"])
            return httpx.Response(200, text=f'{TOKEN}({{"Abstract": "x"}});')

        async with _client(handler) as client:
            data = await jsonp_request(client, "https://api.example/?q=1", token_factory=lambda: TOKEN)

        assert data == {"Abstract": "x"}
        assert seen == [TOKEN]

    @pytest.mark.asyncio
    async def test_http_error_rejects(self):
        async with _client(lambda request: httpx.Response(500)) as client:
            with pytest.raises(JsonpError, match="HTTP 500"):
                await jsonp_request(client, "https://api.example/", token_factory=lambda: TOKEN)

    @pytest.mark.asyncio
    async def test_network_error_rejects(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        async with _client(handler) as client:
            with pytest.raises(JsonpError, match="JSONP request failed"):
                await jsonp_request(client, "https://api.example/", token_factory=lambda: TOKEN)

    @pytest.mark.asyncio
    async def test_timeout_rejects(self):
        async def handler(request):
            await asyncio.sleep(1.0)
            return httpx.Response(200, text=f"{TOKEN}({{}})")

        async with _client(handler) as client:
            with pytest.raises(JsonpError, match="JSONP request timeout"):
                await jsonp_request(client, "https://api.example/", timeout=0.05, token_factory=lambda: TOKEN)

    @pytest.mark.asyncio
    async def test_foreign_callback_rejects(self):
        async with _client(lambda request: httpx.Response(200, text='jsonp_callback_other({"a": 1})')) as client:
            with pytest.raises(JsonpError):
                await jsonp_request(client, "https://api.example/", token_factory=lambda: TOKEN)

    @pytest.mark.asyncio
    async def test_source_name_in_error(self):
        async with _client(lambda request: httpx.Response(404)) as client:
            with pytest.raises(JsonpError, match="^DuckDuckGo: "):
                await jsonp_request(client, "https://api.example/", source="DuckDuckGo", token_factory=lambda: TOKEN)
