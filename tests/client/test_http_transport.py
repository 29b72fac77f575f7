"""Tests for the httpx transport.

Requests are answered by httpx.MockTransport, so no server is needed.
"""

import json
import threading

import httpx
import pytest

from flipsearch.client.exceptions import (
    NotFoundError,
    TransportConnectionError,
    TransportError,
)
from flipsearch.client.http import HTTPTransport


def make_transport(config, handler) -> HTTPTransport:
    """Create an HTTPTransport whose client is served by handler."""
    transport = HTTPTransport(config)
    transport._client = httpx.Client(transport=httpx.MockTransport(handler))
    return transport


class TestHTTPTransportInit:
    """Tests for lazy client creation."""

    def test_client_created_lazily(self, config):
        """Test no client exists before first use."""
        transport = HTTPTransport(config)
        assert transport._client is None

        client = transport.client
        assert isinstance(client, httpx.Client)
        assert transport.client is client
        transport.close()

    def test_concurrent_first_use_builds_one_client(self, config):
        """Test racing threads share a single client."""
        transport = HTTPTransport(config)
        barrier = threading.Barrier(8)
        clients = []

        def grab():
            barrier.wait()
            clients.append(transport.client)

        threads = [threading.Thread(target=grab) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(client) for client in clients}) == 1
        transport.close()

    def test_close_is_idempotent(self, config):
        """Test close can be called repeatedly."""
        transport = HTTPTransport(config)
        _ = transport.client
        transport.close()
        transport.close()
        assert transport._client is None

    def test_context_manager(self, config):
        """Test leaving the context closes the client."""
        with HTTPTransport(config) as transport:
            _ = transport.client
        assert transport._client is None


class TestHTTPTransportRequests:
    """Tests for request execution."""

    def test_get_returns_body(self, config):
        """Test GET returns the raw body text."""
        def handler(request):
            assert request.method == "GET"
            assert str(request.url) == "http://localhost:9200/"
            return httpx.Response(200, json={"version": {"number": "7.17.9"}})

        transport = make_transport(config, handler)
        assert json.loads(transport.get("http://localhost:9200/")) == {"version": {"number": "7.17.9"}}

    def test_post_sends_content_and_headers(self, config):
        """Test POST sends the raw body with given headers."""
        seen = {}

        def handler(request):
            seen["body"] = request.content.decode("utf-8")
            seen["content_type"] = request.headers["content-type"]
            seen["accept"] = request.headers["accept"]
            return httpx.Response(200, text='{"responses":[]}')

        transport = make_transport(config, handler)
        body = transport.post(
            "http://localhost:9200/_msearch",
            content='{"index":"a"}\n{}\n',
            headers={"Accept": "application/json", "Content-Type": "application/x-ndjson"},
        )

        assert body == '{"responses":[]}'
        assert seen == {
            "body": '{"index":"a"}\n{}\n',
            "content_type": "application/x-ndjson",
            "accept": "application/json",
        }

    def test_put_and_delete(self, config):
        """Test PUT and DELETE use the matching verbs."""
        methods = []

        def handler(request):
            methods.append(request.method)
            return httpx.Response(200, json={"acknowledged": True})

        transport = make_transport(config, handler)
        transport.put("http://localhost:9200/products", content="{}")
        transport.delete("http://localhost:9200/products")

        assert methods == ["PUT", "DELETE"]

    def test_head_success(self, config):
        """Test HEAD returns an empty body on success."""
        transport = make_transport(config, lambda request: httpx.Response(200))
        assert transport.head("http://localhost:9200/products") == ""


class TestHTTPTransportErrors:
    """Tests for error classification."""

    def test_404_raises_not_found(self, config):
        """Test 404 raises NotFoundError with the server reason."""
        def handler(request):
            return httpx.Response(404, json={
                "error": {"type": "index_not_found_exception", "reason": "no such index [x]"},
                "status": 404,
            })

        transport = make_transport(config, handler)
        with pytest.raises(NotFoundError) as exc_info:
            transport.get("http://localhost:9200/x/_settings")
        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "no such index [x]"

    def test_head_404_without_body(self, config):
        """Test a bodiless 404 still raises NotFoundError."""
        transport = make_transport(config, lambda request: httpx.Response(404))

        with pytest.raises(NotFoundError):
            transport.head("http://localhost:9200/missing")

    def test_400_with_string_error(self, config):
        """Test a plain string error becomes the message."""
        transport = make_transport(config, lambda request: httpx.Response(400, json={"error": "bad request"}))

        with pytest.raises(TransportError) as exc_info:
            transport.post("http://localhost:9200/_aliases", content="{}")
        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "bad request"

    def test_500_with_text_body(self, config):
        """Test a non-JSON error body is kept as message."""
        transport = make_transport(config, lambda request: httpx.Response(500, text="upstream failure"))

        with pytest.raises(TransportError) as exc_info:
            transport.get("http://localhost:9200/")
        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "upstream failure"
        assert not isinstance(exc_info.value, NotFoundError)

    def test_connect_error(self, config):
        """Test connect failures raise TransportConnectionError."""
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        transport = make_transport(config, handler)
        with pytest.raises(TransportConnectionError, match="Cannot connect"):
            transport.get("http://localhost:9200/")

    @pytest.mark.parametrize("error_class", [
        httpx.ReadError,
        httpx.WriteError,
        httpx.RemoteProtocolError,
        httpx.ProxyError,
        httpx.UnsupportedProtocol,
    ])
    def test_other_network_errors(self, config, error_class):
        """Test every httpx network failure becomes a TransportError."""
        def handler(request):
            raise error_class("connection reset", request=request)

        transport = make_transport(config, handler)
        with pytest.raises(TransportError) as exc_info:
            transport.head("http://localhost:9200/products")
        assert isinstance(exc_info.value, TransportConnectionError)
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, error_class)

    def test_timeout(self, config):
        """Test timeouts raise TransportConnectionError without status."""
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        transport = make_transport(config, handler)
        with pytest.raises(TransportConnectionError, match="Request timeout") as exc_info:
            transport.head("http://localhost:9200/products")
        assert exc_info.value.status_code is None

    def test_no_retry(self, config):
        """Test a failing request is attempted once."""
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(503, json={"error": "unavailable"})

        transport = make_transport(config, handler)
        with pytest.raises(TransportError):
            transport.get("http://localhost:9200/")
        assert len(calls) == 1
