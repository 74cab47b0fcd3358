"""Tests for the Apillon REST client"""

import json

import httpx
import pytest

from apillon_mcp.services.apillon_client import ApillonClient, UploadItem
from apillon_mcp.services.errors import ApillonAPIError


def _envelope(data, status=200):
    return httpx.Response(status, json={"id": "req-1", "status": status, "data": data})


class RecordingTransport:
    """Mock transport that records requests and answers from a route table"""

    def __init__(self, routes):
        self.routes = routes
        self.requests = []
        self.transport = httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.host, request.url.path)
        handler = self.routes.get(key)
        if handler is None:
            return httpx.Response(404, json={"message": f"No route for {key}"})
        return handler(request) if callable(handler) else handler


API_HOST = "api.test.apillon.io"


@pytest.fixture
def make_client(settings):
    def factory(routes):
        recorder = RecordingTransport(routes)
        return ApillonClient(settings, transport=recorder.transport), recorder
    return factory


class TestRequests:
    @pytest.mark.asyncio
    async def test_list_buckets(self, make_client):
        client, recorder = make_client({
            ("GET", API_HOST, "/storage/buckets"): _envelope({"items": [{"name": "docs"}], "total": 1}),
        })

        async with client:
            result = await client.list_buckets(limit=10, page=0)

        assert result == {"items": [{"name": "docs"}], "total": 1}
        request = recorder.requests[0]
        assert dict(request.url.params) == {"limit": "10", "page": "0", "status": "5"}
        assert request.headers["Authorization"].startswith("Basic ")
        assert request.headers["User-Agent"].startswith("Apillon-MCP-Server")

    @pytest.mark.asyncio
    async def test_list_objects_omits_absent_directory(self, make_client):
        client, recorder = make_client({
            ("GET", API_HOST, "/storage/buckets/b-1/content"): _envelope({"items": []}),
        })

        async with client:
            await client.list_objects("b-1", limit=10, page=0)

        assert "directoryUuid" not in recorder.requests[0].url.params

    @pytest.mark.asyncio
    async def test_create_bucket_omits_absent_description(self, make_client):
        client, recorder = make_client({
            ("POST", API_HOST, "/storage/buckets"): _envelope({"bucketUuid": "b-1", "name": "docs"}),
        })

        async with client:
            result = await client.create_bucket(name="docs")

        assert result["bucketUuid"] == "b-1"
        assert json.loads(recorder.requests[0].content) == {"name": "docs"}

    @pytest.mark.asyncio
    async def test_create_collection_adds_fixed_fields(self, make_client):
        client, recorder = make_client({
            ("POST", API_HOST, "/nfts/collections/evm"): _envelope({"collectionUuid": "c-1"}),
        })

        async with client:
            await client.create_collection({"name": "Cats", "chain": 1287, "maxSupply": None})

        body = json.loads(recorder.requests[0].content)
        assert body == {"collectionType": 1, "baseExtension": ".json", "name": "Cats", "chain": 1287}

    @pytest.mark.asyncio
    async def test_mint_with_token_id(self, make_client):
        client, recorder = make_client({
            ("POST", API_HOST, "/nfts/collections/c-1/mint"): _envelope({"success": True}),
        })

        async with client:
            await client.mint("c-1", quantity=1, token_id=42)
            await client.mint("c-1", quantity=3)

        assert json.loads(recorder.requests[0].content) == {"quantity": 1, "idsToMint": [42]}
        assert json.loads(recorder.requests[1].content) == {"quantity": 3}

    @pytest.mark.asyncio
    async def test_deploy_website(self, make_client):
        client, recorder = make_client({
            ("POST", API_HOST, "/hosting/websites/w-1/deploy"): _envelope({"deploymentUuid": "d-1"}),
        })

        async with client:
            result = await client.deploy_website("w-1", 3)

        assert result == {"deploymentUuid": "d-1"}
        assert json.loads(recorder.requests[0].content) == {"environment": 3}


class TestErrors:
    @pytest.mark.asyncio
    async def test_remote_rejection(self, make_client):
        client, _ = make_client({
            ("GET", API_HOST, "/hosting/websites/w-1"): httpx.Response(
                401, json={"id": "req-1", "status": 401, "message": "Unauthorized"}
            ),
        })

        async with client:
            with pytest.raises(ApillonAPIError) as exc_info:
                await client.get_website("w-1")

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Unauthorized (HTTP 401)"

    @pytest.mark.asyncio
    async def test_validation_errors_list(self, make_client):
        client, _ = make_client({
            ("POST", API_HOST, "/nfts/collections/c-1/transfer"): httpx.Response(
                422,
                json={"errors": [{"code": 42200001, "property": "address", "message": "ADDRESS_NOT_VALID"}]},
            ),
        })

        async with client:
            with pytest.raises(ApillonAPIError) as exc_info:
                await client.transfer_ownership("c-1", "nope")

        assert "ADDRESS_NOT_VALID" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_plain_text_error(self, make_client):
        client, _ = make_client({
            ("GET", API_HOST, "/nfts/collections"): httpx.Response(502, text="Bad Gateway"),
        })

        async with client:
            with pytest.raises(ApillonAPIError) as exc_info:
                await client.list_collections(limit=10, page=0)

        assert exc_info.value.message == "Bad Gateway (HTTP 502)"

    @pytest.mark.asyncio
    async def test_transport_failure(self, make_client):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client, _ = make_client({("GET", API_HOST, "/nfts/collections/c-1"): refuse})

        async with client:
            with pytest.raises(ApillonAPIError) as exc_info:
                await client.get_collection("c-1")

        assert "connection refused" in exc_info.value.message
        assert exc_info.value.status_code is None


class TestUploadSession:
    @pytest.mark.asyncio
    async def test_three_phase_upload(self, make_client):
        session = {
            "sessionUuid": "s-1",
            "files": [
                {"fileName": "index.html", "path": None, "url": "https://s3.test/put/1", "fileUuid": "f-1"},
                {"fileName": "style.css", "path": "css", "url": "https://s3.test/put/2", "fileUuid": "f-2"},
            ],
        }
        client, recorder = make_client({
            ("POST", API_HOST, "/hosting/websites/w-1/upload"): _envelope(session),
            ("PUT", "s3.test", "/put/1"): httpx.Response(200),
            ("PUT", "s3.test", "/put/2"): httpx.Response(200),
            ("POST", API_HOST, "/hosting/websites/w-1/upload/s-1/end"): _envelope(True),
        })
        items = [
            UploadItem(file_name="index.html", content=b"<html/>", content_type="text/html"),
            UploadItem(file_name="style.css", content=b"body{}", content_type="text/css", path="css"),
        ]

        async with client:
            result = await client.upload_website_files("w-1", items)

        assert result == {
            "sessionUuid": "s-1",
            "files": [
                {"fileName": "index.html", "path": None, "fileUuid": "f-1"},
                {"fileName": "style.css", "path": "css", "fileUuid": "f-2"},
            ],
        }
        methods = [(r.method, r.url.path) for r in recorder.requests]
        assert methods == [
            ("POST", "/hosting/websites/w-1/upload"),
            ("PUT", "/put/1"),
            ("PUT", "/put/2"),
            ("POST", "/hosting/websites/w-1/upload/s-1/end"),
        ]
        announce = json.loads(recorder.requests[0].content)
        assert announce == {"files": [
            {"fileName": "index.html", "contentType": "text/html"},
            {"fileName": "style.css", "contentType": "text/css", "path": "css"},
        ]}
        put = recorder.requests[2]
        assert put.content == b"body{}"
        assert put.headers["Content-Type"] == "text/css"
        assert "Authorization" not in put.headers

    @pytest.mark.asyncio
    async def test_failed_put_stops_session(self, make_client):
        session = {"sessionUuid": "s-1", "files": [{"fileName": "a.bin", "url": "https://s3.test/put/1"}]}
        client, recorder = make_client({
            ("POST", API_HOST, "/storage/buckets/b-1/upload"): _envelope(session),
            ("PUT", "s3.test", "/put/1"): httpx.Response(403),
        })

        async with client:
            with pytest.raises(ApillonAPIError) as exc_info:
                await client.upload_files("b-1", [UploadItem(file_name="a.bin", content=b"\x00")])

        assert exc_info.value.status_code == 403
        assert all(not r.url.path.endswith("/end") for r in recorder.requests)

    @pytest.mark.asyncio
    async def test_file_left_out_of_session_fails_before_closing(self, make_client):
        session = {"sessionUuid": "s-1", "files": [{"fileName": "a.bin", "url": "https://s3.test/put/1"}]}
        client, recorder = make_client({
            ("POST", API_HOST, "/storage/buckets/b-1/upload"): _envelope(session),
            ("PUT", "s3.test", "/put/1"): httpx.Response(200),
            ("POST", API_HOST, "/storage/buckets/b-1/upload/s-1/end"): _envelope(True),
        })
        items = [
            UploadItem(file_name="a.bin", content=b"\x00"),
            UploadItem(file_name="b.bin", content=b"\x01", path="nested"),
        ]

        async with client:
            with pytest.raises(ApillonAPIError) as exc_info:
                await client.upload_files("b-1", items)

        assert "nested/b.bin" in exc_info.value.message
        assert "a.bin" not in exc_info.value.message
        assert all(not r.url.path.endswith("/end") for r in recorder.requests)


class TestPathSegments:
    @pytest.fixture
    def catch_all(self, settings):
        requests = []

        def handle(request):
            requests.append(request)
            return _envelope({"ok": True})

        return ApillonClient(settings, transport=httpx.MockTransport(handle)), requests

    @pytest.mark.asyncio
    async def test_identifier_cannot_escape_its_segment(self, catch_all):
        client, requests = catch_all

        async with client:
            await client.get_website("x/../../../storage/buckets?status=1#")

        request = requests[0]
        assert request.url.raw_path == b"/hosting/websites/x%2F..%2F..%2F..%2Fstorage%2Fbuckets%3Fstatus%3D1%23"
        assert request.url.query == b""

    @pytest.mark.asyncio
    async def test_identifiers_escaped_in_nested_paths(self, catch_all):
        client, requests = catch_all

        async with client:
            await client.list_transactions("c 1/mint", limit=10, page=0)

        assert requests[0].url.raw_path.startswith(b"/nfts/collections/c%201%2Fmint/transactions")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("identifier", ["", ".", ".."])
    async def test_dot_segments_rejected(self, catch_all, identifier):
        client, requests = catch_all

        async with client:
            with pytest.raises(ValueError):
                await client.burn(identifier, "1")

        assert requests == []
