"""Async REST client for the Apillon platform.

Wraps one long-lived httpx.AsyncClient bound to the configured endpoint and
credentials. Every Apillon response is an envelope of the form
``{"id": ..., "status": ..., "data": ...}``; the methods here return ``data``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx

from ..config import Settings
from .errors import ApillonAPIError

logger = logging.getLogger(__name__)

# List endpoints only return resources in this status (active)
ACTIVE_STATUS = 5

# DeployToEnvironment on the platform
DEPLOY_TO_STAGING = 1
DEPLOY_DIRECTLY_TO_PRODUCTION = 3

GENERIC_COLLECTION_TYPE = 1
DEFAULT_BASE_EXTENSION = ".json"

USER_AGENT = "Apillon-MCP-Server/1.0.0"


@dataclass
class UploadItem:
    """A file held in memory, ready to be sent through an upload session."""
    file_name: str
    content: bytes
    content_type: str = "application/octet-stream"
    path: Optional[str] = None

    def to_metadata(self) -> Dict[str, Any]:
        metadata: Dict[str, Any] = {"fileName": self.file_name, "contentType": self.content_type}
        if self.path:
            metadata["path"] = self.path
        return metadata

    @property
    def key(self) -> tuple:
        return (self.path or "", self.file_name)


def _drop_none(values: Dict[str, Any]) -> Dict[str, Any]:
    """Absent optional values are omitted, never sent as null."""
    return {k: v for k, v in values.items() if v is not None}


def _segment(value: str) -> str:
    """Escape an identifier so it stays a single URL path segment."""
    if value in ("", ".", ".."):
        raise ValueError(f"Invalid identifier: {value!r}")
    return quote(value, safe="")


class ApillonClient:
    """Client for the Apillon storage, hosting and NFT APIs."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.client = httpx.AsyncClient(
            base_url=settings.apillon_api_url.rstrip("/"),
            auth=(settings.apillon_api_key, settings.apillon_api_secret),
            timeout=settings.request_timeout,
            headers={"User-Agent": USER_AGENT},
            transport=transport,
        )
        logger.info(f"Initialized Apillon client for {settings.apillon_api_url}")

    async def __aenter__(self) -> "ApillonClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send one request and unwrap the response envelope."""
        logger.debug(f"{method} {path}")
        try:
            response = await self.client.request(
                method,
                path,
                params=_drop_none(params) if params else None,
                json=json,
            )
        except httpx.HTTPError as e:
            raise ApillonAPIError(f"Request to {path} failed: {e}") from e

        if response.is_error:
            raise ApillonAPIError(
                f"{self._error_message(response)} (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        if not response.content:
            return None
        body = response.json()
        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase

        if isinstance(body, dict):
            if body.get("message"):
                return str(body["message"])
            errors = body.get("errors")
            if isinstance(errors, list) and errors:
                return "; ".join(str(err.get("message", err)) if isinstance(err, dict) else str(err) for err in errors)
        return response.text or response.reason_phrase

    async def _upload(self, prefix: str, items: List[UploadItem]) -> Dict[str, Any]:
        """Run a three-phase upload session: announce, PUT content, close.

        Args:
            prefix: resource path owning the session, e.g. /storage/buckets/<uuid>
            items: files to upload, fully loaded in memory
        """
        session = await self._request(
            "POST", f"{prefix}/upload", json={"files": [item.to_metadata() for item in items]}
        )
        session_uuid = session["sessionUuid"]
        by_key = {item.key: item for item in items}

        uploaded = []
        sent = set()
        for remote_file in session.get("files", []):
            item = by_key.get((remote_file.get("path") or "", remote_file.get("fileName")))
            if item is None:
                raise ApillonAPIError(
                    f"Upload session returned an unknown file: {remote_file.get('fileName')}"
                )
            try:
                put = await self.client.put(
                    remote_file["url"],
                    content=item.content,
                    headers={"Content-Type": item.content_type},
                    auth=None,
                )
            except httpx.HTTPError as e:
                raise ApillonAPIError(f"Uploading {item.file_name} failed: {e}") from e
            if put.is_error:
                raise ApillonAPIError(
                    f"Uploading {item.file_name} failed (HTTP {put.status_code})",
                    status_code=put.status_code,
                )
            sent.add(item.key)
            uploaded.append({k: v for k, v in remote_file.items() if k != "url"})

        missing = [key for key in by_key if key not in sent]
        if missing:
            names = ", ".join("/".join(filter(None, key)) for key in missing)
            raise ApillonAPIError(f"Upload session did not accept file(s): {names}")

        await self._request("POST", f"{prefix}/upload/{session_uuid}/end")
        logger.info(f"Uploaded {len(uploaded)} file(s) to {prefix} in session {session_uuid}")
        return {"sessionUuid": session_uuid, "files": uploaded}

    # Storage

    async def create_bucket(self, name: str, description: Optional[str] = None) -> Any:
        return await self._request(
            "POST", "/storage/buckets", json=_drop_none({"name": name, "description": description})
        )

    async def list_buckets(self, limit: int, page: int) -> Any:
        return await self._request(
            "GET", "/storage/buckets", params={"limit": limit, "page": page, "status": ACTIVE_STATUS}
        )

    async def list_objects(
        self, bucket_uuid: str, limit: int, page: int, directory_uuid: Optional[str] = None
    ) -> Any:
        return await self._request(
            "GET",
            f"/storage/buckets/{_segment(bucket_uuid)}/content",
            params={"directoryUuid": directory_uuid, "limit": limit, "page": page},
        )

    async def upload_files(self, bucket_uuid: str, items: List[UploadItem]) -> Dict[str, Any]:
        return await self._upload(f"/storage/buckets/{_segment(bucket_uuid)}", items)

    # Hosting

    async def list_websites(self, limit: int, page: int) -> Any:
        return await self._request(
            "GET", "/hosting/websites", params={"limit": limit, "page": page, "status": ACTIVE_STATUS}
        )

    async def get_website(self, website_uuid: str) -> Any:
        return await self._request("GET", f"/hosting/websites/{_segment(website_uuid)}")

    async def create_website(self, payload: Dict[str, Any]) -> Any:
        return await self._request("POST", "/hosting/websites", json=_drop_none(payload))

    async def upload_website_files(self, website_uuid: str, items: List[UploadItem]) -> Dict[str, Any]:
        return await self._upload(f"/hosting/websites/{_segment(website_uuid)}", items)

    async def deploy_website(self, website_uuid: str, environment: int) -> Any:
        return await self._request(
            "POST", f"/hosting/websites/{_segment(website_uuid)}/deploy", json={"environment": environment}
        )

    async def list_deployments(self, website_uuid: str, limit: int, page: int) -> Any:
        return await self._request(
            "GET",
            f"/hosting/websites/{_segment(website_uuid)}/deployments",
            params={"limit": limit, "page": page},
        )

    # NFT

    async def list_collections(self, limit: int, page: int) -> Any:
        return await self._request(
            "GET", "/nfts/collections", params={"limit": limit, "page": page, "status": ACTIVE_STATUS}
        )

    async def get_collection(self, collection_uuid: str) -> Any:
        return await self._request("GET", f"/nfts/collections/{_segment(collection_uuid)}")

    async def create_collection(self, payload: Dict[str, Any]) -> Any:
        body = {
            "collectionType": GENERIC_COLLECTION_TYPE,
            "baseExtension": DEFAULT_BASE_EXTENSION,
            **_drop_none(payload),
        }
        return await self._request("POST", "/nfts/collections/evm", json=body)

    async def mint(self, collection_uuid: str, quantity: int, token_id: Optional[int] = None) -> Any:
        body: Dict[str, Any] = {"quantity": quantity}
        if token_id is not None:
            body["idsToMint"] = [token_id]
        return await self._request("POST", f"/nfts/collections/{_segment(collection_uuid)}/mint", json=body)

    async def burn(self, collection_uuid: str, token_id: str) -> Any:
        return await self._request(
            "POST", f"/nfts/collections/{_segment(collection_uuid)}/burn", json={"tokenId": token_id}
        )

    async def transfer_ownership(self, collection_uuid: str, address: str) -> Any:
        return await self._request(
            "POST", f"/nfts/collections/{_segment(collection_uuid)}/transfer", json={"address": address}
        )

    async def list_transactions(self, collection_uuid: str, limit: int, page: int) -> Any:
        return await self._request(
            "GET",
            f"/nfts/collections/{_segment(collection_uuid)}/transactions",
            params={"limit": limit, "page": page},
        )
