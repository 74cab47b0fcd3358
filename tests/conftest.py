"""
Test configuration and shared fixtures for Apillon MCP tests.
"""

import pytest
from unittest.mock import AsyncMock

from apillon_mcp.config import Settings
from apillon_mcp.domains import build_domains
from apillon_mcp.services.apillon_client import ApillonClient
from apillon_mcp.services.router import ToolRouter


@pytest.fixture
def settings():
    """Settings with fixed credentials, isolated from any local .env"""
    return Settings(
        _env_file=None,
        apillon_api_key="test-key",
        apillon_api_secret="test-secret",
        apillon_api_url="https://api.test.apillon.io",
    )


@pytest.fixture
def mock_client():
    """Substitute Apillon client; every API method is an AsyncMock"""
    return AsyncMock(spec=ApillonClient)


@pytest.fixture
def domains(mock_client):
    return build_domains(mock_client)


@pytest.fixture
def router(domains):
    return ToolRouter(domains)


# Minimal valid arguments for every tool (required fields only)
VALID_ARGUMENTS = {
    "create_bucket": {"name": "docs"},
    "list_buckets": {},
    "list_objects": {"bucketUuid": "bucket-1"},
    "upload_file": {"bucketUuid": "bucket-1", "fileName": "a.txt", "filePath": "/tmp/a.txt"},
    "list_websites": {},
    "get_website": {"uuid": "site-1"},
    "create_website": {"name": "site", "bucketUuid": "bucket-1"},
    "upload_website_files": {"websiteUuid": "site-1", "folderPath": "/tmp/site"},
    "deploy_website": {"websiteUuid": "site-1", "environment": "staging"},
    "list_deployments": {"websiteUuid": "site-1"},
    "list_collections": {},
    "get_collection": {"uuid": "col-1"},
    "create_collection": {
        "name": "Space Cats",
        "symbol": "SCAT",
        "isRevokable": False,
        "isSoulbound": False,
        "chain": "MOONBASE",
        "baseUri": "https://ipfs.example/meta/",
        "royaltiesFees": 5,
        "drop": False,
    },
    "mint_nft": {"collectionUuid": "col-1"},
    "burn_nft": {"collectionUuid": "col-1", "tokenId": "7"},
    "transfer_ownership": {"collectionUuid": "col-1", "address": "0xabc"},
    "list_transactions": {"collectionUuid": "col-1"},
}


@pytest.fixture
def valid_arguments():
    return {name: dict(args) for name, args in VALID_ARGUMENTS.items()}
