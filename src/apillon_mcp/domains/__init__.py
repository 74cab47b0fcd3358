# Capability domains exposed as MCP tools

from ..services.apillon_client import ApillonClient
from ..services.dispatcher import DomainDispatcher
from .hosting import build_hosting_domain
from .nft import build_nft_domain
from .storage import build_storage_domain


def build_domains(client: ApillonClient) -> list[DomainDispatcher]:
    """Every domain, in the order the router checks them."""
    return [
        build_storage_domain(client),
        build_hosting_domain(client),
        build_nft_domain(client),
    ]


__all__ = [
    "build_domains",
    "build_hosting_domain",
    "build_nft_domain",
    "build_storage_domain",
]
