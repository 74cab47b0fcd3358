# Input contracts for every Apillon tool
# Field names follow the wire names the calling agent sends

from typing import Literal, Optional

from pydantic import Field

from .tool import ToolArguments


class PageArgs(ToolArguments):
    """Pagination shared by list operations."""

    limit: int = Field(default=10, description="Maximum number of items to return")
    page: int = Field(default=0, description="Page number")


# Storage

class CreateBucketArgs(ToolArguments):
    name: str = Field(..., description="Bucket name")
    description: Optional[str] = Field(default=None, description="Bucket description")


class ListBucketsArgs(PageArgs):
    pass


class ListObjectsArgs(PageArgs):
    bucketUuid: str = Field(..., description="UUID of the bucket")  # noqa: N815
    directoryUuid: Optional[str] = Field(  # noqa: N815
        default=None, description="Only list objects inside this directory"
    )


class UploadFileArgs(ToolArguments):
    bucketUuid: str = Field(..., description="UUID of the target bucket")  # noqa: N815
    fileName: str = Field(..., description="Name the file gets in the bucket")  # noqa: N815
    filePath: str = Field(..., description="Local path of the file to upload")  # noqa: N815
    directoryPath: Optional[str] = Field(  # noqa: N815
        default=None, description="Directory inside the bucket, bucket root when omitted"
    )


# Hosting

DeployEnvironment = Literal["staging", "production"]


class ListWebsitesArgs(PageArgs):
    pass


class GetWebsiteArgs(ToolArguments):
    uuid: str = Field(..., description="UUID of the website")


class CreateWebsiteArgs(ToolArguments):
    name: str = Field(..., description="Website name")
    bucketUuid: str = Field(..., description="UUID of the bucket backing the website")  # noqa: N815
    description: Optional[str] = Field(default=None, description="Website description")
    domain: Optional[str] = Field(default=None, description="Custom domain")


class UploadWebsiteFilesArgs(ToolArguments):
    websiteUuid: str = Field(..., description="UUID of the website")  # noqa: N815
    folderPath: str = Field(..., description="Local folder holding the website files")  # noqa: N815


class DeployWebsiteArgs(ToolArguments):
    websiteUuid: str = Field(..., description="UUID of the website")  # noqa: N815
    environment: DeployEnvironment = Field(..., description="Target environment")


class ListDeploymentsArgs(PageArgs):
    websiteUuid: str = Field(..., description="UUID of the website")  # noqa: N815


# NFT

EvmChainName = Literal["MOONBEAM", "MOONBASE", "ASTAR"]


class ListCollectionsArgs(PageArgs):
    pass


class GetCollectionArgs(ToolArguments):
    uuid: str = Field(..., description="UUID of the collection")


class CreateCollectionArgs(ToolArguments):
    name: str = Field(..., description="Collection name")
    symbol: str = Field(..., description="Collection symbol")
    description: Optional[str] = None
    isRevokable: bool = Field(..., description="Whether tokens can be burned")  # noqa: N815
    isSoulbound: bool = Field(..., description="Whether tokens are non-transferable")  # noqa: N815
    isAutoIncrement: Optional[bool] = Field(  # noqa: N815
        default=None, description="Assign token IDs automatically when minting"
    )
    chain: EvmChainName = Field(..., description="EVM chain to deploy the contract on")
    baseUri: str = Field(..., description="Base URI of the token metadata")  # noqa: N815
    maxSupply: Optional[int] = Field(default=None, description="Maximum supply, 0 for unlimited")  # noqa: N815
    royaltiesAddress: Optional[str] = None  # noqa: N815
    royaltiesFees: float = Field(..., description="Royalties fee percentage")  # noqa: N815
    drop: bool = Field(..., description="Whether the collection is sold as a drop")
    dropStart: Optional[int] = Field(default=None, description="Drop start as a UNIX timestamp")  # noqa: N815
    dropPrice: Optional[float] = Field(default=None, description="Price per token in the drop")  # noqa: N815
    dropReserve: Optional[int] = Field(default=None, description="Tokens reserved for the owner")  # noqa: N815


class MintNftArgs(ToolArguments):
    collectionUuid: str = Field(..., description="UUID of the collection")  # noqa: N815
    quantity: int = Field(default=1, ge=1, description="Number of tokens to mint")
    tokenId: Optional[int] = Field(  # noqa: N815
        default=None, description="Token ID, only for collections without auto-increment"
    )


class BurnNftArgs(ToolArguments):
    collectionUuid: str = Field(..., description="UUID of the collection")  # noqa: N815
    tokenId: str = Field(..., description="ID of the token to burn")  # noqa: N815


class TransferOwnershipArgs(ToolArguments):
    collectionUuid: str = Field(..., description="UUID of the collection")  # noqa: N815
    address: str = Field(..., description="Address of the new owner")


class ListTransactionsArgs(PageArgs):
    collectionUuid: str = Field(..., description="UUID of the collection")  # noqa: N815
