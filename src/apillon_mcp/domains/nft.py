"""NFT tools: EVM collections, minting and collection transactions"""

from ..models.arguments import (
    BurnNftArgs,
    CreateCollectionArgs,
    GetCollectionArgs,
    ListCollectionsArgs,
    ListTransactionsArgs,
    MintNftArgs,
    TransferOwnershipArgs,
)
from ..services.apillon_client import ApillonClient
from ..services.dispatcher import DomainDispatcher, Operation

# Chain name -> EVM chain id
EVM_CHAINS = {
    "MOONBEAM": 1284,
    "MOONBASE": 1287,
    "ASTAR": 592,
}


def build_nft_domain(client: ApillonClient) -> DomainDispatcher:
    async def list_collections(args: ListCollectionsArgs):
        return await client.list_collections(limit=args.limit, page=args.page)

    async def get_collection(args: GetCollectionArgs):
        return await client.get_collection(args.uuid)

    async def create_collection(args: CreateCollectionArgs):
        payload = args.model_dump(exclude_none=True)
        payload["chain"] = EVM_CHAINS[args.chain]
        return await client.create_collection(payload)

    async def mint_nft(args: MintNftArgs):
        return await client.mint(args.collectionUuid, quantity=args.quantity, token_id=args.tokenId)

    async def burn_nft(args: BurnNftArgs):
        return await client.burn(args.collectionUuid, args.tokenId)

    async def transfer_ownership(args: TransferOwnershipArgs):
        return await client.transfer_ownership(args.collectionUuid, args.address)

    async def list_transactions(args: ListTransactionsArgs):
        return await client.list_transactions(args.collectionUuid, limit=args.limit, page=args.page)

    return DomainDispatcher("nft", [
        Operation(
            name="list_collections",
            description=(
                "List all NFT collections in your Apillon account. "
                "Returns a list of collections with their details including UUID, name, and symbol."
            ),
            contract=ListCollectionsArgs,
            call=list_collections,
            failure_prefix="Failed to list collections",
        ),
        Operation(
            name="get_collection",
            description=(
                "Get details of a specific NFT collection by its UUID. "
                "Returns detailed information about the collection including contract address and status."
            ),
            contract=GetCollectionArgs,
            call=get_collection,
            failure_prefix="Failed to get collection",
        ),
        Operation(
            name="create_collection",
            description=(
                "Create a new EVM NFT collection in your Apillon account. "
                "Deploys a new smart contract for the collection."
            ),
            contract=CreateCollectionArgs,
            call=create_collection,
            failure_prefix="Failed to create collection",
        ),
        Operation(
            name="mint_nft",
            description=(
                "Mint new NFTs in a specific collection. "
                "Optionally specify a token ID if the collection is not auto-increment."
            ),
            contract=MintNftArgs,
            call=mint_nft,
            failure_prefix="Failed to mint NFT",
        ),
        Operation(
            name="burn_nft",
            description=(
                "Burn an NFT in a specific collection. "
                "Only works if the collection is revokable."
            ),
            contract=BurnNftArgs,
            call=burn_nft,
            failure_prefix="Failed to burn NFT",
        ),
        Operation(
            name="transfer_ownership",
            description=(
                "Transfer ownership of a collection to another address. "
                "Once transferred, you cannot call mint methods anymore."
            ),
            contract=TransferOwnershipArgs,
            call=transfer_ownership,
            failure_prefix="Failed to transfer ownership",
        ),
        Operation(
            name="list_transactions",
            description=(
                "List all transactions for a specific NFT collection. "
                "Returns a list of transactions with their status and details."
            ),
            contract=ListTransactionsArgs,
            call=list_transactions,
            failure_prefix="Failed to list transactions",
        ),
    ])
