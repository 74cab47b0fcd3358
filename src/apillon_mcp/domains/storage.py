"""Storage tools: buckets, their content and file uploads"""

from ..models.arguments import CreateBucketArgs, ListBucketsArgs, ListObjectsArgs, UploadFileArgs
from ..services.apillon_client import ApillonClient
from ..services.dispatcher import DomainDispatcher, Operation
from ..services.files import load_file


def build_storage_domain(client: ApillonClient) -> DomainDispatcher:
    async def create_bucket(args: CreateBucketArgs):
        return await client.create_bucket(name=args.name, description=args.description)

    async def list_buckets(args: ListBucketsArgs):
        return await client.list_buckets(limit=args.limit, page=args.page)

    async def list_objects(args: ListObjectsArgs):
        return await client.list_objects(
            args.bucketUuid,
            limit=args.limit,
            page=args.page,
            directory_uuid=args.directoryUuid,
        )

    async def upload_file(args: UploadFileArgs):
        item = await load_file(args.filePath, args.fileName, directory_path=args.directoryPath)
        return await client.upload_files(args.bucketUuid, [item])

    return DomainDispatcher("storage", [
        Operation(
            name="create_bucket",
            description=(
                "Create a new storage bucket in your Apillon account. "
                "Returns the created bucket details including UUID, name, and creation date."
            ),
            contract=CreateBucketArgs,
            call=create_bucket,
            failure_prefix="Failed to create bucket",
        ),
        Operation(
            name="list_buckets",
            description=(
                "List all storage buckets in your Apillon account. "
                "Returns a list of buckets with their details including UUID, name, and creation date."
            ),
            contract=ListBucketsArgs,
            call=list_buckets,
            failure_prefix="Failed to list buckets",
        ),
        Operation(
            name="list_objects",
            description=(
                "List objects (files and directories) in a specific bucket. "
                "Optionally filter by directory UUID. Returns a list of objects with their details."
            ),
            contract=ListObjectsArgs,
            call=list_objects,
            failure_prefix="Failed to list objects",
        ),
        Operation(
            name="upload_file",
            description=(
                "Upload a file to a specific bucket. "
                "Optionally specify a directory path within the bucket. Returns the uploaded file details. "
                "The whole file is read into memory before upload."
            ),
            contract=UploadFileArgs,
            call=upload_file,
            failure_prefix="Failed to upload file",
        ),
    ])
