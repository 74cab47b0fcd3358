"""Hosting tools: websites, their files and deployments"""

from ..models.arguments import (
    CreateWebsiteArgs,
    DeployWebsiteArgs,
    GetWebsiteArgs,
    ListDeploymentsArgs,
    ListWebsitesArgs,
    UploadWebsiteFilesArgs,
)
from ..services.apillon_client import (
    DEPLOY_DIRECTLY_TO_PRODUCTION,
    DEPLOY_TO_STAGING,
    ApillonClient,
)
from ..services.dispatcher import DomainDispatcher, Operation
from ..services.files import load_folder

# Deployment environment name -> DeployToEnvironment value
ENVIRONMENTS = {
    "staging": DEPLOY_TO_STAGING,
    "production": DEPLOY_DIRECTLY_TO_PRODUCTION,
}


def upload_summary(result: dict) -> dict:
    return {
        "success": True,
        "message": "Files uploaded successfully",
        "sessionUuid": result.get("sessionUuid"),
        "filesUploaded": len(result.get("files", [])),
    }


def build_hosting_domain(client: ApillonClient) -> DomainDispatcher:
    async def list_websites(args: ListWebsitesArgs):
        return await client.list_websites(limit=args.limit, page=args.page)

    async def get_website(args: GetWebsiteArgs):
        return await client.get_website(args.uuid)

    async def create_website(args: CreateWebsiteArgs):
        return await client.create_website(args.model_dump(exclude_none=True))

    async def upload_website_files(args: UploadWebsiteFilesArgs):
        items = await load_folder(args.folderPath)
        return await client.upload_website_files(args.websiteUuid, items)

    async def deploy_website(args: DeployWebsiteArgs):
        return await client.deploy_website(args.websiteUuid, ENVIRONMENTS[args.environment])

    async def list_deployments(args: ListDeploymentsArgs):
        return await client.list_deployments(args.websiteUuid, limit=args.limit, page=args.page)

    return DomainDispatcher("hosting", [
        Operation(
            name="list_websites",
            description=(
                "List all websites in your Apillon account. "
                "Returns a list of websites with their details including UUID, name, and domain."
            ),
            contract=ListWebsitesArgs,
            call=list_websites,
            failure_prefix="Failed to list websites",
        ),
        Operation(
            name="get_website",
            description=(
                "Get details of a specific website by its UUID. "
                "Returns detailed information about the website including deployment status."
            ),
            contract=GetWebsiteArgs,
            call=get_website,
            failure_prefix="Failed to get website",
        ),
        Operation(
            name="create_website",
            description=(
                "Create a new website in your Apillon account, backed by an existing bucket. "
                "Optionally set a description and a custom domain. Returns the created website."
            ),
            contract=CreateWebsiteArgs,
            call=create_website,
            failure_prefix="Failed to create website",
        ),
        Operation(
            name="upload_website_files",
            description=(
                "Upload website files from a local folder to a specific website. "
                "The files will be uploaded to the website's associated bucket."
            ),
            contract=UploadWebsiteFilesArgs,
            call=upload_website_files,
            failure_prefix="Failed to upload website files",
            present=upload_summary,
        ),
        Operation(
            name="deploy_website",
            description=(
                "Deploy a website to a specific environment (staging or production). "
                "Returns information about the deployment process."
            ),
            contract=DeployWebsiteArgs,
            call=deploy_website,
            failure_prefix="Failed to deploy website",
        ),
        Operation(
            name="list_deployments",
            description=(
                "List all deployments for a specific website. "
                "Returns a list of deployments with their status and details."
            ),
            contract=ListDeploymentsArgs,
            call=list_deployments,
            failure_prefix="Failed to list deployments",
        ),
    ])
