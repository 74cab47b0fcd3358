"""Local file loading for upload tools.

Files are read whole into memory before they are handed to the upload
session, so the size of an upload is bounded by available memory.
"""

import logging
import mimetypes
from pathlib import Path
from typing import List, Optional

import aiofiles

from .apillon_client import UploadItem

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


async def read_file(path: str) -> bytes:
    """Read a local file into memory."""
    async with aiofiles.open(path, "rb") as f:
        return await f.read()


async def load_file(
    file_path: str,
    file_name: str,
    directory_path: Optional[str] = None,
    content_type: str = DEFAULT_CONTENT_TYPE,
) -> UploadItem:
    content = await read_file(file_path)
    logger.debug(f"Loaded {file_path} ({len(content)} bytes)")
    return UploadItem(
        file_name=file_name,
        content=content,
        content_type=content_type,
        path=directory_path or None,
    )


def guess_content_type(path: Path) -> str:
    content_type, _ = mimetypes.guess_type(path.name)
    return content_type or DEFAULT_CONTENT_TYPE


async def load_folder(folder_path: str) -> List[UploadItem]:
    """Load every regular file below a folder, keeping its relative directory.

    Raises:
        FileNotFoundError: if the folder does not exist
        NotADirectoryError: if the path is not a folder
    """
    root = Path(folder_path).expanduser()
    if not root.exists():
        raise FileNotFoundError(f"Folder not found: {folder_path}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a folder: {folder_path}")

    items = []
    for path in sorted(p for p in root.rglob("*") if p.is_file()):
        relative_dir = path.parent.relative_to(root).as_posix()
        items.append(
            UploadItem(
                file_name=path.name,
                content=await read_file(str(path)),
                content_type=guess_content_type(path),
                path=None if relative_dir == "." else relative_dir,
            )
        )

    logger.debug(f"Loaded {len(items)} file(s) from {folder_path}")
    return items
