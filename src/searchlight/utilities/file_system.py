"""Async filesystem helpers for plugin temporary folders.

Blocking calls run in a worker thread so rescans never stall the event loop.
"""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from searchlight.exceptions import StorageError


async def path_exists(path: Path) -> bool:
    return await asyncio.to_thread(Path(path).exists)


async def ensure_folder(path: Path) -> None:
    """Create `path` (and missing parents) unless it already exists."""
    try:
        await asyncio.to_thread(Path(path).mkdir, parents=True, exist_ok=True)
    except OSError as err:
        raise StorageError(f"Failed to create folder '{path}': {err}") from err


async def delete_folder_recursively(path: Path) -> None:
    """Delete `path` and everything below it. A missing folder is not an error."""
    folder = Path(path)
    if not await path_exists(folder):
        return
    try:
        await asyncio.to_thread(shutil.rmtree, folder)
    except OSError as err:
        raise StorageError(f"Failed to delete folder '{path}': {err}") from err
