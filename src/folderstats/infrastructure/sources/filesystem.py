"""Text source backed by text files on local disk."""

import asyncio
from pathlib import Path
from typing import List, Union

from folderstats.domain.exceptions import FolderNotFoundError
from folderstats.shared.logging import get_logger


class FileSystemTextSource:
    """
    Resolves a folder identifier to the concatenated contents of its text files.

    The folder is looked up as `root_dir / folder_id`. Identifiers that point
    outside `root_dir` are treated as missing folders. Only files directly in
    the folder that match `pattern` are read, in name order, and joined with a
    newline.
    """

    def __init__(
        self,
        root_dir: Union[str, Path],
        pattern: str = "*.txt",
        encoding: str = "utf-8"
    ):
        self.root_dir = Path(root_dir)
        self.pattern = pattern
        self.encoding = encoding
        self._logger = get_logger(__name__)

    async def resolve(self, folder_id: str) -> str:
        """Read the folder's text files off the event loop."""
        return await asyncio.to_thread(self.read_folder, folder_id)

    def read_folder(self, folder_id: str) -> str:
        """
        Read and join all matching files of a folder.

        Raises:
            FolderNotFoundError: If the folder does not exist
        """
        folder = self.root_dir / folder_id
        if not self._is_inside_root(folder) or not folder.is_dir():
            raise FolderNotFoundError(f"The folder '{folder}' does not exist.")

        files = self._list_files(folder)
        self._logger.debug(f"Reading {len(files)} file(s) from {folder}")

        return "\n".join(path.read_text(encoding=self.encoding) for path in files)

    def _is_inside_root(self, folder: Path) -> bool:
        try:
            folder.resolve().relative_to(self.root_dir.resolve())
        except ValueError:
            return False
        return True

    def _list_files(self, folder: Path) -> List[Path]:
        return sorted(p for p in folder.glob(self.pattern) if p.is_file())
