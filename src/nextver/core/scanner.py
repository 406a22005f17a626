"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Collects exported media files below an export folder.
Features:
- Works on any DirectoryEntry handle (local FileEntry by default)
- Recursive depth-first walk in listing order, no sorting
- Accepts only media extensions (.mp4 .mov .avi .mkv .mxf), case-insensitive
- Unreadable subdirectories are logged and skipped, the rest of the scan continues
- Symlinked files are collected; symlinked directories are never entered
"""

import os
import time
import logging
from typing import List, Optional, Callable, Sequence, Union

logger = logging.getLogger(__name__)

# Local imports
from nextver.core.models import FileEntry, MEDIA_EXTENSIONS
from nextver.core.interfaces import DirectoryEntry, MediaScanner


class MediaScannerImpl(MediaScanner):
    """
    Scans an export folder recursively for media files.

    Attributes:
        root: Directory handle (or path) to scan
        extensions: Allowed extensions (e.g., [".mp4", ".mov"])
    """

    def __init__(
        self,
        root: Union[str, "os.PathLike[str]", DirectoryEntry],
        extensions: Optional[Sequence[str]] = None
    ):
        self.root = root
        self.extensions = [ext.lower() for ext in (extensions or MEDIA_EXTENSIONS)]

    def scan(self,
             stopped_flag: Optional[Callable[[], bool]] = None,
             progress_callback: Optional[Callable[[str, int, object], None]] = None) -> List[FileEntry]:
        """
        Walk the root and return every accepted media file.
        The list is built fresh on every call; nothing is shared between scans.
        """
        root = self._resolve_root()
        logger.debug(f"Scanning directory: {root.path}")
        logger.debug(f"Filters: extensions={self.extensions}")

        found_files: List[FileEntry] = []
        start_time = time.time()

        self._walk(root, found_files, stopped_flag)

        if progress_callback:
            progress_callback('scanning', len(found_files), None)

        elapsed_time = time.time() - start_time
        logger.debug(f"Total scan time: {elapsed_time:.2f} seconds")
        logger.debug(f"Scan completed. Found {len(found_files)} media files.")
        return found_files

    def _resolve_root(self) -> DirectoryEntry:
        """Wrap a plain path into a FileEntry and validate it."""
        if hasattr(self.root, "entries"):
            return self.root

        path = os.fspath(self.root)
        if not os.path.exists(path):
            error_msg = f"Directory does not exist: {path}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        if not os.path.isdir(path):
            error_msg = f"Not a directory: {path}"
            logger.error(error_msg)
            raise RuntimeError(error_msg)
        return FileEntry.from_path(path)

    def _walk(self,
              folder: DirectoryEntry,
              found_files: List[FileEntry],
              stopped_flag: Optional[Callable[[], bool]] = None) -> None:
        """
        Depth-first walk that appends accepted files to `found_files`.
        A folder that cannot be listed contributes nothing; siblings are still visited.
        """
        if stopped_flag and stopped_flag():
            return

        try:
            entries = list(folder.entries())
        except Exception as e:
            logger.warning(f"Cannot read directory {folder.path}: {e}")
            return

        logger.debug(f"Found {len(entries)} entries in {folder.path}")

        for entry in entries:
            if entry.is_dir:
                if getattr(entry, "is_symlink", False):
                    logger.debug(f"Skipping symlinked directory: {entry.path}")
                    continue
                self._walk(entry, found_files, stopped_flag)
            elif entry.is_file:
                if self._extension_passes(entry.name):
                    logger.debug(f"Accepted file: {entry.name}")
                    found_files.append(entry)
                else:
                    logger.debug(f"Skipping {entry.name} (not a media file)")

    def _extension_passes(self, name: str) -> bool:
        """
        Check if a filename ends with one of the allowed extensions.
        Args:
            name: Leaf filename
        Returns:
            True if the file has one of the allowed extensions
        """
        return name.lower().endswith(tuple(self.extensions))


def collect_media_files(root: Union[str, "os.PathLike[str]", DirectoryEntry],
                        extensions: Optional[Sequence[str]] = None) -> List[FileEntry]:
    """Scan `root` and return its media files in listing order."""
    return MediaScannerImpl(root, extensions=extensions).scan()
