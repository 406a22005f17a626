"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used by the version resolution engine.
Structural typing keeps the engine independent from where directory listings
and project names actually come from (local disk, a host application, test fakes).

Key Components:
---------------
- DirectoryEntry: Minimal directory/file handle the scanner walks.
- MediaScanner: Interface for collecting media files under an export folder.
- VersionResolver: Interface for turning a scan into the next export filename.
"""

from typing import Protocol, List, Optional, Callable, Iterable
from nextver.core.models import FileEntry, ResolutionParams, ResolutionResult


# ===== Interfaces =====

class DirectoryEntry(Protocol):
    """
    Handle to a filesystem object.

    Attributes:
        name: Leaf name including extension.
        path: Platform-native path string.
        is_dir / is_file: Kind discriminators.
    """
    name: str
    path: str
    is_dir: bool
    is_file: bool

    def entries(self) -> Iterable["DirectoryEntry"]:
        """List immediate children. May raise OSError."""
        ...


class MediaScanner(Protocol):
    """Interface for collecting media files below a root directory."""

    def scan(
        self,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> List[FileEntry]:
        """
        Walk the configured root and return every accepted media file.

        Args:
            stopped_flag: Function that returns True if operation should be canceled.
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            Files in listing order.
        """
        ...


class VersionResolver(Protocol):
    """Interface for the next-version filename generator."""

    def resolve(
        self,
        params: ResolutionParams,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> ResolutionResult:
        """Never raises; failures are reported through ResolutionResult.error."""
        ...
