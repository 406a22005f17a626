"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for export folder scanning and next-version filename resolution.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Callable, Union
import os
from enum import Enum


# =============================
# Constants
# =============================

MEDIA_EXTENSIONS = (".mp4", ".mov", ".avi", ".mkv", ".mxf")
PRORES_PROFILES = ("prores422", "prores444")
DEFAULT_PROFILE = "10mbps"
DEFAULT_PROJECT_LABEL = "导出"
GRADED_MARKER = "_已调色"
UHD_LONG_EDGE = 3840


# =============================
# Enums
# =============================

class VersionNotation(Enum):
    """
    Notation a version marker was written in.
    LATIN is "V3", ORDINAL is "第三版".
    """
    NONE = "none"
    LATIN = "latin"
    ORDINAL = "ordinal"

    def __repr__(self) -> str:
        return self.value


class EncodingProfile(str, Enum):
    """
    Known export profiles. Profiles are an open vocabulary: any other
    identifier is still accepted as a plain string and exported as .mp4.
    """
    H264_10MBPS = "10mbps"
    H264_48MBPS = "48mbps"
    PRORES_422 = "prores422"
    PRORES_444 = "prores444"

    @property
    def display_name(self) -> str:
        """Human-readable preset name for UI display."""
        mapping = {
            EncodingProfile.H264_10MBPS: "H.264 匹配帧 10Mbps (1080p)",
            EncodingProfile.H264_48MBPS: "H.264 匹配帧 48Mbps (4K+)",
            EncodingProfile.PRORES_422: "ProRes 422 (数字中间片)",
            EncodingProfile.PRORES_444: "ProRes 444 (带通道)",
        }
        return mapping.get(self, self.value)

    @property
    def is_prores(self) -> bool:
        return self.value in PRORES_PROFILES

    @property
    def container_extension(self) -> str:
        return container_extension(self.value)

    @classmethod
    def for_resolution(cls, width: int, height: int) -> "EncodingProfile":
        """
        Recommend an H.264 profile from the sequence frame size.
        The long edge decides: 4K and above gets 48 Mbps, everything else 10 Mbps.
        """
        if not width or not height or width <= 0 or height <= 0:
            raise ValueError(f"Invalid resolution: {width}x{height}")
        if max(width, height) >= UHD_LONG_EDGE:
            return cls.H264_48MBPS
        return cls.H264_10MBPS

    def __str__(self) -> str:
        return self.value


def container_extension(profile: str) -> str:
    """ProRes profiles go into a .mov container, everything else into .mp4."""
    return ".mov" if str(profile) in PRORES_PROFILES else ".mp4"


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileEntry:
    """
    A filesystem object seen during a scan.
    Doubles as the local directory handle: `entries()` lists immediate children.
    """
    path: str
    name: Optional[str] = None
    is_dir: bool = False
    is_file: bool = True
    is_symlink: bool = False

    def __post_init__(self):
        if self.name is None:
            object.__setattr__(self, "name", os.path.basename(os.path.normpath(self.path)))

    @property
    def extension(self) -> str:
        _, ext = os.path.splitext(self.name)
        return ext.lower()

    @classmethod
    def from_path(cls, path: Union[str, "os.PathLike[str]"]) -> "FileEntry":
        path = os.fspath(path)
        return cls(
            path=path,
            is_dir=os.path.isdir(path),
            is_file=os.path.isfile(path),
            is_symlink=os.path.islink(path),
        )

    def entries(self) -> List["FileEntry"]:
        """List immediate children. Raises OSError if the directory cannot be read."""
        with os.scandir(self.path) as it:
            return [
                FileEntry(
                    path=entry.path,
                    name=entry.name,
                    is_dir=entry.is_dir(follow_symlinks=False),
                    is_file=entry.is_file(),
                    is_symlink=entry.is_symlink(),
                )
                for entry in it
            ]

    def __repr__(self):
        kind = "dir" if self.is_dir else "file"
        return f"<FileEntry {kind} path={self.path}>"


@dataclass(frozen=True)
class VersionInfo:
    """Version marker found in a single filename."""
    found: bool = False
    number: int = 0
    notation: VersionNotation = VersionNotation.NONE
    matched_span: Optional[str] = None

    def __post_init__(self):
        if self.number < 0:
            raise ValueError("Version number cannot be negative")


NO_VERSION = VersionInfo()


@dataclass(frozen=True)
class VersionedCandidate:
    """A scanned file paired with the version marker found in its name."""
    entry: FileEntry
    version: VersionInfo

    @property
    def number(self) -> int:
        return self.version.number


@dataclass(frozen=True)
class ResolutionResult:
    """
    Outcome of one next-filename resolution.
    Failures are reported here instead of being raised.
    """
    success: bool
    prior_filename: Optional[str] = None
    prior_version_number: int = 0
    next_version_number: int = 1
    base_name: str = ""
    final_filename: str = ""
    notation: VersionNotation = VersionNotation.LATIN
    error: Optional[str] = None

    @property
    def has_prior_version(self) -> bool:
        return self.prior_filename is not None

    @classmethod
    def failure(cls, error: str) -> "ResolutionResult":
        return cls(success=False, error=error)

    def summary(self) -> str:
        """Plain-text summary of the resolution for console display."""
        if not self.success:
            return f"Detection failed: {self.error}"

        from nextver.core.matcher import format_version

        lines = ["Version info"]
        if self.prior_filename:
            lines.append(f"Latest file: {self.prior_filename}")
            lines.append(f"Detected version: {format_version(self.prior_version_number, self.notation)}")
        else:
            lines.append("Detected version: none")
        lines.append(f"New version: {format_version(self.next_version_number, self.notation)}")
        lines.append(f"New filename: {self.final_filename}")
        return "\n".join(lines)


"""
DTO for resolution parameters with built-in validation.
Interface-agnostic — used by both the CLI and library callers.
"""

ProjectLabel = Union[str, Callable[[], str], None]


@dataclass
class ResolutionParams:
    """Parameters for one next-filename resolution."""
    export_dir: Union[str, "os.PathLike[str]", FileEntry]
    encoding_profile: str = DEFAULT_PROFILE
    override_base_name: Optional[str] = None
    project_label: ProjectLabel = None
    extensions: List[str] = field(default_factory=lambda: list(MEDIA_EXTENSIONS))

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.export_dir:
            raise ValueError("empty export directory")

        self.encoding_profile = str(self.encoding_profile or "").strip()
        if not self.encoding_profile:
            raise ValueError("Encoding profile cannot be empty")

        if self.override_base_name is not None:
            self.override_base_name = self.override_base_name.strip() or None

        # Normalize extensions: ensure they start with dot and are lowercase
        normalized = []
        for ext in self.extensions:
            ext = ext.strip().lower()
            if ext and not ext.startswith('.'):
                ext = f".{ext}"
            if ext:
                normalized.append(ext)
        if not normalized:
            raise ValueError("At least one media extension is required")
        self.extensions = normalized
