"""
Core versioning engine — scanner, version matcher, normalizer, and resolver.

This package contains the whole filename policy of nextver:
- MediaScannerImpl: recursive export folder traversal with media extension filter
- extract_version / format_version: Latin ("V3") and ordinal ("第三版") version markers
- remove_date_markers / trim_symbols: label cleaning
- VersionResolverImpl: picks the latest export and derives the next filename
- Models: FileEntry, VersionInfo, ResolutionParams, ResolutionResult, and enums

All components are pure Python with no host application dependencies.
"""

from .models import (
    FileEntry, VersionInfo, VersionNotation, VersionedCandidate, EncodingProfile,
    ResolutionParams, ResolutionResult, MEDIA_EXTENSIONS, DEFAULT_PROFILE, DEFAULT_PROJECT_LABEL,
    container_extension)
from .normalizer import remove_date_markers, trim_symbols, clean_project_label
from .matcher import extract_version, format_version, strip_extension
from .scanner import MediaScannerImpl, collect_media_files
from .resolver import (
    VersionResolverImpl, resolve_next_filename, rebuild_base_name, select_latest,
    apply_grading_marker)

__all__ = [
    "FileEntry",
    "VersionInfo",
    "VersionNotation",
    "VersionedCandidate",
    "EncodingProfile",
    "ResolutionParams",
    "ResolutionResult",
    "MEDIA_EXTENSIONS",
    "DEFAULT_PROFILE",
    "DEFAULT_PROJECT_LABEL",
    "container_extension",
    "remove_date_markers",
    "trim_symbols",
    "clean_project_label",
    "extract_version",
    "format_version",
    "strip_extension",
    "MediaScannerImpl",
    "collect_media_files",
    "VersionResolverImpl",
    "resolve_next_filename",
    "rebuild_base_name",
    "select_latest",
    "apply_grading_marker",
]
