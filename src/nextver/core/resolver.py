"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/resolver.py
Derives the next export filename from what is already in the export folder.

Pipeline:
1. Scan the export folder for media files
2. Extract the version marker of every file, keep the versioned ones
3. Pick the highest version (ties: first in scan order)
4. Rebuild a clean base name from the winner's filename
5. Emit "<base>_<profile>_<version><ext>" with the version bumped by one

Nothing here raises past `resolve()`: every failure becomes ResolutionResult.error.
"""

import os
import re
import logging
from typing import List, Optional, Callable, Sequence, Union

from nextver.core.models import (
    ResolutionParams, ResolutionResult, VersionedCandidate, VersionInfo, VersionNotation,
    FileEntry, DEFAULT_PROFILE, DEFAULT_PROJECT_LABEL, GRADED_MARKER, container_extension,
)
from nextver.core.interfaces import DirectoryEntry, MediaScanner, VersionResolver
from nextver.core.scanner import MediaScannerImpl
from nextver.core.matcher import extract_version, format_version, strip_extension
from nextver.core.normalizer import remove_date_markers, trim_symbols

logger = logging.getLogger(__name__)

_PATTERN_BITRATE = re.compile(r'_\d+mbps', re.IGNORECASE | re.ASCII)
_PATTERN_PRORES_422 = re.compile(r'_prores422', re.IGNORECASE)
_PATTERN_PRORES_444 = re.compile(r'_prores444', re.IGNORECASE)


class VersionResolverImpl(VersionResolver):
    """
    Resolves the next versioned filename for an export folder.

    Args:
        scanner_factory: Builds a scanner for (root, extensions). Swappable for tests.
    """

    def __init__(
        self,
        scanner_factory: Callable[[object, Sequence[str]], MediaScanner] = MediaScannerImpl
    ):
        self._scanner_factory = scanner_factory

    def resolve(
        self,
        params: ResolutionParams,
        stopped_flag: Optional[Callable[[], bool]] = None,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> ResolutionResult:
        try:
            return self._resolve(params, stopped_flag, progress_callback)
        except Exception as e:
            logger.exception("Unexpected error during version detection")
            return ResolutionResult.failure(str(e) or e.__class__.__name__)

    def _resolve(
        self,
        params: ResolutionParams,
        stopped_flag: Optional[Callable[[], bool]],
        progress_callback: Optional[Callable[[str, int, object], None]]
    ) -> ResolutionResult:
        logger.debug(f"Detecting latest version (profile: {params.encoding_profile})")

        scanner = self._scanner_factory(params.export_dir, params.extensions)
        files = scanner.scan(stopped_flag=stopped_flag, progress_callback=progress_callback)

        if stopped_flag and stopped_flag():
            logger.debug("Resolution cancelled after scan")
            return ResolutionResult.failure("cancelled")

        candidates = collect_candidates(files, progress_callback)
        if not candidates:
            if files:
                logger.debug("No file carries a version marker, starting at V1")
            else:
                logger.debug("No existing media files, starting at V1")
            return self._fresh_result(params)

        winner = select_latest(candidates)
        prior_filename = winner.entry.name
        prior_number = winner.number
        next_number = prior_number + 1
        logger.debug(f"Latest file: {prior_filename} ({winner.version.matched_span}, {prior_number})")

        base_name = rebuild_base_name(prior_filename, winner.version)
        if not base_name:
            base_name = params.override_base_name or resolve_project_label(params.project_label)
            logger.warning(f"Base name of '{prior_filename}' collapsed to empty, using '{base_name}'")

        version_string = format_version(next_number, winner.version.notation)
        final_filename = compose_filename(base_name, params.encoding_profile, version_string)
        logger.debug(f"New filename: {final_filename}")

        if progress_callback:
            progress_callback('resolved', next_number, None)

        return ResolutionResult(
            success=True,
            prior_filename=prior_filename,
            prior_version_number=prior_number,
            next_version_number=next_number,
            base_name=base_name,
            final_filename=final_filename,
            notation=winner.version.notation,
        )

    @staticmethod
    def _fresh_result(params: ResolutionParams) -> ResolutionResult:
        """First export in this folder: override or project label, version 1, Latin notation."""
        base_name = params.override_base_name or resolve_project_label(params.project_label)
        version_string = format_version(1, VersionNotation.LATIN)
        final_filename = compose_filename(base_name, params.encoding_profile, version_string)
        logger.debug(f"New filename: {final_filename}")
        return ResolutionResult(
            success=True,
            prior_version_number=0,
            next_version_number=1,
            base_name=base_name,
            final_filename=final_filename,
            notation=VersionNotation.LATIN,
        )


def collect_candidates(
    files: Sequence[FileEntry],
    progress_callback: Optional[Callable[[str, int, object], None]] = None
) -> List[VersionedCandidate]:
    """Pair every file with its version marker, dropping unversioned files. Keeps scan order."""
    candidates = []
    total = len(files)
    for index, entry in enumerate(files, 1):
        info = extract_version(entry.name)
        logger.debug(f"{entry.name}: found={info.found}, number={info.number}, span={info.matched_span}")
        if info.found:
            candidates.append(VersionedCandidate(entry=entry, version=info))
        if progress_callback:
            progress_callback('matching', index, total)
    return candidates


def select_latest(candidates: Sequence[VersionedCandidate]) -> VersionedCandidate:
    """
    Highest version number wins. The sort is stable, so among equal numbers
    the file seen first during the scan wins.
    """
    if not candidates:
        raise ValueError("No versioned candidates to choose from")
    ranked = sorted(candidates, key=lambda c: c.number, reverse=True)
    return ranked[0]


def rebuild_base_name(filename: str, version: VersionInfo) -> str:
    """
    Strip a versioned filename down to its base label.

    Removes, in order: extension, the version marker, one "_<n>mbps" bitrate tag,
    "_prores422"/"_prores444" codec tags, date markers, then edge clutter.

    Examples:
        "Promo_10mbps_V3.mp4"        → "Promo"
        "宣传片_2025-08-19_V2.mp4"    → "宣传片"
    May return an empty string; callers supply the fallback.
    """
    base = strip_extension(filename)
    if version.matched_span:
        base = base.replace(version.matched_span, '', 1).strip()
    base = _PATTERN_BITRATE.sub('', base, count=1).strip()
    base = _PATTERN_PRORES_422.sub('', base, count=1).strip()
    base = _PATTERN_PRORES_444.sub('', base, count=1).strip()
    base = remove_date_markers(base)
    return trim_symbols(base)


def compose_filename(base_name: str, encoding_profile: str, version_string: str) -> str:
    return f"{base_name}_{encoding_profile}_{version_string}{container_extension(encoding_profile)}"


def resolve_project_label(project_label: Union[str, Callable[[], str], None]) -> str:
    """
    Return the clean project label, calling it first if it is a supplier.
    A failing or blank supplier yields the default label.
    """
    label = project_label
    if callable(project_label):
        try:
            label = project_label()
        except Exception as e:
            logger.warning(f"Project label supplier failed: {e}")
            label = None

    if not label or not str(label).strip():
        return DEFAULT_PROJECT_LABEL
    return str(label).strip()


def apply_grading_marker(filename: str, graded: bool = True, marker: str = GRADED_MARKER) -> str:
    """
    Insert the colour-grading marker before the extension.
    "Promo_10mbps_V4.mp4" → "Promo_10mbps_V4_已调色.mp4"
    """
    if not graded:
        return filename
    dot = filename.rfind('.')
    if dot > 0:
        return filename[:dot] + marker + filename[dot:]
    return filename + marker


def resolve_next_filename(
    export_dir: Union[str, "os.PathLike[str]", DirectoryEntry, None],
    encoding_profile: str = DEFAULT_PROFILE,
    override_base_name: Optional[str] = None,
    project_label: Union[str, Callable[[], str], None] = None,
    stopped_flag: Optional[Callable[[], bool]] = None,
    progress_callback: Optional[Callable[[str, int, object], None]] = None
) -> ResolutionResult:
    """
    Resolve the next export filename for `export_dir`.

    Args:
        export_dir: Export folder path or directory handle
        encoding_profile: "10mbps", "48mbps", "prores422", "prores444" or any other identifier
        override_base_name: Base name to use when the folder holds no versioned export yet
        project_label: Clean project label, or a zero-argument callable returning it

    Returns:
        ResolutionResult; success=False with `error` set on any failure.
    """
    if not export_dir:
        logger.debug("Export directory is empty")
        return ResolutionResult.failure("empty export directory")

    try:
        params = ResolutionParams(
            export_dir=export_dir,
            encoding_profile=encoding_profile,
            override_base_name=override_base_name,
            project_label=project_label,
        )
    except ValueError as e:
        return ResolutionResult.failure(str(e))

    return VersionResolverImpl().resolve(
        params,
        stopped_flag=stopped_flag,
        progress_callback=progress_callback
    )
