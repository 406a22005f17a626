"""
Unified command orchestrator for next-version filename resolution.
This is the SINGLE entry point for callers that export media — used by the CLI and host integrations.
Pure Python, no host application dependencies.
"""
import asyncio
from dataclasses import replace
from typing import Optional, Callable

from nextver.core.models import ResolutionParams, ResolutionResult, DEFAULT_PROFILE
from nextver.core.normalizer import clean_project_label
from nextver.core.resolver import VersionResolverImpl, apply_grading_marker, resolve_next_filename


class ResolveNextFilenameCommand:
    """
    Orchestrates one resolution:
    1. Clean the raw project name into a fallback label (if given)
    2. Scan the export folder and resolve the next filename
    3. Optionally tag the filename as colour graded

    Usage:
        params = ResolutionParams(export_dir="/renders/导出", encoding_profile="prores422")
        command = ResolveNextFilenameCommand(project_name="夏日宣传片_2025-08-19.prproj")
        result = command.execute(params)

        # From async code (single awaitable, runs in a worker thread):
        result = await command.execute_async(params)
    """

    def __init__(self, project_name: Optional[str] = None, graded: bool = False):
        self._resolver = VersionResolverImpl()
        self._project_name = project_name
        self._graded = graded

    def execute(
            self,
            params: ResolutionParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
            stopped_flag: Optional[Callable[[], bool]] = None
    ) -> ResolutionResult:
        """
        Execute resolution with given parameters.

        Args:
            params: Validated resolution parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
            stopped_flag: () -> bool (returns True if operation should stop)

        Returns:
            ResolutionResult (never raises; check `.success`)
        """
        if params.project_label is None and self._project_name is not None:
            project_name = self._project_name
            params = replace(params, project_label=lambda: clean_project_label(project_name))

        result = self._resolver.resolve(
            params,
            stopped_flag=stopped_flag,
            progress_callback=progress_callback
        )

        if result.success and self._graded:
            result = replace(result, final_filename=apply_grading_marker(result.final_filename))
        return result

    async def execute_async(
            self,
            params: ResolutionParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
            stopped_flag: Optional[Callable[[], bool]] = None
    ) -> ResolutionResult:
        """Same as execute(), awaited as one unit. Directory I/O runs off the event loop."""
        return await asyncio.to_thread(self.execute, params, progress_callback, stopped_flag)


async def resolve_next_filename_async(
        export_dir,
        encoding_profile: str = DEFAULT_PROFILE,
        override_base_name: Optional[str] = None,
        project_label=None
) -> ResolutionResult:
    """Async wrapper around core.resolver.resolve_next_filename."""
    return await asyncio.to_thread(
        resolve_next_filename, export_dir, encoding_profile, override_base_name, project_label
    )
