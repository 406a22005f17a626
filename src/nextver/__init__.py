"""
nextver — next version filename resolver for media exports.

Core features:
- Finds the latest export in a folder by its version marker ("V3" or "第三版")
- Derives the next filename: <base>_<profile>_<version><ext>
- Cleans base names of bitrate/codec tags, dates and separator clutter
- CLI interface for scripts and render pipelines
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("nextver")
except Exception:
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli
    from pathlib import Path as _Path

    with open(_Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from nextver.commands import ResolveNextFilenameCommand, resolve_next_filename_async
from nextver.core import (
    EncodingProfile, FileEntry, ResolutionParams, ResolutionResult, VersionInfo, VersionNotation,
    resolve_next_filename, extract_version, remove_date_markers, trim_symbols, clean_project_label,
    collect_media_files)

__all__ = [
    "ResolveNextFilenameCommand",
    "resolve_next_filename_async",
    "EncodingProfile",
    "FileEntry",
    "ResolutionParams",
    "ResolutionResult",
    "VersionInfo",
    "VersionNotation",
    "resolve_next_filename",
    "extract_version",
    "remove_date_markers",
    "trim_symbols",
    "clean_project_label",
    "collect_media_files",
    "__version__",
]
