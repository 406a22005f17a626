#!/usr/bin/env python3
"""
nextver CLI — Command line interface for next-version export filenames.
Scans an export folder, finds the latest versioned export and prints the name the next export should get.
Read-only: nothing is created, renamed or deleted.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import re
import sys
import os
import time
from pathlib import Path
from typing import Optional, NoReturn, Tuple
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from nextver.core.models import EncodingProfile, ResolutionParams, ResolutionResult, DEFAULT_PROFILE
from nextver.commands import ResolveNextFilenameCommand
from nextver.aliases import PROFILE_ALIASES, PROFILE_HELP_TEXT, EPILOG_TEXT

_PATTERN_RESOLUTION = re.compile(r'^\s*(\d+)\s*[xX×*]\s*(\d+)\s*$')


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse and validate command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="nextver",
            description="nextver — next version filename for media exports",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "--input", "-i",
            required=True,
            type=str,
            help="Export directory to scan for previous versions"
        )

        # Naming options
        parser.add_argument(
            "--profile", "-p",
            default=None,
            type=str,
            metavar='',
            help=PROFILE_HELP_TEXT
        )
        parser.add_argument(
            "--name", "-n",
            default=None,
            type=str,
            metavar='',
            dest="override_name",
            help="Base name for the first export (used when no versioned export exists yet)"
        )
        parser.add_argument(
            "--project",
            default=None,
            type=str,
            metavar='',
            help="Raw project name (e.g. 'Promo_2025-08-19.prproj'); cleaned and used as fallback label"
        )
        parser.add_argument(
            "--resolution", "-r",
            default=None,
            type=str,
            metavar='',
            help="Sequence frame size WIDTHxHEIGHT, picks 10mbps or 48mbps when --profile is not given"
        )
        parser.add_argument(
            "--graded",
            action="store_true",
            help="Mark the export as colour graded (adds '_已调色' before the extension)"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Print only the new filename"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and timing"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.quiet and args.verbose:
            self.error_exit("--quiet and --verbose cannot be used together")

        root_path = Path(args.input).resolve()
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.input}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.input}")

        if args.profile is not None and not args.profile.strip():
            self.error_exit("Encoding profile cannot be empty")

        if args.resolution is not None:
            try:
                self.parse_resolution(args.resolution)
            except ValueError as e:
                self.error_exit(str(e))

    @staticmethod
    def parse_resolution(value: str) -> Tuple[int, int]:
        """Parse 'WIDTHxHEIGHT' into a (width, height) tuple."""
        match = _PATTERN_RESOLUTION.match(value)
        if not match:
            raise ValueError(f"Invalid resolution format: '{value}' (expected e.g. 1920x1080)")
        width, height = int(match.group(1)), int(match.group(2))
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid resolution: {width}x{height}")
        return width, height

    def select_profile(self, args: argparse.Namespace) -> str:
        """Explicit --profile (aliases resolved) wins, then --resolution, then the default."""
        if args.profile:
            profile = args.profile.strip()
            alias = PROFILE_ALIASES.get(profile.lower())
            if alias is not None:
                return alias.value
            self.warning(f"Unknown encoding profile '{profile}', exporting as .mp4")
            return profile

        if args.resolution:
            width, height = self.parse_resolution(args.resolution)
            profile = EncodingProfile.for_resolution(width, height)
            if self.verbose:
                print(f"Resolution {width}x{height} → {profile.display_name}")
            return profile.value

        return DEFAULT_PROFILE

    def create_params(self, args: argparse.Namespace) -> ResolutionParams:
        """Create ResolutionParams from CLI arguments."""
        try:
            return ResolutionParams(
                export_dir=str(Path(args.input).resolve()),
                encoding_profile=self.select_profile(args),
                override_base_name=args.override_name,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def run_resolution(self, params: ResolutionParams, project_name: Optional[str],
                       graded: bool) -> ResolutionResult:
        """Execute the resolution workflow."""
        command = ResolveNextFilenameCommand(project_name=project_name, graded=graded)
        result = command.execute(params)
        if not result.success:
            self.error_exit(f"Version detection failed: {result.error}")
        return result

    def output_result(self, result: ResolutionResult) -> None:
        """Print the resolution summary, or just the filename in quiet mode."""
        if self.quiet:
            print(result.final_filename)
            return
        print(result.summary())

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        self.validate_args(args)
        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        params = self.create_params(args)

        if self.verbose:
            print(f"Scanning directory: {params.export_dir}")

        result = self.run_resolution(params, project_name=args.project, graded=args.graded)
        self.output_result(result)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
