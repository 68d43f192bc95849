#!/usr/bin/env python3
"""
Command-line interface for exif_pattern_rename.
"""

import argparse
import logging
import os
import re
import sys

from . import __version__
from .core import (
    DEFAULT_FILE_FILTER,
    DEFAULT_OUTPUT_PATTERN,
    DEFAULT_WORK_DIR,
    PatternRenamer,
    RenameConfig,
)
from .exceptions import RenameError

logger = logging.getLogger("exif_pattern_rename")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exif_pattern_rename",
        description="Rename image files from a pattern of EXIF and file tags",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  exif_pattern_rename --dry-run
  exif_pattern_rename --workdir ~/Pictures --filter '\\.jpe?g$' --recursive
  exif_pattern_rename --output '{DateTime.Year}{DateTime.Month}_{File.IndexByCaptureDate}.{File.Extension}'

Tags:
  {DateTime.Year}        EXIF field, optionally with a timestamp property:
                         Year Month Day Hour Minute Second Nanosecond
                         Unix Weekday Offset (anything else: full timestamp)
  {Model}                Any other EXIF field, as text
  {File.Index}           Position in the batch, 6 digits
  {File.IndexByCaptureYear|IndexByCaptureMonth|IndexByCaptureDate}
                         Position among files captured in the same year,
                         month or day, 6 digits
  {File.Extension} {File.Name} {File.Size} {File.ModTime.Year} {File.ModTimeUnix}
  {DateTimeOriginal.Day|DateTime.Day}
                         Alternatives; the last one that resolves is used
        """
    )

    parser.add_argument(
        '--workdir',
        default=DEFAULT_WORK_DIR,
        help='The working directory for operations (default: %(default)s)'
    )

    parser.add_argument(
        '--filter',
        default=DEFAULT_FILE_FILTER,
        help='Regular expression the input file paths must match (default: %(default)s)'
    )

    parser.add_argument(
        '--output',
        default=DEFAULT_OUTPUT_PATTERN,
        help='The file output pattern (default: %(default)s)'
    )

    parser.add_argument(
        '--recursive',
        action='store_true',
        help='Also process files in sub-directories'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Print the new names without renaming files'
    )

    parser.add_argument(
        '--allow-missing-capture-time',
        action='store_true',
        help='Rename files without EXIF capture time instead of stopping'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show debug output'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the exif_pattern_rename command."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(message)s',
        stream=sys.stdout
    )

    if not os.path.isdir(args.workdir):
        logger.error(f"Error: Directory not found: {args.workdir}")
        return 1

    try:
        re.compile(args.filter)
    except re.error as e:
        logger.error(f"Error: Invalid filter {args.filter!r}: {e}")
        return 1

    config = RenameConfig(
        work_dir=args.workdir,
        file_filter=args.filter,
        output_pattern=args.output,
        recursive=args.recursive,
        dry_run=args.dry_run,
        allow_missing_capture_time=args.allow_missing_capture_time,
    )

    print(f"Exif Pattern Rename v{__version__}")
    print(f"Mode: {'DRY RUN' if config.dry_run else 'RENAME FILES'}")
    print(f"Directory: {os.path.abspath(config.work_dir)}")
    print(f"Pattern: {config.output_pattern}")
    print("-" * 50)

    try:
        renamed = PatternRenamer(config).run()
    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user.")
        return 1
    except (RenameError, OSError) as e:
        logger.error(f"\nError: {e}")
        return 1

    print(f"\n{'Dry run' if config.dry_run else 'Processing'} completed: {len(renamed)} file(s)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
