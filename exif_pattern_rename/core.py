"""
Core functionality for rendering file names from a pattern and renaming files.
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .date_index import DateIndexCollector
from .exceptions import CaptureTimeUnavailable, MetadataUnavailable
from .metadata import ExifMetadataSource, files_in_directory, stat_file
from .resolver import FileContext, TagResolver, parse_exif_timestamp
from .tags import distinct_tags, extract_tags, replace_tag_in_pattern

logger = logging.getLogger(__name__)

DEFAULT_WORK_DIR = "."
DEFAULT_FILE_FILTER = ".jpg"
DEFAULT_OUTPUT_PATTERN = "{DateTime.Year}{DateTime.Month}{DateTime.Day}_{File.Index}.{File.Extension}"

# Tried in this order; the first field that parses is the capture time.
CAPTURE_TIME_FIELDS = ("DateTime", "DateTimeDigitized", "DateTimeOriginal")


@dataclass
class RenameConfig:
    """
    Settings for one rename batch.

    Attributes:
        work_dir: Directory to take files from
        file_filter: Regular expression a file path must contain
        output_pattern: File name template with {tag} placeholders
        recursive: Also take files from sub-directories
        dry_run: Print what would be renamed instead of renaming
        allow_missing_capture_time: Render files without a capture time
            instead of stopping the batch
    """
    work_dir: str = DEFAULT_WORK_DIR
    file_filter: str = DEFAULT_FILE_FILTER
    output_pattern: str = DEFAULT_OUTPUT_PATTERN
    recursive: bool = False
    dry_run: bool = False
    allow_missing_capture_time: bool = False


class PatternRenamer:
    """
    Renders new file names from a pattern and renames files to them.

    Files are processed strictly in the order given. Each file's capture
    time is added to a date index collector before its tags are resolved,
    so {File.IndexByCapture*} tags number files within their year, month
    or day in processing order.
    """

    def __init__(self, config: Optional[RenameConfig] = None, metadata_source=None, stat=stat_file):
        """
        Initialize the PatternRenamer.

        Args:
            config: Batch settings, defaults to RenameConfig()
            metadata_source: EXIF field lookup, defaults to ExifMetadataSource()
            stat: File attribute reader used by {File.*} tags
        """
        self.config = config or RenameConfig()
        self.metadata_source = metadata_source or ExifMetadataSource()
        self.resolver = TagResolver(self.metadata_source, stat=stat)

    def capture_time(self, filepath: str) -> datetime:
        """
        Return the capture time of a file from its EXIF timestamps.

        Raises:
            CaptureTimeUnavailable: if no capture timestamp field can be read
        """
        for field_name in CAPTURE_TIME_FIELDS:
            try:
                return parse_exif_timestamp(self.metadata_source.get(filepath, field_name))
            except (MetadataUnavailable, ValueError) as e:
                logger.debug(f"No {field_name} for {filepath}: {e}")
        raise CaptureTimeUnavailable(filepath, CAPTURE_TIME_FIELDS)

    def render(self, pattern: str, tags: Sequence[str], files: Iterable[str]) -> Iterator[Tuple[str, str]]:
        """
        Render one output name per file, lazily and in input order.

        Args:
            pattern: Output file name template
            tags: Tags to substitute; each distinct tag is resolved once per file
            files: File paths in processing order

        Yields:
            (file path, rendered name) pairs

        Raises:
            CaptureTimeUnavailable: for a file without capture time, unless
                config.allow_missing_capture_time is set
        """
        collector = DateIndexCollector()
        tags = distinct_tags(tags)

        for filepath in files:
            try:
                capture_time = self.capture_time(filepath)
            except CaptureTimeUnavailable:
                if not self.config.allow_missing_capture_time:
                    raise
                logger.warning(f"Warning: No capture time for {filepath}, date indexes will be 0")
                capture_time = None
            else:
                collector.add(capture_time)

            context = FileContext(path=filepath, collector=collector, capture_time=capture_time)
            output_filename = pattern
            for tag in tags:
                value = self.resolver.resolve(tag, context)
                output_filename = replace_tag_in_pattern(output_filename, tag, value)

            yield filepath, output_filename

    def rename_files(self, files: Iterable[str]) -> List[Tuple[str, str]]:
        """
        Rename files to the names rendered from config.output_pattern.

        Rendered names are placed in the source file's directory unless
        they are absolute. In dry-run mode the renames are only printed.
        The first error stops the batch.

        Returns:
            (source, target) pairs that were renamed, or would be
        """
        pattern = self.config.output_pattern
        tags = extract_tags(pattern)
        renamed = []

        for filepath, output_filename in self.render(pattern, tags, files):
            target = str(Path(filepath).parent / output_filename)

            if self.config.dry_run:
                print(f"{filepath} => {target}")
            else:
                logger.debug(f"Renaming {filepath} -> {target}")
                os.rename(filepath, target)
            renamed.append((filepath, target))

        return renamed

    def run(self) -> List[Tuple[str, str]]:
        """Rename every matching file in config.work_dir."""
        work_dir = os.path.abspath(self.config.work_dir)
        files = files_in_directory(work_dir, self.config.file_filter, self.config.recursive)
        logger.info(f"Found {len(files)} file(s) in {work_dir}")
        return self.rename_files(files)
