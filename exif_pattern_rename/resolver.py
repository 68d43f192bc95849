"""
Tag resolution: turning a parsed tag into a string for one file.

Tags in the "File" category are answered from file system attributes and
the date index collector; every other category names an EXIF field.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, NamedTuple, Optional

from .date_index import DateIndexCollector
from .exceptions import MetadataUnavailable, TagResolutionError
from .metadata import FileStat, stat_file
from .tags import TagReference, parse_tag_group

logger = logging.getLogger(__name__)

FILE_CATEGORY = "File"

TIMESTAMP_FIELDS = frozenset(["DateTime", "DateTimeOriginal", "DateTimeDigitized"])
EXIF_TIMESTAMP_FORMAT = "%Y:%m:%d %H:%M:%S"

INDEX_WIDTH = 6

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

TIMESTAMP_FORMATTERS: Dict[str, Callable[[datetime], str]] = {
    "Year": lambda ts: f"{ts.year:04d}",
    "Month": lambda ts: f"{ts.month:02d}",
    "Day": lambda ts: f"{ts.day:02d}",
    "Hour": lambda ts: f"{ts.hour:02d}",
    "Minute": lambda ts: f"{ts.minute:02d}",
    "Second": lambda ts: f"{ts.second:02d}",
    "Nanosecond": lambda ts: str(ts.microsecond * 1000),
    "Unix": lambda ts: str(int(ts.timestamp())),
    "Weekday": lambda ts: WEEKDAYS[ts.weekday()],
    "Offset": lambda ts: ts.tzname() or "",
}


def timestamp_prop(timestamp: datetime, property_name: str) -> str:
    """
    Format one property of a timestamp.

    Unknown or empty property names give the full ISO 8601 timestamp.
    """
    formatter = TIMESTAMP_FORMATTERS.get(property_name)
    if formatter is None:
        return timestamp.isoformat()
    return formatter(timestamp)


def parse_exif_timestamp(value: str) -> datetime:
    """Parse an EXIF 'YYYY:MM:DD HH:MM:SS' value as a UTC timestamp."""
    return datetime.strptime(value, EXIF_TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)


def format_index(index: int) -> str:
    return f"{index:0{INDEX_WIDTH}d}"


class FileContext(NamedTuple):
    """Everything a tag may need to know about the file being renamed."""
    path: str
    collector: DateIndexCollector
    capture_time: Optional[datetime] = None


class TagResolver:
    """
    Resolves tag text such as "DateTime.Year|File.ModTime.Year" for a file.

    Args:
        metadata_source: Object with get(path, field_name) -> str, raising
            MetadataUnavailable when the field cannot be read
        stat: Callable returning a FileStat for a path
    """

    def __init__(self, metadata_source, stat: Callable[[str], FileStat] = stat_file):
        self.metadata_source = metadata_source
        self.stat = stat
        self._category_resolvers = {
            FILE_CATEGORY: self._resolve_file_tag,
        }
        self._file_properties = {
            "Index": lambda ref, meta, ctx: format_index(len(ctx.collector)),
            "IndexByCaptureYear": lambda ref, meta, ctx: self._capture_index(
                ctx, ctx.collector.get_index_by_year),
            "IndexByCaptureMonth": lambda ref, meta, ctx: self._capture_index(
                ctx, ctx.collector.get_index_by_month),
            "IndexByCaptureDate": lambda ref, meta, ctx: self._capture_index(
                ctx, ctx.collector.get_index_by_day),
            "Extension": lambda ref, meta, ctx: meta.extension,
            "ModTime": lambda ref, meta, ctx: timestamp_prop(
                meta.mod_time, ref.properties[1] if len(ref.properties) > 1 else ""),
            "ModTimeUnix": lambda ref, meta, ctx: str(int(meta.mod_time.timestamp())),
            "Size": lambda ref, meta, ctx: str(meta.size),
            "Name": lambda ref, meta, ctx: meta.name,
        }

    def resolve(self, tag: str, context: FileContext) -> str:
        """
        Resolve a tag, trying each '|' alternative from left to right.

        Every alternative is attempted and the last one that succeeds
        provides the value, so later alternatives take precedence over
        earlier ones. If none succeed the value is an empty string.
        """
        value = ""
        for reference in parse_tag_group(tag):
            try:
                value = self.resolve_reference(reference, context)
            except TagResolutionError as e:
                logger.debug(f"Skipping {reference.raw!r} for {context.path}: {e}")
        return value

    def resolve_reference(self, reference: TagReference, context: FileContext) -> str:
        """
        Resolve a single alternative.

        Raises:
            TagResolutionError: if the value cannot be produced
        """
        resolver = self._category_resolvers.get(reference.name, self._resolve_metadata_tag)
        return resolver(reference, context)

    def _resolve_file_tag(self, reference: TagReference, context: FileContext) -> str:
        try:
            file_meta = self.stat(context.path)
        except OSError as e:
            raise TagResolutionError(f"Could not stat {context.path}: {e}") from e

        handler = self._file_properties.get(reference.first_property)
        if handler is None:
            return ""
        return handler(reference, file_meta, context)

    def _resolve_metadata_tag(self, reference: TagReference, context: FileContext) -> str:
        value = self.metadata_source.get(context.path, reference.name)
        if reference.name not in TIMESTAMP_FIELDS:
            return value

        try:
            timestamp = parse_exif_timestamp(value)
        except ValueError as e:
            raise MetadataUnavailable(
                context.path, reference.name,
                f"Invalid {reference.name} timestamp {value!r} in {context.path}") from e
        return timestamp_prop(timestamp, reference.first_property)

    @staticmethod
    def _capture_index(context: FileContext, lookup) -> str:
        if context.capture_time is None:
            return format_index(0)
        return format_index(lookup(context.capture_time))
