"""
File attribute, EXIF metadata and directory listing helpers.
"""

import logging
import re
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, List, NamedTuple, Optional, Union

try:
    from PIL import Image
    from PIL.ExifTags import TAGS
except ImportError:
    print("Error: PIL (Pillow) not installed. Run: pip install Pillow")
    sys.exit(1)

try:
    import exifread
except ImportError:
    print("Error: exifread not installed. Run: pip install exifread")
    sys.exit(1)

from .exceptions import MetadataUnavailable

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Pillow keeps DateTimeOriginal/DateTimeDigitized in the Exif sub-IFD.
EXIF_IFD_POINTER = 0x8769

# exifread prefixes tag names with the IFD they came from.
EXIFREAD_PREFIXES = ("Image", "EXIF", "GPS", "Interoperability")


class FileStat(NamedTuple):
    """File system attributes used by {File.*} tags."""
    name: str
    extension: str
    size: int
    mod_time: datetime


def stat_file(filepath: PathLike) -> FileStat:
    """Read name, extension (without the dot), size and local mtime of a file."""
    filepath = Path(filepath)
    stat = filepath.stat()
    return FileStat(
        name=filepath.name,
        extension=filepath.suffix.replace(".", ""),
        size=stat.st_size,
        mod_time=datetime.fromtimestamp(stat.st_mtime).astimezone(),
    )


def _stringify(value) -> Optional[str]:
    """Convert a decoded EXIF value to a clean string, None if empty."""
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    text = str(value).strip("\x00").strip()
    return text or None


class ExifMetadataSource:
    """
    Looks up EXIF fields by name, e.g. "DateTime" or "Model".

    Pillow is tried first; exifread is used for files Pillow cannot open
    or that Pillow decodes without the requested field. Every call decodes
    the file again.
    """

    def get(self, filepath: PathLike, field_name: str) -> str:
        """
        Return the string value of an EXIF field.

        Raises:
            MetadataUnavailable: if the field is absent or the file cannot be decoded
        """
        value = None
        try:
            value = self._read_pillow_tags(filepath).get(field_name)
        except OSError as e:
            logger.debug(f"Pillow could not read {filepath}: {e}")

        if value is None:
            value = self._read_exifread_tag(filepath, field_name)

        if value is None:
            raise MetadataUnavailable(filepath, field_name)
        return value

    def _read_pillow_tags(self, filepath: PathLike) -> Dict[str, str]:
        tags = {}
        with Image.open(filepath) as img:
            exif_data = img.getexif()
            entries = list(exif_data.items())
            entries.extend(exif_data.get_ifd(EXIF_IFD_POINTER).items())

        for tag_id, value in entries:
            tag = TAGS.get(tag_id)
            if tag is None:
                continue
            text = _stringify(value)
            if text is not None:
                tags[tag] = text
        return tags

    def _read_exifread_tag(self, filepath: PathLike, field_name: str) -> Optional[str]:
        try:
            with open(filepath, "rb") as f:
                tags = exifread.process_file(f, details=False)
        except OSError as e:
            raise MetadataUnavailable(filepath, field_name, f"Could not read {filepath}: {e}") from e
        except Exception as e:
            # exifread raises assorted errors on corrupt headers
            raise MetadataUnavailable(filepath, field_name, f"Could not decode EXIF from {filepath}: {e}") from e

        for prefix in EXIFREAD_PREFIXES:
            key = f"{prefix} {field_name}"
            if key in tags:
                return _stringify(tags[key])
        return None


def _walk_sorted(directory: Path, recursive: bool):
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            if recursive:
                yield from _walk_sorted(entry, recursive)
        else:
            yield entry


def files_in_directory(directory: PathLike, file_filter: str, recursive: bool = False) -> List[str]:
    """
    List files whose path matches a regular expression, in lexical order.

    Args:
        directory: Directory to list
        file_filter: Regular expression searched for in each file's full path
        recursive: Also descend into sub-directories

    Returns:
        File paths as strings, in traversal order
    """
    filter_regex = re.compile(file_filter)
    files = []
    for filepath in _walk_sorted(Path(directory), recursive):
        if filter_regex.search(str(filepath)):
            files.append(str(filepath))
    logger.debug(f"{len(files)} file(s) in {directory} match {file_filter!r}")
    return files
