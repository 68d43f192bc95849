"""
Exif Pattern Rename - rename image files from a pattern of metadata tags.

This package provides functionality to:
- Parse {tag} placeholders out of a file name pattern
- Resolve tags from EXIF fields, file attributes and capture date indexes
- Render and apply new names to a batch of files, in order
"""

__version__ = "1.0.0"
__author__ = "Vibe Tools"
__email__ = "tools@vibe.dev"

from .core import PatternRenamer, RenameConfig
from .date_index import DateIndexCollector
from .exceptions import CaptureTimeUnavailable, MetadataUnavailable, RenameError, TagResolutionError
from .resolver import TagResolver
from .tags import extract_tags, replace_tag_in_pattern

__all__ = [
    "PatternRenamer",
    "RenameConfig",
    "DateIndexCollector",
    "TagResolver",
    "extract_tags",
    "replace_tag_in_pattern",
    "RenameError",
    "TagResolutionError",
    "MetadataUnavailable",
    "CaptureTimeUnavailable",
]
