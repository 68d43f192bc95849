import os
from datetime import datetime, timezone

import pytest

from exif_pattern_rename.exceptions import MetadataUnavailable
from exif_pattern_rename.metadata import FileStat


class FakeMetadataSource:
    """In-memory EXIF fields keyed by file path."""

    def __init__(self, fields=None):
        self.fields = fields or {}
        self.calls = []

    def get(self, filepath, field_name):
        self.calls.append((filepath, field_name))
        try:
            return self.fields[filepath][field_name]
        except KeyError:
            raise MetadataUnavailable(filepath, field_name)


def fake_stat(filepath):
    name = os.path.basename(filepath)
    return FileStat(
        name=name,
        extension=os.path.splitext(name)[1].replace(".", ""),
        size=2048,
        mod_time=datetime(2020, 7, 8, 9, 10, 11, tzinfo=timezone.utc),
    )


@pytest.fixture
def metadata():
    return FakeMetadataSource()


@pytest.fixture
def image_files(tmp_path):
    """Create empty .jpg files and return their paths in sorted order."""
    def make(*names):
        paths = []
        for name in names:
            path = tmp_path / name
            path.write_bytes(b"")
            paths.append(str(path))
        return paths
    return make


@pytest.fixture
def stat():
    return fake_stat
