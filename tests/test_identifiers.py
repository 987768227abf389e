"""Unit tests for artwork_uploader/utils/identifiers.py."""

import sys
import uuid
from pathlib import Path

# Add parent dir to path so artwork_uploader is importable as a package
sys.path.insert(0, str(Path(__file__).parent.parent))

from artwork_uploader.utils.identifiers import derive_title, new_image_id, split_image_paths


class TestSplitImagePaths:
    """Tests for split_image_paths() function."""

    def test_single_path(self):
        assert split_image_paths("/tmp/a.jpg") == [Path("/tmp/a.jpg")]

    def test_comma_separated(self):
        assert split_image_paths("/tmp/a.jpg,/tmp/b.jpg") == [
            Path("/tmp/a.jpg"),
            Path("/tmp/b.jpg"),
        ]

    def test_whitespace_around_commas_ignored(self):
        """Whitespace padding around separators should be dropped."""
        assert split_image_paths("  /tmp/a.jpg ,\t/tmp/b.jpg  ") == [
            Path("/tmp/a.jpg"),
            Path("/tmp/b.jpg"),
        ]

    def test_spaces_inside_paths_kept(self):
        assert split_image_paths("/tmp/my photo.jpg") == [Path("/tmp/my photo.jpg")]

    def test_empty_entries_dropped(self):
        assert split_image_paths("/tmp/a.jpg,,/tmp/b.jpg,") == [
            Path("/tmp/a.jpg"),
            Path("/tmp/b.jpg"),
        ]

    def test_empty_string(self):
        assert split_image_paths("") == []
        assert split_image_paths(" , ") == []


class TestDeriveTitle:
    """Tests for derive_title() function."""

    def test_extension_stripped(self):
        assert derive_title("/tmp/a.jpg") == "a"

    def test_only_last_extension_stripped(self):
        assert derive_title("/tmp/archive.final.png") == "archive.final"

    def test_spaces_preserved(self):
        assert derive_title(Path("/photos/Sunset Over Lake.jpeg")) == "Sunset Over Lake"

    def test_no_extension(self):
        assert derive_title("/photos/untitled") == "untitled"


class TestNewImageId:
    """Tests for new_image_id() function."""

    def test_is_uuid(self):
        assert uuid.UUID(new_image_id()).version == 4

    def test_unique(self):
        assert len({new_image_id() for _ in range(100)}) == 100
