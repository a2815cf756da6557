#!/usr/bin/env python3
"""
Unit tests for FileScannerService and should_skip_file.
"""

import pytest

from morphphoto.exceptions import DirectoryScanError
from morphphoto.services.file_scanner_service import FileScannerService, should_skip_file


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


@pytest.mark.unit
@pytest.mark.organizer
class TestShouldSkipFile:
    """Test suite for metadata and temp file filtering."""

    @pytest.mark.parametrize(
        "name",
        [
            "._IMG_0001.JPG",
            ".DS_Store",
            "Thumbs.db",
            "desktop.ini",
            "~$draft.jpg",
            ".tmp1234.jpg",
            ".TMPfile.png",
        ],
    )
    def test_skipped(self, name):
        assert should_skip_file(name) is True

    @pytest.mark.parametrize("name", ["IMG_0001.JPG", "holiday.png", "tmp.jpg", "_a.jpg"])
    def test_kept(self, name):
        assert should_skip_file(name) is False


@pytest.mark.unit
@pytest.mark.organizer
class TestFileScannerService:
    """Test suite for recursive candidate enumeration."""

    def test_recursive_scan_filters_extensions(self, source_dir):
        _touch(source_dir / "a.jpg")
        _touch(source_dir / "b.JPEG")
        _touch(source_dir / "nested" / "deeper" / "c.heic")
        _touch(source_dir / "nested" / "d.png")
        _touch(source_dir / "notes.txt")
        _touch(source_dir / "clip.mov")

        files = FileScannerService().scan(source_dir)

        assert sorted(p.name for p in files) == ["a.jpg", "b.JPEG", "c.heic", "d.png"]

    def test_metadata_files_are_skipped(self, source_dir):
        _touch(source_dir / "a.jpg")
        _touch(source_dir / "._a.jpg")
        _touch(source_dir / "~$b.jpg")

        files = FileScannerService().scan(source_dir)

        assert [p.name for p in files] == ["a.jpg"]

    def test_scan_order_is_stable(self, source_dir):
        for name in ("z.jpg", "m.jpg", "a.jpg"):
            _touch(source_dir / name)
        _touch(source_dir / "sub" / "b.jpg")

        scanner = FileScannerService()

        assert scanner.scan(source_dir) == scanner.scan(source_dir)
        assert [p.name for p in scanner.scan(source_dir)] == ["a.jpg", "m.jpg", "z.jpg", "b.jpg"]

    def test_custom_extensions(self, source_dir):
        _touch(source_dir / "a.jpg")
        _touch(source_dir / "b.tiff")

        files = FileScannerService(extensions=[".TIFF"]).scan(source_dir)

        assert [p.name for p in files] == ["b.tiff"]

    def test_excluded_directory_is_not_scanned(self, source_dir):
        _touch(source_dir / "a.jpg")
        destination = source_dir / "organized"
        _touch(destination / "2022" / "05-May" / "a.jpg")

        files = FileScannerService(exclude_directory=destination).scan(source_dir)

        assert files == [source_dir / "a.jpg"]

    def test_scan_missing_directory_raises(self, tmp_path):
        with pytest.raises(DirectoryScanError):
            FileScannerService().scan(tmp_path / "missing")

    def test_get_image_files_missing_directory_returns_empty(self, tmp_path, log_records):
        assert FileScannerService().get_image_files(tmp_path / "missing") == []
        assert any(r["level"].name == "ERROR" for r in log_records)
