"""Unit tests for text resource access."""

from pathlib import Path

from structlog.testing import capture_logs

from lexirate.sentiment.resources import list_samples, load_sample, load_text, read_file


class TestReadFile:
    """Tests for read_file."""

    def test_reads_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "note.txt"
        path.write_text("café 😀\n", encoding="utf-8")
        assert read_file(path) == "café 😀\n"

    def test_missing_returns_none(self, tmp_path: Path) -> None:
        with capture_logs() as logs:
            assert read_file(tmp_path / "missing.txt") is None
        assert logs[0]["event"] == "Resource not found"

    def test_directory_returns_none(self, tmp_path: Path) -> None:
        assert read_file(tmp_path) is None

    def test_invalid_utf8_returns_none(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with capture_logs() as logs:
            assert read_file(path) is None
        assert logs[0]["event"] == "Resource is not valid UTF-8"


class TestLoadText:
    """Tests for load_text."""

    def test_bundled_resource(self) -> None:
        text = load_text("positive-words")
        assert text is not None
        assert "happy" in text.splitlines()

    def test_appends_suffix(self, tmp_path: Path) -> None:
        (tmp_path / "hello.txt").write_text("hi", encoding="utf-8")
        assert load_text("hello", directory=tmp_path) == "hi"

    def test_missing_returns_none(self) -> None:
        assert load_text("definitely-not-here") is None


class TestSamples:
    """Tests for the bundled sample corpus."""

    def test_list_samples(self) -> None:
        assert list_samples() == [
            "john_chapter1",
            "paradise_lost_extract",
            "tale_of_two_cities_extract",
            "the_hollowmen",
        ]

    def test_load_sample(self) -> None:
        text = load_sample("john_chapter1")
        assert text is not None
        assert text.startswith("In the beginning was the Word")

    def test_missing_sample(self) -> None:
        assert load_sample("nope") is None
