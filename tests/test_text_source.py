"""Tests for TextSource: opening, reading and releasing streams."""

import io

import pytest

from char_iterator import CharIterator
from match_iterator import NumberIterator, RegexIterator, SentenceIterator
from text_source import TextSource
from token_errors import FileError, SourceReadError, TokenizerError
from word_iterator import WordIterator


class TestOpening:
    def test_missing_file_raises_file_error(self, tmp_path) -> None:
        missing = tmp_path / "nope.txt"
        with pytest.raises(FileError) as excinfo:
            TextSource.from_file(missing)
        assert excinfo.value.path == missing
        assert "nope.txt" in str(excinfo.value)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_directory_raises_file_error(self, tmp_path) -> None:
        with pytest.raises(FileError):
            TextSource.from_file(tmp_path)

    def test_file_error_is_tokenizer_error(self, tmp_path) -> None:
        with pytest.raises(TokenizerError):
            TextSource.from_file(tmp_path / "nope.txt")

    def test_file_source_owns_stream(self, text_file) -> None:
        with TextSource.from_file(text_file("abc")) as src:
            assert src.owns_stream

    def test_stdin_source_borrows_stream(self) -> None:
        stream = io.StringIO("x")
        src = TextSource.from_stdin(stream)
        assert src.stream is stream
        assert not src.owns_stream

    def test_from_string_none_is_empty(self) -> None:
        assert TextSource.from_string(None).read_all() == ""

    def test_chunk_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            TextSource(io.StringIO(""), chunk_size=0)


class TestReading:
    def test_read_char_until_end(self, source_of) -> None:
        src = source_of("ab")
        assert [src.read_char(), src.read_char(), src.read_char()] == ["a", "b", ""]

    def test_read_all_spans_many_chunks(self) -> None:
        text = "0123456789" * 50
        src = TextSource(io.StringIO(text), chunk_size=7)
        assert src.read_all() == text

    def test_read_all_drains_stream(self, source_of) -> None:
        src = source_of("hello")
        assert src.read_all() == "hello"
        assert src.read_all() == ""
        assert src.read_char() == ""

    def test_read_all_after_partial_reads(self, source_of) -> None:
        src = source_of("hello")
        src.read_char()
        assert src.read_all() == "ello"

    def test_file_keeps_crlf(self, text_file) -> None:
        with TextSource.from_file(text_file("a\r\nb")) as src:
            assert src.read_all() == "a\r\nb"

    def test_file_encoding(self, tmp_path) -> None:
        path = tmp_path / "latin.txt"
        path.write_bytes("café".encode("latin-1"))
        with TextSource.from_file(path, encoding="latin-1") as src:
            assert src.read_all() == "café"

    def test_undecodable_file_raises_read_error(self, tmp_path) -> None:
        path = tmp_path / "bad.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with TextSource.from_file(path) as src:
            with pytest.raises(SourceReadError):
                src.read_all()

    def test_read_failure_raises_read_error(self, failing_source) -> None:
        src = failing_source("ab")
        assert src.read_char() == "a"
        assert src.read_char() == "b"
        with pytest.raises(SourceReadError):
            src.read_char()

    def test_read_all_failure_raises_read_error(self, failing_source) -> None:
        with pytest.raises(SourceReadError):
            failing_source("abc").read_all()


class TestRelease:
    def test_owned_stream_closed_once(self, tracking_stream) -> None:
        stream = tracking_stream("abc")
        src = TextSource(stream, owns_stream=True)
        src.close()
        src.close()
        assert stream.close_calls == 1
        assert src.closed

    def test_borrowed_stream_never_closed(self, tracking_stream) -> None:
        stream = tracking_stream("abc")
        with TextSource.from_stdin(stream):
            pass
        assert stream.close_calls == 0
        assert not stream.closed

    def test_context_manager_closes_on_error(self, tracking_stream) -> None:
        stream = tracking_stream("abc")
        with pytest.raises(RuntimeError):
            with TextSource(stream, owns_stream=True):
                raise RuntimeError("boom")
        assert stream.close_calls == 1

    def test_file_closed_after_with_block(self, text_file) -> None:
        with TextSource.from_file(text_file("abc")) as src:
            handle = src.stream
            assert not handle.closed
        assert handle.closed


class TestFactories:
    def test_iterating_source_yields_chars(self, source_of) -> None:
        assert list(source_of("hi!")) == ["h", "i", "!"]

    def test_factory_types(self, source_of) -> None:
        assert isinstance(source_of("").chars(), CharIterator)
        assert isinstance(source_of("").words(), WordIterator)
        assert isinstance(source_of("").sentences(), SentenceIterator)
        assert isinstance(source_of("").numbers(), NumberIterator)
        assert isinstance(source_of("").matches(), RegexIterator)

    def test_matches_default_pattern_per_line(self, source_of) -> None:
        assert list(source_of("one\ntwo\n\nthree").matches()) == ["one", "two", "three"]
