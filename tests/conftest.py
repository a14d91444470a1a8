"""Shared fixtures for the tokenizer tests."""

import io

import pytest

from text_source import TextSource


class FailingStream(io.StringIO):
    """Serves its text, then raises OSError instead of reporting end of stream."""

    def read(self, size=-1):
        data = super().read(size)
        if not data:
            raise OSError("device went away")
        return data


class TrackingStream(io.StringIO):
    """Counts close() calls."""

    def __init__(self, text=""):
        super().__init__(text)
        self.close_calls = 0

    def close(self):
        self.close_calls += 1
        super().close()


@pytest.fixture
def source_of():
    def make(text):
        return TextSource.from_string(text)

    return make


@pytest.fixture
def failing_source():
    def make(text):
        return TextSource(FailingStream(text))

    return make


@pytest.fixture
def text_file(tmp_path):
    def make(text, name="input.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return path

    return make


@pytest.fixture
def tracking_stream():
    return TrackingStream
