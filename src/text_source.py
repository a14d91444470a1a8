import io
import logging
import sys

from char_iterator import CharIterator
from match_iterator import NumberIterator, RegexIterator, SentenceIterator
from token_errors import FileError, SourceReadError
from word_iterator import WordIterator

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 4096


class TextSource:
    def __init__(self, stream, owns_stream: bool = False, chunk_size: int = DEFAULT_CHUNK_SIZE):
        """
        Wraps a text stream and hands it out to the tokenizers either one character at a time
        or as one fully buffered string.
        The stream is only closed if owns_stream is set, which is the case for sources opened from a path.
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.stream = stream
        self.owns_stream = owns_stream
        self.chunk_size = chunk_size
        self._closed = False

    @classmethod
    def from_file(cls, path, encoding: str = "utf-8", chunk_size: int = DEFAULT_CHUNK_SIZE):
        try:
            # newline="" keeps \r\n intact so character mode round-trips the file
            f = open(path, "r", encoding=encoding, newline="")
        except OSError as e:
            raise FileError(path, e.strerror or str(e)) from e
        logger.debug("Opened %s (encoding=%s)", path, encoding)
        return cls(f, owns_stream=True, chunk_size=chunk_size)

    @classmethod
    def from_stdin(cls, stream=None, chunk_size: int = DEFAULT_CHUNK_SIZE):
        """Standard input is borrowed, never closed."""
        return cls(sys.stdin if stream is None else stream, owns_stream=False, chunk_size=chunk_size)

    @classmethod
    def from_string(cls, text):
        return cls(io.StringIO("" if text is None else text))

    def read_char(self) -> str:
        """
        Read a single character. Returns an empty string at end of stream.
        """
        try:
            return self.stream.read(1)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"read failed: {e}") from e

    def read_all(self) -> str:
        """
        Read everything left in the stream, block by block.
        """
        chunks = []
        try:
            while True:
                chunk = self.stream.read(self.chunk_size)
                if not chunk:
                    break
                chunks.append(chunk)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"read failed: {e}") from e

        text = "".join(chunks)
        logger.debug("Buffered %d characters in %d blocks", len(text), len(chunks))
        return text

    def close(self):
        if not self.owns_stream or self._closed:
            return
        self._closed = True
        try:
            self.stream.close()
        except OSError as e:
            raise SourceReadError(f"close failed: {e}") from e
        logger.debug("Closed %s", getattr(self.stream, "name", self.stream))

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __iter__(self):
        return CharIterator(self)

    def chars(self) -> CharIterator:
        return CharIterator(self)

    def words(self) -> WordIterator:
        return WordIterator(self)

    def sentences(self) -> SentenceIterator:
        return SentenceIterator(self)

    def numbers(self) -> NumberIterator:
        return NumberIterator(self)

    def matches(self, pattern=None) -> RegexIterator:
        return RegexIterator(self, pattern)
