import logging

from token_errors import SourceReadError
from token_iterator import TokenIterator

logger = logging.getLogger(__name__)

WHITESPACE = frozenset(" \t\n\r\f")


class WordIterator(TokenIterator):
    def __init__(self, source):
        """
        Streams whitespace-delimited words from the source, reading one character at a time
        so the first word is available before the rest of the input has arrived.
        Runs of whitespace are skipped and never produce empty tokens.
        """
        super().__init__()
        self.source = source
        self._done = False

    def _read(self):
        if self._done:
            return ""
        try:
            ch = self.source.read_char()
        except SourceReadError as e:
            logger.debug("Treating read error as end of stream: %s", e)
            ch = ""
        if not ch:
            self._done = True
        return ch

    def _advance(self):
        ch = self._read()
        while ch in WHITESPACE:
            ch = self._read()
        if not ch:
            return None

        word = []
        while ch and ch not in WHITESPACE:
            word.append(ch)
            ch = self._read()
        return "".join(word)
