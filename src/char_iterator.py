import logging

from token_errors import SourceReadError
from token_iterator import TokenIterator

logger = logging.getLogger(__name__)


class CharIterator(TokenIterator):
    """
    Streams one token per character, whitespace included.
    A failed read ends the stream the same way end of input does.
    """

    def __init__(self, source):
        super().__init__()
        self.source = source

    def _advance(self):
        try:
            ch = self.source.read_char()
        except SourceReadError as e:
            logger.debug("Treating read error as end of stream: %s", e)
            return None
        return ch or None
