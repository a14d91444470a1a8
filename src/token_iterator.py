import logging

from token_errors import NoTokenAvailable

logger = logging.getLogger(__name__)


class TokenIterator:
    """
    Pull-based token cursor with one token of lookahead.

    has_next() fills the lookahead slot by calling _advance(); next() hands the slot out and empties it.
    next() only returns a token that a previous has_next() call already found, so callers are expected to
    alternate the two. Once _advance() reports the end by returning None, the iterator stays exhausted and
    _advance() is never called again.

    The iterator protocol is supported as well, so `for token in it` and `list(it)` work.
    """

    def __init__(self):
        self._pending = None
        self._exhausted = False

    def _advance(self):
        """Produce the next token, or None when there are no more."""
        raise NotImplementedError

    def has_next(self) -> bool:
        if self._pending is not None:
            return True
        if self._exhausted:
            return False

        token = self._advance()
        if token is None:
            self._exhausted = True
            logger.debug("%s exhausted", type(self).__name__)
            return False
        self._pending = token
        return True

    def next(self) -> str:
        if self._pending is None:
            if self._exhausted:
                raise NoTokenAvailable(f"{type(self).__name__} is exhausted")
            raise NoTokenAvailable("next() called without a successful has_next()")
        token = self._pending
        self._pending = None
        return token

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self):
        return self

    def __next__(self) -> str:
        if not self.has_next():
            raise StopIteration
        return self.next()
