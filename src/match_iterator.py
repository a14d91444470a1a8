import logging
import re

from token_errors import InvalidPattern
from token_iterator import TokenIterator

logger = logging.getLogger(__name__)

SENTENCE_PATTERN = re.compile(r"[^.!?]*[.!?]")
NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+(?:\.[0-9]+)?")
DEFAULT_PATTERN = ".+"


def compile_pattern(pattern: str):
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPattern(pattern, str(e)) from e


class MatchIterator(TokenIterator):
    def __init__(self, text: str, pattern, select=None):
        """
        Walks the non-overlapping matches of a compiled pattern over an already buffered string.

        select maps each match to its token; returning None skips the match and the scan moves on.
        By default the token is the whole matched text.
        """
        super().__init__()
        self.text = text
        self.pattern = pattern
        self.select = select if select is not None else _whole_match
        self.pos = 0

    def _advance(self):
        while self.pos <= len(self.text):
            match = self.pattern.search(self.text, self.pos)
            if match is None:
                self.pos = len(self.text) + 1
                return None

            start, end = match.span()
            # a zero-width match must still move the cursor forward
            self.pos = end + 1 if start == end else end

            token = self.select(match)
            if token is not None:
                return token
        return None


def _whole_match(match):
    return match.group()


def _stripped_sentence(match):
    sentence = match.group().strip()
    return sentence or None


class SentenceIterator(MatchIterator):
    """
    Sentences ending in '.', '!' or '?', stripped of surrounding whitespace.
    Text after the last terminator is dropped.
    """

    def __init__(self, source):
        super().__init__(source.read_all(), SENTENCE_PATTERN, _stripped_sentence)


class NumberIterator(MatchIterator):
    """Signed integer and decimal literals, exactly as written in the input."""

    def __init__(self, source):
        super().__init__(source.read_all(), NUMBER_PATTERN)


class RegexIterator(MatchIterator):
    def __init__(self, source, pattern=None):
        """
        Every match of pattern over the whole input. The default pattern '.+' has no DOTALL flag,
        so it yields each non-empty line as one token.
        The pattern is compiled before any input is read.
        """
        if pattern is None:
            pattern = DEFAULT_PATTERN
        compiled = compile_pattern(pattern)
        logger.debug("Compiled pattern %r", pattern)
        super().__init__(source.read_all(), compiled)
