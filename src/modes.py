from enum import Enum

from char_iterator import CharIterator
from match_iterator import NumberIterator, RegexIterator, SentenceIterator
from token_errors import MissingPattern, UnknownMode
from word_iterator import WordIterator


class Mode(Enum):
    CHARS = "c"
    WORDS = "w"
    SENTENCES = "s"
    NUMBERS = "n"
    REGEX = "r"

    @classmethod
    def parse(cls, value: str):
        try:
            return cls(value)
        except ValueError:
            raise UnknownMode(value) from None

    @property
    def needs_pattern(self) -> bool:
        return self is Mode.REGEX


MODE_HELP = "c=chars, w=words, s=sentences, n=numbers, r=regex"


def build_iterator(mode: Mode, source, pattern=None):
    """
    Construct the tokenizer for mode over source.
    Regex mode requires a pattern; the other modes ignore it.
    """
    if mode is Mode.CHARS:
        return CharIterator(source)
    if mode is Mode.WORDS:
        return WordIterator(source)
    if mode is Mode.SENTENCES:
        return SentenceIterator(source)
    if mode is Mode.NUMBERS:
        return NumberIterator(source)
    if mode is Mode.REGEX:
        if pattern is None:
            raise MissingPattern()
        return RegexIterator(source, pattern)
    raise UnknownMode(str(mode))
