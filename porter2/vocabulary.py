import logging
from typing import NamedTuple, Optional

from .errors import VocabularyError
from .stemmer import EnglishStemmer

logger = logging.getLogger(__name__)


class Mismatch(NamedTuple):
    word: str
    expected: str
    actual: str


def _read_words(path):
    with open(path, "r", encoding="utf-8") as f:
        words = [line.strip() for line in f.readlines()]

    while words and not words[-1]:
        words.pop()

    return words


def load_vocabulary(input_path: str, output_path: str) -> list[tuple[str, str]]:
    """
    Load a pair of line aligned files, one input word per line in
    "input_path" and its expected stem on the same line of "output_path"

    Raises:
        VocabularyError: the files hold a different number of words
    """
    words, stems = _read_words(input_path), _read_words(output_path)

    if len(words) != len(stems):
        raise VocabularyError(
            f"{input_path} has {len(words)} words but {output_path} has {len(stems)} stems"
        )

    return list(zip(words, stems))


def check_vocabulary(
    pairs: list[tuple[str, str]], stemmer: Optional[EnglishStemmer] = None
) -> list[Mismatch]:
    """Stem every word and return the ones that differ from the expected stem"""
    stemmer = stemmer or EnglishStemmer()
    mismatches = []

    for word, expected in pairs:
        if (actual := stemmer.stem(word)) != expected:
            logger.debug("%s: expected %s, got %s", word, expected, actual)
            mismatches.append(Mismatch(word, expected, actual))

    logger.info("checked %d words, %d mismatches", len(pairs), len(mismatches))
    return mismatches
