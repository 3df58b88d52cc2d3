import re
import logging

from line_profiler import profile

from .rules import (
    DOUBLES,
    EXCEPTIONS,
    INVARIANT_FORMS,
    LI_ENDINGS,
    SECOND_LEVEL_EXCEPTIONS,
    SEGMENT_EXCEPTIONS,
    STEP_1B_RULES,
    STEP_2_RULES,
    STEP_3_RULES,
    STEP_4_SUFFIXES,
    VOWELS,
)

logger = logging.getLogger(__name__)


class SegmentCache:
    """R1/R2 lookups memoized per word, scoped to a single stem() call"""

    def __init__(self, segments):
        self._segments = segments
        self._cache: dict[str, tuple[str, str]] = {}

    def __call__(self, word: str) -> tuple[str, str]:
        if word not in self._cache:
            self._cache[word] = self._segments(word)

        return self._cache[word]


class EnglishStemmer:
    """
    English stemmer based on the Porter2 algorithm
    https://snowballstem.org/algorithms/english/stemmer.html

    Checked against the snowball vocabulary diffs
    http://snowball.tartarus.org/algorithms/english/diffs.txt

    The instance holds no per-word state, so a single stemmer can be shared
    between threads.
    """

    REGION_REGEX = re.compile(r"[aeiouy][^aeiouy]")
    VOWEL_REGEX = re.compile(r"[aeiouy]")
    SHORT_SYLLABLE_REGEX = re.compile(r"[^aeiouy][aeiouy][^aeiouywxY]$")
    SHORT_WORD_REGEX = re.compile(r"^[aeiouy][^aeiouy]$")

    @profile
    def stem(self, word: str) -> str:
        """
        Stem the word if it has more than two characters,
        otherwise return it as is.
        """
        if len(word) <= 2:
            return word

        word = word.lower()

        if word in INVARIANT_FORMS:
            return word
        if word in EXCEPTIONS:
            logger.debug("%s resolved by exception table", word)
            return EXCEPTIONS[word]

        segments = SegmentCache(self.segments)

        word = self.mark_vowels(word)
        word = self.step_0(word)
        word = self.step_1a(word)

        if word in SECOND_LEVEL_EXCEPTIONS:
            logger.debug("%s resolved by second level exceptions", word)
        else:
            word = self.step_1b(word, segments)
            word = self.step_1c(word)
            word = self.step_2(word, segments)
            word = self.step_3(word, segments)
            word = self.step_4(word, segments)
            word = self.step_5(word, segments)

        return word.replace("Y", "y")

    def segments(self, word: str) -> tuple[str, str]:
        """Return the (R1, R2) regions of the word, "" for an empty region"""
        r1 = None

        for prefix in SEGMENT_EXCEPTIONS:
            if word.startswith(prefix):
                if word == prefix:
                    return "", ""

                word = r1 = word[len(prefix) :]
                break

        regions = []
        for match in self.__class__.REGION_REGEX.finditer(word):
            regions.append(word[match.end() :])
            if len(regions) == (1 if r1 is not None else 2):
                break

        if r1 is not None:
            return r1, regions[0] if regions else ""

        regions += [""] * (2 - len(regions))
        return regions[0], regions[1]

    def mark_vowels(self, word):
        if not word:
            return word

        chars = list(word)
        if chars[0] == "y":
            chars[0] = "Y"

        for index in range(1, len(chars)):
            if chars[index] != "y":
                continue

            previous = chars[index - 1]
            if previous in VOWELS or (index == 1 and previous == "Y"):
                chars[index] = "Y"

        return "".join(chars)

    def has_vowel(self, word):
        return self.__class__.VOWEL_REGEX.search(word) is not None

    def is_short(self, word):
        """
        Check whether the word ends in a short syllable, e.g. "hop", "rap",
        "trap" or a two letter word like "on".
        """
        if len(word) == 2:
            return self.__class__.SHORT_WORD_REGEX.match(word) is not None

        return self.__class__.SHORT_SYLLABLE_REGEX.search(word) is not None

    def step_0(self, word):
        if word.startswith("'"):
            word = word[1:]

        if "'" not in word[-3:]:
            return word

        if word.endswith("'s'"):
            return word[:-3]
        elif word.endswith("'s"):
            return word[:-2]
        elif word.endswith("'"):
            return word[:-1]

        return word

    def step_1a(self, word):
        if word.endswith("sses"):
            return word[:-2]
        elif word.endswith(("ied", "ies")):
            word = word[:-2]
            if len(word) <= 2:
                word += "e"
            return word
        elif word.endswith(("us", "ss")):
            return word
        elif word.endswith("s") and self.has_vowel(word[:-2]):
            return word[:-1]

        return word

    def step_1b(self, word, segments=None):
        segments = self.segments if segments is None else segments

        for suffix, mode in STEP_1B_RULES.items():
            if not word.endswith(suffix):
                continue

            if mode == 1:
                r1, _ = segments(word)
                if len(r1) >= len(suffix):
                    return word[: -len(suffix)] + "ee"
                return word

            stem = word[: -len(suffix)]
            if not self.has_vowel(stem):
                return word

            if stem.endswith(("at", "bl", "iz")):
                return stem + "e"
            elif stem[-2:] in DOUBLES:
                return stem[:-1]

            r1, _ = segments(stem)
            if r1 == "" and self.is_short(stem):
                return stem + "e"

            return stem

        return word

    def step_1c(self, word):
        if len(word) > 2 and word[-1] in "yY" and word[-2] not in VOWELS:
            return word[:-1] + "i"

        return word

    def step_2(self, word, segments=None):
        segments = self.segments if segments is None else segments

        for suffix, repl in STEP_2_RULES.items():
            if word.endswith(suffix):
                r1, _ = segments(word)
                if len(r1) < len(suffix):
                    return word

                return word[: -len(suffix)] + repl

        if word.endswith("ogi"):
            r1, _ = segments(word)
            if len(r1) >= 3 and word[-4:-3] == "l":
                return word[:-3] + "og"
        elif word.endswith("li"):
            r1, _ = segments(word)
            if len(r1) >= 2 and word[-3:-2] in LI_ENDINGS:
                return word[:-2]

        return word

    def step_3(self, word, segments=None):
        segments = self.segments if segments is None else segments

        for suffix, rule in STEP_3_RULES.items():
            if not word.endswith(suffix):
                continue

            r1, r2 = segments(word)
            if len(r1) < len(suffix):
                return word

            if rule is True:
                # "ative" has to be in R2 as well
                if len(r2) >= len(suffix):
                    return word[: -len(suffix)]
                return word
            elif rule is False:
                return word[: -len(suffix)]

            return word[: -len(suffix)] + rule

        return word

    def step_4(self, word, segments=None):
        segments = self.segments if segments is None else segments

        for suffix in STEP_4_SUFFIXES:
            if not word.endswith(suffix):
                continue

            _, r2 = segments(word)
            if len(r2) < len(suffix):
                return word

            if suffix == "ion" and word[-4:-3] not in ("s", "t"):
                return word

            return word[: -len(suffix)]

        return word

    def step_5(self, word, segments=None):
        segments = self.segments if segments is None else segments

        if word.endswith("e"):
            r1, r2 = segments(word)
            if r2:
                return word[:-1]
            elif r1 and not self.is_short(word[:-1]):
                return word[:-1]

        elif word.endswith("l"):
            _, r2 = segments(word)
            if r2 and word.endswith("ll"):
                return word[:-1]

        return word


_stemmer = EnglishStemmer()


def stem(word: str) -> str:
    """Stem a single English word with the shared stemmer"""
    return _stemmer.stem(word)
