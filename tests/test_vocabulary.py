import os
import pytest
from porter2 import (
    EnglishStemmer,
    Mismatch,
    VocabularyError,
    check_vocabulary,
    load_vocabulary,
)

ASSETS = os.path.join(os.path.dirname(__file__), "assets")


@pytest.fixture
def vocabulary():
    return load_vocabulary(
        os.path.join(ASSETS, "voc.txt"), os.path.join(ASSETS, "output.txt")
    )


def test_dictionary(vocabulary):
    assert len(vocabulary) > 0

    stemmer = EnglishStemmer()
    for word, expected in vocabulary:
        result = stemmer.stem(word)
        assert (
            result == expected
        ), f"Input: {word} Output: {expected} Returned: {result}"


def test_check_vocabulary(vocabulary):
    assert check_vocabulary(vocabulary) == []


def test_check_vocabulary_mismatch():
    mismatches = check_vocabulary([("caresses", "caress"), ("ponies", "pony")])
    assert mismatches == [Mismatch("ponies", "pony", "poni")]


def test_load_vocabulary_strips_lines(tmp_path):
    voc, output = tmp_path / "voc.txt", tmp_path / "output.txt"
    voc.write_text("running\n  knitting \n\n")
    output.write_text("run\nknit\n")

    assert load_vocabulary(str(voc), str(output)) == [
        ("running", "run"),
        ("knitting", "knit"),
    ]


def test_load_vocabulary_misaligned(tmp_path):
    voc, output = tmp_path / "voc.txt", tmp_path / "output.txt"
    voc.write_text("running\nknitting\n")
    output.write_text("run\n")

    with pytest.raises(VocabularyError):
        load_vocabulary(str(voc), str(output))


def test_load_vocabulary_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_vocabulary(str(tmp_path / "voc.txt"), str(tmp_path / "output.txt"))


# stems produced by rules added in later snowball releases
LATER_SNOWBALL_DIFFERENCES = {"communication"}


def test_matches_pystemmer(vocabulary):
    Stemmer = pytest.importorskip("Stemmer")

    reference = Stemmer.Stemmer("english")
    stemmer = EnglishStemmer()

    for word, _ in vocabulary:
        if word in LATER_SNOWBALL_DIFFERENCES:
            continue

        assert stemmer.stem(word) == reference.stemWord(word), f"Input: {word}"
