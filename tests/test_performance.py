import os
import timeit
import statistics
import pytest
from porter2 import EnglishStemmer, load_vocabulary

ASSETS = os.path.join(os.path.dirname(__file__), "assets")


@pytest.fixture
def words():
    pairs = load_vocabulary(
        os.path.join(ASSETS, "voc.txt"), os.path.join(ASSETS, "output.txt")
    )
    return [word for word, _ in pairs]


def test_performance(words):
    stemmer = EnglishStemmer()

    def stem_words():
        for w in words:
            stemmer.stem(w)

    times = timeit.repeat(stem_words, number=10, repeat=5)

    print(f"\nSTEMMING TIME OF {len(words)} WORDS x 10")
    print(f"MIN TIME: {min(times)}")
    print(f"MAX TIME: {max(times)}")
    print(f"AVG TIME: {statistics.mean(times)}\n")

    assert all(t > 0 for t in times)
