from .errors import VocabularyError
from .stemmer import EnglishStemmer, SegmentCache, stem
from .vocabulary import Mismatch, check_vocabulary, load_vocabulary

__all__ = [
    "EnglishStemmer",
    "Mismatch",
    "SegmentCache",
    "VocabularyError",
    "check_vocabulary",
    "load_vocabulary",
    "stem",
]
