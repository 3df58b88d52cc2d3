class VocabularyError(ValueError):
    """Errors raised by load_vocabulary when the word lists do not line up"""
