from itertools import groupby
from typing import List, Iterable, Set


def tokenize(text: str) -> List[str]:
    """
    Splits raw text into a stream of lowercase alphabetic tokens.

    A token is a maximal run of alphabetic characters (``str.isalpha``, so
    letters of any script count). Digits, punctuation and whitespace separate
    tokens and never appear inside one.

    :param text: Raw document or query text.
    :return: Tokens in order of appearance, duplicates kept.
    """
    return [''.join(run).lower() for is_alpha, run in groupby(text, key=str.isalpha) if is_alpha]


def unique_tokens(text: str) -> List[str]:
    """Returns the sorted set of distinct tokens in the text."""
    return sorted(set(tokenize(text)))


def remove_stopwords(tokens: Iterable[str], stopwords: Set[str]) -> List[str]:
    # Exact match: stopwords are expected to be lowercase already.
    return [token for token in tokens if token not in stopwords]


class TextPreprocessor:
    def __init__(self, stopwords: Iterable[str] = ()):
        self.stop_words = frozenset(stopwords)

    def preprocess_document(self, text: str) -> List[str]:
        """
        Returns the unique, stopword-filtered terms of a document. This is the
        contribution a single document makes to the vocabulary.
        """
        return remove_stopwords(unique_tokens(text), self.stop_words)
