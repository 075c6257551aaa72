from typing import Iterable, Tuple, Union
from tqdm import tqdm

from vsm_search_engine.data_processing import Document, TextPreprocessor

Vocabulary = Tuple[str, ...]


def build_vocabulary(corpus: Iterable[Document], stopwords: Union[Iterable[str], TextPreprocessor] = ()) -> Vocabulary:
    """
    Collects the global vocabulary of a corpus.

    Each document contributes its unique tokens minus the stopwords. The result is
    sorted, so it does not depend on the order in which documents are processed.

    :param corpus: Iterable of (doc_id, text) pairs.
    :param stopwords: Lowercase stopwords, or a TextPreprocessor already holding them.
    :return: Sorted tuple of unique terms.
    """
    preprocessor = stopwords if isinstance(stopwords, TextPreprocessor) else TextPreprocessor(stopwords)

    terms = set()
    for _doc_id, text in tqdm(corpus, desc="Building vocabulary"):
        terms.update(preprocessor.preprocess_document(text))
    return tuple(sorted(terms))


def vocabulary_lookup(vocabulary: Vocabulary) -> dict:
    """Maps each term to its position (vector dimension) in the vocabulary."""
    return {term: position for position, term in enumerate(vocabulary)}
