from collections import Counter, namedtuple
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
import numpy as np
from tqdm import tqdm

from vsm_search_engine.data_processing import Document, tokenize
from .vocabulary import Vocabulary, vocabulary_lookup

DocumentRecord = namedtuple('DocumentRecord', ['doc_id', 'tf_vector'])


def filter_tokens(text: str, vocabulary: Vocabulary, lookup: Optional[Dict[str, int]] = None) -> List[str]:
    """
    Tokenizes the text and keeps only vocabulary terms, preserving order and repeats.
    For a query these are the terms actually used for scoring.
    """
    if lookup is None:
        lookup = vocabulary_lookup(vocabulary)
    return [token for token in tokenize(text) if token in lookup]


def build_tf_vector(tokens: Iterable[str], vocabulary: Vocabulary) -> Mapping[str, int]:
    """
    Builds a dense term-frequency vector: one entry per vocabulary term, in
    vocabulary order, 0 for terms that do not occur. Tokens outside the
    vocabulary are ignored.
    """
    counts = Counter(tokens)
    return MappingProxyType({term: counts.get(term, 0) for term in vocabulary})


def vectorize(text: str, vocabulary: Vocabulary, lookup: Optional[Dict[str, int]] = None) -> Mapping[str, int]:
    return build_tf_vector(filter_tokens(text, vocabulary, lookup), vocabulary)


def build_document_records(corpus: Iterable[Document], vocabulary: Vocabulary) -> Tuple[DocumentRecord, ...]:
    """
    Second indexing pass: one DocumentRecord per corpus document, in corpus order.

    :param corpus: Iterable of (doc_id, text) pairs.
    :param vocabulary: The frozen vocabulary from the first pass.
    """
    lookup = vocabulary_lookup(vocabulary)
    return tuple(
        DocumentRecord(doc_id, vectorize(text, vocabulary, lookup))
        for doc_id, text in tqdm(corpus, desc="Vectorizing documents")
    )


def term_frequency_matrix(records: Sequence[DocumentRecord], vocabulary: Vocabulary) -> np.ndarray:
    """Stacks the TF vectors into a (documents x terms) float matrix."""
    matrix = np.zeros((len(records), len(vocabulary)), dtype=np.float64)
    for row, record in enumerate(records):
        matrix[row] = np.fromiter(
            (record.tf_vector[term] for term in vocabulary), dtype=np.float64, count=len(vocabulary)
        )
    return matrix
