import math
from collections import namedtuple
from types import MappingProxyType
from typing import Iterable, Mapping, Sequence, Union
import numpy as np

from vsm_search_engine.data_processing import Document, TextPreprocessor
from .vocabulary import Vocabulary, build_vocabulary
from .vectorizer import DocumentRecord, build_document_records, term_frequency_matrix

# vocabulary: sorted tuple of terms; documents: tuple of DocumentRecord;
# idf_vector: read-only {term: idf_weight}
Index = namedtuple('Index', ['vocabulary', 'documents', 'idf_vector'])


def compute_idf(records: Sequence[DocumentRecord], vocabulary: Vocabulary) -> Mapping[str, float]:
    """
    Computes inverse document frequency for every vocabulary term.
    IDF(t) = log10(N / DF(t)), DF(t) being the number of records with a
    positive count for t.

    :param records: All document records of the corpus.
    :param vocabulary: The vocabulary the records were built over.
    :return: Read-only mapping {term: idf}, in vocabulary order.
    """
    tf_matrix = term_frequency_matrix(records, vocabulary)

    total_documents = len(records)
    doc_freqs = np.count_nonzero(tf_matrix > 0, axis=0)

    idf_vector = {}
    for term, doc_freq in zip(vocabulary, doc_freqs):
        idf_vector[term] = math.log10(total_documents / doc_freq) if doc_freq > 0 else 0.0
    return MappingProxyType(idf_vector)


def build_index(corpus: Iterable[Document], stopwords: Union[Iterable[str], TextPreprocessor] = ()) -> Index:
    """
    Builds the search index in two passes over the corpus: the vocabulary pass,
    then the vectorization pass, followed by the IDF computation.

    An empty corpus is not an error; it yields an index with an empty vocabulary
    against which every query ranks to an empty list.

    :param corpus: Iterable of (doc_id, text) pairs. Consumed into a list, since it is read twice.
    :param stopwords: Lowercase stopwords, or a TextPreprocessor holding them.
    :return: An immutable Index.
    """
    corpus = list(corpus)
    if not corpus:
        print("Warning: Corpus is empty. Queries will return no results.")

    print(f"Building vocabulary from {len(corpus)} documents...")
    vocabulary = build_vocabulary(corpus, stopwords)
    print(f"Vocabulary built with {len(vocabulary)} terms.")

    documents = build_document_records(corpus, vocabulary)

    print("Computing IDF weights...")
    idf_vector = compute_idf(documents, vocabulary)

    return Index(vocabulary=vocabulary, documents=documents, idf_vector=idf_vector)


def vocabulary_size(index: Index) -> int:
    return len(index.vocabulary)
