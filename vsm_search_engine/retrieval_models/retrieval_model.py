from collections import namedtuple
from typing import List, Optional
import numpy as np

from .indexer import Index
from .vocabulary import vocabulary_lookup
from .vectorizer import filter_tokens, build_tf_vector, term_frequency_matrix

SimilarityResult = namedtuple('SimilarityResult', ['doc_id', 'score'])
SearchResponse = namedtuple('SearchResponse', ['query_terms', 'results'])


def cosine_similarity_batch(query: np.ndarray, vectors: np.ndarray) -> np.ndarray:
    """
    Cosine similarity between one query vector and every row of a matrix.

    Rows or queries with a zero norm produce NaN instead of raising; callers
    decide what to do with those scores.

    :param query: Vector of shape (terms,).
    :param vectors: Matrix of shape (documents, terms).
    :return: Array of shape (documents,).
    """
    dots = vectors @ query
    vector_norms = np.linalg.norm(vectors, axis=1)
    query_norm = np.linalg.norm(query)
    with np.errstate(divide='ignore', invalid='ignore'):
        return dots / (vector_norms * query_norm)


class VectorSpaceModel:
    def __init__(self, index: Index):
        self.index = index
        self.total_documents = len(index.documents)
        self._lookup = vocabulary_lookup(index.vocabulary)
        self._doc_positions = {record.doc_id: row for row, record in enumerate(index.documents)}

        self._idf_weights = np.array([index.idf_vector[term] for term in index.vocabulary], dtype=np.float64)
        tf_matrix = term_frequency_matrix(index.documents, index.vocabulary)
        # Both the matrix and the index are read-only once built.
        self._tfidf_matrix = tf_matrix * self._idf_weights
        self._tfidf_matrix.setflags(write=False)

    def vocabulary_size(self) -> int:
        return len(self.index.vocabulary)

    def has_document(self, doc_id: str) -> bool:
        return doc_id in self._doc_positions

    def _vectorize_query(self, query_text: str):
        query_terms = filter_tokens(query_text, self.index.vocabulary, self._lookup)
        tf_vector = build_tf_vector(query_terms, self.index.vocabulary)
        query_vector = np.fromiter(tf_vector.values(), dtype=np.float64, count=len(tf_vector)) * self._idf_weights
        return query_terms, query_vector

    def rank(self, query_text: str) -> SearchResponse:
        """
        Ranks every indexed document against the query by TF-IDF cosine similarity.

        Documents scoring exactly 0 or NaN (no shared terms, or an empty vector on
        either side) are dropped. The rest are sorted by descending score; the sort
        is stable, so equal scores keep corpus order. No truncation happens here.

        :param query_text: Raw query text.
        :return: SearchResponse with the vocabulary terms used from the query and
                 the ranked list of SimilarityResult.
        """
        query_terms, query_vector = self._vectorize_query(query_text)
        scores = cosine_similarity_batch(query_vector, self._tfidf_matrix)

        results = [
            SimilarityResult(record.doc_id, float(score))
            for record, score in zip(self.index.documents, scores)
            if score != 0.0 and not np.isnan(score)
        ]
        results.sort(key=lambda result: result.score, reverse=True)
        return SearchResponse(query_terms=query_terms, results=results)

    def search(self, query_text: str, top_k: int = 10) -> List[SimilarityResult]:
        """Ranks the corpus and keeps the best top_k results."""
        return self.rank(query_text).results[:top_k]

    def score_document(self, query_text: str, doc_id: str) -> Optional[float]:
        """
        Cosine similarity of a single document to the query, unfiltered (may be 0.0 or NaN).
        Returns None if the document is not in the index.
        """
        row = self._doc_positions.get(doc_id)
        if row is None:
            return None
        _query_terms, query_vector = self._vectorize_query(query_text)
        return float(cosine_similarity_batch(query_vector, self._tfidf_matrix[row:row + 1])[0])


def rank(index: Index, query_text: str) -> SearchResponse:
    """One-off ranking against an index. Build a VectorSpaceModel to serve many queries."""
    return VectorSpaceModel(index).rank(query_text)
