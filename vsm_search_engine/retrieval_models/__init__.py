from .vocabulary import build_vocabulary
from .vectorizer import DocumentRecord, build_document_records, filter_tokens, build_tf_vector, vectorize
from .indexer import Index, build_index, compute_idf, vocabulary_size
from .retrieval_model import VectorSpaceModel, SimilarityResult, SearchResponse, rank

__all__ = [
    'build_vocabulary', 'DocumentRecord', 'build_document_records', 'filter_tokens', 'build_tf_vector', 'vectorize',
    'Index', 'build_index', 'compute_idf', 'vocabulary_size',
    'VectorSpaceModel', 'SimilarityResult', 'SearchResponse', 'rank'
]
