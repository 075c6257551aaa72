from .core import app, main
from .data_processing import CorpusLoader, Document, ConfigurationError, TextPreprocessor, tokenize, unique_tokens
from .retrieval_models import Index, VectorSpaceModel, SimilarityResult, SearchResponse, build_index, rank, vocabulary_size

__all__ = [
    'app', 'main',
    'CorpusLoader', 'Document', 'ConfigurationError', 'TextPreprocessor', 'tokenize', 'unique_tokens',
    'Index', 'VectorSpaceModel', 'SimilarityResult', 'SearchResponse', 'build_index', 'rank', 'vocabulary_size'
]
