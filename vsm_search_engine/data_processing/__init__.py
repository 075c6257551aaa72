from .data_loader import CorpusLoader, Document, ConfigurationError, load_stopwords, load_nltk_stopwords
from .preprocessing import TextPreprocessor, tokenize, unique_tokens, remove_stopwords

__all__ = [
    'CorpusLoader', 'Document', 'ConfigurationError', 'load_stopwords', 'load_nltk_stopwords',
    'TextPreprocessor', 'tokenize', 'unique_tokens', 'remove_stopwords'
]
