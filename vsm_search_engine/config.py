import os

from vsm_search_engine.data_processing.data_loader import ConfigurationError


def _positive_int_env(name: str, default: int) -> int:
    raw_value = os.environ.get(name)
    if raw_value is None:
        return default
    try:
        value = int(raw_value)
    except ValueError:
        raise ConfigurationError(f"{name} must be a positive integer, got '{raw_value}'.") from None
    if value < 1:
        raise ConfigurationError(f"{name} must be a positive integer, got {value}.")
    return value


# Paths are resolved relative to the repository root unless given as absolute.
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
DATA_DIR = os.path.join(PROJECT_ROOT, 'data')

CORPUS_DIR = os.environ.get('VSM_CORPUS_DIR', os.path.join(DATA_DIR, 'corpus'))
# Unset means: use the NLTK stopword list for STOPWORDS_LANGUAGE.
STOPWORDS_PATH = os.environ.get('VSM_STOPWORDS_PATH') or None
STOPWORDS_LANGUAGE = os.environ.get('VSM_STOPWORDS_LANGUAGE', 'english')
TOP_K = _positive_int_env('VSM_TOP_K', 10)
