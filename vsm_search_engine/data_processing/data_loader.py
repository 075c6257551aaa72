import os
from collections import namedtuple
from typing import Iterator, List
from tqdm import tqdm

Document = namedtuple('Document', ['doc_id', 'text'])


class ConfigurationError(ValueError):
    """Raised when the corpus directory or the stopword source cannot be used."""


class CorpusLoader:
    def __init__(self, corpus_path: str, encoding: str = 'utf-8'):
        """
        Initializes the CorpusLoader.

        :param corpus_path: Directory holding the corpus. Every regular file in the
                            tree is one document.
        :param encoding: Encoding used to decode document bytes.
        """
        self.corpus_path = os.path.abspath(corpus_path)
        self.encoding = encoding

    def _collect_filepaths(self) -> List[str]:
        if not os.path.isdir(self.corpus_path):
            raise ConfigurationError(f"Corpus path '{self.corpus_path}' is not a directory.")
        if not os.access(self.corpus_path, os.R_OK | os.X_OK):
            raise ConfigurationError(f"Corpus directory '{self.corpus_path}' is not readable.")

        filepaths = []
        for root, dirs, files in os.walk(self.corpus_path):
            dirs.sort()
            for filename in files:
                filepath = os.path.join(root, filename)
                if os.path.isfile(filepath):
                    filepaths.append(filepath)
        # Directory traversal order is platform dependent; ties in ranking follow this order.
        return sorted(filepaths)

    def iter_documents(self) -> Iterator[Document]:
        """
        Yields a Document for every file under the corpus directory, in sorted path order.
        Files that cannot be read are reported and skipped.

        :raises ConfigurationError: If the corpus path is not a readable directory.
        """
        filepaths = self._collect_filepaths()
        for filepath in tqdm(filepaths, desc="Loading documents"):
            try:
                text = self.read_document(filepath)
            except OSError as e:
                print(f"Warning: Could not load file {filepath}: {e}")
                continue
            yield Document(filepath, text)

    def load_documents(self) -> List[Document]:
        print(f"Loading documents from '{self.corpus_path}'...")
        documents = list(self.iter_documents())
        print(f"Loaded {len(documents)} documents.")
        return documents

    def read_document(self, doc_id: str) -> str:
        """Reads a document's content by its identifier (the file path)."""
        with open(doc_id, 'rb') as f:
            data = f.read()
        return data.decode(self.encoding, errors='replace')


def load_stopwords(filepath: str) -> List[str]:
    """
    Loads a stopword list, one word per line. Words are stripped and lower-cased,
    blank lines are skipped and file order is kept.

    :raises ConfigurationError: If the file cannot be read.
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Could not read stopword file '{filepath}': {e}") from e

    return [line.strip().lower() for line in lines if line.strip()]


def load_nltk_stopwords(language: str = 'english') -> List[str]:
    """
    Loads the NLTK stopword list for the given language, downloading the
    stopwords corpus on first use.

    :raises ConfigurationError: If the corpus is unavailable or has no list for the language.
    """
    import nltk
    from nltk.corpus import stopwords

    try:
        nltk.data.find('corpora/stopwords')
    except LookupError:
        print("NLTK stopwords corpus not found. Downloading...")
        nltk.download('stopwords', quiet=True)

    try:
        return [word.lower() for word in stopwords.words(language)]
    except (LookupError, OSError) as e:
        raise ConfigurationError(f"NLTK stopwords for '{language}' are not available: {e}") from e
