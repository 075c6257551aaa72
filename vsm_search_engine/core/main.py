import argparse
import sys
import time
from collections import namedtuple
from typing import Callable, List, Optional, Tuple

from vsm_search_engine import config
from vsm_search_engine.data_processing import CorpusLoader, ConfigurationError, load_stopwords, load_nltk_stopwords
from vsm_search_engine.retrieval_models import VectorSpaceModel, SearchResponse, build_index

PROMPT = "Enter command > "

# lines: output for stdout; error: message for stderr or None; exit: leave the loop
CommandResult = namedtuple('CommandResult', ['lines', 'error', 'exit'])


def load_stopword_list(stopwords_path: Optional[str], language: str = config.STOPWORDS_LANGUAGE) -> List[str]:
    """Stopwords from a file if one is configured, otherwise from the NLTK corpus."""
    if stopwords_path:
        print(f"Loading stopwords from '{stopwords_path}'...")
        return load_stopwords(stopwords_path)
    print(f"Loading NLTK stopwords ({language})...")
    return load_nltk_stopwords(language)


def build_search_engine(corpus_dir: str, stopwords_path: Optional[str] = None,
                        language: str = config.STOPWORDS_LANGUAGE) -> Tuple[CorpusLoader, VectorSpaceModel]:
    """
    Loads stopwords and corpus, builds the index and wraps it in a VectorSpaceModel.

    :raises ConfigurationError: If the corpus directory or the stopword source is unusable.
    """
    stopwords = load_stopword_list(stopwords_path, language)
    loader = CorpusLoader(corpus_dir)
    documents = loader.load_documents()

    start_time = time.time()
    index = build_index(documents, stopwords)
    vsm_model = VectorSpaceModel(index)
    print(f"Index built in {time.time() - start_time:.2f} seconds ({vsm_model.total_documents} documents).")
    return loader, vsm_model


class SearchConsole:
    """
    Command interpreter for the interactive search loop. Every command returns a
    CommandResult instead of printing or raising, so the loop decides presentation.
    """

    def __init__(self, vsm_model: VectorSpaceModel, loader: CorpusLoader, top_k: int = config.TOP_K):
        self.vsm_model = vsm_model
        self.loader = loader
        self.top_k = top_k
        self.last_response: Optional[SearchResponse] = None
        self.commands = {
            'query': self._query,
            'type': self._type,
            'results': self._results,
        }

    def execute(self, line: str) -> CommandResult:
        line = line.strip()
        if not line:
            return CommandResult([], None, False)

        parts = line.split(None, 1)
        command = parts[0].lower()
        argument = parts[1].strip() if len(parts) > 1 else ''

        if command == 'exit':
            return CommandResult([], None, True)
        handler = self.commands.get(command)
        if handler is None:
            return CommandResult(["Unknown command."], None, False)
        return handler(argument)

    def _query(self, argument: str) -> CommandResult:
        if not argument:
            return CommandResult([], "Invalid input for query command. Missing input after 'query'.", False)
        self.last_response = self.vsm_model.rank(argument)
        return CommandResult(self.format_results(), None, False)

    def _results(self, argument: str) -> CommandResult:
        if self.last_response is None:
            return CommandResult([], "Invalid 'results' command call. Enter a query first.", False)
        if argument:
            return CommandResult([], "'results' command accepts no extra arguments.", False)
        return CommandResult(self.format_results(), None, False)

    def _type(self, argument: str) -> CommandResult:
        if self.last_response is None:
            return CommandResult([], "Invalid 'type' command call. Enter a query first.", False)
        if not argument:
            return CommandResult([], "Invalid input for type command. Missing input after 'type'.", False)
        try:
            position = int(argument)
        except ValueError:
            return CommandResult([], "Invalid input for type command. Argument must be an integer.", False)

        shown = min(len(self.last_response.results), self.top_k)
        if position < 0 or position >= shown:
            return CommandResult([], f"Invalid input for type command. Index out of range. Was: {position}", False)

        doc_id = self.last_response.results[position].doc_id
        try:
            text = self.loader.read_document(doc_id)
        except OSError as e:
            return CommandResult([], f"Error occurred while reading document {doc_id}: {e}", False)
        return CommandResult([f"Document: {doc_id}", text.strip()], None, False)

    def format_results(self) -> List[str]:
        results = self.last_response.results[:self.top_k]
        if not results:
            return ["There are no similar documents."]

        lines = [
            f"Query is: [{', '.join(self.last_response.query_terms)}]",
            f"Top {len(results)} results:",
        ]
        for i, result in enumerate(results):
            lines.append(f"[{i:2d}] ({result.score:.4f}) {result.doc_id}")
        return lines


def run_console(console: SearchConsole, read_line: Callable[[str], str] = input) -> None:
    while True:
        try:
            line = read_line(f"\n{PROMPT}")
        except EOFError:
            print()
            break

        outcome = console.execute(line)
        for output_line in outcome.lines:
            print(output_line)
        if outcome.error:
            print(outcome.error, file=sys.stderr)
        if outcome.exit:
            break


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="TF-IDF vector space document search console")
    parser.add_argument('corpus_dir', nargs='?', default=config.CORPUS_DIR,
                        help="Directory with the documents to index")
    parser.add_argument('--stopwords', default=config.STOPWORDS_PATH,
                        help="Stopword file, one word per line (default: NLTK stopwords)")
    parser.add_argument('--language', default=config.STOPWORDS_LANGUAGE,
                        help="NLTK stopword language used when no stopword file is given")
    parser.add_argument('--top-k', type=positive_int, default=config.TOP_K,
                        help="Number of results shown per query")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    print("--- TF-IDF Document Search ---")
    args = parse_args(argv)

    try:
        loader, vsm_model = build_search_engine(args.corpus_dir, args.stopwords, args.language)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Vocabulary size is {vsm_model.vocabulary_size()} words.")
    run_console(SearchConsole(vsm_model, loader, top_k=args.top_k))
    print("Exiting search engine. Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
