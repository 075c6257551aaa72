#!/usr/bin/env python3
"""
Tests for corpus and stopword loading.
"""

import os
import types

import nltk.corpus
import nltk.data
import pytest

from vsm_search_engine.data_processing import CorpusLoader, ConfigurationError, load_stopwords, load_nltk_stopwords


def write(path, content, encoding='utf-8'):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content.encode(encoding))


def test_loads_every_file_in_sorted_order(tmp_path):
    write(tmp_path / "b.txt", "second")
    write(tmp_path / "a.txt", "first")
    write(tmp_path / "nested" / "c.md", "third")

    documents = CorpusLoader(str(tmp_path)).load_documents()

    assert [os.path.relpath(doc.doc_id, tmp_path) for doc in documents] == [
        'a.txt', 'b.txt', os.path.join('nested', 'c.md')
    ]
    assert [doc.text for doc in documents] == ['first', 'second', 'third']
    assert all(os.path.isabs(doc.doc_id) for doc in documents)


def test_documents_are_decoded_as_utf8(tmp_path):
    write(tmp_path / "hr.txt", "Šibenik je grad.")
    [document] = CorpusLoader(str(tmp_path)).load_documents()
    assert document.text == "Šibenik je grad."


def test_read_document_by_identifier(tmp_path):
    write(tmp_path / "doc.txt", "full content\n")
    loader = CorpusLoader(str(tmp_path))
    [document] = loader.load_documents()
    assert loader.read_document(document.doc_id) == "full content\n"


def test_empty_directory_gives_no_documents(tmp_path):
    assert CorpusLoader(str(tmp_path)).load_documents() == []


def test_missing_directory_is_a_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError):
        CorpusLoader(str(tmp_path / "missing")).load_documents()


def test_file_instead_of_directory_is_a_configuration_error(tmp_path):
    write(tmp_path / "file.txt", "content")
    with pytest.raises(ConfigurationError):
        CorpusLoader(str(tmp_path / "file.txt")).load_documents()


def test_load_stopwords(tmp_path):
    write(tmp_path / "stop.txt", "the\n  A \n\nand\r\nof\n")
    assert load_stopwords(str(tmp_path / "stop.txt")) == ['the', 'a', 'and', 'of']


def test_unreadable_stopword_file_is_a_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError):
        load_stopwords(str(tmp_path / "nope.txt"))


def test_undecodable_bytes_are_replaced(tmp_path):
    (tmp_path / "bad.txt").write_bytes(b"caf\xff ok")
    [document] = CorpusLoader(str(tmp_path)).load_documents()
    assert document.text == "caf\ufffd ok"


def test_unreadable_file_is_skipped_with_warning(tmp_path, monkeypatch, capsys):
    write(tmp_path / "good.txt", "readable")
    write(tmp_path / "locked.txt", "hidden")
    loader = CorpusLoader(str(tmp_path))
    read_document = loader.read_document

    def failing_read(doc_id):
        if doc_id.endswith("locked.txt"):
            raise PermissionError(13, "Permission denied", doc_id)
        return read_document(doc_id)

    monkeypatch.setattr(loader, 'read_document', failing_read)
    documents = loader.load_documents()

    assert [doc.text for doc in documents] == ['readable']
    assert "Warning: Could not load file" in capsys.readouterr().out


@pytest.fixture
def installed_stopwords(monkeypatch):
    monkeypatch.setattr(nltk.data, 'find', lambda resource: resource)


def test_nltk_stopwords_are_lowercased(installed_stopwords, monkeypatch):
    requested = []

    def words(language):
        requested.append(language)
        return ['The', 'and', 'of']

    monkeypatch.setattr(nltk.corpus, 'stopwords', types.SimpleNamespace(words=words))
    assert load_nltk_stopwords('english') == ['the', 'and', 'of']
    assert requested == ['english']


def test_missing_nltk_corpus_is_downloaded(monkeypatch):
    downloads = []

    def find(resource):
        raise LookupError(resource)

    monkeypatch.setattr(nltk.data, 'find', find)
    monkeypatch.setattr(nltk, 'download', lambda name, quiet=False: downloads.append(name))
    monkeypatch.setattr(nltk.corpus, 'stopwords', types.SimpleNamespace(words=lambda language: ['a']))

    assert load_nltk_stopwords('english') == ['a']
    assert downloads == ['stopwords']


def test_unavailable_nltk_stopwords_are_a_configuration_error(installed_stopwords, monkeypatch):
    def words(language):
        raise LookupError("Resource stopwords not found.")

    monkeypatch.setattr(nltk.corpus, 'stopwords', types.SimpleNamespace(words=words))
    with pytest.raises(ConfigurationError, match="klingon"):
        load_nltk_stopwords('klingon')
