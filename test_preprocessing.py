#!/usr/bin/env python3
"""
Tests for tokenization and stopword filtering.
"""

from vsm_search_engine.data_processing import TextPreprocessor, tokenize, unique_tokens, remove_stopwords


def test_tokenize_keeps_order_and_repeats():
    """Punctuation separates tokens; case is folded; duplicates stay."""
    assert tokenize("Cat, dog: Cat!") == ['cat', 'dog', 'cat']
    assert unique_tokens("Cat, dog: Cat!") == ['cat', 'dog']


def test_tokenize_splits_on_digits_and_underscores():
    assert tokenize("abc123def") == ['abc', 'def']
    assert tokenize("snake_case-word") == ['snake', 'case', 'word']
    assert tokenize("it's") == ['it', 's']


def test_tokenize_empty_and_whitespace_input():
    assert tokenize("") == []
    assert tokenize("   \t\n ") == []
    assert tokenize("42 -- 17!") == []


def test_tokenize_handles_non_ascii_letters():
    """Letters outside ASCII are alphabetic too."""
    assert tokenize("Čovjek ŽIVI u Šibeniku") == ['čovjek', 'živi', 'u', 'šibeniku']
    assert tokenize("Stra\u00dfe\u2014caf\u00e9") == ["stra\u00dfe", "caf\u00e9"]


def test_tokens_are_lowercase_alphabetic():
    text = "The QUICK brown fox, 3 times; jumped over: the_lazy DOG?!"
    tokens = tokenize(text)
    assert tokens
    for token in tokens:
        assert token
        assert token.isalpha()
        assert token == token.lower()


def test_separators_survive_between_tokens():
    """Removing the tokens leaves exactly the non-alphabetic characters, in order."""
    text = "a1b, c!! d"
    separators = ''.join(ch for ch in text if not ch.isalpha())
    assert separators == "1, !! "
    assert ''.join(tokenize(text)) == ''.join(ch for ch in text if ch.isalpha()).lower()


def test_remove_stopwords_is_exact_match():
    assert remove_stopwords(['the', 'cat', 'The'], {'the'}) == ['cat', 'The']


def test_preprocess_document_returns_unique_filtered_terms():
    preprocessor = TextPreprocessor(['the', 'a'])
    assert preprocessor.preprocess_document("The cat and a cat. THE end") == ['and', 'cat', 'end']
