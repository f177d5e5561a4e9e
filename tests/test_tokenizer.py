from zerodetect_cli.detectors.tokenizer import split_sentences, tokenize


def test_tokenize_lowercases_and_keeps_duplicates():
    assert tokenize("The cat saw THE cat.") == ["the", "cat", "saw", "the", "cat"]


def test_tokenize_splits_on_non_word_characters():
    assert tokenize("Hello, World! It's 2024_ok.") == ["hello", "world", "it", "s", "2024_ok"]


def test_tokenize_empty_text():
    assert tokenize("") == []
    assert tokenize("--- ... !!!") == []


def test_split_sentences_on_punctuation_runs():
    assert split_sentences("One. Two!! Three?!  Four") == ["One", "Two", "Three", "Four"]


def test_split_sentences_without_terminal_punctuation():
    assert split_sentences("  no punctuation here  ") == ["no punctuation here"]


def test_split_sentences_discards_empty_pieces():
    assert split_sentences("   ") == []
    assert split_sentences("...!?") == []
    assert split_sentences("Done. . . !") == ["Done"]
