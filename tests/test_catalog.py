import pytest
from gimmefive.errors import CatalogError, CatalogTooSmallError, EmptyCatalogError, InvariantViolation
from gimmefive.words.catalog import DEFAULT_WORDS_PATH, WordCatalog

def test_filters_to_five_letter_alphabetic_words():
    catalog = WordCatalog.from_lines(["apple", "Zebra", "ab12c", "toast", "th"])
    assert catalog.words() == ("apple", "zebra", "toast")
    assert catalog.size() == 3

def test_trims_whitespace_and_keeps_order_and_duplicates():
    catalog = WordCatalog.from_text("  crane \r\nslate\n\ncrane\nnaïve\ncafés\n")
    assert catalog.words() == ("crane", "slate", "crane")

def test_word_at_out_of_range_fails_fast():
    catalog = WordCatalog.from_lines(["apple"])
    assert catalog.word_at(0) == "apple"
    with pytest.raises(InvariantViolation):
        catalog.word_at(1)
    with pytest.raises(InvariantViolation):
        catalog.word_at(-1)

def test_missing_file_is_a_catalog_error(tmp_path):
    with pytest.raises(CatalogError):
        WordCatalog.from_file(tmp_path / "nope.txt")

def test_from_file_records_source(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("hello\nworld\nhi\n", encoding="utf-8")
    catalog = WordCatalog.from_file(path)
    assert catalog.words() == ("hello", "world")
    assert catalog.source == str(path)

def test_round_size_validation():
    with pytest.raises(EmptyCatalogError):
        WordCatalog.from_lines(["no", "ab12c", "toolong"]).require_round_size(16)
    with pytest.raises(CatalogTooSmallError):
        WordCatalog.from_lines(["apple"] * 15).require_round_size(16)
    WordCatalog.from_lines(["apple"] * 16).require_round_size(16)

def test_bundled_word_list_loads():
    assert DEFAULT_WORDS_PATH.exists()
    catalog = WordCatalog.load_default()
    assert len(catalog) >= 2000
    assert all(len(w) == 5 and w.isalpha() and w.islower() for w in catalog.words())
