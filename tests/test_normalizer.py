# tests/test_normalizer.py
import pytest

from vote_muncher.core.normalizer import NameNormalizer, UnknownAlphabetError, normalize_name


def test_default_splits_cyrillic_camel_case():
    assert normalize_name("ИванПетров") == "Иван Петров"
    assert normalize_name("аБ") == "а Б"


def test_default_strips_latin_letters():
    assert normalize_name("ИванPetrov") == "Иван"
    # Latin "C" typed instead of Cyrillic "С"
    assert normalize_name("Мария Cидорова") == "Мария идорова"
    # existing spaces are left alone
    assert normalize_name("Иван Petrov Петров") == "Иван  Петров"


def test_all_noise_gives_empty_string():
    assert normalize_name("abcXYZ") == ""
    assert normalize_name("") == ""


def test_non_letters_untouched():
    assert normalize_name("Иван2Петров") == "Иван2Петров"
    assert normalize_name("АБВ") == "АБВ"


def test_latin_primary():
    norm = NameNormalizer(noise="cyrillic", primary="latin")
    assert norm("JohnSmith") == "John Smith"
    assert norm("JohnSmithJr") == "John Smith Jr"
    assert norm("McDonald") == "Mc Donald"
    assert norm("JohnСмит") == "John"


def test_no_noise_alphabet():
    norm = NameNormalizer(noise="none", primary="latin")
    assert norm("JohnСмит") == "JohnСмит"
    assert NameNormalizer(noise=None, primary="latin")("aB") == "a B"


def test_bad_alphabets():
    with pytest.raises(UnknownAlphabetError):
        NameNormalizer(noise="greek")
    with pytest.raises(ValueError):
        NameNormalizer(noise="latin", primary="latin")


def test_repr():
    assert repr(NameNormalizer()) == "NameNormalizer(noise='latin', primary='cyrillic')"
