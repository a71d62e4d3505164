import math

import pytest

from valpass import AlphabetMode, ConfigurationError, InputError, WordList
from valpass.analyzers import (
    MIN_DICT_LEN,
    CompressionAnalyzer,
    DictionaryMatcher,
    DistributionAnalyzer,
    EntropyAnalyzer,
    MeanAnalyzer,
)

ASCII = AlphabetMode.ASCII_PRINTABLE
UNICODE = AlphabetMode.UNICODE_CODEPOINT
PRINTABLE = "".join(chr(c) for c in range(32, 127))


# -------------------- compression --------------------

def test_compression_empty_is_zero():
    assert CompressionAnalyzer().analyze("") == 0
    assert CompressionAnalyzer().analyze(b"") == 0


def test_compression_repeated_char_is_highly_compressible():
    ratio = CompressionAnalyzer().analyze("aaaaaaaaaaaaaaaaaaaaa")
    assert ratio >= 10
    assert not CompressionAnalyzer.passes(ratio, 10)


def test_compression_random_is_zero_never_negative():
    assert CompressionAnalyzer().analyze("QAfwWn;]6ECn-(wZ-z7MxZL)zRA!TO%t") == 0
    assert CompressionAnalyzer().analyze("x") == 0


def test_compression_threshold_is_inclusive_ceiling():
    assert CompressionAnalyzer.passes(9, 10)
    assert not CompressionAnalyzer.passes(10, 10)


# -------------------- distribution --------------------

@pytest.mark.parametrize("text,k", [("a", 1), ("abc", 3), ("aaaabbbc", 3), (PRINTABLE, 95)])
def test_distribution_ascii_is_k_over_95(text, k):
    assert DistributionAnalyzer().analyze(text, ASCII) == 100 * k / 95


def test_distribution_ascii_ignores_non_printable_bytes():
    assert DistributionAnalyzer().analyze(bytes([12, 65, 200]), ASCII) == 100 * 1 / 95


def test_distribution_unicode_counts_codepoints():
    value = DistributionAnalyzer().analyze("äöü", UNICODE)
    assert value == 100 * 3 / 0x110000


def test_distribution_threshold_is_inclusive_floor():
    assert DistributionAnalyzer.passes(10.5, 10.0)
    assert not DistributionAnalyzer.passes(10.0, 10.0)


# -------------------- entropy --------------------

def test_entropy_known_values():
    analyzer = EntropyAnalyzer()
    assert analyzer.analyze("", ASCII) == 0.0
    assert analyzer.analyze("aaaa", ASCII) == 0.0
    assert analyzer.analyze("aabb", ASCII) == pytest.approx(1.0)
    assert analyzer.analyze("abcd", ASCII) == pytest.approx(2.0)


def test_entropy_uniform_alphabet_approaches_log2_n():
    analyzer = EntropyAnalyzer()
    assert analyzer.analyze(PRINTABLE, ASCII) == pytest.approx(math.log2(95))
    assert analyzer.analyze(PRINTABLE[:64] * 2, ASCII) == pytest.approx(6.0)


def test_entropy_random_passphrase_in_expected_range():
    value = EntropyAnalyzer().analyze("QAfwWn;]6ECn-(wZ-z7MxZL)zRA!TO%t", ASCII)
    assert value == pytest.approx(4.625)
    assert 4.5 <= value <= 6.5


def test_entropy_ascii_rejects_non_printable():
    with pytest.raises(InputError, match="non-printable"):
        EntropyAnalyzer().analyze(bytes([12, 16, 45, 65, 96, 145]), ASCII)


def test_entropy_ascii_rejects_non_ascii_text():
    with pytest.raises(InputError):
        EntropyAnalyzer().analyze("ääöö", ASCII)


def test_entropy_unicode_counts_codepoints():
    assert EntropyAnalyzer().analyze("ääöö", UNICODE) == pytest.approx(1.0)
    assert EntropyAnalyzer().analyze("ääöö".encode("utf-8"), UNICODE) == pytest.approx(1.0)


def test_entropy_unicode_rejects_invalid_utf8():
    with pytest.raises(InputError, match="UTF-8"):
        EntropyAnalyzer().analyze(b"ab\xff", UNICODE)


# -------------------- mean --------------------

def test_mean_values():
    analyzer = MeanAnalyzer()
    assert analyzer.analyze("") == 0.0
    assert analyzer.analyze("PPPP") == pytest.approx(80.0)
    assert analyzer.analyze("KU") == pytest.approx(80.0)
    assert analyzer.analyze(b"AAAA") == pytest.approx(65.0)


def test_mean_band_is_inclusive():
    analyzer = MeanAnalyzer()
    assert analyzer.passes(65.0, 15.0)
    assert analyzer.passes(95.0, 15.0)
    assert not analyzer.passes(65.0, 10.0)
    assert not analyzer.passes(95.5, 15.0)


# -------------------- dictionary --------------------

def test_dictionary_exact_is_case_insensitive(word_list):
    matcher = DictionaryMatcher()
    assert matcher.matches("password", word_list)
    assert matcher.matches("PASSWORD", word_list)
    assert matcher.matches(b"password", word_list)
    assert not matcher.matches("passwor", word_list)


def test_dictionary_submatch(word_list, submatch_word_list):
    matcher = DictionaryMatcher()
    assert matcher.matches("foo", submatch_word_list)
    assert matcher.matches("OBA", submatch_word_list)
    assert not matcher.matches("foo", word_list)
    assert not matcher.matches("foobarbaz", submatch_word_list)


def test_dictionary_too_small_is_configuration_error(small_word_list):
    with pytest.raises(ConfigurationError, match="too small"):
        DictionaryMatcher().matches("eins", small_word_list)


def test_dictionary_minimum_size_boundary():
    words = [f"w{i}" for i in range(MIN_DICT_LEN - 1)]
    with pytest.raises(ConfigurationError):
        DictionaryMatcher().matches("x", WordList(words=words))
    assert not DictionaryMatcher().matches("x", WordList(words=words + ["y"]))
