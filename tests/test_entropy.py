import math

from passcheck.services.entropy import charset_profile, display_entropy, estimate_entropy


def test_empty_password_has_zero_entropy():
    assert estimate_entropy("") == 0.0
    assert charset_profile("").alphabet_size == 0


def test_lowercase_only():
    assert estimate_entropy("abc") == math.log2(26) * 3


def test_all_classes_sum_to_94():
    profile = charset_profile("aA1!")
    assert profile.lowercase and profile.uppercase and profile.digit and profile.symbol
    assert profile.alphabet_size == 94
    assert estimate_entropy("aA1!") == math.log2(94) * 4


def test_non_ascii_letters_count_as_symbols():
    profile = charset_profile("é")
    assert profile.symbol is True
    assert profile.lowercase is False
    assert profile.alphabet_size == 32


def test_space_counts_as_symbol():
    assert charset_profile("a b").alphabet_size == 26 + 32


def test_entropy_positive_for_any_non_empty_password():
    for pw in ["a", "1", "!", "Z", "aaaa", "é", " "]:
        assert estimate_entropy(pw) > 0


def test_display_rounds_to_one_decimal_but_full_precision_kept():
    bits = estimate_entropy("qwerty123")
    assert bits == math.log2(36) * 9
    assert display_entropy(bits) == 46.5
