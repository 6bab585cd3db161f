import math

from passcheck.models.analysis import CharsetProfile

LOWERCASE_SIZE = 26
UPPERCASE_SIZE = 26
DIGIT_SIZE = 10
SYMBOL_SIZE = 32


# ASCII only: anything outside A-Z, a-z, 0-9 counts as a symbol,
# including non-ASCII letters.
def is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_symbol(ch: str) -> bool:
    return not (is_lower(ch) or is_upper(ch) or is_digit(ch))


def charset_profile(password: str) -> CharsetProfile:
    profile = CharsetProfile(
        lowercase=any(is_lower(ch) for ch in password),
        uppercase=any(is_upper(ch) for ch in password),
        digit=any(is_digit(ch) for ch in password),
        symbol=any(is_symbol(ch) for ch in password),
    )

    size = 0
    if profile.lowercase:
        size += LOWERCASE_SIZE
    if profile.uppercase:
        size += UPPERCASE_SIZE
    if profile.digit:
        size += DIGIT_SIZE
    if profile.symbol:
        size += SYMBOL_SIZE
    profile.alphabet_size = size
    return profile


def estimate_entropy(password: str) -> float:
    """
    Charset x length upper bound: log2(alphabet) * len(password).
    Ignores repetition and predictability; those are flagged separately.
    """
    alphabet = charset_profile(password).alphabet_size
    if not alphabet:
        return 0.0
    return math.log2(alphabet) * len(password)


def display_entropy(bits: float) -> float:
    return round(bits, 1)
