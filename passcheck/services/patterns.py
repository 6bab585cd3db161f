from typing import AbstractSet, List, Optional, Tuple

from passcheck.core.config import get_year_range
from passcheck.models.analysis import Flag, FlagKind, Severity
from passcheck.services.entropy import is_digit, is_lower, is_upper

# =========================================================
# STATIC DATA
# =========================================================

SEQUENCE_WINDOW = 4
REPEAT_RUN = 4
YEAR_DIGITS = 4

KEYBOARD_PATTERNS = (
    "qwerty",
    "asdfgh",
    "zxcvbn",
    "1q2w",
    "qaz",
    "wasd",
    "qwert",
    "passw",
    "!@#",
    "$%^",
    "123qwe",
)

FLAG_TEXT = {
    FlagKind.COMMON_PASSWORD: (
        Severity.DANGER,
        "Common password",
        "Matches a commonly used password list",
    ),
    FlagKind.SEQUENTIAL: (
        Severity.WARN,
        "Sequential characters",
        "Contains sequential characters like 1234 or abcd",
    ),
    FlagKind.REPEATED: (
        Severity.WARN,
        "Repeated characters",
        "Contains repeated characters or repeated substrings",
    ),
    FlagKind.KEYBOARD: (
        Severity.WARN,
        "Keyboard pattern",
        "Contains keyboard sequences like qwerty or asdf",
    ),
    FlagKind.YEAR: (
        Severity.INFO,
        "Year detected",
        "Contains a year (e.g., 1990, 2023). Avoid using birth years",
    ),
    FlagKind.EMAIL_OR_USERNAME: (
        Severity.INFO,
        "Email/username pattern",
        "Looks like an email/username pattern. Avoid reuse across accounts",
    ),
}


def make_flag(kind: FlagKind) -> Flag:
    severity, title, message = FLAG_TEXT[kind]
    return Flag(kind=kind, severity=severity, title=title, message=message)


# =========================================================
# DETECTORS
# =========================================================

def is_common_password(password: str, common_passwords: AbstractSet[str]) -> bool:
    return password.lower() in common_passwords


def _is_ascending(chunk: str) -> bool:
    for i in range(1, len(chunk)):
        if ord(chunk[i]) != ord(chunk[i - 1]) + 1:
            return False
    return True


def is_sequential(password: str) -> bool:
    lower = password.lower()
    for i in range(len(lower) - SEQUENCE_WINDOW + 1):
        if _is_ascending(lower[i:i + SEQUENCE_WINDOW]):
            return True
    return False


def _has_char_run(password: str, run_length: int = REPEAT_RUN) -> bool:
    run = 0
    previous = None
    for ch in password:
        run = run + 1 if ch == previous else 1
        previous = ch
        if run >= run_length:
            return True
    return False


def _has_adjacent_blocks(password: str) -> bool:
    n = len(password)
    for size in range(2, n // 2 + 1):
        for i in range(n - size * 2 + 1):
            if password[i:i + size] == password[i + size:i + size * 2]:
                return True
    return False


def is_repeated(password: str) -> bool:
    """
    4+ identical characters in a row, or two adjacent identical blocks of
    any size from 2 to len // 2 ("abcabc", "1212"). Case-sensitive.
    """
    return _has_char_run(password) or _has_adjacent_blocks(password)


def is_keyboard_pattern(password: str) -> bool:
    lower = password.lower()
    return any(pattern in lower for pattern in KEYBOARD_PATTERNS)


def contains_year(password: str, year_range: Optional[Tuple[int, int]] = None) -> bool:
    year_min, year_max = year_range or get_year_range()
    for i in range(len(password) - YEAR_DIGITS + 1):
        chunk = password[i:i + YEAR_DIGITS]
        if all(is_digit(ch) for ch in chunk) and year_min <= int(chunk) <= year_max:
            return True
    return False


def looks_like_email_or_username(password: str) -> bool:
    if "@" in password:
        return True

    # name immediately followed by 2+ digits, e.g. john1990
    for i in range(len(password) - 2):
        ch = password[i]
        if (is_lower(ch) or is_upper(ch)) and is_digit(password[i + 1]) and is_digit(password[i + 2]):
            return True
    return False


# =========================================================
# MAIN ENTRY
# =========================================================

def detect_flags(
    password: str,
    common_passwords: AbstractSet[str],
    year_range: Optional[Tuple[int, int]] = None,
) -> List[Flag]:
    # Every detector runs; flags are independent and may co-occur.
    checks = [
        (FlagKind.COMMON_PASSWORD, is_common_password(password, common_passwords)),
        (FlagKind.SEQUENTIAL, is_sequential(password)),
        (FlagKind.REPEATED, is_repeated(password)),
        (FlagKind.KEYBOARD, is_keyboard_pattern(password)),
        (FlagKind.YEAR, contains_year(password, year_range)),
        (FlagKind.EMAIL_OR_USERNAME, looks_like_email_or_username(password)),
    ]
    return [make_flag(kind) for kind, matched in checks if matched]
