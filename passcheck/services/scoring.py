from typing import List, Optional, Tuple

from passcheck.core.config import Setting, get_setting
from passcheck.models.analysis import Flag, FlagKind, Severity
from passcheck.services.entropy import charset_profile

MAX_SCORE = 5
DANGER_PENALTY = 2
FLAG_PENALTY = 1
BREACH_PENALTY = 2

LABELS = ["Very Weak", "Weak", "Medium", "Strong", "Very Strong"]


def clamp(value: int, lo: int = 0, hi: int = MAX_SCORE) -> int:
    return max(lo, min(hi, value))


def base_score(password: str, min_length: Optional[int] = None) -> int:
    if min_length is None:
        min_length = get_setting(Setting.MIN_LENGTH)

    profile = charset_profile(password)
    score = 0
    if len(password) >= min_length:
        score += 1
    if profile.lowercase:
        score += 1
    if profile.uppercase:
        score += 1
    if profile.digit:
        score += 1
    if profile.symbol:
        score += 1
    return score


def adjust_score(base: int, flags: List[Flag]) -> int:
    if any(flag.severity == Severity.DANGER for flag in flags):
        return clamp(base - DANGER_PENALTY)
    if flags:
        return clamp(base - FLAG_PENALTY)
    return clamp(base)


def score_password(password: str, flags: List[Flag]) -> Tuple[int, int]:
    base = base_score(password)
    return base, adjust_score(base, flags)


def score_label(score: int) -> str:
    return LABELS[clamp(score - 1, 0, len(LABELS) - 1)]


def breach_flag(count: int) -> Flag:
    return Flag(
        kind=FlagKind.BREACHED,
        severity=Severity.DANGER,
        title="Found in breaches",
        message=f"This password appears in public breaches ({count} times)",
    )


def apply_breach_penalty(flags: List[Flag], adjusted: int, count: int) -> Tuple[List[Flag], int]:
    """
    Late breach penalty, layered on top of the local adjustment.

    Skipped only when a common-password flag is already present. Any other
    danger flag still stacks with the extra -2.
    """
    if count <= 0 or any(flag.kind == FlagKind.COMMON_PASSWORD for flag in flags):
        return list(flags), adjusted
    return [breach_flag(count)] + list(flags), clamp(adjusted - BREACH_PENALTY)


def build_suggestions(password: str, recommended_length: Optional[int] = None) -> List[str]:
    if recommended_length is None:
        recommended_length = get_setting(Setting.RECOMMENDED_LENGTH)

    profile = charset_profile(password)
    tips = []
    if len(password) < recommended_length:
        tips.append(f"Increase length to at least {recommended_length}+ characters.")
    if not profile.uppercase:
        tips.append("Add an uppercase letter (A-Z).")
    if not profile.lowercase:
        tips.append("Add a lowercase letter (a-z).")
    if not profile.digit:
        tips.append("Include numbers (0-9).")
    if not profile.symbol:
        tips.append("Add special characters like @, #, %, !.")
    return tips
