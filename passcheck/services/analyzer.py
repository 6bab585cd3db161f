import logging
from typing import AbstractSet, Optional

from passcheck.core.config import get_year_range
from passcheck.core.errors import BreachCheckFailed
from passcheck.data.common_passwords import COMMON_PASSWORDS
from passcheck.models.analysis import AnalysisResult, BreachStatus
from passcheck.services.breach.base import BreachClient
from passcheck.services.entropy import charset_profile, display_entropy, estimate_entropy
from passcheck.services.hasher import hash_password
from passcheck.services.patterns import detect_flags
from passcheck.services.scoring import (
    apply_breach_penalty,
    build_suggestions,
    score_label,
    score_password,
)

logger = logging.getLogger(__name__)


def neutral_result() -> AnalysisResult:
    return AnalysisResult(label=score_label(0))


def analyze(
    password: str,
    common_passwords: Optional[AbstractSet[str]] = None,
) -> AnalysisResult:
    """
    Local phase: digest, entropy, flags and score, all computed synchronously.

    A non-empty password comes back with breach_status=pending; the caller
    refines it once the range lookup resolves. An empty password yields the
    neutral result and needs no lookup.
    """
    if not password:
        return neutral_result()

    if common_passwords is None:
        common_passwords = COMMON_PASSWORDS

    bits = estimate_entropy(password)
    flags = detect_flags(password, common_passwords, get_year_range())
    base, adjusted = score_password(password, flags)

    return AnalysisResult(
        digest=hash_password(password),
        length=len(password),
        entropy_bits=bits,
        entropy_display=display_entropy(bits),
        charset=charset_profile(password),
        base_score=base,
        adjusted_score=adjusted,
        label=score_label(adjusted),
        flags=flags,
        suggestions=build_suggestions(password),
        breach_status=BreachStatus.PENDING,
    )


def refine_with_breach(result: AnalysisResult, count: Optional[int]) -> AnalysisResult:
    """
    count=None means the lookup failed; 0 means not found.
    Local fields are reused as-is; only a found count touches flags and score.
    """
    if count is None:
        return result.model_copy(update={"breach_status": BreachStatus.CHECK_FAILED})

    if count <= 0:
        return result.model_copy(update={"breach_status": BreachStatus.NOT_FOUND, "breach_count": 0})

    flags, adjusted = apply_breach_penalty(result.flags, result.adjusted_score, count)
    return result.model_copy(
        update={
            "breach_status": BreachStatus.FOUND,
            "breach_count": count,
            "flags": flags,
            "adjusted_score": adjusted,
            "label": score_label(adjusted),
        }
    )


def check_breach(result: AnalysisResult, client: BreachClient) -> Optional[int]:
    # Any lookup failure ends as check_failed; the local result always survives.
    try:
        return client.check_digest(result.digest)
    except BreachCheckFailed:
        logger.warning("breach_check_failed prefix=%s", result.digest_prefix)
        return None
    except Exception as exc:
        logger.warning(
            "breach_check_error prefix=%s error=%s",
            result.digest_prefix,
            type(exc).__name__,
        )
        return None


def analyze_with_breach(
    password: str,
    client: BreachClient,
    common_passwords: Optional[AbstractSet[str]] = None,
) -> AnalysisResult:
    result = analyze(password, common_passwords)
    if result.breach_status != BreachStatus.PENDING:
        return result
    return refine_with_breach(result, check_breach(result, client))
