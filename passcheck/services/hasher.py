"""
SHA-1 digest used as the breach lookup key.

SHA-1 is weak, and it is used here only because the range service indexes its
corpus by SHA-1. The digest never protects anything: only its first five
characters leave the process.
"""
import hashlib

from passcheck.core.errors import HashUnavailable

DIGEST_LENGTH = 40
PREFIX_LENGTH = 5


def to_utf8(password: str) -> bytes:
    # Lone surrogates become U+FFFD instead of failing; paired ones are joined.
    text = password.encode("utf-16", "surrogatepass").decode("utf-16", "replace")
    return text.encode("utf-8")


def hash_password(password: str) -> str:
    return hashlib.sha1(to_utf8(password)).hexdigest().upper()


def split_digest(digest: str) -> tuple[str, str]:
    return digest[:PREFIX_LENGTH], digest[PREFIX_LENGTH:]


def ensure_hash_available() -> None:
    try:
        sample = hashlib.new("sha1", b"passcheck").hexdigest()
    except ValueError as exc:
        raise HashUnavailable("SHA-1 is not available in this Python build") from exc

    if len(sample) != DIGEST_LENGTH:
        raise HashUnavailable("SHA-1 digest has an unexpected length")
