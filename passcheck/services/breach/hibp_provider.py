import logging
from typing import Optional

import requests

from passcheck.core.config import Setting, get_setting
from passcheck.core.errors import BreachCheckFailed, MalformedBreachRecord
from passcheck.services.breach.base import BreachClient
from passcheck.services.hasher import split_digest

logger = logging.getLogger(__name__)


def parse_range_record(line: str) -> tuple[str, int]:
    hash_suffix, sep, raw_count = line.partition(":")
    if not sep or not hash_suffix.strip():
        raise MalformedBreachRecord("Range record has no SUFFIX:COUNT separator")

    try:
        count = int(raw_count.strip())
    except ValueError:
        count = 0
    return hash_suffix.strip().upper(), max(0, count)


def parse_range_response(body: str, suffix: str) -> int:
    """
    Scan every SUFFIX:COUNT record for `suffix` (case-insensitive).

    Blank lines are ignored, malformed lines are skipped and an unparsable
    count reads as 0. Padding records never match, so they need no handling.
    """
    wanted = suffix.upper()
    for line in body.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            hash_suffix, count = parse_range_record(line)
        except MalformedBreachRecord:
            logger.debug("breach_record_skipped")
            continue
        if hash_suffix == wanted:
            return count
    return 0


class HIBPRangeClient(BreachClient):
    """
    Pwned Passwords range API client.
    Sends GET {range_url}/{prefix}; the suffix is matched locally.
    """

    def __init__(
        self,
        range_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        add_padding: Optional[bool] = None,
        timeout: Optional[float] = None,
    ):
        self.range_url = (range_url or get_setting(Setting.HIBP_RANGE_URL)).rstrip("/")
        self.timeout = timeout if timeout is not None else get_setting(Setting.BREACH_TIMEOUT_SECONDS)

        if add_padding is None:
            add_padding = get_setting(Setting.HIBP_ADD_PADDING)

        self.headers = {
            "user-agent": user_agent or get_setting(Setting.HIBP_USER_AGENT),
        }
        if add_padding:
            self.headers["Add-Padding"] = "true"

    def fetch_range(self, prefix: str) -> str:
        try:
            resp = requests.get(
                f"{self.range_url}/{prefix}",
                headers=self.headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("breach_range_unreachable prefix=%s error=%s", prefix, type(exc).__name__)
            raise BreachCheckFailed("Password breach service unreachable") from exc

        if resp.status_code != 200:
            logger.warning("breach_range_failed prefix=%s status=%s", prefix, resp.status_code)
            raise BreachCheckFailed(
                "Password breach service unavailable",
                status_code=resp.status_code,
            )

        return resp.text

    def check_digest(self, digest: str) -> int:
        prefix, suffix = split_digest(digest)
        count = parse_range_response(self.fetch_range(prefix), suffix)
        logger.debug("breach_range_checked prefix=%s found=%s", prefix, count > 0)
        return count
