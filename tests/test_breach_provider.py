import pytest
import requests

from passcheck.core.errors import BreachCheckFailed, MalformedBreachRecord
from passcheck.services.breach import hibp_provider
from passcheck.services.breach.hibp_provider import (
    HIBPRangeClient,
    parse_range_record,
    parse_range_response,
)
from passcheck.services.breach.manager import get_breach_client
from passcheck.services.hasher import hash_password, split_digest

PASSWORD_DIGEST = "5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8"
PASSWORD_SUFFIX = "1E4C9B93F3F0682250B6CF8331B7EE68FD8"


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


class FakeRequests:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def fake_requests(monkeypatch):
    def _install(response=None, exc=None):
        fake = FakeRequests(response=response, exc=exc)
        monkeypatch.setattr(hibp_provider.requests, "get", fake.get)
        return fake

    return _install


def test_parse_record():
    assert parse_range_record("abc:12") == ("ABC", 12)
    assert parse_range_record("ABC:oops") == ("ABC", 0)
    with pytest.raises(MalformedBreachRecord):
        parse_range_record("no separator here")


def test_parse_response_matches_case_insensitively():
    body = (
        "0018A45C4D1DEF81644B54AB7F969B88D65:1\r\n"
        f"{PASSWORD_SUFFIX}:37\r\n"
        "\r\n"
    )
    assert parse_range_response(body, PASSWORD_SUFFIX.lower()) == 37


def test_parse_response_not_found_is_zero():
    assert parse_range_response("0018A45C4D1DEF81644B54AB7F969B88D65:1\n", PASSWORD_SUFFIX) == 0
    assert parse_range_response("", PASSWORD_SUFFIX) == 0


def test_parse_response_skips_malformed_lines():
    body = "garbage line\n:5\n" + f"{PASSWORD_SUFFIX}:3\n"
    assert parse_range_response(body, PASSWORD_SUFFIX) == 3


def test_parse_response_bad_count_reads_as_zero():
    assert parse_range_response(f"{PASSWORD_SUFFIX}:lots\n", PASSWORD_SUFFIX) == 0


def test_count_with_trailing_junk_reads_as_zero():
    assert parse_range_record(f"{PASSWORD_SUFFIX}:37abc") == (PASSWORD_SUFFIX, 0)


def test_padding_records_are_ignored():
    body = f"{'F' * 35}:0\n{PASSWORD_SUFFIX}:9\n{'0' * 35}:0\n"
    assert parse_range_response(body, PASSWORD_SUFFIX) == 9


def test_client_sends_only_the_prefix(fake_requests):
    fake = fake_requests(FakeResponse(200, f"{PASSWORD_SUFFIX}:37\n"))
    client = HIBPRangeClient(range_url="https://range.example/range/", timeout=3)

    assert client.check_digest(PASSWORD_DIGEST) == 37

    call = fake.calls[0]
    assert call["url"] == "https://range.example/range/5BAA6"
    assert PASSWORD_SUFFIX not in call["url"]
    assert call["headers"]["Add-Padding"] == "true"
    assert call["timeout"] == 3


def test_client_padding_can_be_disabled(fake_requests):
    fake = fake_requests(FakeResponse(200, ""))
    HIBPRangeClient(add_padding=False).check_digest(PASSWORD_DIGEST)
    assert "Add-Padding" not in fake.calls[0]["headers"]


def test_client_non_200_fails(fake_requests):
    fake_requests(FakeResponse(503, "Service Unavailable"))
    with pytest.raises(BreachCheckFailed) as err:
        HIBPRangeClient().check_digest(PASSWORD_DIGEST)
    assert err.value.status_code == 503


def test_client_network_error_fails(fake_requests):
    fake_requests(exc=requests.ConnectionError("down"))
    with pytest.raises(BreachCheckFailed):
        HIBPRangeClient().check_digest(PASSWORD_DIGEST)


def test_client_timeout_fails(fake_requests):
    fake_requests(exc=requests.Timeout("slow"))
    with pytest.raises(BreachCheckFailed):
        HIBPRangeClient().check_digest(PASSWORD_DIGEST)


def test_client_reads_config_from_environment(monkeypatch):
    monkeypatch.setenv("HIBP_RANGE_URL", "https://mirror.example/range")
    monkeypatch.setenv("BREACH_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("HIBP_ADD_PADDING", "false")

    client = get_breach_client()
    assert client.range_url == "https://mirror.example/range"
    assert client.timeout == 2.5
    assert "Add-Padding" not in client.headers


def test_digest_suffix_roundtrip_with_real_hash(fake_requests):
    digest = hash_password("Tr0ub4dor&3xyz9Q")
    _, suffix = split_digest(digest)
    fake_requests(FakeResponse(200, f"{suffix.lower()}:4\n"))
    assert HIBPRangeClient().check_digest(digest) == 4
