from __future__ import annotations

from teslametric._api._common import build_tesla_headers
from teslametric._api.display import build_lametric_headers
from teslametric._redact import REDACTED, redact_for_log

from _fakes import make_config


def test_tesla_headers_mask_bearer_token() -> None:
    redacted = redact_for_log(build_tesla_headers(make_config()))

    assert redacted == {
        "User-Agent": "00000",
        "Content-Type": "application/json",
        "Authorization": REDACTED,
    }


def test_lametric_headers_mask_access_token() -> None:
    redacted = redact_for_log(build_lametric_headers(make_config()))

    assert redacted["X-Access-Token"] == REDACTED
    assert redacted["Cache-Control"] == "no-cache"


def test_nested_token_keys_are_masked() -> None:
    body = {"response": {"access_token": "a", "refresh_token": "r", "state": "online"}, "frames": [{"token": "t"}]}

    assert redact_for_log(body) == {
        "response": {"access_token": REDACTED, "refresh_token": REDACTED, "state": "online"},
        "frames": [{"token": REDACTED}],
    }


def test_input_is_not_mutated() -> None:
    headers = build_tesla_headers(make_config())
    redact_for_log(headers)

    assert headers["Authorization"] == "Bearer tesla-secret-token"


def test_scalars_pass_through() -> None:
    assert redact_for_log(None) is None
    assert redact_for_log(42.5) == 42.5
    assert redact_for_log("Bearer abc") == "Bearer abc"
