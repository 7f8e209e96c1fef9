from __future__ import annotations

from delbody import InvalidURIError

#####################################
#     Tests for InvalidURIError     #
#####################################


def test_invalid_uri_error() -> None:
    error = InvalidURIError("http://[invalid", reason="Invalid IPv6 URL")
    assert isinstance(error, ValueError)
    assert error.uri == "http://[invalid"
    assert error.reason == "Invalid IPv6 URL"
    assert str(error) == "Invalid URI 'http://[invalid': Invalid IPv6 URL"
