r"""Define the exceptions raised by delbody."""

from __future__ import annotations

__all__ = ["InvalidURIError"]


class InvalidURIError(ValueError):
    r"""Raised when a text URI is not syntactically valid.

    Args:
        uri: The text that failed to parse.
        reason: A short description of the problem.

    Example:
        ```pycon
        >>> from delbody.exceptions import InvalidURIError
        >>> err = InvalidURIError("http://[invalid", reason="invalid IPv6 host")
        >>> err.uri
        'http://[invalid'
        >>> str(err)
        "Invalid URI 'http://[invalid': invalid IPv6 host"

        ```
    """

    def __init__(self, uri: str, reason: str) -> None:
        super().__init__(f"Invalid URI {uri!r}: {reason}")
        self.uri = uri
        self.reason = reason
