r"""Parameter validation for request descriptors."""

from __future__ import annotations

__all__ = ["validate_content", "validate_method", "validate_request", "validate_timeout"]

import re
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from delbody.request import HttpRequest

# RFC 9110 token characters
_TOKEN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


def validate_method(method: Any) -> None:
    """Validate an HTTP method token.

    Args:
        method: The method to check.

    Raises:
        ValueError: If ``method`` is not a non-empty RFC 9110 token.

    Example:
        ```pycon
        >>> from delbody.core.validation import validate_method
        >>> validate_method("DELETE")
        >>> validate_method("DEL ETE")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: method must be a valid HTTP token, got 'DEL ETE'

        ```
    """
    if not isinstance(method, str) or not _TOKEN.fullmatch(method):
        msg = f"method must be a valid HTTP token, got {method!r}"
        raise ValueError(msg)


def validate_timeout(timeout: Any) -> None:
    """Validate a per-request timeout.

    Args:
        timeout: Seconds to wait for the server, or an
            ``httpx.Timeout``. ``httpx.Timeout`` values are not checked.

    Raises:
        TypeError: If ``timeout`` is neither a number nor an
            ``httpx.Timeout``.
        ValueError: If ``timeout`` is a number <= 0.

    Example:
        ```pycon
        >>> from delbody.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, httpx.Timeout):
        return
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
        msg = f"timeout must be a number or an httpx.Timeout, got {type(timeout).__name__}"
        raise TypeError(msg)
    if timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_content(content: Any) -> None:
    """Validate a raw request body.

    Raises:
        TypeError: If ``content`` is not ``bytes``, ``bytearray``,
            ``memoryview`` or ``str``.
    """
    if not isinstance(content, (bytes, bytearray, memoryview, str)):
        msg = f"content must be bytes or str, got {type(content).__name__}"
        raise TypeError(msg)


def validate_request(request: HttpRequest) -> None:
    """Check that a request descriptor can be sent.

    Args:
        request: The request descriptor.

    Raises:
        ValueError: If the URL of the request is not set.
    """
    if request.url is None:
        msg = f"The URL of the {request.method} request must be set before it is sent"
        raise ValueError(msg)
