r"""Implement strict parsing of text URIs into ``httpx.URL`` objects.

``httpx.URL`` is lenient and percent-encodes most characters it does not
like. Callers that hand over a URI as text expect malformed input to be
rejected, so the text is first checked against the RFC 3986 grammar and
only then given to ``httpx``.
"""

from __future__ import annotations

__all__ = ["parse_uri"]

import re
import string
from urllib.parse import urlsplit

import httpx

from delbody.exceptions import InvalidURIError

_UNRESERVED = string.ascii_letters + string.digits + "-._~"
_GEN_DELIMS = ":/?#[]@"
_SUB_DELIMS = "!$&'()*+,;="
_ALLOWED_ASCII = frozenset(_UNRESERVED + _GEN_DELIMS + _SUB_DELIMS + "%")

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*")
_SCHEME_END = re.compile(r"[:/?#]")
_AUTHORITY_END = re.compile(r"[/?#]")

# Schemes whose URIs must name a host
_HOST_SCHEMES = frozenset({"http", "https"})


def _check_characters(text: str) -> None:
    for position, char in enumerate(text):
        if char.isascii():
            if char not in _ALLOWED_ASCII:
                raise InvalidURIError(
                    text, reason=f"illegal character {char!r} at index {position}"
                )
        elif char.isspace() or not char.isprintable():
            raise InvalidURIError(text, reason=f"illegal character {char!r} at index {position}")
    match = _BAD_ESCAPE.search(text)
    if match is not None:
        raise InvalidURIError(text, reason=f"malformed escape at index {match.start()}")


def _check_structure(text: str) -> None:
    match = _SCHEME_END.search(text)
    if match is not None and match.group() == ":":
        scheme, rest = text[: match.start()], text[match.end() :]
        if not _SCHEME.fullmatch(scheme):
            raise InvalidURIError(text, reason=f"illegal scheme {scheme!r}")
        if not rest.partition("#")[0]:
            raise InvalidURIError(text, reason="expected a scheme-specific part after the scheme")
    else:
        scheme, rest = None, text

    if not rest.startswith("//"):
        return
    end = _AUTHORITY_END.search(rest, 2)
    authority = rest[2:] if end is None else rest[2 : end.start()]
    if authority:
        return
    if end is None:
        raise InvalidURIError(text, reason="expected an authority after '//'")
    if scheme is not None and scheme.lower() in _HOST_SCHEMES:
        raise InvalidURIError(text, reason=f"a {scheme.lower()} URI requires a host")


def parse_uri(text: str) -> httpx.URL:
    r"""Parse a text URI into an ``httpx.URL``.

    Args:
        text: The URI text, absolute or relative.

    Returns:
        The parsed URL.

    Raises:
        InvalidURIError: If ``text`` is not a syntactically valid URI.
            ``InvalidURIError`` is a ``ValueError``.

    Example:
        ```pycon
        >>> from delbody.uri import parse_uri
        >>> parse_uri("https://api.example.com/items/42")
        URL('https://api.example.com/items/42')
        >>> parse_uri("http://[invalid")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        delbody.exceptions.InvalidURIError: Invalid URI 'http://[invalid': Invalid IPv6 URL

        ```
    """
    if not isinstance(text, str):
        msg = f"URI must be a str, got {type(text).__name__}"
        raise TypeError(msg)

    try:
        parts = urlsplit(text)
        # Accessing the port validates it
        parts.port  # noqa: B018
    except ValueError as exc:
        raise InvalidURIError(text, reason=str(exc)) from exc

    _check_characters(text)
    _check_structure(text)

    for component in (parts.path, parts.query, parts.fragment):
        if "[" in component or "]" in component:
            raise InvalidURIError(text, reason="square brackets are only allowed in the host")
    if "#" in parts.fragment:
        raise InvalidURIError(text, reason="more than one fragment delimiter")

    try:
        url = httpx.URL(text)
    except httpx.InvalidURL as exc:
        raise InvalidURIError(text, reason=str(exc)) from exc

    return url
