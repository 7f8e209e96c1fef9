r"""Contains the HTTP request descriptor used by delbody.

An ``HttpRequest`` describes an outgoing request before it is handed to
``httpx``. Unlike ``httpx.Request``, it can be created without a URL and
filled in step by step, and every method, including ``DELETE``, may carry
a body.

Example:
    ```pycon
    >>> from delbody import HttpRequest
    >>> request = HttpRequest.delete("https://api.example.com/items")
    >>> request.set_json({"ids": [1, 2, 3]})
    >>> request.method
    'DELETE'
    >>> request.content
    b'{"ids":[1,2,3]}'
    >>> request.headers["Content-Type"]
    'application/json'

    ```
"""

from __future__ import annotations

__all__ = ["HttpRequest"]

import json as jsonlib
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

import httpx

from delbody.core.validation import (
    validate_content,
    validate_method,
    validate_request,
    validate_timeout,
)
from delbody.uri import parse_uri

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: logging.Logger = logging.getLogger(__name__)


class HttpRequest:
    r"""Mutable descriptor of an HTTP request that may carry a body.

    The method is fixed when the descriptor is created. Everything else
    (URL, headers, body and timeout) may be changed until the request is
    sent. Instances are not thread-safe.

    Args:
        method: The HTTP method token, e.g. ``"DELETE"``. It is
            upper-cased.
        url: An optional target URL, as an ``httpx.URL`` or as text.
            Text is parsed strictly, see ``delbody.uri.parse_uri``.
        headers: Optional request headers.
        content: Optional raw body, as ``bytes`` or ``str``.
        json: Optional JSON-serializable body.
        data: Optional form fields, sent URL-encoded.
        timeout: Optional timeout for this request only. If ``None``,
            the client's timeout is used.

    Raises:
        ValueError: If ``method`` is not a valid HTTP token, if more than
            one of ``content``, ``json`` and ``data`` is given, or if
            ``timeout`` is a number <= 0.
        TypeError: If ``content`` is not ``bytes`` or ``str``, or if
            ``timeout`` is not a number or an ``httpx.Timeout``.
        InvalidURIError: If ``url`` is text and is not a valid URI.

    Example:
        ```pycon
        >>> from delbody import HttpRequest
        >>> request = HttpRequest("DELETE", "https://api.example.com/items/42")
        >>> request
        <HttpRequest('DELETE', 'https://api.example.com/items/42')>
        >>> request.set_content(b'{"reason": "duplicate"}', content_type="application/json")
        >>> request.request_line
        'DELETE /items/42 HTTP/1.1'

        ```
    """

    def __init__(
        self,
        method: str,
        url: httpx.URL | str | None = None,
        *,
        headers: Mapping[str, str] | httpx.Headers | None = None,
        content: bytes | str | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> None:
        validate_method(method)
        self._method = method.upper()
        self._url: httpx.URL | None = None
        self.url = url
        self.headers = httpx.Headers(headers)
        self.content: bytes | None = None
        self._timeout: float | httpx.Timeout | None = None
        self.timeout = timeout

        bodies = {"content": content, "json": json, "data": data}
        given = [name for name, value in bodies.items() if value is not None]
        if len(given) > 1:
            msg = f"At most one of content, json and data can be set, got {', '.join(given)}"
            raise ValueError(msg)
        if content is not None:
            self.set_content(content)
        elif json is not None:
            self.set_json(json)
        elif data is not None:
            self.set_form(data)

    @classmethod
    def delete(cls, url: httpx.URL | str | None = None, **kwargs: Any) -> HttpRequest:
        r"""Create a ``DELETE`` request descriptor that can carry a body.

        Args:
            url: An optional target URL, as an ``httpx.URL`` or as text.
            **kwargs: Additional keyword arguments passed to the
                ``HttpRequest`` constructor (``headers``, ``content``,
                ``json``, ``data``, ``timeout``).

        Returns:
            The request descriptor. Its method is always ``"DELETE"``.

        Raises:
            InvalidURIError: If ``url`` is text and is not a valid URI.

        Example:
            ```pycon
            >>> from delbody import HttpRequest
            >>> request = HttpRequest.delete()
            >>> request.method, request.url, request.content
            ('DELETE', None, None)

            ```
        """
        return cls("DELETE", url, **kwargs)

    def __repr__(self) -> str:
        url = None if self._url is None else str(self._url)
        return f"<{self.__class__.__qualname__}({self._method!r}, {url!r})>"

    @property
    def method(self) -> str:
        r"""The HTTP method. It cannot be changed after construction."""
        return self._method

    @property
    def url(self) -> httpx.URL | None:
        r"""The target URL, or ``None`` if it has not been set."""
        return self._url

    @url.setter
    def url(self, url: httpx.URL | str | None) -> None:
        if url is None or isinstance(url, httpx.URL):
            self._url = url
        else:
            self._url = parse_uri(url)

    @property
    def timeout(self) -> float | httpx.Timeout | None:
        r"""The timeout of this request only, or ``None`` to use the
        client timeout."""
        return self._timeout

    @timeout.setter
    def timeout(self, timeout: float | httpx.Timeout | None) -> None:
        if timeout is not None:
            validate_timeout(timeout)
        self._timeout = timeout

    @property
    def request_line(self) -> str:
        r"""The HTTP/1.1 request line of this request.

        Raises:
            ValueError: If the URL is not set.
        """
        url = self._require_url()
        target = url.raw_path.decode("ascii") or "/"
        return f"{self._method} {target} HTTP/1.1"

    def set_content(self, content: bytes | str, content_type: str | None = None) -> None:
        r"""Set a raw body.

        Args:
            content: The body. ``str`` values are encoded as UTF-8.
            content_type: Optional value for the ``Content-Type`` header.
                If ``None``, the header is left unchanged.

        Raises:
            TypeError: If ``content`` is not ``bytes``, ``bytearray``,
                ``memoryview`` or ``str``.
        """
        validate_content(content)
        self.content = content.encode("utf-8") if isinstance(content, str) else bytes(content)
        if content_type is not None:
            self.headers["Content-Type"] = content_type

    def set_json(self, obj: Any) -> None:
        r"""Set a JSON body and the matching ``Content-Type`` header.

        Args:
            obj: A JSON-serializable object.
        """
        body = jsonlib.dumps(obj, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
        self.set_content(body.encode("utf-8"), content_type="application/json")

    def set_form(self, data: Mapping[str, Any]) -> None:
        r"""Set a URL-encoded form body and the matching ``Content-Type``
        header.

        Args:
            data: The form fields. Sequence values produce repeated fields.
        """
        self.set_content(
            urlencode(data, doseq=True).encode("ascii"),
            content_type="application/x-www-form-urlencoded",
        )

    def clear_content(self) -> None:
        r"""Remove the body and its ``Content-Type`` header."""
        self.content = None
        if "Content-Type" in self.headers:
            del self.headers["Content-Type"]

    def build(self, client: httpx.Client | httpx.AsyncClient | None = None) -> httpx.Request:
        r"""Build an ``httpx.Request`` from this descriptor.

        Each call returns a new ``httpx.Request``, so the result can be
        sent once and rebuilt for a retry.

        Args:
            client: Optional client whose defaults (base URL, headers,
                cookies, timeout) are applied to the request.

        Returns:
            The request, ready to be passed to ``client.send()``.

        Raises:
            ValueError: If the URL is not set.

        Example:
            ```pycon
            >>> from delbody import HttpRequest
            >>> request = HttpRequest.delete("https://api.example.com/items", json=[1, 2])
            >>> built = request.build()
            >>> built.method, built.read()
            ('DELETE', b'[1,2]')

            ```
        """
        url = self._require_url()
        logger.debug(f"Building {self._method} request to {url} (body: {self._body_size()} bytes)")
        if client is not None:
            kwargs: dict[str, Any] = {}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            return client.build_request(
                self._method, url, headers=self.headers, content=self.content, **kwargs
            )
        extensions = {}
        if self.timeout is not None:
            extensions["timeout"] = httpx.Timeout(self.timeout).as_dict()
        return httpx.Request(
            self._method, url, headers=self.headers, content=self.content, extensions=extensions
        )

    def _require_url(self) -> httpx.URL:
        validate_request(self)
        return self._url

    def _body_size(self) -> int:
        return 0 if self.content is None else len(self.content)
