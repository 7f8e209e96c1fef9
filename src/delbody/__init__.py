r"""delbody - HTTP DELETE requests with a body, on top of httpx.

``httpx.Client.delete()`` cannot send a request body, because HTTP gives
DELETE no defined body semantics. Many APIs still expect one (bulk
deletes, deletion reasons, concurrency tokens). ``HttpRequest.delete``
creates a DELETE request descriptor that can carry a body, and
``HttpRequest.build`` hands it to ``httpx`` for sending.

Example:
    ```pycon
    >>> import httpx
    >>> from delbody import HttpRequest
    >>> request = HttpRequest.delete("https://api.example.com/items", json={"ids": [1, 2]})
    >>> request.method
    'DELETE'
    >>> with httpx.Client() as client:  # doctest: +SKIP
    ...     response = client.send(request.build(client))
    ...

    ```
"""

from __future__ import annotations

__all__ = ["HttpRequest", "InvalidURIError", "__version__", "parse_uri"]

from importlib.metadata import PackageNotFoundError, version

from delbody.exceptions import InvalidURIError
from delbody.request import HttpRequest
from delbody.uri import parse_uri

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
