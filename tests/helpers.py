r"""Shared test helpers."""

from __future__ import annotations

__all__ = ["TEST_URL", "make_transport"]

import httpx

TEST_URL = "https://api.example.com/items"


def make_transport(
    responses: list[httpx.Response], seen: list[httpx.Request]
) -> httpx.MockTransport:
    """Create a transport that records every request in ``seen`` and
    answers with ``responses`` in order.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return responses[len(seen) - 1]

    return httpx.MockTransport(handler)
