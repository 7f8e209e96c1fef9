r"""Validation shared by the request descriptor."""

from __future__ import annotations

__all__ = ["validate_content", "validate_method", "validate_request", "validate_timeout"]

from delbody.core.validation import (
    validate_content,
    validate_method,
    validate_request,
    validate_timeout,
)
