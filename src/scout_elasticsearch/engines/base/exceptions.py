"""Engine-specific exceptions."""

from __future__ import annotations

from typing import Any


class EngineError(Exception):
    """Base exception for search engine errors."""


class BulkOperationError(EngineError):
    """Raised when the cluster reports errors for a bulk request.

    The full response body is kept on ``response`` so callers can inspect
    the per-item failures.
    """

    def __init__(self, response: dict[str, Any]) -> None:
        self.response = response
        self.failed_items = _failed_items(response)
        super().__init__(f"Bulk update error ({len(self.failed_items)} failed items)")


class UnsupportedOperation(EngineError, NotImplementedError):
    """Raised when an engine does not implement an operation of the contract."""


class ConfigurationError(EngineError):
    """Raised when engine configuration is invalid."""


class EngineNotFoundError(EngineError):
    """Raised when a requested engine driver is not registered."""


def _failed_items(response: dict[str, Any]) -> list[dict[str, Any]]:
    failed: list[dict[str, Any]] = []
    for item in response.get("items", []):
        for result in item.values():
            if isinstance(result, dict) and "error" in result:
                failed.append(result)
    return failed
