"""
Exception types raised by skbridge.

Every exception carries a machine-readable code so callers can
handle specific failure modes programmatically. Errors raised by a
foreign estimator during a dispatched call are never wrapped: they reach
the caller as the original exception.
"""

from __future__ import annotations

from typing import Any


class SkbridgeError(Exception):
    """Base exception for all skbridge errors."""

    def __init__(self, message: str, code: str = "SKBRIDGE_ERROR"):
        self.code = code
        super().__init__(message)


class MissingBackend(SkbridgeError, ImportError):
    """Raised when the foreign library (or one of its symbols) is unavailable."""

    def __init__(self, component: str, url: str = "", package: str = "scikit-learn"):
        self.component = component
        self.package = package
        self.url = url
        msg = f"This skbridge functionality ({component}) requires installing the Python {package} library."
        if url:
            msg += f" See instructions on {url}"
        super().__init__(msg, code="MISSING_BACKEND")


class InvalidParameter(SkbridgeError, ValueError):
    """Raised when a ``set_params`` path segment matches no known parameter."""

    def __init__(self, name: str, estimator: Any):
        self.name = name
        self.estimator = estimator
        msg = f"Invalid parameter {name!r} for estimator {estimator!r}"
        super().__init__(msg, code="INVALID_PARAMETER")


class CyclicParameterGraph(SkbridgeError, RecursionError):
    """Raised when deep parameter traversal re-enters an estimator on its own path."""

    def __init__(self, path: list[str]):
        self.path = list(path)
        msg = f"Estimator parameter graph contains a cycle at {'__'.join(path) or '<root>'!r}"
        super().__init__(msg, code="CYCLIC_PARAMETER_GRAPH")


class UnknownOperation(SkbridgeError, KeyError):
    """Raised when an operation has no entry in the dispatch table."""

    def __init__(self, operation: str, available: list[str] | None = None):
        self.operation = operation
        msg = f"Unknown estimator operation '{operation}'"
        if available:
            msg += f". Available: {', '.join(available)}"
        super().__init__(msg, code="UNKNOWN_OPERATION")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


__all__ = [
    "SkbridgeError",
    "MissingBackend",
    "InvalidParameter",
    "CyclicParameterGraph",
    "UnknownOperation",
]
