"""Custom exception types for kubeswitch."""

from __future__ import annotations


class KubeswitchError(Exception):
    """Base class for all kubeswitch errors."""


class UsageError(ValueError, KubeswitchError):
    """Command-line usage error described by an unsupported operation."""


class BackendError(KubeswitchError):
    """Configuration store or picker failure reported by a backend."""


class UnhandledOperationError(KubeswitchError):
    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"No handler registered for: {', '.join(missing)}.")
