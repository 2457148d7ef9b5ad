"""Capability Protocols: the business operations the endpoints invoke.

Invariants:
    - Implementations are pure over their inputs, except hostname() which
      reads host identity
    - Failures are raised as DomainError subclasses, never returned as values
    - Implementations hold no per-call state (safe for concurrent reuse)

Design Decisions:
    - Protocol over ABC: structural subtyping, implementations need no base class
"""

from typing import Protocol


class StringService(Protocol):
    """Operations on strings."""

    def uppercase(self, s: str) -> str:
        """Upper-cased `s`. Raises EmptyInputError when `s` is empty."""
        ...

    def count(self, s: str) -> int:
        """Length of `s`. Total over all strings, including empty."""
        ...


class OSInfoService(Protocol):
    """Operations reading host identity."""

    def hostname(self) -> str:
        """Current host name. Raises HostnameUnavailableError on lookup failure."""
        ...
