"""String Service: uppercase and count over plain strings.

Invariants:
    - uppercase("") raises EmptyInputError; any other input succeeds
    - count() is total and measures UTF-8 bytes, so "héllo" counts 6
"""

from stringsvc.core.errors import EmptyInputError


class BasicStringService:
    """Stateless StringService implementation."""

    def uppercase(self, s: str) -> str:
        if s == "":
            raise EmptyInputError()
        return s.upper()

    def count(self, s: str) -> int:
        return len(s.encode("utf-8"))
