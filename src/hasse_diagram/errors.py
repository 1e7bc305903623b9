"""
Error taxonomy for poset construction and diagram generation.
"""

from __future__ import annotations

from typing import Sequence


class PosetError(ValueError):
    """Base class for every error raised by hasse-diagram."""


class PosetInputError(PosetError):
    """Raised by the builders when user input cannot form a poset."""


class EmptyInputError(PosetInputError):
    pass


class FormatError(PosetInputError):
    def __init__(self, line: str) -> None:
        super().__init__(f'Invalid relation format: "{line}"')
        self.line = line


class UnknownElementError(PosetInputError):
    def __init__(self, line: str, missing: Sequence[str]) -> None:
        super().__init__(
            f'Relation "{line}" contains elements not in the element list: '
            + ", ".join(missing)
        )
        self.line = line
        self.missing = tuple(missing)


class InvalidNumberError(PosetInputError):
    def __init__(self, token: str) -> None:
        super().__init__(
            f"Invalid number: {token}. Only positive integers are allowed."
        )
        self.token = token


class TooManyElementsError(PosetInputError):
    def __init__(self, count: int, limit: int) -> None:
        super().__init__(f"Poset has {count} elements; the limit is {limit}.")
        self.count = count
        self.limit = limit


class CyclicPosetError(PosetError):
    """The covering relation contains a cycle, so no level assignment exists."""

    def __init__(self, elements: Sequence[str]) -> None:
        super().__init__(
            "Relations contain a cycle; cannot assign levels to: " + ", ".join(elements)
        )
        self.elements = tuple(elements)
