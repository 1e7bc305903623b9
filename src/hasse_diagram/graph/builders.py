"""
Builders from user text into a validated `Poset`.

Two surface syntaxes are accepted for a relation line, `a < b` and `a,b`;
both produce the same `(a, b)` pair.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from hasse_diagram.errors import (
    EmptyInputError,
    FormatError,
    InvalidNumberError,
    TooManyElementsError,
    UnknownElementError,
)
from hasse_diagram.graph.ir import Element, Poset, Relation
from hasse_diagram.utils.config import config
from hasse_diagram.utils.logging import logger

_RELATION_PATTERNS = (
    ("less_than", re.compile(r"^(.+?)\s*<\s*(.+)$")),
    ("pair", re.compile(r"^(.+?)\s*,\s*(.+)$")),
)
_POSITIVE_INT = re.compile(r"^\+?[0-9]+$")


def _split_tokens(text: str) -> List[str]:
    return [token.strip() for token in text.split(",") if token.strip()]


def _check_size(count: int, limit: Optional[int]) -> None:
    if limit is not None and count > limit:
        raise TooManyElementsError(count, limit)


def parse_relation(line: str) -> Tuple[str, Relation]:
    """
    Match one stripped relation line against the accepted syntaxes.

    Returns:
        The name of the matching syntax and the `(a, b)` pair.
    """
    for kind, pattern in _RELATION_PATTERNS:
        match = pattern.match(line)
        if match:
            return kind, (match.group(1).strip(), match.group(2).strip())
    raise FormatError(line)


def parse_input(
    elements_text: str,
    relations_text: str,
    *,
    max_elements: Optional[int] = None,
) -> Poset:
    """
    Build a poset from a comma-separated element list and relation lines.

    Args:
        elements_text: e.g. ``"a, b, c"``. Empty tokens are dropped; repeats
            are kept as given.
        relations_text: one relation per line, ``a < b`` or ``a,b``. Blank
            lines are skipped.
        max_elements: Optional cap; defaults to ``config.max_elements``.

    Raises:
        EmptyInputError: no elements.
        FormatError: a line matches neither syntax.
        UnknownElementError: a relation names an undeclared element.
        TooManyElementsError: more elements than the cap.
    """
    elements = _split_tokens(elements_text)
    if not elements:
        raise EmptyInputError("Please enter at least one element")
    _check_size(len(elements), max_elements if max_elements is not None else config.max_elements)

    known = set(elements)
    relations: List[Relation] = []
    for raw in relations_text.splitlines():
        line = raw.strip()
        if not line:
            continue
        _, (a, b) = parse_relation(line)
        missing = [e for e in (a, b) if e not in known]
        if missing:
            raise UnknownElementError(line, missing)
        relations.append((a, b))

    logger.debug("parsed %d elements and %d relations", len(elements), len(relations))
    return Poset(elements=elements, relations=relations)


def _parse_positive_int(token: str) -> int:
    if not _POSITIVE_INT.match(token):
        raise InvalidNumberError(token)
    try:
        value = int(token)
    except ValueError:
        # Digit strings beyond the interpreter's conversion limit.
        raise InvalidNumberError(token) from None
    if value <= 0:
        raise InvalidNumberError(token)
    return value


def generate_divisibility_poset(
    numbers_text: str,
    *,
    max_elements: Optional[int] = None,
) -> Poset:
    """
    Poset over positive integers where a < b iff a divides b and a != b.

    Elements are canonical decimal strings in input order. A number given
    more than once keeps only its first occurrence. Relations are all
    dividing pairs, not reduced.

    Raises:
        EmptyInputError: no numbers.
        InvalidNumberError: a token is not a positive integer.
        TooManyElementsError: more numbers than the cap.
    """
    values = [_parse_positive_int(token) for token in _split_tokens(numbers_text)]
    if not values:
        raise EmptyInputError("Please enter at least one positive integer")

    numbers = list(dict.fromkeys(values))
    if len(numbers) != len(values):
        logger.warning(
            "dropped %d repeated number(s) from divisibility input",
            len(values) - len(numbers),
        )
    _check_size(len(numbers), max_elements if max_elements is not None else config.max_elements)

    relations: List[Relation] = [
        (str(a), str(b))
        for a in numbers
        for b in numbers
        if a != b and b % a == 0
    ]
    return Poset(elements=[str(n) for n in numbers], relations=relations)


def format_poset(poset: Poset) -> Tuple[str, str]:
    """Render a poset back into element and relation text fields."""
    elements_text = ", ".join(poset.elements)
    relations_text = "\n".join(f"{a} < {b}" for a, b in poset.relations)
    return elements_text, relations_text


def poset_from_pairs(elements: Sequence[Element], relations: Sequence[Relation]) -> Poset:
    """Build and validate a poset from already-split data."""
    poset = Poset(elements=list(elements), relations=[(a, b) for a, b in relations])
    poset.validate()
    return poset
