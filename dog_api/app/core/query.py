"""
Filtering and pagination shared by every list endpoint.

A list request is answered in two steps: ``apply_filters`` narrows a
store snapshot with the criteria built from the query string, then
``paginate`` cuts the requested window out of the result.  Criteria
whose value is ``None`` were not supplied by the client and impose no
constraint, so routers can pass every optional query parameter through
unconditionally.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Sequence, Tuple, TypeVar

from ..schemas.common import Pagination

T = TypeVar("T")


@dataclass(frozen=True)
class Criterion:
    """One filter condition on a single record attribute.

    ``test`` receives the record's attribute value and the criterion
    value.  Records whose attribute is ``None`` never satisfy an active
    criterion.
    """

    field: str
    value: Any
    test: Callable[[Any, Any], bool]

    @property
    def active(self) -> bool:
        return self.value is not None

    def matches(self, record: Any) -> bool:
        if not self.active:
            return True
        actual = getattr(record, self.field)
        if actual is None:
            return False
        return self.test(actual, self.value)


def _contains_casefold(actual: str, needle: str) -> bool:
    return needle.lower() in actual.lower()


def equals(field: str, value: Any) -> Criterion:
    """Exact equality (enums, booleans, ids)."""
    return Criterion(field, value, operator.eq)


def icontains(field: str, value: Any) -> Criterion:
    """Case‑insensitive substring containment for free‑text fields."""
    return Criterion(field, value, _contains_casefold)


def at_least(field: str, bound: Any) -> Criterion:
    """Inclusive lower bound (numbers and dates)."""
    return Criterion(field, bound, operator.ge)


def at_most(field: str, bound: Any) -> Criterion:
    """Inclusive upper bound (numbers and dates)."""
    return Criterion(field, bound, operator.le)


def apply_filters(records: Iterable[T], *criteria: Criterion) -> List[T]:
    """Return the records satisfying every active criterion, in order."""
    active = [criterion for criterion in criteria if criterion.active]
    return [record for record in records if all(c.matches(record) for c in active)]


def paginate(records: Sequence[T], page: int, limit: int) -> Tuple[List[T], Pagination]:
    """Cut page ``page`` (1‑based) of size ``limit`` out of ``records``.

    Pages past the end yield an empty window rather than an error.  The
    descriptor's ``total`` counts the records before windowing.
    """
    start = (page - 1) * limit
    window = list(records[start:start + limit])
    total = len(records)
    total_pages = math.ceil(total / limit) if total else 0
    return window, Pagination(page=page, limit=limit, total=total, total_pages=total_pages)
