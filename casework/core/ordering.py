"""Deterministic ordering of expanded cases."""

from collections.abc import Callable, Iterable
from functools import cmp_to_key

from .models import Case

CaseComparator = Callable[[Case, Case], int]


def ordinal_compare(left: str, right: str) -> int:
    """Compare strings by code point, ignoring locale.

    Code point order matches UTF-8 byte order, so results do not depend
    on the environment the run happens in.
    """
    if left == right:
        return 0
    return -1 if left < right else 1


def compare_case_names(left: Case, right: Case) -> int:
    """Default case comparator: ordinal comparison of case names."""
    return ordinal_compare(left.name, right.name)


def sort_cases(cases: Iterable[Case], comparator: CaseComparator) -> list[Case]:
    """Order cases with ``comparator``.

    The sort is stable, so cases that compare equal (the expanded tuples
    of one method) keep their expansion order.
    """
    return sorted(cases, key=cmp_to_key(comparator))
