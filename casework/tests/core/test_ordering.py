"""Unit tests for case ordering."""

import pytest

from casework.core.models import Case, MethodRef
from casework.core.ordering import compare_case_names, ordinal_compare, sort_cases


class Suite:
    def A(self, value=None):
        pass

    def B(self):
        pass


def method(name: str) -> MethodRef:
    return MethodRef(owner=Suite, name=name, function=getattr(Suite, name))


class TestOrdinalCompare:
    """Ordinal string comparison."""

    @pytest.mark.parametrize(
        ("left", "right", "expected"),
        [
            ("a", "a", 0),
            ("a", "b", -1),
            ("b", "a", 1),
            ("Z", "a", -1),  # uppercase sorts before lowercase by code point
            ("a", "ab", -1),
            ("item10", "item9", -1),  # no natural-number ordering
            ("é", "z", 1),  # non-ASCII after ASCII
        ],
    )
    def test_compare(self, left: str, right: str, expected: int) -> None:
        """Comparison follows code point order, not locale rules."""
        assert ordinal_compare(left, right) == expected


class TestSortCases:
    """Sorting expanded cases."""

    def test_ties_keep_expansion_order(self) -> None:
        """B, A(tuple1), A(tuple2) sorts to A(tuple1), A(tuple2), B."""
        b = Case(method=method("B"))
        a1 = Case(method=method("A"), arguments=("tuple1",))
        a2 = Case(method=method("A"), arguments=("tuple2",))

        ordered = sort_cases([b, a1, a2], compare_case_names)

        assert ordered == [a1, a2, b]

    def test_ties_keep_order_even_when_arguments_sort_backwards(self) -> None:
        """Arguments do not take part in the default ordering."""
        a_late = Case(method=method("A"), arguments=("zzz",))
        a_early = Case(method=method("A"), arguments=("aaa",))

        ordered = sort_cases([a_late, a_early], compare_case_names)

        assert ordered == [a_late, a_early]

    def test_custom_comparator(self) -> None:
        """Any comparator can replace the default."""
        a = Case(method=method("A"))
        b = Case(method=method("B"))

        ordered = sort_cases([a, b], lambda x, y: -compare_case_names(x, y))

        assert ordered == [b, a]

    def test_empty(self) -> None:
        """Sorting nothing yields nothing."""
        assert sort_cases([], compare_case_names) == []
