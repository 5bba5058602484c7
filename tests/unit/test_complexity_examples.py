"""
Tests for complexity_examples: one example function per complexity class.

Checked properties:
1. Searches return a matching index or NOT_FOUND
2. merge_sort returns a stable, non-decreasing permutation and leaves input untouched
3. The seen-set duplicate finder reports each repeated value exactly once
4. Enumerators are lazy, restartable and produce 2^n / n! results
5. Empty or invalid input fails with a library error
"""

import math
import random
from collections import Counter

import pytest

from complexity_examples import (
    NOT_FOUND,
    ComplexityExampleError,
    EmptyInputError,
    PreconditionViolation,
    binary_search,
    enumerate_permutations,
    enumerate_subsets,
    examples_collection,
    find_duplicates,
    find_duplicates_quadratic,
    first_element,
    linear_search,
    merge_sort,
)


def _random_lists(count=50, max_len=30, seed=1234):
    rng = random.Random(seed)
    return [[rng.randint(-20, 20) for _ in range(rng.randint(0, max_len))] for _ in range(count)]


# =============================================================================
# Constant-access lookup
# =============================================================================


class TestFirstElement:
    """first_element: O(1) index access."""

    def test_returns_first(self):
        assert first_element([7, 8, 9]) == 7
        assert first_element("xyz") == "x"
        assert first_element((None,)) is None

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            first_element([])

    def test_empty_error_is_value_error(self):
        with pytest.raises(ValueError):
            first_element(())
        assert issubclass(EmptyInputError, ComplexityExampleError)


# =============================================================================
# Searches
# =============================================================================


class TestBinarySearch:
    """binary_search: O(log n) on sorted input."""

    def test_found(self):
        assert binary_search([1, 3, 5, 7, 9], 7) == 3

    def test_not_found(self):
        assert binary_search([1, 3, 5, 7, 9], 4) == -1
        assert binary_search([1, 3, 5, 7, 9], 4) == NOT_FOUND

    def test_bounds(self):
        data = [1, 3, 5, 7, 9]
        assert binary_search(data, 1) == 0
        assert binary_search(data, 9) == 4
        assert binary_search(data, 0) == NOT_FOUND
        assert binary_search(data, 10) == NOT_FOUND

    def test_empty_and_single(self):
        assert binary_search([], 1) == NOT_FOUND
        assert binary_search([4], 4) == 0
        assert binary_search([4], 5) == NOT_FOUND

    def test_duplicates_return_any_match(self):
        data = [1, 2, 2, 2, 2, 3]
        index = binary_search(data, 2)
        assert data[index] == 2

    def test_present_targets_found_in_random_sorted_lists(self):
        for data in _random_lists():
            data = sorted(data)
            for target in data:
                index = binary_search(data, target)
                assert index != NOT_FOUND
                assert data[index] == target

    def test_absent_targets_not_found(self):
        for data in _random_lists():
            data = sorted(data)
            for target in (-100, 100, 0.5):
                assert binary_search(data, target) == NOT_FOUND

    def test_unsorted_input_rejected_when_validating(self):
        with pytest.raises(PreconditionViolation):
            binary_search([3, 1, 2], 2, validate=True)

    def test_validation_accepts_sorted_input(self):
        assert binary_search([1, 1, 2, 3], 3, validate=True) == 3

    def test_does_not_mutate(self):
        data = [1, 2, 3]
        binary_search(data, 2, validate=True)
        assert data == [1, 2, 3]


class TestLinearSearch:
    """linear_search: O(n), first match wins."""

    def test_first_match(self):
        assert linear_search([4, 2, 7, 2], 2) == 1

    def test_not_found(self):
        assert linear_search([4, 2, 7], 5) == NOT_FOUND
        assert linear_search([], 5) == NOT_FOUND

    def test_unsorted_input(self):
        assert linear_search(["pear", "apple", "fig"], "fig") == 2

    def test_agrees_with_list_index(self):
        for data in _random_lists():
            for target in (-3, 0, 5, 100):
                expected = data.index(target) if target in data else NOT_FOUND
                assert linear_search(data, target) == expected


# =============================================================================
# Merge sort
# =============================================================================


class TestMergeSort:
    """merge_sort: O(n log n), stable, non-mutating."""

    def test_example(self):
        assert merge_sort([5, 3, 1, 4, 2]) == [1, 2, 3, 4, 5]

    def test_trivial_inputs(self):
        assert merge_sort([]) == []
        assert merge_sort([42]) == [42]

    def test_returns_new_list(self):
        data = [3, 1, 2]
        result = merge_sort(data)
        assert data == [3, 1, 2]
        assert result is not data

        single = [1]
        assert merge_sort(single) is not single

    def test_accepts_any_sequence(self):
        assert merge_sort((3, 1, 2)) == [1, 2, 3]
        assert merge_sort("cab") == ["a", "b", "c"]

    def test_random_lists_sorted_permutation(self):
        for data in _random_lists():
            result = merge_sort(data)
            assert Counter(result) == Counter(data)
            assert all(result[i] <= result[i + 1] for i in range(len(result) - 1))
            assert result == sorted(data)

    def test_idempotent(self):
        for data in _random_lists(count=20):
            once = merge_sort(data)
            assert merge_sort(once) == once

    def test_sorted_and_reverse_sorted(self):
        data = list(range(200))
        assert merge_sort(data) == data
        assert merge_sort(list(reversed(data))) == data

    def test_stable(self):
        records = [(2, "a"), (1, "b"), (2, "c"), (1, "d"), (2, "e")]

        class Key:
            def __init__(self, record):
                self.record = record

            def __lt__(self, other):
                return self.record[0] < other.record[0]

        result = [k.record for k in merge_sort([Key(r) for r in records])]
        assert result == [(1, "b"), (1, "d"), (2, "a"), (2, "c"), (2, "e")]

    def test_less_than_only_elements(self):
        class Rank:
            def __init__(self, value):
                self.value = value

            def __lt__(self, other):
                return self.value < other.value

        data = [Rank(3), Rank(1), Rank(2)]
        result = merge_sort(data)
        assert [r.value for r in result] == [r.value for r in sorted(data)] == [1, 2, 3]

    def test_incomparable_elements(self):
        with pytest.raises(PreconditionViolation):
            merge_sort([1, "two", 3])


# =============================================================================
# Duplicate detectors
# =============================================================================


class TestFindDuplicates:
    """find_duplicates: seen-set, one report per repeated value."""

    def test_example(self):
        assert find_duplicates(["apple", "banana", "apple", "mango"]) == ["apple"]

    def test_reported_once_on_first_repeat(self):
        assert find_duplicates([1, 2, 1, 1, 2, 3, 1]) == [1, 2]

    def test_no_duplicates(self):
        assert find_duplicates([]) == []
        assert find_duplicates([1, 2, 3]) == []

    def test_unhashable_elements(self):
        with pytest.raises(PreconditionViolation):
            find_duplicates([[1], [1]])

    def test_matches_counts(self):
        for data in _random_lists():
            result = find_duplicates(data)
            expected = {value for value, count in Counter(data).items() if count > 1}
            assert set(result) == expected
            assert len(result) == len(expected)


class TestFindDuplicatesQuadratic:
    """find_duplicates_quadratic: every ordered pair of positions."""

    def test_pair_reported_twice(self):
        assert find_duplicates_quadratic(["apple", "banana", "apple", "mango"]) == ["apple", "apple"]

    def test_triple_reported_per_ordered_pair(self):
        # 3 equal elements -> 3 * 2 ordered pairs
        assert find_duplicates_quadratic([5, 5, 5]) == [5] * 6

    def test_no_duplicates(self):
        assert find_duplicates_quadratic([1, 2, 3]) == []
        assert find_duplicates_quadratic([]) == []

    def test_same_values_as_optimized(self):
        for data in _random_lists():
            assert set(find_duplicates_quadratic(data)) == set(find_duplicates(data))

    def test_report_count_per_value(self):
        for data in _random_lists(count=10):
            reports = Counter(find_duplicates_quadratic(data))
            for value, count in Counter(data).items():
                assert reports.get(value, 0) == count * (count - 1)


# =============================================================================
# Enumerators
# =============================================================================


class TestEnumerateSubsets:
    """enumerate_subsets: lazy, 2^n subsets by ascending size."""

    def test_example(self):
        assert list(enumerate_subsets(["a", "b"])) == [[], ["a"], ["b"], ["a", "b"]]

    def test_empty_collection(self):
        assert list(enumerate_subsets([])) == [[]]

    def test_order_by_size_then_position(self):
        assert list(enumerate_subsets("abc")) == [
            [], ["a"], ["b"], ["c"], ["a", "b"], ["a", "c"], ["b", "c"], ["a", "b", "c"],
        ]

    @pytest.mark.parametrize("n", [0, 1, 3, 6, 10])
    def test_count_and_distinct(self, n):
        subsets = list(enumerate_subsets(range(n)))
        assert len(subsets) == 2 ** n
        assert len({tuple(s) for s in subsets}) == 2 ** n
        sizes = [len(s) for s in subsets]
        assert sizes == sorted(sizes)

    def test_lazy(self):
        gen = enumerate_subsets(range(64))
        assert next(gen) == []
        assert next(gen) == [0]

    def test_restartable(self):
        data = ["x", "y", "z"]
        assert list(enumerate_subsets(data)) == list(enumerate_subsets(data))

    def test_does_not_mutate(self):
        data = ["x", "y"]
        list(enumerate_subsets(data))
        assert data == ["x", "y"]


class TestEnumeratePermutations:
    """enumerate_permutations: lazy, n! orderings."""

    def test_example(self):
        perms = list(enumerate_permutations(["a", "b", "c"]))
        assert len(perms) == 6
        assert len({tuple(p) for p in perms}) == 6

    @pytest.mark.parametrize("n", [0, 1, 2, 4, 6])
    def test_count_and_bijection(self, n):
        data = list(range(n))
        perms = list(enumerate_permutations(data))
        assert len(perms) == math.factorial(n)
        assert len({tuple(p) for p in perms}) == math.factorial(n)
        for p in perms:
            assert sorted(p) == data

    def test_duplicates_distinct_by_position(self):
        assert len(list(enumerate_permutations([1, 1, 2]))) == 6

    def test_yields_independent_lists(self):
        perms = list(enumerate_permutations([1, 2, 3]))
        perms[0].append(99)
        assert all(len(p) == 3 for p in perms[1:])

    def test_lazy(self):
        gen = enumerate_permutations(range(50))
        assert next(gen) == list(range(50))

    def test_deterministic_and_restartable(self):
        data = "abcd"
        assert list(enumerate_permutations(data)) == list(enumerate_permutations(data))

    def test_does_not_mutate(self):
        data = [3, 2, 1]
        list(enumerate_permutations(data))
        assert data == [3, 2, 1]


# =============================================================================
# Registry
# =============================================================================


class TestExamplesCollection:
    """examples_collection maps names to (function, class label)."""

    def test_every_class_present(self):
        labels = {label for _, label in examples_collection.values()}
        assert labels == {"O(1)", "O(log n)", "O(n)", "O(n log n)", "O(n^2)", "O(2^n)", "O(n!)"}

    def test_entries_callable(self):
        for func, _ in examples_collection.values():
            assert callable(func)
