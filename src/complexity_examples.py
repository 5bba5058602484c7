# complexity_examples.py
from typing import Any, Dict, Iterator, List, Sequence, Tuple, Callable

# A collection of small example functions, one per complexity class.
# None of them mutates its input.

# Returned by the search examples when the target is absent.
NOT_FOUND = -1


class ComplexityExampleError(Exception):
    """Base class for errors raised by the complexity examples."""


class EmptyInputError(ComplexityExampleError, ValueError):
    """The operation needs at least one element."""


class PreconditionViolation(ComplexityExampleError, ValueError):
    """A caller contract (sorted input, comparable elements) was broken."""


def first_element(seq: Sequence[Any]) -> Any:
    """Constant time O(1) - Index access, independent of the sequence length."""
    if len(seq) == 0:
        raise EmptyInputError("first_element requires a non-empty sequence")
    return seq[0]


def _is_sorted(seq: Sequence[Any]) -> bool:
    return all(not seq[i + 1] < seq[i] for i in range(len(seq) - 1))


def binary_search(seq: Sequence[Any], target: Any, validate: bool = False) -> int:
    """Logarithmic time O(log n) - Binary search.

    The sequence must be sorted in non-decreasing order. This is the caller's
    contract and is not checked unless `validate` is set, because the check
    itself is O(n).

    Args:
        seq: Sorted sequence to search.
        target: Value to look for.
        validate: Verify the ordering first and fail instead of guessing.

    Returns:
        Index of an occurrence of `target` (any one, if duplicated),
        or NOT_FOUND.

    Raises:
        PreconditionViolation: If `validate` is set and `seq` is not sorted.
    """
    if validate and not _is_sorted(seq):
        raise PreconditionViolation("binary_search requires a sequence sorted in non-decreasing order")

    low, high = 0, len(seq) - 1
    while low <= high:
        mid = (low + high) // 2
        item = seq[mid]
        if item == target:
            return mid
        if item < target:
            # Target can only be in the upper half.
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def linear_search(seq: Sequence[Any], target: Any) -> int:
    """Linear time O(n) - Scan from the front, return the first match."""
    for index, item in enumerate(seq):
        if item == target:
            return index
    return NOT_FOUND


def _merge(left: List[Any], right: List[Any]) -> List[Any]:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        # Take the right element only when strictly smaller, so ties keep the left one first.
        if not right[j] < left[i]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(items: List[Any]) -> List[Any]:
    if len(items) <= 1:
        return items
    mid = len(items) // 2
    return _merge(_merge_sort(items[:mid]), _merge_sort(items[mid:]))


def merge_sort(seq: Sequence[Any]) -> List[Any]:
    """
    Log-linear time O(n log n) - Merge sort.

    Splits at the midpoint, sorts both halves recursively and merges them.
    The split does not depend on the values, so already sorted or reverse
    sorted input costs the same as any other.

    Args:
        seq: Sequence of mutually comparable elements.

    Returns:
        A new list with the same elements in non-decreasing order. Equal
        elements keep their input order.

    Raises:
        PreconditionViolation: If two elements cannot be compared.
    """
    try:
        return _merge_sort(list(seq))
    except TypeError as e:
        raise PreconditionViolation(f"merge_sort requires mutually comparable elements: {e}") from e


def find_duplicates_quadratic(seq: Sequence[Any]) -> List[Any]:
    """Quadratic time O(n^2) - Compare every ordered pair of positions.

    A value is reported once per matching ordered pair, so two equal elements
    at positions i and j show up twice: as (i, j) and as (j, i).
    Use find_duplicates() for one report per value.
    """
    duplicates = []
    n = len(seq)
    for i in range(n):
        for j in range(n):
            if i != j and seq[i] == seq[j]:
                duplicates.append(seq[i])
    return duplicates


def find_duplicates(seq: Sequence[Any]) -> List[Any]:
    """Linear time O(n) expected - Single pass with a set of seen values.

    Each repeated value is reported exactly once, at its first repeat.

    Raises:
        PreconditionViolation: If an element is not hashable.
    """
    seen = set()
    reported = set()
    duplicates = []
    try:
        for item in seq:
            if item in seen:
                if item not in reported:
                    reported.add(item)
                    duplicates.append(item)
            else:
                seen.add(item)
    except TypeError as e:
        raise PreconditionViolation(f"find_duplicates requires hashable elements: {e}") from e
    return duplicates


def enumerate_subsets(collection: Sequence[Any]) -> Iterator[List[Any]]:
    """Exponential time O(2^n) - Lazily yield every subset.

    Subsets come in ascending size; within one size they are ordered by the
    positions of their elements in `collection`. Every call starts over.
    """
    items = list(collection)
    n = len(items)

    def combinations(start: int, size: int) -> Iterator[List[Any]]:
        if size == 0:
            yield []
            return
        for i in range(start, n - size + 1):
            for rest in combinations(i + 1, size - 1):
                yield [items[i]] + rest

    for size in range(n + 1):
        yield from combinations(0, size)


def enumerate_permutations(collection: Sequence[Any]) -> Iterator[List[Any]]:
    """Factorial time O(n!) - Lazily yield every ordering.

    Equal elements are treated as distinct by position, so n elements always
    give n! orderings. Every call starts over.
    """
    arr = list(collection)

    def generate(l: int) -> Iterator[List[Any]]:
        if l >= len(arr) - 1:
            yield list(arr)
            return
        for i in range(l, len(arr)):
            arr[l], arr[i] = arr[i], arr[l]
            yield from generate(l + 1)
            arr[l], arr[i] = arr[i], arr[l] # backtrack

    yield from generate(0)


# --- Dictionary to store all examples ---
# Key: human-readable name, Value: (function reference, complexity class label)
examples_collection: Dict[str, Tuple[Callable[..., Any], str]] = {
    "Constant_O(1)_FirstElement": (first_element, "O(1)"),
    "Logarithmic_O(log_n)_BinarySearch": (binary_search, "O(log n)"),
    "Linear_O(n)_LinearSearch": (linear_search, "O(n)"),
    "N_Log_N_O(n_log_n)_MergeSort": (merge_sort, "O(n log n)"),
    "Quadratic_O(n^2)_Duplicates": (find_duplicates_quadratic, "O(n^2)"),
    "Linear_O(n)_DuplicatesSeenSet": (find_duplicates, "O(n)"),
    "Exponential_O(2^n)_Subsets": (enumerate_subsets, "O(2^n)"),
    "Factorial_O(n!)_Permutations": (enumerate_permutations, "O(n!)"),
}
