# operation_counter.py

import json
from collections.abc import Sequence
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Tuple

import pandas as pd

import complexity_examples as ce

# --- Configuration Loading ---

DEFAULT_CONFIG_PATH = "./config/growth_config.json"

_DEFAULT_SAMPLE_SIZES = {
    "O(1)": [1, 16, 256, 4096, 65536],
    "O(log n)": [2, 16, 128, 1024, 8192, 65536],
    "O(n)": [10, 100, 1000, 5000, 10000],
    "O(n log n)": [16, 64, 256, 1024, 4096],
    "O(n^2)": [10, 25, 50, 100, 200],
    "O(2^n)": [2, 4, 6, 8, 10, 12],
    "O(n!)": [2, 3, 4, 5, 6, 7],
}
_DEFAULT_REPORT_DIR = "./growth_reports"


def load_configuration(config_file: str = DEFAULT_CONFIG_PATH) -> Tuple[Dict[str, List[int]], str]:
    """
    Loads sample sizes and the report directory from a JSON file.

    A missing file is not an error: the built-in defaults are used and a
    warning is printed. A file that exists but is malformed is an error.

    Args:
        config_file: Path to configuration file

    Returns:
        tuple: (sample sizes per complexity class, report directory)
    """
    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except FileNotFoundError:
        print(f"[Config] Warning: '{config_file}' not found. Using default sample sizes.")
        return dict(_DEFAULT_SAMPLE_SIZES), _DEFAULT_REPORT_DIR
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON format in configuration file '{config_file}': {e}")

    try:
        sample_sizes = {label: [int(n) for n in sizes] for label, sizes in config_data['sample_sizes'].items()}
    except KeyError as e:
        raise KeyError(f"Missing required configuration key in '{config_file}': {e}")
    return sample_sizes, config_data.get('report_dir', _DEFAULT_REPORT_DIR)


# --- Load configuration at module startup ---
_sample_sizes, REPORT_DIR = load_configuration()
SAMPLE_SIZES = MappingProxyType(_sample_sizes)


class OperationCounter:
    """Tally of abstract steps (element reads, comparisons, hashes)."""

    def __init__(self) -> None:
        self.count = 0

    def tick(self, steps: int = 1) -> None:
        self.count += steps

    def reset(self) -> None:
        self.count = 0


class CountedValue:
    """
    Wraps an element so that every comparison or hash made on it is counted.

    Comparing two CountedValues counts once, on the left-hand operand.
    """

    __slots__ = ('value', 'counter')

    def __init__(self, value: Any, counter: OperationCounter) -> None:
        self.value = value
        self.counter = counter

    def _unwrap(self, other: Any) -> Any:
        self.counter.tick()
        return other.value if isinstance(other, CountedValue) else other

    def __eq__(self, other: Any) -> bool:
        return self.value == self._unwrap(other)

    def __ne__(self, other: Any) -> bool:
        return self.value != self._unwrap(other)

    def __lt__(self, other: Any) -> bool:
        return self.value < self._unwrap(other)

    def __le__(self, other: Any) -> bool:
        return self.value <= self._unwrap(other)

    def __gt__(self, other: Any) -> bool:
        return self.value > self._unwrap(other)

    def __ge__(self, other: Any) -> bool:
        return self.value >= self._unwrap(other)

    def __hash__(self) -> int:
        self.counter.tick()
        return hash(self.value)

    def __repr__(self) -> str:
        return f"CountedValue({self.value!r})"


class CountedSequence(Sequence):
    """Read-only sequence that counts every successful element read."""

    def __init__(self, items: List[Any], counter: OperationCounter) -> None:
        self._items = list(items)
        self.counter = counter

    def __getitem__(self, index):
        item = self._items[index]
        self.counter.tick()
        return item

    def __len__(self) -> int:
        return len(self._items)


# --- Worst-case workloads ---
# Each builder prepares the input for size n and returns a zero-argument call.

def _first_element_workload(n: int, counter: OperationCounter) -> Callable[[], Any]:
    data = CountedSequence(list(range(n)), counter)
    return lambda: ce.first_element(data)


def _binary_search_workload(n: int, counter: OperationCounter) -> Callable[[], Any]:
    data = CountedSequence([CountedValue(i, counter) for i in range(n)], counter)
    # Larger than every element: the search runs until the bounds cross.
    return lambda: ce.binary_search(data, n)


def _linear_search_workload(n: int, counter: OperationCounter) -> Callable[[], Any]:
    data = CountedSequence([CountedValue(i, counter) for i in range(n)], counter)
    return lambda: ce.linear_search(data, n)


def _merge_sort_workload(n: int, counter: OperationCounter) -> Callable[[], Any]:
    data = CountedSequence([CountedValue(i, counter) for i in range(n, 0, -1)], counter)
    return lambda: ce.merge_sort(data)


def _duplicates_workload(func: Callable[..., Any]) -> Callable[[int, OperationCounter], Callable[[], Any]]:
    def build(n: int, counter: OperationCounter) -> Callable[[], Any]:
        # All values distinct: no early exit and nothing to report.
        data = CountedSequence([CountedValue(i, counter) for i in range(n)], counter)
        return lambda: func(data)
    return build


def _enumeration_workload(func: Callable[..., Any]) -> Callable[[int, OperationCounter], Callable[[], Any]]:
    def build(n: int, counter: OperationCounter) -> Callable[[], Any]:
        def run() -> None:
            for _ in func(range(n)):
                counter.tick()
        return run
    return build


WORKLOADS = MappingProxyType({
    ce.first_element: _first_element_workload,
    ce.binary_search: _binary_search_workload,
    ce.linear_search: _linear_search_workload,
    ce.merge_sort: _merge_sort_workload,
    ce.find_duplicates_quadratic: _duplicates_workload(ce.find_duplicates_quadratic),
    ce.find_duplicates: _duplicates_workload(ce.find_duplicates),
    ce.enumerate_subsets: _enumeration_workload(ce.enumerate_subsets),
    ce.enumerate_permutations: _enumeration_workload(ce.enumerate_permutations),
})


def count_steps(name: str, n: int) -> int:
    """
    Counts the abstract steps one example takes on its worst-case input of size n.

    Search, sort and duplicate examples count element reads plus comparisons
    and hashes; the enumerators count the items they produce.

    Args:
        name: Key of complexity_examples.examples_collection.
        n: Input size, at least 1.

    Returns:
        Number of steps taken.
    """
    if name not in ce.examples_collection:
        raise KeyError(f"Unknown example '{name}'. Available: {list(ce.examples_collection)}")
    if n < 1:
        raise ValueError(f"Input size must be >= 1, got {n}")

    func, _ = ce.examples_collection[name]
    counter = OperationCounter()
    run = WORKLOADS[func](n, counter)
    counter.reset()
    run()
    return counter.count


def measure_growth(name: str, sizes: List[int], verbose: bool = True) -> pd.DataFrame:
    """
    Counts the steps of one example over a range of input sizes.

    Returns:
        pd.DataFrame: Columns 'n' and 'steps', one row per size.
    """
    if verbose:
        print(f"[Growth] Counting steps for '{name}' at sizes {list(sizes)}...")
    rows = []
    for n in sizes:
        steps = count_steps(name, n)
        if verbose:
            print(f"    > n={n}: {steps} steps")
        rows.append({'n': n, 'steps': steps})
    return pd.DataFrame(rows, columns=['n', 'steps'])
