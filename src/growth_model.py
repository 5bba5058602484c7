# growth_model.py

from types import MappingProxyType
from typing import Dict, Any, Sequence

import numpy as np
import pandas as pd
from scipy.special import factorial
from scipy.stats import spearmanr
from sklearn.metrics import mean_absolute_percentage_error


def _constant(n: np.ndarray) -> np.ndarray:
    return np.ones_like(n, dtype=float)


def _log_n(n: np.ndarray) -> np.ndarray:
    return np.log2(n)


def _linear(n: np.ndarray) -> np.ndarray:
    return n.astype(float)


def _n_log_n(n: np.ndarray) -> np.ndarray:
    return n * np.log2(n)


def _quadratic(n: np.ndarray) -> np.ndarray:
    return n.astype(float) ** 2


def _exponential(n: np.ndarray) -> np.ndarray:
    with np.errstate(over='ignore'):
        return np.exp2(n.astype(float))


def _factorial(n: np.ndarray) -> np.ndarray:
    return factorial(n, exact=False)


# Ordered from slowest to fastest growing.
# Key: complexity class label, Value: steps needed for n items
COMPLEXITY_CLASSES = MappingProxyType({
    "O(1)": _constant,
    "O(log n)": _log_n,
    "O(n)": _linear,
    "O(n log n)": _n_log_n,
    "O(n^2)": _quadratic,
    "O(2^n)": _exponential,
    "O(n!)": _factorial,
})


def _as_sizes(sizes: Sequence[int]) -> np.ndarray:
    n = np.asarray(sizes, dtype=float)
    if n.ndim != 1 or n.size == 0:
        raise ValueError("sizes must be a non-empty one-dimensional sequence")
    if np.any(n < 1):
        raise ValueError(f"sizes must all be >= 1, got {list(sizes)}")
    return n


def build_growth_table(sizes: Sequence[int]) -> pd.DataFrame:
    """
    Builds the classic comparison table: how many steps each complexity
    class needs for n items.

    Args:
        sizes: Input sizes (each >= 1) to tabulate.

    Returns:
        pd.DataFrame: One row per size (index 'n'), one column per class.
    """
    n = _as_sizes(sizes)
    table = pd.DataFrame({label: func(n) for label, func in COMPLEXITY_CLASSES.items()})
    table.index = pd.Index(n.astype(int), name="n")
    return table


def fit_complexity_class(sizes: Sequence[int], counts: Sequence[float], label: str) -> Dict[str, Any]:
    """
    Fits counts ~ scale * f(n) + offset for one complexity class.

    Args:
        sizes: Input sizes the counts were measured at.
        counts: Observed step counts.
        label: Key of COMPLEXITY_CLASSES.

    Returns:
        Dictionary with 'fitted' values, 'scale', 'offset', 'MAPE' and 'Spearman_rho'.

    Raises:
        KeyError: If label is not a known complexity class.
        ValueError: If sizes and counts do not line up.
    """
    if label not in COMPLEXITY_CLASSES:
        raise KeyError(f"Unknown complexity class '{label}'. Available: {list(COMPLEXITY_CLASSES)}")
    n = _as_sizes(sizes)
    measured = np.asarray(counts, dtype=float)
    if measured.shape != n.shape:
        raise ValueError(f"Got {n.size} sizes but {measured.size} counts")

    model = COMPLEXITY_CLASSES[label](n)
    if not np.all(np.isfinite(model)):
        # The class outgrows float range at these sizes; it cannot explain finite counts.
        return {
            'fitted': np.full_like(measured, np.nan),
            'scale': float('nan'),
            'offset': float('nan'),
            'MAPE': float('inf'),
            'Spearman_rho': float('nan'),
        }

    if np.ptp(model) == 0:
        # A flat model has no slope to fit; the best constant is the mean.
        scale, offset = 0.0, float(measured.mean())
        fitted = np.full_like(measured, offset)
    else:
        # Fit on the model scaled to [0, 1] so huge values do not overflow least squares.
        peak = np.max(np.abs(model))
        slope, offset = np.polyfit(model / peak, measured, 1)
        scale = slope / peak
        fitted = slope * (model / peak) + offset

    mape = mean_absolute_percentage_error(measured, fitted)
    # Rank correlation is undefined when either side is flat.
    if np.ptp(measured) == 0 or np.ptp(fitted) == 0:
        corr = float("nan")
    else:
        corr, _ = spearmanr(measured, fitted)

    return {
        'fitted': fitted,
        'scale': float(scale),
        'offset': float(offset),
        'MAPE': float(mape),
        'Spearman_rho': float(corr),
    }


def classify_growth(sizes: Sequence[int], counts: Sequence[float]) -> pd.DataFrame:
    """
    Ranks every complexity class by how well it explains the observed counts.

    Returns:
        pd.DataFrame: Indexed by class label, columns 'MAPE', 'Spearman_rho',
                      'scale' and 'offset', best fit (lowest MAPE) first.
    """
    if len(sizes) != len(counts):
        raise ValueError(f"Got {len(sizes)} sizes but {len(counts)} counts")
    if len(sizes) < 3:
        raise ValueError("At least 3 samples are needed to tell complexity classes apart")

    rows = []
    for label in COMPLEXITY_CLASSES:
        fit = fit_complexity_class(sizes, counts, label)
        rows.append({
            'complexity_class': label,
            'MAPE': fit['MAPE'],
            'Spearman_rho': fit['Spearman_rho'],
            'scale': fit['scale'],
            'offset': fit['offset'],
        })

    # A stable sort keeps the slower-growing class first on equal error.
    result = pd.DataFrame(rows).set_index('complexity_class')
    return result.sort_values('MAPE', kind='mergesort')
