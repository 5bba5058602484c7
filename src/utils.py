# utils.py

import os
import re
from typing import Dict, Any, Sequence

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from operation_counter import REPORT_DIR

# Charts and CSVs go to the report directory from config/growth_config.json.
DEFAULT_REPORT_DIR = REPORT_DIR


def make_safe_filename(name: str) -> str:
    """Converts a string into a safe filename by removing special characters."""
    name = name.replace(' ', '_').replace('^', '').replace('(', '').replace(')', '')
    safe_name = re.sub(r'(?u)[^-\w.]', '', name)
    return safe_name


def save_dataframe_csv(df: pd.DataFrame, filename: str, report_dir: str = DEFAULT_REPORT_DIR) -> str:
    """Saves a DataFrame to a CSV file in the report directory and returns its path."""
    os.makedirs(report_dir, exist_ok=True)
    filepath = os.path.join(report_dir, filename)
    df.to_csv(filepath, encoding='utf-8')
    return filepath


def plot_growth_curves(table: pd.DataFrame, output_path: str, title: str = "Steps Needed per Complexity Class") -> None:
    """
    Draws one line per complexity class from a growth table on a log scale.

    Args:
        table (pd.DataFrame): Output of growth_model.build_growth_table().
        output_path (str): The full path where the PNG file will be saved.
        title (str): Chart title.
    """
    if table.empty:
        print("[Chart Info] Cannot generate growth chart: The input table is empty.")
        return

    fig, ax = plt.subplots(figsize=(10, 6))
    for label in table.columns:
        ax.plot(table.index, table[label], marker='o', label=label)

    ax.set_title(title, fontsize=14)
    ax.set_xlabel("Input Size n")
    ax.set_ylabel("Steps (Log Scale)")
    ax.set_yscale('log')
    ax.grid(True, which='major', linestyle='--', linewidth=0.5)
    ax.legend(title="Complexity Class", loc='best', fontsize='small')
    fig.tight_layout()

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)


def plot_measured_vs_fitted(sizes: Sequence[int], counts: Sequence[float], fitted: Sequence[float],
                            title: str, output_path: str) -> None:
    """Generates and saves a plot of counted steps against the best-fitting growth curve."""
    sizes = np.asarray(sizes)

    plt.figure(figsize=(8, 6))
    plt.scatter(sizes, counts, alpha=0.7, edgecolors='k', label='Counted steps')
    plt.plot(sizes, fitted, color='red', linestyle='--', label='Fitted growth')

    plt.title(title)
    plt.xlabel("Input Size n")
    plt.ylabel("Steps")
    plt.grid(True)
    plt.legend()
    plt.tight_layout()

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    plt.savefig(output_path)
    plt.close()


def summarize_classification(results: Dict[str, Dict[str, Any]]) -> str:
    """
    Generates a short English summary of how the examples were classified.

    Args:
        results: Example name -> {'expected': label, 'detected': label, 'MAPE': float}.
    """
    if not results:
        return "No examples were classified."

    matches = [name for name, r in results.items() if r['expected'] == r['detected']]
    summary = (
        f"{len(matches)} of {len(results)} examples grew exactly as their complexity class predicts. "
    )

    mismatches = [name for name in results if name not in matches]
    if mismatches:
        details = ", ".join(
            f"'{name}' (expected {results[name]['expected']}, looks like {results[name]['detected']})"
            for name in mismatches
        )
        summary += f"Examples that need a closer look: {details}. "
    else:
        worst = max(results, key=lambda k: results[k]['MAPE'])
        summary += (
            f"The loosest fit was '{worst}' with a MAPE of {results[worst]['MAPE']*100:.1f}%, "
            "which comes from lower-order terms that Big-O notation ignores."
        )

    return summary.strip()
