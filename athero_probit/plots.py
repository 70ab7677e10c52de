from __future__ import annotations

"""
ROC plots for the cross-validated summary and the threshold sweep.
"""

from pathlib import Path

import matplotlib.pyplot as plt

from .evaluation import SweepPoint


def _finish_roc(title: str, path: Path):
    plt.plot([0, 1], [0, 1], color="navy", lw=2, linestyle="--", label="Chance")
    plt.xlim([0.0, 1.0])
    plt.ylim([0.0, 1.05])
    plt.xlabel("False Positive Rate")
    plt.ylabel("True Positive Rate")
    plt.title(title)
    plt.legend(loc="lower right")
    plt.grid(True)
    plt.tight_layout()
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(path)
    plt.close()


def plot_cv_roc(summary: dict[str, float], path: Path, n_splits: int = 5) -> Path:
    """Three-point ROC through the mean (FPR, sensitivity) at the base threshold."""
    fpr = [0.0, summary["fpr"], 1.0]
    tpr = [0.0, summary["sensitivity"], 1.0]

    plt.figure(figsize=(8, 6))
    plt.plot(
        fpr,
        tpr,
        color="darkorange",
        lw=2,
        marker="o",
        label=f"Probit model (AUC = {summary['auc_three_point']:.3f})",
    )
    _finish_roc(f"ROC Curve: {n_splits}-fold cross-validation", path)
    return path


def plot_sweep_roc(points: list[SweepPoint], path: Path) -> Path:
    """Swept FPR against recall, one point per threshold."""
    plt.figure(figsize=(8, 6))
    plt.plot(
        [p.fpr for p in points],
        [p.recall for p in points],
        color="darkorange",
        lw=2,
        label=f"Thresholds {points[0].threshold:.2f}-{points[-1].threshold:.2f}",
    )
    _finish_roc("ROC Curve: threshold sweep", path)
    return path
