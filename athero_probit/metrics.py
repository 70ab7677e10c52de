from __future__ import annotations

"""
Metric helpers: confusion counts, threshold metrics, ROC summaries and
per-fold result records.
"""

import math
from dataclasses import asdict, dataclass, fields

import numpy as np
import pandas as pd
from sklearn import metrics


@dataclass(frozen=True)
class ConfusionCounts:
    tp: int
    fp: int
    tn: int
    fn: int

    @property
    def total(self) -> int:
        return self.tp + self.fp + self.tn + self.fn


@dataclass(frozen=True)
class FoldResult:
    """Scores for one held-out fold. NaN marks an undefined ratio."""

    fold: int
    n_test: int
    counts: ConfusionCounts
    accuracy: float
    sensitivity: float
    specificity: float
    precision: float
    f1: float
    fpr: float
    auc_three_point: float
    auc: float


METRIC_NAMES = [
    f.name for f in fields(FoldResult) if f.name not in ("fold", "n_test", "counts")
]


def _ratio(num: float, den: float) -> float:
    return num / den if den else float("nan")


def confusion_counts(y_true, y_pred) -> ConfusionCounts:
    """Confusion counts for 0/1 labels, positive class = 1."""
    tn, fp, fn, tp = metrics.confusion_matrix(y_true, y_pred, labels=[0, 1]).ravel()
    return ConfusionCounts(tp=int(tp), fp=int(fp), tn=int(tn), fn=int(fn))


def classification_metrics(counts: ConfusionCounts) -> dict[str, float]:
    """Accuracy, sensitivity, specificity, precision and F1; NaN on zero denominators."""
    sensitivity = _ratio(counts.tp, counts.tp + counts.fn)
    specificity = _ratio(counts.tn, counts.tn + counts.fp)
    precision = _ratio(counts.tp, counts.tp + counts.fp)
    return {
        "accuracy": _ratio(counts.tp + counts.tn, counts.total),
        "sensitivity": sensitivity,
        "specificity": specificity,
        "precision": precision,
        "f1": _ratio(2 * precision * sensitivity, precision + sensitivity),
    }


def three_point_roc(counts: ConfusionCounts) -> tuple[float, float, float]:
    """
    ROC curve of hard labels: (0,0) -> (fpr, tpr) -> (1,1).
    Returns (fpr, tpr, trapezoidal AUC).
    """
    fpr = _ratio(counts.fp, counts.fp + counts.tn)
    tpr = _ratio(counts.tp, counts.tp + counts.fn)
    if math.isnan(fpr) or math.isnan(tpr):
        return fpr, tpr, float("nan")
    return fpr, tpr, float(metrics.auc([0.0, fpr, 1.0], [0.0, tpr, 1.0]))


def score_auc(y_true, probs: np.ndarray) -> float:
    """AUC over the full probability scores; NaN when only one class is present."""
    try:
        return float(metrics.roc_auc_score(y_true, probs))
    except ValueError:
        return float("nan")


def evaluate_fold(fold: int, y_true, probs: np.ndarray, threshold: float) -> FoldResult:
    """Classify with probability > threshold and score against y_true."""
    y_true = np.asarray(y_true, dtype=int)
    preds = (np.asarray(probs) > threshold).astype(int)
    counts = confusion_counts(y_true, preds)
    fpr, _, auc_three_point = three_point_roc(counts)
    return FoldResult(
        fold=fold,
        n_test=len(y_true),
        counts=counts,
        fpr=fpr,
        auc_three_point=auc_three_point,
        auc=score_auc(y_true, probs),
        **classification_metrics(counts),
    )


def _mean(values: list[float]) -> float:
    # fsum keeps the mean of identical inputs exact
    return math.fsum(values) / len(values)


def summarize_folds(results: list[FoldResult]) -> dict[str, float]:
    """Arithmetic mean of every metric across folds."""
    if not results:
        raise ValueError("No fold results to summarize.")
    return {name: _mean([getattr(r, name) for r in results]) for name in METRIC_NAMES}


def folds_frame(results: list[FoldResult]) -> pd.DataFrame:
    """One row per fold with counts and metrics flattened."""
    rows = []
    for r in results:
        row = asdict(r)
        row.update(row.pop("counts"))
        rows.append(row)
    return pd.DataFrame(rows).set_index("fold")


def summarize_coefficients(coef_table: pd.DataFrame, top_k: int = 5) -> dict[str, pd.Series]:
    """Largest positive and negative estimates, intercept excluded."""
    coef_series = coef_table["estimate"].drop(index="Intercept", errors="ignore")
    coef_sorted = coef_series.sort_values()
    return {
        "positive": coef_sorted.tail(top_k)[::-1],
        "negative": coef_sorted.head(top_k),
    }
