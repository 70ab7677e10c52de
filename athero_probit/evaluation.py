from __future__ import annotations

"""
Cross-validated evaluation of the probit model and a threshold sweep on a
single train/test split.
"""

from dataclasses import asdict, dataclass
from typing import Sequence

import numpy as np
import pandas as pd

from .constants import BASE_THRESHOLD, OUTCOME, SWEEP_THRESHOLDS
from .metrics import FoldResult, classification_metrics, confusion_counts, evaluate_fold
from .probit import ProbitGLM


@dataclass(frozen=True)
class SweepPoint:
    threshold: float
    recall: float
    precision: float
    fpr: float


def _check_threshold(threshold: float):
    if not 0.0 <= threshold <= 1.0:
        raise ValueError(f"Threshold must lie in [0, 1], got {threshold}")


def cross_validate(
    df: pd.DataFrame,
    folds: Sequence[tuple[np.ndarray, np.ndarray]],
    threshold: float = BASE_THRESHOLD,
    verbose: bool = False,
) -> list[FoldResult]:
    """Fit on each training partition and score its held-out partition."""
    _check_threshold(threshold)
    results = []
    for fold, (train_idx, test_idx) in enumerate(folds, start=1):
        train, test = df.iloc[train_idx], df.iloc[test_idx]
        model = ProbitGLM(verbose=verbose).fit(train)
        probs = model.predict_proba(test)
        results.append(evaluate_fold(fold, test[OUTCOME], probs, threshold))
    return results


def threshold_sweep(
    df: pd.DataFrame,
    fold: tuple[np.ndarray, np.ndarray],
    thresholds: Sequence[float] = SWEEP_THRESHOLDS,
    verbose: bool = False,
) -> list[SweepPoint]:
    """
    Fit once on the fold's training partition, then classify the test
    partition at each threshold. Points come back sorted by threshold.
    """
    for t in thresholds:
        _check_threshold(t)

    train_idx, test_idx = fold
    train, test = df.iloc[train_idx], df.iloc[test_idx]
    model = ProbitGLM(verbose=verbose).fit(train)
    probs = model.predict_proba(test)
    y_true = test[OUTCOME].to_numpy(dtype=int)

    points = []
    for t in sorted(float(t) for t in thresholds):
        scores = classification_metrics(confusion_counts(y_true, (probs > t).astype(int)))
        points.append(
            SweepPoint(
                threshold=t,
                recall=scores["sensitivity"],
                precision=scores["precision"],
                fpr=1.0 - scores["specificity"],
            )
        )
    return points


def sweep_frame(points: list[SweepPoint]) -> pd.DataFrame:
    return pd.DataFrame([asdict(p) for p in points]).set_index("threshold")
