from __future__ import annotations

"""
Data loading, preprocessing and fold assignment for the atherosclerosis cohort.
"""

from pathlib import Path

import numpy as np
import pandas as pd
from sklearn.model_selection import KFold

from .constants import (
    AGE_COLUMN,
    AGEGROUP_COLUMN,
    AGEGROUP_LEVELS,
    COMORBIDITY_COLUMNS,
    GENDER_COLUMN,
    GENDER_LEVELS,
    ID_COLUMN,
    INDICATOR_COLUMNS,
    LAB_COLUMNS,
    N_SPLITS,
    OUTCOME,
    PREDICTORS,
    RAW_COLUMNS,
    SEED,
)


class MissingColumnsError(ValueError):
    """Raised when the model frame lacks columns the formula depends on."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Dataset is missing required columns: {missing}")


def load_dataset(csv_path: Path) -> pd.DataFrame:
    return pd.read_csv(csv_path)


def _require_columns(df: pd.DataFrame, columns: list[str]):
    missing = [col for col in columns if col not in df.columns]
    if missing:
        raise MissingColumnsError(missing)


def _one_hot(series: pd.Series, levels: list[str]) -> pd.DataFrame:
    """Indicator columns for every level, even those absent from the data."""
    known = series.isin(levels)
    if not known.all():
        unexpected = series[~known].unique().tolist()
        raise ValueError(
            f"Unexpected values in {series.name}: {unexpected} (expected one of {levels})"
        )
    return pd.get_dummies(series.astype(pd.CategoricalDtype(levels)))


def preprocess(df: pd.DataFrame) -> pd.DataFrame:
    """
    One-hot encode gender and age group, drop the raw categoricals and the
    identifier, and coerce indicator columns to bool.

    Raises MissingColumnsError if a raw column is absent and ValueError on
    gender or age-group values outside the known levels (missing values included).
    """
    _require_columns(df, RAW_COLUMNS)
    gender = _one_hot(df[GENDER_COLUMN], GENDER_LEVELS)
    agegroup = _one_hot(df[AGEGROUP_COLUMN], AGEGROUP_LEVELS)

    out = (
        df.drop(columns=[GENDER_COLUMN, AGEGROUP_COLUMN, ID_COLUMN])
        .join(gender)
        .join(agegroup)
    )
    out[INDICATOR_COLUMNS] = out[INDICATOR_COLUMNS].astype(bool)
    out[OUTCOME] = out[OUTCOME].astype(int)
    return out


def validate_schema(df: pd.DataFrame) -> pd.DataFrame:
    """Check the outcome and every predictor are present before fitting."""
    _require_columns(df, [OUTCOME] + PREDICTORS)
    return df


def make_folds(
    n_rows: int, n_splits: int = N_SPLITS, seed: int = SEED
) -> list[tuple[np.ndarray, np.ndarray]]:
    """Deterministic shuffled K-fold (train_idx, test_idx) pairs over row positions."""
    kfold = KFold(n_splits=n_splits, shuffle=True, random_state=seed)
    return list(kfold.split(np.arange(n_rows)))


def make_synthetic_cohort(
    n_rows: int = 500,
    positive_rate: float = 0.3,
    seed: int = SEED,
    separable: bool = False,
) -> pd.DataFrame:
    """
    Raw cohort frame with the full column schema.

    The outcome has exactly round(n_rows * positive_rate) positives. With
    separable=True, age alone splits the classes (positives are older).
    """
    if not 0.0 < positive_rate < 1.0:
        raise ValueError(f"positive_rate must be in (0, 1), got {positive_rate}")

    rng = np.random.default_rng(seed)
    n_pos = int(round(n_rows * positive_rate))
    outcome = np.zeros(n_rows, dtype=int)
    outcome[rng.choice(n_rows, size=n_pos, replace=False)] = 1

    gender = rng.choice(GENDER_LEVELS, n_rows)
    agegroup = rng.choice(AGEGROUP_LEVELS, n_rows, p=[0.1, 0.6, 0.3])
    labs = {col: rng.binomial(1, 0.25, n_rows) for col in LAB_COLUMNS}

    if separable:
        age = np.where(outcome == 1, rng.uniform(65, 90, n_rows), rng.uniform(20, 50, n_rows))
        comorbidities = {col: rng.binomial(1, 0.3, n_rows) for col in COMORBIDITY_COLUMNS}
    else:
        age = np.clip(rng.normal(55 + 10 * outcome, 15, n_rows), 0, 100)
        comorbidities = {
            col: rng.binomial(1, np.where(outcome == 1, 0.6, 0.25)) for col in COMORBIDITY_COLUMNS
        }

    return pd.DataFrame(
        {
            ID_COLUMN: np.arange(1, n_rows + 1),
            OUTCOME: outcome,
            GENDER_COLUMN: gender,
            AGEGROUP_COLUMN: agegroup,
            AGE_COLUMN: np.round(age, 1),
            **labs,
            **comorbidities,
        }
    )
