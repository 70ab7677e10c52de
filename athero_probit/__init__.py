"""
Probit regression for predicting atherosclerosis (ICD-9 414.01) in a clinical cohort.

This package contains data preparation helpers, a statsmodels probit GLM wrapper,
cross-validation and threshold-sweep evaluation, and ROC plotting used by main.py.
"""

from .constants import FORMULA, OUTCOME, PREDICTORS
from .data_prep import (
    MissingColumnsError,
    load_dataset,
    make_folds,
    make_synthetic_cohort,
    preprocess,
    validate_schema,
)
from .evaluation import SweepPoint, cross_validate, sweep_frame, threshold_sweep
from .metrics import FoldResult, folds_frame, summarize_coefficients, summarize_folds
from .probit import ProbitGLM

__all__ = [
    "FORMULA",
    "OUTCOME",
    "PREDICTORS",
    "MissingColumnsError",
    "load_dataset",
    "make_folds",
    "make_synthetic_cohort",
    "preprocess",
    "validate_schema",
    "SweepPoint",
    "cross_validate",
    "sweep_frame",
    "threshold_sweep",
    "FoldResult",
    "folds_frame",
    "summarize_coefficients",
    "summarize_folds",
    "ProbitGLM",
]
