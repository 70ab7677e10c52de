from __future__ import annotations

"""
Probit-link binomial GLM over the fixed cohort formula, fitted with statsmodels.
"""

import numpy as np
import pandas as pd
import statsmodels.api as sm
import statsmodels.formula.api as smf

from .constants import BASE_THRESHOLD, FORMULA


class ProbitGLM:
    """
    Binomial GLM with a probit link. Each fit is independent; refitting
    discards the previous result.
    """

    def __init__(self, formula: str = FORMULA, max_iter: int = 100, verbose: bool = False):
        self.formula = formula
        self.max_iter = max_iter
        self.verbose = verbose
        self.result_ = None

    def fit(self, df: pd.DataFrame):
        """Fit by IRLS; statsmodels errors propagate to the caller."""
        family = sm.families.Binomial(link=sm.families.links.Probit())
        model = smf.glm(self.formula, data=df, family=family)
        self.result_ = model.fit(maxiter=self.max_iter)

        if self.verbose:
            print(
                f"[GLM] rows={int(self.result_.nobs)}, "
                f"iterations={self.result_.fit_history['iteration']}, "
                f"deviance={self.result_.deviance:.4f}"
            )
        return self

    def _check_fitted(self):
        if self.result_ is None:
            raise RuntimeError("Model is not fitted.")

    def predict_proba(self, df: pd.DataFrame) -> np.ndarray:
        """Return P(outcome=1) for each row in df."""
        self._check_fitted()
        return np.asarray(self.result_.predict(df), dtype=float)

    def predict(self, df: pd.DataFrame, threshold: float = BASE_THRESHOLD) -> np.ndarray:
        """1 where the probability is strictly above threshold, else 0."""
        return (self.predict_proba(df) > threshold).astype(int)

    def coefficients(self) -> pd.DataFrame:
        self._check_fitted()
        return pd.DataFrame(
            {
                "estimate": self.result_.params,
                "std_err": self.result_.bse,
                "z": self.result_.tvalues,
                "p_value": self.result_.pvalues,
            }
        )
