import pytest

from athero_probit import make_synthetic_cohort, preprocess


@pytest.fixture
def raw_cohort():
    return make_synthetic_cohort(n_rows=300, positive_rate=0.3, seed=7)


@pytest.fixture
def cohort(raw_cohort):
    return preprocess(raw_cohort)
