import numpy as np
import pandas as pd
import pytest

from athero_probit import MissingColumnsError, make_folds, preprocess, validate_schema
from athero_probit.constants import INDICATOR_COLUMNS, OUTCOME, PREDICTORS


def test_preprocess_one_hot_and_drops(raw_cohort, cohort):
    for col in ["F", "M", "neonate", "adult", "elder"]:
        assert col in cohort.columns
    for col in ["GENDER", "agegroup", "subject_id"]:
        assert col not in cohort.columns
    assert (cohort["M"] == (raw_cohort["GENDER"] == "M")).all()
    assert (cohort[["neonate", "adult", "elder"]].sum(axis=1) == 1).all()


def test_preprocess_casts_indicators(cohort):
    for col in INDICATOR_COLUMNS:
        assert cohort[col].dtype == bool
    assert set(cohort[OUTCOME].unique()) <= {0, 1}


def test_preprocess_keeps_absent_levels():
    raw = pd.DataFrame(
        {
            "subject_id": [1, 2],
            "Atherosclerosis41401": [0, 1],
            "GENDER": ["F", "F"],
            "agegroup": ["adult", "adult"],
            "firstadmitage": [40.0, 70.0],
            "abnormal_glucose": [0, 1],
            "abnormal_cholesterol": [0, 1],
            "abnormal_triglycerides": [1, 0],
            "abnormal_creatinine": [0, 0],
            "Hypertension4019": [1, 1],
            "Hypercholesterolemia2720": [0, 1],
        }
    )
    out = preprocess(raw)
    assert not out["M"].any()
    assert not out["elder"].any()
    assert out["adult"].all()


def test_preprocess_missing_raw_column_fails(raw_cohort):
    with pytest.raises(MissingColumnsError) as excinfo:
        preprocess(raw_cohort.drop(columns=["GENDER"]))
    assert excinfo.value.missing == ["GENDER"]


@pytest.mark.parametrize(
    "column",
    ["Hypertension4019", "abnormal_creatinine", "Atherosclerosis41401", "subject_id", "firstadmitage"],
)
def test_pipeline_reports_missing_raw_column(raw_cohort, column):
    with pytest.raises(MissingColumnsError) as excinfo:
        validate_schema(preprocess(raw_cohort.drop(columns=[column])))
    assert excinfo.value.missing == [column]


@pytest.mark.parametrize(
    "column, value",
    [("GENDER", "Male"), ("agegroup", "elderly"), ("GENDER", np.nan)],
)
def test_preprocess_rejects_unknown_levels(raw_cohort, column, value):
    raw = raw_cohort.astype({column: object})
    raw.loc[:9, column] = value
    with pytest.raises(ValueError, match=column):
        preprocess(raw)


def test_validate_schema_names_missing_columns(cohort):
    with pytest.raises(MissingColumnsError) as excinfo:
        validate_schema(cohort.drop(columns=["Hypertension4019", "elder"]))
    assert excinfo.value.missing == ["elder", "Hypertension4019"]
    assert isinstance(excinfo.value, ValueError)


def test_validate_schema_passes_through(cohort):
    assert validate_schema(cohort) is cohort
    assert len(PREDICTORS) == 10


def test_folds_partition_rows():
    n_rows = 103
    folds = make_folds(n_rows)
    assert len(folds) == 5

    all_test = np.concatenate([test for _, test in folds])
    assert sorted(all_test.tolist()) == list(range(n_rows))
    for train, test in folds:
        assert set(train).isdisjoint(test)
        assert len(train) + len(test) == n_rows


def test_folds_deterministic():
    first = make_folds(200, seed=2561)
    second = make_folds(200, seed=2561)
    for (tr_a, te_a), (tr_b, te_b) in zip(first, second):
        assert np.array_equal(tr_a, tr_b)
        assert np.array_equal(te_a, te_b)

    other = make_folds(200, seed=1)
    assert not all(np.array_equal(a[1], b[1]) for a, b in zip(first, other))
