from __future__ import annotations

"""
Column names, model formula and evaluation settings shared across the package.
"""

import numpy as np

OUTCOME = "Atherosclerosis41401"
ID_COLUMN = "subject_id"
AGE_COLUMN = "firstadmitage"

GENDER_COLUMN = "GENDER"
GENDER_LEVELS = ["F", "M"]
AGEGROUP_COLUMN = "agegroup"
AGEGROUP_LEVELS = ["neonate", "adult", "elder"]

LAB_COLUMNS = [
    "abnormal_glucose",
    "abnormal_cholesterol",
    "abnormal_triglycerides",
    "abnormal_creatinine",
]
COMORBIDITY_COLUMNS = ["Hypertension4019", "Hypercholesterolemia2720"]

# 0/1 columns that end up as booleans after preprocessing
INDICATOR_COLUMNS = GENDER_LEVELS + AGEGROUP_LEVELS + LAB_COLUMNS + COMORBIDITY_COLUMNS

# F and neonate are the reference levels
PREDICTORS = ["M", "adult", "elder", AGE_COLUMN] + LAB_COLUMNS + COMORBIDITY_COLUMNS
FORMULA = f"{OUTCOME} ~ " + " + ".join(PREDICTORS)

N_SPLITS = 5
SEED = 2561
BASE_THRESHOLD = 0.5
SWEEP_THRESHOLDS = np.round(np.linspace(0.10, 0.90, 81), 2)

# columns the raw CSV must carry before preprocessing
RAW_COLUMNS = (
    [ID_COLUMN, OUTCOME, GENDER_COLUMN, AGEGROUP_COLUMN, AGE_COLUMN]
    + LAB_COLUMNS
    + COMORBIDITY_COLUMNS
)
