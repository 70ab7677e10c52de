import importlib

import matplotlib
import pandas as pd

from athero_probit import make_folds, sweep_frame, threshold_sweep
from athero_probit import plots
from athero_probit.plots import plot_cv_roc, plot_sweep_roc
from main import build_arg_parser, main


def test_plots_are_written(tmp_path, cohort):
    summary = {"fpr": 0.2, "sensitivity": 0.7, "auc_three_point": 0.75}
    cv_path = plot_cv_roc(summary, tmp_path / "cv_roc.png")
    points = threshold_sweep(cohort, make_folds(len(cohort))[0])
    sweep_path = plot_sweep_roc(points, tmp_path / "nested" / "sweep_roc.png")
    assert cv_path.stat().st_size > 0
    assert sweep_path.stat().st_size > 0
    assert len(sweep_frame(points)) == 81


def test_main_demo_run(tmp_path, capsys):
    args = build_arg_parser().parse_args(["--demo", "--output-dir", str(tmp_path)])
    main(args)

    out = capsys.readouterr().out
    assert "5-fold CV" in out
    for name in ["cv_roc.png", "sweep_roc.png", "fold_metrics.csv", "threshold_sweep.csv"]:
        assert (tmp_path / name).exists()

    per_fold = pd.read_csv(tmp_path / "fold_metrics.csv", index_col="fold")
    assert list(per_fold.index) == [1, 2, 3, 4, 5]
    assert len(pd.read_csv(tmp_path / "threshold_sweep.csv")) == 81


def test_main_reads_csv(tmp_path, raw_cohort):
    csv_path = tmp_path / "cohort.csv"
    raw_cohort.to_csv(csv_path, index=False)
    args = build_arg_parser().parse_args(
        ["--csv-path", str(csv_path), "--output-dir", str(tmp_path / "out"), "--n-splits", "3"]
    )
    main(args)
    per_fold = pd.read_csv(tmp_path / "out" / "fold_metrics.csv")
    assert len(per_fold) == 3


def test_plots_import_keeps_caller_backend():
    original = matplotlib.get_backend()
    try:
        matplotlib.use("svg")
        importlib.reload(plots)
        assert matplotlib.get_backend() == "svg"
    finally:
        matplotlib.use(original)
