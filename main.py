#!/usr/bin/env python3
"""
Command-line driver for the linear regression engine.

Without ``--input`` the two built-in example data sets are fitted. With
``--input`` a CSV holding ``x`` and ``y`` columns is fitted instead. For each
data set the coefficients, slope confidence interval and R^2 are logged, CSV
summaries are written and a regression chart is rendered.
"""

import argparse
import logging
import os
import sys
import time

import numpy as np
import pandas as pd

from linreg import (
    DEFAULT_ALPHA,
    DegenerateFit,
    ci_half_width,
    coeff_of_determination,
    fit,
)
from linreg.output import save_fit_summary
from linreg.plotting import plot_regression
from linreg.reporting import format_slope_report

DEFAULT_OUTPUT_DIR = "output"
LOG_FILENAME = "linreg.log"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

EXAMPLE_DATASETS = {
    "proportional": (
        [0.1, 0.2, 0.3, 0.4, 0.5, 0.6],
        [0.00081, 0.00163, 0.00244, 0.00325, 0.00407, 0.00488],
    ),
    "linear_trend": (
        [1, 2, 3, 4, 5, 6, 7, 8, 9, 10],
        [3.1, 5.0, 7.2, 9.1, 10.0, 13.2, 15.5, 16.5, 19.0, 21.3],
    ),
}


def load_xy_csv(path):
    """Read ``x`` and ``y`` columns from a CSV file.

    Rows where either value is missing or not numeric are dropped.
    """
    df = pd.read_csv(path)
    missing = {"x", "y"} - set(df.columns)
    if missing:
        raise ValueError(f"{path}: missing column(s) {sorted(missing)}")
    x = pd.to_numeric(df["x"], errors="coerce").to_numpy(dtype=float)
    y = pd.to_numeric(df["y"], errors="coerce").to_numpy(dtype=float)
    mask = np.isfinite(x) & np.isfinite(y)
    if not mask.all():
        logging.warning(
            "%s: dropped %d row(s) with missing or non-numeric values",
            path,
            int((~mask).sum()),
        )
    return x[mask], y[mask]


def analyze_dataset(name, x, y, alpha, output_dir, make_plot=True):
    """Fit one data set and write its artifacts.

    Returns:
        dict | None: Paths and headline numbers, or ``None`` when the data
        cannot be fitted.
    """
    result = fit(x, y)
    if not result.is_valid:
        logging.error(
            "%s: fit not possible (need >= 3 paired points with varying x)", name
        )
        return None

    r2 = coeff_of_determination(result)
    logging.info(
        "%s: n=%d beta0=%.6g beta1=%.6g rho=%.6f R^2=%.6f sse=%.6g",
        name,
        result.n,
        result.beta0,
        result.beta1,
        result.rho,
        r2,
        result.sse,
    )

    try:
        half_width = ci_half_width(result, alpha)
    except DegenerateFit as exc:
        logging.warning("%s: slope interval unavailable: %s", name, exc)
        half_width = None
    else:
        logging.info(
            "%s: %g%% CI for slope = [%.6g, %.6g]",
            name,
            100.0 * (1.0 - alpha),
            result.beta1 - half_width,
            result.beta1 + half_width,
        )
    logging.info("%s: %s", name, format_slope_report(result, alpha))

    dataset_dir = os.path.join(output_dir, name)
    summary_csv, points_csv = save_fit_summary(result, x, y, dataset_dir, alpha)

    plot_path = None
    if make_plot and half_width is not None:
        plot_path = plot_regression(
            x,
            y,
            result,
            half_width,
            os.path.join(dataset_dir, "regression.png"),
            confidence=1.0 - alpha,
            title=name,
        )

    return {
        "name": name,
        "result": result,
        "half_width": half_width,
        "summary_csv": summary_csv,
        "points_csv": points_csv,
        "plot": plot_path,
    }


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fit a simple linear regression and report a slope CI."
    )
    parser.add_argument(
        "--input", default=None, help="CSV file with x and y columns (optional)."
    )
    parser.add_argument(
        "--alpha",
        type=float,
        default=DEFAULT_ALPHA,
        help=f"Significance level for the slope interval (default: {DEFAULT_ALPHA}).",
    )
    parser.add_argument(
        "--outdir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--no-plot", action="store_true", help="Skip rendering regression charts."
    )
    return parser


def main(argv=None):
    """Run the regression pipeline and return a process exit code."""
    args = _build_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    os.makedirs(args.outdir, exist_ok=True)
    file_handler = logging.FileHandler(
        os.path.join(args.outdir, LOG_FILENAME), mode="w"
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.addHandler(file_handler)
    try:
        return _run(args)
    finally:
        root.removeHandler(file_handler)
        file_handler.close()


def _run(args):
    start_time = time.time()
    if args.input:
        stem = os.path.splitext(os.path.basename(args.input))[0]
        datasets = {stem: load_xy_csv(args.input)}
    else:
        datasets = EXAMPLE_DATASETS
    logging.info("Configured %d data set(s) for analysis", len(datasets))

    outputs = []
    for name, (x, y) in datasets.items():
        out = analyze_dataset(
            name, x, y, args.alpha, args.outdir, make_plot=not args.no_plot
        )
        if out is not None:
            outputs.append(out)

    if not outputs:
        logging.error("No data set could be fitted. Terminating execution.")
        return 1

    for out in outputs:
        logging.info("  - Fit summary: %s", out["summary_csv"])
        logging.info("  - Fitted points: %s", out["points_csv"])
        if out["plot"]:
            logging.info("  - Regression chart: %s", out["plot"])
    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    return 0


if __name__ == "__main__":
    sys.exit(main())
