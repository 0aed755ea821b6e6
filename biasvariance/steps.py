"""The demonstration sequence.

Each step synthesizes its samples from a DemoConfig, fits one or more models,
computes fit-quality statistics and builds a chart. Steps share no state;
`run_all` simply runs them in order.
"""
import logging
from dataclasses import dataclass, field

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from biasvariance.constants import STEP_TITLES, model_label
from biasvariance.data_gen import generate_sample_pair, true_curve
from biasvariance.fitting import (
    best_degree, fit_model, fit_table, linear_summary, model_coefficients,
    regression_metrics, rss, rss_by_degree,
)
from biasvariance.plotting import (
    decomposition_chart, fits_overlay_chart, rss_by_degree_chart,
    sample_fit_chart, two_sample_chart,
)
from biasvariance.stats_helpers import decomposition_by_degree, residual_summary

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    name: str
    title: str
    table: pd.DataFrame
    stats: dict = field(default_factory=dict)
    figure: go.Figure = None


def mean_only_step(config):
    """Predict every point with the sample mean."""
    train, _ = generate_sample_pair(config)
    model = fit_model(train["x"], train["y"], 0)
    table = fit_table(train, 0, model=model)
    stats = {
        "mean": float(train["y"].mean()),
        "rss": rss(table["y"], table["y_pred"]),
    }
    fig = sample_fit_chart(train, model, true_curve(config),
                           title=STEP_TITLES["mean_only"], label=model_label(0))
    logger.info("Mean-only model: mean=%.4f rss=%.4f", stats["mean"], stats["rss"])
    return StepResult("mean_only", STEP_TITLES["mean_only"], table, stats, fig)


def linear_step(config):
    """Ordinary least squares straight line, cross-checked against scipy."""
    train, _ = generate_sample_pair(config)
    model = fit_model(train["x"], train["y"], 1)
    table = fit_table(train, 1, model=model)
    intercept, (slope,) = model_coefficients(model)
    metrics = regression_metrics(table["y"], table["y_pred"])
    check = linear_summary(train["x"], train["y"])
    stats = {
        "slope": slope,
        "intercept": intercept,
        "rss": metrics["rss"],
        "r2": metrics["r2"],
        "mean_only_rss": rss(train["y"], np.full(len(train), train["y"].mean())),
        "scipy_slope": check["slope"],
        "scipy_intercept": check["intercept"],
        "slope_stderr": check["stderr"],
        "p_value": check["p_value"],
    }
    stats.update({f"residual_{k}": v for k, v in residual_summary(table["residual"]).items()})
    fig = sample_fit_chart(train, model, true_curve(config),
                           title=STEP_TITLES["linear"], label=model_label(1))
    logger.info("Straight line: y = %.4f + %.4f x, rss=%.4f", intercept, slope, stats["rss"])
    return StepResult("linear", STEP_TITLES["linear"], table, stats, fig)


def polynomial_step(config, degree=3, compare=(0, 1)):
    """One polynomial fit, overlaid on the simpler models it improves upon."""
    train, _ = generate_sample_pair(config)
    models = {d: fit_model(train["x"], train["y"], d) for d in set(compare) | {degree}}
    table = fit_table(train, degree, model=models[degree])
    stats = regression_metrics(table["y"], table["y_pred"])
    stats["degree"] = degree
    fig = fits_overlay_chart(train, models, true_curve(config),
                             title=f"{STEP_TITLES['polynomial']}: {model_label(degree)}")
    logger.info("Degree %d fit: rss=%.4f", degree, stats["rss"])
    return StepResult("polynomial", STEP_TITLES["polynomial"], table, stats, fig)


def degree_sweep_step(config):
    """RSS by degree on the fitted sample and on a second sample."""
    train, second = generate_sample_pair(config)
    table = rss_by_degree(train, range(config.max_degree + 1), test=second)
    stats = {
        "best_degree": best_degree(table),
        "min_train_rss": float(table["train_rss"].min()),
        "min_test_rss": float(table["test_rss"].min()),
    }
    fig = rss_by_degree_chart(table, title=STEP_TITLES["degree_sweep"],
                              highlight=stats["best_degree"])
    logger.info("Degree sweep 0..%d: lowest second-sample rss at degree %d",
                config.max_degree, stats["best_degree"])
    return StepResult("degree_sweep", STEP_TITLES["degree_sweep"], table, stats, fig)


def second_sample_step(config, degree=None):
    """Fit a flexible model to one sample and score it on an independent one."""
    degree = config.high_degree if degree is None else degree
    train, second = generate_sample_pair(config)
    model = fit_model(train["x"], train["y"], degree)
    train_table = fit_table(train, degree, model=model)
    test_table = fit_table(second, degree, model=model)
    train_table["sample"] = "fitted"
    test_table["sample"] = "second"
    table = pd.concat([train_table, test_table], ignore_index=True)
    stats = {
        "degree": degree,
        "train_rss": rss(train_table["y"], train_table["y_pred"]),
        "test_rss": rss(test_table["y"], test_table["y_pred"]),
    }
    stats["gap"] = stats["test_rss"] - stats["train_rss"]
    fig = two_sample_chart(train, second, model, true_curve(config),
                           title=f"{STEP_TITLES['second_sample']}: {model_label(degree)}")
    logger.info("Degree %d: rss %.4f on fitted sample, %.4f on second sample",
                degree, stats["train_rss"], stats["test_rss"])
    return StepResult("second_sample", STEP_TITLES["second_sample"], table, stats, fig)


def decomposition_step(config, degrees=None):
    """Bias squared and variance across many fresh samples, per degree."""
    if degrees is None:
        degrees = range(min(config.max_degree, 9) + 1)
    table = decomposition_by_degree(config, degrees)
    stats = {
        "lowest_error_degree": int(table.loc[table["expected_mse"].idxmin(), "degree"]),
        "noise": float(config.noise_sd ** 2),
    }
    fig = decomposition_chart(table, title=STEP_TITLES["decomposition"])
    logger.info("Decomposition over %d repeats: lowest expected error at degree %d",
                config.n_repeats, stats["lowest_error_degree"])
    return StepResult("decomposition", STEP_TITLES["decomposition"], table, stats, fig)


@st.cache_data
def load_decomposition(config):
    """Cached decomposition step for the pages."""
    return decomposition_step(config)


STEPS = {
    "mean_only": mean_only_step,
    "linear": linear_step,
    "polynomial": polynomial_step,
    "degree_sweep": degree_sweep_step,
    "second_sample": second_sample_step,
    "decomposition": decomposition_step,
}


def run_all(config, names=None):
    """Run the named steps (default: all) top to bottom."""
    names = list(STEPS) if names is None else names
    unknown = [n for n in names if n not in STEPS]
    if unknown:
        raise ValueError(f"Unknown steps {unknown}; choose from {list(STEPS)}")
    return [STEPS[name](config) for name in names]
