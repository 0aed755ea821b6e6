"""Residual diagnostics and the repeated-sample view of bias and variance."""
import logging

import numpy as np
import pandas as pd
import streamlit as st
from scipy import stats

from biasvariance.data_gen import generate_sample, true_function
from biasvariance.fitting import fit_model, predict

logger = logging.getLogger(__name__)


def residual_summary(residuals):
    """Descriptive statistics for a residual series."""
    series = pd.Series(np.asarray(residuals, dtype=float))
    return {
        "count": len(series),
        "mean": series.mean(),
        "std": series.std(),
        "min": series.min(),
        "max": series.max(),
        "q25": series.quantile(0.25),
        "median": series.median(),
        "q75": series.quantile(0.75),
        "skewness": series.skew(),
        "kurtosis": series.kurtosis(),
    }


def normality_test(residuals):
    """Run Shapiro-Wilk on the residuals and return stat, p-value."""
    residuals = np.asarray(residuals, dtype=float)
    if len(residuals) > 5000:
        residuals = np.random.RandomState(42).choice(residuals, 5000, replace=False)
    stat, p = stats.shapiro(residuals)
    return stat, p


def bootstrap_predictions(sample, degree, x_eval, n_boot=200, ci=90, seed=42):
    """Refit on bootstrap resamples of one sample; return predictions and a percentile band."""
    rng = np.random.RandomState(seed)
    x = sample["x"].values
    y = sample["y"].values
    preds = np.empty((n_boot, len(x_eval)))
    for b in range(n_boot):
        idx = rng.choice(len(x), size=len(x), replace=True)
        model = fit_model(x[idx], y[idx], degree)
        preds[b] = predict(model, x_eval)
    lower = np.percentile(preds, (100 - ci) / 2, axis=0)
    upper = np.percentile(preds, 100 - (100 - ci) / 2, axis=0)
    return preds, lower, upper


@st.cache_data
def load_bootstrap_band(config, degree, n_boot=100, n_points=100):
    """Cached bootstrap band around the training sample: (sample, x_eval, lower, upper)."""
    sample = generate_sample(config)
    x_eval = np.linspace(config.x_min, config.x_max, n_points)
    _, lower, upper = bootstrap_predictions(sample, degree, x_eval, n_boot=n_boot, seed=config.seed)
    return sample, x_eval, lower, upper


def bias_variance_decomposition(config, degree, x_eval=None):
    """Fit `degree` to n_repeats fresh samples and split the expected error.

    bias_sq and variance are averaged over the evaluation grid; noise is the
    irreducible noise_sd ** 2, so expected_mse = bias_sq + variance + noise.
    """
    if x_eval is None:
        x_eval = np.linspace(config.x_min, config.x_max, 50)
    x_eval = np.asarray(x_eval, dtype=float)
    f_eval = true_function(x_eval, config.true_function)

    preds = np.empty((config.n_repeats, len(x_eval)))
    for r in range(config.n_repeats):
        sample = generate_sample(config, seed=config.seed + 1000 + r)
        model = fit_model(sample["x"], sample["y"], degree)
        preds[r] = predict(model, x_eval)

    avg_pred = preds.mean(axis=0)
    bias_sq = float(np.mean((avg_pred - f_eval) ** 2))
    variance = float(np.mean(preds.var(axis=0)))
    noise = float(config.noise_sd ** 2)
    return {
        "degree": degree,
        "bias_sq": bias_sq,
        "variance": variance,
        "noise": noise,
        "expected_mse": bias_sq + variance + noise,
        "predictions": preds,
    }


def decomposition_by_degree(config, degrees, x_eval=None):
    """Table of bias_sq, variance, noise and expected_mse per degree."""
    rows = []
    for d in degrees:
        result = bias_variance_decomposition(config, d, x_eval=x_eval)
        result.pop("predictions")
        rows.append(result)
        logger.debug("Degree %d: bias^2=%.4f variance=%.4f", d, result["bias_sq"], result["variance"])
    return pd.DataFrame(rows)
