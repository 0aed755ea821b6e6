"""Model fitting and fit-quality statistics."""
import logging

import numpy as np
import pandas as pd
from scipy import stats
from sklearn.dummy import DummyRegressor
from sklearn.linear_model import LinearRegression
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score
from sklearn.pipeline import make_pipeline
from sklearn.preprocessing import PolynomialFeatures

logger = logging.getLogger(__name__)


def _as_column(x):
    return np.asarray(x, dtype=float).reshape(-1, 1)


def make_model(degree):
    """Unfitted estimator: mean-only for degree 0, polynomial OLS otherwise."""
    if degree < 0:
        raise ValueError(f"Polynomial degree must be non-negative, got {degree}")
    if degree == 0:
        return DummyRegressor(strategy="mean")
    return make_pipeline(PolynomialFeatures(degree, include_bias=False), LinearRegression())


def fit_model(x, y, degree):
    """Fit a polynomial of the given degree to (x, y) and return the estimator."""
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if len(x) == 0:
        raise ValueError("Cannot fit a model to an empty sample")
    if len(x) != len(y):
        raise ValueError(f"x and y differ in length: {len(x)} vs {len(y)}")
    model = make_model(degree)
    model.fit(_as_column(x), y)
    return model


def predict(model, x):
    return np.asarray(model.predict(_as_column(x)), dtype=float)


def rss(y_obs, y_pred):
    """Residual sum of squares."""
    y_obs = np.asarray(y_obs, dtype=float)
    y_pred = np.asarray(y_pred, dtype=float)
    if y_obs.shape != y_pred.shape:
        raise ValueError(f"Observed and predicted differ in shape: {y_obs.shape} vs {y_pred.shape}")
    return float(np.sum((y_obs - y_pred) ** 2))


def regression_metrics(y_obs, y_pred):
    """Compute regression metrics."""
    mse = mean_squared_error(y_obs, y_pred)
    return {
        "rss": rss(y_obs, y_pred),
        "mse": mse,
        "rmse": np.sqrt(mse),
        "mae": mean_absolute_error(y_obs, y_pred),
        "r2": r2_score(y_obs, y_pred),
    }


def fit_table(sample, degree, model=None):
    """Fit (unless a model is given) and return x, y, y_true, y_pred, residual."""
    if model is None:
        model = fit_model(sample["x"], sample["y"], degree)
    y_pred = predict(model, sample["x"])
    table = pd.DataFrame({
        "x": sample["x"].values,
        "y": sample["y"].values,
        "y_true": sample["y_true"].values,
        "y_pred": y_pred,
    })
    table["residual"] = table["y"] - table["y_pred"]
    return table


def model_coefficients(model):
    """Return (intercept, [coef_1, ..., coef_d]) for a fitted model."""
    if isinstance(model, DummyRegressor):
        return float(np.ravel(model.constant_)[0]), []
    reg = model[-1]
    return float(reg.intercept_), [float(c) for c in reg.coef_]


def linear_summary(x, y):
    """Straight-line fit via scipy, used to cross-check the sklearn line."""
    res = stats.linregress(np.asarray(x, dtype=float), np.asarray(y, dtype=float))
    return {
        "slope": res.slope,
        "intercept": res.intercept,
        "r2": res.rvalue ** 2,
        "p_value": res.pvalue,
        "stderr": res.stderr,
    }


def rss_by_degree(train, degrees, test=None):
    """RSS (and RMSE) per degree on the training sample and, optionally, a second sample."""
    rows = []
    for d in degrees:
        model = fit_model(train["x"], train["y"], d)
        train_rss = rss(train["y"], predict(model, train["x"]))
        row = {
            "degree": d,
            "train_rss": train_rss,
            "train_rmse": np.sqrt(train_rss / len(train)),
        }
        if test is not None:
            test_rss = rss(test["y"], predict(model, test["x"]))
            row["test_rss"] = test_rss
            row["test_rmse"] = np.sqrt(test_rss / len(test))
        rows.append(row)
    logger.debug("Computed RSS for degrees %s", list(degrees))
    return pd.DataFrame(rows)


def best_degree(table):
    """Degree with the lowest second-sample RSS; ties go to the simpler model."""
    if "test_rss" not in table:
        raise ValueError("best_degree needs a table with a test_rss column")
    ordered = table.sort_values(["test_rss", "degree"], kind="mergesort")
    return int(ordered["degree"].iloc[0])
