import numpy as np
import pandas as pd
import pytest

from biasvariance.data_gen import generate_sample, generate_sample_pair
from biasvariance.fitting import (
    best_degree, fit_model, fit_table, linear_summary, make_model,
    model_coefficients, predict, regression_metrics, rss, rss_by_degree,
)


def test_mean_only_predicts_the_sample_mean(config):
    sample = generate_sample(config)
    model = fit_model(sample["x"], sample["y"], 0)
    preds = predict(model, sample["x"])
    np.testing.assert_allclose(preds, sample["y"].mean())
    # constant even away from the data
    np.testing.assert_allclose(predict(model, [-5.0, 10.0]), sample["y"].mean())


def test_ols_line_minimizes_rss(config):
    sample = generate_sample(config)
    x, y = sample["x"].values, sample["y"].values
    model = fit_model(x, y, 1)
    intercept, (slope,) = model_coefficients(model)
    best = rss(y, predict(model, x))

    rng = np.random.RandomState(0)
    for _ in range(100):
        d_int, d_slope = rng.normal(0, 0.5, size=2)
        other = rss(y, (intercept + d_int) + (slope + d_slope) * x)
        assert other >= best


def test_ols_line_matches_scipy(config):
    sample = generate_sample(config)
    intercept, (slope,) = model_coefficients(fit_model(sample["x"], sample["y"], 1))
    check = linear_summary(sample["x"], sample["y"])
    assert slope == pytest.approx(check["slope"], rel=1e-8)
    assert intercept == pytest.approx(check["intercept"], rel=1e-8, abs=1e-10)


def test_training_rss_never_increases_with_degree(config):
    train = generate_sample(config)
    table = rss_by_degree(train, range(9))
    values = table["train_rss"].values
    assert (values >= 0).all()
    assert (np.diff(values) <= 1e-6).all()


def test_noise_free_line_is_recovered(noiseless_config):
    sample = generate_sample(noiseless_config)
    model = fit_model(sample["x"], sample["y"], 1)
    intercept, coefs = model_coefficients(model)
    assert intercept == pytest.approx(1.0)
    assert coefs == pytest.approx([2.0])
    assert rss(sample["y"], predict(model, sample["x"])) == pytest.approx(0.0, abs=1e-12)


def test_mean_model_coefficients(config):
    sample = generate_sample(config)
    intercept, coefs = model_coefficients(fit_model(sample["x"], sample["y"], 0))
    assert intercept == pytest.approx(sample["y"].mean())
    assert coefs == []


def test_polynomial_has_one_coefficient_per_power(config):
    sample = generate_sample(config)
    _, coefs = model_coefficients(fit_model(sample["x"], sample["y"], 4))
    assert len(coefs) == 4


def test_rss_values():
    assert rss([1.0, 2.0], [1.0, 2.0]) == 0.0
    assert rss([0.0, 0.0], [1.0, 2.0]) == 5.0


def test_rss_rejects_mismatched_lengths():
    with pytest.raises(ValueError, match="differ in shape"):
        rss([1.0, 2.0], [1.0])


def test_fit_model_rejects_bad_input():
    with pytest.raises(ValueError, match="differ in length"):
        fit_model([0.1, 0.2, 0.3], [1.0, 2.0], 1)
    with pytest.raises(ValueError, match="empty"):
        fit_model([], [], 1)
    with pytest.raises(ValueError, match="non-negative"):
        make_model(-1)


def test_regression_metrics_agree_with_rss(config):
    sample = generate_sample(config)
    preds = predict(fit_model(sample["x"], sample["y"], 3), sample["x"])
    m = regression_metrics(sample["y"], preds)
    assert set(m) == {"rss", "mse", "rmse", "mae", "r2"}
    assert m["mse"] * len(sample) == pytest.approx(m["rss"])
    assert m["rmse"] == pytest.approx(np.sqrt(m["mse"]))
    assert 0.0 < m["r2"] <= 1.0


def test_fit_table_columns_and_residuals(config):
    table = fit_table(generate_sample(config), 2)
    assert list(table.columns) == ["x", "y", "y_true", "y_pred", "residual"]
    np.testing.assert_allclose(table["residual"], table["y"] - table["y_pred"])


def test_rss_by_degree_with_second_sample(config):
    train, second = generate_sample_pair(config)
    table = rss_by_degree(train, [0, 1, 2], test=second)
    assert list(table["degree"]) == [0, 1, 2]
    assert {"train_rss", "train_rmse", "test_rss", "test_rmse"} <= set(table.columns)
    assert (table["test_rss"] > 0).all()


def test_best_degree_prefers_simpler_model_on_ties():
    table = pd.DataFrame({"degree": [0, 1, 2, 3], "test_rss": [5.0, 2.0, 2.0, 3.0]})
    assert best_degree(table) == 1


def test_best_degree_needs_second_sample():
    with pytest.raises(ValueError, match="test_rss"):
        best_degree(pd.DataFrame({"degree": [0], "train_rss": [1.0]}))
