import numpy as np
import pytest

from biasvariance import stats_helpers
from biasvariance.config import DemoConfig
from biasvariance.data_gen import generate_sample
from biasvariance.stats_helpers import (
    bias_variance_decomposition, bootstrap_predictions, decomposition_by_degree,
    load_bootstrap_band, normality_test, residual_summary,
)


def test_residual_summary():
    summary = residual_summary([-1.0, 0.0, 1.0, 2.0])
    assert summary["count"] == 4
    assert summary["mean"] == pytest.approx(0.5)
    assert summary["min"] == -1.0
    assert summary["max"] == 2.0
    assert summary["q25"] <= summary["median"] <= summary["q75"]


def test_normality_test_returns_valid_statistic():
    residuals = np.random.RandomState(0).normal(size=100)
    stat, p = normality_test(residuals)
    assert 0.0 < stat <= 1.0
    assert 0.0 <= p <= 1.0


def test_bootstrap_predictions_shape_and_band(config):
    sample = generate_sample(config)
    x_eval = np.linspace(0, 1, 20)
    preds, lower, upper = bootstrap_predictions(sample, 3, x_eval, n_boot=30, seed=1)
    assert preds.shape == (30, 20)
    assert lower.shape == upper.shape == (20,)
    assert (lower <= upper).all()


def test_bootstrap_of_mean_model_is_flat(config):
    sample = generate_sample(config)
    preds, _, _ = bootstrap_predictions(sample, 0, np.linspace(0, 1, 5), n_boot=10)
    # every refit predicts its own resample mean at all x
    np.testing.assert_allclose(preds, preds[:, [0]])


def test_decomposition_adds_up(config):
    result = bias_variance_decomposition(config, 2)
    assert result["noise"] == pytest.approx(config.noise_sd ** 2)
    assert result["expected_mse"] == pytest.approx(
        result["bias_sq"] + result["variance"] + result["noise"]
    )
    assert result["predictions"].shape == (config.n_repeats, 50)


def test_mean_model_variance_matches_variance_of_a_sample_mean():
    # y = 1 + 2x with x ~ U(0, 1): Var(y) = 4/12 + noise_sd^2
    cfg = DemoConfig(n=25, noise_sd=0.3, true_function="linear", n_repeats=200)
    result = bias_variance_decomposition(cfg, 0)
    expected = (4.0 / 12.0 + 0.09) / 25
    assert 0.5 * expected < result["variance"] < 2.0 * expected


def test_bias_falls_and_variance_grows_with_degree(config):
    table = decomposition_by_degree(config, [1, 3, 9]).set_index("degree")
    assert table.loc[1, "bias_sq"] > table.loc[3, "bias_sq"]
    assert table.loc[9, "variance"] > table.loc[1, "variance"]
    assert "predictions" not in table.columns


def test_bootstrap_band_is_computed_once_per_setting(monkeypatch, config):
    calls = []
    real = stats_helpers.bootstrap_predictions

    def counting_bootstrap(*args, **kwargs):
        calls.append(args[1])
        return real(*args, **kwargs)

    monkeypatch.setattr(stats_helpers, "bootstrap_predictions", counting_bootstrap)
    load_bootstrap_band.clear()
    sample, x_eval, lower, upper = load_bootstrap_band(config, 2, n_boot=10)
    load_bootstrap_band(config, 2, n_boot=10)
    assert calls == [2]
    assert len(sample) == config.n
    assert lower.shape == upper.shape == x_eval.shape
    load_bootstrap_band(config, 3, n_boot=10)
    assert calls == [2, 3]
    load_bootstrap_band.clear()
