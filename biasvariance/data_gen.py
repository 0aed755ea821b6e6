"""Synthetic sample generation, cached loading and sidebar controls."""
import logging

import numpy as np
import pandas as pd
import streamlit as st

from biasvariance.config import DemoConfig

logger = logging.getLogger(__name__)

TRUE_FUNCTIONS = {
    "linear": lambda x: 1.0 + 2.0 * x,
    "quadratic": lambda x: 1.0 - 4.0 * (x - 0.5) ** 2,
    "cubic": lambda x: 8.0 * (x - 0.2) * (x - 0.5) * (x - 0.8),
    "sine": lambda x: np.sin(2 * np.pi * x),
}

TRUE_FUNCTION_LABELS = {
    "linear": "1 + 2x",
    "quadratic": "1 - 4(x - 0.5)^2",
    "cubic": "8(x - 0.2)(x - 0.5)(x - 0.8)",
    "sine": "sin(2 pi x)",
}


def true_function(x, kind="sine"):
    """Evaluate a named data-generating function."""
    if kind not in TRUE_FUNCTIONS:
        raise ValueError(f"Unknown true function {kind!r}; choose one of {sorted(TRUE_FUNCTIONS)}")
    return TRUE_FUNCTIONS[kind](np.asarray(x, dtype=float))


def make_x(n, x_min, x_max, rng):
    """Draw n sorted uniform positions on [x_min, x_max]."""
    return np.sort(rng.uniform(x_min, x_max, size=n))


def generate_sample(config, seed=None, x=None):
    """Draw one noisy sample: columns x, y_true, y (observed)."""
    seed = config.seed if seed is None else seed
    rng = np.random.RandomState(seed)
    if x is None:
        x = make_x(config.n, config.x_min, config.x_max, rng)
    else:
        x = np.asarray(x, dtype=float)
    y_true = true_function(x, config.true_function)
    y = y_true + rng.normal(0.0, config.noise_sd, size=len(x))
    return pd.DataFrame({"x": x, "y_true": y_true, "y": y})


def generate_sample_pair(config):
    """Draw the training sample and an independent second sample of the same function."""
    train = generate_sample(config)
    shared_x = train["x"].values if config.same_x else None
    second = generate_sample(config, seed=config.seed + 1, x=shared_x)
    logger.debug(
        "Drew sample pair: n=%d, noise_sd=%.3f, function=%s, same_x=%s",
        config.n, config.noise_sd, config.true_function, config.same_x,
    )
    return train, second


def true_curve(config, n_points=200):
    """Dense grid of the noise-free function, for plotting."""
    x = np.linspace(config.x_min, config.x_max, n_points)
    return pd.DataFrame({"x": x, "y_true": true_function(x, config.true_function)})


@st.cache_data
def load_samples(config):
    """Cached sample pair for the pages; the config dataclass is the cache key."""
    return generate_sample_pair(config)


def sidebar_controls(defaults=None):
    """Render sidebar sample controls; return the resulting DemoConfig."""
    defaults = defaults or DemoConfig()
    names = list(TRUE_FUNCTIONS)
    st.sidebar.header("Sample")
    true_fn = st.sidebar.selectbox(
        "True function", names,
        index=names.index(defaults.true_function),
        format_func=lambda k: TRUE_FUNCTION_LABELS[k],
        key="true_function",
    )
    n = st.sidebar.slider("Sample size (n)", 10, 200, defaults.n, step=5, key="sample_n")
    noise_sd = st.sidebar.slider(
        "Noise sd", 0.0, 1.0, float(defaults.noise_sd), step=0.05, key="noise_sd"
    )
    seed = st.sidebar.number_input(
        "Random seed", min_value=0, max_value=2 ** 31 - 1,
        value=int(defaults.seed), step=1, key="seed",
    )
    same_x = st.sidebar.checkbox(
        "Second sample reuses the same x", value=defaults.same_x, key="same_x"
    )
    return DemoConfig(
        seed=int(seed),
        n=int(n),
        noise_sd=float(noise_sd),
        x_min=defaults.x_min,
        x_max=defaults.x_max,
        true_function=true_fn,
        max_degree=defaults.max_degree,
        high_degree=defaults.high_degree,
        n_repeats=defaults.n_repeats,
        same_x=bool(same_x),
    ).validate()
