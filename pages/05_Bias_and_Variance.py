"""Step 5: Bias and variance -- refit on many samples and watch the predictions move."""
import logging

import streamlit as st

from biasvariance.constants import model_label
from biasvariance.data_gen import sidebar_controls, true_curve
from biasvariance.logging_config import setup_logging
from biasvariance.plotting import bootstrap_band_chart
from biasvariance.stats_helpers import load_bootstrap_band
from biasvariance.steps import load_decomposition
from biasvariance.ui_components import (
    concept_box, formula_box, metric_row, page_header, step_table,
)

setup_logging(logging.INFO)

st.set_page_config(page_title="Step 5: Bias and Variance", layout="wide")
config = sidebar_controls()

page_header(5, "Bias and Variance",
            f"Each degree is refit to {config.n_repeats} fresh samples of the same function.")

formula_box(
    "The Decomposition",
    r"\mathbb{E}\!\left[(y - \hat{f}(x))^2\right] = \text{Bias}[\hat{f}(x)]^2 + \text{Var}[\hat{f}(x)] + \sigma^2",
)

col1, col2 = st.columns(2)
with col1:
    concept_box("Model bias", "Systematic error from a model too simple for the true function.")
with col2:
    concept_box("Model variance", "How much the fitted curve depends on which sample it saw.")

result = load_decomposition(config)
st.plotly_chart(result.figure, use_container_width=True)
metric_row(result.stats, {"lowest_error_degree": "Lowest expected error at degree"}, fmt="{}")
step_table(result.table)

st.subheader("Variance Within One Sample: Bootstrap Refits")
degree = st.slider("Polynomial degree", 0, config.max_degree, 3, key="boot_degree")
train, x_eval, lower, upper = load_bootstrap_band(config, degree)
st.plotly_chart(
    bootstrap_band_chart(train, x_eval, lower, upper, true_curve(config),
                         title=f"90% bootstrap band: {model_label(degree)}"),
    use_container_width=True,
)
