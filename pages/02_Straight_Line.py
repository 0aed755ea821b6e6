"""Step 2: Ordinary least squares -- the best straight line."""
import logging

import streamlit as st

from biasvariance.data_gen import sidebar_controls
from biasvariance.logging_config import setup_logging
from biasvariance.plotting import residual_chart
from biasvariance.stats_helpers import normality_test
from biasvariance.steps import linear_step
from biasvariance.ui_components import (
    formula_box, insight_box, metric_row, page_header, step_table,
)

setup_logging(logging.INFO)

st.set_page_config(page_title="Step 2: Straight Line", layout="wide")
config = sidebar_controls()

page_header(2, "A Straight Line",
            "Least squares picks the slope and intercept with the smallest RSS.")

formula_box("The Linear Model", r"\hat{y} = \beta_0 + \beta_1 x")

result = linear_step(config)
stats = result.stats
st.plotly_chart(result.figure, use_container_width=True)
metric_row(stats, {
    "slope": "Slope (beta_1)",
    "intercept": "Intercept (beta_0)",
    "rss": "RSS",
    "mean_only_rss": "RSS of the mean",
    "r2": "R-squared",
})

insight_box(
    f"The line cuts RSS from {stats['mean_only_rss']:.3f} to {stats['rss']:.3f}. "
    f"scipy's linregress agrees: slope {stats['scipy_slope']:.4f} "
    f"(standard error {stats['slope_stderr']:.4f})."
)

st.subheader("Residuals")
st.plotly_chart(residual_chart(result.table), use_container_width=True)
w_stat, w_p = normality_test(result.table["residual"])
c1, c2, c3 = st.columns(3)
c1.metric("Residual std", f"{stats['residual_std']:.4f}")
c2.metric("Shapiro-Wilk W", f"{w_stat:.4f}")
c3.metric("Shapiro-Wilk p", f"{w_p:.4f}")
step_table(result.table)
