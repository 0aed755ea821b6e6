"""Step 1: The mean-only model -- one number for every prediction."""
import logging

import streamlit as st

from biasvariance.data_gen import sidebar_controls
from biasvariance.logging_config import setup_logging
from biasvariance.plotting import residual_chart
from biasvariance.steps import mean_only_step
from biasvariance.ui_components import formula_box, metric_row, page_header, step_table

setup_logging(logging.INFO)

st.set_page_config(page_title="Step 1: Mean-Only Model", layout="wide")
config = sidebar_controls()

page_header(1, "The Mean-Only Model",
            "The simplest possible model ignores x and predicts the sample mean everywhere.")

formula_box(
    "Residual Sum of Squares",
    r"\text{RSS} = \sum_{i=1}^{n} (y_i - \hat{y}_i)^2, \qquad \hat{y}_i = \bar{y}",
)

result = mean_only_step(config)
st.plotly_chart(result.figure, use_container_width=True)
metric_row(result.stats, {"mean": "Sample mean", "rss": "RSS"})
st.plotly_chart(residual_chart(result.table, title="Residuals"), use_container_width=True)
step_table(result.table)
