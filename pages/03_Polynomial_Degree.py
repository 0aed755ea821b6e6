"""Step 3: Polynomial regression -- RSS on the fitted sample only goes down."""
import logging

import streamlit as st

from biasvariance.data_gen import sidebar_controls
from biasvariance.logging_config import setup_logging
from biasvariance.plotting import rss_by_degree_chart
from biasvariance.steps import degree_sweep_step, polynomial_step
from biasvariance.ui_components import formula_box, metric_row, page_header, step_table

setup_logging(logging.INFO)

st.set_page_config(page_title="Step 3: Polynomial Degree", layout="wide")
config = sidebar_controls()

page_header(3, "Bending the Line",
            "Adding powers of x lets the curve bend. Each extra term can only lower the RSS "
            "on the sample it was fit to.")

formula_box(
    "Polynomial Regression Model (degree d)",
    r"\hat{y} = \beta_0 + \beta_1 x + \beta_2 x^2 + \cdots + \beta_d x^d",
)

degree = st.slider("Polynomial degree", 0, config.max_degree, 3, key="poly_degree")
result = polynomial_step(config, degree=degree)
st.plotly_chart(result.figure, use_container_width=True)
metric_row(result.stats, {"rss": "RSS", "rmse": "RMSE", "r2": "R-squared"})

st.subheader("RSS by Degree on the Fitted Sample")
sweep = degree_sweep_step(config)
train_only = sweep.table[["degree", "train_rss", "train_rmse"]]
st.plotly_chart(rss_by_degree_chart(train_only, highlight=degree), use_container_width=True)
step_table(train_only, max_rows=config.max_degree + 1)
