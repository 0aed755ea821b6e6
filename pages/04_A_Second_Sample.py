"""Step 4: A second sample -- overfitting shows up on data the model has not seen."""
import logging

import streamlit as st

from biasvariance.constants import model_label
from biasvariance.data_gen import sidebar_controls
from biasvariance.logging_config import setup_logging
from biasvariance.steps import degree_sweep_step, second_sample_step
from biasvariance.ui_components import insight_box, metric_row, page_header, step_table

setup_logging(logging.INFO)

st.set_page_config(page_title="Step 4: A Second Sample", layout="wide")
config = sidebar_controls()

page_header(4, "A Second Sample",
            "Draw a fresh sample from the same function and score the fitted curve on it.")

degree = st.slider("Polynomial degree", 0, config.max_degree, config.high_degree,
                   key="second_degree")
result = second_sample_step(config, degree=degree)
st.plotly_chart(result.figure, use_container_width=True)
metric_row(result.stats, {
    "train_rss": "RSS, fitted sample",
    "test_rss": "RSS, second sample",
    "gap": "Gap",
})

st.subheader("Both Samples, Every Degree")
sweep = degree_sweep_step(config)
st.plotly_chart(sweep.figure, use_container_width=True)
insight_box(
    f"On the second sample the lowest RSS is at {model_label(sweep.stats['best_degree']).lower()}. "
    "Past that point the extra flexibility fits noise that the second sample does not share."
)
step_table(sweep.table, max_rows=config.max_degree + 1)
