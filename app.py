"""Bias & Variance, Illustrated -- Main Entry Point."""
import logging

import streamlit as st

from biasvariance.constants import STEP_TITLES
from biasvariance.data_gen import TRUE_FUNCTION_LABELS, load_samples, sidebar_controls
from biasvariance.logging_config import setup_logging

setup_logging(logging.INFO)

st.set_page_config(
    page_title="Bias & Variance, Illustrated",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.title("Bias & Variance, Illustrated")
st.markdown(
    "Each page draws a small noisy sample from a known function, fits a model to it "
    "and measures the fit with the residual sum of squares (RSS). The sidebar controls "
    "the sample and are shared by every page."
)

pages = {
    "01 Mean-only model": STEP_TITLES["mean_only"],
    "02 Straight line": STEP_TITLES["linear"],
    "03 Polynomial degree": f"{STEP_TITLES['polynomial']} / {STEP_TITLES['degree_sweep']}",
    "04 A second sample": STEP_TITLES["second_sample"],
    "05 Bias and variance": STEP_TITLES["decomposition"],
}
for page, title in pages.items():
    st.markdown(f"**{page}** -- {title}")

st.divider()

config = sidebar_controls()
train, second = load_samples(config)

st.subheader("Current Sample")
col1, col2, col3, col4 = st.columns(4)
col1.metric("Sample size", config.n)
col2.metric("Noise sd", f"{config.noise_sd:.2f}")
col3.metric("True function", TRUE_FUNCTION_LABELS[config.true_function])
col4.metric("Seed", config.seed)
st.dataframe(train.head(10), use_container_width=True)
