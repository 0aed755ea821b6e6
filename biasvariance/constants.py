"""Shared constants: colors, labels, demonstration defaults."""

TRACE_COLORS = {
    "observed": "#2A9D8F",
    "second": "#F4A261",
    "true": "#264653",
    "fit": "#E63946",
    "mean": "#7209B7",
}

# One color per degree in overlay charts, cycled if there are more degrees
DEGREE_COLORS = ["#264653", "#2A9D8F", "#E9C46A", "#F4A261", "#E63946", "#7209B7"]

AXIS_LABELS = {
    "x": "x",
    "y": "y",
    "degree": "Polynomial Degree",
    "rss": "Residual Sum of Squares",
}

DEFAULT_SEED = 42
DEFAULT_N = 30
DEFAULT_NOISE_SD = 0.3
DEFAULT_X_RANGE = (0.0, 1.0)
DEFAULT_TRUE_FUNCTION = "sine"
DEFAULT_MAX_DEGREE = 12
DEFAULT_HIGH_DEGREE = 9
DEFAULT_N_REPEATS = 200

MODEL_LABELS = {
    0: "Mean only",
    1: "Straight line",
    2: "Quadratic",
    3: "Cubic",
}

STEP_TITLES = {
    "mean_only": "The Mean-Only Model",
    "linear": "A Straight Line",
    "polynomial": "Bending the Line",
    "degree_sweep": "Error vs Degree",
    "second_sample": "A Second Sample",
    "decomposition": "Bias and Variance",
}


def model_label(degree):
    """Human label for a polynomial degree."""
    return MODEL_LABELS.get(degree, f"Degree {degree}")
