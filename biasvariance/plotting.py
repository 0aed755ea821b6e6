"""Shared Plotly plotting helpers."""
import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from biasvariance.constants import AXIS_LABELS, DEGREE_COLORS, TRACE_COLORS, model_label
from biasvariance.fitting import predict


def apply_common_layout(fig, title=None, height=500):
    """Apply common layout settings to a Plotly figure."""
    fig.update_layout(
        template="plotly_white",
        height=height,
        title=title,
        title_x=0.5,
        margin=dict(t=60, b=40, l=60, r=40),
        xaxis_title=AXIS_LABELS["x"],
        yaxis_title=AXIS_LABELS["y"],
    )
    return fig


def _clip_y(fig, *samples):
    # High-degree fits shoot off at the edges; keep the y-axis on the data
    y_all = np.concatenate([s["y"].values for s in samples])
    pad = 0.5 * (y_all.max() - y_all.min())
    fig.update_yaxes(range=[y_all.min() - pad, y_all.max() + pad])


def _points(sample, name, color):
    return go.Scatter(
        x=sample["x"], y=sample["y"], mode="markers", name=name,
        marker=dict(color=color, size=7, opacity=0.8),
    )


def _true_line(curve):
    return go.Scatter(
        x=curve["x"], y=curve["y_true"], mode="lines", name="True function",
        line=dict(color=TRACE_COLORS["true"], width=2, dash="dot"),
    )


def sample_fit_chart(sample, model, curve, title=None, label="Fitted model"):
    """Observed points, the true function and one fitted curve."""
    fig = go.Figure()
    fig.add_trace(_points(sample, "Observed", TRACE_COLORS["observed"]))
    fig.add_trace(_true_line(curve))
    fig.add_trace(go.Scatter(
        x=curve["x"], y=predict(model, curve["x"]), mode="lines", name=label,
        line=dict(color=TRACE_COLORS["fit"], width=3),
    ))
    return apply_common_layout(fig, title)


def fits_overlay_chart(sample, models, curve, title=None):
    """Several fitted degrees on the same sample; `models` maps degree -> estimator."""
    fig = go.Figure()
    fig.add_trace(_points(sample, "Observed", TRACE_COLORS["observed"]))
    fig.add_trace(_true_line(curve))
    for i, (degree, model) in enumerate(sorted(models.items())):
        fig.add_trace(go.Scatter(
            x=curve["x"], y=predict(model, curve["x"]), mode="lines",
            name=model_label(degree),
            line=dict(color=DEGREE_COLORS[i % len(DEGREE_COLORS)], width=2),
        ))
    _clip_y(fig, sample)
    return apply_common_layout(fig, title)


def two_sample_chart(train, second, model, curve, title=None):
    """One fitted curve shown against the sample it was fit on and a fresh sample."""
    fig = make_subplots(rows=1, cols=2, shared_yaxes=True,
                        subplot_titles=("Sample it was fit on", "Second sample"))
    y_fit = predict(model, curve["x"])
    for col, (sample, color) in enumerate(
        [(train, TRACE_COLORS["observed"]), (second, TRACE_COLORS["second"])], start=1
    ):
        fig.add_trace(go.Scatter(
            x=sample["x"], y=sample["y"], mode="markers", showlegend=False,
            marker=dict(color=color, size=7, opacity=0.8),
        ), row=1, col=col)
        fig.add_trace(go.Scatter(
            x=curve["x"], y=y_fit, mode="lines", showlegend=False,
            line=dict(color=TRACE_COLORS["fit"], width=3),
        ), row=1, col=col)
    _clip_y(fig, train, second)
    fig = apply_common_layout(fig, title)
    fig.update_layout(xaxis_title=None, yaxis_title=None)
    return fig


def rss_by_degree_chart(table, title=None, highlight=None):
    """Training (and second-sample) RSS against polynomial degree."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=table["degree"], y=table["train_rss"], mode="lines+markers",
        name="RSS on the fitted sample",
        line=dict(color=TRACE_COLORS["observed"], width=2),
    ))
    if "test_rss" in table:
        fig.add_trace(go.Scatter(
            x=table["degree"], y=table["test_rss"], mode="lines+markers",
            name="RSS on the second sample",
            line=dict(color=TRACE_COLORS["fit"], width=2),
        ))
    if highlight is not None:
        fig.add_vline(x=highlight, line_dash="dash", line_color=TRACE_COLORS["second"])
    apply_common_layout(fig, title)
    fig.update_layout(
        xaxis_title=AXIS_LABELS["degree"],
        yaxis_title=AXIS_LABELS["rss"],
        xaxis=dict(dtick=1),
        yaxis_type="log",
    )
    return fig


def decomposition_chart(table, title=None):
    """Stacked view of bias^2, variance and noise by degree."""
    fig = go.Figure()
    for col, name, color in [
        ("bias_sq", "Bias squared", TRACE_COLORS["true"]),
        ("variance", "Variance", TRACE_COLORS["fit"]),
        ("expected_mse", "Expected error", TRACE_COLORS["mean"]),
    ]:
        fig.add_trace(go.Scatter(
            x=table["degree"], y=table[col], mode="lines+markers", name=name,
            line=dict(color=color, width=2),
        ))
    fig.add_hline(y=float(table["noise"].iloc[0]), line_dash="dot",
                  annotation_text="Irreducible noise")
    apply_common_layout(fig, title)
    fig.update_layout(xaxis_title=AXIS_LABELS["degree"], yaxis_title="Error",
                      xaxis=dict(dtick=1), yaxis_type="log")
    return fig


def residual_chart(table, title=None):
    """Residuals against x."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=table["x"], y=table["residual"], mode="markers", name="Residual",
        marker=dict(color=TRACE_COLORS["observed"], size=7),
    ))
    fig.add_hline(y=0, line_dash="dash", line_color="gray")
    apply_common_layout(fig, title, height=350)
    fig.update_layout(yaxis_title="Residual")
    return fig


def bootstrap_band_chart(sample, x_eval, lower, upper, curve, title=None):
    """Percentile band of bootstrap refits around the sample."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=np.concatenate([x_eval, x_eval[::-1]]),
        y=np.concatenate([upper, lower[::-1]]),
        fill="toself", fillcolor="rgba(230, 57, 70, 0.2)",
        line=dict(color="rgba(0,0,0,0)"), name="Bootstrap band",
    ))
    fig.add_trace(_points(sample, "Observed", TRACE_COLORS["observed"]))
    fig.add_trace(_true_line(curve))
    _clip_y(fig, sample)
    return apply_common_layout(fig, title)
