"""Shared UI components: headers, concept boxes, metric rows."""
import streamlit as st


def page_header(number, title, caption=None):
    """Render a step header with an optional one-line caption."""
    st.caption(f"Step {number}")
    st.title(title)
    if caption:
        st.markdown(caption)
    st.divider()


def concept_box(title, content):
    """Render a highlighted concept box."""
    st.markdown(f"""
<div style="background-color: #EBF5FB; padding: 20px; border-radius: 10px; border-left: 5px solid #2E86C1; margin: 10px 0;">
<h4 style="color: #2E86C1; margin-top: 0;">{title}</h4>
<p style="color: #1B4F72;">{content}</p>
</div>
""", unsafe_allow_html=True)


def formula_box(title, formula, explanation=""):
    """Render a formula with explanation."""
    st.markdown(f"**{title}**")
    st.latex(formula)
    if explanation:
        st.caption(explanation)


def insight_box(text):
    """Render a key insight callout."""
    st.info(f"**Key Insight:** {text}")


def metric_row(stats, labels, fmt="{:.4f}"):
    """One st.metric per label; `labels` maps stat key -> display label."""
    cols = st.columns(len(labels))
    for col, (key, label) in zip(cols, labels.items()):
        col.metric(label, fmt.format(stats[key]))


def step_table(table, max_rows=15):
    """Show the first rows of a step's table."""
    with st.expander("Show data"):
        st.dataframe(table.head(max_rows), use_container_width=True)
