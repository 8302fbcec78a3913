"""Plotly charts for allocation results.

The functions here take the objects produced by :mod:`allocation` and
return a ``plotly.graph_objects.Figure`` that Streamlit can render via
``st.plotly_chart``.
"""

from __future__ import annotations

import plotly.express as px
import plotly.graph_objects as go

from .allocation import AllocationResult
from .reporting import allocation_frame


def create_allocation_chart(result: AllocationResult, title: str | None = None) -> go.Figure:
    """Grouped bar chart of each part's monthly value against its divided value.

    Parameters
    ----------
    result : AllocationResult
        Outcome of an allocation run.
    title : str, optional
        Chart title. If ``None``, the income is used in the title.

    Returns
    -------
    plotly.graph_objects.Figure
        Grouped bar chart, or an empty figure when the budget has no parts.
    """
    if not result.lines():
        fig = go.Figure()
        fig.update_layout(title="No data to display")
        return fig
    df = allocation_frame(result)
    df = df[df['Section'] != 'Leftover']
    long_df = df.melt(
        id_vars=['Name', 'Section'],
        value_vars=['Monthly Value', 'Divided Value'],
        var_name='Metric',
        value_name='Amount',
    )
    fig = px.bar(long_df, x='Name', y='Amount', color='Metric', barmode='group')
    fig.update_layout(
        title=title or f"Allocation of ${result.income:,.2f} (leftover ${result.leftover:,.2f})",
        xaxis_title="Budget part",
        yaxis_title="Amount per month",
    )
    return fig
