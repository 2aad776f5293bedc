"""
Altair chart specs for salescope results.

Each builder takes numbers the engine already computed and only reshapes them
into a frame for Altair. Rendering is left to the caller (st.altair_chart).
"""
from typing import Dict, Sequence

import altair as alt
import pandas as pd


def missing_values_chart(missing: Dict[str, int]) -> alt.Chart:
    df = pd.DataFrame({"column": list(missing.keys()), "missing": list(missing.values())})
    return alt.Chart(df).mark_bar(color="#ff6384").encode(
        x=alt.X("column:N", title="Columns", sort=None),
        y=alt.Y("missing:Q", title="Missing Count"),
        tooltip=["column", "missing"],
    )


def category_bar_chart(counts: Dict[str, int], title: str) -> alt.Chart:
    df = pd.DataFrame({"category": list(counts.keys()), "count": list(counts.values())})
    return alt.Chart(df, title=title).mark_bar(color="#36a2eb").encode(
        x=alt.X("category:N", sort="-y", title=None),
        y=alt.Y("count:Q", title="Games"),
        tooltip=["category", "count"],
    )


def category_pie_chart(counts: Dict[str, int], title: str) -> alt.Chart:
    df = pd.DataFrame({"category": list(counts.keys()), "count": list(counts.values())})
    return alt.Chart(df, title=title).mark_arc().encode(
        theta="count:Q",
        color=alt.Color("category:N", sort=None),
        tooltip=["category", "count"],
    )


def histogram_chart(values: Sequence[float], label: str, max_bins: int = 40) -> alt.Chart:
    df = pd.DataFrame({"value": list(values)})
    return alt.Chart(df).mark_bar(color="#ff9f40").encode(
        x=alt.X("value:Q", bin=alt.Bin(maxbins=max_bins), title=label),
        y=alt.Y("count():Q", title="Frequency"),
    )


def correlation_heatmap(matrix: Dict[str, Dict[str, float]]) -> alt.Chart:
    rows = [
        {"x": a, "y": b, "r": r}
        for a, row in matrix.items()
        for b, r in row.items()
    ]
    df = pd.DataFrame(rows, columns=["x", "y", "r"])
    order = list(matrix.keys())
    base = alt.Chart(df).encode(
        x=alt.X("x:N", sort=order, title=None),
        y=alt.Y("y:N", sort=order, title=None),
    )
    heat = base.mark_rect().encode(
        color=alt.Color("r:Q", scale=alt.Scale(scheme="redblue", domain=[-1, 1])),
        tooltip=["x", "y", "r"],
    )
    text = base.mark_text(fontSize=11).encode(text=alt.Text("r:Q", format=".2f"))
    return heat + text


def correlation_bar_chart(vector: Dict[str, float], reference: str) -> alt.Chart:
    df = pd.DataFrame({"column": list(vector.keys()), "r": list(vector.values())})
    return alt.Chart(df, title=f"Correlation with {reference}").mark_bar(color="#4bc0c0").encode(
        x=alt.X("r:Q", scale=alt.Scale(domain=[-1, 1]), title="Pearson r"),
        y=alt.Y("column:N", sort=None, title=None),
        tooltip=["column", "r"],
    )
