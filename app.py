#!/usr/bin/env python3
"""
salescope Streamlit app: video game sales EDA

This app:
- Upload a CSV (vgsales.csv layout by default)
- Show Data Overview: shape, column kinds, first 5 records
- Show Missing Values per column (table + bar chart)
- Show Statistical Summary: numeric stats and top 10 categories
- Show Visualizations: platform bar, genre pie, global sales histogram, correlations
- Allow download of the loaded CSV and a JSON summary / full profile
"""
import streamlit as st
import pandas as pd

try:
    from salescope import AnalysisSession, SalescopeError, VIDEO_GAME_SALES
    from salescope import charts
    from salescope.exporter import CSV_FILE_NAME, PROFILE_FILE_NAME, SUMMARY_FILE_NAME, export_profile
    from salescope.logging_ import setup_logger
except ImportError as e:
    st.error(f"Could not import salescope: {e}. Install the package with `pip install -e .`.")
    st.stop()

setup_logger("salescope")

st.set_page_config(page_title="salescope: Video Game Sales EDA", layout="wide")
st.title("Video Game Sales: Exploratory Data Analysis")
st.markdown("Upload CSV → review overview, missing values and statistics → explore charts → export.")

# Sidebar controls
st.sidebar.header("Input")
uploaded_file = st.sidebar.file_uploader("Upload CSV file", type=["csv"])
top_k = st.sidebar.number_input("Top categories to show", min_value=1, max_value=50, value=VIDEO_GAME_SALES.top_k, step=1)
show_heatmap = st.sidebar.checkbox("Show full correlation matrix", value=True)

if "session" not in st.session_state:
    st.session_state["session"] = AnalysisSession(VIDEO_GAME_SALES)
session = st.session_state["session"]
session.config = VIDEO_GAME_SALES.with_top_k(int(top_k))

if uploaded_file is not None and st.session_state.get("loaded_name") != uploaded_file.name:
    try:
        table = session.load_csv(uploaded_file.getvalue())
        st.session_state["loaded_name"] = uploaded_file.name
        st.sidebar.success(f"Successfully loaded {table.n_rows} records")
    except SalescopeError as e:
        st.sidebar.error(str(e))

if st.sidebar.button("Clear dataset"):
    session.clear()
    st.session_state.pop("loaded_name", None)

if not session.is_loaded:
    st.info("Please load data first: upload a CSV file in the sidebar.")
    st.stop()

# Overview
st.subheader("Data Overview")
overview = session.overview()
st.write(f"Dataset Shape: **{overview['n_rows']}** rows × **{overview['n_columns']}** columns")
st.dataframe(pd.DataFrame([{"column": c, "kind": k} for c, k in overview["columns"].items()]), use_container_width=True)
st.markdown("**First 5 Records**")
st.dataframe(pd.DataFrame(overview["head"]), use_container_width=True)

# Missing values
st.subheader("Missing Values")
missing = session.missing_values()
st.dataframe(pd.DataFrame([missing]), use_container_width=True)
st.altair_chart(charts.missing_values_chart(missing).properties(height=260), use_container_width=True)

# Statistical summary
st.subheader("Statistical Summary")
numeric = session.numeric_summary()
if numeric:
    st.markdown("**Numeric Columns Summary**")
    st.dataframe(pd.DataFrame([{"column": c, **s} for c, s in numeric.items()]), use_container_width=True)
else:
    st.info("None of the declared numeric columns hold numeric values.")

categories = session.top_categories()
st.markdown(f"**Top Categories (First {session.config.top_k})**")
for col, counts in categories.items():
    st.markdown(f"*{col}*")
    if counts:
        st.dataframe(pd.DataFrame([counts]), use_container_width=True)
    else:
        st.write("No data available")

# Visualizations
st.subheader("Visualizations")
left, right = st.columns(2)
platform_counts = categories.get("Platform", {})
genre_counts = categories.get("Genre", {})
if platform_counts:
    left.altair_chart(charts.category_bar_chart(platform_counts, "Games by Platform"), use_container_width=True)
if genre_counts:
    right.altair_chart(charts.category_pie_chart(genre_counts, "Games by Genre"), use_container_width=True)

sales = session.histogram_values()
if sales:
    label = f"{session.config.histogram_column} (millions)"
    st.altair_chart(charts.histogram_chart(sales, label).properties(height=260), use_container_width=True)

vector = session.correlation_vector()
if vector:
    st.altair_chart(charts.correlation_bar_chart(vector, session.config.correlation_reference), use_container_width=True)
if show_heatmap:
    matrix = session.correlations()
    if matrix:
        st.altair_chart(charts.correlation_heatmap(matrix).properties(height=360), use_container_width=True)

# Export
st.subheader("Export")
c1, c2, c3 = st.columns(3)
c1.download_button("Export CSV", data=session.export_csv().encode("utf-8"), file_name=CSV_FILE_NAME, mime="text/csv")
c2.download_button("Export JSON summary", data=session.export_summary(), file_name=SUMMARY_FILE_NAME, mime="application/json")
c3.download_button("Export full profile", data=export_profile(session.profile()), file_name=PROFILE_FILE_NAME, mime="application/json")
