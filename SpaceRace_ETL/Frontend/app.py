import streamlit as st
import pandas as pd
from pathlib import Path
import sys
import subprocess

from space_race.charts import build_all_charts
from space_race.config import load_settings
from space_race.etl import load_dataset, summarize_quality
from space_race.exceptions_file import SpaceRaceError
from space_race.stats import insights, summary_statistics
from space_race.storyteller import render_insights

from chart_widgets import show_chart

st.set_page_config(page_title="Space Race Dashboard", page_icon="🚀", layout="wide")

st.title("🚀 Space Race Data Analysis")


@st.cache_data
def load_missions():
    settings = load_settings()
    return settings, load_dataset(settings)


def run_backend_etl() -> str:
    backend_main = Path(__file__).resolve().parents[1] / "Backend" / "main.py"
    if not backend_main.exists():
        return "Backend main.py not found."
    result = subprocess.run([sys.executable, str(backend_main)], capture_output=True, text=True, cwd=str(backend_main.parent))
    if result.returncode == 0:
        # clear caches so new data is loaded
        load_missions.clear()
        return "ETL completed successfully. Reports exported."
    return f"ETL failed (code {result.returncode}).\nSTDOUT:\n{result.stdout}\nSTDERR:\n{result.stderr}"


st.sidebar.header("Data")
if st.sidebar.button("Run backend ETL now"):
    with st.spinner("Running ETL... this may take a moment"):
        msg = run_backend_etl()
    st.sidebar.success(msg) if msg.startswith("ETL completed") else st.sidebar.error(msg)

with st.spinner("Loading CSV data..."):
    try:
        settings, dataset = load_missions()
    except SpaceRaceError as e:
        st.error(f"Error loading CSV file. Please ensure the mission CSV is available. ({e})")
        st.stop()

records = dataset.records
st.sidebar.caption(f"Loaded {dataset.raw_count:,} missions from CSV, {len(records):,} processed")
st.sidebar.caption(f"Source: {settings.csv_source}")

summary = summary_statistics(records)
c1, c2, c3, c4 = st.columns(4)
c1.metric("Total Missions", f"{summary['total_missions']:,}")
c2.metric("Time Period", summary["time_period"])
c3.metric("Countries", summary["countries"])
c4.metric("Success Rate", summary["success_rate"])

charts = build_all_charts(records, settings)

tabs = st.tabs(["Geography", "Timeline", "Success", "Rockets", "Insights", "Data & Quality"])

with tabs[0]:
    col1, col2 = st.columns(2)
    with col1:
        show_chart(charts["countries"], "Top 15 countries, from the last part of Location")
    with col2:
        show_chart(charts["organizations"], "Top 15 organisations")

with tabs[1]:
    show_chart(charts["launches_per_year"])
    show_chart(charts["space_race"], "Yearly launches of the major powers")
    col1, col2 = st.columns(2)
    with col1:
        show_chart(charts["launches_per_month"])
    with col2:
        show_chart(charts["launches_per_weekday"])

with tabs[2]:
    col1, col2 = st.columns(2)
    with col1:
        show_chart(charts["decade_success_rate"], "Success = 'Success' or 'Partial Failure'")
    with col2:
        show_chart(charts["status"])
    show_chart(charts["success_trend"], "Moving average over a centered 5-year window, narrower at the edges")

with tabs[3]:
    col1, col2 = st.columns(2)
    with col1:
        show_chart(charts["rockets"])
    with col2:
        show_chart(charts["rocket_families"], "Family = Detail up to the first '|'")
    show_chart(charts["mission_types"])

with tabs[4]:
    st.markdown(render_insights(insights(records)))

with tabs[5]:
    st.subheader("Data & Quality")
    st.json(summarize_quality(dataset))

    df = pd.DataFrame([r.to_row() for r in records])
    st.markdown("**Processed missions**")
    st.dataframe(df.head(200))
    if not df.empty:
        st.download_button(label="Download missions.csv", data=df.to_csv(index=False), file_name="missions.csv", mime="text/csv")

    if dataset.rejects:
        st.markdown("**Rejects**")
        st.dataframe(pd.DataFrame(list(dataset.rejects)).head(50))
