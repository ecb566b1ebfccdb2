import streamlit as st
import pandas as pd

from space_race.charts import ChartPayload


def chart_frame(chart: ChartPayload) -> pd.DataFrame:
    data = {s.label: s.values for s in chart.series}
    return pd.DataFrame(data, index=pd.Index(chart.labels, name="label"))


def show_chart(chart: ChartPayload, caption: str = ""):
    st.markdown(f"**{chart.title}**")
    df = chart_frame(chart)
    if df.empty:
        st.info("No data for this chart.")
        return
    if chart.kind == "line":
        st.line_chart(df)
    else:
        # no native pie chart, pies render as bars
        colors = [s.color for s in chart.series]
        # sort=False keeps calendar and top-N order instead of alphabetical
        st.bar_chart(df, sort=False, color=colors if all(colors) else None)
    if caption:
        st.caption(caption)
