from typing import List, Dict, Any

import pandas as pd
from fastapi import FastAPI, HTTPException

from space_race.charts import CHART_BUILDERS, build_all_charts, build_chart
from space_race.config import load_settings
from space_race.etl import load_dataset, summarize_quality
from space_race.exceptions_file import ConfigError, DataExtractionError
from space_race.stats import insights as build_insights, summary_statistics


app = FastAPI(title="Space Race Analysis API", version="1.0")


def _load() -> tuple:
    # Each request is one full load; nothing is shared between requests.
    try:
        settings = load_settings()
    except ConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))
    try:
        return settings, load_dataset(settings)
    except DataExtractionError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.get("/missions")
def missions(limit: int | None = None) -> List[Dict[str, Any]]:
    _, dataset = _load()
    df = pd.DataFrame([r.to_row() for r in dataset.records])
    if df.empty:
        return []
    if limit is not None:
        df = df.sort_values("date", ascending=False).head(limit)
    return df.fillna("").to_dict(orient="records")


@app.get("/summary")
def summary():
    _, dataset = _load()
    return summary_statistics(dataset.records)


@app.get("/charts")
def charts():
    settings, dataset = _load()
    return {k: c.to_dict() for k, c in build_all_charts(dataset.records, settings).items()}


@app.get("/charts/{chart_id}")
def chart(chart_id: str):
    if chart_id not in CHART_BUILDERS:
        raise HTTPException(status_code=404, detail=f"Unknown chart '{chart_id}'")
    settings, dataset = _load()
    return build_chart(chart_id, dataset.records, settings).to_dict()


@app.get("/insights")
def insights():
    _, dataset = _load()
    return build_insights(dataset.records)


@app.get("/quality-report")
def quality_report():
    _, dataset = _load()
    return summarize_quality(dataset)


if __name__ == "__main__":
    # Run: python api.py
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
