"""Chart payloads handed to the dashboard and the API.

Every chart is a label axis plus one or more numeric series of the same
length. Rendering is left to the caller.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, List, Optional, Sequence

from .aggregations import count_by, get_top_n, group_by_multiple
from .config import Settings
from .derivers import MissionRecord
from .stats import moving_average, success_rate_by


@dataclass(frozen=True)
class ChartSeries:
    label: str
    values: List[float]
    color: Optional[str] = None
    # per-point colors, used by the decade chart
    colors: Optional[List[str]] = None


@dataclass(frozen=True)
class ChartPayload:
    chart_id: str
    title: str
    kind: str  # "bar", "line" or "pie"
    labels: List[str]
    series: List[ChartSeries] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _top_n_chart(records, field_name, n, chart_id, title, color, kind="bar", label="Missions") -> ChartPayload:
    top = get_top_n(count_by(records, field_name), n)
    return ChartPayload(
        chart_id=chart_id,
        title=title,
        kind=kind,
        labels=[str(k) for k, _ in top],
        series=[ChartSeries(label=label, values=[v for _, v in top], color=color)],
    )


def _sorted_years(records: Sequence[MissionRecord]) -> List[int]:
    return sorted({r.year for r in records})


#------------------#
#   GEOGRAPHY      #
#------------------#

def country_chart(records, settings=None) -> ChartPayload:
    return _top_n_chart(records, "country_full", 15, "countries", "Missions by Country", "#64ffda")


def organization_chart(records, settings=None) -> ChartPayload:
    return _top_n_chart(records, "agency", 15, "organizations", "Missions by Organization", "#ff6b6b")


#------------------#
#    TIMELINE      #
#------------------#

def temporal_chart(records, settings=None) -> ChartPayload:
    counts = count_by(records, "year")
    years = _sorted_years(records)
    return ChartPayload(
        chart_id="launches_per_year",
        title="Space Missions Over Time",
        kind="line",
        labels=[str(y) for y in years],
        series=[ChartSeries(label="Launches", values=[counts[y] for y in years], color="#64ffda")],
    )


def space_race_chart(records, settings: Settings) -> ChartPayload:
    powers = settings.major_powers
    yearly = group_by_multiple([r for r in records if r.country_full in powers], ["year", "country_full"])
    years = _sorted_years(records)
    colors = ["#64ffda", "#ff6b6b", "#ffa726"]

    series = [
        ChartSeries(
            label=country,
            values=[yearly.get(f"{year}|{country}", 0) for year in years],
            color=colors[idx % len(colors)],
        )
        for idx, country in enumerate(powers)
    ]
    return ChartPayload(
        chart_id="space_race",
        title=" vs ".join(powers),
        kind="line",
        labels=[str(y) for y in years],
        series=series,
    )


def month_chart(records, settings: Settings) -> ChartPayload:
    counts = count_by(records, "month_name")
    months = list(settings.calendar.months)
    return ChartPayload(
        chart_id="launches_per_month",
        title="Launches by Month",
        kind="bar",
        labels=months,
        series=[ChartSeries(label="Launches", values=[counts.get(m, 0) for m in months], color="#66bb6a")],
    )


def day_chart(records, settings: Settings) -> ChartPayload:
    counts = count_by(records, "day_of_week")
    days = list(settings.calendar.weekdays)
    return ChartPayload(
        chart_id="launches_per_weekday",
        title="Launches by Day of Week",
        kind="pie",
        labels=days,
        series=[ChartSeries(label="Launches", values=[counts.get(d, 0) for d in days])],
    )


#------------------#
#     SUCCESS      #
#------------------#

def _rate_color(rate: float) -> str:
    if rate >= 90:
        return "#4caf50"
    if rate >= 80:
        return "#66bb6a"
    return "#ffa726"


def decade_success_chart(records, settings=None) -> ChartPayload:
    rates = success_rate_by(records, "decade")
    values = list(rates.values())
    return ChartPayload(
        chart_id="decade_success_rate",
        title="Success Rate by Decade",
        kind="bar",
        labels=[f"{d}s" for d in rates],
        series=[ChartSeries(label="Success Rate (%)", values=values, colors=[_rate_color(v) for v in values])],
    )


def status_chart(records, settings=None) -> ChartPayload:
    return _top_n_chart(records, "status", 8, "status", "Mission Status", None, kind="pie")


def success_trend_chart(records, settings=None) -> ChartPayload:
    rates = success_rate_by(records, "year")
    yearly = list(rates.values())
    return ChartPayload(
        chart_id="success_trend",
        title="Mission Success Rate Trend",
        kind="line",
        labels=[str(y) for y in rates],
        series=[
            ChartSeries(label="Yearly Success Rate", values=yearly, color="#8892b0"),
            ChartSeries(label="5-Year Moving Average", values=moving_average(yearly, 5), color="#4caf50"),
        ],
    )


#------------------#
#     ROCKETS      #
#------------------#

def rocket_chart(records, settings=None) -> ChartPayload:
    return _top_n_chart(records, "rocket", 15, "rockets", "Most Used Rockets", "#ab47bc", label="Launches")


def rocket_family_chart(records, settings=None) -> ChartPayload:
    return _top_n_chart(records, "rocket_family", 12, "rocket_families", "Top Rocket Families", "#ec407a", label="Launches")


def mission_type_chart(records, settings=None) -> ChartPayload:
    # mission_type is never populated by the CSV, so this is usually empty
    typed = [r for r in records if r.mission_type]
    return _top_n_chart(typed, "mission_type", 10, "mission_types", "Mission Types", "#ffa726")


CHART_BUILDERS: Dict[str, Callable[..., ChartPayload]] = {
    "countries": country_chart,
    "organizations": organization_chart,
    "launches_per_year": temporal_chart,
    "space_race": space_race_chart,
    "launches_per_month": month_chart,
    "launches_per_weekday": day_chart,
    "decade_success_rate": decade_success_chart,
    "status": status_chart,
    "success_trend": success_trend_chart,
    "rockets": rocket_chart,
    "rocket_families": rocket_family_chart,
    "mission_types": mission_type_chart,
}


def build_chart(chart_id: str, records: Sequence[MissionRecord], settings: Settings) -> ChartPayload:
    if chart_id not in CHART_BUILDERS:
        raise KeyError(f"Unknown chart: {chart_id}")
    return CHART_BUILDERS[chart_id](records, settings)


def build_all_charts(records: Sequence[MissionRecord], settings: Settings) -> Dict[str, ChartPayload]:
    return {chart_id: builder(records, settings) for chart_id, builder in CHART_BUILDERS.items()}
