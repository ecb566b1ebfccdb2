import pytest

from space_race.charts import CHART_BUILDERS, build_all_charts, build_chart
from space_race.config import Settings
from space_race.derivers import derive_mission


def mission(date, status="Success", location="Cape Canaveral, USA", detail="Falcon 9 | Block 5", agency="SpaceX"):
    row = {"Date": date, "Location": location, "Detail": detail, "Mission_Status": status, "Organisation": agency}
    return derive_mission(row, Settings())[0]


@pytest.fixture
def records():
    return [
        mission("1957-10-04", location="Baikonur, Kazakhstan", detail="Sputnik 8K71PS | Sputnik-1", agency="RVSN USSR"),
        mission("1969-07-16", detail="Saturn V | Apollo 11", agency="NASA"),
        mission("1970-04-11", "Partial Failure", detail="Saturn V | Apollo 13", agency="NASA"),
        mission("1970-06-01", "Failure", location="Plesetsk, Russia", detail="Kosmos-3M | Kosmos", agency="RVSN USSR"),
        mission("2020-08-07"),
        mission("2020-08-06", location="Jiuquan, China", detail="Long March 2D | Gaofen-9", agency="CASC"),
    ]


def test_all_twelve_charts_have_aligned_series(records):
    charts = build_all_charts(records, Settings())
    assert len(charts) == 12
    for chart_id, chart in charts.items():
        assert chart.chart_id == chart_id
        for series in chart.series:
            assert len(series.values) == len(chart.labels)


def test_country_chart_counts(records):
    chart = build_chart("countries", records, Settings())
    assert chart.labels[0] == "USA"
    assert chart.series[0].values[0] == 3
    assert sum(chart.series[0].values) == len(records)


def test_month_and_weekday_charts_use_calendar_order(records):
    month = build_chart("launches_per_month", records, Settings())
    assert month.labels[0] == "January" and month.labels[-1] == "December"
    assert sum(month.series[0].values) == len(records)
    assert month.series[0].values[7] == 2  # two August launches

    day = build_chart("launches_per_weekday", records, Settings())
    assert day.labels == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
    assert day.kind == "pie"
    assert sum(day.series[0].values) == len(records)


def test_yearly_timeline(records):
    chart = build_chart("launches_per_year", records, Settings())
    assert chart.labels == ["1957", "1969", "1970", "2020"]
    assert chart.series[0].values == [1, 1, 2, 2]


def test_space_race_chart_has_one_series_per_power(records):
    chart = build_chart("space_race", records, Settings())
    assert [s.label for s in chart.series] == ["USA", "Russia", "China"]
    usa, russia, china = (s.values for s in chart.series)
    assert usa == [0, 1, 1, 1]
    assert russia == [0, 0, 1, 0]
    assert china == [0, 0, 0, 1]


def test_decade_success_chart(records):
    chart = build_chart("decade_success_rate", records, Settings())
    assert chart.labels == ["1950s", "1960s", "1970s", "2020s"]
    assert chart.series[0].values == [100.0, 100.0, 50.0, 100.0]
    assert chart.series[0].colors == ["#4caf50", "#4caf50", "#ffa726", "#4caf50"]


def test_success_trend_has_moving_average(records):
    chart = build_chart("success_trend", records, Settings())
    yearly, smoothed = chart.series
    assert yearly.values == [100.0, 100.0, 50.0, 100.0]
    assert smoothed.label == "5-Year Moving Average"
    assert smoothed.values[0] == round((100 + 100 + 50) / 3, 1)


def test_rocket_family_chart(records):
    chart = build_chart("rocket_families", records, Settings())
    assert chart.labels[0] == "Saturn V"
    assert chart.series[0].values[0] == 2


def test_mission_type_chart_is_empty():
    chart = build_chart("mission_types", [mission("2020-01-01")], Settings())
    assert chart.labels == []
    assert chart.series[0].values == []


def test_unknown_chart():
    with pytest.raises(KeyError):
        build_chart("nope", [], Settings())


def test_empty_records():
    charts = build_all_charts([], Settings())
    assert set(charts) == set(CHART_BUILDERS)
    assert charts["countries"].labels == []
    assert charts["launches_per_month"].series[0].values == [0] * 12


def test_to_dict_is_plain_data(records):
    data = build_chart("status", records, Settings()).to_dict()
    assert data["kind"] == "pie"
    assert data["series"][0]["label"] == "Missions"
    assert data["labels"][0] == "Success"
