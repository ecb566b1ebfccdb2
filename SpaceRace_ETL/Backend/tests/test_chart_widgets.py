from space_race.charts import build_chart
from space_race.config import Settings
from space_race.derivers import derive_mission
from SpaceRace_ETL.Frontend import chart_widgets


class RecordingStreamlit:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))
        return record


def mission(date):
    row = {"Date": date, "Location": "Cape Canaveral, USA", "Detail": "Falcon 9 | Block 5", "Mission_Status": "Success"}
    return derive_mission(row, Settings())[0]


def test_bar_chart_keeps_label_order(monkeypatch):
    fake = RecordingStreamlit()
    monkeypatch.setattr(chart_widgets, "st", fake)
    chart = build_chart("launches_per_month", [mission("2020-08-07"), mission("2020-04-01")], Settings())

    chart_widgets.show_chart(chart)

    bar_calls = [c for c in fake.calls if c[0] == "bar_chart"]
    assert len(bar_calls) == 1
    _, args, kwargs = bar_calls[0]
    # without sort=False the month axis comes out alphabetical
    assert kwargs["sort"] is False
    assert list(args[0].index) == list(Settings().calendar.months)


def test_chart_frame_preserves_top_n_order():
    records = [mission("2020-01-01")] * 3 + [
        derive_mission({"Date": "2020-01-02", "Location": "Baikonur, Kazakhstan"}, Settings())[0]
    ]
    frame = chart_widgets.chart_frame(build_chart("countries", records, Settings()))
    assert list(frame.index) == ["USA", "Kazakhstan"]
    assert list(frame["Missions"]) == [3, 1]


def test_empty_chart_shows_info(monkeypatch):
    fake = RecordingStreamlit()
    monkeypatch.setattr(chart_widgets, "st", fake)
    chart_widgets.show_chart(build_chart("mission_types", [], Settings()))
    assert [c[0] for c in fake.calls] == ["markdown", "info"]
