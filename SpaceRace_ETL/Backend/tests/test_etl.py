import json

import pytest
import requests

from space_race.config import DEFAULT_CSV_PATH, Settings
from space_race.etl import etl_pipeline, extract_data, load_dataset, transform_data
from space_race.exceptions_file import DataExtractionError


CSV_TEXT = (
    "Unnamed: 0,Organisation,Location,Date,Detail,Mission_Status\n"
    '0,SpaceX,"LC-39A, Kennedy Space Center, Florida, USA","Fri Aug 07, 2020 05:12 UTC",Falcon 9 Block 5 | Starlink,Success\n'
    '1,CASC,"LC-9, Taiyuan Satellite Launch Center, China","Sat Jul 25, 2020 03:13 UTC",Long March 4B | Ziyuan-3 03,Failure\n'
    '2,Nobody,"Nowhere, Land",yesterday-ish,Mystery | X,Success\n'
    "3,Nobody\n"
)


def test_transform_drops_rows_without_dates():
    dataset = transform_data(CSV_TEXT, Settings())
    assert dataset.raw_count == 4
    assert len(dataset.records) == 2
    assert dataset.dropped == 2
    assert {r["reject_reason"] for r in dataset.rejects} == {"Invalid date", "Missing date"}


def test_extract_missing_file(tmp_path):
    with pytest.raises(DataExtractionError):
        extract_data(str(tmp_path / "missing.csv"))


def test_extract_strips_bom(tmp_path):
    path = tmp_path / "launches.csv"
    path.write_text("\ufeffDate,Mission_Status\n2020-01-01,Success\n", encoding="utf-8")
    dataset = transform_data(extract_data(str(path)), Settings())
    assert len(dataset.records) == 1


def test_bundled_sample_loads():
    dataset = load_dataset(Settings(csv_source=str(DEFAULT_CSV_PATH)))
    assert dataset.raw_count == 15
    assert len(dataset.records) == 14
    assert all(r.date is not None for r in dataset.records)


def test_pipeline_writes_reports(tmp_path):
    source = tmp_path / "launches.csv"
    source.write_text(CSV_TEXT, encoding="utf-8")
    out_dir = tmp_path / "data"

    dataset = etl_pipeline(Settings(csv_source=str(source)), str(out_dir))

    assert len(dataset.records) == 2
    assert (out_dir / "clean" / "missions.csv").exists()
    assert (out_dir / "out" / "rejects" / "missions.csv").exists()

    quality = json.loads((out_dir / "out" / "quality_report.json").read_text(encoding="utf-8"))
    assert quality["raw_count"] == 4
    assert quality["clean_count"] == 2
    assert quality["reject_count"] == 2

    report = json.loads((out_dir / "out" / "dashboard.json").read_text(encoding="utf-8"))
    assert report["summary"]["total_missions"] == 2
    assert report["summary"]["success_rate"] == "50.0%"
    assert len(report["charts"]) == 12
    assert report["insights"]["failed_missions"] == 1

    story = (out_dir / "out" / "insights.md").read_text(encoding="utf-8")
    assert "Overall Success Rate:** 50.00%" in story


def fake_response(status_code, body=b""):
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = body
    resp.url = "https://example.com/mission_launches.csv"
    return resp


def test_extract_url_error_status_is_fatal(monkeypatch):
    monkeypatch.setattr(requests, "get", lambda url, timeout: fake_response(404))
    with pytest.raises(DataExtractionError):
        extract_data("https://example.com/mission_launches.csv")


def test_extract_url_network_error_is_fatal(monkeypatch):
    def boom(url, timeout):
        raise requests.ConnectionError("unreachable")
    monkeypatch.setattr(requests, "get", boom)
    with pytest.raises(DataExtractionError):
        extract_data("https://example.com/mission_launches.csv")


def test_extract_url_strips_bom(monkeypatch):
    body = "\ufeffDate,Mission_Status\n2020-01-01,Success\n".encode("utf-8")
    monkeypatch.setattr(requests, "get", lambda url, timeout: fake_response(200, body))
    text = extract_data("https://example.com/mission_launches.csv")
    assert text.startswith("Date,")
    dataset = transform_data(text, Settings())
    assert len(dataset.records) == 1
    assert dataset.records[0].success is True
