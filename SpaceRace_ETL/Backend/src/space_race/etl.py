import logging
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Any, List, Tuple
import os

from .config import Settings
from .csv_reader import parse_csv
from .derivers import MissionRecord, derive_mission
from .charts import build_all_charts
from .stats import summary_statistics, insights

from .exceptions_file import (
    DataExtractionError,
    DataTransformationError,
    DataLoadError,
)

from .utils import (
    read_text_source,
    write_json_file,
    write_csv_file
)
from .storyteller import write_insights

# Logging
logger = logging.getLogger(__name__)
logger.setLevel(logging.DEBUG)


@dataclass(frozen=True)
class ProcessedDataset:
    """Missions derived from one load. Never mutated after construction."""
    records: Tuple[MissionRecord, ...]
    rejects: Tuple[Dict[str, str], ...]
    raw_count: int

    @property
    def dropped(self) -> int:
        return self.raw_count - len(self.records)


def extract_data(source: str) -> str:
    text = read_text_source(source)
    if text is None:
        raise DataExtractionError(f"Could not load CSV from {source}")
    logger.info(f"Read {len(text)} characters from {source}")
    return text


def apply_quality_gates(rows: List[Dict[str, str]], settings: Settings) -> Tuple[list, list]:
    clean, rejects = [], []
    for row in rows:
        record, reason = derive_mission(row, settings)
        if record is not None:
            clean.append(record)
        else:
            reject_row = dict(row)
            reject_row["reject_reason"] = reason
            rejects.append(reject_row)

    if rejects:
        reasons = Counter(r["reject_reason"] for r in rejects)
        logger.warning(f"[REJECTED] {len(rejects)} rows dropped: {dict(reasons)}")
    return clean, rejects


def transform_data(csv_text: str, settings: Settings) -> ProcessedDataset:
    try:
        rows = parse_csv(csv_text)
        logger.info(f"Loaded {len(rows)} missions from CSV")
        clean, rejects = apply_quality_gates(rows, settings)
    except Exception as e:
        logger.error(f"Transformation failed: {e}")
        raise DataTransformationError(e)

    logger.info(f"Processed {len(clean)} records")
    if not clean:
        logger.warning("No mission survived processing; dashboard figures will be empty")
    return ProcessedDataset(records=tuple(clean), rejects=tuple(rejects), raw_count=len(rows))


def load_dataset(settings: Settings) -> ProcessedDataset:
    """Extract and transform in one go; the unit of work for every surface."""
    return transform_data(extract_data(settings.csv_source), settings)


def summarize_quality(dataset: ProcessedDataset) -> dict:
    reasons = Counter(r.get("reject_reason", "") for r in dataset.rejects)
    return {
        "raw_count": dataset.raw_count,
        "clean_count": len(dataset.records),
        "reject_count": dataset.dropped,
        "reject_reasons": dict(reasons),
    }


def build_report(dataset: ProcessedDataset, settings: Settings) -> Dict[str, Any]:
    records = dataset.records
    return {
        "summary": summary_statistics(records),
        "charts": {k: c.to_dict() for k, c in build_all_charts(records, settings).items()},
        "insights": insights(records),
    }


def _fieldnames(rows: List[Dict[str, Any]]) -> List[str]:
    names = []
    for row in rows:
        for key in row:
            if key not in names:
                names.append(key)
    return names


def load_all_data(dataset: ProcessedDataset, settings: Settings, output_dir: str):
    try:
        clean = [r.to_row() for r in dataset.records]
        output_file = os.path.join(output_dir, "clean", "missions.csv")
        write_csv_file(output_file, clean, _fieldnames(clean))
        logger.info(f"Loaded {len(clean)} clean records to {output_file}")

        if dataset.rejects:
            rejects = list(dataset.rejects)
            reject_file = os.path.join(output_dir, "out", "rejects", "missions.csv")
            write_csv_file(reject_file, rejects, _fieldnames(rejects))
            logger.info(f"Loaded {len(rejects)} rejected records to {reject_file}")

        write_json_file(os.path.join(output_dir, "out", "quality_report.json"), summarize_quality(dataset))

        report = build_report(dataset, settings)
        write_json_file(os.path.join(output_dir, "out", "dashboard.json"), report)
        story_path = write_insights(report["insights"], output_dir)
        logger.info(f"Wrote insights to {story_path}")

    except OSError as e:
        logger.error(f"Load failed: {e}")
        raise DataLoadError(e)


def etl_pipeline(settings: Settings, output_dir: str = None) -> ProcessedDataset:
    output_dir = output_dir or settings.output_dir
    dataset = load_dataset(settings)
    load_all_data(dataset, settings, output_dir)
    return dataset
