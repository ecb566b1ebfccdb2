import logging
import sys

from space_race.config import load_settings
from space_race.etl import etl_pipeline
from space_race.exceptions_file import ConfigError, SpaceRaceError


def main():
    try:
        settings = load_settings()
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logging.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.basicConfig(level=settings.log_level)
    try:
        logging.info(f"Starting ETL process for {settings.csv_source} ...")
        dataset = etl_pipeline(settings)
    except SpaceRaceError as e:
        logging.error(f"ETL failed: {e}")
        sys.exit(1)

    logging.info(
        f"ETL process completed successfully: {len(dataset.records)} missions, "
        f"{dataset.dropped} rows dropped, reports in {settings.output_dir}"
    )


if __name__ == "__main__":
    main()
