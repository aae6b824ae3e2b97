# processors/file_processor.py
"""
File processing logic for taxi and trajectory CSV files
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import psycopg2

from gps_load_system.config.settings import Config, LOAD_TYPE_TAXIS, LOAD_TYPE_TRAJECTORIES
from gps_load_system.database.operations import DatabaseOperations
from gps_load_system.exceptions import FileIngestionError


# Same literal form as a SQL timestamp: yyyy-[m]m-[d]d hh:mm:ss[.f]
TIMESTAMP_FORMATS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M:%S.%f")


@dataclass
class FileLoadResult:
    file_path: str
    load_type: str
    rows_read: int = 0
    rows_loaded: Optional[int] = 0
    rows_skipped: int = 0
    batches: int = 0


class FileProcessor:
    def __init__(self, batch_size=None):
        self.batch_size = batch_size or Config.BATCH_SIZE

    @staticmethod
    def parse_timestamp(value):
        """Parse a full date and time; partial or free-form dates are rejected"""
        for timestamp_format in TIMESTAMP_FORMATS:
            try:
                return datetime.strptime(value, timestamp_format)
            except ValueError:
                continue
        raise ValueError(f"Timestamp format must be yyyy-mm-dd hh:mm:ss[.f]: {value!r}")

    @classmethod
    def parse_trajectory_fields(cls, fields):
        """Convert the date and coordinate fields of a trajectory line"""
        date, latitude, longitude = fields
        return cls.parse_timestamp(date), float(latitude), float(longitude)

    def copy_taxi_file(self, conn, file_path):
        """
        Bulk copy a taxi CSV file (id,plate) into the taxis table.
        The whole file is one transaction: any bad row or duplicate id
        rolls it back and stops the run.
        """
        db_ops = DatabaseOperations()
        try:
            with open(file_path, 'r') as f, conn.cursor() as cursor:
                rows_loaded = db_ops.copy_taxis(cursor, f)
            conn.commit()
        except (psycopg2.Error, OSError) as e:
            conn.rollback()
            logging.error(f"Error executing COPY for file {file_path}: {e}", exc_info=True)
            raise FileIngestionError(f"Error executing COPY for file: {file_path}", file_path) from e

        if rows_loaded is not None and rows_loaded < 0:
            rows_loaded = None
        message = f"Taxi data copied successfully for file: {file_path}"
        print(message)
        logging.info(message)
        return FileLoadResult(
            file_path=file_path,
            load_type=LOAD_TYPE_TAXIS,
            rows_read=rows_loaded or 0,
            rows_loaded=rows_loaded
        )

    def _flush(self, conn, batch, result):
        if batch:
            with conn.cursor() as cursor:
                DatabaseOperations.insert_trajectories(cursor, batch)
            result.rows_loaded += len(batch)
            result.batches += 1
        conn.commit()
        batch.clear()

    def insert_trajectory_file(self, conn, file_path, valid_taxi_ids):
        """
        Insert trajectory rows (taxi_id,date,latitude,longitude) whose taxi id
        is in valid_taxi_ids. Rows for unknown taxis are dropped. Rows are
        committed every batch_size valid rows and once more at end of file.
        """
        result = FileLoadResult(file_path=file_path, load_type=LOAD_TYPE_TRAJECTORIES)
        batch = []
        line_number = 0

        try:
            with open(file_path, 'r') as f:
                for line in f:
                    line_number += 1
                    result.rows_read += 1
                    fields = line.rstrip('\r\n').split(',')
                    taxi_id = int(fields[0])

                    if taxi_id not in valid_taxi_ids:
                        result.rows_skipped += 1
                        continue

                    batch.append((taxi_id, *self.parse_trajectory_fields(fields[1:])))

                    if len(batch) >= self.batch_size:
                        self._flush(conn, batch, result)
                        message = f"Executed batch {result.batches} for file: {file_path}"
                        print(message)
                        logging.info(message)

            self._flush(conn, batch, result)
        except (psycopg2.Error, OSError, ValueError, OverflowError) as e:
            conn.rollback()
            logging.error(f"Error loading line {line_number} of {file_path}: {e}", exc_info=True)
            raise FileIngestionError(
                f"Error inserting trajectories at line {line_number} for file: {file_path}", file_path
            ) from e

        message = f"Trajectories data inserted successfully for file: {file_path}"
        print(message)
        logging.info(message)
        return result
