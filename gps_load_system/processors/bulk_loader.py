# processors/bulk_loader.py
"""
Main bulk loader class that orchestrates the loading process
"""
import os
import logging

import psycopg2

from gps_load_system.config.settings import Config, LOAD_TYPE_TAXIS, LOAD_TYPE_TRAJECTORIES
from gps_load_system.database.connection import DatabaseManager
from gps_load_system.database.operations import DatabaseOperations
from gps_load_system.exceptions import TaxiIdLoadError
from gps_load_system.processors.file_processor import FileProcessor
from gps_load_system.utils.file_utils import FileUtils
from gps_load_system.utils.reporting import ReportGenerator


def _report(message, level=logging.INFO):
    print(message)
    logging.log(level, message)


class BulkLoader:
    def __init__(self, settings, file_processor=None):
        self.settings = settings
        self.db_manager = DatabaseManager(settings)
        self.file_processor = file_processor or FileProcessor()
        self.file_utils = FileUtils()

    def setup_logging(self):
        """Setup logging configuration"""
        logging.basicConfig(
            filename=Config.LOG_FILE_PATH,
            level=getattr(logging, Config.LOG_LEVEL.upper()),
            format=Config.LOG_FORMAT
        )

    def load_valid_taxi_ids(self, conn):
        """Snapshot every taxi id in the database; it is not refreshed during the run"""
        try:
            with conn.cursor() as cursor:
                taxi_ids = DatabaseOperations.fetch_taxi_ids(cursor)
        except psycopg2.Error as e:
            logging.error(f"Error executing SELECT for taxi ids: {e}", exc_info=True)
            raise TaxiIdLoadError("Error executing SELECT for taxi ids.") from e

        _report(f"Loaded total of taxi IDs: {len(taxi_ids)}")
        return taxi_ids

    def process_file(self, conn, file_path, load_type, valid_taxi_ids):
        """Dispatch one file to the loader for load_type; None if the type is unknown"""
        if load_type == LOAD_TYPE_TAXIS:
            return self.file_processor.copy_taxi_file(conn, file_path)
        if load_type == LOAD_TYPE_TRAJECTORIES:
            return self.file_processor.insert_trajectory_file(conn, file_path, valid_taxi_ids)
        return None

    def process_directory(self, conn, directory, load_type, valid_taxi_ids):
        """Load every file directly inside directory, in listing order"""
        if not self.file_utils.is_directory(directory):
            _report("Invalid directory path.", logging.ERROR)
            return []

        if load_type not in (LOAD_TYPE_TAXIS, LOAD_TYPE_TRAJECTORIES):
            # Files are still walked, nothing is loaded.
            logging.warning(f"Unknown load type {load_type!r}; no files will be loaded")

        files = self.file_utils.list_data_files(directory)
        results = []
        for index, file_path in enumerate(files, start=1):
            _report(f"Processing file: {os.path.basename(file_path)} ({index}/{len(files)})")
            result = self.process_file(conn, file_path, load_type, valid_taxi_ids)
            if result is not None:
                results.append(result)
        return results

    def report_results(self, results):
        total_records = sum(result.rows_loaded or 0 for result in results)
        _report(f"Load complete. Processed {len(results)} files, {total_records} total records")

        if Config.REPORT_DIR:
            ReportGenerator.generate_load_report(results, Config.REPORT_DIR)

    def run(self):
        """Connect, load the taxi id snapshot, then load the directory. Returns an exit code."""
        try:
            conn = self.db_manager.get_connection()
        except psycopg2.Error as e:
            _report("Failed to connect to the PostgreSQL server.", logging.ERROR)
            _report(str(e).strip(), logging.ERROR)
            return 1
        _report("Connected to the PostgreSQL server successfully!")

        try:
            valid_taxi_ids = self.load_valid_taxi_ids(conn)
            results = self.process_directory(
                conn, self.settings.directory, self.settings.load_type, valid_taxi_ids
            )
        finally:
            conn.close()

        self.report_results(results)
        return 0
