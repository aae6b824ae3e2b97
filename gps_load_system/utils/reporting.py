# utils/reporting.py
"""
Reporting utilities for load run tracking
"""
import os
import logging
from dataclasses import asdict
from datetime import datetime

import pandas as pd

REPORT_COLUMNS = ["file_path", "load_type", "rows_read", "rows_loaded", "rows_skipped", "batches"]


class ReportGenerator:
    @staticmethod
    def generate_load_report(results, report_dir):
        """Write one CSV row per loaded file and return the report path"""
        os.makedirs(report_dir, exist_ok=True)

        report_time = datetime.now().strftime('%Y%m%d_%H%M%S')
        report_file = os.path.join(report_dir, f"gps_load_report_{report_time}.csv")

        df = pd.DataFrame([asdict(result) for result in results], columns=REPORT_COLUMNS)
        df.to_csv(report_file, index=False)

        logging.info(f"Generated load report: {report_file}")
        return report_file
