# database/operations.py
"""
Database operations for taxi and trajectory loads
"""
from psycopg2.extras import execute_values
from gps_load_system.sql.queries import SELECT_TAXI_IDS, COPY_TAXIS, INSERT_TRAJECTORIES


class DatabaseOperations:
    @staticmethod
    def fetch_taxi_ids(cursor):
        """Fetch every known taxi id"""
        cursor.execute(SELECT_TAXI_IDS)
        return {row[0] for row in cursor.fetchall()}

    @staticmethod
    def copy_taxis(cursor, file_obj):
        """Stream a taxi CSV file into the taxis table"""
        cursor.copy_expert(COPY_TAXIS, file_obj)
        return cursor.rowcount

    @staticmethod
    def insert_trajectories(cursor, rows):
        """Insert one batch of trajectory rows as a single statement"""
        execute_values(cursor, INSERT_TRAJECTORIES, rows, page_size=len(rows))
