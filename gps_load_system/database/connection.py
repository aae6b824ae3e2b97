# database/connection.py
"""
Database connection management
"""
import psycopg2
import logging
from sqlalchemy.engine import URL


class DatabaseManager:
    def __init__(self, settings):
        self.settings = settings

    def connection_url(self):
        """Build the postgresql:// URL for the configured target"""
        return URL.create(
            "postgresql",
            username=self.settings.username,
            password=self.settings.password,
            host=self.settings.host,
            port=self.settings.port,
            database=self.settings.dbname
        )

    def describe_target(self):
        """Connection URL with the password hidden, safe for logs"""
        return self.connection_url().render_as_string(hide_password=True)

    def get_connection(self):
        """Create a connection to the PostgreSQL database"""
        logging.info(f"Connecting to {self.describe_target()}")
        try:
            conn = psycopg2.connect(
                dbname=self.settings.dbname,
                user=self.settings.username,
                password=self.settings.password,
                host=self.settings.host,
                port=self.settings.port
            )
            return conn
        except psycopg2.Error as e:
            logging.error(f"Database connection error: {e}")
            raise
