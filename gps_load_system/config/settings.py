# config/settings.py
"""
Configuration settings for the GPS data load system
"""
import os
from dotenv import load_dotenv

load_dotenv()

LOAD_TYPE_TAXIS = "taxis"
LOAD_TYPE_TRAJECTORIES = "trajectories"


class Config:
    # Processing settings
    BATCH_SIZE = int(os.getenv("DEFAULT_BATCH_SIZE", 1000))

    # File paths
    LOG_FILE_PATH = os.getenv("LOAD_LOG_FILE_PATH", "upload_gps_data.log")
    REPORT_DIR = os.getenv("LOAD_REPORT_DIR")

    # Logging configuration
    LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Console
    PASSWORD_PROMPT = "Enter password: "
    PASSWORD_MASK = "*******"
