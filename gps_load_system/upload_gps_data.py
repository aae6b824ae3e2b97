# upload_gps_data.py
"""
Upload taxi and trajectory CSV files into PostgreSQL

Usage:
    upload-gps-data data/taxis/ --type=taxis --dbname=api_fleet_db --host=localhost --port=5432 --username=api_admin
    upload-gps-data data/trajectories/ --type=trajectories --dbname=api_fleet_db --host=localhost --port=5432 --username=api_admin
"""
import sys

from gps_load_system.config.cli import parse_args, prompt_password, echo_settings
from gps_load_system.processors.bulk_loader import BulkLoader


def main(argv=None):
    settings = parse_args(sys.argv[1:] if argv is None else argv)
    loader = BulkLoader(settings)
    loader.setup_logging()

    settings.password = prompt_password()
    echo_settings(settings)

    return loader.run()


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
