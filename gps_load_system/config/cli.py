# config/cli.py
"""
Command line settings and password prompt
"""
import sys
import getpass
import argparse
import logging
from dataclasses import dataclass
from typing import Optional

from gps_load_system.config.settings import Config
from gps_load_system.exceptions import ConfigurationError


@dataclass
class LoadSettings:
    """Everything one run needs: where the files are and where they go."""
    directory: Optional[str] = None
    load_type: Optional[str] = None
    dbname: Optional[str] = None
    host: Optional[str] = None
    port: Optional[int] = None
    username: Optional[str] = None
    password: Optional[str] = None


def build_parser():
    parser = argparse.ArgumentParser(
        description='Upload taxi and trajectory CSV files into PostgreSQL. Any other argument is the directory holding the CSV files.',
        allow_abbrev=False
    )
    parser.add_argument('--type', dest='load_type', help='Data type to load: taxis or trajectories')
    parser.add_argument('--dbname', help='PostgreSQL database name')
    parser.add_argument('--host', help='PostgreSQL host')
    parser.add_argument('--port', type=int, help='PostgreSQL port')
    parser.add_argument('--username', help='PostgreSQL user name')
    return parser


def parse_args(tokens):
    """
    Parse command line tokens into LoadSettings.
    Values are not validated; missing flags stay None. Any token that is
    not a known flag is taken as the directory path, the last one winning.
    """
    args, extras = build_parser().parse_known_args(tokens)
    directory = extras[-1] if extras else None
    return LoadSettings(
        directory=directory,
        load_type=args.load_type,
        dbname=args.dbname,
        host=args.host,
        port=args.port,
        username=args.username
    )


def prompt_password():
    """Read the database password from the terminal without echoing it"""
    if not sys.stdin.isatty():
        raise ConfigurationError("Password can only be entered from an interactive terminal")
    return getpass.getpass(Config.PASSWORD_PROMPT)


def echo_settings(settings):
    """Print the parsed settings; the password only as a placeholder"""
    password_display = Config.PASSWORD_MASK if settings.password else "Not provided"
    lines = [
        f"File path: {settings.directory}",
        f"Type: {settings.load_type}",
        f"Database name: {settings.dbname}",
        f"Host: {settings.host}",
        f"Port: {settings.port}",
        f"Username: {settings.username}",
        f"Password: {password_display}",
    ]
    for line in lines:
        print(line)
        logging.info(line)
