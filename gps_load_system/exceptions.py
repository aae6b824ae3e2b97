# exceptions.py
"""
Errors raised by the GPS data loader
"""


class GPSLoadError(Exception):
    """Base class for all loader errors."""


class ConfigurationError(GPSLoadError):
    """Settings or credentials could not be acquired."""


class TaxiIdLoadError(GPSLoadError):
    """The set of known taxi ids could not be read."""


class FileIngestionError(GPSLoadError):
    """A data file failed to load; the run stops here."""

    def __init__(self, message, file_path):
        super().__init__(message)
        self.file_path = file_path
