# utils/file_utils.py
"""
File utility functions
"""
import os


class FileUtils:
    @staticmethod
    def is_directory(path):
        return path is not None and os.path.isdir(path)

    @staticmethod
    def list_data_files(directory):
        """List regular files directly inside directory, in listing order"""
        paths = (os.path.join(directory, name) for name in os.listdir(directory))
        return [path for path in paths if os.path.isfile(path)]
