"""
Shared test configuration.
Provides an in-memory stand-in for a psycopg2 connection that keeps
committed rows apart from rows still pending in the open transaction.
"""

import pytest

from gps_load_system.config.settings import Config
from gps_load_system.database import operations as operations_module


class FakeCursor:
    def __init__(self, conn):
        self.conn = conn
        self.rowcount = -1

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def execute(self, sql, params=None):
        self.conn.executed.append(sql.strip())
        if self.conn.select_error is not None:
            raise self.conn.select_error

    def fetchall(self):
        return [(taxi_id,) for taxi_id in self.conn.taxi_ids]

    def copy_expert(self, sql, file_obj):
        lines = file_obj.read().splitlines()
        self.conn.executed.append(sql.strip())
        if self.conn.copy_error is not None:
            raise self.conn.copy_error
        self.conn.pending.extend(tuple(line.split(",")) for line in lines)
        self.rowcount = len(lines)


class FakeConnection:
    def __init__(self, taxi_ids=(), select_error=None, copy_error=None):
        self.taxi_ids = list(taxi_ids)
        self.select_error = select_error
        self.copy_error = copy_error
        self.executed = []
        self.pending = []
        self.committed = []
        self.batch_sizes = []
        self.commits = 0
        self.rollbacks = 0
        self.closed = False

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.committed.extend(self.pending)
        self.pending = []
        self.commits += 1

    def rollback(self):
        self.pending = []
        self.rollbacks += 1

    def close(self):
        self.closed = True


def fake_execute_values(cursor, sql, rows, page_size=100):
    cursor.conn.executed.append(sql.strip())
    cursor.conn.batch_sizes.append(len(rows))
    cursor.conn.pending.extend(rows)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep logs and reports out of the working directory."""

    monkeypatch.setattr(Config, "LOG_FILE_PATH", str(tmp_path / "upload_gps_data.log"))
    monkeypatch.setattr(Config, "REPORT_DIR", None)
    monkeypatch.setattr(Config, "BATCH_SIZE", 1000)


@pytest.fixture
def fake_execute(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(operations_module, "execute_values", fake_execute_values)
    return fake_execute_values


@pytest.fixture
def make_connection():
    return FakeConnection


@pytest.fixture
def write_csv(tmp_path):
    def _write(name, lines, directory=None):
        target_dir = directory or tmp_path
        path = target_dir / name
        path.write_text("".join(f"{line}\n" for line in lines))
        return str(path)

    return _write
