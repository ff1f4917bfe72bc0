"""Pytest configuration and shared fixtures."""

import pytest

from dbdatagen.backends import StagingBackend
from dbdatagen.config import Settings
from dbdatagen.generators import RandomizerCatalog, ValueGenerator


@pytest.fixture
def catalog() -> RandomizerCatalog:
    """Seeded catalog so failures are reproducible."""
    return RandomizerCatalog("en", seed=1234)


@pytest.fixture
def generator(catalog: RandomizerCatalog) -> ValueGenerator:
    return ValueGenerator(catalog)


@pytest.fixture
def settings(monkeypatch) -> Settings:
    """Default settings, isolated from DBDATAGEN_* variables of the host."""
    for name in (
        "DBDATAGEN_CONNECTION_STRING",
        "DBDATAGEN_LOCALE",
        "DBDATAGEN_SEED",
        "DBDATAGEN_MODULUS_FACTOR",
        "DBDATAGEN_BATCH_SIZE",
        "DBDATAGEN_MAX_UNIQUE_RETRIES",
        "DBDATAGEN_ON_UNSUPPORTED",
        "DBDATAGEN_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return Settings(seed=42)


@pytest.fixture
def staging() -> StagingBackend:
    return StagingBackend()


class FakeCursor:
    """DB-API cursor that records statements and replays canned results."""

    def __init__(self, conn: "FakeConnection"):
        self.conn = conn
        self._result: list[tuple] = []

    def execute(self, sql: str, params=()):
        self.conn.executed.append((sql, tuple(params)))
        if self.conn.fail_on and self.conn.fail_on in sql:
            raise RuntimeError(f"statement failed: {self.conn.fail_on}")
        self._result = list(self.conn.results.pop(0)) if self.conn.results else []

    def fetchone(self):
        return self._result[0] if self._result else None

    def fetchall(self):
        return list(self._result)

    def close(self):
        self.conn.closed_cursors += 1


class FakeConnection:
    """
    DB-API connection stand-in.

    `results` is a queue of row lists, one per execute() call; `fail_on`
    makes any statement containing that text raise.
    """

    def __init__(self, results: list[list[tuple]] | None = None, fail_on: str | None = None):
        self.results = list(results or [])
        self.fail_on = fail_on
        self.executed: list[tuple[str, tuple]] = []
        self.commits = 0
        self.rollbacks = 0
        self.closed_cursors = 0

    def cursor(self) -> FakeCursor:
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        pass


@pytest.fixture
def fake_conn_factory():
    return FakeConnection
