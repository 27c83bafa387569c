import pytest
from sqlalchemy.dialects import postgresql


class FakeResult:
    def __init__(self, rows=None, scalar=None):
        self._rows = list(rows or [])
        self._scalar = scalar

    def mappings(self):
        return self

    def all(self):
        return self._rows

    def scalar(self):
        return self._scalar


class FakeConnection:
    def __init__(self, session):
        self.session = session

    async def exec_driver_sql(self, statement, parameters=None):
        self.session.driver_calls.append((statement, parameters))
        if self.session.error is not None:
            raise self.session.error
        return FakeResult(rows=self.session.rows)


class FakeSession:
    """Stands in for AsyncSession; records what would have been sent to Postgres."""

    def __init__(self):
        self.rows = []
        self.scalar = None
        self.error = None
        self.commit_error = None
        self.executed = []
        self.driver_calls = []
        self.added = []
        self.committed = False
        self.rolled_back = False
        self.next_id = 1

    async def execute(self, statement):
        self.executed.append(statement)
        if self.error is not None:
            raise self.error
        return FakeResult(rows=self.rows, scalar=self.scalar)

    async def connection(self):
        return FakeConnection(self)

    def add(self, obj):
        self.added.append(obj)

    async def commit(self):
        if self.commit_error is not None:
            raise self.commit_error
        self.committed = True

    async def rollback(self):
        self.rolled_back = True

    async def refresh(self, obj):
        if getattr(obj, "id", None) is None:
            obj.id = self.next_id
            self.next_id += 1


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def compile_pg():
    def _compile(statement):
        return statement.compile(dialect=postgresql.dialect())
    return _compile
